"""
Field Normalizers

Convert single raw tag values (as printed by exiftool, or raw maker-note
integers) into canonical Recipe field values.
"""

import re
from typing import Optional, Tuple, Union

from ..errors import MalformedValueError, TypeMismatchError, UnrecognizedEnumError

Number = Union[int, float]

WHITE_BALANCE_PATTERN = re.compile(r"Red ([-+]?[0-9]+), Blue ([-+]?[0-9]+)")
INTEGER_PATTERN = re.compile(r"[-+]?[0-9]+")

# Fine-tune ticks per white balance shift step
WHITE_BALANCE_STEP = 20

# Maker-note clarity is stored in thousandths
CLARITY_SCALE = 1000

SHARPNESS_LEVELS = {
    "Softest": -4,
    "Very Soft": -3,
    "Soft": -2,
    "Medium Soft": -1,
    "Normal": 0,
    "Medium Hard": 1,
    "Hard": 2,
    "Very Hard": 3,
    "Hardest": 4,
}

GRAIN_EFFECT_SIZES = {
    0: "Off",
    16: "Small",
    32: "Large",
}

# Saturation labels that name a monochrome film simulation instead of a level
MONOCHROME_MARKERS = ("Acros", "B&W", "Sepia")


def truncating_div(value: int, divisor: int) -> int:
    """Integer division rounding toward zero (-30 / 20 == -1)"""
    quotient = abs(value) // abs(divisor)
    return -quotient if (value < 0) != (divisor < 0) else quotient


def parse_white_balance_fine_tune(text: str) -> Tuple[int, int]:
    """
    Parse a white balance shift like "Red +40, Blue -20".

    Args:
        text: Fine-tune text, empty when no shift is applied

    Returns:
        (red, blue) in shift steps

    Raises:
        MalformedValueError: If the text is not a red/blue pair
    """
    if not text:
        return 0, 0

    match = WHITE_BALANCE_PATTERN.search(text)
    if match is None:
        raise MalformedValueError("expected 'Red <n>, Blue <n>'", raw_value=text)

    red, blue = int(match.group(1)), int(match.group(2))
    return truncating_div(red, WHITE_BALANCE_STEP), truncating_div(blue, WHITE_BALANCE_STEP)


def parse_tone(text: str) -> int:
    """
    Parse a tone level such as "+2 (hard)", "-1 (medium soft)" or "Normal".

    Used for highlight, shadow, noise reduction and textual clarity values.

    Raises:
        MalformedValueError: If no integer is present
    """
    if not text or text == "Normal":
        return 0

    match = INTEGER_PATTERN.search(text)
    if match is None:
        raise MalformedValueError("expected an integer level", raw_value=text)
    return int(match.group(0))


def parse_saturation(text: str) -> Tuple[int, Optional[str]]:
    """
    Parse the Saturation tag.

    Monochrome film simulations are reported through Saturation rather
    than FilmMode, so "Acros+R Filter" becomes color 0 and film simulation
    "Acros+R Filter".

    Returns:
        (color, film_simulation or None)
    """
    if any(marker in text for marker in MONOCHROME_MARKERS):
        return 0, text
    return parse_tone(text), None


def parse_sharpness(text: str) -> int:
    """
    Map a sharpness label to -4..+4.

    Raises:
        UnrecognizedEnumError: If the label is not one of the nine levels
    """
    try:
        return SHARPNESS_LEVELS[text]
    except KeyError:
        raise UnrecognizedEnumError("unknown sharpness level", raw_value=text) from None


def format_dynamic_range(value: Union[Number, str]) -> str:
    """
    Format DevelopmentDynamicRange (100.0, 200.0, 400.0) as "100", "200", "400".

    Raises:
        MalformedValueError: If a text value is not numeric
    """
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            raise MalformedValueError("expected a numeric dynamic range", raw_value=value) from None
    return f"{value:.0f}"


def decode_grain_effect_size(code: Number) -> str:
    """
    Map a maker-note grain effect size code to its label.

    Raises:
        UnrecognizedEnumError: For codes other than 0, 16 and 32
    """
    try:
        return GRAIN_EFFECT_SIZES[int(code)]
    except KeyError:
        raise UnrecognizedEnumError("unknown grain effect size code", raw_value=code) from None


def decode_clarity(raw: Number) -> int:
    """Scale maker-note clarity (thousandths) to -5..+5"""
    raw = int(raw)
    if raw == 0:
        return 0
    return truncating_div(raw, CLARITY_SCALE)


def parse_color_temperature(value: Union[Number, str]) -> int:
    """
    Parse a Kelvin white balance temperature ("5200", "5200K" or 5200).

    Raises:
        MalformedValueError: If a text value holds no integer
    """
    if isinstance(value, str):
        match = INTEGER_PATTERN.search(value)
        if match is None:
            raise MalformedValueError("expected a colour temperature", raw_value=value)
        return int(match.group(0))
    return int(value)


def require_text(value) -> str:
    """
    Return value if it is a string.

    Raises:
        TypeMismatchError: For any other type
    """
    if not isinstance(value, str):
        raise TypeMismatchError("expected text", raw_value=value)
    return value
