"""
Recipe Model - canonical record of camera image-processing parameters

The same shape is produced from a photograph's metadata (the input) and
loaded from the recipe library (the candidates).
"""

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Recipe:
    """
    A named set of Fujifilm in-camera processing settings.

    The first three attributes identify the recipe and are never compared.
    The remaining attributes are the scored fields, listed in SCORED_FIELDS
    in the same order.
    """
    # Identity (not compared)
    name: str = ""
    author: str = ""
    url: str = ""

    # Scored fields
    film_simulation: str = ""
    grain_effect_size: str = ""
    grain_effect_roughness: str = ""
    color_chrome_effect: str = ""
    color_chrome_fx_blue: str = ""
    white_balance_mode: str = ""
    white_balance_temperature: int = 0  # Kelvin, only for "Kelvin" mode
    white_balance_red: int = 0
    white_balance_blue: int = 0
    dynamic_range: str = "Auto"  # "100", "200", "400" or "Auto"
    highlights: int = 0
    shadows: int = 0
    color: int = 0
    sharpness: int = 0  # -4 (Softest) .. +4 (Hardest)
    noise_reduction: int = 0
    clarity: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a library document (JSON keys as used by recipe files).

        Returns:
            Dictionary suitable for JSON serialization
        """
        data = asdict(self)
        return {JSON_KEYS.get(key, key): value for key, value in data.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Recipe':
        """
        Create Recipe from a library document.

        Keys are matched case-insensitively against both the JSON keys and
        the attribute names. Unknown keys are ignored, missing keys keep
        their defaults.

        Args:
            data: Decoded JSON object

        Returns:
            Recipe object

        Raises:
            TypeError: If a value has the wrong type for its field
        """
        lookup = {}
        for attr in FIELD_TYPES:
            lookup[attr.lower()] = attr
            lookup[JSON_KEYS.get(attr, attr).lower()] = attr

        values = {}
        for key, value in data.items():
            attr = lookup.get(str(key).lower())
            if attr is None:
                continue
            values[attr] = _coerce(attr, value)

        return cls(**values)

    @property
    def display_name(self) -> str:
        """Get name to display in reports"""
        return self.name or "(unnamed recipe)"


# Attribute name -> key used in recipe library documents
JSON_KEYS: Dict[str, str] = {
    "white_balance_red": "white_balance_r",
    "white_balance_blue": "white_balance_b",
    "highlights": "tone_curve_highlights",
    "shadows": "tone_curve_shadows",
}

IDENTITY_FIELDS: Tuple[str, ...] = ("name", "author", "url")

# (attribute, label) for every compared field, in declaration order
SCORED_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("film_simulation", "Film Simulation"),
    ("grain_effect_size", "Grain Effect Size"),
    ("grain_effect_roughness", "Grain Effect Roughness"),
    ("color_chrome_effect", "Color Chrome Effect"),
    ("color_chrome_fx_blue", "Color Chrome FX Blue"),
    ("white_balance_mode", "White Balance"),
    ("white_balance_temperature", "White Balance Temperature"),
    ("white_balance_red", "White Balance Red"),
    ("white_balance_blue", "White Balance Blue"),
    ("dynamic_range", "Dynamic Range"),
    ("highlights", "Highlights"),
    ("shadows", "Shadows"),
    ("color", "Color"),
    ("sharpness", "Sharpness"),
    ("noise_reduction", "Noise Reduction"),
    ("clarity", "Clarity"),
)

FULL_SCORE = 16

FIELD_TYPES: Dict[str, type] = {f.name: f.type for f in fields(Recipe)}

# Recipe shape, SCORED_FIELDS and FULL_SCORE must change together
if tuple(FIELD_TYPES) != IDENTITY_FIELDS + tuple(attr for attr, _ in SCORED_FIELDS):
    raise RuntimeError("SCORED_FIELDS does not follow the Recipe fields")
if len(SCORED_FIELDS) != FULL_SCORE:
    raise RuntimeError(f"Expected {FULL_SCORE} scored fields, got {len(SCORED_FIELDS)}")


def _coerce(attr: str, value: Any) -> Any:
    """Check a library value against the field type"""
    expected = FIELD_TYPES[attr]

    if value is None:
        return Recipe.__dataclass_fields__[attr].default

    if expected is int:
        if isinstance(value, bool):
            raise TypeError(f"{attr} must be an integer, got {value!r}")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        raise TypeError(f"{attr} must be an integer, got {value!r}")

    if attr == "dynamic_range" and isinstance(value, (int, float)) and not isinstance(value, bool):
        return f"{value:.0f}"

    if not isinstance(value, str):
        raise TypeError(f"{attr} must be a string, got {value!r}")
    return value
