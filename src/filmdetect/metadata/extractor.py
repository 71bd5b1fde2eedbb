"""
Recipe Extraction Module

Builds a Recipe from a photograph's metadata tags, with the Fujifilm maker
note as a fallback source for clarity and grain effect size.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Protocol

from ..errors import ExtractionError, TypeMismatchError
from ..models.recipe import Recipe
from .exiftool_source import ExifToolSource, TagValue, strip_group
from .makernote import FujifilmMakerNoteReader
from .normalizers import (
    decode_clarity,
    decode_grain_effect_size,
    format_dynamic_range,
    parse_color_temperature,
    parse_saturation,
    parse_sharpness,
    parse_tone,
    parse_white_balance_fine_tune,
    require_text,
)

logger = logging.getLogger(__name__)

# Tags that are never interpreted (exiftool reports keyword lists here)
IGNORED_TAGS = {"Subject"}

KELVIN = "Kelvin"


class MetadataSource(Protocol):
    def read_tags(self, image_path: Path) -> Dict[str, TagValue]: ...


class MakerNoteSource(Protocol):
    def read(self, image_path: Path) -> Dict[str, int]: ...


def _text(attr: str) -> Callable[[Any], Dict[str, Any]]:
    return lambda value: {attr: require_text(value)}


def _level(attr: str) -> Callable[[Any], Dict[str, Any]]:
    def handler(value):
        # Numbers are already print-converted levels
        if isinstance(value, (int, float)):
            return {attr: int(value)}
        return {attr: parse_tone(value)}
    return handler


def _grain_effect_size(value) -> Dict[str, Any]:
    if isinstance(value, str):
        return {"grain_effect_size": value}
    return {"grain_effect_size": decode_grain_effect_size(value)}


def _white_balance_fine_tune(value) -> Dict[str, Any]:
    red, blue = parse_white_balance_fine_tune(require_text(value))
    return {"white_balance_red": red, "white_balance_blue": blue}


def _saturation(value) -> Dict[str, Any]:
    if isinstance(value, (int, float)):
        return {"color": int(value)}
    color, monochrome = parse_saturation(value)
    if monochrome is None:
        return {"color": color}
    return {"color": color, "monochrome": monochrome}


# exiftool tag name -> handler returning Recipe attribute updates
TAG_HANDLERS: Dict[str, Callable[[Any], Dict[str, Any]]] = {
    "FilmMode": _text("film_simulation"),
    "GrainEffect": _text("grain_effect_roughness"),
    "GrainEffectRoughness": _text("grain_effect_roughness"),
    "GrainEffectSize": _grain_effect_size,
    "ColorChromeEffect": _text("color_chrome_effect"),
    "ColorChromeFXBlue": _text("color_chrome_fx_blue"),
    "WhiteBalance": _text("white_balance_mode"),
    "ColorTemperature": lambda value: {"white_balance_temperature": parse_color_temperature(value)},
    "WhiteBalanceFineTune": _white_balance_fine_tune,
    "DevelopmentDynamicRange": lambda value: {"dynamic_range": format_dynamic_range(value)},
    "HighlightTone": _level("highlights"),
    "ShadowTone": _level("shadows"),
    "Saturation": _saturation,
    "Sharpness": lambda value: {"sharpness": parse_sharpness(require_text(value))},
    "NoiseReduction": _level("noise_reduction"),
    "Clarity": _level("clarity"),
}


class RecipeExtractor:
    """Extracts a Recipe from image metadata"""

    def __init__(
        self,
        metadata_source: Optional[MetadataSource] = None,
        maker_note_source: Optional[MakerNoteSource] = None,
    ):
        """
        Args:
            metadata_source: Tag reader (default: exiftool)
            maker_note_source: Fallback for clarity and grain size
                               (default: Fujifilm maker-note reader)
        """
        self.metadata_source = metadata_source or ExifToolSource()
        self.maker_note_source = maker_note_source or FujifilmMakerNoteReader()

    def extract(self, image_path: Path) -> Recipe:
        """
        Extract the recipe used for a photograph.

        Args:
            image_path: Path to image file

        Returns:
            Recipe with empty identity fields

        Raises:
            FilmDetectError: If metadata cannot be read or a value is invalid
        """
        tags = self.metadata_source.read_tags(image_path)
        return self.extract_from_tags(
            tags,
            maker_note=lambda: self.maker_note_source.read(image_path),
        )

    @staticmethod
    def extract_from_tags(
        tags: Mapping[str, Any],
        maker_note: Optional[Callable[[], Mapping[str, int]]] = None,
    ) -> Recipe:
        """
        Build a Recipe from tag values.

        Unknown tags are ignored. Dynamic range defaults to "Auto" because
        cameras omit DevelopmentDynamicRange when it was chosen automatically.

        Args:
            tags: Tag name -> raw value (string or number)
            maker_note: Called only when clarity or grain effect size is
                        missing from tags; returns raw maker-note fields

        Returns:
            Recipe with empty identity fields

        Raises:
            TypeMismatchError: If a tag value is neither text nor a number
            MalformedValueError: If a value does not match its format
            UnrecognizedEnumError: If a value is not a known label or code
            UnsupportedSourceError: If the maker note isn't from Fujifilm
        """
        values: Dict[str, Any] = {}

        for key, value in tags.items():
            tag = strip_group(key)
            if tag in IGNORED_TAGS:
                continue

            if isinstance(value, bool) or not isinstance(value, (str, int, float)):
                raise TypeMismatchError("Field value isn't a string or number", field=tag, raw_value=value)

            handler = TAG_HANDLERS.get(tag)
            if handler is None:
                continue

            try:
                updates = handler(value)
            except ExtractionError as e:
                e.field = tag
                raise

            logger.debug("%s = %r -> %s", tag, value, updates)
            values.update(updates)

        # Monochrome simulations are reported via Saturation, not FilmMode
        monochrome = values.pop("monochrome", None)
        if monochrome is not None:
            values["film_simulation"] = monochrome

        # Only meaningful for Kelvin white balance
        if values.get("white_balance_mode") != KELVIN:
            values.pop("white_balance_temperature", None)

        if maker_note is not None and ("clarity" not in values or "grain_effect_size" not in values):
            RecipeExtractor._apply_maker_note(values, maker_note())

        return Recipe(**values)

    @staticmethod
    def _apply_maker_note(values: Dict[str, Any], raw: Mapping[str, int]) -> None:
        """Fill clarity and grain effect size from raw maker-note fields"""
        if "clarity" not in values and "Clarity" in raw:
            values["clarity"] = decode_clarity(raw["Clarity"])

        if "grain_effect_size" not in values and "GrainEffectSize" in raw:
            try:
                values["grain_effect_size"] = decode_grain_effect_size(raw["GrainEffectSize"])
            except ExtractionError as e:
                e.field = "GrainEffectSize"
                raise
