"""
ExifTool Metadata Source

Reads the recipe-related tags from an image with exiftool (via PyExifTool).
Values are print-converted ("+1 (medium hard)", "Red +40, Blue -20"),
which is the form the normalizers parse.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from exiftool import ExifToolHelper
from exiftool.exceptions import ExifToolException

from ..errors import SourceReadError

logger = logging.getLogger(__name__)

TagValue = Union[str, int, float]

TAGS: List[str] = [
    "FilmMode",
    "GrainEffect",
    "GrainEffectRoughness",
    "GrainEffectSize",
    "ColorChromeEffect",
    "ColorChromeFXBlue",
    "WhiteBalance",
    "ColorTemperature",
    "WhiteBalanceFineTune",
    "DevelopmentDynamicRange",
    "HighlightTone",
    "ShadowTone",
    "Saturation",
    "Sharpness",
    "NoiseReduction",
    "Clarity",
]


def strip_group(tag: str) -> str:
    """Drop the exiftool group prefix (MakerNotes:FilmMode -> FilmMode)"""
    return tag.rsplit(":", 1)[-1]


class ExifToolSource:
    """Metadata source backed by the exiftool executable"""

    def __init__(self, executable: Optional[str] = None):
        self.executable = executable

    def read_tags(self, image_path: Path) -> Dict[str, TagValue]:
        """
        Read recipe tags from an image.

        Args:
            image_path: Path to image file

        Returns:
            Mapping of tag name (group prefix removed) -> value

        Raises:
            SourceReadError: If exiftool is missing or cannot read the file
        """
        # "-G" without "-n" keeps exiftool's print conversion
        kwargs = {"common_args": ["-G"]}
        if self.executable:
            kwargs["executable"] = self.executable

        try:
            with ExifToolHelper(**kwargs) as et:
                results = et.get_tags(str(image_path), tags=TAGS)
        except (ExifToolException, OSError) as e:
            raise SourceReadError(f"exiftool failed on {image_path}: {e}") from e

        if not results:
            raise SourceReadError(f"exiftool returned no metadata for {image_path}")

        tags = {}
        for key, value in results[0].items():
            if key == "SourceFile":
                continue
            tags[strip_group(key)] = value

        logger.debug("Read %d recipe tags from %s", len(tags), image_path)
        return tags
