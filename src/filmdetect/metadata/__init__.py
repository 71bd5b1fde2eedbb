"""Metadata extraction module"""

from .exiftool_source import ExifToolSource
from .extractor import RecipeExtractor
from .makernote import FujifilmMakerNoteReader

__all__ = ["ExifToolSource", "FujifilmMakerNoteReader", "RecipeExtractor"]
