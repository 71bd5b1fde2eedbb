"""
filmdetect - identify the Fujifilm recipe behind a photograph

This library provides:
- Normalization of exiftool and maker-note values into a Recipe
- Loading a library of named recipes (one JSON document each)
- Ranking library recipes by how many settings match

Example:
    >>> from filmdetect import detect
    >>> from pathlib import Path
    >>> 
    >>> result = detect(Path("DSCF0001.JPG"), Path("recipes"))
    >>> if result.success and result.perfect_match:
    ...     print(result.differences[0].candidate.name)
"""

from .version import __version__

# Errors
from .errors import (
    FilmDetectError,
    LibraryLoadError,
    MalformedValueError,
    SourceReadError,
    TypeMismatchError,
    UnrecognizedEnumError,
    UnsupportedSourceError,
)

# Models
from .models import FULL_SCORE, SCORED_FIELDS, DetectionResult, Recipe

# Metadata extraction
from .metadata import ExifToolSource, FujifilmMakerNoteReader, RecipeExtractor

# Matching
from .matching import Difference, MatchResult, compare, rank

# Library
from .library import load_recipes, save_recipe

# Reports
from .report import render_report

# High-level API
from .api import batch_detect, detect

__all__ = [
    # Version
    "__version__",
    # Errors
    "FilmDetectError",
    "MalformedValueError",
    "UnrecognizedEnumError",
    "TypeMismatchError",
    "UnsupportedSourceError",
    "SourceReadError",
    "LibraryLoadError",
    # Models
    "Recipe",
    "SCORED_FIELDS",
    "FULL_SCORE",
    "DetectionResult",
    # Metadata
    "RecipeExtractor",
    "ExifToolSource",
    "FujifilmMakerNoteReader",
    # Matching
    "Difference",
    "MatchResult",
    "compare",
    "rank",
    # Library
    "load_recipes",
    "save_recipe",
    # Reports
    "render_report",
    # High-level API
    "detect",
    "batch_detect",
]
