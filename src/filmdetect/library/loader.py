"""
Recipe Library

A library is a directory holding one JSON document per recipe.
"""

import json
import logging
from pathlib import Path
from typing import List

from ..errors import LibraryLoadError
from ..models.recipe import Recipe

logger = logging.getLogger(__name__)

RECIPE_SUFFIX = ".json"


def recipe_files(directory: Path) -> List[Path]:
    """
    List recipe documents in a library directory, sorted by name.
    
    Hidden files and files without a .json suffix are skipped.
    
    Raises:
        LibraryLoadError: If the directory cannot be listed
    """
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise LibraryLoadError(f"Cannot read recipe library {directory}: {e}", path=directory) from e
    
    return sorted(
        path for path in entries
        if path.is_file() and path.suffix.lower() == RECIPE_SUFFIX and not path.name.startswith(".")
    )


def load_recipe(path: Path) -> Recipe:
    """
    Load one recipe document.
    
    Raises:
        LibraryLoadError: If the file cannot be read or decoded
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise LibraryLoadError(f"Cannot load recipe {path}: {e}", path=path) from e
    
    if not isinstance(data, dict):
        raise LibraryLoadError(f"Cannot load recipe {path}: expected a JSON object", path=path)
    
    try:
        return Recipe.from_dict(data)
    except TypeError as e:
        raise LibraryLoadError(f"Invalid recipe {path}: {e}", path=path) from e


def load_recipes(directory: Path) -> List[Recipe]:
    """
    Load every recipe in a library directory.
    
    Loading stops at the first document that fails.
    
    Args:
        directory: Library directory
        
    Returns:
        Recipes in file name order
        
    Raises:
        LibraryLoadError: If the directory or any document cannot be loaded
    """
    recipes = [load_recipe(path) for path in recipe_files(directory)]
    logger.info("Loaded %d recipes from %s", len(recipes), directory)
    return recipes


def save_recipe(recipe: Recipe, path: Path) -> None:
    """
    Write a recipe as a library document.
    
    Raises:
        LibraryLoadError: If the file cannot be written
    """
    try:
        path.write_text(json.dumps(recipe.to_dict(), indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise LibraryLoadError(f"Cannot write recipe {path}: {e}", path=path) from e
