"""
High-level API for filmdetect

Convenience functions for detecting the recipe behind photographs.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .errors import FilmDetectError
from .library.loader import load_recipes
from .matching.matcher import rank
from .metadata.exiftool_source import ExifToolSource
from .metadata.extractor import RecipeExtractor
from .models.detection_result import DetectionResult
from .models.recipe import Recipe
from .validation.image_validator import ImageValidator

logger = logging.getLogger(__name__)


def default_extractor() -> RecipeExtractor:
    """Extractor backed by exiftool (as configured) and the maker-note reader"""
    from .config import settings
    return RecipeExtractor(metadata_source=ExifToolSource(settings.exiftool_executable))


def detect(
    image_path: Path,
    simulation_dir: Path,
    extractor: Optional[RecipeExtractor] = None,
) -> DetectionResult:
    """
    Find the library recipe closest to the one used for a photograph.
    
    Process:
    1. Load every recipe from the library
    2. Validate the photograph and extract its recipe
    3. Rank library recipes against it
    
    Args:
        image_path: Path to photograph
        simulation_dir: Recipe library directory
        extractor: RecipeExtractor to use (default: exiftool-backed)
        
    Returns:
        DetectionResult (success=False with error on any failure; no
        ranking is done in that case)
        
    Example:
        >>> from pathlib import Path
        >>> from filmdetect import detect
        >>> 
        >>> result = detect(Path("DSCF0001.JPG"), Path("recipes"))
        >>> if result.perfect_match:
        ...     print(result.differences[0].candidate.name)
    """
    try:
        recipes = load_recipes(simulation_dir)
    except FilmDetectError as e:
        return DetectionResult(success=False, image_path=image_path, error=str(e))
    
    return detect_with_recipes(image_path, recipes, extractor=extractor)


def detect_with_recipes(
    image_path: Path,
    recipes: Sequence[Recipe],
    extractor: Optional[RecipeExtractor] = None,
) -> DetectionResult:
    """
    Same as detect() against already-loaded recipes.
    
    Args:
        image_path: Path to photograph
        recipes: Candidate recipes
        extractor: RecipeExtractor to use (default: exiftool-backed)
        
    Returns:
        DetectionResult
    """
    extractor = extractor or default_extractor()
    
    try:
        ImageValidator.ensure_valid(image_path)
        recipe = extractor.extract(image_path)
    except FilmDetectError as e:
        logger.info("Extraction failed for %s: %s", image_path, e)
        return DetectionResult(success=False, image_path=image_path, error=str(e))
    
    match = rank(recipe, recipes)
    return DetectionResult(success=True, image_path=image_path, recipe=recipe, match=match)


def batch_detect(
    image_paths: List[Path],
    simulation_dir: Path,
    extractor: Optional[RecipeExtractor] = None,
    progress_callback: Optional[Callable[[int, int, DetectionResult], None]] = None
) -> List[DetectionResult]:
    """
    Detect recipes for many photographs, loading the library once.
    
    Args:
        image_paths: List of paths to photographs
        simulation_dir: Recipe library directory
        extractor: RecipeExtractor to use (default: exiftool-backed)
        progress_callback: Optional callback(current, total, result)
        
    Returns:
        List of DetectionResult objects (every result fails with the
        library error if the library cannot be loaded)
        
    Example:
        >>> from pathlib import Path
        >>> from filmdetect import batch_detect
        >>> 
        >>> images = sorted(Path("./DCIM").glob("*.JPG"))
        >>> 
        >>> def on_progress(current, total, result):
        ...     print(f"[{current}/{total}] {result.image_path.name}")
        >>> 
        >>> results = batch_detect(images, Path("recipes"), progress_callback=on_progress)
    """
    total = len(image_paths)
    
    try:
        recipes = load_recipes(simulation_dir)
    except FilmDetectError as e:
        recipes = None
        error = str(e)
    
    extractor = extractor or default_extractor()
    
    results = []
    for i, path in enumerate(image_paths, 1):
        if recipes is None:
            result = DetectionResult(success=False, image_path=path, error=error)
        else:
            result = detect_with_recipes(path, recipes, extractor=extractor)
        results.append(result)
        
        if progress_callback:
            progress_callback(i, total, result)
    
    return results
