"""
Detection Result Model

Represents the result of detecting the recipe of a single photograph.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from ..matching.difference import Difference
from ..matching.matcher import MatchResult
from .recipe import Recipe


@dataclass
class DetectionResult:
    """
    Result from detecting one photograph's recipe.
    
    Contains the extracted recipe and ranking, or the error that stopped
    extraction or loading.
    """
    success: bool
    image_path: Optional[Path] = None
    recipe: Optional[Recipe] = None
    match: Optional[MatchResult] = None
    error: Optional[str] = None
    
    @property
    def perfect_match(self) -> bool:
        """Check if a library recipe matched every field"""
        return self.match is not None and self.match.perfect_match
    
    @property
    def differences(self) -> Tuple[Difference, ...]:
        """Ranked differences (empty on failure)"""
        return self.match.differences if self.match is not None else ()
    
    @property
    def failed(self) -> bool:
        """Check if detection failed"""
        return not self.success
