"""Data models for filmdetect"""

from .recipe import FULL_SCORE, SCORED_FIELDS, Recipe
from .detection_result import DetectionResult

__all__ = ["Recipe", "SCORED_FIELDS", "FULL_SCORE", "DetectionResult"]
