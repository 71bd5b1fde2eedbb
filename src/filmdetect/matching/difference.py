"""
Difference Engine

Field-by-field comparison of an input recipe against one candidate.
"""

from dataclasses import dataclass
from typing import Tuple

from ..models.recipe import FULL_SCORE, SCORED_FIELDS, Recipe

# (label, input value, candidate value)
Row = Tuple[str, str, str]


@dataclass(frozen=True)
class Difference:
    """
    Comparison of an input recipe with one candidate.
    
    Attributes:
        input: Recipe extracted from the photograph
        candidate: Recipe from the library
        rows: One row per mismatching scored field, in field order
    """
    input: Recipe
    candidate: Recipe
    rows: Tuple[Row, ...] = ()
    
    @property
    def score(self) -> int:
        """Number of scored fields that match (max FULL_SCORE)"""
        return FULL_SCORE - len(self.rows)
    
    @property
    def is_perfect_match(self) -> bool:
        """Check if every scored field matches"""
        return len(self.rows) == 0


def compare(input: Recipe, candidate: Recipe) -> Difference:
    """
    Compare two recipes on every scored field.
    
    Identity fields (name, author, url) are never compared. Values are
    compared with exact equality.
    
    Args:
        input: Recipe extracted from the photograph
        candidate: Recipe from the library
        
    Returns:
        Difference listing the mismatching fields
    """
    rows = []
    for attr, label in SCORED_FIELDS:
        input_value = getattr(input, attr)
        candidate_value = getattr(candidate, attr)
        if input_value != candidate_value:
            rows.append((label, str(input_value), str(candidate_value)))
    
    return Difference(input=input, candidate=candidate, rows=tuple(rows))
