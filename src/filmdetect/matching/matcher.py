"""
Matcher

Ranks library recipes against the recipe extracted from a photograph.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from ..models.recipe import Recipe
from .difference import Difference, compare

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of ranking.
    
    Attributes:
        differences: The perfect match alone, or every top-scoring candidate
        perfect_match: True if differences holds a perfect match
        alternatives: Other candidates identical to the perfect match
    """
    differences: Tuple[Difference, ...] = ()
    perfect_match: bool = False
    alternatives: Tuple[Difference, ...] = ()
    
    @property
    def best(self) -> Optional[Difference]:
        """First (best) difference, or None when nothing was ranked"""
        return self.differences[0] if self.differences else None


def rank(input: Recipe, candidates: Iterable[Recipe]) -> MatchResult:
    """
    Rank candidates by how many scored fields match the input.
    
    Process:
    1. Compare the input with every candidate
    2. Sort by score, highest first (ties keep library order)
    3. Stop at the first perfect match
    4. Otherwise return every candidate sharing the top score
    
    Args:
        input: Recipe extracted from the photograph
        candidates: Library recipes
        
    Returns:
        MatchResult (empty, not an error, when there are no candidates)
    """
    differences = [compare(input, candidate) for candidate in candidates]
    
    # sorted() is stable, reverse=True keeps insertion order among equals
    differences = sorted(differences, key=lambda d: d.score, reverse=True)
    
    if differences and differences[0].is_perfect_match:
        match = differences[0]
        alternatives = tuple(d for d in differences[1:] if d.is_perfect_match)
        if alternatives:
            logger.warning(
                "%s is a perfect match, but so are: %s",
                match.candidate.display_name,
                ", ".join(d.candidate.display_name for d in alternatives),
            )
        return MatchResult(differences=(match,), perfect_match=True, alternatives=alternatives)
    
    results = []
    for difference in differences:
        if results and difference.score < results[0].score:
            break
        results.append(difference)
    
    if results:
        logger.info("No perfect match, %d candidate(s) share the top score %d",
                    len(results), results[0].score)
    
    return MatchResult(differences=tuple(results))
