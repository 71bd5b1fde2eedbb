"""Recipe comparison and ranking"""

from .difference import Difference, compare
from .matcher import MatchResult, rank

__all__ = ["Difference", "compare", "MatchResult", "rank"]
