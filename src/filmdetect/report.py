"""
Report rendering

Human-readable output for ranking results.
"""

import io
from typing import List

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .matching.difference import Difference
from .matching.matcher import MatchResult

NO_PERFECT_MATCH = "We were not able to find a perfect match.  These recipes are the closest:"
NO_CANDIDATES = "The recipe library is empty."

# Wide enough that tables are never wrapped
CONSOLE_WIDTH = 1000


def render_difference(difference: Difference) -> str:
    """Table of mismatching fields, headed by the candidate's name"""
    table = Table(box=box.ASCII2, header_style=None)
    table.add_column(Text(difference.candidate.display_name), no_wrap=True)
    table.add_column("Input", no_wrap=True)
    table.add_column("Candidate", no_wrap=True)
    
    # Text cells so recipe values are never parsed as console markup
    for label, input_value, candidate_value in difference.rows:
        table.add_row(Text(label), Text(input_value), Text(candidate_value))
    
    console = Console(file=io.StringIO(), width=CONSOLE_WIDTH, color_system=None, highlight=False)
    console.print(table)
    return console.file.getvalue().rstrip("\n")


def render_report(result: MatchResult) -> str:
    """
    Render a ranking result.
    
    A perfect match renders as the recipe name alone. Otherwise a header
    line is followed by one table per closest recipe.
    
    Args:
        result: Output of rank()
        
    Returns:
        Report text
    """
    if result.perfect_match:
        lines = [result.best.candidate.display_name]
        if result.alternatives:
            names = ", ".join(d.candidate.display_name for d in result.alternatives)
            lines.append(f"(identical recipes: {names})")
        return "\n".join(lines)
    
    if not result.differences:
        return NO_CANDIDATES
    
    parts: List[str] = [NO_PERFECT_MATCH]
    for difference in result.differences:
        parts.append(f"Score: {difference.score}")
        parts.append(render_difference(difference))
    return "\n".join(parts)
