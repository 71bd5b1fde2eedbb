"""
Tests for report rendering
"""

from dataclasses import replace

from filmdetect.matching.matcher import rank
from filmdetect.matching.difference import compare
from filmdetect.report import NO_CANDIDATES, NO_PERFECT_MATCH, render_difference, render_report

from conftest import vary


class TestRenderReport:
    """Test report text"""
    
    def test_perfect_match(self, kodachrome):
        """Should print only the recipe name"""
        result = rank(kodachrome, [replace(kodachrome, name="Kodachrome 64")])
        
        assert render_report(result) == "Kodachrome 64"
    
    def test_identical_recipes(self, kodachrome):
        """Should name the other identical recipes"""
        result = rank(kodachrome, [replace(kodachrome, name="A"), replace(kodachrome, name="B")])
        
        assert render_report(result).splitlines() == ["A", "(identical recipes: B)"]
    
    def test_closest_recipes(self, kodachrome):
        """Should print a table per closest recipe"""
        candidates = [
            replace(kodachrome, name="Sharp", sharpness=2),
            replace(kodachrome, name="Soft", sharpness=-1),
        ]
        report = render_report(rank(kodachrome, candidates))
        lines = report.splitlines()
        
        assert lines[0] == NO_PERFECT_MATCH
        assert "| Sharp     | Input | Candidate |" in lines
        assert "| Sharpness | 1     | 2         |" in lines
        assert "| Sharpness | 1     | -1        |" in lines
        assert report.count("Score: 15") == 2
    
    def test_empty_library(self, kodachrome):
        """Should say the library is empty"""
        assert render_report(rank(kodachrome, [])) == NO_CANDIDATES
    
    def test_unnamed_candidate(self, kodachrome):
        """Should show a placeholder for unnamed recipes"""
        report = render_report(rank(kodachrome, [vary(kodachrome, 1)]))
        
        assert "(unnamed recipe)" in report


class TestRenderDifference:
    """Test the mismatch table"""
    
    def test_ascii_table(self, kodachrome):
        """Should pad cells to the widest value in each column"""
        table = render_difference(compare(kodachrome, replace(kodachrome, name="Name", color=-1)))
        
        assert table.splitlines() == [
            "+-------+-------+-----------+",
            "| Name  | Input | Candidate |",
            "+-------+-------+-----------+",
            "| Color | 2     | -1        |",
            "+-------+-------+-----------+",
        ]
    
    def test_name_printed_verbatim(self, kodachrome):
        """Should not interpret brackets in recipe names"""
        table = render_difference(compare(kodachrome, replace(kodachrome, name="[bold]Velvia[/bold]", color=0)))
        
        assert "| [bold]Velvia[/bold] | Input | Candidate |" in table.splitlines()
