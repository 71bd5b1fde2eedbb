"""
Tests for the difference engine
"""

from dataclasses import replace

from filmdetect.matching.difference import compare
from filmdetect.models.recipe import FULL_SCORE

from conftest import vary


class TestCompare:
    """Test field-by-field comparison"""
    
    def test_identical_recipes(self, kodachrome):
        """Should find no mismatches between a recipe and itself"""
        difference = compare(kodachrome, kodachrome)
        
        assert difference.rows == ()
        assert difference.score == FULL_SCORE
        assert difference.is_perfect_match
    
    def test_identity_fields_ignored(self, kodachrome):
        """Should not compare name, author or url"""
        other = replace(kodachrome, name="Other", author="Someone", url="https://example.com")
        assert compare(kodachrome, other).is_perfect_match
    
    def test_single_mismatch(self, kodachrome):
        """Should report one row with both values as text"""
        difference = compare(kodachrome, replace(kodachrome, sharpness=0))
        
        assert difference.rows == (("Sharpness", "1", "0"),)
        assert difference.score == 15
        assert not difference.is_perfect_match
    
    def test_rows_in_field_order(self, kodachrome):
        """Should list mismatches in declaration order"""
        other = replace(kodachrome, clarity=0, film_simulation="Velvia", dynamic_range="Auto")
        labels = [row[0] for row in compare(kodachrome, other).rows]
        
        assert labels == ["Film Simulation", "Dynamic Range", "Clarity"]
    
    def test_score(self, kodachrome):
        """Should subtract one point per mismatching field"""
        assert compare(kodachrome, vary(kodachrome, 6)).score == 10
        assert compare(kodachrome, vary(kodachrome, 16)).score == 0
    
    def test_keeps_records(self, kodachrome):
        """Should keep both records on the difference"""
        other = replace(kodachrome, name="B")
        difference = compare(kodachrome, other)
        
        assert difference.input is kodachrome
        assert difference.candidate is other
