"""
Tests for the high-level detect() API

End-to-end: library on disk -> extraction from (fake) metadata -> ranking.
"""

import json
from dataclasses import replace

from filmdetect import batch_detect, detect
from filmdetect.metadata.extractor import RecipeExtractor
from filmdetect.models.detection_result import DetectionResult

from conftest import EXIFTOOL_TAGS, KODACHROME, FakeMakerNoteSource, FakeMetadataSource, vary


def write_library(directory, recipes):
    directory.mkdir(exist_ok=True)
    for i, recipe in enumerate(recipes):
        path = directory / f"{i:02d}-{recipe.name.lower()}.json"
        path.write_text(json.dumps(recipe.to_dict()))
    return directory


def fake_extractor(tags=EXIFTOOL_TAGS):
    return RecipeExtractor(
        metadata_source=FakeMetadataSource(tags),
        maker_note_source=FakeMakerNoteSource(),
    )


class TestDetect:
    """Test detect() end to end"""
    
    def test_closest_recipe(self, tmp_path, photo):
        """Should rank the recipe one sharpness step away highest"""
        library = write_library(tmp_path / "recipes", [
            vary(KODACHROME, 3, name="A"),
            replace(KODACHROME, name="B", sharpness=0),
            vary(KODACHROME, 5, name="C"),
        ])
        
        result = detect(photo, library, extractor=fake_extractor())
        
        assert isinstance(result, DetectionResult)
        assert result.success is True
        assert result.error is None
        assert result.recipe == KODACHROME
        assert result.perfect_match is False
        assert len(result.differences) == 1
        
        best = result.differences[0]
        assert best.candidate.name == "B"
        assert best.score == 15
        assert best.rows == (("Sharpness", "1", "0"),)
    
    def test_perfect_match(self, tmp_path, photo):
        """Should report a perfect match"""
        library = write_library(tmp_path / "recipes", [
            vary(KODACHROME, 2, name="Other"),
            replace(KODACHROME, name="Kodachrome 64"),
        ])
        
        result = detect(photo, library, extractor=fake_extractor())
        
        assert result.perfect_match is True
        assert [d.candidate.name for d in result.differences] == ["Kodachrome 64"]
    
    def test_empty_library(self, tmp_path, photo):
        """Should succeed with no differences for an empty library"""
        library = write_library(tmp_path / "recipes", [])
        
        result = detect(photo, library, extractor=fake_extractor())
        
        assert result.success is True
        assert result.differences == ()
        assert result.perfect_match is False
    
    def test_missing_library(self, tmp_path, photo):
        """Should fail without ranking when the library can't be loaded"""
        result = detect(photo, tmp_path / "missing", extractor=fake_extractor())
        
        assert result.failed
        assert result.match is None
        assert "missing" in result.error
    
    def test_nonexistent_image(self, tmp_path):
        """Should fail validation for a missing photograph"""
        library = write_library(tmp_path / "recipes", [KODACHROME])
        
        result = detect(tmp_path / "nonexistent.jpg", library, extractor=fake_extractor())
        
        assert result.failed
        assert "not found" in result.error.lower()
    
    def test_unsupported_format(self, tmp_path):
        """Should reject unsupported file types"""
        library = write_library(tmp_path / "recipes", [KODACHROME])
        path = tmp_path / "notes.txt"
        path.write_text("hello")
        
        result = detect(path, library, extractor=fake_extractor())
        
        assert result.failed
        assert "unsupported format" in result.error.lower()
    
    def test_extraction_error(self, tmp_path, photo):
        """Should report extraction errors without ranking"""
        library = write_library(tmp_path / "recipes", [KODACHROME])
        tags = dict(EXIFTOOL_TAGS, **{"MakerNotes:Sharpness": "Hardest!"})
        
        result = detect(photo, library, extractor=fake_extractor(tags))
        
        assert result.failed
        assert result.match is None
        assert "Sharpness" in result.error


class TestBatchDetect:
    """Test batch_detect()"""
    
    def test_progress(self, tmp_path, photo):
        """Should call progress callback for every photograph"""
        library = write_library(tmp_path / "recipes", [replace(KODACHROME, name="K")])
        missing = tmp_path / "missing.jpg"
        progress = []
        
        results = batch_detect(
            [photo, missing],
            library,
            extractor=fake_extractor(),
            progress_callback=lambda current, total, result: progress.append((current, total, result.success)),
        )
        
        assert [r.success for r in results] == [True, False]
        assert progress == [(1, 2, True), (2, 2, False)]
    
    def test_library_error(self, tmp_path, photo):
        """Should fail every photograph when the library can't be loaded"""
        results = batch_detect([photo, photo], tmp_path / "missing", extractor=fake_extractor())
        
        assert len(results) == 2
        assert all(r.failed for r in results)
