"""Shared test helpers"""

from dataclasses import replace

import pytest

from filmdetect.models.recipe import SCORED_FIELDS, Recipe


# exiftool output (print-converted, with group prefixes) for KODACHROME
EXIFTOOL_TAGS = {
    "SourceFile": "DSCF0001.JPG",
    "MakerNotes:FilmMode": "Classic Chrome",
    "MakerNotes:GrainEffectRoughness": "Weak",
    "MakerNotes:GrainEffectSize": "Small",
    "MakerNotes:ColorChromeEffect": "Strong",
    "MakerNotes:ColorChromeFXBlue": "Off",
    "MakerNotes:WhiteBalance": "Daylight",
    "MakerNotes:WhiteBalanceFineTune": "Red +40, Blue -100",
    "MakerNotes:DevelopmentDynamicRange": 200,
    "MakerNotes:HighlightTone": "-1 (medium soft)",
    "MakerNotes:ShadowTone": "+1 (medium hard)",
    "MakerNotes:Saturation": "+2 (high)",
    "MakerNotes:Sharpness": "Medium Hard",
    "MakerNotes:NoiseReduction": "-4 (weakest)",
    "MakerNotes:Clarity": "+3",
}

KODACHROME = Recipe(
    film_simulation="Classic Chrome",
    grain_effect_size="Small",
    grain_effect_roughness="Weak",
    color_chrome_effect="Strong",
    color_chrome_fx_blue="Off",
    white_balance_mode="Daylight",
    white_balance_red=2,
    white_balance_blue=-5,
    dynamic_range="200",
    highlights=-1,
    shadows=1,
    color=2,
    sharpness=1,
    noise_reduction=-4,
    clarity=3,
)


def vary(recipe: Recipe, count: int, name: str = "") -> Recipe:
    """Copy of recipe with the first `count` scored fields changed"""
    changes = {}
    for attr, _ in SCORED_FIELDS[:count]:
        value = getattr(recipe, attr)
        changes[attr] = value + 100 if isinstance(value, int) else value + " (changed)"
    return replace(recipe, name=name or recipe.name, **changes)


class FakeMetadataSource:
    """In-memory replacement for ExifToolSource"""
    
    def __init__(self, tags):
        self.tags = tags
        self.calls = []
    
    def read_tags(self, image_path):
        self.calls.append(image_path)
        return dict(self.tags)


class FakeMakerNoteSource:
    """In-memory replacement for FujifilmMakerNoteReader"""
    
    def __init__(self, fields=None, error=None):
        self.fields = fields or {}
        self.error = error
        self.calls = []
    
    def read(self, image_path):
        self.calls.append(image_path)
        if self.error is not None:
            raise self.error
        return dict(self.fields)


@pytest.fixture
def kodachrome():
    return KODACHROME


@pytest.fixture
def photo(tmp_path):
    """A non-empty file with a supported image extension"""
    path = tmp_path / "DSCF0001.JPG"
    path.write_bytes(b"\xff\xd8\xff\xe0 not really a jpeg")
    return path
