"""
Error types for filmdetect

Every failure the package raises derives from FilmDetectError so callers
can report it and skip ranking with a single except clause.
"""

from pathlib import Path
from typing import Any, Optional


class FilmDetectError(Exception):
    """Base class for all filmdetect errors"""


class ExtractionError(FilmDetectError):
    """
    A raw tag value could not be normalized.
    
    Attributes:
        field: Tag (or field) name that failed
        raw_value: The offending raw value
    """
    
    def __init__(self, message: str, field: Optional[str] = None, raw_value: Any = None):
        super().__init__(message)
        self.field = field
        self.raw_value = raw_value
    
    def __str__(self) -> str:
        message = super().__str__()
        if self.field is None:
            return message
        return f"{self.field}: {message} (got {self.raw_value!r})"


class MalformedValueError(ExtractionError):
    """Raw value does not match its expected textual pattern"""


class UnrecognizedEnumError(ExtractionError):
    """Raw value is not one of the recognized labels or codes"""


class TypeMismatchError(ExtractionError):
    """Raw value is neither a string nor a number"""


class UnsupportedSourceError(FilmDetectError):
    """Photograph is not from the camera vendor the parser expects"""


class SourceReadError(FilmDetectError):
    """Metadata could not be read from the photograph"""


class LibraryLoadError(FilmDetectError):
    """A recipe library document could not be loaded"""
    
    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path
