"""
Image Validation Module

Checks a photograph before its metadata is read.
"""

from pathlib import Path
from typing import Optional, Set, Tuple

from ..errors import SourceReadError


class ImageValidator:
    """Validate image files before extraction"""
    
    MAX_FILE_SIZE = 500 * 1024 * 1024  # 500 MB
    
    SUPPORTED_EXTENSIONS: Set[str] = {
        '.jpg', '.jpeg',
        '.tif', '.tiff',
        '.heic', '.heif', '.hif',
        '.raf',  # Fujifilm RAW
    }
    
    @staticmethod
    def validate_file(file_path: Path) -> Tuple[bool, Optional[str]]:
        """
        Validate image file.
        
        Checks:
        - File exists
        - File is not empty and within size limits
        - Extension is supported
        
        Args:
            file_path: Path to image file
            
        Returns:
            (is_valid, error_message) tuple
        """
        if not file_path.exists():
            return False, f"File not found: {file_path}"
        
        if not file_path.is_file():
            return False, f"Not a file: {file_path}"
        
        try:
            size = file_path.stat().st_size
        except OSError as e:
            return False, f"Cannot access file: {e}"
        
        if size == 0:
            return False, "File is empty"
        
        if size > ImageValidator.MAX_FILE_SIZE:
            size_mb = size / 1024 / 1024
            max_mb = ImageValidator.MAX_FILE_SIZE / 1024 / 1024
            return False, f"File too large: {size_mb:.1f} MB (max {max_mb:.0f} MB)"
        
        if file_path.suffix.lower() not in ImageValidator.SUPPORTED_EXTENSIONS:
            return False, f"Unsupported format: {file_path.suffix}"
        
        return True, None
    
    @staticmethod
    def ensure_valid(file_path: Path) -> None:
        """
        Raise if the file is not valid.
        
        Raises:
            SourceReadError: With the validation message
        """
        valid, error = ImageValidator.validate_file(file_path)
        if not valid:
            raise SourceReadError(error)
