"""
Fujifilm Maker-Note Reader

Decodes the vendor-private maker-note block for the two settings older
exiftool releases do not print: clarity and grain effect size.

Layout (always little-endian):
    0   "FUJIFILM"
    8   uint32 offset of the IFD, relative to the start of the block
    IFD uint16 entry count, then 12-byte entries
        (tag uint16, type uint16, count uint32, value-or-offset 4 bytes)
"""

import logging
import struct
from pathlib import Path
from typing import Dict, Optional

from PIL import Image, UnidentifiedImageError

from ..errors import SourceReadError, UnsupportedSourceError

logger = logging.getLogger(__name__)

FUJIFILM_MAKE = "FUJIFILM"
FUJIFILM_HEADER = b"FUJIFILM"

EXIF_IFD = 0x8769
MAKE_TAG = 0x010F
MAKER_NOTE_TAG = 0x927C

# Maker-note tag ID -> raw field name
MAKER_NOTE_FIELDS: Dict[int, str] = {
    0x100F: "Clarity",
    0x104C: "GrainEffectSize",
}

# TIFF type -> struct format for integer types
INTEGER_TYPES: Dict[int, str] = {
    1: "B",   # BYTE
    3: "H",   # SHORT
    4: "L",   # LONG
    6: "b",   # SBYTE
    8: "h",   # SSHORT
    9: "l",   # SLONG
}


def decode_maker_note(data: bytes) -> Dict[str, int]:
    """
    Decode the fields listed in MAKER_NOTE_FIELDS from a Fujifilm maker note.

    Args:
        data: Raw MakerNote bytes

    Returns:
        Dict of field name -> raw integer value (tags not present are omitted)

    Raises:
        UnsupportedSourceError: If the block is not a Fujifilm maker note
        SourceReadError: If the block is truncated
    """
    if not data.startswith(FUJIFILM_HEADER):
        raise UnsupportedSourceError("Maker note isn't a Fujifilm maker note.")

    try:
        (ifd_offset,) = struct.unpack_from("<L", data, 8)
        (count,) = struct.unpack_from("<H", data, ifd_offset)

        values = {}
        for i in range(count):
            entry = ifd_offset + 2 + i * 12
            tag, typ, n, raw = struct.unpack_from("<HHL4s", data, entry)

            name = MAKER_NOTE_FIELDS.get(tag)
            if name is None:
                continue

            fmt = INTEGER_TYPES.get(typ)
            if fmt is None or n < 1:
                logger.debug("Skipping maker-note tag 0x%04x with type %d", tag, typ)
                continue

            # Values wider than 4 bytes live at an offset; only the first is used
            if struct.calcsize(fmt) * n > 4:
                (offset,) = struct.unpack("<L", raw)
                (value,) = struct.unpack_from("<" + fmt, data, offset)
            else:
                (value,) = struct.unpack_from("<" + fmt, raw)

            logger.debug("Maker-note tag 0x%04x (%s) = %d", tag, name, value)
            values[name] = value
    except struct.error as e:
        raise SourceReadError(f"Truncated Fujifilm maker note: {e}") from e

    return values


def fields_from_exif(make: Optional[str], maker_note: Optional[bytes]) -> Dict[str, int]:
    """
    Check the camera vendor and decode the maker note.

    Args:
        make: EXIF Make value
        maker_note: Raw MakerNote bytes, or None when absent

    Returns:
        Dict of raw maker-note fields (empty without a maker note)

    Raises:
        UnsupportedSourceError: If the photograph isn't from a Fujifilm camera
    """
    if maker_note is None:
        return {}

    if make is None or make.strip().rstrip("\x00") != FUJIFILM_MAKE:
        raise UnsupportedSourceError("Supplied file isn't from a Fujifilm camera.")

    return decode_maker_note(maker_note)


class FujifilmMakerNoteReader:
    """Read Fujifilm maker-note fields from image files"""

    @staticmethod
    def read(image_path: Path) -> Dict[str, int]:
        """
        Extract raw maker-note fields from an image.

        Args:
            image_path: Path to image file

        Returns:
            Dict of raw field name -> integer (see MAKER_NOTE_FIELDS); empty
            for containers Pillow cannot open (RAF, HEIF)

        Raises:
            SourceReadError: If the image cannot be read
            UnsupportedSourceError: If the image isn't from a Fujifilm camera
        """
        try:
            with Image.open(image_path) as img:
                exif = img.getexif()
                make = exif.get(MAKE_TAG)
                try:
                    maker_note = exif.get_ifd(EXIF_IFD).get(MAKER_NOTE_TAG)
                except (KeyError, AttributeError):
                    maker_note = None
        except UnidentifiedImageError:
            logger.debug("Pillow cannot open %s, no maker-note fields", image_path)
            return {}
        except OSError as e:
            raise SourceReadError(f"Cannot read maker note from {image_path}: {e}") from e

        if maker_note is None:
            logger.debug("No maker note in %s", image_path)

        return fields_from_exif(make, maker_note)
