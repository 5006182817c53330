"""M3U playlist reading/writing over byte streams.

Public API:
- read / write (streams), loads / dumps (in-memory)
- parse_extinf / format_record (single entries)
- Playlist, Record
- M3UError and its subclasses
"""

from .errors import (
    AttributeFormatError,
    FormatError,
    M3UError,
    NumberFormatError,
    UnknownDirectiveError,
)
from .models import Playlist, Record
from .reader import loads, parse_extinf, read
from .writer import dumps, format_record, write

__all__ = [
    "Playlist",
    "Record",
    "read",
    "write",
    "loads",
    "dumps",
    "parse_extinf",
    "format_record",
    "M3UError",
    "FormatError",
    "NumberFormatError",
    "AttributeFormatError",
    "UnknownDirectiveError",
]
