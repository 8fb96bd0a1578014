"""
Domain слой домена Parsing.

Содержит исключения домена Parsing.
"""

from .exceptions import (
    ParsingError,
    ParsingFileNotFoundError,
    ParsingFileWriteError,
    ParsingDataFormatError,
)

__all__ = [
    "ParsingError",
    "ParsingFileNotFoundError",
    "ParsingFileWriteError",
    "ParsingDataFormatError",
]
