"""
Инфраструктурный слой домена Parsing.

Содержит менеджер файлов.
"""

from .file_manager import ParsingFileManager

__all__ = [
    "ParsingFileManager",
]
