"""
Менеджер файлов для домена Parsing.

Чтение OCR транскрипций ценников и сохранение результатов разбора.
"""

import json
from pathlib import Path
from typing import Any, Iterable, List, Optional
from loguru import logger

from config.settings import TRANSCRIPT_EXTENSIONS
from ..domain.exceptions import (
    ParsingDataFormatError,
    ParsingFileNotFoundError,
    ParsingFileWriteError,
)


class ParsingFileManager:
    """Менеджер файлов для домена Parsing."""

    def __init__(self, extensions: Optional[Iterable[str]] = None):
        self.extensions = [ext.lower() for ext in (extensions or TRANSCRIPT_EXTENSIONS)]

    def save_json(self, data: Any, file_path: Path) -> Path:
        """
        Сохраняет данные в JSON файл.

        Args:
            data: Данные для сохранения
            file_path: Путь для сохранения

        Returns:
            Путь к сохраненному файлу

        Raises:
            ParsingFileWriteError: Если не удалось сохранить файл
        """
        try:
            # Создаем директорию если не существует
            file_path.parent.mkdir(parents=True, exist_ok=True)

            with open(file_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)

            logger.debug(f"[Parsing] Файл сохранен: {file_path}")
            return file_path

        except (IOError, OSError, TypeError) as e:
            raise ParsingFileWriteError(
                message=f"Не удалось сохранить JSON файл: {file_path}",
                component="ParsingFileManager",
                original_error=e
            )

    def load_transcript(self, file_path: Path) -> str:
        """
        Загружает OCR транскрипцию ценника.

        Args:
            file_path: Путь к текстовому файлу

        Returns:
            Текст файла без изменений

        Raises:
            ParsingFileNotFoundError: Если файл не существует
            ParsingDataFormatError: Если файл не является UTF-8 текстом
        """
        if not file_path.is_file():
            raise ParsingFileNotFoundError(
                message=f"Файл не найден: {file_path}",
                component="ParsingFileManager"
            )

        try:
            text = file_path.read_text(encoding='utf-8')
        except UnicodeDecodeError as e:
            raise ParsingDataFormatError(
                message=f"Файл не является UTF-8 текстом: {file_path}",
                component="ParsingFileManager",
                original_error=e
            )
        except (IOError, OSError) as e:
            raise ParsingFileNotFoundError(
                message=f"Не удалось прочитать файл: {file_path}",
                component="ParsingFileManager",
                original_error=e
            )

        logger.debug(f"[Parsing] Транскрипция загружена: {file_path} ({len(text)} символов)")
        return text

    def get_transcript_files(self, directory_path: Path, limit: int = 0) -> List[Path]:
        """
        Получает список транскрипций в директории.

        Args:
            directory_path: Путь к директории
            limit: Максимум файлов (0 - без ограничения)

        Returns:
            Отсортированный список путей
        """
        if not directory_path.is_dir():
            logger.warning(f"[Parsing] Директория не найдена: {directory_path}")
            return []

        files = sorted(
            path for path in directory_path.iterdir()
            if path.is_file() and path.suffix.lower() in self.extensions
        )

        if limit > 0:
            return files[:limit]
        return files
