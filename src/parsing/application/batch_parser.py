"""
Batch-обработка OCR транскрипций ценников.

Вход: .txt файл или директория с .txt файлами (один ценник = один файл)
Выход: список BatchItemResult + BatchSummary, сохраняемые в JSON.

Ошибка в одном файле не прерывает обработку остальных.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional
from loguru import logger

from config.settings import DEFAULT_VISION_MODEL
from contracts.scan_dto import ScanRecord
from ..domain.exceptions import ParsingError, ParsingFileNotFoundError
from ..infrastructure.file_manager import ParsingFileManager
from .tag_parser import PriceTagParser


@dataclass
class BatchItemResult:
    """Результат обработки одного файла."""
    filename: str
    success: bool
    record: Optional[ScanRecord] = None
    error: Optional[str] = None
    processing_time_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "filename": self.filename,
            "success": self.success,
            "processing_time_ms": self.processing_time_ms,
        }
        if self.success:
            data["data"] = self.record.to_dict()
        else:
            data["error"] = self.error
        return data


@dataclass
class BatchSummary:
    """Итоги batch-обработки."""
    total: int = 0
    success_count: int = 0
    error_count: int = 0
    total_time_ms: float = 0.0

    @property
    def avg_time_ms(self) -> float:
        return self.total_time_ms / self.total if self.total else 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "success_count": self.success_count,
            "error_count": self.error_count,
            "total_time_ms": self.total_time_ms,
            "avg_time_ms": self.avg_time_ms,
        }


@dataclass
class BatchResult:
    items: List[BatchItemResult] = field(default_factory=list)
    summary: BatchSummary = field(default_factory=BatchSummary)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "summary": self.summary.to_dict(),
        }


class BatchTagParser:
    """Прогоняет транскрипции через PriceTagParser."""

    def __init__(
        self,
        parser: Optional[PriceTagParser] = None,
        file_manager: Optional[ParsingFileManager] = None,
        model: str = DEFAULT_VISION_MODEL,
    ):
        self.parser = parser or PriceTagParser()
        self.file_manager = file_manager or ParsingFileManager()
        self.model = model

    def process_file(self, file_path: Path) -> BatchItemResult:
        start = time.perf_counter()
        try:
            text = self.file_manager.load_transcript(file_path)
        except ParsingError as e:
            logger.warning(f"[BatchTagParser] {file_path.name}: {e.message}")
            return BatchItemResult(filename=file_path.name, success=False, error=e.message)

        extracted = self.parser.parse_with_name(text)
        elapsed_ms = (time.perf_counter() - start) * 1000

        record = ScanRecord(
            original_text=text,
            extracted_data=extracted,
            model=self.model,
            processing_time_ms=elapsed_ms,
        )
        logger.debug(f"[BatchTagParser] {file_path.name}: price={extracted.price} ({elapsed_ms:.1f} ms)")
        return BatchItemResult(
            filename=file_path.name,
            success=True,
            record=record,
            processing_time_ms=elapsed_ms,
        )

    def process_path(self, path: Path, limit: int = 0) -> BatchResult:
        """
        Обрабатывает один файл или все транскрипции директории.

        Raises:
            ParsingFileNotFoundError: Если путь не существует
        """
        if path.is_file():
            files = [path]
        elif path.is_dir():
            files = self.file_manager.get_transcript_files(path, limit=limit)
        else:
            raise ParsingFileNotFoundError(
                message=f"Путь не найден: {path}",
                component="BatchTagParser"
            )

        logger.info(f"[BatchTagParser] Найдено файлов: {len(files)}")

        result = BatchResult()
        for i, file_path in enumerate(files, 1):
            logger.info(f"[BatchTagParser] [{i}/{len(files)}] {file_path.name}")
            item = self.process_file(file_path)
            result.items.append(item)

            result.summary.total += 1
            result.summary.total_time_ms += item.processing_time_ms
            if item.success:
                result.summary.success_count += 1
            else:
                result.summary.error_count += 1

        logger.info(
            f"[BatchTagParser] Итого: {result.summary.success_count}/{result.summary.total} успешно"
        )
        return result

    def save(self, result: BatchResult, output_file: Path) -> Path:
        return self.file_manager.save_json(result.to_dict(), output_file)
