"""
Контракты DTO проекта Price Tag OCR.

Все контракты используют Pydantic v2 для валидации.

Контракты:
- Parsing -> Persistence/API: ParsedData, ExtractedData (parsed_tag_dto.py)
- История цен: PricePoint, Product, агрегаты (price_history_dto.py)
- Аудит сканов: ScanRecord, ScanStats (scan_dto.py)
"""

# Parsing -> Persistence / API
from .parsed_tag_dto import ParsedData, ExtractedData

# История цен
from .price_history_dto import (
    PricePoint,
    Product,
    PriceStats,
    ProductSummary,
    ChartPoint,
    PriceHistoryReport,
    ProductComparison,
)

# Сканы
from .scan_dto import ScanRecord, ScanStats

__all__ = [
    # Parsing
    "ParsedData",
    "ExtractedData",
    # History
    "PricePoint",
    "Product",
    "PriceStats",
    "ProductSummary",
    "ChartPoint",
    "PriceHistoryReport",
    "ProductComparison",
    # Scans
    "ScanRecord",
    "ScanStats",
]
