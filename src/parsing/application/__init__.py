"""
Application слой домена Parsing.

Содержит сборщик результата ценника и batch-оркестратор.
"""

from .tag_parser import PriceTagParser, parse_ocr_result, resolve_prices
from .batch_parser import BatchTagParser, BatchItemResult, BatchSummary, BatchResult
from .result_formatter import format_scan_result

__all__ = [
    "PriceTagParser",
    "parse_ocr_result",
    "resolve_prices",
    "BatchTagParser",
    "BatchItemResult",
    "BatchSummary",
    "BatchResult",
    "format_scan_result",
]
