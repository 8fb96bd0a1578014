"""
Домен Parsing: разбор OCR текста ценника.

Детекторы (независимы, работают над одной строкой):
- CurrencyDetector  - валюта
- PriceParser       - кандидаты в цену
- PromoDetector     - признак и тип акции
- DiscountExtractor - процент скидки
- BarcodeExtractor  - EAN-13 / EAN-8 / UPC-A
- UnitExtractor     - единица измерения

Вход: OCR текст (строка от внешней vision модели)
Выход: contracts.ParsedData
"""

from src.parsing.application import (
    PriceTagParser,
    parse_ocr_result,
    BatchTagParser,
    format_scan_result,
)
from src.parsing.extraction import (
    CurrencyDetector,
    PriceParser,
    PromoDetector,
    DiscountExtractor,
    BarcodeExtractor,
    UnitExtractor,
    ProductNameExtractor,
)

__all__ = [
    "PriceTagParser",
    "parse_ocr_result",
    "BatchTagParser",
    "format_scan_result",
    "CurrencyDetector",
    "PriceParser",
    "PromoDetector",
    "DiscountExtractor",
    "BarcodeExtractor",
    "UnitExtractor",
    "ProductNameExtractor",
]
