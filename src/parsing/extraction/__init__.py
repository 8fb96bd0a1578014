"""
Extraction модуль: атомарные детекторы над OCR текстом ценника.

Каждый детектор - чистая функция одной строки, без общего состояния.
"""

from .currency_detector import CurrencyDetector, CurrencyResult, CurrencyRule, CURRENCY_RULES
from .price_parser import PriceParser
from .promo_detector import PromoDetector, PromoResult, PromoRule, PROMO_RULES
from .discount_extractor import DiscountExtractor
from .barcode_extractor import BarcodeExtractor, BARCODE_PATTERNS
from .unit_extractor import UnitExtractor, UnitRule, UNIT_RULES
from .product_name_extractor import ProductNameExtractor

__all__ = [
    "CurrencyDetector",
    "CurrencyResult",
    "CurrencyRule",
    "CURRENCY_RULES",
    "PriceParser",
    "PromoDetector",
    "PromoResult",
    "PromoRule",
    "PROMO_RULES",
    "DiscountExtractor",
    "BarcodeExtractor",
    "BARCODE_PATTERNS",
    "UnitExtractor",
    "UnitRule",
    "UNIT_RULES",
    "ProductNameExtractor",
]
