"""
Price Tag Parser - сборка структурированного результата из детекторов.

Вход: OCR текст ценника (непрозрачная строка от vision модели)
Выход: ParsedData

Алгоритм выбора цены:
1. >= 2 кандидатов и акция: price = минимум, original_price = максимум
   (эвристика: акционная цена ниже исходной)
2. >= 1 кандидата: price = минимум
3. иначе цены нет
price_per_unit = минимум кандидатов, если кандидатов больше одного.
В случае (1) он совпадает с price - поведение сохранено намеренно.
"""

from typing import List, Optional, Tuple
from loguru import logger

from contracts.parsed_tag_dto import ExtractedData, ParsedData
from ..extraction import (
    BarcodeExtractor,
    CurrencyDetector,
    DiscountExtractor,
    PriceParser,
    ProductNameExtractor,
    PromoDetector,
    UnitExtractor,
)


class PriceTagParser:
    """
    Оркестратор детекторов ценника.

    Все детекторы независимы и работают над одной и той же строкой.
    Метод parse тотален: не бросает исключений ни на каком входе.
    """

    def __init__(
        self,
        currency_detector: Optional[CurrencyDetector] = None,
        price_parser: Optional[PriceParser] = None,
        promo_detector: Optional[PromoDetector] = None,
        discount_extractor: Optional[DiscountExtractor] = None,
        barcode_extractor: Optional[BarcodeExtractor] = None,
        unit_extractor: Optional[UnitExtractor] = None,
        name_extractor: Optional[ProductNameExtractor] = None,
    ):
        self.currency_detector = currency_detector or CurrencyDetector()
        self.price_parser = price_parser or PriceParser()
        self.promo_detector = promo_detector or PromoDetector()
        self.discount_extractor = discount_extractor or DiscountExtractor()
        self.barcode_extractor = barcode_extractor or BarcodeExtractor()
        self.unit_extractor = unit_extractor or UnitExtractor()
        self.name_extractor = name_extractor or ProductNameExtractor()

    def parse(self, text: str) -> ParsedData:
        candidates = self.price_parser.extract_candidates(text)
        currency = self.currency_detector.detect(text)
        promo = self.promo_detector.detect(text)
        discount_percent = self.discount_extractor.extract(text)
        barcode = self.barcode_extractor.extract(text)
        unit = self.unit_extractor.extract(text)

        price, original_price = resolve_prices(candidates, promo.is_promo)
        price_per_unit = min(candidates) if len(candidates) > 1 else None

        logger.debug(
            f"[PriceTagParser] price={price}, original={original_price}, "
            f"per_unit={price_per_unit}, promo={promo.promo_type}, "
            f"candidates={len(candidates)}"
        )

        return ParsedData(
            price=price,
            original_price=original_price,
            price_per_unit=price_per_unit,
            currency=currency.code,
            currency_symbol=currency.symbol,
            unit=unit,
            barcode=barcode,
            is_promo=promo.is_promo,
            promo_type=promo.promo_type,
            discount_percent=discount_percent,
            raw_text=text,
        )

    def parse_with_name(self, text: str) -> ExtractedData:
        """ParsedData + название товара (для записи о сканировании)."""
        parsed = self.parse(text)
        return ExtractedData(
            **parsed.model_dump(),
            product_name=self.name_extractor.extract(text),
        )


def resolve_prices(candidates: List[float], is_promo: bool) -> Tuple[Optional[float], Optional[float]]:
    """
    Выбирает (price, original_price) из отсортированных кандидатов.

    Args:
        candidates: Цены по возрастанию
        is_promo: Найден ли признак акции

    Returns:
        (price, original_price)
    """
    if len(candidates) >= 2 and is_promo:
        return candidates[0], candidates[-1]
    if candidates:
        return candidates[0], None
    return None, None


_default_parser = PriceTagParser()


def parse_ocr_result(text: str) -> ParsedData:
    """Разбирает OCR текст ценника детекторами по умолчанию."""
    return _default_parser.parse(text)
