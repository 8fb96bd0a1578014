"""
Integration: OCR текст ценника -> ParsedData -> история цен товара.
"""

from datetime import datetime, timedelta, timezone

import pytest

from src.history import attach_scan, product_summary, summarize_scans
from src.parsing.application.tag_parser import PriceTagParser, parse_ocr_result


SCENARIOS = {
    "milk": "Молоко 2.5% 1л. Цена: 89.90 руб",
    "promo": "АКЦИЯ! Было 249.99 руб, стало 199.99 руб, скидка -20%",
    "bread": "4607025392244 Хлеб белый",
    "empty": "",
}


def test_regular_tag():
    result = parse_ocr_result(SCENARIOS["milk"])

    assert result.price == 89.9
    assert result.currency == "RUB"
    assert result.currency_symbol == "₽"
    assert result.unit == "л"
    assert result.is_promo is False
    assert result.promo_type is None
    assert result.barcode is None
    assert result.original_price is None
    assert result.price_per_unit is None
    # процент жирности тоже подходит под шаблон скидки
    assert result.discount_percent == 5


def test_promo_tag():
    result = parse_ocr_result(SCENARIOS["promo"])

    assert result.is_promo is True
    assert result.promo_type == "акция"
    assert result.discount_percent == 20
    assert result.price == 199.99
    assert result.original_price == 249.99
    assert result.price_per_unit == 199.99


def test_barcode_only_tag():
    result = parse_ocr_result(SCENARIOS["bread"])

    assert result.barcode == "4607025392244"
    assert result.price is None
    # "белый" содержит "бел" -> BYN
    assert result.currency == "BYN"


def test_empty_text():
    result = parse_ocr_result(SCENARIOS["empty"])

    assert result.to_dict() == {
        "price": None,
        "originalPrice": None,
        "pricePerUnit": None,
        "currency": "RUB",
        "currencySymbol": "₽",
        "unit": None,
        "barcode": None,
        "isPromo": False,
        "promoType": None,
        "discountPercent": None,
        "rawText": "",
    }


@pytest.mark.parametrize("text", list(SCENARIOS.values()))
def test_parse_is_deterministic(text):
    assert parse_ocr_result(text) == parse_ocr_result(text)
    assert parse_ocr_result(text).raw_text == text


@pytest.mark.parametrize("text", list(SCENARIOS.values()))
def test_price_relations(text):
    result = parse_ocr_result(text)
    if result.original_price is not None:
        assert result.is_promo is True
        assert result.price is not None
        assert result.original_price > result.price
    if result.price is not None:
        assert 0 < result.price < 1_000_000


def test_scans_build_product_history():
    parser = PriceTagParser()
    start = datetime(2024, 6, 1, tzinfo=timezone.utc)
    texts = [
        "4607025392244 Молоко 1л 89.90 руб",
        "4607025392244 Молоко 1л АКЦИЯ 79.90 руб было 94.90 руб",
        "4607025392244 Молоко 1л 94.90 руб",
    ]

    product = None
    scans = []
    for i, text in enumerate(texts):
        parsed = parser.parse(text)
        scans.append(parsed)
        product = attach_scan(product, parsed, "Молоко", store="Магнит", scanned_at=start + timedelta(days=i))

    summary = product_summary(product)
    assert summary.price_count == 3
    assert summary.current_price.price == 94.9
    assert summary.min_price == 79.9
    assert summary.max_price == 94.9
    assert product.price_history[1].is_promo is True
    assert product.price_history[1].original_price == 94.9

    stats = summarize_scans(scans)
    assert stats.total_scans == 3
    assert stats.promo_count == 1
    assert stats.unique_products == 1
