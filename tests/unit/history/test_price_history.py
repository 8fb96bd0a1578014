"""
Unit-тесты для истории цен: точки, привязка сканов, выборки, сравнение.
"""

from datetime import datetime, timedelta, timezone

import pytest

from contracts.price_history_dto import PricePoint, Product
from src.history.price_history import (
    append_price_point,
    attach_scan,
    build_price_point,
    compare_products,
    filter_products,
    history_window,
    price_history_report,
    product_summary,
)
from src.parsing.application.tag_parser import parse_ocr_result


BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def day(n):
    return BASE_TIME + timedelta(days=n)


def make_product(*prices, promo_last=False, name="Молоко"):
    history = [PricePoint(price=p, scanned_at=day(i)) for i, p in enumerate(prices)]
    if promo_last and history:
        history[-1] = history[-1].model_copy(update={"is_promo": True})
    return Product(barcode="4607025392244", name=name, price_history=history)


class TestBuildPricePoint:

    def test_no_price_no_point(self):
        assert build_price_point(parse_ocr_result("Хлеб")) is None

    def test_promo_point(self):
        parsed = parse_ocr_result("АКЦИЯ! Было 249.99 руб, стало 199.99 руб, скидка -20%")
        point = build_price_point(parsed, store=" Магнит ", scanned_at=BASE_TIME)

        assert point.price == 199.99
        assert point.original_price == 249.99
        assert point.is_promo is True
        assert point.currency == "RUB"
        assert point.store == "Магнит"
        assert point.scanned_at == BASE_TIME

    def test_default_timestamp(self):
        point = build_price_point(parse_ocr_result("100 руб"))
        assert point.scanned_at.tzinfo is not None


def test_append_is_non_destructive():
    product = Product(name="Молоко")
    point = PricePoint(price=89.9)

    updated = append_price_point(product, point)

    assert product.price_history == ()
    assert updated.price_history == (point,)
    assert updated.name == "Молоко"


class TestAttachScan:

    TEXT = "4607025392244 Молоко 1л 89.90 руб"

    def test_no_barcode(self):
        assert attach_scan(None, parse_ocr_result("89.90 руб"), "Молоко") is None

    def test_creates_product(self):
        product = attach_scan(None, parse_ocr_result(self.TEXT), "Молоко", scanned_at=BASE_TIME)

        assert product.barcode == "4607025392244"
        assert product.name == "Молоко"
        assert product.unit == "л"
        assert len(product.price_history) == 1
        assert product.price_history[0].price == 89.9

    def test_appends_to_existing(self):
        existing = make_product(95.0)
        product = attach_scan(existing, parse_ocr_result(self.TEXT), "ignored", scanned_at=day(5))

        assert product.name == "Молоко"
        assert [p.price for p in product.price_history] == [95.0, 89.9]
        assert len(existing.price_history) == 1

    def test_barcode_without_price(self):
        product = attach_scan(None, parse_ocr_result("4607025392244 Хлеб"), "Хлеб")
        assert product is not None
        assert product.price_history == ()


def test_product_summary():
    summary = product_summary(make_product(100.0, 80.0, 120.0))
    data = summary.to_dict()

    assert data["name"] == "Молоко"
    assert data["currentPrice"]["price"] == 120.0
    assert data["minPrice"] == 80.0
    assert data["maxPrice"] == 120.0
    assert data["avgPrice"] == 100.0
    assert data["priceCount"] == 3


def test_product_summary_empty_history():
    summary = product_summary(Product(name="Новый"))
    assert summary.current_price is None
    assert summary.avg_price is None
    assert summary.price_count == 0


class TestFilterProducts:

    @pytest.fixture
    def products(self):
        return [
            make_product(60.0, 50.0, name="cheap"),
            make_product(100.0, 150.0, promo_last=True, name="promo"),
            Product(name="empty"),
        ]

    def names(self, products):
        return [p.name for p in products]

    def test_no_filters(self, products):
        assert self.names(filter_products(products)) == ["cheap", "promo", "empty"]

    def test_min_price(self, products):
        assert self.names(filter_products(products, min_price=100)) == ["promo"]

    def test_max_price(self, products):
        assert self.names(filter_products(products, max_price=100)) == ["cheap"]

    def test_has_promo(self, products):
        assert self.names(filter_products(products, has_promo=True)) == ["promo"]

    def test_uses_current_not_historic_price(self, products):
        # у "cheap" была цена 60, но текущая 50
        assert self.names(filter_products(products, min_price=55, max_price=70)) == []


class TestHistoryWindow:

    @pytest.fixture
    def product(self):
        return make_product(10.0, 20.0, 30.0, 40.0, 50.0)

    def test_date_bounds_inclusive(self, product):
        window = history_window(product.price_history, start=day(1), end=day(3))
        assert [p.price for p in window] == [20.0, 30.0, 40.0]

    def test_limit_keeps_latest(self, product):
        window = history_window(product.price_history, start=day(1), end=day(3), limit=2)
        assert [p.price for p in window] == [30.0, 40.0]

    def test_zero_limit(self, product):
        assert history_window(product.price_history, limit=0) == []

    def test_report_stats_cover_full_history(self, product):
        report = price_history_report(product, start=day(3), limit=1)

        assert [p.price for p in report.data] == [50.0]
        assert report.stats.count == 5
        assert report.stats.min == 10.0
        assert report.stats.max == 50.0
        assert report.stats.avg == 30.0

        data = report.to_dict()
        assert data["productName"] == "Молоко"
        assert data["barcode"] == "4607025392244"
        assert set(data["data"][0]) == {"date", "price", "originalPrice", "isPromo", "store"}


def test_compare_products():
    products = [make_product(10.0, 20.0, 30.0, name="A"), Product(name="B")]

    comparison = compare_products(products, history_limit=2)

    assert [c.name for c in comparison] == ["A", "B"]
    assert [p.price for p in comparison[0].price_history] == [20.0, 30.0]
    assert comparison[0].current_price.price == 30.0
    assert comparison[0].avg_price == 20.0
    assert comparison[1].current_price is None
    assert comparison[1].price_history == []
    assert "priceHistory" in comparison[0].to_dict()
