import pytest
from src.parsing.extraction.price_parser import PriceParser


@pytest.fixture
def parser():
    return PriceParser()


def test_decimal_with_label(parser):
    assert parser.extract_candidates("Цена: 89.90 руб") == [89.9]


def test_comma_decimal_separator(parser):
    assert parser.extract_candidates("89,90") == [89.9]


def test_integer_with_currency(parser):
    assert parser.extract_candidates("120 руб") == [120.0]
    assert parser.extract_candidates("150р.") == [150.0]
    assert parser.extract_candidates("15 $") == [15.0]
    assert parser.extract_candidates("10€") == [10.0]


def test_price_label_with_integer(parser):
    assert parser.extract_candidates("цена 45") == [45.0]


def test_cost_label(parser):
    assert parser.extract_candidates("Стоимость: 1500") == [1500.0]


def test_decimal_tail_is_not_integer_candidate(parser):
    # "99 руб" - это копейки от 199.99, а не отдельная цена
    assert parser.extract_candidates("199.99 руб") == [199.99]


def test_duplicates_collapsed(parser):
    assert parser.extract_candidates("89.90 руб\nЦена: 89.90") == [89.9]


def test_sorted_ascending(parser):
    assert parser.extract_candidates("300 руб 100 руб 200 руб") == [100.0, 200.0, 300.0]


def test_two_prices(parser):
    text = "Было 249.99 руб, стало 199.99 руб"
    assert parser.extract_candidates(text) == [199.99, 249.99]


class TestRange:
    """Цены вне (0, 1 000 000) отбрасываются."""

    def test_zero_dropped(self, parser):
        assert parser.extract_candidates("0.00 руб") == []

    def test_upper_bound_exclusive(self, parser):
        assert parser.extract_candidates("1000000.00 руб") == []

    def test_just_below_upper_bound(self, parser):
        assert parser.extract_candidates("999999.99 руб") == [999999.99]

    def test_custom_bounds(self):
        parser = PriceParser(max_price=100)
        assert parser.extract_candidates("150 руб 50 руб") == [50.0]


def test_no_numbers(parser):
    assert parser.extract_candidates("Хлеб белый") == []


def test_empty_text(parser):
    assert parser.extract_candidates("") == []


def test_only_ascii_digits(parser):
    assert parser.extract_candidates("８９.９０ руб") == []
    assert parser.extract_candidates("Цена: ８９") == []
