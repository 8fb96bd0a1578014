import pytest
from src.parsing.extraction.product_name_extractor import ProductNameExtractor


@pytest.fixture
def extractor():
    return ProductNameExtractor()


def test_name_label(extractor):
    assert extractor.extract("Название: Молоко 3.2%\nЦена: 89.90") == "Молоко 3.2%"


def test_product_label_without_colon(extractor):
    assert extractor.extract("Товар Хлеб белый") == "Хлеб белый"


def test_case_insensitive(extractor):
    assert extractor.extract("ПРОДУКТ: Сыр") == "Сыр"


def test_default_name(extractor):
    assert extractor.extract("89.90 руб") == "Неизвестный товар"


def test_empty_text(extractor):
    assert extractor.extract("") == "Неизвестный товар"


def test_injected_default():
    assert ProductNameExtractor(default_name="Unknown").extract("") == "Unknown"
