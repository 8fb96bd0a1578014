import re
from loguru import logger

from config.settings import DEFAULT_PRODUCT_NAME


# "Название: Молоко 3.2%" -> "Молоко 3.2%" (до конца строки)
NAME_PATTERN = re.compile(r"(?:название|товар|продукт)[:\s]*([^\n]+)", re.IGNORECASE)


class ProductNameExtractor:
    """Извлекает название товара по метке "название/товар/продукт"."""

    def __init__(self, default_name: str = DEFAULT_PRODUCT_NAME):
        self.default_name = default_name

    def extract(self, text: str) -> str:
        match = NAME_PATTERN.search(text) if text else None
        if match:
            name = match.group(1).strip()
            if name:
                logger.debug(f"[ProductNameExtractor] Название: '{name}'")
                return name

        logger.trace("[ProductNameExtractor] Метка названия не найдена")
        return self.default_name
