import re
from typing import List, Optional
from loguru import logger

from config.settings import PRICE_MAX, PRICE_MIN


# Токен валюты после числа
CURRENCY_TOKEN = r"(?:руб|₽|р\.?|RUB|\$|€)"


class PriceParser:
    """
    Элемент-функция: извлекает кандидатов в цену из OCR текста ценника.

    ЦКП: отсортированный по возрастанию список уникальных цен в (min, max).
    """

    def __init__(self, min_price: float = PRICE_MIN, max_price: float = PRICE_MAX):
        self.min_price = min_price
        self.max_price = max_price
        # Четыре независимых прохода, каждый находит все вхождения
        self.patterns = [
            # 89.90 / 89,90 (+ валюта опционально)
            re.compile(rf"([0-9]+[.,][0-9]{{2}})\s*{CURRENCY_TOKEN}?", re.IGNORECASE),
            # 90 руб. Целое не может быть хвостом дробного числа (199.99 руб -> не 99)
            re.compile(rf"(?<![0-9.,])([0-9]+)\s*{CURRENCY_TOKEN}", re.IGNORECASE),
            # Цена: 89.90
            re.compile(r"цена[:\s]*([0-9]+[.,]?[0-9]*)", re.IGNORECASE),
            # Стоимость: 89.90
            re.compile(r"стоимость[:\s]*([0-9]+[.,]?[0-9]*)", re.IGNORECASE),
        ]

    def extract_candidates(self, text: str) -> List[float]:
        """
        Извлекает все цены из текста.

        Args:
            text: OCR текст ценника

        Returns:
            Уникальные цены по возрастанию (пустой список если ничего нет)
        """
        if not text:
            return []

        prices = set()
        for pattern in self.patterns:
            for match in pattern.finditer(text):
                price = self._to_float(match.group(1))
                if price is not None and self.min_price < price < self.max_price:
                    prices.add(price)

        candidates = sorted(prices)
        logger.debug(f"[PriceParser] Кандидаты цены: {candidates}")
        return candidates

    def _to_float(self, raw: str) -> Optional[float]:
        # Запятая -> десятичная точка
        normalized = raw.replace(",", ".")
        try:
            return float(normalized)
        except ValueError:
            logger.trace(f"[PriceParser] Не удалось разобрать число: {raw}")
            return None
