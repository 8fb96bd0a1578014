import re
from typing import List, Optional
from loguru import logger

from config.settings import DISCOUNT_MAX, DISCOUNT_MIN


# Опциональный минус, число, знак процента: "-20%", "- 15 %", "30%"
PERCENT_PATTERN = re.compile(r"-?\s*([0-9]+)\s*%")


class DiscountExtractor:
    """
    Извлекает процент скидки из текста ценника.

    На ценнике может быть несколько процентов (многоуровневые скидки по карте),
    основной считается максимальная. Значения вне [min, max] отбрасываются
    (0%, 100% и т.п.).
    """

    def __init__(self, min_percent: int = DISCOUNT_MIN, max_percent: int = DISCOUNT_MAX):
        self.min_percent = min_percent
        self.max_percent = max_percent

    def extract_all(self, text: str) -> List[int]:
        """Все правдоподобные проценты в порядке появления."""
        if not text:
            return []

        discounts = []
        max_digits = len(str(self.max_percent))
        for match in PERCENT_PATTERN.finditer(text):
            raw = match.group(1)
            # Длинные цифровые серии (OCR мусор) заведомо вне диапазона
            if len(raw.lstrip("0")) > max_digits:
                logger.trace(f"[DiscountExtractor] Отброшено неправдоподобное число перед %: {raw[:20]}")
                continue

            value = int(raw)
            if self.min_percent <= value <= self.max_percent:
                discounts.append(value)
            else:
                logger.trace(f"[DiscountExtractor] Отброшен процент вне диапазона: {value}")
        return discounts

    def extract(self, text: str) -> Optional[int]:
        discounts = self.extract_all(text)
        if not discounts:
            return None

        best = max(discounts)
        logger.debug(f"[DiscountExtractor] Скидка: {best}% (кандидаты: {discounts})")
        return best
