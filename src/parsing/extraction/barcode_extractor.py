import re
from typing import Optional, Pattern, Tuple
from loguru import logger


# Порядок проверки: EAN-13, EAN-8, UPC-A.
# Отрезок цифр нужной длины, ограниченный не-цифрами. Контрольная цифра не проверяется.
BARCODE_PATTERNS: Tuple[Tuple[str, Pattern[str]], ...] = (
    ("EAN-13", re.compile(r"(?<![0-9])([0-9]{13})(?![0-9])")),
    ("EAN-8", re.compile(r"(?<![0-9])([0-9]{8})(?![0-9])")),
    ("UPC-A", re.compile(r"(?<![0-9])([0-9]{12})(?![0-9])")),
)


class BarcodeExtractor:
    """
    Извлекает штрихкод из текста ценника.

    Известное ограничение: 8-значный отрезок внутри не-штрихкодовых данных
    (например, дата, склеенная с ценой через разделитель) тоже будет принят.
    """

    def extract(self, text: str) -> Optional[str]:
        if not text:
            return None

        for barcode_format, pattern in BARCODE_PATTERNS:
            match = pattern.search(text)
            if match:
                logger.debug(f"[BarcodeExtractor] {barcode_format}: {match.group(1)}")
                return match.group(1)

        return None
