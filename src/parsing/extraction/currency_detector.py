from dataclasses import dataclass
from typing import Optional, Pattern, Sequence, Tuple
from loguru import logger

from config.settings import DEFAULT_CURRENCY, DEFAULT_CURRENCY_SYMBOL
from .rules import compile_rule, first_match


@dataclass(frozen=True)
class CurrencyRule:
    pattern: Pattern[str]
    code: str
    symbol: str


@dataclass(frozen=True)
class CurrencyResult:
    """Результат определения валюты."""
    code: str
    symbol: str
    detected: bool = False

    def to_dict(self) -> dict:
        return {"currency": self.code, "symbol": self.symbol, "detected": self.detected}


# Порядок = приоритет. RUB проверяется первым.
CURRENCY_RULES: Tuple[CurrencyRule, ...] = (
    CurrencyRule(compile_rule(r"руб|₽|рубл|RUB"), "RUB", "₽"),
    CurrencyRule(compile_rule(r"\$|USD|долл"), "USD", "$"),
    CurrencyRule(compile_rule(r"€|EUR|евро"), "EUR", "€"),
    CurrencyRule(compile_rule(r"₸|KZT|тенге"), "KZT", "₸"),
    CurrencyRule(compile_rule(r"₴|UAH|грн"), "UAH", "₴"),
    CurrencyRule(compile_rule(r"Br|BYN|бел"), "BYN", "Br"),
)


class CurrencyDetector:
    """
    Определяет валюту ценника.

    Первое сработавшее правило из CURRENCY_RULES, иначе валюта по умолчанию.
    """

    def __init__(
        self,
        default_code: str = DEFAULT_CURRENCY,
        default_symbol: str = DEFAULT_CURRENCY_SYMBOL,
        rules: Optional[Sequence[CurrencyRule]] = None,
    ):
        self.default_code = default_code
        self.default_symbol = default_symbol
        self.rules = tuple(rules) if rules is not None else CURRENCY_RULES

    def detect(self, text: str) -> CurrencyResult:
        rule = first_match(self.rules, text)
        if rule is None:
            logger.trace(f"[CurrencyDetector] Валюта не найдена, используем {self.default_code}")
            return CurrencyResult(code=self.default_code, symbol=self.default_symbol)

        logger.debug(f"[CurrencyDetector] Найдена валюта: {rule.code} ({rule.symbol})")
        return CurrencyResult(code=rule.code, symbol=rule.symbol, detected=True)
