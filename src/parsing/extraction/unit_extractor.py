from dataclasses import dataclass
from typing import Optional, Pattern, Sequence, Tuple
from loguru import logger

from .rules import compile_rule, first_match


@dataclass(frozen=True)
class UnitRule:
    pattern: Pattern[str]
    unit: str


# Число + сокращение без продолжения слова: "1л.", "1 кг", "500 г", "500гр"
_AFTER_NUMBER = r"[0-9]\s*{abbr}(?![а-яё])"

# Порядок = приоритет (кг раньше г, л раньше мл)
UNIT_RULES: Tuple[UnitRule, ...] = (
    UnitRule(compile_rule(r"за\s*кг|/кг|килограмм|" + _AFTER_NUMBER.format(abbr="кг")), "кг"),
    UnitRule(compile_rule(r"за\s*шт|/шт|штук|" + _AFTER_NUMBER.format(abbr="шт")), "шт"),
    UnitRule(compile_rule(r"за\s*л|/л|литр|" + _AFTER_NUMBER.format(abbr="л")), "л"),
    UnitRule(compile_rule(r"за\s*г|/г(?!р)|грамм|" + _AFTER_NUMBER.format(abbr="гр?")), "г"),
    UnitRule(compile_rule(r"за\s*мл|/мл|миллилитр|" + _AFTER_NUMBER.format(abbr="мл")), "мл"),
    UnitRule(compile_rule(r"за\s*уп|/уп|упаковк"), "уп"),
)


class UnitExtractor:
    """Определяет единицу измерения, к которой относится цена."""

    def __init__(self, rules: Optional[Sequence[UnitRule]] = None):
        self.rules = tuple(rules) if rules is not None else UNIT_RULES

    def extract(self, text: str) -> Optional[str]:
        rule = first_match(self.rules, text)
        if rule is None:
            return None

        logger.debug(f"[UnitExtractor] Единица: {rule.unit}")
        return rule.unit
