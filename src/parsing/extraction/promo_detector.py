"""
Promo Detector - определение акционного ценника.

ЦКП: флаг акции + тип акции по первому сработавшему правилу.
"""

from dataclasses import dataclass
from typing import Optional, Pattern, Sequence, Tuple
from loguru import logger

from .rules import compile_rule, first_match


@dataclass(frozen=True)
class PromoRule:
    pattern: Pattern[str]
    promo_type: str


@dataclass(frozen=True)
class PromoResult:
    """Результат определения акции."""
    is_promo: bool
    promo_type: Optional[str] = None

    def to_dict(self) -> dict:
        return {"is_promo": self.is_promo, "promo_type": self.promo_type}


# Порядок = приоритет, не менять без необходимости
PROMO_RULES: Tuple[PromoRule, ...] = (
    PromoRule(compile_rule(r"акци[яи]"), "акция"),
    PromoRule(compile_rule(r"скидк[аи]"), "скидка"),
    PromoRule(compile_rule(r"распродаж"), "распродажа"),
    PromoRule(compile_rule(r"специальн.*цен"), "спеццена"),
    PromoRule(compile_rule(r"выгодн"), "выгодная цена"),
    PromoRule(compile_rule(r"sale"), "sale"),
    PromoRule(compile_rule(r"промо"), "промо"),
    # -20%
    PromoRule(compile_rule(r"-\s*[0-9]+\s*%"), "скидка"),
    # 20% скидка / 20% off
    PromoRule(compile_rule(r"[0-9]+\s*%\s*(?:скидк|off)"), "скидка"),
    PromoRule(compile_rule(r"старая\s*цена"), "скидка"),
    PromoRule(compile_rule(r"было"), "скидка"),
    # Розничные идиомы сетей
    PromoRule(compile_rule(r"красн.*цен"), "красная цена"),
    PromoRule(compile_rule(r"жёлт.*цен|желт.*цен"), "желтая цена"),
)


class PromoDetector:
    """Определяет, является ли ценник акционным."""

    def __init__(self, rules: Optional[Sequence[PromoRule]] = None):
        self.rules = tuple(rules) if rules is not None else PROMO_RULES

    def detect(self, text: str) -> PromoResult:
        rule = first_match(self.rules, text)
        if rule is None:
            return PromoResult(is_promo=False)

        logger.debug(f"[PromoDetector] Акция: '{rule.promo_type}' (паттерн: {rule.pattern.pattern})")
        return PromoResult(is_promo=True, promo_type=rule.promo_type)
