"""
Упорядоченные списки правил "паттерн -> результат".

Порядок правил является приоритетом: побеждает первое сработавшее правило,
а не самое раннее совпадение в тексте. Поэтому правила хранятся в tuple,
а не в dict.
"""

import re
from typing import Iterable, Optional, Pattern, TypeVar


RuleT = TypeVar("RuleT")

# Все паттерны ценников регистронезависимы (в т.ч. кириллица)
RULE_FLAGS = re.IGNORECASE


def compile_rule(pattern: str) -> Pattern[str]:
    return re.compile(pattern, RULE_FLAGS)


def first_match(rules: Iterable[RuleT], text: str) -> Optional[RuleT]:
    """
    Возвращает первое правило, чей ``pattern`` найден в тексте (search, не match).

    Args:
        rules: Упорядоченные правила с атрибутом ``pattern``
        text: OCR текст

    Returns:
        Сработавшее правило или None
    """
    if not text:
        return None
    for rule in rules:
        if rule.pattern.search(text):
            return rule
    return None
