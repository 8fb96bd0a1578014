"""
Price History Aggregator.

Чистые функции над снимком истории цен (старые точки первыми).
Каждый вызов пересчитывает значение целиком, состояние не кешируется.
Для пустой истории все функции возвращают None.
"""

from statistics import mean
from typing import Optional, Sequence

from contracts.price_history_dto import PricePoint, PriceStats


def get_current_price(history: Sequence[PricePoint]) -> Optional[PricePoint]:
    """Последняя добавленная точка."""
    if not history:
        return None
    return history[-1]


def get_min_price(history: Sequence[PricePoint]) -> Optional[float]:
    if not history:
        return None
    return min(point.price for point in history)


def get_max_price(history: Sequence[PricePoint]) -> Optional[float]:
    if not history:
        return None
    return max(point.price for point in history)


def get_avg_price(history: Sequence[PricePoint]) -> Optional[float]:
    """Среднее арифметическое всех цен (точное, не выходит за [min, max])."""
    if not history:
        return None
    return float(mean(point.price for point in history))


def price_stats(history: Sequence[PricePoint]) -> PriceStats:
    return PriceStats(
        min=get_min_price(history),
        max=get_max_price(history),
        avg=get_avg_price(history),
        count=len(history),
    )
