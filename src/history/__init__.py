"""
Домен History: история цен товаров.

Вход: снимок истории (Sequence[PricePoint], старые точки первыми)
Выход: агрегаты, окна для графиков, сравнение товаров
"""

from src.history.aggregator import (
    get_current_price,
    get_min_price,
    get_max_price,
    get_avg_price,
    price_stats,
)
from src.history.price_history import (
    build_price_point,
    append_price_point,
    attach_scan,
    product_summary,
    filter_products,
    history_window,
    price_history_report,
    compare_products,
)
from src.history.scan_stats import summarize_scans

__all__ = [
    # Aggregator
    "get_current_price",
    "get_min_price",
    "get_max_price",
    "get_avg_price",
    "price_stats",
    # Price history
    "build_price_point",
    "append_price_point",
    "attach_scan",
    "product_summary",
    "filter_products",
    "history_window",
    "price_history_report",
    "compare_products",
    # Scans
    "summarize_scans",
]
