"""
История цен товара: построение точек, добавление, выборки и сравнение.

ЦКП: история только растёт в конец, существующие точки не меняются
и не переупорядочиваются. Все функции возвращают новые объекты.
"""

from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence

from loguru import logger

from config.settings import COMPARE_HISTORY_LIMIT, HISTORY_WINDOW_LIMIT
from contracts.parsed_tag_dto import ParsedData
from contracts.price_history_dto import (
    ChartPoint,
    PriceHistoryReport,
    PricePoint,
    Product,
    ProductComparison,
    ProductSummary,
)
from .aggregator import (
    get_avg_price,
    get_current_price,
    get_max_price,
    get_min_price,
    price_stats,
)


def build_price_point(
    parsed: ParsedData,
    store: Optional[str] = None,
    scanned_at: Optional[datetime] = None,
) -> Optional[PricePoint]:
    """
    Строит точку истории из результата разбора.

    Скан без цены в историю не попадает (возвращается None).
    """
    if parsed.price is None:
        logger.debug("[PriceHistory] Цена не найдена, точка истории не создаётся")
        return None

    return PricePoint(
        price=parsed.price,
        original_price=parsed.original_price,
        currency=parsed.currency,
        is_promo=parsed.is_promo,
        scanned_at=scanned_at or datetime.now(timezone.utc),
        store=store,
    )


def append_price_point(product: Product, point: PricePoint) -> Product:
    """Новый Product с точкой в конце истории."""
    return product.model_copy(update={"price_history": product.price_history + (point,)})


def attach_scan(
    product: Optional[Product],
    parsed: ParsedData,
    product_name: str,
    store: Optional[str] = None,
    scanned_at: Optional[datetime] = None,
) -> Optional[Product]:
    """
    Привязывает скан к товару по штрихкоду.

    Args:
        product: Найденный по штрихкоду товар или None
        parsed: Результат разбора ценника
        product_name: Название для нового товара
        store: Магазин
        scanned_at: Время сканирования (по умолчанию сейчас)

    Returns:
        Обновлённый/новый товар, либо None если в скане нет штрихкода
    """
    if parsed.barcode is None:
        logger.debug("[PriceHistory] Нет штрихкода, скан не привязан к товару")
        return None

    if product is None:
        logger.info(f"[PriceHistory] Новый товар: {parsed.barcode} '{product_name}'")
        product = Product(barcode=parsed.barcode, name=product_name, unit=parsed.unit)

    point = build_price_point(parsed, store=store, scanned_at=scanned_at)
    if point is not None:
        product = append_price_point(product, point)
    return product


def product_summary(product: Product) -> ProductSummary:
    history = product.price_history
    return ProductSummary(
        product=product,
        current_price=get_current_price(history),
        min_price=get_min_price(history),
        max_price=get_max_price(history),
        avg_price=get_avg_price(history),
        price_count=len(history),
    )


def filter_products(
    products: Iterable[Product],
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    has_promo: bool = False,
) -> List[Product]:
    """
    Фильтрует товары по текущей цене.

    Товары без истории отбрасываются, если задана любая граница цены.
    """
    result = []
    for product in products:
        current = get_current_price(product.price_history)

        if min_price is not None or max_price is not None:
            if current is None:
                continue
            if min_price is not None and current.price < min_price:
                continue
            if max_price is not None and current.price > max_price:
                continue

        if has_promo and not (current is not None and current.is_promo):
            continue

        result.append(product)
    return result


def history_window(
    history: Sequence[PricePoint],
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    limit: int = HISTORY_WINDOW_LIMIT,
) -> List[PricePoint]:
    """Точки в [start, end] (границы включительно), последние limit штук."""
    points = [
        point for point in history
        if (start is None or point.scanned_at >= start)
        and (end is None or point.scanned_at <= end)
    ]
    if limit <= 0:
        return []
    return points[-limit:]


def price_history_report(
    product: Product,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    limit: int = HISTORY_WINDOW_LIMIT,
) -> PriceHistoryReport:
    """
    Данные для графика цены + статистика.

    Статистика считается по всей истории, а не по окну.
    """
    window = history_window(product.price_history, start=start, end=end, limit=limit)
    return PriceHistoryReport(
        product_name=product.name,
        barcode=product.barcode,
        data=[
            ChartPoint(
                date=point.scanned_at,
                price=point.price,
                original_price=point.original_price,
                is_promo=point.is_promo,
                store=point.store,
            )
            for point in window
        ],
        stats=price_stats(product.price_history),
    )


def compare_products(
    products: Iterable[Product],
    history_limit: int = COMPARE_HISTORY_LIMIT,
) -> List[ProductComparison]:
    comparison = []
    for product in products:
        history = product.price_history
        comparison.append(
            ProductComparison(
                name=product.name,
                barcode=product.barcode,
                brand=product.brand,
                current_price=get_current_price(history),
                min_price=get_min_price(history),
                max_price=get_max_price(history),
                avg_price=get_avg_price(history),
                price_history=list(history[-history_limit:]) if history_limit > 0 else [],
            )
        )
    return comparison
