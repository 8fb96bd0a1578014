from statistics import mean
from typing import Iterable

from contracts.parsed_tag_dto import ParsedData
from contracts.scan_dto import ScanStats


def summarize_scans(scans: Iterable[ParsedData]) -> ScanStats:
    """
    Сводка по сканам: количество, средняя цена, число акций, уникальные товары.

    Сканы без цены не участвуют в средней; товар = уникальный штрихкод.
    """
    total = 0
    promo_count = 0
    prices = []
    barcodes = set()

    for scan in scans:
        total += 1
        if scan.is_promo:
            promo_count += 1
        if scan.price is not None:
            prices.append(scan.price)
        if scan.barcode:
            barcodes.add(scan.barcode)

    return ScanStats(
        total_scans=total,
        avg_price=float(mean(prices)) if prices else None,
        promo_count=promo_count,
        unique_products=len(barcodes),
    )
