"""
Человекочитаемое представление результата разбора ценника (для CLI).
"""

from typing import Optional

from contracts.parsed_tag_dto import ParsedData


def _fmt_number(value: float) -> str:
    # 89.9 -> "89.9", 100.0 -> "100"
    return f"{value:g}" if value == int(value) else f"{value}"


def format_scan_result(
    filename: str,
    parsed: ParsedData,
    product_name: Optional[str] = None,
    model: Optional[str] = None,
    processing_time_ms: Optional[float] = None,
) -> str:
    """
    Форматирует результат одного скана.

    Пустые поля пропускаются, исходный текст выводится с отступом.
    """
    lines = [filename]
    if model:
        lines.append(f"  Model: {model}")
    if processing_time_ms is not None:
        lines.append(f"  Processing Time: {processing_time_ms / 1000:.2f}s")
    lines.append(f"  Product: {product_name or 'N/A'}")

    if parsed.price:
        lines.append(f"  Price: {_fmt_number(parsed.price)} {parsed.currency}")

    if parsed.original_price and parsed.original_price != parsed.price:
        lines.append(f"  Original Price: {_fmt_number(parsed.original_price)} {parsed.currency}")

    if parsed.price_per_unit:
        lines.append(f"  Price per Unit: {_fmt_number(parsed.price_per_unit)}")

    if parsed.unit:
        lines.append(f"  Unit: {parsed.unit}")

    if parsed.barcode:
        lines.append(f"  Barcode: {parsed.barcode}")

    if parsed.is_promo:
        promo_line = "  Promo: Yes"
        if parsed.promo_type:
            promo_line += f" ({parsed.promo_type})"
        if parsed.discount_percent:
            promo_line += f" - {parsed.discount_percent}% off"
        lines.append(promo_line)

    raw = "\n    ".join(parsed.raw_text.split("\n"))
    lines.append(f"  Raw Text:\n    {raw}")

    return "\n".join(lines)
