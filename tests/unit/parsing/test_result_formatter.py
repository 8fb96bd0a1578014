from src.parsing.application.result_formatter import format_scan_result
from src.parsing.application.tag_parser import parse_ocr_result


def test_format_promo_result():
    parsed = parse_ocr_result("АКЦИЯ! Было 249.99 руб, стало 199.99 руб, скидка -20%")
    output = format_scan_result("promo.txt", parsed, product_name="Сыр", model="llava:34b")

    assert output.startswith("promo.txt\n")
    assert "  Model: llava:34b" in output
    assert "  Product: Сыр" in output
    assert "  Price: 199.99 RUB" in output
    assert "  Original Price: 249.99 RUB" in output
    assert "  Promo: Yes (акция) - 20% off" in output
    assert output.endswith("  Raw Text:\n    АКЦИЯ! Было 249.99 руб, стало 199.99 руб, скидка -20%")


def test_format_regular_result():
    parsed = parse_ocr_result("4607025392244\n120 руб")
    output = format_scan_result("tag.txt", parsed, processing_time_ms=1500)

    assert "  Processing Time: 1.50s" in output
    assert "  Product: N/A" in output
    assert "  Price: 120 RUB" in output
    assert "  Barcode: 4607025392244" in output
    assert "Promo" not in output
    assert "Original Price" not in output
    assert "  Raw Text:\n    4607025392244\n    120 руб" in output
