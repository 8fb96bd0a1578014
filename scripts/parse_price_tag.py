#!/usr/bin/env python3
"""
Точка входа для разбора OCR транскрипций ценников.

Использование:
    # Обработать все .txt транскрипции из data/input/
    python scripts/parse_price_tag.py

    # Обработать конкретный файл или директорию
    python scripts/parse_price_tag.py path/to/tag.txt
    python scripts/parse_price_tag.py path/to/dir --limit 10

    # Сохранить результаты в другой файл
    python scripts/parse_price_tag.py --output results.json
"""

import sys
import argparse
from pathlib import Path

from loguru import logger

# Добавляем корень проекта в путь
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import INPUT_DIR, OUTPUT_DIR, DEFAULT_VISION_MODEL, validate_config
from src.parsing.application import BatchTagParser, format_scan_result
from src.parsing.domain.exceptions import ParsingError


def main():
    """Главная функция запуска разбора ценников."""

    parser = argparse.ArgumentParser(description="Price Tag OCR - разбор транскрипций ценников")
    parser.add_argument("path", nargs="?", help="Путь к .txt транскрипции или директории (опционально)")
    parser.add_argument("--limit", type=int, default=0, help="Максимум файлов (0 - без ограничения)")
    parser.add_argument("--output", help="JSON файл для результатов")
    parser.add_argument("--model", default=DEFAULT_VISION_MODEL, help="Имя vision модели для записи")
    parser.add_argument("--verbose", action="store_true", help="DEBUG логирование")
    args = parser.parse_args()

    logger.remove()
    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level="DEBUG" if args.verbose else "INFO"
    )

    # Проверяем конфигурацию
    try:
        validate_config()
    except ValueError as e:
        logger.error(f"Ошибка конфигурации: {e}")
        sys.exit(1)

    input_path = Path(args.path) if args.path else INPUT_DIR
    output_file = Path(args.output) if args.output else OUTPUT_DIR / "batch_results.json"

    print("\n" + "=" * 60)
    print("  PRICE TAG OCR - разбор транскрипций")
    print("=" * 60)
    print(f"  Вход:   {input_path}")
    print(f"  Выход:  {output_file}")
    print(f"  Лимит:  {args.limit if args.limit > 0 else 'нет'}")

    batch = BatchTagParser(model=args.model)

    try:
        result = batch.process_path(input_path, limit=args.limit)
    except ParsingError as e:
        logger.error(str(e))
        sys.exit(1)

    if not result.items:
        print(f"\n[WARNING] В {input_path} не найдены транскрипции")
        sys.exit(0)

    for item in result.items:
        print()
        if not item.success:
            print(f"{item.filename} - ERROR: {item.error}")
            continue
        extracted = item.record.extracted_data
        print(format_scan_result(
            item.filename,
            extracted,
            product_name=extracted.product_name,
            model=item.record.model,
            processing_time_ms=item.processing_time_ms,
        ))

    try:
        batch.save(result, output_file)
    except ParsingError as e:
        logger.error(str(e))
        sys.exit(1)

    summary = result.summary
    print("\n" + "=" * 60)
    print(f"  ИТОГИ: {summary.success_count}/{summary.total} успешно обработано")
    print(f"  Среднее время: {summary.avg_time_ms:.2f} ms")
    print(f"  [SAVED] {output_file}")

    if summary.error_count:
        print(f"  [WARNING] {summary.error_count} файлов не обработано")
        sys.exit(1)


if __name__ == "__main__":
    main()
