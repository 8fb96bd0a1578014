"""
Настройки проекта Price Tag OCR.

Все значения по умолчанию вынесены сюда, чтобы детекторы и агрегаторы
могли получать их через конструктор и переопределять в тестах.
"""

import os
from pathlib import Path

# =============================================================================
# ПУТИ ПРОЕКТА
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"
INPUT_DIR = DATA_DIR / "input"
OUTPUT_DIR = DATA_DIR / "output"

# =============================================================================
# VISION MODEL (внешний коллаборатор, производит OCR текст)
# =============================================================================
# Имя модели записывается в ScanRecord для аудита
DEFAULT_VISION_MODEL = os.getenv("VISION_MODEL", "llava:34b")

# =============================================================================
# ЗНАЧЕНИЯ ПО УМОЛЧАНИЮ
# =============================================================================
# Валюта, если ни один паттерн не сработал
DEFAULT_CURRENCY = "RUB"
DEFAULT_CURRENCY_SYMBOL = "₽"

# Название товара, если в тексте нет метки "название/товар/продукт"
DEFAULT_PRODUCT_NAME = "Неизвестный товар"

# =============================================================================
# НАСТРОЙКИ ИЗВЛЕЧЕНИЯ
# =============================================================================
# Допустимый диапазон цены (открытый интервал)
PRICE_MIN = 0.0
PRICE_MAX = 1_000_000.0

# Допустимый диапазон скидки в процентах (включительно)
DISCOUNT_MIN = 1
DISCOUNT_MAX = 99

# =============================================================================
# НАСТРОЙКИ ИСТОРИИ ЦЕН
# =============================================================================
# Сколько последних точек отдавать в данные для графика
HISTORY_WINDOW_LIMIT = 100

# Сколько последних точек включать при сравнении товаров
COMPARE_HISTORY_LIMIT = 30

# =============================================================================
# НАСТРОЙКИ BATCH-ОБРАБОТКИ
# =============================================================================
# Расширения файлов с OCR транскрипциями
TRANSCRIPT_EXTENSIONS = [".txt"]


# =============================================================================
# ПРОВЕРКА КОНФИГУРАЦИИ
# =============================================================================
def validate_config():
    """Проверяет корректность конфигурации."""
    errors = []

    if not PRICE_MIN < PRICE_MAX:
        errors.append(f"PRICE_MIN ({PRICE_MIN}) должен быть меньше PRICE_MAX ({PRICE_MAX})")

    if not 0 < DISCOUNT_MIN <= DISCOUNT_MAX < 100:
        errors.append(
            f"Диапазон скидки некорректен: [{DISCOUNT_MIN}, {DISCOUNT_MAX}] "
            "(ожидается 0 < min <= max < 100)"
        )

    if not DEFAULT_CURRENCY or not DEFAULT_CURRENCY_SYMBOL:
        errors.append("DEFAULT_CURRENCY и DEFAULT_CURRENCY_SYMBOL не могут быть пустыми")

    if errors:
        raise ValueError("\n".join(errors))

    # Создаём директории если не существуют
    INPUT_DIR.mkdir(parents=True, exist_ok=True)
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    return True
