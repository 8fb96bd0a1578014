"""
DTO контракт: Parsing -> Persistence / API

Результат разбора OCR текста ценника.
Плоский JSON объект: все 11 ключей присутствуют всегда, отсутствующие
значения сериализуются как null.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


BARCODE_LENGTHS = (8, 12, 13)


class ParsedData(BaseModel):
    """
    Структурированный результат разбора ценника.

    Инварианты:
    - price is None  =>  original_price is None
    - original_price задан только при is_promo и >= 2 кандидатах
    - price и discount_percent в границах, заданных детекторам
    - currency / currency_symbol заполнены всегда
    - barcode, если есть, состоит из 8, 12 или 13 цифр (без проверки checksum)
    """

    price: Optional[float] = Field(None, description="Текущая цена")
    original_price: Optional[float] = Field(
        None, alias="originalPrice",
        description="Цена до акции (только для промо)"
    )
    price_per_unit: Optional[float] = Field(
        None, alias="pricePerUnit",
        description="Минимальный кандидат при нескольких ценах"
    )
    currency: str = Field(..., min_length=1, description="ISO код валюты")
    currency_symbol: str = Field(..., min_length=1, alias="currencySymbol", description="Символ валюты")
    unit: Optional[str] = Field(None, description="Единица измерения (кг, шт, л, г, мл, уп)")
    barcode: Optional[str] = Field(None, description="EAN-13 / EAN-8 / UPC-A")
    is_promo: bool = Field(False, alias="isPromo", description="Акционный ценник")
    promo_type: Optional[str] = Field(None, alias="promoType", description="Тип акции")
    discount_percent: Optional[int] = Field(
        None, alias="discountPercent",
        description="Процент скидки"
    )
    raw_text: str = Field(..., alias="rawText", description="Исходный OCR текст без изменений")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("barcode")
    @classmethod
    def validate_barcode(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and (not (v.isascii() and v.isdigit()) or len(v) not in BARCODE_LENGTHS):
            raise ValueError(f"Barcode must be 8, 12 or 13 digits, got: {v!r}")
        return v

    @field_validator("original_price")
    @classmethod
    def validate_original_price(cls, v: Optional[float], info) -> Optional[float]:
        if v is not None and info.data.get("price") is None:
            raise ValueError("originalPrice requires price")
        return v

    def to_dict(self) -> Dict[str, Any]:
        """JSON-представление с camelCase ключами (ключи не опускаются)."""
        return self.model_dump(by_alias=True)


class ExtractedData(ParsedData):
    """ParsedData + название товара (хранится в записи о сканировании)."""

    product_name: str = Field(..., alias="productName", description="Название товара")
