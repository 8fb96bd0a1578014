"""
DTO контракт: история цен товара.

PricePoint создаётся из ParsedData и только добавляется в конец истории.
Product хранит историю как неизменяемый tuple (старые точки первыми).
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config.settings import DEFAULT_CURRENCY


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PricePoint(BaseModel):
    """Одно наблюдение цены товара."""

    price: float = Field(..., description="Цена на момент сканирования")
    original_price: Optional[float] = Field(None, alias="originalPrice", description="Цена до акции")
    currency: str = Field(DEFAULT_CURRENCY, description="ISO код валюты")
    is_promo: bool = Field(False, alias="isPromo", description="Акционная цена")
    scanned_at: datetime = Field(default_factory=_utcnow, alias="scannedAt", description="Время сканирования")
    store: Optional[str] = Field(None, description="Магазин")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("store")
    @classmethod
    def strip_store(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class Product(BaseModel):
    """
    Товар с историей цен.

    Агрегаты не хранятся в модели, см. src.history.aggregator.
    """

    barcode: Optional[str] = Field(None, description="Штрихкод товара")
    name: str = Field(..., min_length=1, description="Название товара")
    brand: Optional[str] = Field(None, description="Бренд")
    category: Optional[str] = Field(None, description="Категория")
    unit: Optional[str] = Field(None, description="Единица измерения")
    price_history: Tuple[PricePoint, ...] = Field(
        default_factory=tuple, alias="priceHistory", description="История цен (старые первыми)"
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class PriceStats(BaseModel):
    """Сводная статистика по истории цен."""

    min: Optional[float] = None
    max: Optional[float] = None
    avg: Optional[float] = None
    count: int = 0

    model_config = ConfigDict(frozen=True)


class ProductSummary(BaseModel):
    """Товар + агрегаты для ответа API."""

    product: Product
    current_price: Optional[PricePoint] = Field(None, alias="currentPrice")
    min_price: Optional[float] = Field(None, alias="minPrice")
    max_price: Optional[float] = Field(None, alias="maxPrice")
    avg_price: Optional[float] = Field(None, alias="avgPrice")
    price_count: int = Field(0, alias="priceCount")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        data = self.product.to_dict()
        data.update(self.model_dump(by_alias=True, mode="json", exclude={"product"}))
        return data


class ChartPoint(BaseModel):
    """Точка графика цены."""

    date: datetime
    price: float
    original_price: Optional[float] = Field(None, alias="originalPrice")
    is_promo: bool = Field(False, alias="isPromo")
    store: Optional[str] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class PriceHistoryReport(BaseModel):
    """Окно истории цен товара + статистика по всей истории."""

    product_name: str = Field(..., alias="productName")
    barcode: Optional[str] = None
    data: List[ChartPoint] = Field(default_factory=list)
    stats: PriceStats

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class ProductComparison(BaseModel):
    """Строка сравнения товаров."""

    name: str
    barcode: Optional[str] = None
    brand: Optional[str] = None
    current_price: Optional[PricePoint] = Field(None, alias="currentPrice")
    min_price: Optional[float] = Field(None, alias="minPrice")
    max_price: Optional[float] = Field(None, alias="maxPrice")
    avg_price: Optional[float] = Field(None, alias="avgPrice")
    price_history: List[PricePoint] = Field(default_factory=list, alias="priceHistory")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")
