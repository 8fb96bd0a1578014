"""
DTO контракт: запись о сканировании ценника и сводная статистика сканов.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from config.settings import DEFAULT_VISION_MODEL
from .parsed_tag_dto import ExtractedData


class ScanRecord(BaseModel):
    """Аудит одного сканирования: исходный текст + результат разбора."""

    original_text: str = Field(..., alias="originalText", description="OCR текст от vision модели")
    extracted_data: ExtractedData = Field(..., alias="extractedData")
    model: str = Field(DEFAULT_VISION_MODEL, description="Vision модель, выдавшая текст")
    processing_time_ms: Optional[float] = Field(None, ge=0, alias="processingTime")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), alias="createdAt"
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True, protected_namespaces=())

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class ScanStats(BaseModel):
    """Сводка по набору сканов."""

    total_scans: int = Field(0, ge=0, alias="totalScans")
    avg_price: Optional[float] = Field(None, alias="avgPrice")
    promo_count: int = Field(0, ge=0, alias="promoCount")
    unique_products: int = Field(0, ge=0, alias="uniqueProducts")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
