"""
NumericProfile — Профиль отображения числа

Immutable Pydantic модель, объединяющая результаты классификации,
порядка величины, ближайшей степени 10 и числа значащих знаков.

Sentinel-значения числового ядра (ORDER_UNDEFINED, DECIMALS_UNDEFINED)
на этой границе заменены на None: слой отображения получает явный
Optional вместо "магических" целых.
to_contract() отдаёт JSON-совместимый dict для слоя отображения.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from src.core.math.float_classification import (
    FloatCategory,
    classify_float,
    finite_or_none,
)
from src.core.math.magnitude import (
    ORDER_UNDEFINED,
    closest_power_of_ten,
    try_order_of_magnitude,
)
from src.core.math.significant_decimals import (
    MAX_SIGNIFICANT_DIGITS,
    try_significant_decimals,
)


# =============================================================================
# NUMERIC PROFILE MODEL
# =============================================================================


class NumericProfile(BaseModel):
    """
    Профиль значения для выбора формата отображения.

    Immutable модель (frozen=True). Строится через from_value().
    """

    value: float = Field(..., description="Исходное значение (может быть NaN/Inf)")
    category: FloatCategory = Field(..., description="Категория значения")
    order: Optional[int] = Field(
        None, description="Десятичный порядок (None если не определён)"
    )
    closest_power_of_ten: float = Field(
        ..., description="Ближайшая степень 10 (pass-through для особых значений)"
    )
    significant_decimals: Optional[int] = Field(
        None,
        ge=0,
        le=MAX_SIGNIFICANT_DIGITS,
        description="Знаков после запятой (None для NaN)",
    )

    model_config = {"frozen": True}

    @field_validator("order")
    @classmethod
    def validate_order_not_sentinel(cls, v: Optional[int]) -> Optional[int]:
        """Sentinel порядка не допускается: неопределённый порядок — это None."""
        if v == ORDER_UNDEFINED:
            raise ValueError("order must be None when undefined, not ORDER_UNDEFINED")
        return v

    @classmethod
    def from_value(cls, value: float) -> "NumericProfile":
        """
        Построение профиля из значения.

        Args:
            value: Любое значение float

        Returns:
            NumericProfile с результатами всех трёх функций ядра
        """
        value = float(value)
        return cls(
            value=value,
            category=classify_float(value),
            order=try_order_of_magnitude(value),
            closest_power_of_ten=closest_power_of_ten(value),
            significant_decimals=try_significant_decimals(value),
        )

    def has_order(self) -> bool:
        """True если порядок величины определён (только NORMAL значения)."""
        return self.order is not None

    def to_contract(self) -> Dict[str, Any]:
        """
        Сериализация в JSON-совместимый dict.

        NaN/Inf не являются числами JSON, поэтому заменяются на None.

        Returns:
            JSON-совместимый dict
        """
        return {
            "value": finite_or_none(self.value),
            "category": self.category.value,
            "order": self.order,
            "closest_power_of_ten": finite_or_none(self.closest_power_of_ten),
            "significant_decimals": self.significant_decimals,
        }
