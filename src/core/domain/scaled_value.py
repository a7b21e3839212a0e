"""
ScaledValue — неизменяемое scaled-значение

Immutable Pydantic модель пары (value, decimals) фиксированной ширины.
Удобная обёртка над checked-операциями из src.core.math; базовый API
на парах аргументов остаётся основным.
"""

from typing import Callable

from pydantic import BaseModel, Field, StrictInt, field_validator, model_validator

from src.core.math import (
    DECIMALS_WIDTH,
    DEFAULT_WIDTH,
    DecimalResult,
    UnsignedWidth,
    add_decimals_checked,
    div_decimals_checked,
    get_width,
    mul_decimals_checked,
    rem_decimals_checked,
    sub_decimals_checked,
)


class ScaledValue(BaseModel):
    """
    Значение value / 10^decimals.

    Все операции checked и возвращают новый экземпляр; ошибки
    пробрасываются как DecimalOperationError.
    """

    value: StrictInt = Field(..., ge=0, description="Магнитуда (беззнаковая)")
    decimals: StrictInt = Field(
        0, ge=0, le=DECIMALS_WIDTH.max_value, description="Количество дробных десятичных знаков"
    )
    width: str = Field(DEFAULT_WIDTH.name, description="Ширина магнитуды (u8 … u128, usize)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("width")
    @classmethod
    def validate_width_name(cls, v: str) -> str:
        """Имя ширины нормализуется к каноническому виду"""
        return get_width(v).name

    @model_validator(mode="after")
    def validate_value_fits_width(self) -> "ScaledValue":
        """Магнитуда должна помещаться в ширину"""
        width = get_width(self.width)
        if not width.contains(self.value):
            raise ValueError(
                f"value must be within [0, {width.max_value}] for {width.name}, got {self.value}"
            )
        return self

    @property
    def int_width(self) -> UnsignedWidth:
        return get_width(self.width)

    @classmethod
    def from_result(cls, result: DecimalResult, width: str = DEFAULT_WIDTH.name) -> "ScaledValue":
        return cls(value=result.value, decimals=result.decimals, width=width)

    def as_pair(self) -> DecimalResult:
        return DecimalResult(self.value, self.decimals)

    def _apply(self, operation: Callable[..., DecimalResult], other: "ScaledValue") -> "ScaledValue":
        if other.width != self.width:
            raise ValueError(f"Cannot combine {self.width} and {other.width} values")

        result = operation(self.value, other.value, self.decimals, other.decimals, width=self.int_width)
        return ScaledValue.from_result(result, self.width)

    def add(self, other: "ScaledValue") -> "ScaledValue":
        return self._apply(add_decimals_checked, other)

    def sub(self, other: "ScaledValue") -> "ScaledValue":
        return self._apply(sub_decimals_checked, other)

    def mul(self, other: "ScaledValue") -> "ScaledValue":
        return self._apply(mul_decimals_checked, other)

    def div(self, other: "ScaledValue") -> "ScaledValue":
        return self._apply(div_decimals_checked, other)

    def rem(self, other: "ScaledValue") -> "ScaledValue":
        return self._apply(rem_decimals_checked, other)
