"""
Decimal Operation Errors

Закрытое множество причин, по которым checked-операция не может вернуть
валидный результат. Ошибка не несёт payload кроме kind.
"""

from enum import Enum
from typing import Final


class DecimalErrorKind(str, Enum):
    """Причина отказа checked-операции"""

    OVERFLOW = "overflow"
    UNDERFLOW = "underflow"
    DIVISION_BY_ZERO = "division_by_zero"
    DECIMAL_OVERFLOW = "decimal_overflow"


_MESSAGES: Final[dict[DecimalErrorKind, str]] = {
    DecimalErrorKind.OVERFLOW: "An overflow occurred during the operation.",
    DecimalErrorKind.UNDERFLOW: "An underflow occurred during the operation.",
    DecimalErrorKind.DIVISION_BY_ZERO: "A division by zero occurred during the operation.",
    DecimalErrorKind.DECIMAL_OVERFLOW: "The decimal count overflowed during the operation.",
}


class DecimalOperationError(ArithmeticError):
    """
    Checked decimal-операция не может дать результат.

    - OVERFLOW: сложение, вычитание, умножение или rescale превысили max ширины
    - UNDERFLOW: вычитание дало бы отрицательный результат
    - DIVISION_BY_ZERO: нулевой делитель в div/rem
    - DECIMAL_OVERFLOW: счётчик decimals или показатель 10^n не помещается

    Examples:
        >>> err = DecimalOperationError(DecimalErrorKind.UNDERFLOW)
        >>> err.kind
        <DecimalErrorKind.UNDERFLOW: 'underflow'>
    """

    def __init__(self, kind: DecimalErrorKind):
        self.kind = DecimalErrorKind(kind)
        super().__init__(_MESSAGES[self.kind])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecimalOperationError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __reduce__(self):
        return (self.__class__, (self.kind,))

    def __repr__(self) -> str:
        return f"DecimalOperationError({self.kind.name})"
