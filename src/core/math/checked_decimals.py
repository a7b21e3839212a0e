"""
Checked Decimal Operations

Пять бинарных операций над scaled-значениями (add, sub, mul, div, rem),
каждая принимает (a, b, a_decimals, b_decimals) и возвращает
DecimalResult(value, decimals) либо поднимает DecimalOperationError.

ФОРМУЛЫ:
    add/sub: align → a' ± b',        decimals = max(a_decimals, b_decimals)
    mul:     a * b,                  decimals = a_decimals + b_decimals
    div:     (a * 10^b_decimals) // b, decimals = a_decimals
    rem:     (a * 10^b_decimals) %  b, decimals = a_decimals

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никаких wrap/saturate: любой выход за пределы ширины → DecimalOperationError
2. Нулевой делитель → DIVISION_BY_ZERO при любых decimals (проверка до rescale)
3. Деление усекает к нулю, режимы округления не поддерживаются
"""

import logging
from functools import wraps
from typing import Callable, Optional

from src.core.math.decimal_alignment import (
    DecimalResult,
    align_decimals,
    scale_up,
    validate_operands,
)
from src.core.math.decimal_errors import DecimalErrorKind, DecimalOperationError
from src.core.math.widths import DECIMALS_WIDTH, DEFAULT_WIDTH, CheckedArithmetic

logger = logging.getLogger(__name__)

DecimalOperation = Callable[..., DecimalResult]


def _require(value: Optional[int], kind: DecimalErrorKind) -> int:
    if value is None:
        raise DecimalOperationError(kind)
    return value


def _logged(operation: DecimalOperation) -> DecimalOperation:
    """Записывает отказ checked-операции в DEBUG лог и пробрасывает ошибку"""

    @wraps(operation)
    def wrapper(a, b, a_decimals, b_decimals, width=DEFAULT_WIDTH):
        try:
            return operation(a, b, a_decimals, b_decimals, width=width)
        except DecimalOperationError as e:
            logger.debug(
                "%s rejected on %s: %s (a_decimals=%s, b_decimals=%s)",
                operation.__name__,
                width.name,
                e.kind.value,
                a_decimals,
                b_decimals,
            )
            raise

    return wrapper


# =============================================================================
# ADD / SUB
# =============================================================================


@_logged
def add_decimals_checked(
    a: int,
    b: int,
    a_decimals: int,
    b_decimals: int,
    width: CheckedArithmetic = DEFAULT_WIDTH,
) -> DecimalResult:
    """
    Сложение двух scaled-значений.

    Args:
        a: Первая магнитуда
        b: Вторая магнитуда
        a_decimals: Шкала a
        b_decimals: Шкала b
        width: Ширина магнитуд (default: DEFAULT_WIDTH)

    Returns:
        DecimalResult(sum, max(a_decimals, b_decimals))

    Raises:
        DecimalOperationError: OVERFLOW при rescale или сложении,
            DECIMAL_OVERFLOW если 10^diff не помещается в ширину

    Examples:
        >>> add_decimals_checked(1_0000, 2_00, 4, 2)
        DecimalResult(value=30000, decimals=4)
    """
    aligned = align_decimals(a, b, a_decimals, b_decimals, width)
    total = _require(width.checked_add(aligned.a, aligned.b), DecimalErrorKind.OVERFLOW)
    return DecimalResult(total, aligned.decimals)


@_logged
def sub_decimals_checked(
    a: int,
    b: int,
    a_decimals: int,
    b_decimals: int,
    width: CheckedArithmetic = DEFAULT_WIDTH,
) -> DecimalResult:
    """
    Вычитание b из a.

    Raises:
        DecimalOperationError: UNDERFLOW если b' > a' после alignment,
            OVERFLOW / DECIMAL_OVERFLOW при rescale

    Examples:
        >>> sub_decimals_checked(3_0000, 2_00, 4, 2)
        DecimalResult(value=10000, decimals=4)
    """
    aligned = align_decimals(a, b, a_decimals, b_decimals, width)
    difference = _require(width.checked_sub(aligned.a, aligned.b), DecimalErrorKind.UNDERFLOW)
    return DecimalResult(difference, aligned.decimals)


# =============================================================================
# MUL
# =============================================================================


@_logged
def mul_decimals_checked(
    a: int,
    b: int,
    a_decimals: int,
    b_decimals: int,
    width: CheckedArithmetic = DEFAULT_WIDTH,
) -> DecimalResult:
    """
    Умножение: магнитуды перемножаются напрямую, шкалы складываются.

    Raises:
        DecimalOperationError: OVERFLOW если произведение > max_value,
            DECIMAL_OVERFLOW если a_decimals + b_decimals не помещается в u32

    Examples:
        >>> mul_decimals_checked(123_45, 45, 2, 2)
        DecimalResult(value=555525, decimals=4)
    """
    validate_operands(a, b, a_decimals, b_decimals, width)

    product = _require(width.checked_mul(a, b), DecimalErrorKind.OVERFLOW)
    decimals = _require(
        DECIMALS_WIDTH.checked_add(a_decimals, b_decimals),
        DecimalErrorKind.DECIMAL_OVERFLOW,
    )
    return DecimalResult(product, decimals)


# =============================================================================
# DIV / REM
# =============================================================================


def _scaled_dividend(
    a: int,
    b: int,
    a_decimals: int,
    b_decimals: int,
    width: CheckedArithmetic,
) -> int:
    validate_operands(a, b, a_decimals, b_decimals, width)

    if b == 0:
        raise DecimalOperationError(DecimalErrorKind.DIVISION_BY_ZERO)

    return scale_up(a, b_decimals, width)


@_logged
def div_decimals_checked(
    a: int,
    b: int,
    a_decimals: int,
    b_decimals: int,
    width: CheckedArithmetic = DEFAULT_WIDTH,
) -> DecimalResult:
    """
    Деление с сохранением точности: делимое предварительно умножается
    на 10^b_decimals, результат на шкале a_decimals.

    Raises:
        DecimalOperationError: DIVISION_BY_ZERO при b == 0,
            OVERFLOW / DECIMAL_OVERFLOW при rescale делимого

    Examples:
        >>> div_decimals_checked(123_45, 45, 2, 2)
        DecimalResult(value=27433, decimals=2)
    """
    dividend = _scaled_dividend(a, b, a_decimals, b_decimals, width)
    quotient = width.div(dividend, b)
    return DecimalResult(quotient, a_decimals)


@_logged
def rem_decimals_checked(
    a: int,
    b: int,
    a_decimals: int,
    b_decimals: int,
    width: CheckedArithmetic = DEFAULT_WIDTH,
) -> DecimalResult:
    """
    Остаток от деления; rescale делимого как в div_decimals_checked.

    Examples:
        >>> rem_decimals_checked(123_45, 45, 2, 2)
        DecimalResult(value=15, decimals=2)
    """
    dividend = _scaled_dividend(a, b, a_decimals, b_decimals, width)
    remainder = width.rem(dividend, b)
    return DecimalResult(remainder, a_decimals)


# =============================================================================
# CAPABILITY SET
# =============================================================================


class CheckedDecimalOperations:
    """Checked capability set, привязанный к одной ширине"""

    def __init__(self, width: CheckedArithmetic = DEFAULT_WIDTH):
        self.width = width

    def add_decimals_checked(self, a: int, b: int, a_decimals: int, b_decimals: int) -> DecimalResult:
        return add_decimals_checked(a, b, a_decimals, b_decimals, width=self.width)

    def sub_decimals_checked(self, a: int, b: int, a_decimals: int, b_decimals: int) -> DecimalResult:
        return sub_decimals_checked(a, b, a_decimals, b_decimals, width=self.width)

    def mul_decimals_checked(self, a: int, b: int, a_decimals: int, b_decimals: int) -> DecimalResult:
        return mul_decimals_checked(a, b, a_decimals, b_decimals, width=self.width)

    def div_decimals_checked(self, a: int, b: int, a_decimals: int, b_decimals: int) -> DecimalResult:
        return div_decimals_checked(a, b, a_decimals, b_decimals, width=self.width)

    def rem_decimals_checked(self, a: int, b: int, a_decimals: int, b_decimals: int) -> DecimalResult:
        return rem_decimals_checked(a, b, a_decimals, b_decimals, width=self.width)

    def __repr__(self) -> str:
        return f"CheckedDecimalOperations({self.width.name})"


def checked_ops_for(width: CheckedArithmetic) -> CheckedDecimalOperations:
    """Checked capability set для ширины"""
    return CheckedDecimalOperations(width)
