"""
Decimal Alignment — приведение двух scaled-значений к общей шкале

Scaled-значение: пара (magnitude, decimals), представляющая
magnitude / 10^decimals.

Alignment:
    target_decimals = max(a_decimals, b_decimals)
    операнд с меньшим decimals умножается на 10^(target_decimals - decimals)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Checked alignment никогда не wrap-ается:
   - 10^n не помещается в ширину → DECIMAL_OVERFLOW
   - magnitude * 10^n > max_value → OVERFLOW
2. Wrapping alignment (unchecked путь) считает 10^n и произведение по модулю 2**bits
3. Входы валидируются на границе: int (не bool), в пределах ширины
"""

from typing import Callable, NamedTuple

from src.core.math.decimal_errors import DecimalErrorKind, DecimalOperationError
from src.core.math.widths import (
    DECIMAL_BASE,
    DECIMALS_WIDTH,
    DEFAULT_WIDTH,
    CheckedArithmetic,
)

# =============================================================================
# RESULT TYPES
# =============================================================================


class DecimalResult(NamedTuple):
    """Результат decimal-операции: (value, decimals)"""

    value: int
    decimals: int


class AlignedPair(NamedTuple):
    """Две магнитуды, выраженные на общей шкале decimals"""

    a: int
    b: int
    decimals: int


# =============================================================================
# ВАЛИДАЦИЯ ВХОДОВ
# =============================================================================


def _require_int(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def validate_magnitude(value: int, name: str, width: CheckedArithmetic = DEFAULT_WIDTH) -> None:
    """
    Валидация, что magnitude представима в ширине.

    Raises:
        TypeError: Если value не int
        ValueError: Если value вне [0, width.max_value]
    """
    _require_int(value, name)

    if not width.contains(value):
        raise ValueError(f"{name} must be within [0, {width.max_value}] for {width.name}, got {value}")


def validate_decimals(value: int, name: str) -> None:
    """
    Валидация счётчика decimals (u32).

    Raises:
        TypeError: Если value не int
        ValueError: Если value < 0 или не помещается в счётчик
    """
    _require_int(value, name)

    if not DECIMALS_WIDTH.contains(value):
        raise ValueError(
            f"{name} must be within [0, {DECIMALS_WIDTH.max_value}], got {value}"
        )


def validate_operands(
    a: int,
    b: int,
    a_decimals: int,
    b_decimals: int,
    width: CheckedArithmetic,
) -> None:
    """Валидация полного набора аргументов бинарной операции"""
    validate_magnitude(a, "a", width)
    validate_magnitude(b, "b", width)
    validate_decimals(a_decimals, "a_decimals")
    validate_decimals(b_decimals, "b_decimals")


# =============================================================================
# HELPERS: разница шкал и степени десяти
# =============================================================================


def decimal_difference(a_decimals: int, b_decimals: int) -> int:
    """
    Абсолютная разница шкал.

    Examples:
        >>> decimal_difference(4, 2)
        2
        >>> decimal_difference(2, 4)
        2
    """
    return abs(a_decimals - b_decimals)


def pow10(exponent: int, width: CheckedArithmetic = DEFAULT_WIDTH) -> int:
    """
    Checked 10^exponent в заданной ширине.

    Raises:
        DecimalOperationError(DECIMAL_OVERFLOW): если 10^exponent > max_value

    Examples:
        >>> pow10(2)
        100
        >>> pow10(19)
        10000000000000000000
    """
    factor = width.checked_pow(DECIMAL_BASE, exponent)
    if factor is None:
        raise DecimalOperationError(DecimalErrorKind.DECIMAL_OVERFLOW)
    return factor


def scale_up(value: int, exponent: int, width: CheckedArithmetic = DEFAULT_WIDTH) -> int:
    """
    Checked rescale: value * 10^exponent.

    Raises:
        DecimalOperationError(DECIMAL_OVERFLOW): если 10^exponent не помещается
        DecimalOperationError(OVERFLOW): если произведение не помещается
    """
    if exponent == 0:
        return value

    scaled = width.checked_mul(value, pow10(exponent, width))
    if scaled is None:
        raise DecimalOperationError(DecimalErrorKind.OVERFLOW)
    return scaled


def wrapping_scale_up(value: int, exponent: int, width: CheckedArithmetic = DEFAULT_WIDTH) -> int:
    """value * 10^exponent по модулю 2**bits"""
    if exponent == 0:
        return value
    return width.wrapping_mul(value, width.wrapping_pow(DECIMAL_BASE, exponent))


# =============================================================================
# ALIGNMENT
# =============================================================================


def _align(
    a: int,
    b: int,
    a_decimals: int,
    b_decimals: int,
    width: CheckedArithmetic,
    scale: Callable[[int, int, CheckedArithmetic], int],
) -> AlignedPair:
    diff = decimal_difference(a_decimals, b_decimals)

    if a_decimals > b_decimals:
        return AlignedPair(a, scale(b, diff, width), a_decimals)

    return AlignedPair(scale(a, diff, width), b, b_decimals)


def align_decimals(
    a: int,
    b: int,
    a_decimals: int,
    b_decimals: int,
    width: CheckedArithmetic = DEFAULT_WIDTH,
) -> AlignedPair:
    """
    Checked приведение двух значений к общей шкале max(a_decimals, b_decimals).

    Args:
        a: Первая магнитуда
        b: Вторая магнитуда
        a_decimals: Шкала a
        b_decimals: Шкала b
        width: Ширина магнитуд (default: DEFAULT_WIDTH)

    Returns:
        AlignedPair(a_aligned, b_aligned, target_decimals)

    Raises:
        DecimalOperationError: OVERFLOW / DECIMAL_OVERFLOW при rescale
        TypeError, ValueError: Невалидные аргументы

    Examples:
        >>> align_decimals(1_0000, 2_00, 4, 2)
        AlignedPair(a=10000, b=20000, decimals=4)
    """
    validate_operands(a, b, a_decimals, b_decimals, width)
    return _align(a, b, a_decimals, b_decimals, width, scale_up)


def wrapping_align_decimals(
    a: int,
    b: int,
    a_decimals: int,
    b_decimals: int,
    width: CheckedArithmetic = DEFAULT_WIDTH,
) -> AlignedPair:
    """
    Alignment с wrapping-семантикой (unchecked путь).

    Rescale выполняется по модулю 2**bits, ошибки не поднимаются.
    """
    validate_operands(a, b, a_decimals, b_decimals, width)
    return _align(a, b, a_decimals, b_decimals, width, wrapping_scale_up)
