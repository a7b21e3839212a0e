"""
Unchecked Decimal Operations

Те же пять операций, что и в checked_decimals, но без DecimalOperationError:
арифметика выполняется с wrapping-семантикой фиксированной ширины
(результат по модулю 2**bits), как native release-mode целые.

ВНИМАНИЕ: подходит только когда вызывающий код сам ограничил входы.
Для гарантированной корректности используйте checked-варианты.

Поведение на границах:
- add/sub/mul: wrap по модулю 2**bits
- alignment и rescale делимого: 10^n и произведение тоже wrap-аются
- сумма decimals в mul: wrap в счётчике u32
- div/rem на ноль: native ZeroDivisionError
"""

from src.core.math.decimal_alignment import (
    DecimalResult,
    validate_operands,
    wrapping_align_decimals,
    wrapping_scale_up,
)
from src.core.math.widths import DECIMALS_WIDTH, DEFAULT_WIDTH, CheckedArithmetic


def add_decimals(
    a: int,
    b: int,
    a_decimals: int,
    b_decimals: int,
    width: CheckedArithmetic = DEFAULT_WIDTH,
) -> DecimalResult:
    """
    Сложение с wrapping-семантикой.

    Examples:
        >>> add_decimals(1_0000, 2_00, 4, 2)
        DecimalResult(value=30000, decimals=4)
    """
    aligned = wrapping_align_decimals(a, b, a_decimals, b_decimals, width)
    return DecimalResult(width.wrapping_add(aligned.a, aligned.b), aligned.decimals)


def sub_decimals(
    a: int,
    b: int,
    a_decimals: int,
    b_decimals: int,
    width: CheckedArithmetic = DEFAULT_WIDTH,
) -> DecimalResult:
    """
    Вычитание с wrapping-семантикой.

    Examples:
        >>> sub_decimals(0, 1, 0, 0)
        DecimalResult(value=18446744073709551615, decimals=0)
    """
    aligned = wrapping_align_decimals(a, b, a_decimals, b_decimals, width)
    return DecimalResult(width.wrapping_sub(aligned.a, aligned.b), aligned.decimals)


def mul_decimals(
    a: int,
    b: int,
    a_decimals: int,
    b_decimals: int,
    width: CheckedArithmetic = DEFAULT_WIDTH,
) -> DecimalResult:
    """
    Умножение с wrapping-семантикой; сумма decimals wrap-ается в DECIMALS_WIDTH (u32).

    Examples:
        >>> mul_decimals(3_0000, 2_00, 4, 2)
        DecimalResult(value=6000000, decimals=6)
    """
    validate_operands(a, b, a_decimals, b_decimals, width)
    return DecimalResult(
        width.wrapping_mul(a, b),
        DECIMALS_WIDTH.wrapping_add(a_decimals, b_decimals),
    )


def div_decimals(
    a: int,
    b: int,
    a_decimals: int,
    b_decimals: int,
    width: CheckedArithmetic = DEFAULT_WIDTH,
) -> DecimalResult:
    """
    Деление: (a * 10^b_decimals) // b на шкале a_decimals.

    Raises:
        ZeroDivisionError: при b == 0 (native поведение)
    """
    validate_operands(a, b, a_decimals, b_decimals, width)
    dividend = wrapping_scale_up(a, b_decimals, width)
    return DecimalResult(width.div(dividend, b), a_decimals)


def rem_decimals(
    a: int,
    b: int,
    a_decimals: int,
    b_decimals: int,
    width: CheckedArithmetic = DEFAULT_WIDTH,
) -> DecimalResult:
    """
    Остаток: (a * 10^b_decimals) % b на шкале a_decimals.

    Raises:
        ZeroDivisionError: при b == 0 (native поведение)
    """
    validate_operands(a, b, a_decimals, b_decimals, width)
    dividend = wrapping_scale_up(a, b_decimals, width)
    return DecimalResult(width.rem(dividend, b), a_decimals)


class DecimalOperations:
    """Unchecked capability set, привязанный к одной ширине"""

    def __init__(self, width: CheckedArithmetic = DEFAULT_WIDTH):
        self.width = width

    def add_decimals(self, a: int, b: int, a_decimals: int, b_decimals: int) -> DecimalResult:
        return add_decimals(a, b, a_decimals, b_decimals, width=self.width)

    def sub_decimals(self, a: int, b: int, a_decimals: int, b_decimals: int) -> DecimalResult:
        return sub_decimals(a, b, a_decimals, b_decimals, width=self.width)

    def mul_decimals(self, a: int, b: int, a_decimals: int, b_decimals: int) -> DecimalResult:
        return mul_decimals(a, b, a_decimals, b_decimals, width=self.width)

    def div_decimals(self, a: int, b: int, a_decimals: int, b_decimals: int) -> DecimalResult:
        return div_decimals(a, b, a_decimals, b_decimals, width=self.width)

    def rem_decimals(self, a: int, b: int, a_decimals: int, b_decimals: int) -> DecimalResult:
        return rem_decimals(a, b, a_decimals, b_decimals, width=self.width)

    def __repr__(self) -> str:
        return f"DecimalOperations({self.width.name})"


def ops_for(width: CheckedArithmetic) -> DecimalOperations:
    """Unchecked capability set для ширины"""
    return DecimalOperations(width)
