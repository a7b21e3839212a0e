"""
Unsigned Widths — Fixed-Width Unsigned Integer Primitives

Эмуляция беззнаковых целых фиксированной ширины (u8 … u128) поверх
Python int, который сам по себе не ограничен.

Модуль предоставляет:
- Реестр поддерживаемых ширин (U8, U16, U32, U64, U128, USIZE)
- Checked-примитивы: результат или None при overflow/underflow/делении на ноль
- Wrapping-примитивы: результат по модулю 2**bits (native release semantics)
- Native деление: ZeroDivisionError при нулевом делителе

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Checked-примитивы никогда не возвращают значение вне [0, max_value]
2. Wrapping-примитивы всегда возвращают значение в [0, max_value]
3. Объекты ширин неизменяемы (frozen dataclass) и разделяемы между потоками
"""

from dataclasses import dataclass
from typing import Final, Optional, Protocol, runtime_checkable

# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

# Основание десятичной шкалы
DECIMAL_BASE: Final[int] = 10


# =============================================================================
# CAPABILITY PROTOCOL
# =============================================================================


@runtime_checkable
class CheckedArithmetic(Protocol):
    """
    Набор примитивов, которого достаточно decimal-движку.

    Любой объект с этими методами может использоваться как ширина.
    """

    name: str
    bits: int

    @property
    def max_value(self) -> int: ...

    def contains(self, value: int) -> bool: ...

    def checked_add(self, a: int, b: int) -> Optional[int]: ...

    def checked_sub(self, a: int, b: int) -> Optional[int]: ...

    def checked_mul(self, a: int, b: int) -> Optional[int]: ...

    def checked_div(self, a: int, b: int) -> Optional[int]: ...

    def checked_rem(self, a: int, b: int) -> Optional[int]: ...

    def checked_pow(self, base: int, exponent: int) -> Optional[int]: ...

    def wrapping_add(self, a: int, b: int) -> int: ...

    def wrapping_sub(self, a: int, b: int) -> int: ...

    def wrapping_mul(self, a: int, b: int) -> int: ...

    def wrapping_pow(self, base: int, exponent: int) -> int: ...

    def div(self, a: int, b: int) -> int: ...

    def rem(self, a: int, b: int) -> int: ...


# =============================================================================
# UNSIGNED WIDTH
# =============================================================================


@dataclass(frozen=True)
class UnsignedWidth:
    """
    Беззнаковое целое фиксированной ширины.

    Операнды должны лежать в [0, max_value]; проверку входов выполняет
    вызывающий код (decimal-движок валидирует аргументы на границе API).

    Examples:
        >>> U8.checked_add(250, 5)
        255
        >>> U8.checked_add(250, 6) is None
        True
        >>> U8.wrapping_add(250, 6)
        0
    """

    name: str
    bits: int

    def __post_init__(self) -> None:
        if self.bits <= 0:
            raise ValueError(f"bits must be positive, got {self.bits}")

    @property
    def max_value(self) -> int:
        """Максимальное представимое значение: 2**bits - 1"""
        return (1 << self.bits) - 1

    @property
    def modulus(self) -> int:
        return 1 << self.bits

    def contains(self, value: int) -> bool:
        """True если value представимо в данной ширине"""
        return 0 <= value <= self.max_value

    def _fit(self, value: int) -> Optional[int]:
        return value if self.contains(value) else None

    def _wrap(self, value: int) -> int:
        return value & self.max_value

    # -------------------------------------------------------------------------
    # Checked
    # -------------------------------------------------------------------------

    def checked_add(self, a: int, b: int) -> Optional[int]:
        """a + b или None при overflow"""
        return self._fit(a + b)

    def checked_sub(self, a: int, b: int) -> Optional[int]:
        """a - b или None если результат < 0"""
        return self._fit(a - b)

    def checked_mul(self, a: int, b: int) -> Optional[int]:
        """a * b или None при overflow"""
        return self._fit(a * b)

    def checked_div(self, a: int, b: int) -> Optional[int]:
        """a // b или None при b == 0"""
        if b == 0:
            return None
        return a // b

    def checked_rem(self, a: int, b: int) -> Optional[int]:
        """a % b или None при b == 0"""
        if b == 0:
            return None
        return a % b

    def checked_pow(self, base: int, exponent: int) -> Optional[int]:
        """
        base ** exponent или None при overflow.

        Для base >= 2 результат растёт монотонно, поэтому большие показатели
        отсекаются по bit_length без вычисления огромного int.
        """
        if exponent < 0:
            raise ValueError(f"exponent must be non-negative, got {exponent}")

        if base >= 2 and exponent * (base.bit_length() - 1) > self.bits:
            return None

        return self._fit(base**exponent)

    # -------------------------------------------------------------------------
    # Wrapping
    # -------------------------------------------------------------------------

    def wrapping_add(self, a: int, b: int) -> int:
        return self._wrap(a + b)

    def wrapping_sub(self, a: int, b: int) -> int:
        return self._wrap(a - b)

    def wrapping_mul(self, a: int, b: int) -> int:
        return self._wrap(a * b)

    def wrapping_pow(self, base: int, exponent: int) -> int:
        if exponent < 0:
            raise ValueError(f"exponent must be non-negative, got {exponent}")
        return pow(base, exponent, self.modulus)

    # -------------------------------------------------------------------------
    # Native division (ZeroDivisionError при b == 0)
    # -------------------------------------------------------------------------

    def div(self, a: int, b: int) -> int:
        return a // b

    def rem(self, a: int, b: int) -> int:
        return a % b

    def __str__(self) -> str:
        return self.name


# =============================================================================
# РЕЕСТР ШИРИН
# =============================================================================

U8: Final[UnsignedWidth] = UnsignedWidth("u8", 8)
U16: Final[UnsignedWidth] = UnsignedWidth("u16", 16)
U32: Final[UnsignedWidth] = UnsignedWidth("u32", 32)
U64: Final[UnsignedWidth] = UnsignedWidth("u64", 64)
U128: Final[UnsignedWidth] = UnsignedWidth("u128", 128)

# Машинное слово (64-bit платформы)
USIZE: Final[UnsignedWidth] = UnsignedWidth("usize", 64)

# Ширина по умолчанию для магнитуд
DEFAULT_WIDTH: Final[UnsignedWidth] = U64

# Счётчик десятичных знаков (decimals) хранится в u32
DECIMALS_WIDTH: Final[UnsignedWidth] = U32

SUPPORTED_WIDTHS: Final[dict[str, UnsignedWidth]] = {
    width.name: width for width in (U8, U16, U32, U64, U128, USIZE)
}


def get_width(name: str) -> UnsignedWidth:
    """
    Поиск ширины по имени (регистр не важен).

    Args:
        name: Имя ширины, например "u32" или "U64"

    Returns:
        Соответствующий UnsignedWidth

    Raises:
        ValueError: Если ширина не поддерживается
    """
    try:
        return SUPPORTED_WIDTHS[name.lower()]
    except KeyError:
        supported = ", ".join(SUPPORTED_WIDTHS)
        raise ValueError(f"Unsupported width {name!r}, expected one of: {supported}") from None
