"""
Тесты для модуля Unsigned Widths

Проверяет:
1. Границы ширин (max_value, contains)
2. Checked-примитивы: None при overflow/underflow/делении на ноль
3. Wrapping-примитивы: результат по модулю 2**bits
4. Реестр ширин и get_width
"""

import pytest

from src.core.math.widths import (
    DECIMALS_WIDTH,
    DEFAULT_WIDTH,
    SUPPORTED_WIDTHS,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    CheckedArithmetic,
    UnsignedWidth,
    get_width,
)


class TestWidthBounds:
    """Тесты границ ширин"""

    @pytest.mark.parametrize(
        "width, expected_max",
        [
            (U8, 255),
            (U16, 65_535),
            (U32, 4_294_967_295),
            (U64, 18_446_744_073_709_551_615),
            (U128, 2**128 - 1),
            (USIZE, 2**64 - 1),
        ],
    )
    def test_max_value(self, width: UnsignedWidth, expected_max: int) -> None:
        """max_value = 2**bits - 1"""
        assert width.max_value == expected_max

    def test_contains(self) -> None:
        """contains проверяет диапазон [0, max_value]"""
        assert U8.contains(0)
        assert U8.contains(255)
        assert not U8.contains(256)
        assert not U8.contains(-1)

    def test_invalid_bits_raises(self) -> None:
        """Нулевая ширина запрещена"""
        with pytest.raises(ValueError, match="bits must be positive"):
            UnsignedWidth("u0", 0)

    def test_widths_are_immutable(self) -> None:
        """Ширины неизменяемы (frozen dataclass)"""
        with pytest.raises(AttributeError):
            U32.bits = 16  # type: ignore[misc]

    def test_satisfies_protocol(self) -> None:
        """UnsignedWidth реализует CheckedArithmetic"""
        assert isinstance(U64, CheckedArithmetic)


class TestCheckedPrimitives:
    """Тесты checked-примитивов"""

    def test_checked_add(self) -> None:
        assert U8.checked_add(200, 55) == 255
        assert U8.checked_add(200, 56) is None

    def test_checked_sub(self) -> None:
        assert U32.checked_sub(10, 10) == 0
        assert U32.checked_sub(10, 11) is None

    def test_checked_mul(self) -> None:
        assert U16.checked_mul(255, 257) == 65_535
        assert U16.checked_mul(256, 256) is None

    def test_checked_div_and_rem(self) -> None:
        assert U32.checked_div(7, 2) == 3
        assert U32.checked_rem(7, 2) == 1
        assert U32.checked_div(7, 0) is None
        assert U32.checked_rem(7, 0) is None

    def test_checked_pow(self) -> None:
        assert U64.checked_pow(10, 0) == 1
        assert U64.checked_pow(10, 19) == 10**19
        assert U64.checked_pow(10, 20) is None
        assert U32.checked_pow(10, 9) == 1_000_000_000
        assert U32.checked_pow(10, 10) is None

    def test_checked_pow_huge_exponent(self) -> None:
        """Огромный показатель отсекается без вычисления 10**n"""
        assert U128.checked_pow(10, 4_294_967_295) is None

    def test_checked_pow_trivial_bases(self) -> None:
        assert U8.checked_pow(1, 10_000) == 1
        assert U8.checked_pow(0, 5) == 0

    def test_checked_pow_negative_exponent_raises(self) -> None:
        with pytest.raises(ValueError, match="exponent must be non-negative"):
            U8.checked_pow(10, -1)


class TestWrappingPrimitives:
    """Тесты wrapping-примитивов"""

    def test_wrapping_add(self) -> None:
        assert U8.wrapping_add(250, 10) == 4

    def test_wrapping_sub(self) -> None:
        assert U8.wrapping_sub(0, 1) == 255
        assert U64.wrapping_sub(100, 200) == 2**64 - 100

    def test_wrapping_mul(self) -> None:
        assert U32.wrapping_mul(U32.max_value, 2) == U32.max_value - 1

    def test_wrapping_pow(self) -> None:
        assert U8.wrapping_pow(10, 2) == 100
        assert U8.wrapping_pow(10, 3) == 1000 % 256

    def test_native_division_by_zero(self) -> None:
        """div/rem используют native ZeroDivisionError"""
        with pytest.raises(ZeroDivisionError):
            U32.div(1, 0)
        with pytest.raises(ZeroDivisionError):
            U32.rem(1, 0)


class TestWidthRegistry:
    """Тесты реестра ширин"""

    def test_defaults(self) -> None:
        assert DEFAULT_WIDTH is U64
        assert DECIMALS_WIDTH is U32

    def test_registry_contents(self) -> None:
        assert set(SUPPORTED_WIDTHS) == {"u8", "u16", "u32", "u64", "u128", "usize"}

    def test_get_width_case_insensitive(self) -> None:
        assert get_width("u32") is U32
        assert get_width("U128") is U128
        assert get_width("usize") is USIZE

    def test_get_width_unknown_raises(self) -> None:
        with pytest.raises(ValueError, match="Unsupported width"):
            get_width("i32")
