"""
Тесты для Decimal Alignment

Проверяет:
1. Выбор целевой шкалы max(a_decimals, b_decimals)
2. Rescale операнда с меньшей шкалой
3. OVERFLOW / DECIMAL_OVERFLOW при checked rescale
4. Wrapping rescale для unchecked пути
5. Валидацию входов
"""

import pytest

from src.core.math.decimal_alignment import (
    AlignedPair,
    align_decimals,
    decimal_difference,
    pow10,
    scale_up,
    validate_decimals,
    validate_magnitude,
    wrapping_align_decimals,
    wrapping_scale_up,
)
from src.core.math.decimal_errors import DecimalErrorKind, DecimalOperationError
from src.core.math.widths import U8, U32, U64, U128

# =============================================================================
# HELPERS
# =============================================================================


class TestHelpers:
    """Тесты decimal_difference, pow10, scale_up"""

    def test_decimal_difference_symmetric(self) -> None:
        assert decimal_difference(4, 2) == 2
        assert decimal_difference(2, 4) == 2
        assert decimal_difference(3, 3) == 0

    def test_pow10(self) -> None:
        assert pow10(0, U8) == 1
        assert pow10(2, U8) == 100
        assert pow10(38, U128) == 10**38

    def test_pow10_not_representable(self) -> None:
        """10^3 не помещается в u8 → DECIMAL_OVERFLOW"""
        with pytest.raises(DecimalOperationError) as exc_info:
            pow10(3, U8)
        assert exc_info.value.kind == DecimalErrorKind.DECIMAL_OVERFLOW

    def test_scale_up(self) -> None:
        assert scale_up(2_00, 2, U64) == 2_0000
        assert scale_up(7, 0, U8) == 7

    def test_scale_up_overflow(self) -> None:
        """Фактор помещается, произведение нет → OVERFLOW"""
        with pytest.raises(DecimalOperationError) as exc_info:
            scale_up(3, 2, U8)
        assert exc_info.value.kind == DecimalErrorKind.OVERFLOW

    def test_scale_up_zero_exponent_never_fails(self) -> None:
        assert scale_up(U8.max_value, 0, U8) == U8.max_value

    def test_wrapping_scale_up(self) -> None:
        assert wrapping_scale_up(3, 2, U8) == 300 % 256
        assert wrapping_scale_up(5, 0, U8) == 5


# =============================================================================
# ALIGNMENT
# =============================================================================


class TestAlignDecimals:
    """Тесты align_decimals"""

    def test_left_has_more_decimals(self) -> None:
        aligned = align_decimals(1_0000, 2_00, 4, 2, U64)
        assert aligned == AlignedPair(1_0000, 2_0000, 4)

    def test_right_has_more_decimals(self) -> None:
        aligned = align_decimals(2_00, 1_0000, 2, 4, U64)
        assert aligned == AlignedPair(2_0000, 1_0000, 4)

    def test_equal_decimals_unchanged(self) -> None:
        aligned = align_decimals(123_45, 45, 2, 2, U32)
        assert aligned == AlignedPair(123_45, 45, 2)

    def test_result_unpacks_as_tuple(self) -> None:
        a, b, decimals = align_decimals(1, 1, 0, 1, U32)
        assert (a, b, decimals) == (10, 1, 1)

    def test_rescale_overflow(self) -> None:
        """Rescale за пределами ширины → OVERFLOW, без wrap"""
        with pytest.raises(DecimalOperationError) as exc_info:
            align_decimals(U32.max_value, 1, 0, 1, U32)
        assert exc_info.value.kind == DecimalErrorKind.OVERFLOW

    def test_exponent_not_representable(self) -> None:
        """10^20 не помещается в u64 → DECIMAL_OVERFLOW"""
        with pytest.raises(DecimalOperationError) as exc_info:
            align_decimals(1, 1, 0, 20, U64)
        assert exc_info.value.kind == DecimalErrorKind.DECIMAL_OVERFLOW

    def test_zero_magnitude_with_huge_exponent(self) -> None:
        """Даже для 0 показатель должен быть представим"""
        with pytest.raises(DecimalOperationError) as exc_info:
            align_decimals(0, 1, 0, 100, U64)
        assert exc_info.value.kind == DecimalErrorKind.DECIMAL_OVERFLOW


class TestWrappingAlignDecimals:
    """Тесты wrapping_align_decimals"""

    def test_matches_checked_when_no_overflow(self) -> None:
        assert wrapping_align_decimals(1_0000, 2_00, 4, 2, U64) == align_decimals(
            1_0000, 2_00, 4, 2, U64
        )

    def test_wraps_on_overflow(self) -> None:
        aligned = wrapping_align_decimals(U32.max_value, 1, 0, 1, U32)
        assert aligned == AlignedPair((U32.max_value * 10) % 2**32, 1, 1)

    def test_huge_exponent_does_not_raise(self) -> None:
        aligned = wrapping_align_decimals(1, 1, 0, 100, U64)
        assert aligned == AlignedPair(pow(10, 100, 2**64), 1, 100)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


class TestValidation:
    """Тесты валидации входов"""

    def test_magnitude_out_of_width(self) -> None:
        with pytest.raises(ValueError, match="a must be within"):
            validate_magnitude(256, "a", U8)

    def test_negative_magnitude(self) -> None:
        with pytest.raises(ValueError, match="b must be within"):
            validate_magnitude(-1, "b", U64)

    def test_non_int_magnitude(self) -> None:
        with pytest.raises(TypeError, match="a must be an int"):
            validate_magnitude(1.5, "a", U64)  # type: ignore[arg-type]

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError, match="must be an int"):
            validate_magnitude(True, "a", U64)

    def test_negative_decimals(self) -> None:
        with pytest.raises(ValueError, match="a_decimals must be within"):
            validate_decimals(-1, "a_decimals")

    def test_decimals_beyond_counter(self) -> None:
        with pytest.raises(ValueError, match="b_decimals must be within"):
            validate_decimals(2**32, "b_decimals")

    def test_align_validates_inputs(self) -> None:
        with pytest.raises(ValueError):
            align_decimals(1, 300, 0, 0, U8)
