"""
Core math modules для decimal-арифметики

Целочисленная арифметика над scaled-значениями (magnitude, decimals)
фиксированной ширины без использования float.
"""

# Unsigned widths
from src.core.math.widths import (
    DECIMAL_BASE,
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

# Errors
from src.core.math.decimal_errors import (
    DecimalErrorKind,
    DecimalOperationError,
)

# Decimal alignment
from src.core.math.decimal_alignment import (
    AlignedPair,
    DecimalResult,
    align_decimals,
    decimal_difference,
    pow10,
    scale_up,
    validate_decimals,
    validate_magnitude,
    wrapping_align_decimals,
    wrapping_scale_up,
)

# Checked capability set
from src.core.math.checked_decimals import (
    CheckedDecimalOperations,
    add_decimals_checked,
    checked_ops_for,
    div_decimals_checked,
    mul_decimals_checked,
    rem_decimals_checked,
    sub_decimals_checked,
)

# Unchecked capability set
from src.core.math.unchecked_decimals import (
    DecimalOperations,
    add_decimals,
    div_decimals,
    mul_decimals,
    ops_for,
    rem_decimals,
    sub_decimals,
)

__all__ = [
    # Widths: Constants
    "DECIMAL_BASE",
    "DECIMALS_WIDTH",
    "DEFAULT_WIDTH",
    "SUPPORTED_WIDTHS",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USIZE",
    # Widths: Types
    "CheckedArithmetic",
    "UnsignedWidth",
    "get_width",
    # Errors
    "DecimalErrorKind",
    "DecimalOperationError",
    # Alignment: Types
    "AlignedPair",
    "DecimalResult",
    # Alignment: Functions
    "align_decimals",
    "decimal_difference",
    "pow10",
    "scale_up",
    "validate_decimals",
    "validate_magnitude",
    "wrapping_align_decimals",
    "wrapping_scale_up",
    # Checked
    "CheckedDecimalOperations",
    "add_decimals_checked",
    "checked_ops_for",
    "div_decimals_checked",
    "mul_decimals_checked",
    "rem_decimals_checked",
    "sub_decimals_checked",
    # Unchecked
    "DecimalOperations",
    "add_decimals",
    "div_decimals",
    "mul_decimals",
    "ops_for",
    "rem_decimals",
    "sub_decimals",
]
