"""
Money — Safe arithmetic primitives for dues and discounts

Single place where amounts are validated and where discounts are applied
to a running total:
- absolute discount: fixed currency deduction
- percentage discount: multiplicative deduction (amount given in percent)

CRITICAL INVARIANTS:
1. NaN/Inf amounts are never accepted into a catalog or a cart
2. Results are NOT clamped at zero (a total may go negative)
3. All operations are deterministic and reproducible
"""

import math
from typing import Final


# =============================================================================
# CONSTANTS
# =============================================================================

# Percent scale used by percentage discounts (5 → 5%)
PERCENT_SCALE: Final[float] = 100.0


# =============================================================================
# CHECKS
# =============================================================================


def is_valid_amount(value: float) -> bool:
    """
    Check that an amount is a finite number.

    Args:
        value: Amount to check

    Returns:
        True if value is neither NaN nor Inf
    """
    return not (math.isnan(value) or math.isinf(value))


def validate_non_negative_amount(value: float, name: str) -> float:
    """
    Validate that an amount is finite and non-negative.

    Args:
        value: Amount to check
        name: Parameter name (used in the error message)

    Returns:
        The value unchanged

    Raises:
        ValueError: If value is NaN/Inf or negative
    """
    if not is_valid_amount(value):
        raise ValueError(f"{name} must be a valid number (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

    return value


# =============================================================================
# CONVERSIONS & DISCOUNTS
# =============================================================================


def percent_to_fraction(percent: float) -> float:
    """
    Convert a percentage into a fraction.

    Examples:
        >>> percent_to_fraction(5.0)
        0.05
    """
    return percent / PERCENT_SCALE


def apply_absolute_discount(running_total: float, amount: float) -> float:
    """
    Subtract a fixed amount from the running total.

    The result is not floored at zero.
    """
    return running_total - amount


def apply_percentage_discount(running_total: float, percent: float) -> float:
    """
    Reduce the running total by a percentage.

    running_total * (1 - percent / 100)

    Examples:
        >>> apply_percentage_discount(200.0, 30.0)
        140.0
    """
    return running_total * (1.0 - percent_to_fraction(percent))


def clamp_count(value: int, min_value: int, max_value: int) -> int:
    """
    Clamp an integer count into [min_value, max_value].

    Examples:
        >>> clamp_count(-2, 0, 5)
        0
        >>> clamp_count(7, 0, 5)
        5
        >>> clamp_count(3, 0, 5)
        3
    """
    if min_value > max_value:
        raise ValueError(f"min_value {min_value} must be <= max_value {max_value}")

    return max(min_value, min(value, max_value))
