"""
Core math modules

Money primitives: amount validation, discount application, count clamping.
"""

from src.core.math.money import (
    PERCENT_SCALE,
    apply_absolute_discount,
    apply_percentage_discount,
    clamp_count,
    is_valid_amount,
    percent_to_fraction,
    validate_non_negative_amount,
)

__all__ = [
    # Constants
    "PERCENT_SCALE",
    # Checks
    "is_valid_amount",
    "validate_non_negative_amount",
    # Conversions & discounts
    "percent_to_fraction",
    "apply_absolute_discount",
    "apply_percentage_discount",
    "clamp_count",
]
