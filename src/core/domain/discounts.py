"""
Discounts — Discount kinds, strategies and the immutable Discount model

Two strategies:
- ABSOLUTE: fixed currency deduction, always applied first
- PERCENTAGE: multiplicative deduction on the running total, applied after
  every absolute deduction
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.math.money import validate_non_negative_amount


# =============================================================================
# ENUMS
# =============================================================================


class DiscountKind(str, Enum):
    """Kind of discount"""

    FAMILY = "family"
    STUDENT = "student"
    RECIPROCAL = "reciprocal"
    WINTER_ONLY = "winter_only"


class DiscountStrategy(str, Enum):
    """How a discount reduces the running total"""

    ABSOLUTE = "absolute"
    PERCENTAGE = "percentage"


# Discounts a member can choose (winter-only is applied automatically)
SELECTABLE_DISCOUNTS: Final[frozenset[DiscountKind]] = frozenset(
    {DiscountKind.FAMILY, DiscountKind.STUDENT, DiscountKind.RECIPROCAL}
)

# Application order: absolute deductions before percentage ones
STRATEGY_ORDER: Final[dict[DiscountStrategy, int]] = {
    DiscountStrategy.ABSOLUTE: 1,
    DiscountStrategy.PERCENTAGE: 2,
}


# =============================================================================
# DISCOUNT MODEL
# =============================================================================


class Discount(BaseModel):
    """
    Catalog entry for a discount.

    amount is in currency for ABSOLUTE and in percent for PERCENTAGE
    (5 means 5%).
    """

    name: str = Field(..., min_length=1, description="Display name")
    strategy: DiscountStrategy = Field(..., description="absolute/percentage")
    amount: float = Field(..., ge=0, description="Currency amount or percent")

    model_config = {"frozen": True}

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: float, info) -> float:
        """Reject NaN/Inf amounts and percentages above 100."""
        validate_non_negative_amount(v, "amount")
        if info.data.get("strategy") == DiscountStrategy.PERCENTAGE and v > 100:
            raise ValueError(f"percentage discount {v} exceeds 100%")
        return v

    def sort_key(self) -> int:
        return STRATEGY_ORDER[self.strategy]


class AppliedDiscount(BaseModel):
    """One discount applied to a cart (kind + catalog Discount)."""

    kind: DiscountKind = Field(..., description="Discount kind")
    name: str = Field(..., min_length=1, description="Display name")
    strategy: DiscountStrategy = Field(..., description="absolute/percentage")
    amount: float = Field(..., ge=0, description="Currency amount or percent")

    model_config = {"frozen": True}

    @classmethod
    def from_discount(cls, kind: DiscountKind, discount: Discount) -> "AppliedDiscount":
        return cls(
            kind=kind,
            name=discount.name,
            strategy=discount.strategy,
            amount=discount.amount,
        )

    def sort_key(self) -> int:
        return STRATEGY_ORDER[self.strategy]
