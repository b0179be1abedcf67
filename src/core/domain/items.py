"""
Items — Purchasable line items (memberships, leagues, ice, social)

Closed universe of things a member can buy for one season, and the
immutable Sku model the catalog maps each kind to.
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.math.money import validate_non_negative_amount


# =============================================================================
# ENUMS
# =============================================================================


class ItemKind(str, Enum):
    """Kind of purchasable item"""

    MEMBERSHIP = "membership"
    FIRST_LEAGUE = "first_league"
    SECOND_LEAGUE = "second_league"
    THIRD_LEAGUE = "third_league"
    ADDITIONAL_LEAGUE = "additional_league"
    BASIC_ICE = "basic_ice"
    BASIC_ICE_REDUCED = "basic_ice_reduced"
    SOCIAL = "social"


# Named league slots in consumption order (first → second → third)
NAMED_LEAGUE_SLOTS: Final[tuple[ItemKind, ...]] = (
    ItemKind.FIRST_LEAGUE,
    ItemKind.SECOND_LEAGUE,
    ItemKind.THIRD_LEAGUE,
)

# Competitive leagues (named slots + generic add-on)
LEAGUE_KINDS: Final[frozenset[ItemKind]] = frozenset(
    NAMED_LEAGUE_SLOTS + (ItemKind.ADDITIONAL_LEAGUE,)
)

# Same benefit at two price points, mutually exclusive within a season
BASIC_ICE_KINDS: Final[frozenset[ItemKind]] = frozenset(
    {ItemKind.BASIC_ICE, ItemKind.BASIC_ICE_REDUCED}
)


# =============================================================================
# SKU MODEL
# =============================================================================


class Sku(BaseModel):
    """
    Catalog entry for a purchasable item.

    Immutable (frozen=True): carts hold references to catalog Skus and
    must not be able to change prices.
    """

    name: str = Field(..., min_length=1, description="Display name")
    cost: float = Field(..., ge=0, description="Price for one season")

    model_config = {"frozen": True}

    @field_validator("cost")
    @classmethod
    def validate_cost(cls, v: float) -> float:
        """Reject NaN/Inf prices."""
        return validate_non_negative_amount(v, "cost")


class LineItem(BaseModel):
    """One purchased item in a cart (kind + catalog Sku at purchase time)."""

    kind: ItemKind = Field(..., description="Item kind")
    name: str = Field(..., min_length=1, description="Display name")
    cost: float = Field(..., ge=0, description="Price")

    model_config = {"frozen": True}

    @classmethod
    def from_sku(cls, kind: ItemKind, sku: Sku) -> "LineItem":
        return cls(kind=kind, name=sku.name, cost=sku.cost)

    def is_league(self) -> bool:
        """True for competitive leagues (named slots and additional leagues)."""
        return self.kind in LEAGUE_KINDS
