"""
Domain models and value objects.

Contains the closed item/discount/entitlement universes and the member
Selection consumed by the enrollment resolver.
"""

from src.core.domain.discounts import (
    SELECTABLE_DISCOUNTS,
    STRATEGY_ORDER,
    AppliedDiscount,
    Discount,
    DiscountKind,
    DiscountStrategy,
)
from src.core.domain.entitlements import (
    COMMUNITY_ENTITLEMENTS,
    ICE_ENTITLEMENTS,
    EntitlementKind,
    Entitlements,
)
from src.core.domain.items import (
    BASIC_ICE_KINDS,
    LEAGUE_KINDS,
    NAMED_LEAGUE_SLOTS,
    ItemKind,
    LineItem,
    Sku,
)
from src.core.domain.selection import (
    MAX_REGULAR_LEAGUES,
    Season,
    SeasonSelection,
    Selection,
    SocialOption,
)

__all__ = [
    # Items
    "ItemKind",
    "Sku",
    "LineItem",
    "NAMED_LEAGUE_SLOTS",
    "LEAGUE_KINDS",
    "BASIC_ICE_KINDS",
    # Discounts
    "DiscountKind",
    "DiscountStrategy",
    "Discount",
    "AppliedDiscount",
    "SELECTABLE_DISCOUNTS",
    "STRATEGY_ORDER",
    # Entitlements
    "EntitlementKind",
    "Entitlements",
    "COMMUNITY_ENTITLEMENTS",
    "ICE_ENTITLEMENTS",
    # Selection
    "Season",
    "SocialOption",
    "SeasonSelection",
    "Selection",
    "MAX_REGULAR_LEAGUES",
]
