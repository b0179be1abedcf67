"""Benefit Resolver — carts → annual, fall and winter entitlements

Derived purely from cart contents:
- membership / social presence per season
- league count per season
- ice eligibility: basic ice item (either price point) or at least one league

Annual:
- roster, social, agm, bartending: social or membership in either season
- dues: membership in either season and no reciprocal discount anywhere
- voting: membership in either season
- club_spiel: ice eligibility in either season
- none: both totals exactly zero

Seasonal (fall, winter): ice entitlements iff ice-eligible, then leagues
iff league count > 0.
"""

from dataclasses import dataclass

from src.billing.cart import Cart
from src.core.domain.discounts import DiscountKind
from src.core.domain.entitlements import (
    COMMUNITY_ENTITLEMENTS,
    ICE_ENTITLEMENTS,
    EntitlementKind,
    Entitlements,
)
from src.core.domain.items import ItemKind


@dataclass(frozen=True)
class SeasonFacts:
    """What one season's cart unlocks."""

    has_membership: bool
    has_social: bool
    has_reciprocal: bool
    league_count: int
    is_ice_eligible: bool
    total: float

    @classmethod
    def from_cart(cls, cart: Cart) -> "SeasonFacts":
        league_count = cart.league_count()
        return cls(
            has_membership=cart.has_item(ItemKind.MEMBERSHIP),
            has_social=cart.has_item(ItemKind.SOCIAL),
            has_reciprocal=cart.has_discount(DiscountKind.RECIPROCAL),
            league_count=league_count,
            is_ice_eligible=cart.has_item(ItemKind.BASIC_ICE) or league_count > 0,
            total=cart.total(),
        )


class BenefitResolver:
    """Stateless derivation of entitlements from two carts."""

    def resolve(self, fall_cart: Cart, winter_cart: Cart) -> Entitlements:
        fall = SeasonFacts.from_cart(fall_cart)
        winter = SeasonFacts.from_cart(winter_cart)

        return Entitlements(
            annual=self._annual(fall, winter),
            fall=self._seasonal(fall),
            winter=self._seasonal(winter),
            fall_league_count=fall.league_count,
            winter_league_count=winter.league_count,
        )

    def _annual(self, fall: SeasonFacts, winter: SeasonFacts) -> list[EntitlementKind]:
        annual: list[EntitlementKind] = []

        if fall.has_social or winter.has_social or fall.has_membership or winter.has_membership:
            annual.extend(COMMUNITY_ENTITLEMENTS)

        if fall.has_membership or winter.has_membership:
            # Reciprocal members have their dues paid through their home club
            if not (fall.has_reciprocal or winter.has_reciprocal):
                annual.append(EntitlementKind.DUES)
            annual.append(EntitlementKind.VOTING)

        if fall.is_ice_eligible or winter.is_ice_eligible:
            annual.append(EntitlementKind.CLUB_SPIEL)

        if fall.total == 0 and winter.total == 0:
            annual.append(EntitlementKind.NONE)

        return annual

    def _seasonal(self, season: SeasonFacts) -> list[EntitlementKind]:
        entitlements: list[EntitlementKind] = []

        if season.is_ice_eligible:
            entitlements.extend(ICE_ENTITLEMENTS)

        if season.league_count > 0:
            entitlements.append(EntitlementKind.LEAGUES)

        return entitlements


def resolve_benefits(fall_cart: Cart, winter_cart: Cart) -> Entitlements:
    """Entitlements unlocked by the fall and winter carts.

    Args:
        fall_cart: resolved fall cart
        winter_cart: resolved winter cart

    Returns:
        Entitlements(annual, fall, winter, fall_league_count, winter_league_count)
    """
    return BenefitResolver().resolve(fall_cart, winter_cart)
