"""
Tests for the Benefit Resolver

Coverage:
- Annual entitlements (community, dues, voting, club bonspiel, placeholder)
- Seasonal ice entitlements and league counts
- Ice eligibility via either basic ice price point
- Integration with the enrollment resolver
"""

import pytest

from src.benefits import BenefitResolver, SeasonFacts, resolve_benefits
from src.billing import Cart
from src.core.domain import (
    COMMUNITY_ENTITLEMENTS,
    ICE_ENTITLEMENTS,
    DiscountKind,
    EntitlementKind,
    ItemKind,
    SeasonSelection,
    Selection,
    SocialOption,
)
from src.enrollment import resolve_enrollment


# =============================================================================
# HELPERS
# =============================================================================


def make_cart(*kinds: ItemKind, discounts: tuple[DiscountKind, ...] = ()) -> Cart:
    """Helper: cart with the given items and discounts."""
    cart = Cart()
    for kind in kinds:
        cart.add_item(kind)
    for discount in discounts:
        cart.add_discount(discount)
    return cart


# =============================================================================
# SEASON FACTS
# =============================================================================


class TestSeasonFacts:
    """Tests for SeasonFacts.from_cart"""

    def test_empty_cart(self) -> None:
        facts = SeasonFacts.from_cart(Cart())

        assert facts.has_membership is False
        assert facts.has_social is False
        assert facts.league_count == 0
        assert facts.is_ice_eligible is False
        assert facts.total == 0

    def test_reduced_ice_is_ice_eligible(self) -> None:
        facts = SeasonFacts.from_cart(make_cart(ItemKind.BASIC_ICE_REDUCED))

        assert facts.is_ice_eligible is True

    def test_league_is_ice_eligible(self) -> None:
        facts = SeasonFacts.from_cart(make_cart(ItemKind.ADDITIONAL_LEAGUE))

        assert facts.is_ice_eligible is True
        assert facts.league_count == 1


# =============================================================================
# ANNUAL
# =============================================================================


class TestAnnualEntitlements:
    """Annual scope"""

    def test_nothing_selected(self) -> None:
        entitlements = resolve_benefits(Cart(), Cart())

        assert entitlements.annual == [EntitlementKind.NONE]
        assert entitlements.fall == []
        assert entitlements.winter == []
        assert entitlements.is_empty()

    def test_social_only(self) -> None:
        entitlements = resolve_benefits(make_cart(ItemKind.SOCIAL), Cart())

        assert entitlements.annual == list(COMMUNITY_ENTITLEMENTS)
        assert entitlements.fall == []

    def test_member_with_league(self) -> None:
        entitlements = resolve_benefits(
            make_cart(ItemKind.MEMBERSHIP, ItemKind.FIRST_LEAGUE), Cart()
        )

        assert entitlements.annual == [
            EntitlementKind.ROSTER,
            EntitlementKind.SOCIAL,
            EntitlementKind.AGM,
            EntitlementKind.BARTENDING,
            EntitlementKind.DUES,
            EntitlementKind.VOTING,
            EntitlementKind.CLUB_SPIEL,
        ]

    def test_membership_in_winter_counts_for_year(self) -> None:
        entitlements = resolve_benefits(
            Cart(), make_cart(ItemKind.MEMBERSHIP, discounts=(DiscountKind.WINTER_ONLY,))
        )

        assert EntitlementKind.VOTING in entitlements.annual
        assert EntitlementKind.DUES in entitlements.annual
        assert EntitlementKind.CLUB_SPIEL not in entitlements.annual

    def test_reciprocal_in_fall_removes_dues(self) -> None:
        fall = make_cart(
            ItemKind.MEMBERSHIP, ItemKind.FIRST_LEAGUE, discounts=(DiscountKind.RECIPROCAL,)
        )

        entitlements = resolve_benefits(fall, Cart())

        assert EntitlementKind.DUES not in entitlements.annual
        assert EntitlementKind.VOTING in entitlements.annual

    def test_reciprocal_in_winter_removes_dues(self) -> None:
        fall = make_cart(ItemKind.SOCIAL)
        winter = make_cart(
            ItemKind.MEMBERSHIP,
            ItemKind.FIRST_LEAGUE,
            discounts=(DiscountKind.WINTER_ONLY, DiscountKind.RECIPROCAL),
        )

        entitlements = resolve_benefits(fall, winter)

        assert EntitlementKind.DUES not in entitlements.annual

    def test_placeholder_only_when_both_totals_zero(self) -> None:
        entitlements = resolve_benefits(Cart(), make_cart(ItemKind.SOCIAL))

        assert EntitlementKind.NONE not in entitlements.annual

    def test_negative_total_is_not_zero(self) -> None:
        """A negative total is not 'nothing selected'"""
        fall = make_cart(ItemKind.SOCIAL, discounts=(DiscountKind.RECIPROCAL,))

        entitlements = resolve_benefits(fall, Cart())

        assert fall.total() == pytest.approx(-25.0)
        assert EntitlementKind.NONE not in entitlements.annual


# =============================================================================
# SEASONAL
# =============================================================================


class TestSeasonalEntitlements:
    """Fall / winter scope"""

    def test_basic_ice_unlocks_ice_benefits(self) -> None:
        entitlements = resolve_benefits(make_cart(ItemKind.MEMBERSHIP, ItemKind.BASIC_ICE), Cart())

        assert entitlements.fall == list(ICE_ENTITLEMENTS)
        assert entitlements.winter == []
        assert entitlements.fall_league_count == 0

    def test_leagues_appended_with_count(self) -> None:
        winter = make_cart(
            ItemKind.MEMBERSHIP, ItemKind.FIRST_LEAGUE, ItemKind.SECOND_LEAGUE
        )

        entitlements = resolve_benefits(Cart(), winter)

        assert entitlements.winter == list(ICE_ENTITLEMENTS) + [EntitlementKind.LEAGUES]
        assert entitlements.winter_league_count == 2
        assert entitlements.fall_league_count == 0

    def test_reduced_ice_in_winter(self) -> None:
        fall = make_cart(
            ItemKind.MEMBERSHIP,
            ItemKind.FIRST_LEAGUE,
            ItemKind.SECOND_LEAGUE,
            ItemKind.THIRD_LEAGUE,
        )
        winter = make_cart(ItemKind.BASIC_ICE_REDUCED)

        entitlements = resolve_benefits(fall, winter)

        assert entitlements.fall[-1] == EntitlementKind.LEAGUES
        assert entitlements.fall_league_count == 3
        assert entitlements.winter == list(ICE_ENTITLEMENTS)

    def test_resolver_instance_reusable(self) -> None:
        resolver = BenefitResolver()
        first = resolver.resolve(make_cart(ItemKind.SOCIAL), Cart())
        second = resolver.resolve(Cart(), Cart())

        assert first.annual == list(COMMUNITY_ENTITLEMENTS)
        assert second.annual == [EntitlementKind.NONE]


# =============================================================================
# INTEGRATION
# =============================================================================


class TestWithEnrollment:
    """Entitlements of resolved carts"""

    def test_all_zero_selection(self) -> None:
        carts = resolve_enrollment(Selection())

        entitlements = resolve_benefits(carts.fall, carts.winter)

        assert entitlements.annual == [EntitlementKind.NONE]
        assert entitlements.fall == []
        assert entitlements.winter == []

    def test_full_year_reciprocal_member(self) -> None:
        selection = Selection(
            fall=SeasonSelection(regular_leagues=2),
            winter=SeasonSelection(day_leagues=True),
            discount=DiscountKind.RECIPROCAL,
        )
        carts = resolve_enrollment(selection)

        entitlements = resolve_benefits(carts.fall, carts.winter)

        assert EntitlementKind.DUES not in entitlements.annual
        assert entitlements.fall == list(ICE_ENTITLEMENTS) + [EntitlementKind.LEAGUES]
        assert entitlements.winter == list(ICE_ENTITLEMENTS)
        assert entitlements.fall_league_count == 2

    def test_social_year(self) -> None:
        selection = Selection(
            fall=SeasonSelection(social=SocialOption.NO_DUES),
            winter=SeasonSelection(social=SocialOption.NO_DUES),
        )
        carts = resolve_enrollment(selection)

        entitlements = resolve_benefits(carts.fall, carts.winter)

        assert entitlements.annual == list(COMMUNITY_ENTITLEMENTS)
        assert entitlements.fall == []
        assert entitlements.winter == []
