"""Enrollment Resolver — selection → fall and winter carts

Rules, in order:
1. Fall membership if the fall request needs it
2. Fall leagues take slots from the shared league slot pool
3. Fall basic ice or social (only without regular leagues)
4. Fall discounts (only if fall has membership)
5. Winter membership only if fall has none; always with winter-only discount
6. Winter leagues continue the same slot pool
7. Winter basic ice (reduced after 3+ fall leagues) or social
8. Winter discounts (family/student without membership precondition)

Cross-season dependencies:
- one annual membership covers the whole year
- league slot numbering (first/second/third) is shared, fall before winter
- social access is not sold twice in one year

Known asymmetry: family/student apply in fall only with membership, in
winter with any non-empty cart. Preserved pending product clarification.
"""

import logging
from dataclasses import dataclass, field
from typing import Final

from src.billing.cart import Cart
from src.core.catalog import Catalog
from src.core.domain.discounts import DiscountKind
from src.core.domain.items import NAMED_LEAGUE_SLOTS, ItemKind
from src.core.domain.selection import (
    MAX_REGULAR_LEAGUES,
    SeasonSelection,
    Selection,
    SocialOption,
)
from src.core.math.money import clamp_count

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Fall leagues after which winter ice is sold at the reduced price
REDUCED_ICE_FALL_LEAGUES: Final[int] = 3


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EnrollmentConfig:
    """Configuration of the enrollment resolver.

    named_league_slots: slot order consumed across both seasons
    reduced_ice_fall_leagues: fall league count from which winter ice is reduced
    max_regular_leagues: ceiling for requested leagues per season (clamped)
    """

    named_league_slots: tuple[ItemKind, ...] = NAMED_LEAGUE_SLOTS
    reduced_ice_fall_leagues: int = REDUCED_ICE_FALL_LEAGUES
    max_regular_leagues: int = MAX_REGULAR_LEAGUES


# =============================================================================
# LEAGUE SLOT POOL
# =============================================================================


@dataclass
class LeagueSlotPool:
    """Named league slots left for the rest of one resolution.

    Created fresh per resolution and drained fall then winter; never shared
    between resolutions.
    """

    remaining: list[ItemKind] = field(default_factory=lambda: list(NAMED_LEAGUE_SLOTS))

    @classmethod
    def from_config(cls, config: EnrollmentConfig) -> "LeagueSlotPool":
        return cls(remaining=list(config.named_league_slots))

    def take(self) -> ItemKind:
        """Next named slot, or ADDITIONAL_LEAGUE once the pool is exhausted."""
        if self.remaining:
            return self.remaining.pop(0)
        return ItemKind.ADDITIONAL_LEAGUE

    def is_exhausted(self) -> bool:
        return not self.remaining


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class EnrollmentResult:
    """Carts produced by one resolution."""

    fall: Cart
    winter: Cart


# =============================================================================
# RESOLVER
# =============================================================================


class EnrollmentResolver:
    """Turns a Selection into fall and winter carts.

    Stateless between calls: every resolve() builds its own carts and its
    own league slot pool.
    """

    def __init__(self, catalog: Catalog | None = None, config: EnrollmentConfig | None = None):
        """
        Args:
            catalog: price list (optional, bundled catalog by default)
            config: resolver configuration (optional, defaults)
        """
        self.catalog = catalog
        self.config = config or EnrollmentConfig()

    def resolve(self, selection: Selection) -> EnrollmentResult:
        """Resolve both seasons.

        Args:
            selection: member request (not mutated)

        Returns:
            EnrollmentResult with fall and winter carts
        """
        fall = Cart(self.catalog)
        winter = Cart(self.catalog)
        pool = LeagueSlotPool.from_config(self.config)

        fall_request = selection.fall
        winter_request = selection.winter
        fall_leagues = self._requested_leagues(fall_request, "fall")
        winter_leagues = self._requested_leagues(winter_request, "winter")

        # == Fall ==
        # 1. Base membership
        if fall_request.wants_membership():
            fall.add_item(ItemKind.MEMBERSHIP)

        # 2. Regular leagues
        self._assign_leagues(fall, fall_leagues, pool, "fall")

        # 3. Basic ice or social
        if fall_leagues == 0:
            if fall_request.wants_ice():
                fall.add_item(ItemKind.BASIC_ICE)
            elif fall_request.social == SocialOption.NO_DUES:
                fall.add_item(ItemKind.SOCIAL)

        # 4. Discounts
        if not fall.is_empty() and fall.has_item(ItemKind.MEMBERSHIP):
            if selection.discount == DiscountKind.RECIPROCAL and fall.league_count() > 0:
                fall.add_discount(DiscountKind.RECIPROCAL)
            self._apply_member_discount(fall, selection.discount)

        # == Winter ==
        fall_has_membership = fall.has_item(ItemKind.MEMBERSHIP)

        # 5. Base membership (one per club year)
        if not fall_has_membership and winter_request.wants_membership():
            winter.add_item(ItemKind.MEMBERSHIP)
            winter.add_discount(DiscountKind.WINTER_ONLY)

        # 6. Regular leagues (pool continues from fall)
        self._assign_leagues(winter, winter_leagues, pool, "winter")

        # 7. Basic ice or social
        if winter_leagues == 0:
            if winter_request.wants_ice():
                if fall.league_count() >= self.config.reduced_ice_fall_leagues:
                    winter.add_item(ItemKind.BASIC_ICE_REDUCED)
                else:
                    winter.add_item(ItemKind.BASIC_ICE)
            elif (
                winter_request.social == SocialOption.NO_DUES
                and not fall.has_item(ItemKind.SOCIAL)
                and not fall_has_membership
            ):
                winter.add_item(ItemKind.SOCIAL)

        # 8. Discounts (family/student without membership precondition)
        if not winter.is_empty():
            if (
                selection.discount == DiscountKind.RECIPROCAL
                and winter.has_item(ItemKind.MEMBERSHIP)
                and not fall_has_membership
                and winter.league_count() > 0
            ):
                winter.add_discount(DiscountKind.RECIPROCAL)
            self._apply_member_discount(winter, selection.discount)

        logger.debug("Resolved fall=%r winter=%r", fall, winter)
        return EnrollmentResult(fall=fall, winter=winter)

    def _requested_leagues(self, request: SeasonSelection, season: str) -> int:
        """League count clamped to [0, max_regular_leagues]."""
        count = clamp_count(request.regular_leagues, 0, self.config.max_regular_leagues)
        if count != request.regular_leagues:
            logger.warning(
                "%s regular_leagues=%d clamped to %d", season, request.regular_leagues, count
            )
        return count

    def _assign_leagues(self, cart: Cart, count: int, pool: LeagueSlotPool, season: str) -> None:
        for _ in range(count):
            slot = pool.take()
            logger.debug("%s league → %s", season, slot.value)
            cart.add_item(slot)

    def _apply_member_discount(self, cart: Cart, discount: DiscountKind | None) -> None:
        """Family, else student (percentage discounts)."""
        if discount == DiscountKind.FAMILY:
            cart.add_discount(DiscountKind.FAMILY)
        elif discount == DiscountKind.STUDENT:
            cart.add_discount(DiscountKind.STUDENT)


def resolve_enrollment(
    selection: Selection,
    catalog: Catalog | None = None,
    config: EnrollmentConfig | None = None,
) -> EnrollmentResult:
    """Resolve a selection into fall and winter carts.

    Args:
        selection: member request
        catalog: price list (optional)
        config: resolver configuration (optional)

    Returns:
        EnrollmentResult(fall, winter)
    """
    return EnrollmentResolver(catalog=catalog, config=config).resolve(selection)
