"""
Selection — What a member asked for, per season

Caller-owned, immutable input of the enrollment resolver:
- per season: regular leagues, day leagues / sparing, social tier
- club-wide: at most one user-selectable discount

League counts outside [0, MAX_REGULAR_LEAGUES] are clamped rather than
rejected (warning is logged).
"""

import logging
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.domain.discounts import SELECTABLE_DISCOUNTS, DiscountKind
from src.core.math.money import clamp_count

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Largest number of regular leagues one member can request per season
MAX_REGULAR_LEAGUES: Final[int] = 5


# =============================================================================
# ENUMS
# =============================================================================


class Season(str, Enum):
    """Billing period"""

    FALL = "fall"
    WINTER = "winter"


class SocialOption(str, Enum):
    """Social-only access tier"""

    DUES = "dues"
    NO_DUES = "no_dues"


# =============================================================================
# MODELS
# =============================================================================


class SeasonSelection(BaseModel):
    """Request for one season."""

    regular_leagues: int = Field(0, description="Regular leagues wanted (clamped to 0..5)")
    day_leagues: bool = Field(False, description="Day leagues wanted")
    spare_only: bool = Field(False, description="Sparing-only access wanted")
    social: SocialOption | None = Field(None, description="Social tier (with/without dues)")

    model_config = {"frozen": True}

    @field_validator("regular_leagues")
    @classmethod
    def clamp_regular_leagues(cls, v: int) -> int:
        """Clamp out-of-range league counts instead of failing."""
        clamped = clamp_count(v, 0, MAX_REGULAR_LEAGUES)
        if clamped != v:
            logger.warning(
                "regular_leagues=%d out of range [0, %d], clamped to %d",
                v,
                MAX_REGULAR_LEAGUES,
                clamped,
            )
        return clamped

    def wants_ice(self) -> bool:
        """Day leagues or sparing requested."""
        return self.day_leagues or self.spare_only

    def wants_membership(self) -> bool:
        """
        Any request that requires the base membership.

        Day leagues, sparing, at least one regular league, or social with dues.
        """
        return (
            self.wants_ice()
            or self.regular_leagues > 0
            or self.social == SocialOption.DUES
        )


class Selection(BaseModel):
    """
    Full member request for the club year.

    Immutable (frozen=True): the resolver never mutates it.
    """

    fall: SeasonSelection = Field(default_factory=SeasonSelection, description="Fall request")
    winter: SeasonSelection = Field(default_factory=SeasonSelection, description="Winter request")
    discount: DiscountKind | None = Field(None, description="Club-wide discount choice")

    model_config = {"frozen": True}

    @field_validator("discount")
    @classmethod
    def validate_selectable_discount(cls, v: DiscountKind | None) -> DiscountKind | None:
        """winter_only is applied by the resolver and cannot be chosen."""
        if v is not None and v not in SELECTABLE_DISCOUNTS:
            raise ValueError(f"discount {v.value} is not user-selectable")
        return v

    def for_season(self, season: Season) -> SeasonSelection:
        return self.fall if season == Season.FALL else self.winter
