"""
Entitlements — Benefits unlocked by cart contents

Three scopes:
- annual: whole club year (September 1 – August 31)
- fall: September 1 – December 31
- winter: January – May 31

The resolver emits kinds and league counts only; wording lives in the catalog.
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class EntitlementKind(str, Enum):
    """Named benefit"""

    # Annual
    ROSTER = "roster"
    SOCIAL = "social"
    AGM = "agm"
    BARTENDING = "bartending"
    DUES = "dues"
    VOTING = "voting"
    CLUB_SPIEL = "club_spiel"
    NONE = "none"

    # Seasonal
    BUILDING_ACCESS = "building_access"
    ICE = "ice"
    DAYTIME = "daytime"
    SPARING = "sparing"
    RENTALS = "rentals"
    TRAINING = "training"
    LEAGUES = "leagues"


# Unlocked by social access or membership in either season
COMMUNITY_ENTITLEMENTS: Final[tuple[EntitlementKind, ...]] = (
    EntitlementKind.ROSTER,
    EntitlementKind.SOCIAL,
    EntitlementKind.AGM,
    EntitlementKind.BARTENDING,
)

# Unlocked per season by ice eligibility
ICE_ENTITLEMENTS: Final[tuple[EntitlementKind, ...]] = (
    EntitlementKind.BUILDING_ACCESS,
    EntitlementKind.ICE,
    EntitlementKind.DAYTIME,
    EntitlementKind.SPARING,
    EntitlementKind.RENTALS,
    EntitlementKind.TRAINING,
)


# =============================================================================
# MODEL
# =============================================================================


class Entitlements(BaseModel):
    """
    Result of benefit resolution.

    fall_league_count / winter_league_count fill the LEAGUES template
    ("Participate in N leagues") at render time.
    """

    annual: list[EntitlementKind] = Field(default_factory=list, description="Annual benefits")
    fall: list[EntitlementKind] = Field(default_factory=list, description="Fall benefits")
    winter: list[EntitlementKind] = Field(default_factory=list, description="Winter benefits")

    fall_league_count: int = Field(0, ge=0, description="Leagues purchased for fall")
    winter_league_count: int = Field(0, ge=0, description="Leagues purchased for winter")

    model_config = {"frozen": True}

    def is_empty(self) -> bool:
        """True when nothing but the placeholder was unlocked."""
        return (
            self.annual in ([], [EntitlementKind.NONE])
            and not self.fall
            and not self.winter
        )
