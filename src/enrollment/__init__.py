"""Enrollment — selection resolution into priced seasonal carts.

- Enrollment resolver: membership gates, shared league slot pool,
  ice/social items, discount eligibility
- Quote: frozen priced snapshot of carts + entitlements
"""

from .quote import Quote, SeasonQuote, build_quote
from .resolver import (
    REDUCED_ICE_FALL_LEAGUES,
    EnrollmentConfig,
    EnrollmentResolver,
    EnrollmentResult,
    LeagueSlotPool,
    resolve_enrollment,
)

__all__ = [
    "EnrollmentConfig",
    "EnrollmentResolver",
    "EnrollmentResult",
    "LeagueSlotPool",
    "REDUCED_ICE_FALL_LEAGUES",
    "resolve_enrollment",
    "Quote",
    "SeasonQuote",
    "build_quote",
]
