"""Benefits — entitlements derived from resolved carts."""

from .resolver import BenefitResolver, SeasonFacts, resolve_benefits

__all__ = [
    "BenefitResolver",
    "SeasonFacts",
    "resolve_benefits",
]
