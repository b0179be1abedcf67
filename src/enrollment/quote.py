"""Quote — priced snapshot of one selection

Runs the enrollment and benefit resolvers and freezes the outcome:
- per season: items, discounts (application order), total
- grand total and number of separate payments due
- entitlements

to_contract() serializes to the quote JSON contract.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field

from src.benefits.resolver import resolve_benefits
from src.billing.cart import Cart
from src.core.catalog import DEFAULT_CATALOG, Catalog
from src.core.contracts.validators import validate_quote
from src.core.domain.discounts import AppliedDiscount
from src.core.domain.entitlements import Entitlements
from src.core.domain.items import LineItem
from src.core.domain.selection import Season, Selection
from src.enrollment.resolver import EnrollmentConfig, resolve_enrollment


class SeasonQuote(BaseModel):
    """Read-only view of one season's cart."""

    items: list[LineItem] = Field(default_factory=list, description="Purchased items")
    discounts: list[AppliedDiscount] = Field(
        default_factory=list, description="Discounts in application order"
    )
    total: float = Field(0.0, description="Total after discounts (may be negative)")

    model_config = {"frozen": True}

    @classmethod
    def from_cart(cls, cart: Cart) -> "SeasonQuote":
        return cls(items=cart.items, discounts=cart.discounts, total=cart.total())

    def is_payable(self) -> bool:
        """A payment is due only for a positive total."""
        return self.total > 0


class Quote(BaseModel):
    """Priced carts and entitlements for one selection."""

    club_year: str = Field(..., min_length=1, description="Club year of the catalog used")
    fall: SeasonQuote = Field(..., description="Fall cart")
    winter: SeasonQuote = Field(..., description="Winter cart")
    grand_total: float = Field(..., description="fall.total + winter.total")
    payments_due: int = Field(..., ge=0, le=2, description="Separate payments due")
    entitlements: Entitlements = Field(..., description="Unlocked benefits")

    model_config = {"frozen": True}

    def for_season(self, season: Season) -> SeasonQuote:
        return self.fall if season == Season.FALL else self.winter

    def to_contract(self) -> Dict[str, Any]:
        """
        JSON-compatible payload.

        Raises:
            ValidationError: If the payload violates the quote contract
        """
        payload = self.model_dump(mode="json")
        validate_quote(payload)
        return payload


def build_quote(
    selection: Selection,
    catalog: Catalog | None = None,
    config: EnrollmentConfig | None = None,
) -> Quote:
    """
    Resolve a selection into a Quote.

    Args:
        selection: member request
        catalog: price list (optional, bundled catalog by default)
        config: resolver configuration (optional)

    Returns:
        Frozen Quote
    """
    catalog = catalog or DEFAULT_CATALOG
    carts = resolve_enrollment(selection, catalog=catalog, config=config)
    entitlements = resolve_benefits(carts.fall, carts.winter)

    fall = SeasonQuote.from_cart(carts.fall)
    winter = SeasonQuote.from_cart(carts.winter)

    return Quote(
        club_year=catalog.club_year,
        fall=fall,
        winter=winter,
        grand_total=fall.total + winter.total,
        payments_due=sum(1 for season in (fall, winter) if season.is_payable()),
        entitlements=entitlements,
    )
