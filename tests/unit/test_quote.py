"""
Tests for Quote

Coverage:
- Totals, grand total and payments due
- Entitlements attached to the quote
- Contract serialization
- Custom catalog
"""

import json

import pytest
from pydantic import ValidationError

from src.core.catalog import DEFAULT_CATALOG_PATH, catalog_from_dict
from src.core.contracts import parse_selection, validate_quote
from src.core.domain import (
    DiscountKind,
    EntitlementKind,
    ItemKind,
    Season,
    SeasonSelection,
    Selection,
)
from src.enrollment import build_quote


# =============================================================================
# TOTALS
# =============================================================================


class TestQuoteTotals:
    """Grand total and payments"""

    def test_empty_selection(self) -> None:
        quote = build_quote(Selection())

        assert quote.grand_total == 0
        assert quote.payments_due == 0
        assert quote.entitlements.annual == [EntitlementKind.NONE]

    def test_one_payment(self) -> None:
        quote = build_quote(
            Selection(fall=SeasonSelection(regular_leagues=2), discount=DiscountKind.RECIPROCAL)
        )

        assert quote.fall.total == pytest.approx(370.0)
        assert quote.winter.total == 0
        assert quote.grand_total == pytest.approx(370.0)
        assert quote.payments_due == 1

    def test_two_payments(self) -> None:
        quote = build_quote(
            Selection(
                fall=SeasonSelection(regular_leagues=1),
                winter=SeasonSelection(regular_leagues=1),
            )
        )

        assert quote.grand_total == pytest.approx(290.0 + 155.0)
        assert quote.payments_due == 2

    def test_for_season(self) -> None:
        quote = build_quote(Selection(winter=SeasonSelection(regular_leagues=1)))

        winter = quote.for_season(Season.WINTER)
        assert [item.kind for item in winter.items] == [ItemKind.MEMBERSHIP, ItemKind.FIRST_LEAGUE]
        assert [d.kind for d in winter.discounts] == [DiscountKind.WINTER_ONLY]
        assert quote.for_season(Season.FALL).items == []

    def test_quote_frozen(self) -> None:
        quote = build_quote(Selection())

        with pytest.raises(ValidationError):
            quote.grand_total = 1.0


# =============================================================================
# CONTRACT
# =============================================================================


class TestQuoteContract:
    """Serialization to quote.json"""

    def test_to_contract_valid(self) -> None:
        selection = parse_selection(
            {
                "fall": {"regular_leagues": 4},
                "winter": {"spare_only": True},
                "discount": "student",
            }
        )

        payload = build_quote(selection).to_contract()

        validate_quote(payload)
        assert payload["club_year"] == "2022-2023"
        assert [item["kind"] for item in payload["fall"]["items"]] == [
            "membership",
            "first_league",
            "second_league",
            "third_league",
            "additional_league",
        ]
        assert [item["kind"] for item in payload["winter"]["items"]] == ["basic_ice_reduced"]
        assert payload["entitlements"]["fall_league_count"] == 4
        assert "leagues" in payload["entitlements"]["fall"]

    def test_to_contract_is_json_serializable(self) -> None:
        payload = build_quote(Selection(fall=SeasonSelection(day_leagues=True))).to_contract()

        decoded = json.loads(json.dumps(payload))

        assert decoded == payload


# =============================================================================
# CUSTOM CATALOG
# =============================================================================


class TestCustomCatalog:
    """Quote priced from another club year"""

    def test_prices_from_given_catalog(self) -> None:
        with open(DEFAULT_CATALOG_PATH, "r", encoding="utf-8") as f:
            data = json.load(f)
        data["club_year"] = "2023-2024"
        data["items"]["membership"]["cost"] = 150
        catalog = catalog_from_dict(data)

        quote = build_quote(Selection(fall=SeasonSelection(regular_leagues=1)), catalog=catalog)

        assert quote.club_year == "2023-2024"
        assert quote.fall.total == pytest.approx(305.0)
