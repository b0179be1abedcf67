"""
Catalog — Static price list, discounts and benefit wording

Immutable lookup over the closed enumerations:
- ItemKind → Sku (name, cost)
- DiscountKind → Discount (name, strategy, amount)
- EntitlementKind → wording

Loaded from JSON configuration, validated against the catalog contract,
then frozen. A catalog missing any enum member is rejected at load time, so
lookups afterwards are total.
"""

import json
import logging
from pathlib import Path
from typing import Final

import jsonschema
from pydantic import BaseModel, Field, ValidationError, model_validator

from src.core.contracts.validators import validate_catalog
from src.core.domain.discounts import Discount, DiscountKind
from src.core.domain.entitlements import EntitlementKind
from src.core.domain.items import ItemKind, Sku

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Bundled price list
DEFAULT_CATALOG_PATH: Final[Path] = Path(__file__).parent / "data" / "catalog_2022_2023.json"

# Placeholders of the LEAGUES wording template
LEAGUE_COUNT_PLACEHOLDER: Final[str] = "<NUM>"
LEAGUE_PLURAL_PLACEHOLDER: Final[str] = "<PLURAL_LEAGUE>"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CatalogError(Exception):
    """
    Catalog configuration cannot be loaded.

    Raised for unreadable files, invalid JSON, contract violations and
    incomplete price lists. The original exception is chained.
    """
    pass


# =============================================================================
# CATALOG MODEL
# =============================================================================


class Catalog(BaseModel):
    """
    Price list for one club year.

    Immutable model (frozen=True), built once at startup.
    """

    schema_version: str = Field(..., pattern="^1$", description="Catalog format version")
    club_year: str = Field(..., min_length=1, description="Club year label (e.g. '2022-2023')")

    items: dict[ItemKind, Sku] = Field(..., description="Item prices")
    discounts: dict[DiscountKind, Discount] = Field(..., description="Discount definitions")
    benefits: dict[EntitlementKind, str] = Field(..., description="Benefit wording")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_complete(self) -> "Catalog":
        """Every enum member must be priced/worded."""
        missing_items = [k.value for k in ItemKind if k not in self.items]
        if missing_items:
            raise ValueError(f"catalog is missing items: {missing_items}")

        missing_discounts = [k.value for k in DiscountKind if k not in self.discounts]
        if missing_discounts:
            raise ValueError(f"catalog is missing discounts: {missing_discounts}")

        missing_benefits = [k.value for k in EntitlementKind if k not in self.benefits]
        if missing_benefits:
            raise ValueError(f"catalog is missing benefit wording: {missing_benefits}")

        return self

    def price_of(self, kind: ItemKind) -> Sku:
        """
        Sku for an item kind.

        Args:
            kind: Item kind

        Returns:
            Immutable Sku (name, cost)
        """
        return self.items[kind]

    def discount_of(self, kind: DiscountKind) -> Discount:
        """
        Discount definition for a discount kind.

        Args:
            kind: Discount kind

        Returns:
            Immutable Discount (name, strategy, amount)
        """
        return self.discounts[kind]

    def benefit_text(self, kind: EntitlementKind, league_count: int = 0) -> str:
        """
        Wording of an entitlement.

        The LEAGUES template gets the league count and the singular/plural
        noun substituted; other wordings are returned as is.

        Args:
            kind: Entitlement kind
            league_count: Leagues in the season (LEAGUES only)

        Returns:
            Display text
        """
        text = self.benefits[kind]
        if kind != EntitlementKind.LEAGUES:
            return text

        noun = "league" if league_count == 1 else "leagues"
        return text.replace(LEAGUE_COUNT_PLACEHOLDER, str(league_count)).replace(
            LEAGUE_PLURAL_PLACEHOLDER, noun
        )


# =============================================================================
# LOADING
# =============================================================================


def catalog_from_dict(data: dict) -> Catalog:
    """
    Build a Catalog from decoded configuration.

    Args:
        data: Decoded JSON configuration

    Returns:
        Frozen Catalog

    Raises:
        CatalogError: If data violates the catalog contract or the model
    """
    try:
        validate_catalog(data)
        return Catalog.model_validate(data)
    except jsonschema.ValidationError as e:
        raise CatalogError(f"catalog violates contract: {e.message}") from e
    except ValidationError as e:
        raise CatalogError(f"invalid catalog: {e}") from e


def load_catalog(path: Path | str | None = None) -> Catalog:
    """
    Load a catalog from a JSON file.

    Args:
        path: Configuration file (default: bundled price list)

    Returns:
        Frozen Catalog

    Raises:
        CatalogError: If the file cannot be read, decoded or validated
    """
    catalog_path = Path(path) if path is not None else DEFAULT_CATALOG_PATH

    try:
        with open(catalog_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise CatalogError(f"cannot read catalog {catalog_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"catalog {catalog_path} is not valid JSON: {e}") from e

    catalog = catalog_from_dict(data)
    logger.debug(
        "Loaded catalog %s (%d items, %d discounts) from %s",
        catalog.club_year,
        len(catalog.items),
        len(catalog.discounts),
        catalog_path,
    )
    return catalog


# Global catalog, frozen for the process lifetime
DEFAULT_CATALOG: Final[Catalog] = load_catalog()
