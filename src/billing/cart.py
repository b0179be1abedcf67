"""Cart — purchased items and applied discounts for one season.

Ordering rules:
- items keep insertion order (purchase order; league slot numbering depends on it)
- discounts are kept sorted by strategy, ABSOLUTE before PERCENTAGE, stable
  within a strategy group (re-sorted on every insertion)

total() is computed on demand and never cached:
    total = (sum(item.cost) - sum(absolute)) * Π (1 - pct / 100)
The result is NOT clamped at zero.
"""

from src.core.catalog import DEFAULT_CATALOG, Catalog
from src.core.domain.discounts import AppliedDiscount, DiscountKind, DiscountStrategy
from src.core.domain.items import ItemKind, LineItem
from src.core.math.money import apply_absolute_discount, apply_percentage_discount


class Cart:
    """Ordered items + discounts for one season.

    Owned by one season's resolution step; read-only for everybody else.
    Accessors return copies, so callers cannot mutate cart internals.
    """

    def __init__(self, catalog: Catalog | None = None):
        """
        Args:
            catalog: price list (default: bundled catalog)
        """
        self.catalog = catalog or DEFAULT_CATALOG

        self._items: list[LineItem] = []
        self._discounts: list[AppliedDiscount] = []

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_item(self, kind: ItemKind) -> None:
        """Append the catalog Sku for kind (no deduplication)."""
        self._items.append(LineItem.from_sku(kind, self.catalog.price_of(kind)))

    def add_discount(self, kind: DiscountKind) -> None:
        """Append the catalog Discount for kind and restore strategy order."""
        self._discounts.append(
            AppliedDiscount.from_discount(kind, self.catalog.discount_of(kind))
        )
        # list.sort is stable: insertion order is kept within a strategy
        self._discounts.sort(key=lambda d: d.sort_key())

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def has_item(self, kind: ItemKind) -> bool:
        """True if an item with kind's catalog name is present.

        Matching is by name: basic ice at either price point matches
        BASIC_ICE and BASIC_ICE_REDUCED alike.
        """
        name = self.catalog.price_of(kind).name
        return any(item.name == name for item in self._items)

    def has_discount(self, kind: DiscountKind) -> bool:
        return any(d.kind == kind for d in self._discounts)

    def league_count(self) -> int:
        """Number of competitive leagues (named slots + additional)."""
        return sum(1 for item in self._items if item.is_league())

    def is_empty(self) -> bool:
        return not self._items

    @property
    def items(self) -> list[LineItem]:
        return list(self._items)

    @property
    def discounts(self) -> list[AppliedDiscount]:
        return list(self._discounts)

    # -------------------------------------------------------------------------
    # Totals
    # -------------------------------------------------------------------------

    def raw_total(self) -> float:
        """Sum of item costs before discounts."""
        return sum((item.cost for item in self._items), 0.0)

    def total(self) -> float:
        """Total after discounts, applied in the current (sorted) order."""
        running_total = self.raw_total()

        for discount in self._discounts:
            if discount.strategy == DiscountStrategy.ABSOLUTE:
                running_total = apply_absolute_discount(running_total, discount.amount)
            else:
                running_total = apply_percentage_discount(running_total, discount.amount)

        return running_total

    def as_dict(self) -> dict:
        """JSON-compatible snapshot (items, discounts, total)."""
        return {
            "items": [item.model_dump(mode="json") for item in self._items],
            "discounts": [d.model_dump(mode="json") for d in self._discounts],
            "total": self.total(),
        }

    def __repr__(self) -> str:
        kinds = ", ".join(item.kind.value for item in self._items)
        discounts = ", ".join(d.kind.value for d in self._discounts)
        return f"Cart(items=[{kinds}], discounts=[{discounts}], total={self.total():.2f})"
