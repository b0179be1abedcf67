"""
Catalog — price list, discounts and benefit wording loaded from configuration.
"""

from .catalog import (
    DEFAULT_CATALOG,
    DEFAULT_CATALOG_PATH,
    Catalog,
    CatalogError,
    catalog_from_dict,
    load_catalog,
)

__all__ = [
    "Catalog",
    "CatalogError",
    "DEFAULT_CATALOG",
    "DEFAULT_CATALOG_PATH",
    "catalog_from_dict",
    "load_catalog",
]
