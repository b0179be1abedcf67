"""
Contract Validation Module

Validation of the JSON contracts of the dues engine (catalog configuration,
member selection, quote).
"""

from .validators import (
    CatalogValidator,
    ContractValidator,
    QuoteValidator,
    SchemaLoader,
    SelectionValidator,
    parse_selection,
    validate_catalog,
    validate_quote,
    validate_selection,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CatalogValidator",
    "SelectionValidator",
    "QuoteValidator",
    # Functions
    "validate_catalog",
    "validate_selection",
    "validate_quote",
    "parse_selection",
]
