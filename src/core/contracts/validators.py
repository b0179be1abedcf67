"""
JSON Schema Contract Validators

Validation of JSON payloads against the formal contracts bundled with
the package (jsonschema, Draft 2020-12).

Schemas:
- catalog.json (price list, discounts, benefit wording)
- enrollment_selection.json (member request)
- quote.json (priced carts + entitlements)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.selection import Selection

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader for JSON Schema files.

    Schemas live in the schema/ directory next to this module.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Cache of loaded schemas
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'catalog')

        Returns:
            Loaded schema as dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            json.JSONDecodeError: If the file is not valid JSON
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation of the schema itself
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Global loader instance
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps validation of a payload against one JSON Schema.
    """

    def __init__(self, schema_name: str):
        """
        Args:
            schema_name: Name of the schema to validate against
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Validate data against the schema.

        Raises:
            ValidationError: If data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Check validity without raising."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Iterate over every validation error.

        Yields:
            ValidationError for each violation found
        """
        return self.validator.iter_errors(data)


class CatalogValidator(ContractValidator):
    """Validator for the catalog configuration."""

    def __init__(self):
        super().__init__("catalog")


class SelectionValidator(ContractValidator):
    """Validator for the enrollment_selection payload."""

    def __init__(self):
        super().__init__("enrollment_selection")


class QuoteValidator(ContractValidator):
    """Validator for the quote payload."""

    def __init__(self):
        super().__init__("quote")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_catalog(data: Dict[str, Any]) -> None:
    """
    Validate catalog configuration data.

    Raises:
        ValidationError: If data does not match the schema
    """
    CatalogValidator().validate(data)


def validate_selection(data: Dict[str, Any]) -> None:
    """
    Validate an enrollment_selection payload.

    Raises:
        ValidationError: If data does not match the schema
    """
    SelectionValidator().validate(data)


def validate_quote(data: Dict[str, Any]) -> None:
    """
    Validate a quote payload.

    Raises:
        ValidationError: If data does not match the schema
    """
    QuoteValidator().validate(data)


def parse_selection(data: Dict[str, Any]) -> Selection:
    """
    Validate a raw selection payload and build the Selection model.

    The JSON contract rejects unknown fields and winter_only; the model
    then clamps league counts.

    Args:
        data: Raw payload (e.g. decoded request body)

    Returns:
        Immutable Selection

    Raises:
        ValidationError: If data does not match the schema
    """
    validate_selection(data)
    return Selection.model_validate(data)
