"""
JSON Schema Contract Validators

Validation of externally supplied JSON data against the formal JSON Schema
contracts in contracts/schema/. Uses jsonschema (Draft 2020-12).

Schemas:
- witness_table.json (custom Miller–Rabin witness tables)

Schema checks run before the data reaches the Pydantic models, so shape
errors surface as jsonschema.ValidationError and semantic errors
(non-increasing thresholds) as pydantic.ValidationError.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    JSON Schema file loader.

    Finds schemas in contracts/schema/ relative to the project root and
    caches them after the first load.
    """

    def __init__(self):
        # Project root is 4 levels up from this file
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'witness_table')

        Returns:
            Loaded schema as dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER: Optional[SchemaLoader] = None


def get_schema_loader() -> SchemaLoader:
    """
    Shared SchemaLoader, created on first use.

    Importing this module never touches the filesystem; the schema directory
    is only required once a contract is actually validated.
    """
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Validates data against one named JSON Schema."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = get_schema_loader().load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: If data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Every validation error, not just the first."""
        return self.validator.iter_errors(data)


class WitnessTableValidator(ContractValidator):
    """Validator for the witness_table contract."""

    def __init__(self):
        super().__init__("witness_table")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_witness_table(data: Dict[str, Any]) -> None:
    """
    Validate witness table data.

    Args:
        data: Parsed JSON document

    Raises:
        ValidationError: If data does not match witness_table.json
    """
    WitnessTableValidator().validate(data)
