"""
Contract Validation Module

JSON Schema validation of externally supplied data (contracts/schema/).
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    WitnessTableValidator,
    get_schema_loader,
    validate_witness_table,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "WitnessTableValidator",
    # Functions
    "get_schema_loader",
    "validate_witness_table",
]
