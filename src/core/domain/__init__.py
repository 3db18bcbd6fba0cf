"""
Domain models and value objects.

Immutable Pydantic models shared by the engines.
"""

from src.core.domain.witness_table import (
    DEFAULT_WITNESS_TABLE,
    WitnessBound,
    WitnessTable,
)

__all__ = [
    "DEFAULT_WITNESS_TABLE",
    "WitnessBound",
    "WitnessTable",
]
