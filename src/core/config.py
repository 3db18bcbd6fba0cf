"""
Engine Configuration

Frozen configuration for the primality engine and loading of custom witness
tables from JSON files. A loaded file passes two gates:
1. JSON Schema contract (contracts/schema/witness_table.json)
2. Pydantic model validation (strictly increasing thresholds)
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Union

from src.core.contracts import validate_witness_table
from src.core.domain.witness_table import DEFAULT_WITNESS_TABLE, WitnessTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrimalityConfig:
    """
    Primality engine configuration.

    witness_table: rows consulted for deterministic witness selection
    use_fallback: past the last threshold, test every witness below
        2·(ln n)² (GRH-conditional). If False, such inputs raise ValueError.
    """
    witness_table: WitnessTable = DEFAULT_WITNESS_TABLE
    use_fallback: bool = True


DEFAULT_PRIMALITY_CONFIG: Final[PrimalityConfig] = PrimalityConfig()


def load_witness_table(path: Union[str, Path]) -> WitnessTable:
    """
    Load a witness table from a JSON file.

    Args:
        path: Path to a JSON document matching witness_table.json

    Returns:
        Validated immutable WitnessTable

    Raises:
        FileNotFoundError: If the file does not exist
        jsonschema.ValidationError: If the document violates the contract
        pydantic.ValidationError: If thresholds are not strictly increasing
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Witness table not found: {path}")

    with p.open("r", encoding="utf-8") as fh:
        data = json.load(fh)

    validate_witness_table(data)
    table = WitnessTable.model_validate({"bounds": data["bounds"]})

    logger.info(
        "Loaded witness table %s: %d bounds, last threshold %d",
        p, len(table.bounds), table.last_threshold,
    )
    return table


def load_primality_config(
    path: Union[str, Path], use_fallback: bool = True
) -> PrimalityConfig:
    """PrimalityConfig with the witness table stored at `path`."""
    return PrimalityConfig(witness_table=load_witness_table(path), use_fallback=use_fallback)
