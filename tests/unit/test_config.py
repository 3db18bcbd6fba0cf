"""
Tests for Engine Configuration

Checked invariants:
1. Default config uses the published table with the fallback enabled
2. JSON witness tables pass both the schema and the model gates
3. A loaded table drives miller_rabin
"""

import dataclasses
import json
import logging

import jsonschema
import pydantic
import pytest

from src.core.config import (
    DEFAULT_PRIMALITY_CONFIG,
    PrimalityConfig,
    load_primality_config,
    load_witness_table,
)
from src.core.domain.witness_table import DEFAULT_WITNESS_TABLE
from src.core.math.primality import miller_rabin


def write_table(tmp_path, document):
    path = tmp_path / "witnesses.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


class TestPrimalityConfig:
    def test_defaults(self):
        assert DEFAULT_PRIMALITY_CONFIG.witness_table == DEFAULT_WITNESS_TABLE
        assert DEFAULT_PRIMALITY_CONFIG.use_fallback is True

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_PRIMALITY_CONFIG.use_fallback = False

    def test_override(self):
        config = PrimalityConfig(use_fallback=False)
        assert config.witness_table == DEFAULT_WITNESS_TABLE
        assert config.use_fallback is False


class TestLoadWitnessTable:
    """JSON file → WitnessTable."""

    def test_load_valid(self, tmp_path, caplog):
        path = write_table(tmp_path, {
            "schema_version": "1",
            "bounds": [
                {"threshold": 2047, "witnesses": [2]},
                {"threshold": 1373653, "witnesses": [2, 3]},
            ],
        })
        with caplog.at_level(logging.INFO, logger="src.core.config"):
            table = load_witness_table(path)

        assert table.last_threshold == 1373653
        assert table.bounds[0].witnesses == (2,)
        assert "Loaded witness table" in caplog.text

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Witness table not found"):
            load_witness_table(tmp_path / "absent.json")

    def test_schema_violation(self, tmp_path):
        path = write_table(tmp_path, {"bounds": [{"threshold": 2047, "witnesses": [2]}]})
        with pytest.raises(jsonschema.ValidationError):
            load_witness_table(path)

    def test_non_increasing_thresholds(self, tmp_path):
        path = write_table(tmp_path, {
            "schema_version": "1",
            "bounds": [
                {"threshold": 1373653, "witnesses": [2, 3]},
                {"threshold": 2047, "witnesses": [2]},
            ],
        })
        with pytest.raises(pydantic.ValidationError):
            load_witness_table(path)

    def test_big_thresholds_survive_json(self, tmp_path):
        document = {"schema_version": "1", **DEFAULT_WITNESS_TABLE.model_dump()}
        table = load_witness_table(write_table(tmp_path, document))
        assert table == DEFAULT_WITNESS_TABLE


class TestLoadPrimalityConfig:
    def test_truncated_table_drives_engine(self, tmp_path):
        path = write_table(tmp_path, {
            "schema_version": "1",
            "bounds": [{"threshold": 2047, "witnesses": [2]}],
        })
        config = load_primality_config(path, use_fallback=False)

        assert miller_rabin(2039, config)
        assert not miller_rabin(2041, config)
        with pytest.raises(ValueError, match="fallback is disabled"):
            miller_rabin(2053, config)

    def test_fallback_enabled_by_default(self, tmp_path):
        path = write_table(tmp_path, {
            "schema_version": "1",
            "bounds": [{"threshold": 2047, "witnesses": [2]}],
        })
        config = load_primality_config(path)
        assert config.use_fallback is True
        assert miller_rabin(2053, config)

