"""
WitnessTable — Deterministic Miller–Rabin Witness Bounds

Immutable Pydantic models for the ordered table of (threshold, witness set)
pairs used by the primality engine. For every row, testing exactly the listed
witnesses is sufficient to decide primality of any n < threshold.

Published bounds (Pomerance–Selfridge–Wagstaff, Jaeschke, Zhang–Tang,
Sorenson–Webster). Beyond the last threshold the engine falls back to every
witness below 2·(ln n)², which is conditional on the Generalized Riemann
Hypothesis.

Compatible with JSON Schema contracts/schema/witness_table.json.
"""

from typing import Final, Tuple

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# MODELS
# =============================================================================


class WitnessBound(BaseModel):
    """
    One row of the witness table.

    Every n < threshold is decided correctly by testing exactly `witnesses`.
    """

    threshold: int = Field(..., gt=2, description="Exclusive upper bound for n")
    witnesses: Tuple[int, ...] = Field(
        ..., min_length=1, description="Witness bases sufficient below threshold"
    )

    model_config = {"frozen": True}

    @field_validator("witnesses")
    @classmethod
    def validate_witness_range(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        """Witness bases start at 2 (1 and 0 prove nothing)."""
        for w in v:
            if w < 2:
                raise ValueError(f"witness {w} must be >= 2")
        return v


class WitnessTable(BaseModel):
    """
    Ordered witness table.

    Thresholds are strictly increasing so the first row with n < threshold
    is the tightest applicable one.
    """

    bounds: Tuple[WitnessBound, ...] = Field(..., description="Rows, ascending by threshold")

    model_config = {"frozen": True}

    @field_validator("bounds")
    @classmethod
    def validate_strictly_increasing(
        cls, v: Tuple[WitnessBound, ...]
    ) -> Tuple[WitnessBound, ...]:
        for prev, cur in zip(v, v[1:]):
            if cur.threshold <= prev.threshold:
                raise ValueError(
                    f"thresholds must be strictly increasing: "
                    f"{cur.threshold} follows {prev.threshold}"
                )
        return v

    @property
    def last_threshold(self) -> int:
        """Largest tabulated bound; 0 for an empty table."""
        if not self.bounds:
            return 0
        return self.bounds[-1].threshold


# =============================================================================
# DEFAULT TABLE
# =============================================================================

_FIRST_PRIMES: Final[Tuple[int, ...]] = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)

DEFAULT_WITNESS_TABLE: Final[WitnessTable] = WitnessTable(
    bounds=(
        WitnessBound(threshold=2_047, witnesses=(2,)),
        WitnessBound(threshold=1_373_653, witnesses=(2, 3)),
        WitnessBound(threshold=9_080_191, witnesses=(31, 73)),
        WitnessBound(threshold=25_326_001, witnesses=(2, 3, 5)),
        WitnessBound(threshold=3_215_031_751, witnesses=(2, 3, 5, 7)),
        WitnessBound(threshold=4_759_123_141, witnesses=(2, 7, 61)),
        WitnessBound(threshold=1_122_004_669_633, witnesses=(2, 13, 23, 1_662_803)),
        WitnessBound(threshold=2_152_302_898_747, witnesses=_FIRST_PRIMES[:5]),
        WitnessBound(threshold=3_474_749_660_383, witnesses=_FIRST_PRIMES[:6]),
        WitnessBound(threshold=341_550_071_728_321, witnesses=_FIRST_PRIMES[:7]),
        WitnessBound(threshold=3_825_123_056_546_413_051, witnesses=_FIRST_PRIMES[:9]),
        WitnessBound(
            threshold=318_665_857_834_031_151_167_461, witnesses=_FIRST_PRIMES[:12]
        ),
        WitnessBound(
            threshold=3_317_044_064_679_887_385_961_981, witnesses=_FIRST_PRIMES[:13]
        ),
    )
)
