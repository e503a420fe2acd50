from dataclasses import dataclass, field
from typing import Any, Dict

from helpers import InvalidParameterError, require_count, require_positive
from witness_costs import MERKLE, REFERENCE_COSTS, VERKLE, WitnessCostTable

# Totals above this are large enough to be worth a slot-fit check
LARGE_WITNESS_BYTES = 1_000_000


@dataclass(frozen=True)
class WitnessComparison:
    """Total witness size of one scenario under both schemes."""

    scenario: str
    merkle_size_bytes: int
    verkle_size_bytes: int
    costs: WitnessCostTable = field(default=REFERENCE_COSTS, repr=False)

    def __post_init__(self):
        require_count("merkle_size_bytes", self.merkle_size_bytes)
        # improvement_factor divides by this
        require_positive("verkle_size_bytes", self.verkle_size_bytes)

    def size_bytes(self, scheme: str) -> int:
        if scheme == MERKLE:
            return self.merkle_size_bytes
        if scheme == VERKLE:
            return self.verkle_size_bytes
        raise InvalidParameterError(f"Unknown scheme {scheme!r}")

    def improvement_factor(self) -> float:
        return self.merkle_size_bytes / self.verkle_size_bytes

    def bytes_saved(self) -> int:
        return self.merkle_size_bytes - self.verkle_size_bytes

    def fits_in_slot(self, scheme: str) -> bool:
        return self.size_bytes(scheme) <= self.costs.slot_byte_budget

    def merkle_fits_in_slot(self) -> bool:
        return self.fits_in_slot(MERKLE)

    def verkle_fits_in_slot(self) -> bool:
        return self.fits_in_slot(VERKLE)

    def exceeds_threshold(self, threshold_bytes: int = LARGE_WITNESS_BYTES) -> bool:
        return self.merkle_size_bytes > threshold_bytes or self.verkle_size_bytes > threshold_bytes

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scenario": self.scenario,
            "merkle_size_bytes": self.merkle_size_bytes,
            "verkle_size_bytes": self.verkle_size_bytes,
            "improvement_factor": self.improvement_factor(),
            "bytes_saved": self.bytes_saved(),
            "merkle_fits_in_slot": self.merkle_fits_in_slot(),
            "verkle_fits_in_slot": self.verkle_fits_in_slot(),
            "slot_byte_budget": self.costs.slot_byte_budget,
        }
