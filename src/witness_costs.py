import logging
from dataclasses import dataclass, fields, replace
from typing import Optional

from helpers import InvalidParameterError, require_positive, slot_byte_budget

logger = logging.getLogger(__name__)

MERKLE = "merkle"
VERKLE = "verkle"
SCHEMES = (MERKLE, VERKLE)

# Reference costs based on Ethereum stateless research
MERKLE_ACCOUNT_WITNESS = 3_000  # bytes per account in MPT
VERKLE_ACCOUNT_WITNESS = 200  # bytes per account in Verkle
MERKLE_STORAGE_WITNESS = 3_000  # bytes per storage slot in MPT
VERKLE_STORAGE_WITNESS = 200  # bytes per storage slot in Verkle
MERKLE_CODE_CHUNK = 24_200  # whole contract code in MPT
VERKLE_CODE_CHUNK = 200  # per 31-byte code chunk in Verkle

BLOCK_TIME_SECONDS = 12
NETWORK_BANDWIDTH_MBPS = 10  # Conservative estimate


@dataclass(frozen=True)
class SchemeCosts:
    """Per-unit witness cost in bytes for a single scheme."""

    account_witness: int
    storage_witness: int
    code_chunk: int

    def __post_init__(self):
        for f in fields(self):
            require_positive(f.name, getattr(self, f.name))


@dataclass(frozen=True)
class WitnessCostTable:
    """
    Witness costs for both schemes plus the network assumptions used to
    decide whether a witness propagates within one slot.
    """

    merkle: SchemeCosts
    verkle: SchemeCosts
    block_time_seconds: int = BLOCK_TIME_SECONDS
    network_bandwidth_mbps: int = NETWORK_BANDWIDTH_MBPS

    def __post_init__(self):
        require_positive("block_time_seconds", self.block_time_seconds)
        require_positive("network_bandwidth_mbps", self.network_bandwidth_mbps)

        for f in fields(SchemeCosts):
            merkle_cost = getattr(self.merkle, f.name)
            verkle_cost = getattr(self.verkle, f.name)
            if verkle_cost > merkle_cost:
                logger.warning(
                    "Verkle %s cost (%d bytes) exceeds Merkle cost (%d bytes)",
                    f.name, verkle_cost, merkle_cost,
                )

    def costs(self, scheme: str) -> SchemeCosts:
        if scheme == MERKLE:
            return self.merkle
        if scheme == VERKLE:
            return self.verkle
        raise InvalidParameterError(f"Unknown scheme {scheme!r}, expected one of {SCHEMES}")

    def account_witness_bytes(self, scheme: str) -> int:
        return self.costs(scheme).account_witness

    def storage_witness_bytes(self, scheme: str) -> int:
        return self.costs(scheme).storage_witness

    def code_chunk_bytes(self, scheme: str) -> int:
        return self.costs(scheme).code_chunk

    @property
    def slot_byte_budget(self) -> int:
        return slot_byte_budget(self.network_bandwidth_mbps, self.block_time_seconds)

    def with_network(self, bandwidth_mbps: Optional[int] = None,
                     block_time_seconds: Optional[int] = None) -> "WitnessCostTable":
        """Copy of this table with different network assumptions."""
        changes = {}
        if bandwidth_mbps is not None:
            changes["network_bandwidth_mbps"] = bandwidth_mbps
        if block_time_seconds is not None:
            changes["block_time_seconds"] = block_time_seconds
        return replace(self, **changes)


REFERENCE_COSTS = WitnessCostTable(
    merkle=SchemeCosts(
        account_witness=MERKLE_ACCOUNT_WITNESS,
        storage_witness=MERKLE_STORAGE_WITNESS,
        code_chunk=MERKLE_CODE_CHUNK,
    ),
    verkle=SchemeCosts(
        account_witness=VERKLE_ACCOUNT_WITNESS,
        storage_witness=VERKLE_STORAGE_WITNESS,
        code_chunk=VERKLE_CODE_CHUNK,
    ),
)
