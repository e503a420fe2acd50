"""
Witness-size scenarios for stateless clients.

Each generator combines the per-unit costs of a WitnessCostTable into the
total witness a client must download for one kind of operation, under both
the Merkle Patricia Trie and the Verkle Tree.
"""

import logging
from typing import List

from helpers import require_count
from witness_comparison import WitnessComparison
from witness_costs import MERKLE, REFERENCE_COSTS, VERKLE, WitnessCostTable

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_SLOTS = 100

# Typical contract call: caller and contract accounts, some storage, code
DEFAULT_CALL_ACCOUNTS = 2
DEFAULT_CALL_STORAGE_SLOTS = 50
DEFAULT_CALL_CODE_CHUNKS = 1

# Worst case: 15M gas / 2500 gas per access = 6000 accesses
# Conservative estimate: 5000 accesses
DEFAULT_BLOCK_ACCESSES = 5_000

SCENARIO_LABELS = {
    "single_account": "Scenario 1: Single Account Balance Check",
    "storage_access": "Scenario 2: Smart Contract Interaction ({slots} storage slots)",
    "contract_call": (
        "Scenario 3: Contract Call with Code Access "
        "({accounts} accounts, {storage_slots} storage slots, {code_chunks} code chunks)"
    ),
    "full_block": "Scenario 4: Full Block ({accesses} state accesses - worst case)",
}


def scenario_label(key: str, **params) -> str:
    return SCENARIO_LABELS[key].format(**params)


def _compare(label: str, costs: WitnessCostTable, totals) -> WitnessComparison:
    comparison = WitnessComparison(label, totals[MERKLE], totals[VERKLE], costs)
    logger.debug(
        "%s: merkle=%d bytes, verkle=%d bytes",
        label, comparison.merkle_size_bytes, comparison.verkle_size_bytes,
    )
    return comparison


def single_account(costs: WitnessCostTable = REFERENCE_COSTS) -> WitnessComparison:
    """Prove one account's balance."""
    totals = {scheme: costs.account_witness_bytes(scheme) for scheme in (MERKLE, VERKLE)}
    return _compare(scenario_label("single_account"), costs, totals)


def storage_access(slots: int = DEFAULT_STORAGE_SLOTS,
                   costs: WitnessCostTable = REFERENCE_COSTS) -> WitnessComparison:
    """Prove `slots` storage slots of a single contract."""
    require_count("slots", slots)
    totals = {scheme: costs.storage_witness_bytes(scheme) * slots for scheme in (MERKLE, VERKLE)}
    return _compare(scenario_label("storage_access", slots=slots), costs, totals)


def contract_call_with_code(accounts: int = DEFAULT_CALL_ACCOUNTS,
                            storage_slots: int = DEFAULT_CALL_STORAGE_SLOTS,
                            code_chunks: int = DEFAULT_CALL_CODE_CHUNKS,
                            costs: WitnessCostTable = REFERENCE_COSTS) -> WitnessComparison:
    """
    Prove the accounts, storage and code touched by a contract call.

    Under the MPT the code cost is the whole contract, under Verkle it is
    per chunk, so `code_chunks` scales both the same way here.
    """
    require_count("accounts", accounts)
    require_count("storage_slots", storage_slots)
    require_count("code_chunks", code_chunks)

    totals = {}
    for scheme in (MERKLE, VERKLE):
        totals[scheme] = (
            costs.account_witness_bytes(scheme) * accounts
            + costs.storage_witness_bytes(scheme) * storage_slots
            + costs.code_chunk_bytes(scheme) * code_chunks
        )
    label = scenario_label(
        "contract_call", accounts=accounts, storage_slots=storage_slots, code_chunks=code_chunks
    )
    return _compare(label, costs, totals)


def full_block(accesses: int = DEFAULT_BLOCK_ACCESSES,
               costs: WitnessCostTable = REFERENCE_COSTS) -> WitnessComparison:
    """Prove every state access of a full block, counted as account proofs."""
    require_count("accesses", accesses)
    totals = {scheme: costs.account_witness_bytes(scheme) * accesses for scheme in (MERKLE, VERKLE)}
    return _compare(scenario_label("full_block", accesses=accesses), costs, totals)


def reference_scenarios(costs: WitnessCostTable = REFERENCE_COSTS,
                        slots: int = DEFAULT_STORAGE_SLOTS,
                        accesses: int = DEFAULT_BLOCK_ACCESSES) -> List[WitnessComparison]:
    return [
        single_account(costs),
        storage_access(slots, costs),
        contract_call_with_code(costs=costs),
        full_block(accesses, costs),
    ]
