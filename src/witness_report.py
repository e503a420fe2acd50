#!/usr/bin/env python3
"""
Ethereum witness size comparison: Merkle Patricia Trie vs Verkle Tree.

Prints the witness a stateless client must download for each reference
scenario and whether it can propagate within one slot.
"""

import os
import sys
import json
import logging
import argparse
from typing import List, Optional

import pandas as pd

from helpers import InvalidParameterError, format_bytes, require_positive
from scenarios import DEFAULT_BLOCK_ACCESSES, DEFAULT_STORAGE_SLOTS, reference_scenarios
from witness_comparison import WitnessComparison
from witness_costs import REFERENCE_COSTS, WitnessCostTable

logger = logging.getLogger(__name__)

WIDTH = 70


def print_header(costs: WitnessCostTable = REFERENCE_COSTS):
    print("\n" + "=" * WIDTH)
    print("    Ethereum Witness Size Comparison")
    print("=" * WIDTH)
    print("\nAnalyzing witness sizes for stateless clients...\n")
    print("Network assumptions:")
    print(f"  - Block time: {costs.block_time_seconds} seconds")
    print(f"  - Available bandwidth: {costs.network_bandwidth_mbps} Mbps")
    print(f"  - Slot byte budget: {format_bytes(costs.slot_byte_budget)}")
    print("=" * WIDTH + "\n")


def print_scenario(comparison: WitnessComparison):
    print(f"\n>>> {comparison.scenario}")
    print("-" * WIDTH)
    print(f"  Merkle Patricia Tree:  {format_bytes(comparison.merkle_size_bytes):>15}")
    print(f"  Verkle Tree:           {format_bytes(comparison.verkle_size_bytes):>15}")
    print(f"  Improvement:           {comparison.improvement_factor():>14.1f}x smaller ✓")

    # Only large witnesses are at risk of missing the slot
    if comparison.exceeds_threshold():
        print(f"\n  Can propagate in {comparison.costs.block_time_seconds}-second slot:")
        print(f"    Merkle Patricia Tree: {'✓' if comparison.merkle_fits_in_slot() else '✗ (too large!)'}")
        print(f"    Verkle Tree:          {'✓' if comparison.verkle_fits_in_slot() else '✗'}")


def comparisons_to_frame(comparisons: List[WitnessComparison]) -> pd.DataFrame:
    return pd.DataFrame([c.to_dict() for c in comparisons])


def print_summary(comparisons: List[WitnessComparison]):
    df = comparisons_to_frame(comparisons)
    table = pd.DataFrame({
        "scenario": df["scenario"],
        "merkle": df["merkle_size_bytes"].map(format_bytes),
        "verkle": df["verkle_size_bytes"].map(format_bytes),
        "ratio": df["improvement_factor"].map(lambda x: f"{x:.1f}x"),
        "merkle_fits": df["merkle_fits_in_slot"],
        "verkle_fits": df["verkle_fits_in_slot"],
    })
    print("\n📊 Summary")
    print("-" * WIDTH)
    print(table.to_string(index=False))


def save_report(comparisons: List[WitnessComparison], path: str):
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w") as f:
        json.dump([c.to_dict() for c in comparisons], f, indent=2)
    logger.debug("Wrote %d comparisons to %s", len(comparisons), path)


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Compare Merkle and Verkle witness sizes.")
    parser.add_argument("--slots", type=int, default=DEFAULT_STORAGE_SLOTS,
                        help="Storage slots accessed in the contract interaction scenario")
    parser.add_argument("--accesses", type=int, default=DEFAULT_BLOCK_ACCESSES,
                        help="State accesses in the full block scenario")
    parser.add_argument("--bandwidth", type=int, default=REFERENCE_COSTS.network_bandwidth_mbps,
                        help="Available bandwidth in Mbps")
    parser.add_argument("--block-time", type=int, default=REFERENCE_COSTS.block_time_seconds,
                        help="Slot duration in seconds")
    parser.add_argument("--summary", action="store_true", help="Print a summary table")
    parser.add_argument("--output", help="Write the comparisons to this JSON file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        # A zero count leaves the Verkle witness empty
        require_positive("--slots", args.slots)
        require_positive("--accesses", args.accesses)
        costs = REFERENCE_COSTS.with_network(args.bandwidth, args.block_time)
        comparisons = reference_scenarios(costs, slots=args.slots, accesses=args.accesses)
    except InvalidParameterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print_header(costs)
    for comparison in comparisons:
        print_scenario(comparison)

    if args.summary:
        print_summary(comparisons)

    print("\n" + "=" * WIDTH + "\n")

    if args.output:
        save_report(comparisons, args.output)
        print(f"Saved report to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
