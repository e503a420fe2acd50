import os
import sys
from pathlib import Path

import pytest

project_root = str(Path(__file__).parent.parent)
src_dir = os.path.join(project_root, "src")
sys.path.insert(0, src_dir)

from helpers import InvalidParameterError
from witness_comparison import WitnessComparison
from witness_costs import MERKLE, REFERENCE_COSTS, VERKLE


## Tests


def test_improvement_factor():
    comparison = WitnessComparison("balance", 3_000, 200)
    assert comparison.improvement_factor() == pytest.approx(15.0, abs=1e-9)
    assert comparison.bytes_saved() == 2_800


def test_zero_verkle_size_rejected():
    with pytest.raises(InvalidParameterError):
        WitnessComparison("empty", 0, 0)


def test_negative_merkle_size_rejected():
    with pytest.raises(InvalidParameterError):
        WitnessComparison("negative", -1, 200)


def test_zero_merkle_size_allowed():
    comparison = WitnessComparison("free", 0, 200)
    assert comparison.improvement_factor() == 0.0


def test_fits_in_slot_boundary():
    budget = REFERENCE_COSTS.slot_byte_budget
    at_budget = WitnessComparison("at budget", budget, 1)
    over_budget = WitnessComparison("over budget", budget + 1, 1)

    assert at_budget.fits_in_slot(MERKLE)
    assert not over_budget.fits_in_slot(MERKLE)
    assert over_budget.fits_in_slot(VERKLE)


def test_fits_in_slot_monotonic():
    sizes = [1, 1_000, 14_999_999, 15_000_000, 15_000_001, 30_000_000]
    for smaller in sizes:
        for larger in sizes:
            if smaller > larger:
                continue
            a = WitnessComparison("a", smaller, 1)
            b = WitnessComparison("b", larger, 1)
            if b.merkle_fits_in_slot():
                assert a.merkle_fits_in_slot()


def test_fits_in_slot_uses_table_network():
    slow = REFERENCE_COSTS.with_network(bandwidth_mbps=1)
    comparison = WitnessComparison("slow network", 3_000_000, 200_000, slow)
    # 1 Mbps over 12 s is 1.5 MB
    assert not comparison.merkle_fits_in_slot()
    assert comparison.verkle_fits_in_slot()


def test_unknown_scheme_rejected():
    comparison = WitnessComparison("balance", 3_000, 200)
    with pytest.raises(InvalidParameterError):
        comparison.fits_in_slot("sparse")


def test_equality_includes_costs():
    slow = REFERENCE_COSTS.with_network(bandwidth_mbps=1)
    reference = WitnessComparison("x", 3_000_000, 200)
    on_slow_network = WitnessComparison("x", 3_000_000, 200, slow)

    # Same sizes, different slot-fit answers
    assert reference.merkle_fits_in_slot() != on_slow_network.merkle_fits_in_slot()
    assert reference != on_slow_network
    assert reference.to_dict() != on_slow_network.to_dict()
    assert reference == WitnessComparison("x", 3_000_000, 200, REFERENCE_COSTS.with_network())
    assert hash(reference) == hash(WitnessComparison("x", 3_000_000, 200))


def test_exceeds_threshold():
    assert not WitnessComparison("small", 1_000_000, 200).exceeds_threshold()
    assert WitnessComparison("large", 1_000_001, 200).exceeds_threshold()


def test_to_dict():
    data = WitnessComparison("balance", 3_000, 200).to_dict()
    assert data["scenario"] == "balance"
    assert data["merkle_size_bytes"] == 3_000
    assert data["verkle_size_bytes"] == 200
    assert data["improvement_factor"] == pytest.approx(15.0)
    assert data["merkle_fits_in_slot"] is True
    assert data["slot_byte_budget"] == 15_000_000
