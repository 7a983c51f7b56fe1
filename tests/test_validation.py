"""Tests for lcov_report/validation.py"""

import warnings

import pytest

from lcov_report.records.branch import BranchCoverage, BranchData
from lcov_report.records.function import FunctionCoverage, FunctionData
from lcov_report.validation import (
    InconsistentCoverageError,
    ensure_consistent,
    find_inconsistencies,
    warn_if_inconsistent,
)


def _branches(found: int, hit: int) -> BranchCoverage:
    return BranchCoverage(found=found, hit=hit, data=[
        BranchData(1, 0, 0, 3),
        BranchData(1, 0, 1, 0),
        BranchData(2, 0, 0, None),
    ])


def _functions(found: int, hit: int) -> FunctionCoverage:
    return FunctionCoverage(found=found, hit=hit, data=[
        FunctionData("main", 1, 2),
        FunctionData("unused", 9, 0),
    ])


# ---------------------------------------------------------------------------
# find_inconsistencies()
# ---------------------------------------------------------------------------

def test_consistent_branches():
    assert find_inconsistencies(_branches(3, 1)) == []


def test_consistent_functions():
    assert find_inconsistencies(_functions(2, 1)) == []


def test_empty_aggregates_are_consistent():
    assert find_inconsistencies(BranchCoverage()) == []
    assert find_inconsistencies(FunctionCoverage()) == []


def test_found_mismatch():
    problems = find_inconsistencies(_branches(4, 1))
    assert any("found (4)" in p for p in problems)


def test_hit_mismatch():
    problems = find_inconsistencies(_functions(2, 2))
    assert any("hit (2) does not match 1" in p for p in problems)


def test_hit_exceeds_found():
    problems = find_inconsistencies(FunctionCoverage(found=0, hit=1))
    assert any("exceeds found" in p for p in problems)


def test_negative_fields():
    coverage = BranchCoverage(found=1, hit=0, data=[BranchData(-1, 0, 0, -2)])
    problems = find_inconsistencies(coverage)
    assert any("line_number is negative" in p for p in problems)
    assert any("taken is negative" in p for p in problems)


def test_empty_function_name():
    coverage = FunctionCoverage(found=1, hit=0, data=[FunctionData("", 1, 0)])
    assert find_inconsistencies(coverage) == ["function #0: name is empty"]


def test_unsupported_type():
    with pytest.raises(TypeError, match="BranchData"):
        find_inconsistencies(BranchData())


def test_rendering_ignores_inconsistency():
    assert _branches(99, 42).render().endswith("BRF:99\nBRH:42")


# ---------------------------------------------------------------------------
# ensure_consistent() / warn_if_inconsistent()
# ---------------------------------------------------------------------------

def test_ensure_consistent_passes():
    assert ensure_consistent(_functions(2, 1)) is None


def test_ensure_consistent_raises_with_all_problems():
    with pytest.raises(InconsistentCoverageError, match="Inconsistent coverage") as info:
        ensure_consistent(_branches(5, 3))
    assert len(info.value.problems) == 2
    assert isinstance(info.value, ValueError)


def test_warn_if_inconsistent_emits_warnings():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        problems = warn_if_inconsistent(_functions(3, 1))

    assert len(problems) == 1
    assert [str(w.message) for w in caught] == problems
    assert all(issubclass(w.category, UserWarning) for w in caught)


def test_warn_if_inconsistent_silent_when_consistent():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        assert warn_if_inconsistent(_branches(3, 1)) == []
    assert caught == []
