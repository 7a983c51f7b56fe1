"""Optional consistency checks for coverage summaries.

Rendering takes ``found`` and ``hit`` at face value. Callers that want
stronger guarantees run one of these explicitly before rendering:

Usage:
    problems = find_inconsistencies(coverage)   # [] when consistent
    ensure_consistent(coverage)                 # raises InconsistentCoverageError
    warn_if_inconsistent(coverage)              # one UserWarning per problem
"""

import warnings

from lcov_report.records.branch import BranchCoverage
from lcov_report.records.function import FunctionCoverage


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class InconsistentCoverageError(ValueError):
    """Raised when a summary disagrees with its own data."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__(
            "Inconsistent coverage:\n" + "\n".join(f"  - {p}" for p in problems)
        )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def find_inconsistencies(coverage: BranchCoverage | FunctionCoverage) -> list[str]:
    """Return a description of every problem found in *coverage*.

    Checks non-negative numbers, ``hit <= found``, ``found`` against the
    number of entries and ``hit`` against the number of entries with a
    positive count.
    """
    if isinstance(coverage, BranchCoverage):
        return _check_branches(coverage)
    if isinstance(coverage, FunctionCoverage):
        return _check_functions(coverage)
    raise TypeError(
        f"Expected BranchCoverage or FunctionCoverage, got {type(coverage).__name__}"
    )


def ensure_consistent(coverage: BranchCoverage | FunctionCoverage) -> None:
    """Raise InconsistentCoverageError if *coverage* has any problem."""
    problems = find_inconsistencies(coverage)
    if problems:
        raise InconsistentCoverageError(problems)


def warn_if_inconsistent(coverage: BranchCoverage | FunctionCoverage) -> list[str]:
    """Emit a UserWarning per problem and return the problems.

    For library callers that route diagnostics through :mod:`warnings`; the
    CLI reports problems itself from :func:`find_inconsistencies`.
    """
    problems = find_inconsistencies(coverage)
    for problem in problems:
        warnings.warn(problem, UserWarning, stacklevel=2)
    return problems


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _check_summary(kind: str, found: int, hit: int, total: int, hits: int) -> list[str]:
    problems: list[str] = []
    if found < 0:
        problems.append(f"{kind} found is negative ({found})")
    if hit < 0:
        problems.append(f"{kind} hit is negative ({hit})")
    if hit > found:
        problems.append(f"{kind} hit ({hit}) exceeds found ({found})")
    if found != total:
        problems.append(f"{kind} found ({found}) does not match {total} data entries")
    if hit != hits:
        problems.append(f"{kind} hit ({hit}) does not match {hits} entries with hits")
    return problems


def _check_branches(coverage: BranchCoverage) -> list[str]:
    problems: list[str] = []
    for index, item in enumerate(coverage.data):
        for name in ("line_number", "block_number", "branch_number"):
            value = getattr(item, name)
            if value < 0:
                problems.append(f"branch #{index}: {name} is negative ({value})")
        if item.taken is not None and item.taken < 0:
            problems.append(f"branch #{index}: taken is negative ({item.taken})")

    hits = sum(1 for item in coverage.data if item.is_taken)
    problems += _check_summary("branches", coverage.found, coverage.hit,
                               len(coverage.data), hits)
    return problems


def _check_functions(coverage: FunctionCoverage) -> list[str]:
    problems: list[str] = []
    for index, item in enumerate(coverage.data):
        if not item.function_name:
            problems.append(f"function #{index}: name is empty")
        if item.line_number < 0:
            problems.append(f"function #{index}: line_number is negative ({item.line_number})")
        if item.execution_count < 0:
            problems.append(
                f"function #{index}: execution_count is negative ({item.execution_count})"
            )

    hits = sum(1 for item in coverage.data if item.execution_count > 0)
    problems += _check_summary("functions", coverage.found, coverage.hit,
                               len(coverage.data), hits)
    return problems
