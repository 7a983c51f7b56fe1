"""Branch and function coverage records in the LCOV tracefile format."""

from lcov_report.records.branch import BranchCoverage, BranchData
from lcov_report.records.function import FunctionCoverage, FunctionData

__version__ = "0.1.0"

__all__ = [
    "BranchCoverage",
    "BranchData",
    "FunctionCoverage",
    "FunctionData",
    "__version__",
]
