"""Branch coverage records.

Usage:
    arm = BranchData(line_number=127, block_number=3, branch_number=2, taken=1)
    str(arm)                                     # "BRDA:127,3,2,1"
    BranchCoverage(found=23, hit=11, data=[arm]).render()
"""

from dataclasses import dataclass, field

from lcov_report.tokens import BRANCH_DATA, BRANCHES_FOUND, BRANCHES_HIT

#: Rendered in place of the taken count when it is zero or unknown
NOT_TAKEN = "-"


@dataclass
class BranchData:
    """One branch arm observation.

    ``taken`` is ``None`` when no count was reported and ``0`` when the arm
    was reached but never taken. LCOV renders both as ``-``.
    """

    line_number: int = 0
    block_number: int = 0
    branch_number: int = 0
    taken: int | None = 0

    @property
    def is_taken(self) -> bool:
        return self.taken is not None and self.taken > 0

    def render(self) -> str:
        """Return the ``BRDA:`` line for this arm."""
        taken = str(self.taken) if self.is_taken else NOT_TAKEN
        return (
            f"{BRANCH_DATA}:{self.line_number},{self.block_number},"
            f"{self.branch_number},{taken}"
        )

    def __str__(self) -> str:
        return self.render()


@dataclass
class BranchCoverage:
    """Branch summary of one scope plus its arms, in emission order.

    ``found`` and ``hit`` are taken as given; see
    :mod:`lcov_report.validation` to check them against ``data``.
    """

    found: int = 0
    hit: int = 0
    data: list[BranchData] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Own a private list even when handed a generator or a shared list
        self.data = list(self.data or [])

    def render(self) -> str:
        """Return every ``BRDA:`` line followed by ``BRF:`` and ``BRH:``."""
        lines = [item.render() for item in self.data]
        lines.append(f"{BRANCHES_FOUND}:{self.found}")
        lines.append(f"{BRANCHES_HIT}:{self.hit}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
