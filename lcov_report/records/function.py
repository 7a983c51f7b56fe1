"""Function coverage records.

A function contributes two lines to a record: its definition (``FN:``) and
its execution count (``FNDA:``). LCOV requires every definition line before
the first data line, so :class:`FunctionCoverage` renders in two passes.
"""

from dataclasses import dataclass, field

from lcov_report.tokens import (
    FUNCTION_DATA,
    FUNCTION_NAME,
    FUNCTIONS_FOUND,
    FUNCTIONS_HIT,
)


@dataclass
class FunctionData:
    """Definition line and execution count of one function."""

    function_name: str = ""
    line_number: int = 0
    execution_count: int = 0

    def render(self, as_definition: bool = False) -> str:
        """Return the ``FN:`` line if *as_definition*, else the ``FNDA:`` line."""
        if as_definition:
            return f"{FUNCTION_NAME}:{self.line_number},{self.function_name}"
        return f"{FUNCTION_DATA}:{self.execution_count},{self.function_name}"

    def __str__(self) -> str:
        return self.render(as_definition=False)


@dataclass
class FunctionCoverage:
    """Function summary of one scope plus its functions, in emission order."""

    found: int = 0
    hit: int = 0
    data: list[FunctionData] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.data = list(self.data or [])

    def render(self) -> str:
        """Return all ``FN:`` lines, then all ``FNDA:`` lines, then ``FNF:``/``FNH:``.

        Both passes walk ``data`` in the same order.
        """
        lines = [item.render(as_definition=True) for item in self.data]
        lines.extend(item.render(as_definition=False) for item in self.data)
        lines.append(f"{FUNCTIONS_FOUND}:{self.found}")
        lines.append(f"{FUNCTIONS_HIT}:{self.hit}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
