"""Coverage description loading and validation.

A description is a YAML file holding the branch and function coverage of
one scope. It is the boundary where raw input becomes well-typed records.

Usage:
    config = load("lcov-report.yaml")          # raises ConfigError on bad input
    config.functions.render()                  # "FN:...\nFNDA:...\nFNF:..\nFNH:.."
    generate_template("lcov-report.yaml")      # writes example file to disk
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from lcov_report.records.branch import NOT_TAKEN, BranchCoverage, BranchData
from lcov_report.records.function import FunctionCoverage, FunctionData

DEFAULT_PATH = "lcov-report.yaml"
STRICT_ENV = "LCOV_REPORT_STRICT"

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ConfigError(Exception):
    """Raised when the description is missing or invalid."""


# ---------------------------------------------------------------------------
# Config dataclass
# ---------------------------------------------------------------------------

@dataclass
class Config:
    branches: BranchCoverage = field(default_factory=BranchCoverage)
    functions: FunctionCoverage = field(default_factory=FunctionCoverage)
    strict: bool = False


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

def load(config_path: str = DEFAULT_PATH) -> Config:
    """Load a coverage description from a YAML file.

    The LCOV_REPORT_STRICT environment variable overrides ``strict``.

    Raises:
        ConfigError: if the file is missing or malformed, or a section holds
                     anything but non-negative integers where counts belong.
    """
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(
            f"Description file not found: '{config_path}'\n"
            "Run `lcov-report init` to generate a template."
        )

    try:
        with path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse '{config_path}': {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"'{config_path}' must be a YAML mapping at the top level.")

    strict = _get(raw, "strict", False)
    if not isinstance(strict, bool):
        raise ConfigError(f"'strict' must be true or false, got {strict!r}")

    return Config(
        branches=_load_branches(_section(raw, "branches")),
        functions=_load_functions(_section(raw, "functions")),
        strict=_strict_override(strict),
    )


def _strict_override(default: bool) -> bool:
    value = os.environ.get(STRICT_ENV)
    if value is None or not value.strip():
        return default
    value = value.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(
        f"{STRICT_ENV} must be one of {', '.join(_TRUE + _FALSE)}, got '{value}'"
    )


def _get(mapping: dict, key: str, default: Any) -> Any:
    """Return mapping[key], or *default* when the key is absent or null."""
    value = mapping.get(key)
    return default if value is None else value


def _section(raw: dict, name: str) -> dict:
    section = _get(raw, name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' must be a mapping with found, hit and data keys.")
    data = _get(section, "data", [])
    if not isinstance(data, list) or not all(isinstance(d, dict) for d in data):
        raise ConfigError(f"'{name}.data' must be a list of mappings.")
    return section


def _count(value: Any, where: str) -> int:
    """Return *value* if it is a non-negative integer, else raise ConfigError."""
    # bool is an int subclass; `true` is never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{where}' must be an integer, got {value!r}")
    if value < 0:
        raise ConfigError(f"'{where}' must not be negative, got {value}")
    return value


def _load_branches(section: dict) -> BranchCoverage:
    data: list[BranchData] = []
    for index, item in enumerate(_get(section, "data", [])):
        where = f"branches.data[{index}]"
        # null is the "no count reported" state here, not the default
        taken = item.get("taken", 0)
        data.append(BranchData(
            line_number=_count(_get(item, "line", 0), f"{where}.line"),
            block_number=_count(_get(item, "block", 0), f"{where}.block"),
            branch_number=_count(_get(item, "branch", 0), f"{where}.branch"),
            taken=None if taken in (None, NOT_TAKEN) else _count(taken, f"{where}.taken"),
        ))
    return BranchCoverage(
        found=_count(_get(section, "found", 0), "branches.found"),
        hit=_count(_get(section, "hit", 0), "branches.hit"),
        data=data,
    )


def _load_functions(section: dict) -> FunctionCoverage:
    data: list[FunctionData] = []
    for index, item in enumerate(_get(section, "data", [])):
        where = f"functions.data[{index}]"
        name = _get(item, "name", "")
        if not isinstance(name, str):
            raise ConfigError(f"'{where}.name' must be a string, got {name!r}")
        data.append(FunctionData(
            function_name=name,
            line_number=_count(_get(item, "line", 0), f"{where}.line"),
            execution_count=_count(_get(item, "count", 0), f"{where}.count"),
        ))
    return FunctionCoverage(
        found=_count(_get(section, "found", 0), "functions.found"),
        hit=_count(_get(section, "hit", 0), "functions.hit"),
        data=data,
    )


# ---------------------------------------------------------------------------
# Template generator (used by `init` command)
# ---------------------------------------------------------------------------

TEMPLATE = """\
# Fail `render` instead of warning when found/hit disagree with data
strict: false

functions:
  found: 2
  hit: 1
  data:
    - {name: main,  line: 10, count: 5}
    - {name: usage, line: 42, count: 0}

branches:
  found: 2
  hit: 1
  data:
    # taken: null (or "-") when no count was reported
    - {line: 12, block: 0, branch: 0, taken: 5}
    - {line: 12, block: 0, branch: 1, taken: 0}
"""


def generate_template(output_path: str = DEFAULT_PATH) -> None:
    """Write a template description to *output_path*.

    Raises:
        ConfigError: if the file already exists.
    """
    path = Path(output_path)
    if path.exists():
        raise ConfigError(
            f"'{output_path}' already exists. Remove it first or choose a different path."
        )
    path.write_text(TEMPLATE, encoding="utf-8")
