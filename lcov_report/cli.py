"""CLI entry point: command definitions using Click.

Commands:
    init      Generate a template coverage description
    render    Print the LCOV function and/or branch blocks of a description
    check     Report found/hit values that disagree with the data
"""

import sys

import click

from lcov_report import __version__

_SECTIONS = ("all", "functions", "branches")


# ---------------------------------------------------------------------------
# Helpers shared by all data commands
# ---------------------------------------------------------------------------

def _load_config(ctx: click.Context):
    """Load the coverage description. Exits on error."""
    from lcov_report.config import ConfigError, load

    obj = ctx.obj
    if obj["verbose"]:
        click.echo(f"[verbose] Loading {obj['config_path']}", err=True)
    try:
        config = load(obj["config_path"])
    except ConfigError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)

    if obj["verbose"]:
        click.echo(
            f"[verbose] {len(config.functions.data)} function(s), "
            f"{len(config.branches.data)} branch arm(s), strict={config.strict}",
            err=True,
        )
    return config


def _selected(config, section: str) -> list:
    """Return the aggregates for *section*, functions before branches."""
    if section == "functions":
        return [config.functions]
    if section == "branches":
        return [config.branches]
    return [config.functions, config.branches]


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------

@click.group()
@click.option("--config", "config_path", default="lcov-report.yaml", show_default=True,
              help="Path to the coverage description file.")
@click.option("--verbose", is_flag=True, default=False,
              help="Enable verbose logging.")
@click.version_option(__version__, prog_name="lcov-report")
@click.pass_context
def cli(ctx: click.Context, config_path: str, verbose: bool) -> None:
    """LCOV record tool: render branch and function coverage blocks."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------

@cli.command("init")
@click.option("--output", "output_path", default="lcov-report.yaml", show_default=True,
              help="Path where the template description will be written.")
def init_command(output_path: str) -> None:
    """Generate a template lcov-report.yaml file."""
    from lcov_report.config import ConfigError, generate_template
    try:
        generate_template(output_path)
        click.echo(f"Template written to '{output_path}'.")
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------

@cli.command("render")
@click.option("--section", type=click.Choice(_SECTIONS), default="all", show_default=True,
              help="Which block to print.")
@click.pass_context
def render_command(ctx: click.Context, section: str) -> None:
    """Print the LCOV lines for the described coverage."""
    from lcov_report.validation import (
        InconsistentCoverageError,
        ensure_consistent,
        find_inconsistencies,
    )

    config = _load_config(ctx)
    blocks = _selected(config, section)

    for coverage in blocks:
        if config.strict:
            try:
                ensure_consistent(coverage)
            except InconsistentCoverageError as exc:
                click.echo(f"Error: {exc}", err=True)
                sys.exit(1)
        else:
            for problem in find_inconsistencies(coverage):
                click.echo(f"Warning: {problem}", err=True)

    click.echo("\n".join(coverage.render() for coverage in blocks))


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------

@cli.command("check")
@click.pass_context
def check_command(ctx: click.Context) -> None:
    """Check found/hit values against the described data."""
    from lcov_report.validation import find_inconsistencies

    config = _load_config(ctx)
    problems = [
        problem
        for coverage in _selected(config, "all")
        for problem in find_inconsistencies(coverage)
    ]
    if not problems:
        click.echo("OK")
        return
    for problem in problems:
        click.echo(f"  - {problem}")
    sys.exit(1)
