"""
CLI Interface for lawkit.

Commands:
- list: Show the stock instances and the structures each claims
- check: Run the law suite of a structure against a stock instance
"""

import sys
from pathlib import Path
from typing import Optional

import click

from lawkit import __version__
from lawkit.config import config
from lawkit.errors import ConstructionError
from lawkit.logging import get_lawkit_logger, initialize_logging
from lawkit.suite.catalog import INSTANCES, STRUCTURES, UnknownEntryError, build
from lawkit.suite.render import render
from lawkit.suite.reports import LawHistory
from lawkit.suite.runner import LawRunner

log = get_lawkit_logger("cli")


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"]),
    default=None,
    help="Log level (defaults to LOG_LEVEL)",
)
def cli(log_level: Optional[str]) -> None:
    """lawkit: check algebraic laws of Python types."""
    initialize_logging(
        log_dir=Path(config.logging.log_dir),
        level=log_level or config.logging.level,
        format_string=config.logging.format,
        rotation=config.logging.rotation,
        retention=config.logging.retention,
        enable_file_logging=config.logging.enable_file_logging,
        enable_console_logging=config.logging.enable_console_logging,
    )


@cli.command(name="list")
def list_instances() -> None:
    """List stock instances and the structures they claim."""
    for entry in INSTANCES.values():
        click.echo(f"{entry.name}: {entry.description}")
        click.echo(f"  claims: {', '.join(entry.claims)}")
    click.echo("")
    click.echo(f"Structures: {', '.join(STRUCTURES)}")


@cli.command()
@click.argument("structure")
@click.argument("instance")
@click.option(
    "--max-examples",
    type=click.IntRange(min=1),
    default=None,
    help="Sampled trials per law",
)
@click.option("--seed", type=int, default=None, help="Run seed")
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Laws executed concurrently",
)
@click.option("--no-shrink", is_flag=True, help="Report failing inputs unshrunk")
@click.option("--verbose", "-v", is_flag=True, help="List passing laws too")
@click.option(
    "--json",
    "json_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the report as JSON",
)
@click.option(
    "--history",
    "history_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="JSON file tracking results across runs",
)
def check(
    structure: str,
    instance: str,
    max_examples: Optional[int],
    seed: Optional[int],
    workers: Optional[int],
    no_shrink: bool,
    verbose: bool,
    json_path: Optional[str],
    history_path: Optional[str],
) -> None:
    """Check the STRUCTURE laws for the stock INSTANCE."""
    try:
        rule_set = build(structure, instance)
    except UnknownEntryError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    except ConstructionError as e:
        click.echo(f"Error: cannot build {structure} laws for {instance}: {e}", err=True)
        sys.exit(2)

    updates = {
        "max_examples": max_examples,
        "seed": seed,
        "workers": workers,
        "shrink": False if no_shrink else None,
    }
    settings = config.runner.model_copy(
        update={k: v for k, v in updates.items() if v is not None}
    )

    log.info(f"Checking {structure} laws for {instance}", structure=structure, instance=instance)
    runner = LawRunner(settings)
    try:
        report = runner.run(render(rule_set), f"{structure}[{instance}]")
    except KeyboardInterrupt:
        click.echo("\nInterrupted by user")
        sys.exit(1)

    click.echo(report.format(verbose=verbose))

    if json_path:
        report.save(Path(json_path))
        click.echo(f"Report: {json_path}")

    if history_path:
        history = LawHistory.load(Path(history_path))
        history.add_report(report)
        history.save(Path(history_path))
        click.echo(f"Pass rate: {report.pass_rate:.1%}")
        click.echo(f"Trend: {history.get_trend(report.suite)}")
        if history.detect_regression(report.suite):
            click.echo("⚠️  REGRESSION DETECTED!")
            for path in history.new_failures(report.suite):
                click.echo(f"  newly failing: {path}")

    if not report.passed:
        sys.exit(1)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
