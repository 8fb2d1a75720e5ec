"""
upset — CLI entrypoint.

Usage:
    upset --help
    upset -c upset.yml apply
    upset config check
    upset tools
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from upset import __version__
from upset.core.observability.logging_config import level_from_flags, setup_logging_from_env


@click.group()
@click.version_option(version=__version__, prog_name="upset")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--configuration-file",
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to the configuration file (default: auto-detect upset.yml).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """upset — set up your computer in no time."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging_from_env(level_from_flags(debug=debug, verbose=verbose, quiet=quiet))


@cli.command()
@click.option(
    "--output",
    "output_type",
    type=click.Choice(["spinner", "plain"]),
    default="spinner",
    show_default=True,
    help="How per-item progress is rendered.",
)
@click.option("--strict", is_flag=True, help="Fail before processing if any tool is unsupported.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def apply(ctx: click.Context, output_type: str, strict: bool, as_json: bool) -> None:
    """Install packages, clone repositories and download files.

    Examples:

        upset -c upset.yml apply

        upset apply --output plain --strict
    """
    from upset.core.notifications import NullNotificationSink
    from upset.core.use_cases.apply import apply_configuration
    from upset.ui.terminal.factory import TerminalOutputFactory, TerminalOutputType

    if as_json:
        output = NullNotificationSink()
    else:
        output = TerminalOutputFactory().get_terminal_output(TerminalOutputType(output_type))

    result = apply_configuration(
        output=output,
        config_path=ctx.obj.get("config_path"),
        strict=strict,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.error else 0)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    report = result.report
    assert report is not None  # guaranteed after error check above

    if ctx.obj.get("quiet"):
        return

    if not report.batches and not report.skipped:
        click.secho("Nothing to do.", fg="cyan")
        return

    click.echo()
    for batch in report.batches:
        status_color = {"ok": "green", "partial": "yellow", "failed": "red"}.get(
            batch.status, "white"
        )
        click.echo(f"   {batch.capability} ({batch.tool}): ", nl=False)
        click.secho(
            f"{batch.succeeded} succeeded / {batch.failed} failed",
            fg=status_color,
        )

    if ctx.obj.get("verbose"):
        for skipped in report.skipped:
            click.secho(f"   ⊘ {skipped.section}: '{skipped.tool}' not supported", fg="yellow")

    click.echo()


@cli.group()
def config() -> None:
    """Configuration file commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate the configuration file without running anything."""
    from upset.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.document is not None  # guaranteed when valid
        body = result.document.configuration
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Version: {result.document.version}")
        click.echo(f"   Packages: {len(body.packages or ())}")
        click.echo(f"   Version control: {len(body.version_control or ())}")
        click.echo(f"   Downloads: {len(body.downloads or ())}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def tools(as_json: bool) -> None:
    """Show which supported tools are installed."""
    from upset.core.use_cases.tools import check_tools

    result = check_tools()

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    click.secho("🧰 Tools:", fg="cyan", bold=True)
    for status in result.tools:
        icon = "✅" if status.available else "❌"
        click.echo(f"   {icon} {status.tool} ({status.capability})")
    click.echo()


if __name__ == "__main__":
    cli()
