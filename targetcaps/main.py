"""
targetcaps — CLI entrypoint.

Usage:
    python -m targetcaps.main --help
    python -m targetcaps.main resolve node14.5
    python -m targetcaps.main resolve web es2020 --json
    python -m targetcaps.main config check
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from targetcaps import __version__
from targetcaps.core.observability.logging_config import setup_logging_from_env

_MARKERS = {
    True: ("✓", "green"),
    False: ("✗", "red"),
    None: ("?", "yellow"),
}


@click.group()
@click.version_option(version=__version__, prog_name="targetcaps")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to targets.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """targetcaps — resolve build targets into capability flags."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging_from_env(debug=debug, verbose=verbose, quiet=quiet)


@cli.command()
@click.argument("target_names", metavar="[TARGET]...", nargs=-1)
@click.option("--any", "use_any", is_flag=True, help="Keep a flag if any target has it.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def resolve(
    ctx: click.Context,
    target_names: tuple[str, ...],
    use_any: bool,
    as_json: bool,
) -> None:
    """Resolve targets into one set of capability flags.

    Without TARGET arguments, targets are read from targets.yml.

    Examples:

        targetcaps resolve node14.5

        targetcaps resolve web es2020

        targetcaps resolve electron11-main nwjs0.50 --any
    """
    from targetcaps.core.models.capability import group_flags
    from targetcaps.core.use_cases.resolve import run_resolve

    result = run_resolve(
        targets=list(target_names),
        config_path=ctx.obj.get("config_path"),
        mode="any" if use_any else None,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if not ctx.obj.get("quiet", False):
        click.secho(
            f"\n🎯 {', '.join(result.targets)} ({result.mode})",
            fg="cyan",
            bold=True,
        )
        if result.config_path:
            click.echo(f"   from {result.config_path}")
        click.echo()

    for group, flags in group_flags(result.properties).items():
        click.secho(f"   {group}:", fg="white", bold=True)
        for name, value in flags.items():
            marker, color = _MARKERS[value.value]
            click.secho(f"     {marker} ", fg=color, nl=False)
            click.echo(name)

    click.echo()


@cli.group()
def config() -> None:
    """Targets configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate targets.yml configuration."""
    from targetcaps.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)
        return

    loaded = result.config
    if result.valid and loaded is not None:
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Targets: {', '.join(loaded.targets) or '(none)'}")
        click.echo(f"   Merge:   {loaded.merge}")
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


# ── Register sub-command groups from targetcaps/ui/cli/ ───────────

from targetcaps.ui.cli.targets import targets

cli.add_command(targets)


if __name__ == "__main__":
    cli()
