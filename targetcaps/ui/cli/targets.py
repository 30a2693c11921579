"""
CLI commands for the target registry.

Thin wrappers over ``targetcaps.core.targets``.
"""

from __future__ import annotations

import json
import sys

import click


@click.group()
def targets() -> None:
    """Targets — list and check recognised target identifiers."""


@targets.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def list_targets(as_json: bool) -> None:
    """List every supported target pattern."""
    from targetcaps.core.targets.registry import supported_targets

    entries = supported_targets()

    if as_json:
        click.echo(json.dumps(
            [{"name": name, "description": desc} for name, desc in entries],
            indent=2,
        ))
        return

    click.secho(f"\n🎯 Supported targets: {len(entries)}", fg="cyan", bold=True)
    for name, desc in entries:
        click.secho(f"   • {name}", fg="white", bold=True)
        click.echo(f"     {desc}")
    click.echo()


@targets.command("check")
@click.argument("target")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def check_target(target: str, as_json: bool) -> None:
    """Check whether TARGET is recognised, and by which pattern."""
    from targetcaps.core.targets.registry import find_pattern

    entry = find_pattern(target)

    if as_json:
        click.echo(json.dumps({
            "target": target,
            "supported": entry is not None,
            "pattern": entry.name if entry else None,
        }, indent=2))
        sys.exit(0 if entry else 1)
        return

    if entry is None:
        click.secho(f"❌ Unknown target '{target}'", fg="red")
        click.echo("   Run 'targetcaps targets list' to see supported targets.")
        sys.exit(1)

    click.secho(f"✅ {target}", fg="green", bold=True, nl=False)
    click.echo(f"  → {entry.name}")
