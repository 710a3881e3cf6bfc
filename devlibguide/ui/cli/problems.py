"""
CLI commands for the practice ground.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click


def _problems(ctx: click.Context):  # type: ignore[no-untyped-def]
    """Problems from the configured registry, or exit with a red error line."""
    from devlibguide.core.config.loader import ConfigError, load_config
    from devlibguide.core.context import registry_for
    from devlibguide.core.models import CatalogError

    config_path: Path | None = ctx.obj.get("config_path")
    try:
        return registry_for(load_config(config_path)).problems
    except (ConfigError, CatalogError) as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


@click.group()
def problems() -> None:
    """Practice problems — list and inspect."""


@problems.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_cmd(ctx: click.Context, as_json: bool) -> None:
    """List practice problems."""
    from devlibguide.core.services.problems import list_problems

    summaries = list_problems(_problems(ctx))

    if as_json:
        click.echo(json.dumps(summaries, indent=2))
        return

    colors = {"easy": "green", "medium": "yellow", "hard": "red"}
    for p in summaries:
        click.secho(f"   [{p['difficulty']:<6}]", fg=colors.get(p["difficulty"], "white"), nl=False)
        click.echo(f" {p['id']:<20} {p['title']} ({p['category']})")


@problems.command("show")
@click.argument("problem_id")
@click.option("--language", "-l", default="Python", help="Starter code language label.")
@click.pass_context
def show(ctx: click.Context, problem_id: str, language: str) -> None:
    """Show a problem with its visible examples and starter code."""
    from devlibguide.core.services.problems import get_problem

    problem = get_problem(_problems(ctx), problem_id)
    if problem is None:
        click.secho(f"❌ Problem not found: {problem_id}", fg="red")
        sys.exit(1)

    click.secho(f"\n🧩 {problem.title}", fg="cyan", bold=True)
    click.echo(f"   {problem.difficulty} · {problem.category}")
    click.echo(f"\n   {problem.description}")
    if problem.constraints:
        click.echo(f"\n   Constraints: {problem.constraints}")

    for given, expected in zip(problem.example_inputs, problem.example_outputs):
        click.echo(f"\n   Input:  {given}")
        click.echo(f"   Output: {expected}")

    starter = problem.starter_code.get(language)
    if starter:
        click.echo()
        click.secho(f"   Starter code ({language}):", fg="white", bold=True)
        for line in starter.splitlines():
            click.echo(f"     │ {line}")
    click.echo()
