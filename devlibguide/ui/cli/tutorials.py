"""
CLI commands for tutorials.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click


def _tutorials(ctx: click.Context):  # type: ignore[no-untyped-def]
    from devlibguide.core.config.loader import ConfigError, load_config
    from devlibguide.core.context import registry_for
    from devlibguide.core.models import CatalogError

    config_path: Path | None = ctx.obj.get("config_path")
    try:
        return registry_for(load_config(config_path)).tutorials
    except (ConfigError, CatalogError) as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


@click.group()
def tutorials() -> None:
    """Tutorials — search and read guides."""


@tutorials.command("list")
@click.argument("term", required=False, default="")
@click.option("--language", "-l", default="all", help="Language label (e.g. Python, C++).")
@click.option(
    "--difficulty",
    "-d",
    default="all",
    type=click.Choice(["all", "beginner", "intermediate", "advanced"]),
    help="Difficulty level.",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_cmd(ctx: click.Context, term: str, language: str, difficulty: str, as_json: bool) -> None:
    """List tutorials matching a search term, language and difficulty."""
    from devlibguide.core.services.tutorials import filter_tutorials

    results = filter_tutorials(_tutorials(ctx), term, language, difficulty)

    if as_json:
        click.echo(json.dumps([t.summary() for t in results], indent=2))
        return

    if not results:
        click.echo("No tutorials found matching your criteria.")
        return

    for t in results:
        click.secho(f"   • {t.title}", bold=True)
        click.echo(f"     {t.slug} · {t.language} · {t.difficulty} · {t.read_time} min")


@tutorials.command("show")
@click.argument("slug")
@click.pass_context
def show(ctx: click.Context, slug: str) -> None:
    """Print a tutorial's markdown body."""
    from devlibguide.core.services.tutorials import get_tutorial

    tutorial = get_tutorial(_tutorials(ctx), slug)
    if tutorial is None:
        click.secho(f"❌ Tutorial not found: {slug}", fg="red")
        sys.exit(1)

    click.secho(f"\n📖 {tutorial.title}", fg="cyan", bold=True)
    byline = f" by {tutorial.author}" if tutorial.author else ""
    click.echo(f"   {tutorial.language} · {tutorial.difficulty}{byline} · {tutorial.read_time} min")
    click.echo(f"   Tags: {', '.join(tutorial.tags)}")
    click.echo()
    click.echo(tutorial.content)
