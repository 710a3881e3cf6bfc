"""
DevLibGuide — CLI entrypoint.

Usage:
    python -m devlibguide.main --help
    python -m devlibguide.main search json --language javascript
    python -m devlibguide.main catalog check
    python -m devlibguide.main web
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from devlibguide import __version__
from devlibguide.core.observability.logging_config import resolve_level, setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="devlibguide")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to devlibguide.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """DevLibGuide — browse programming-language libraries."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        quiet_third_party=not debug,
    )


@cli.command()
@click.argument("term", required=False, default="")
@click.option("--language", "-l", default="", help="Language tab to show (e.g. python).")
@click.option("--category", "-t", default="", help="Category tag filter (e.g. 'Web Framework').")
@click.option("--all-languages", "-a", is_flag=True, help="List matches for every language.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def search(
    ctx: click.Context,
    term: str,
    language: str,
    category: str,
    all_languages: bool,
    as_json: bool,
) -> None:
    """Search libraries by name, description or tag.

    Examples:

        devlibguide search json

        devlibguide search --category Framework --language java
    """
    from devlibguide.core.use_cases.search import run_search

    result = run_search(
        search_term=term,
        language=language,
        category=category,
        config_path=ctx.obj.get("config_path"),
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.error else 0)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    click.secho(f"\n🔎 {result.total} libraries match", fg="cyan", bold=True)
    shown = result.libraries if all_languages else {
        result.active_tab: result.libraries.get(result.active_tab, [])
    }

    for lang, records in shown.items():
        marker = " ← active" if lang == result.active_tab else ""
        click.echo()
        click.secho(f"   {lang} ({len(records)}){marker}", fg="white", bold=True)
        if not records:
            click.echo("     No libraries found matching your criteria.")
        for record in records:
            click.echo(f"     • {record.name}  [{record.version}]")
            if ctx.obj.get("verbose"):
                click.echo(f"       {', '.join(record.tags)}")

    if not all_languages:
        others = {k: len(v) for k, v in result.libraries.items() if k != result.active_tab and v}
        if others:
            click.echo()
            summary = ", ".join(f"{k}: {n}" for k, n in others.items())
            click.echo(f"   Other languages — {summary}")

    click.echo()


@cli.command()
@click.option("--host", default=None, help="Bind address (default: from config).")
@click.option("--port", "-p", default=None, type=int, help="Port number (default: from config).")
@click.pass_context
def web(ctx: click.Context, host: str | None, port: int | None) -> None:
    "Start the JSON API server."
    from devlibguide.core.config.loader import ConfigError, load_config
    from devlibguide.core.models import CatalogError, TaxonomyError
    from devlibguide.ui.web.server import create_app, run_server

    config_path: Path | None = ctx.obj.get("config_path")
    try:
        config = load_config(config_path)
        app = create_app(config_path=config_path, config=config)
    except (ConfigError, CatalogError, TaxonomyError) as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    host = host or config.server.host
    port = port or config.server.port
    debug = ctx.obj.get("debug", False)

    click.echo()
    click.secho("📚 DevLibGuide — API server", bold=True)
    click.echo(f"   API:       http://{host}:{port}/api/libraries")
    click.echo(f"   Languages: {', '.join(config.languages)}")
    if debug:
        click.secho("   Logging: DEBUG (all output)", fg="yellow")
    click.echo()

    run_server(app, host=host, port=port, debug=debug)


# ── Register sub-command groups from devlibguide/ui/cli/ ──────────────

from devlibguide.ui.cli.catalog import catalog  # noqa: E402
from devlibguide.ui.cli.problems import problems  # noqa: E402
from devlibguide.ui.cli.tutorials import tutorials  # noqa: E402

cli.add_command(catalog)
cli.add_command(problems)
cli.add_command(tutorials)


if __name__ == "__main__":
    cli()
