"""
CLI commands for the library catalog.

Thin wrappers over ``devlibguide.core.services`` and the catalog use cases.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from devlibguide.core.config.loader import ConfigError
from devlibguide.core.models import CatalogError, TaxonomyError


def _load(ctx: click.Context):  # type: ignore[no-untyped-def]
    """Build the app context or exit with a red error line."""
    from devlibguide.core.context import load_context

    config_path: Path | None = ctx.obj.get("config_path")
    try:
        context = load_context(config_path)
        context.registry.languages  # load errors surface here, not mid-output
        return context
    except (ConfigError, CatalogError, TaxonomyError) as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


@click.group()
def catalog() -> None:
    """Catalog — languages, libraries, taxonomy and consistency checks."""


# ── Browse ──────────────────────────────────────────────────────


@catalog.command("languages")
@click.pass_context
def languages(ctx: click.Context) -> None:
    """List supported languages with their library counts."""
    from devlibguide.core.services.dedupe import dedupe

    app = _load(ctx)
    click.secho("🌐 Languages:", fg="cyan", bold=True)
    for lang in app.registry.languages:
        if lang.key not in app.catalog:
            continue
        count = len(dedupe(app.catalog.get_catalog(lang.key)))
        click.echo(f"   • {lang.label:<12} ({lang.key}) — {count} libraries")


@catalog.command("show")
@click.argument("language")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def show(ctx: click.Context, language: str, as_json: bool) -> None:
    """Show the de-duplicated libraries of one language."""
    from devlibguide.core.services.dedupe import dedupe

    app = _load(ctx)
    records = dedupe(app.catalog.get_catalog(language))

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in records], indent=2))
        return

    if language not in app.catalog:
        click.secho(f"⚠️  Unsupported language: {language}", fg="yellow")
        return

    click.secho(f"📚 {language} — {len(records)} libraries", fg="cyan", bold=True)
    for r in records:
        click.echo(f"   • {r.name}  [{r.version}]")
        click.echo(f"     {', '.join(r.tags)}")
        if ctx.obj.get("verbose"):
            click.echo(f"     {r.documentation_url}")


@catalog.command("examples")
@click.argument("name")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def examples(ctx: click.Context, name: str, as_json: bool) -> None:
    """Show code examples for one library (exact name, e.g. NumPy)."""
    from devlibguide.core.services.tutorials import examples_for

    app = _load(ctx)
    try:
        snippets = examples_for(app.registry.examples, name)
    except CatalogError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps([s.model_dump() for s in snippets], indent=2))
        return

    if not snippets:
        click.secho(f"⚠️  No examples for {name}", fg="yellow")
        return

    for s in snippets:
        click.secho(f"\n   {s.title} ({s.difficulty})", fg="white", bold=True)
        click.echo(f"   {s.description}")
        for line in s.code.splitlines():
            click.echo(f"     │ {line}")
    click.echo()


@catalog.command("taxonomy")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def taxonomy(ctx: click.Context, as_json: bool) -> None:
    """Show the tag families."""
    app = _load(ctx)
    tax = app.registry.tag_taxonomy

    if as_json:
        click.echo(json.dumps(tax.to_dict(), indent=2))
        return

    for family, tags in tax.families().items():
        click.secho(f"\n   {family.replace('_', ' ').title()} ({len(tags)})", fg="white", bold=True)
        click.echo(f"     {', '.join(tags)}")
    click.echo()


@catalog.command("compare")
@click.argument("language")
@click.argument("names", nargs=-1, required=True)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def compare(ctx: click.Context, language: str, names: tuple[str, ...], as_json: bool) -> None:
    """Compare the tags of up to three libraries."""
    from devlibguide.core.services.comparison import ComparisonError, compare_libraries

    app = _load(ctx)
    try:
        result = compare_libraries(app.catalog, language, list(names))
    except ComparisonError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    click.secho(f"⚖️  {', '.join(r.name for r in result.libraries) or '(none)'}", fg="cyan", bold=True)
    for name in result.missing:
        click.secho(f"   ✗ not found: {name}", fg="yellow")
    for tag, count in result.tag_counts:
        click.echo(f"   {'█' * count:<3} {tag}")


# ── Check ───────────────────────────────────────────────────────


@catalog.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(ctx: click.Context, as_json: bool) -> None:
    """Report tags outside the taxonomy and duplicate library names."""
    from devlibguide.core.use_cases.catalog_check import check_catalog

    result = check_catalog(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if not result.valid:
        click.secho("❌ Catalog errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")
        sys.exit(1)

    total = sum(result.library_counts.values())
    click.secho(f"✅ Catalog loaded: {total} libraries", fg="green", bold=True)
    for language, count in result.library_counts.items():
        click.echo(f"   {language}: {count}")

    if result.duplicates:
        click.echo()
        click.secho("⚠️  Duplicate names (last entry wins):", fg="yellow")
        for language, dupes in result.duplicates.items():
            for name, n in dupes.items():
                click.echo(f"   • {language}/{name} ×{n}")

    if result.unknown_tags:
        click.echo()
        distinct = result.distinct_unknown_tags()
        click.secho(
            f"⚠️  {len(result.unknown_tags)} tag uses outside the taxonomy ({len(distinct)} distinct):",
            fg="yellow",
        )
        if ctx.obj.get("verbose"):
            for issue in result.unknown_tags:
                click.echo(f"   • {issue.language}/{issue.library}: {issue.tag}")
        else:
            click.echo(f"   {', '.join(distinct)}")

    click.echo()
