"""CLI interface for chamo-search."""

import json
import logging
from pathlib import Path
from typing import Any

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from chamo_search import __version__
from chamo_search.config import load_catalog, load_thresholds
from chamo_search.matching.distance import edit_distance
from chamo_search.matching.fuzzy import match_rule
from chamo_search.matching.normalizer import normalize
from chamo_search.models.pydantic_models import ItemType, MatchThresholds
from chamo_search.services.search_service import DEFAULT_LIMIT, search_catalog

app = typer.Typer(
    name="chamo-search",
    help="Accent- and typo-tolerant search for the Chamô marketplace",
    add_completion=False,
)
console = Console()

# CatalogError, ValidationError and JSONDecodeError are ValueErrors
_LOAD_ERRORS = (FileNotFoundError, ValueError, yaml.YAMLError)

_TYPE_ICONS = {
    ItemType.CATEGORY: "📂",
    ItemType.PROFESSION: "🔧",
    ItemType.PROFESSIONAL: "",
}


def output_json(data: Any) -> None:
    """Output JSON to stdout."""
    print(json.dumps(data, indent=2, ensure_ascii=False))


def setup_logging(verbose: bool) -> None:
    """Route log records through rich, at DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_thresholds_or_exit(config: Path | None) -> MatchThresholds:
    try:
        return load_thresholds(config)
    except _LOAD_ERRORS as e:
        console.print(f"[red]Error loading config: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"chamo-search version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Fuzzy search over marketplace categories and professionals."""
    pass


@app.command(name="normalize")
def normalize_command(
    text: str = typer.Argument(..., help="Text to normalize."),
) -> None:
    """Print the normalized form of TEXT."""
    print(normalize(text))


@app.command()
def distance(
    a: str = typer.Argument(..., help="First string."),
    b: str = typer.Argument(..., help="Second string."),
) -> None:
    """Print the edit distance between A and B."""
    print(edit_distance(a, b))


@app.command()
def match(
    query: str = typer.Argument(..., help="Search text."),
    target: str = typer.Argument(..., help="Candidate text."),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to matcher config YAML file.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable debug logging.",
    ),
) -> None:
    """Check whether QUERY matches TARGET. Exits with 1 when it does not."""
    setup_logging(verbose)
    thresholds = _load_thresholds_or_exit(config)

    rule = match_rule(query, target, thresholds)

    if json_output:
        output_json({
            "query": query,
            "target": target,
            "matched": rule is not None,
            "rule": rule.value if rule else None,
        })
    elif rule:
        console.print(f"[green]match[/green] ({rule.value})")
    else:
        console.print("[red]no match[/red]")

    if rule is None:
        raise typer.Exit(1)


@app.command()
def search(
    query: str = typer.Argument(..., help="Search text."),
    catalog: Path = typer.Option(
        ...,
        "--catalog",
        "-k",
        help="Path to catalog YAML/JSON file.",
    ),
    limit: int = typer.Option(
        DEFAULT_LIMIT,
        "--limit",
        "-l",
        min=0,
        help="Maximum number of results (0 for no limit).",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to matcher config YAML file.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable debug logging.",
    ),
) -> None:
    """Search a catalog of categories, professions and professionals."""
    setup_logging(verbose)
    thresholds = _load_thresholds_or_exit(config)

    try:
        items = load_catalog(catalog)
    except _LOAD_ERRORS as e:
        console.print(f"[red]Error loading catalog: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    results = search_catalog(query, items, limit=limit, thresholds=thresholds)

    if json_output:
        output_json(results.model_dump(mode="json"))
        return

    if not results.items:
        console.print(f'[yellow]Nenhum resultado para "{escape(query)}"[/yellow]')
        return

    table = Table(title=f"Results for \"{escape(results.query)}\" ({len(results.items)} shown)")
    table.add_column("Type", style="cyan")
    table.add_column("Label", style="white", max_width=40)
    table.add_column("Sublabel", style="dim")
    table.add_column("Rating", style="yellow", justify="right")
    table.add_column("Link", style="blue")

    for item in results.items:
        label = escape(f"{_TYPE_ICONS[item.type]} {item.label}".strip())
        if item.verified:
            label += " [green]✔[/green]"
        rating_str = f"{item.rating:.1f}" if item.rating is not None else "-"
        table.add_row(
            item.type.value,
            label,
            escape(item.sublabel or "-"),
            rating_str,
            escape(item.link or "-"),
        )

    console.print(table)

    if results.total > len(results.items):
        console.print(f"[dim]Showing {len(results.items)} of {results.total} matches[/dim]")
