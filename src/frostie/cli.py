"""Command-line interface for Frostie."""

from __future__ import annotations

import json
from datetime import date
from typing import Optional

import typer

from frostie.config import get_settings
from frostie.logging_utils import configure_logging
from frostie.models.item import Category
from frostie.parsing import ItemTextParser, build_item_llm_client
from frostie.parsing.categories import classify
from frostie.parsing.shelf_life import lookup

app = typer.Typer(help="Frostie freezer item parsing commands.")


def _parse_today(value: Optional[str]) -> Optional[date]:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(f"expected YYYY-MM-DD, got {value!r}") from exc


@app.callback()
def main_callback() -> None:
    """Configure logging from settings before any command runs."""

    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format, [settings.ai_api_key or ""])


@app.command()
def parse(
    text: str = typer.Argument(..., help="Freeform item description."),
    default_days: Optional[int] = typer.Option(
        None,
        "--default-days",
        help="Fallback expiration days (defaults to FROSTIE_DEFAULT_EXPIRATION_DAYS).",
    ),
    today: Optional[str] = typer.Option(None, "--today", help="Override today's date (YYYY-MM-DD)."),
    ai: bool = typer.Option(False, "--ai/--no-ai", help="Ask the configured LLM for a candidate first."),
    display_names: bool = typer.Option(
        False,
        "--display-names",
        help="Title-case and pluralize the item name.",
    ),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print output JSON."),
) -> None:
    """
    Parse one item description and print the structured record as JSON.
    """
    llm_client = None
    if ai:
        llm_client = build_item_llm_client()
        if llm_client is None:
            typer.secho(
                "Warning: AI parsing is not configured; using rule-based parser.",
                fg=typer.colors.YELLOW,
                err=True,
            )

    parser = ItemTextParser(llm_client=llm_client, default_expiration_days=default_days)
    item = parser.parse(text, today=_parse_today(today), display_names=display_names)
    payload = item.model_dump(mode="json", by_alias=True)

    if pretty:
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
    else:
        typer.echo(json.dumps(payload))


@app.command()
def categories() -> None:
    """List the category labels an item can be assigned."""

    for category in Category:
        typer.echo(category.value)


@app.command("shelf-life")
def shelf_life(
    name: str = typer.Argument(..., help="Item name to look up."),
    category: Optional[str] = typer.Option(
        None,
        "--category",
        help="Category label; guessed from the name when omitted.",
    ),
    default_days: Optional[int] = typer.Option(None, "--default-days", help="Generic fallback days."),
) -> None:
    """Print the freezer shelf-life in days for an item name."""

    settings = get_settings()
    fallback = default_days if default_days is not None else settings.default_expiration_days
    resolved_category = Category.coerce(category) if category else classify(name)
    if resolved_category is None:
        raise typer.BadParameter(f"unknown category {category!r}", param_hint="--category")
    days = lookup(name, resolved_category, fallback)
    typer.echo(json.dumps({"name": name, "category": resolved_category.value, "days": days}))


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for `python -m frostie`."""
    app(prog_name="frostie", args=argv)


if __name__ == "__main__":
    main()
