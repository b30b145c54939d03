"""CLI entry point for Locator Forge."""

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import load_config
from .engine import LocatorEngine
from .errors import EmptyInput, LocatorError, NoElementFound, NoViableLocator
from .i18n import resolve_locale, strategy_label
from .models import ResultSet

console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _read_fragment(fragment: str | None, file_path: str | None) -> str:
    """Take the fragment from the argument, a file, or stdin."""
    if fragment is not None:
        return fragment
    if file_path:
        return Path(file_path).read_text(encoding="utf-8")
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return ""


def _fail(message: str, code: int = 1) -> NoReturn:
    err_console.print(f"[bold red]✗ {escape(message)}[/]")
    sys.exit(code)


@click.group()
@click.version_option(package_name="locator-forge")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Config file path")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Locator Forge - ranked XPath and CSS locators for an HTML element."""
    ctx.ensure_object(dict)
    _setup_logging(verbose)

    config = load_config(Path(config_path) if config_path else None)
    ctx.obj["config"] = config
    ctx.obj["engine"] = LocatorEngine(config)


@main.command()
@click.argument("fragment", required=False)
@click.option("--file", "-f", "file_path", type=click.Path(exists=True), help="Read the fragment from a file")
@click.option("--locale", "-l", type=click.Choice(["en", "pt"]), default=None, help="Description language")
@click.option("--format", "output_format", type=click.Choice(["table", "json"]), default="table")
@click.option("--unique", is_flag=True, help="Keep only locators matching exactly one element")
@click.pass_context
def xpath(
    ctx: click.Context,
    fragment: str | None,
    file_path: str | None,
    locale: str | None,
    output_format: str,
    unique: bool,
) -> None:
    """Generate ranked XPath locators for the first element of FRAGMENT."""
    engine: LocatorEngine = ctx.obj["engine"]
    if unique:
        engine.config.validation.mode = "unique"

    try:
        results = engine.generate_xpath_locators(
            _read_fragment(fragment, file_path), locale, strict=True
        )
    except NoViableLocator as exc:
        _fail(str(exc), code=2)
    except (EmptyInput, NoElementFound) as exc:
        _fail(str(exc))

    language = resolve_locale(locale, engine.config.generation.default_locale)
    _render(results, output_format, title="Generated XPath locators", language=language)


@main.command()
@click.argument("fragment", required=False)
@click.option("--file", "-f", "file_path", type=click.Path(exists=True), help="Read the fragment from a file")
@click.option("--kind", "-k", type=click.Choice(["byId", "byClass"]), required=True)
@click.option("--locale", "-l", type=click.Choice(["en", "pt"]), default=None, help="Description language")
@click.option("--format", "output_format", type=click.Choice(["table", "json"]), default="table")
@click.pass_context
def simple(
    ctx: click.Context,
    fragment: str | None,
    file_path: str | None,
    kind: str,
    locale: str | None,
    output_format: str,
) -> None:
    """Generate CSS selectors from the element's id or classes."""
    engine: LocatorEngine = ctx.obj["engine"]

    try:
        results = engine.generate_simple_locators(_read_fragment(fragment, file_path), kind, locale)
    except LocatorError as exc:
        _fail(str(exc))

    if not results:
        attribute = "id" if kind == "byId" else "class"
        console.print(f"[yellow]The element has no {attribute} attribute.[/]")
        return

    _render(results, output_format, title="Generated CSS selectors")


@main.command()
@click.argument("locator")
@click.argument("fragment", required=False)
@click.option("--file", "-f", "file_path", type=click.Path(exists=True), help="Read the fragment from a file")
@click.option("--css", is_flag=True, help="Treat LOCATOR as a CSS selector")
@click.option("--unique", is_flag=True, help="Require exactly one match")
@click.pass_context
def check(
    ctx: click.Context,
    locator: str,
    fragment: str | None,
    file_path: str | None,
    css: bool,
    unique: bool,
) -> None:
    """Check whether LOCATOR resolves against FRAGMENT."""
    engine: LocatorEngine = ctx.obj["engine"]

    try:
        document = engine.parse(_read_fragment(fragment, file_path))
    except LocatorError as exc:
        _fail(str(exc))

    mode = "unique" if unique else "any"
    matched = document.matches_css(locator, mode) if css else document.matches(locator, mode)
    if matched:
        console.print(f"[bold green]✓ {escape(locator)} resolves[/]")
    else:
        _fail(f"{locator} does not resolve")


def _render(results: ResultSet, output_format: str, title: str, language: str = "en") -> None:
    """Print results as a rich table or JSON."""
    if output_format == "json":
        click.echo(json.dumps(results.to_dicts(), indent=2, ensure_ascii=False))
        return

    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Locator", style="cyan", overflow="fold")
    table.add_column("Type", style="yellow")
    table.add_column("Reliability", style="magenta", justify="right")
    table.add_column("Description", style="dim")

    for index, result in enumerate(results, start=1):
        label = strategy_label(result.strategy, language) if result.strategy else result.kind.value
        table.add_row(
            str(index),
            escape(result.locator),
            label,
            f"{result.reliability:.0%}",
            result.description,
        )

    console.print(table)


if __name__ == "__main__":
    main()
