from __future__ import annotations

import asyncio
import json

import typer
from rich.console import Console
from rich.table import Table

from .api import manual_translate, translate_with
from .config import SETTINGS
from .translator.errors import TranslatorError
from .translator.factory import build_translator, get_available_engines
from .translator.registry import TranslatorRegistry
from .utils.logging_config import configure_logging

app = typer.Typer(add_completion=False)
console = Console()


def _run_async(coro):
    return asyncio.run(coro)


@app.command(help="Translate TEXT with the selected engine")
def translate(
    text: str = typer.Argument(...),
    target: str = typer.Option(SETTINGS.default_target_lang, "--to", "-t"),
    source: str = typer.Option("auto", "--from", "-s", help="Source language code or 'auto'"),
    engine: str = typer.Option(SETTINGS.default_engine, "--engine", "-e"),
    host: str | None = typer.Option(None, help="Override the provider host"),
    proxy: str | None = typer.Option(None, help="Proxy URL"),
    dl_session: str | None = typer.Option(None, help="DeepL dl_session cookie (Pro tier)"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    configure_logging(verbose=verbose)
    try:
        translator = build_translator(engine, host=host, proxy=proxy, dl_session=dl_session)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2) from exc

    async def runner():
        if source.lower() == "auto":
            return await translate_with(translator, text, target)
        return await manual_translate(text, source, target, registry=TranslatorRegistry(translator))

    try:
        result = _run_async(runner())
    except TranslatorError as exc:
        console.print(f"[red]{exc.__class__.__name__}: {exc}[/red]")
        raise typer.Exit(code=1) from exc

    if as_json:
        console.print_json(json.dumps(result.to_dict(), ensure_ascii=False))
        return
    console.print(result.text)
    if result.pronunciation:
        console.print(f"[dim]{result.pronunciation}[/dim]")
    for alternative in result.alternatives:
        console.print(f"[dim]- {alternative}[/dim]")
    if result.correction.value:
        console.log(f"Did you mean: {result.correction.value}")
    console.log(f"Detected source language: {result.source_iso} ({result.method})")


@app.command(help="List the available translation engines")
def engines() -> None:
    table = Table("engine", "description")
    for key, label in get_available_engines().items():
        table.add_row(key, label)
    console.print(table)


if __name__ == "__main__":
    app()
