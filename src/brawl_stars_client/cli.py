"""Console harness for exercising the Brawl Stars API endpoints."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table

from brawl_stars_client.api_client.brawl_stars_client import (
    BrawlStarsApiError,
    BrawlStarsClient,
    MissingApiKeyError,
)
from brawl_stars_client.api_client.validation import ResponseValidationError
from brawl_stars_client.config import get_settings
from brawl_stars_client.logging_config import configure_logging
from brawl_stars_client.schemas.brawl_stars_api import PagingOptions

app = typer.Typer(
    name="brawl-stars",
    help="Query the Brawl Stars API from the command line",
)
console = Console()

Fetch = Callable[[BrawlStarsClient], Awaitable[BaseModel]]

LIMIT_OPTION = typer.Option(None, "--limit", "-l", help="Maximum number of items")
AFTER_OPTION = typer.Option(None, "--after", help="Return items after this cursor")
BEFORE_OPTION = typer.Option(None, "--before", help="Return items before this cursor")


def _paging(limit: int | None, after: str | None, before: str | None) -> PagingOptions:
    return PagingOptions(limit=limit, after=after, before=before)


async def _fetch_with_client(client: BrawlStarsClient, fetch: Fetch) -> BaseModel:
    async with client:
        return await fetch(client)


def fetch_result(fetch: Fetch) -> BaseModel:
    """Run one API call with a fresh client.

    Raises:
        MissingApiKeyError: If no API key is configured
        BrawlStarsApiError: If the request fails
        ResponseValidationError: If the response does not match its schema
    """
    client = BrawlStarsClient.from_settings(get_settings())
    return asyncio.run(_fetch_with_client(client, fetch))


def print_result(result: BaseModel) -> None:
    """Print a response as JSON using the API's field names."""
    console.print_json(result.model_dump_json(by_alias=True))


def print_error(error: Exception) -> None:
    """Print a failed call."""
    if isinstance(error, BrawlStarsApiError):
        status = error.status_code if error.status_code is not None else "N/A"
        console.print(f"[bold red]API Error ({status}):[/bold red] {escape(error.message)}")
        if error.error_data is not None:
            console.print("Details:")
            console.print_json(error.error_data.model_dump_json(warnings=False))
    else:
        console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")


def _run_command(fetch: Fetch) -> None:
    configure_logging()
    try:
        result = fetch_result(fetch)
    except (MissingApiKeyError, BrawlStarsApiError, ResponseValidationError) as e:
        print_error(e)
        raise typer.Exit(1) from e
    print_result(result)


@app.command()
def player(
    tag: str = typer.Argument(..., help="Player tag (e.g. #YVCQLJ)"),
) -> None:
    """Show a player profile."""
    _run_command(lambda client: client.get_player(tag))


@app.command()
def battlelog(
    tag: str = typer.Argument(..., help="Player tag (e.g. #YVCQLJ)"),
) -> None:
    """Show a player's recent battles."""
    _run_command(lambda client: client.get_player_battle_log(tag))


@app.command()
def club(
    tag: str = typer.Argument(..., help="Club tag (e.g. #2V0G8P)"),
) -> None:
    """Show a club."""
    _run_command(lambda client: client.get_club(tag))


@app.command()
def club_members(
    tag: str = typer.Argument(..., help="Club tag (e.g. #2V0G8P)"),
    limit: int | None = LIMIT_OPTION,
    after: str | None = AFTER_OPTION,
    before: str | None = BEFORE_OPTION,
) -> None:
    """List members of a club."""
    options = _paging(limit, after, before)
    _run_command(lambda client: client.get_club_members(tag, options))


@app.command()
def brawlers(
    limit: int | None = LIMIT_OPTION,
    after: str | None = AFTER_OPTION,
    before: str | None = BEFORE_OPTION,
) -> None:
    """List all brawlers."""
    options = _paging(limit, after, before)
    _run_command(lambda client: client.get_brawlers(options))


@app.command()
def brawler(
    brawler_id: int = typer.Argument(..., help="Brawler ID (e.g. 16000000)"),
) -> None:
    """Show a single brawler."""
    _run_command(lambda client: client.get_brawler(brawler_id))


@app.command()
def player_rankings(
    country_code: str = typer.Argument("global", help="Two-letter country code or 'global'"),
    limit: int | None = LIMIT_OPTION,
    after: str | None = AFTER_OPTION,
    before: str | None = BEFORE_OPTION,
) -> None:
    """Show player rankings."""
    options = _paging(limit, after, before)
    _run_command(lambda client: client.get_player_rankings(country_code, options))


@app.command()
def club_rankings(
    country_code: str = typer.Argument("global", help="Two-letter country code or 'global'"),
    limit: int | None = LIMIT_OPTION,
    after: str | None = AFTER_OPTION,
    before: str | None = BEFORE_OPTION,
) -> None:
    """Show club rankings."""
    options = _paging(limit, after, before)
    _run_command(lambda client: client.get_club_rankings(country_code, options))


@app.command()
def brawler_rankings(
    brawler_id: int = typer.Argument(..., help="Brawler ID (e.g. 16000000)"),
    country_code: str = typer.Option(
        "global", "--country", "-c", help="Two-letter country code or 'global'"
    ),
    limit: int | None = LIMIT_OPTION,
    after: str | None = AFTER_OPTION,
    before: str | None = BEFORE_OPTION,
) -> None:
    """Show player rankings for one brawler."""
    options = _paging(limit, after, before)
    _run_command(lambda client: client.get_brawler_rankings(country_code, brawler_id, options))


@app.command()
def events() -> None:
    """Show the current event rotation."""
    _run_command(lambda client: client.get_event_rotation())


# Interactive mode


def _ask_tag(kind: str, example: str) -> str:
    return Prompt.ask(f"Enter {kind} Tag (e.g., {example})")


def _ask_country() -> str:
    return Prompt.ask("Enter Country Code (e.g., FI) or 'global'", default="global")


def _ask_paging() -> PagingOptions | None:
    if not Confirm.ask("Add paging options (limit, after, before)?", default=False):
        return None
    limit = IntPrompt.ask("Limit (optional, press Enter to skip)", default=None, show_default=False)
    after = Prompt.ask("After marker (optional, press Enter to skip)", default="", show_default=False)
    before = Prompt.ask(
        "Before marker (optional, press Enter to skip)", default="", show_default=False
    )
    return PagingOptions(limit=limit, after=after.strip() or None, before=before.strip() or None)


def _prompt_player() -> Fetch:
    tag = _ask_tag("Player", "#YVCQLJ")
    return lambda client: client.get_player(tag)


def _prompt_battlelog() -> Fetch:
    tag = _ask_tag("Player", "#YVCQLJ")
    return lambda client: client.get_player_battle_log(tag)


def _prompt_club() -> Fetch:
    tag = _ask_tag("Club", "#2V0G8P")
    return lambda client: client.get_club(tag)


def _prompt_club_members() -> Fetch:
    tag = _ask_tag("Club", "#2V0G8P")
    options = _ask_paging()
    return lambda client: client.get_club_members(tag, options)


def _prompt_brawlers() -> Fetch:
    options = _ask_paging()
    return lambda client: client.get_brawlers(options)


def _prompt_brawler() -> Fetch:
    brawler_id = IntPrompt.ask("Enter Brawler ID (e.g., 16000000)")
    return lambda client: client.get_brawler(brawler_id)


def _prompt_player_rankings() -> Fetch:
    country_code = _ask_country()
    options = _ask_paging()
    return lambda client: client.get_player_rankings(country_code, options)


def _prompt_club_rankings() -> Fetch:
    country_code = _ask_country()
    options = _ask_paging()
    return lambda client: client.get_club_rankings(country_code, options)


def _prompt_brawler_rankings() -> Fetch:
    country_code = _ask_country()
    brawler_id = IntPrompt.ask("Enter Brawler ID (e.g., 16000000)")
    options = _ask_paging()
    return lambda client: client.get_brawler_rankings(country_code, brawler_id, options)


def _prompt_events() -> Fetch:
    return lambda client: client.get_event_rotation()


INTERACTIVE_ACTIONS: dict[str, tuple[str, Callable[[], Fetch]]] = {
    "1": ("Get player", _prompt_player),
    "2": ("Get player battle log", _prompt_battlelog),
    "3": ("Get club", _prompt_club),
    "4": ("Get club members", _prompt_club_members),
    "5": ("List brawlers", _prompt_brawlers),
    "6": ("Get brawler", _prompt_brawler),
    "7": ("Player rankings", _prompt_player_rankings),
    "8": ("Club rankings", _prompt_club_rankings),
    "9": ("Brawler rankings", _prompt_brawler_rankings),
    "10": ("Event rotation", _prompt_events),
}


@app.command()
def interactive() -> None:
    """Pick endpoints from a menu and print their responses."""
    configure_logging()
    settings = get_settings()
    if not settings.brawl_stars_api_key:
        print_error(MissingApiKeyError())
        console.print("Set BRAWL_STARS_API_KEY before running the CLI.")
        raise typer.Exit(1)

    console.print("[bold]Brawl Stars API Interactive Test CLI[/bold]")

    while True:
        menu = Table(show_header=False, box=None)
        for key, (label, _) in INTERACTIVE_ACTIONS.items():
            menu.add_row(f"[cyan]{key}[/cyan]", label)
        menu.add_row("[cyan]q[/cyan]", "Exit")
        console.print(menu)

        choice = Prompt.ask(
            "Choose an API function to test",
            choices=[*INTERACTIVE_ACTIONS, "q"],
            show_choices=False,
        )
        if choice == "q":
            console.print("Exiting CLI.")
            break

        _, prompt_for = INTERACTIVE_ACTIONS[choice]
        fetch = prompt_for()
        try:
            print_result(fetch_result(fetch))
        except Exception as e:
            # Any failure is reported and the menu comes back
            print_error(e)

        Prompt.ask("Press Enter to continue", default="", show_default=False)


@app.command()
def config() -> None:
    """Show current configuration."""
    settings = get_settings()

    key = settings.brawl_stars_api_key
    masked_key = f"{key[:4]}...{key[-4:]}" if len(key) > 8 else ("set" if key else "not set")

    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("API Key", masked_key)
    table.add_row("Base URL", settings.brawl_stars_base_url)
    table.add_row("Log Level", settings.log_level)

    console.print(table)


if __name__ == "__main__":
    app()
