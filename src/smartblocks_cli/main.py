import asyncio
import logging
import sys
from typing import List, Optional

import typer

from catalog_client import CatalogClient, CatalogError, CatalogSession, CatalogTab

from . import __version__
from .config import settings

logger = logging.getLogger(__name__)

def setup_logging():
    """Configures basic logging for the CLI."""
    log_level_str = settings.LOG_LEVEL.upper()
    numeric_level = getattr(logging, log_level_str, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )

app = typer.Typer(
    name="smartblocks",
    help="Browse and search the SmartBlocks Store catalog.",
    no_args_is_help=True
)

def version_callback(value: bool):
    if value:
        typer.echo(f"SmartBlocks Store CLI version: {__version__}")
        raise typer.Exit()

@app.callback()
def main_callback(
    version: bool = typer.Option(None, "--version", "-v", callback=version_callback, is_eager=True, help="Show the application's version and exit."),
):
    """
    SmartBlocks Store CLI
    """
    setup_logging()

def _fail(message: str):
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)

@app.command("list")
def list_entries(
    tab: CatalogTab = typer.Option(CatalogTab.MARKETPLACE, "--tab", "-t", case_sensitive=False, help="Catalog tab to show."),
    search: str = typer.Option("", "--search", "-s", help="Filter by name, description, tags, or author."),
    author: Optional[str] = typer.Option(None, "--author", help="Graph identity that counts as 'self'. Defaults to SMARTBLOCKS_GRAPH."),
    installed: Optional[List[str]] = typer.Option(None, "--installed", "-i", help="Name of a locally installed workflow. Repeatable."),
):
    """List catalog entries on a tab."""
    graph = author if author is not None else settings.SMARTBLOCKS_GRAPH
    session = CatalogSession(CatalogClient(base_url=settings.SMARTBLOCKS_API_URL), graph, installed or [])
    asyncio.run(session.refresh())
    if session.error:
        _fail(session.error)

    entries = session.visible(tab, search)
    logger.info(f"{len(entries)} of {len(session.entries)} entries shown on {tab.value}")
    if not entries:
        typer.echo("No SmartBlocks Found.")
        return
    for entry in entries:
        price = "" if tab is CatalogTab.INSTALLED else f"  {entry.price_label}"
        typer.echo(f"{entry.id}  {entry.name}  ({entry.author}){price}")

@app.command("show")
def show_entry(entry_id: str = typer.Argument(..., help="Catalog id of the entry.")):
    """Show one catalog entry in detail."""
    client = CatalogClient(base_url=settings.SMARTBLOCKS_API_URL)
    try:
        entry = asyncio.run(client.get_entry(entry_id))
    except CatalogError as e:
        _fail(str(e))

    typer.echo(entry.name)
    typer.echo(f"By {entry.author}  {entry.price_label}")
    typer.echo("")
    typer.echo("About")
    typer.echo(entry.description or "No Description")
    typer.echo("")
    typer.echo("Tags")
    for tag in entry.tags:
        typer.echo(f"- {tag}")

if __name__ == "__main__":
    app()
