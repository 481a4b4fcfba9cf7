"""The remoji lookup command: list, search and substitute emojis."""

import logging
from typing import List, Optional

import typer

from remoji import __version__
from remoji.models import EmojiStore, QueryOptions, categories, subcategories
from remoji.services.importer import import_emojis
from remoji.services.query import run
from remoji.utils.cli import handle_cli_errors
from remoji.utils.logging_utils import configure_logging
from remoji.utils.output import err_console, is_non_interactive, print_result

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Find emojis by name, category or subcategory.",
    context_settings={"help_option_names": ["-h", "--help"]},
    rich_markup_mode="rich",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"remoji version {__version__}")
        raise typer.Exit()


def import_cache(store: EmojiStore) -> None:
    """Replace the cache with a fresh copy of the remote emoji table."""
    with err_console.status("Importing emoji table..."):
        cache = import_emojis(store.path)
    err_console.print(f"[green]Imported {len(cache)} emojis into {store.path}[/green]")


def ensure_cache(store: EmojiStore, assume_yes: bool) -> None:
    """Offer to import the emoji table when no cache exists yet."""
    if store.exists():
        return

    logger.info("No cache at %s", store.path)
    if not assume_yes:
        if is_non_interactive():
            err_console.print(f"No {store.path} found. Run with --yes to import it.")
            raise typer.Exit(1)
        if not typer.confirm(f"No {store.path} found. Import?", err=True):
            err_console.print("Ok, Bailing!")
            raise typer.Exit(1)

    err_console.print("Ok, importing")
    import_cache(store)


@app.command()
@handle_cli_errors("looking up emojis")
def lookup(
    emojis: Optional[List[str]] = typer.Argument(
        None, help="Emoji names to search for (regular expressions)", show_default=False
    ),
    cat: Optional[str] = typer.Option(None, "--cat", "-c", help="Find matches in a category"),
    subcat: Optional[str] = typer.Option(
        None, "--subcat", "-s", help="Find matches in a subcategory (wins over --cat)"
    ),
    exact: bool = typer.Option(False, "--exact", "-e", help="Match names exactly"),
    regex: bool = typer.Option(
        False, "--regex", "-r", help="Case-sensitive regular expression match"
    ),
    no_details: bool = typer.Option(
        False, "--no-details", "-n",
        help="Just print the emojis; arguments become text with :emoji: placeholders",
    ),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Show all details"),
    list_categories: bool = typer.Option(
        False, "--cats", "--categories", help="List the known categories"
    ),
    list_subcategories: bool = typer.Option(
        False, "--subs", "--subcategories", help="List the known subcategories"
    ),
    refresh: bool = typer.Option(False, "--import", help="Re-import the emoji table"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Import without asking"),
    version: bool = typer.Option(
        False, "--version", callback=version_callback, is_eager=True,
        help="Show remoji version",
    ),
) -> None:
    """Find emojis by name, category or subcategory.

    [bold]Examples:[/bold]

    List every face:
        [cyan]remoji face[/cyan]

    Everything in a subcategory:
        [cyan]remoji -s face-smiling[/cyan]

    Substitute placeholders:
        [cyan]remoji -n "ship it :rocket:"[/cyan]
    """
    configure_logging(verbose)
    options = QueryOptions(
        category=cat,
        subcategory=subcat,
        exact=exact,
        regex=regex,
        glyph_only=no_details,
        verbosity=verbose,
    )

    store = EmojiStore()
    if refresh:
        import_cache(store)
    else:
        ensure_cache(store, yes)

    view = store.view(options)
    if list_categories or list_subcategories:
        names = categories(view) if list_categories else subcategories(view)
        print_result("\n".join(names))
        return

    print_result(run(emojis or [], view, options))
