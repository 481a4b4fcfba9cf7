"""CLI utilities for error handling."""

import functools
import logging
from typing import Callable, TypeVar

import typer
from rich.markup import escape

from remoji.config.constants import EXIT_CACHE_ERROR, EXIT_INVALID_QUERY, EXIT_NOT_FOUND
from remoji.exceptions import CacheError, ConfigurationError, InvalidQueryError, NotFoundError
from remoji.utils.output import err_console

F = TypeVar('F', bound=Callable)

logger = logging.getLogger(__name__)


def handle_cli_errors(action: str) -> Callable[[F], F]:
    """Decorator that turns remoji errors into stderr messages and exit codes.

    Args:
        action: Description of the action being performed (e.g., "looking up emojis")

    Example:
        @handle_cli_errors("looking up emojis")
        def lookup(args: list[str]):
            # code that might raise NotFoundError
            pass
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except typer.Exit:
                raise
            except NotFoundError as e:
                err_console.print(f"[yellow]{escape(str(e))}[/yellow]")
                raise typer.Exit(EXIT_NOT_FOUND) from e
            except InvalidQueryError as e:
                logger.error("Error %s: %s", action, e)
                err_console.print(f"[red]Error {action}: {escape(str(e))}[/red]")
                raise typer.Exit(EXIT_INVALID_QUERY) from e
            except CacheError as e:
                logger.error("Error %s: %s", action, e)
                err_console.print(f"[red]Error {action}: {escape(str(e))}[/red]")
                raise typer.Exit(EXIT_CACHE_ERROR) from e
            except ConfigurationError as e:
                # Logging may be the thing that is misconfigured
                err_console.print(f"[red]Error {action}: {escape(str(e))}[/red]")
                raise typer.Exit(1) from e
        return wrapper
    return decorator
