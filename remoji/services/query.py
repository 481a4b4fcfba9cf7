"""Decide between listing, lookup and substitution for one invocation."""

from __future__ import annotations

import logging
from typing import Sequence

from remoji.exceptions import NotFoundError
from remoji.models.types import EmojiRecord, FilterView, QueryOptions
from remoji.services.matcher import find
from remoji.services.substitution import substitute
from remoji.utils import formatter

logger = logging.getLogger(__name__)


def list_view(view: FilterView, options: QueryOptions) -> str:
    """Render every record of the view in order."""
    if not view:
        raise NotFoundError("No emojis to list")
    return formatter.render(view.values(), options)


def lookup(args: Sequence[str], view: FilterView, options: QueryOptions) -> str:
    """Look up each argument independently; duplicates across arguments are kept."""
    found: list[EmojiRecord] = []
    for query in args:
        matches = find(view, query, options)
        logger.debug("Query %r matched %d emojis", query, len(matches))
        found.extend(record for _, record in matches)

    if not found:
        raise NotFoundError(queries=args)
    return formatter.render(found, options)


def substitute_args(args: Sequence[str], view: FilterView, options: QueryOptions) -> str:
    """Treat the arguments as one piece of prose with ``:emoji:`` placeholders."""
    text = substitute(" ".join(args), view, options)
    return formatter.render([formatter.collapse(text, options)], options)


def run(args: Sequence[str], view: FilterView, options: QueryOptions) -> str:
    """Produce the output text for one invocation.

    Raises:
        NotFoundError: when listing or lookup yields nothing. Substitution
            (glyph-only mode with arguments) never raises it.
        InvalidQueryError: when a lookup query is not a valid pattern.
    """
    if not args:
        return list_view(view, options)
    if options.glyph_only:
        return substitute_args(args, view, options)
    return lookup(args, view, options)
