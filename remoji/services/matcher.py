"""Resolve a query string against a view of the emoji cache."""

from __future__ import annotations

import re
from typing import Callable

from remoji.exceptions import InvalidQueryError
from remoji.models.types import FilterView, Match, QueryOptions


def compile_query(query: str, options: QueryOptions) -> re.Pattern[str]:
    """Compile a name query; case-insensitive unless ``regex`` mode is on."""
    flags = 0 if options.regex else re.IGNORECASE
    try:
        return re.compile(query, flags)
    except re.error as e:
        raise InvalidQueryError(pattern=query) from e


def name_predicate(query: str, options: QueryOptions) -> Callable[[str], bool]:
    """Build the name test for the mode selected by ``options``.

    ``exact`` beats ``regex``, which beats the default case-insensitive search.
    """
    if options.exact:
        return lambda name: name == query

    pattern = compile_query(query, options)
    return lambda name: pattern.search(name) is not None


def find(view: FilterView, query: str, options: QueryOptions) -> list[Match]:
    """Return ``(name, record)`` pairs matching ``query`` in view order.

    Examples:
        >>> find(view, "grinning", QueryOptions())
        [("grinning face", EmojiRecord(name="grinning face", ...))]
        >>> find(view, "Grinning", QueryOptions(regex=True))
        []
    """
    matches = name_predicate(query, options)
    return [(name, record) for name, record in view.items() if matches(name)]
