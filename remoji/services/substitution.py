"""Replace ``:token:`` placeholders in free text with matching emojis."""

from __future__ import annotations

import logging
import re

from remoji.exceptions import InvalidQueryError
from remoji.models.types import FilterView, QueryOptions
from remoji.services.matcher import find
from remoji.utils.formatter import render

logger = logging.getLogger(__name__)

# Shortest colon-delimited span; the token itself never contains a colon
TOKEN_PATTERN = re.compile(r":([^:]*):")


def resolve_token(token: str, view: FilterView, options: QueryOptions) -> str:
    """Render every match for ``token``, or return "" when nothing matches."""
    if not token:
        return ""

    try:
        matches = find(view, token, options)
    except InvalidQueryError as e:
        logger.warning("Dropping placeholder %r: %s", token, e)
        return ""

    if not matches:
        logger.debug("No emoji for placeholder %r", token)
        return ""

    return render((record for _, record in matches), options)


def substitute(text: str, view: FilterView, options: QueryOptions) -> str:
    """Rewrite ``text``, replacing each ``:token:`` span left to right.

    Text outside spans is kept verbatim; ``::`` and unresolved tokens are
    removed.

    Examples:
        >>> substitute("Hi :grinning face:!", view, QueryOptions(glyph_only=True))
        'Hi 😀!'
        >>> substitute("::", view, QueryOptions())
        ''
    """
    return TOKEN_PATTERN.sub(lambda m: resolve_token(m.group(1), view, options), text)
