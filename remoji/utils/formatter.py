"""
Rendering of emoji records for terminal output.

Each entry renders as one of:

    glyph only          😀
    default             😀 : grinning face
    verbose             grinning face: {'codepoint': 'U+1F600', ...}

Entries are joined with a space in glyph-only mode and with a newline
otherwise.
"""

from __future__ import annotations

import re
from typing import Iterable, Union

from rich.pretty import pretty_repr

from remoji.config.constants import DETAIL_SEPARATOR, GLYPH_SEPARATOR
from remoji.models.types import EmojiRecord, QueryOptions

Entry = Union[EmojiRecord, str]

# Wide enough that a single record's dump never wraps at -v
_SINGLE_LINE_WIDTH = 10_000


def separator(options: QueryOptions) -> str:
    return GLYPH_SEPARATOR if options.glyph_only else DETAIL_SEPARATOR


def dump_attributes(record: EmojiRecord, verbosity: int) -> str:
    """Structured dump of a record's attributes; expanded from -vv up."""
    if verbosity > 1:
        return pretty_repr(record.attributes(), expand_all=True)
    return pretty_repr(record.attributes(), max_width=_SINGLE_LINE_WIDTH)


def format_entry(entry: Entry, options: QueryOptions) -> str:
    """Render one record, or a raw literal treated as its own glyph."""
    record = entry if isinstance(entry, EmojiRecord) else EmojiRecord.raw(entry)

    if options.glyph_only:
        return record.glyph
    if options.verbosity > 0:
        return f"{record.name}: {dump_attributes(record, options.verbosity)}"
    return f"{record.glyph} : {record.name}"


def collapse(text: str, options: QueryOptions) -> str:
    """Squeeze runs of the mode's separator down to a single one."""
    sep = separator(options)
    return re.sub(f"(?:{re.escape(sep)})+", sep, text)


def join(rendered: Iterable[str], options: QueryOptions) -> str:
    return collapse(separator(options).join(rendered), options)


def render(entries: Iterable[Entry], options: QueryOptions) -> str:
    return join((format_entry(entry, options) for entry in entries), options)
