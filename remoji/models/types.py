"""Data types for the emoji cache and per-invocation query options."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias, TypedDict

from remoji.config.constants import RAW_STRING_CATEGORY


class CachedEmojiDict(TypedDict):
    """One entry of the persisted cache, keyed by emoji name."""

    code: str
    sym: str
    cat: str
    subcat: str


@dataclass(frozen=True)
class EmojiRecord:
    """One emoji's metadata entry."""

    name: str
    codepoint: str
    glyph: str
    category: str
    subcategory: str

    @classmethod
    def raw(cls, literal: str) -> EmojiRecord:
        """Synthesize a record for literal text that has no cache entry."""
        return cls(
            name=literal,
            codepoint="",
            glyph=literal,
            category=RAW_STRING_CATEGORY,
            subcategory=RAW_STRING_CATEGORY,
        )

    @classmethod
    def from_cache_dict(cls, name: str, data: CachedEmojiDict) -> EmojiRecord:
        return cls(
            name=name,
            codepoint=data["code"],
            glyph=data["sym"],
            category=data["cat"],
            subcategory=data["subcat"],
        )

    def to_cache_dict(self) -> CachedEmojiDict:
        return {
            "code": self.codepoint,
            "sym": self.glyph,
            "cat": self.category,
            "subcat": self.subcategory,
        }

    def attributes(self) -> dict[str, str]:
        """The non-key attributes, in display order."""
        return {
            "codepoint": self.codepoint,
            "glyph": self.glyph,
            "category": self.category,
            "subcategory": self.subcategory,
        }


# Ordered name -> record, in scrape order
EmojiCache: TypeAlias = dict[str, EmojiRecord]

# Read-only subset of a cache for one invocation
FilterView: TypeAlias = Mapping[str, EmojiRecord]

Match: TypeAlias = tuple[str, EmojiRecord]


@dataclass(frozen=True)
class QueryOptions:
    """Configuration for one invocation.

    ``exact`` takes precedence over ``regex``; ``subcategory`` takes
    precedence over ``category``.
    """

    category: str | None = None
    subcategory: str | None = None
    exact: bool = False
    regex: bool = False
    glyph_only: bool = False
    verbosity: int = 0

    def __post_init__(self) -> None:
        if self.verbosity < 0:
            raise ValueError(f"verbosity must be >= 0, got {self.verbosity}")
