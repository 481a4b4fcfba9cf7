"""Data models for remoji."""

from .emoji import EmojiStore, categories, filter_view, load_cache, subcategories
from .types import EmojiCache, EmojiRecord, FilterView, Match, QueryOptions

__all__ = [
    "EmojiCache",
    "EmojiRecord",
    "EmojiStore",
    "FilterView",
    "Match",
    "QueryOptions",
    "categories",
    "filter_view",
    "load_cache",
    "subcategories",
]
