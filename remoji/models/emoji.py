"""Loading and filtering of the emoji cache."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from types import MappingProxyType

from remoji.config import get_cache_path
from remoji.exceptions import CacheMissingError, CacheReadError, InvalidQueryError
from remoji.models.types import EmojiCache, EmojiRecord, FilterView, QueryOptions

logger = logging.getLogger(__name__)


def load_cache(path: Path) -> EmojiCache:
    """Read the persisted cache, keeping the file's entry order."""
    if not path.exists():
        raise CacheMissingError(path=str(path))

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CacheReadError(path=str(path)) from e

    if not isinstance(data, dict):
        raise CacheReadError("Emoji cache is not a JSON object", path=str(path))

    cache: EmojiCache = {}
    for name, entry in data.items():
        try:
            cache[name] = EmojiRecord.from_cache_dict(name, entry)
        except (KeyError, TypeError) as e:
            raise CacheReadError(
                "Malformed emoji cache entry", path=str(path), name=name
            ) from e

    logger.debug("Loaded %d emojis from %s", len(cache), path)
    return cache


def _compile_filter(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise InvalidQueryError("Invalid filter pattern", pattern=pattern) from e


def filter_view(cache: EmojiCache, options: QueryOptions) -> FilterView:
    """Narrow the cache by subcategory, else by category, else not at all.

    Both filters are case-insensitive unanchored regex searches. An empty
    result is a valid view.
    """
    if options.subcategory:
        pattern = _compile_filter(options.subcategory)
        selected = {k: v for k, v in cache.items() if pattern.search(v.subcategory)}
    elif options.category:
        pattern = _compile_filter(options.category)
        selected = {k: v for k, v in cache.items() if pattern.search(v.category)}
    else:
        return MappingProxyType(cache)

    logger.debug("Filter kept %d of %d emojis", len(selected), len(cache))
    return MappingProxyType(selected)


def categories(cache: FilterView) -> list[str]:
    """Unique categories in first-appearance order."""
    return list(dict.fromkeys(record.category for record in cache.values()))


def subcategories(cache: FilterView) -> list[str]:
    """Unique subcategories in first-appearance order."""
    return list(dict.fromkeys(record.subcategory for record in cache.values()))


class EmojiStore:
    """Per-invocation access to the emoji cache.

    The cache is read at most once per instance and never written.
    """

    def __init__(self, path: Path | None = None):
        self.path = path or get_cache_path()
        self._cache: EmojiCache | None = None

    def exists(self) -> bool:
        return self.path.exists()

    @property
    def cache(self) -> EmojiCache:
        if self._cache is None:
            self._cache = load_cache(self.path)
        return self._cache

    def view(self, options: QueryOptions) -> FilterView:
        return filter_view(self.cache, options)
