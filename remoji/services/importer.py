"""Import the Unicode full emoji list into the local cache.

The table interleaves header rows with emoji rows:

    <tr><th class="bighead">Smileys & Emotion</th></tr>
    <tr><th class="mediumhead">face-smiling</th></tr>
    <tr><td>1</td><td>U+1F600</td><td>😀</td>...<td>grinning face</td></tr>

Every emoji row belongs to the nearest category and subcategory header
above it, so a single pass over the rows is enough.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

import requests
from bs4 import BeautifulSoup

from remoji.config import get_table_url
from remoji.config.constants import (
    CATEGORY_HEADER_CLASS,
    REQUEST_TIMEOUT_SECONDS,
    SUBCATEGORY_HEADER_CLASS,
)
from remoji.exceptions import CacheWriteError, ImportFailedError
from remoji.models.types import EmojiCache, EmojiRecord

logger = logging.getLogger(__name__)

# Number, code and glyph columns come first, the name is always last
MIN_DATA_CELLS = 3


def fetch_emoji_table(url: str, session: requests.Session | None = None) -> str:
    """Download the HTML table in a single attempt."""
    if session is None:
        with requests.Session() as own_session:
            return fetch_emoji_table(url, own_session)

    try:
        response = session.get(url, timeout=REQUEST_TIMEOUT_SECONDS)
        response.raise_for_status()
    except requests.RequestException as e:
        raise ImportFailedError(url=url) from e

    logger.info("Fetched %d bytes from %s", len(response.content), url)
    # The Unicode charts are UTF-8 even when the server omits the charset
    response.encoding = "utf-8"
    return response.text


def parse_emoji_table(html: str) -> EmojiCache:
    """Build a cache from the table rows in document order."""
    soup = BeautifulSoup(html, "html.parser")
    cache: EmojiCache = {}
    category = ""
    subcategory = ""
    skipped = 0

    for row in soup.find_all("tr"):
        category_cell = row.find("th", class_=CATEGORY_HEADER_CLASS)
        if category_cell:
            category = category_cell.get_text().strip()
            subcategory = ""
            continue

        subcategory_cell = row.find("th", class_=SUBCATEGORY_HEADER_CLASS)
        if subcategory_cell:
            subcategory = subcategory_cell.get_text().strip()
            continue

        cells = row.find_all("td")
        if len(cells) < MIN_DATA_CELLS:
            continue

        name = cells[-1].get_text().strip()
        if not name or name in cache:
            continue
        if not category or not subcategory:
            skipped += 1
            continue

        cache[name] = EmojiRecord(
            name=name,
            codepoint=cells[1].get_text().strip(),
            glyph=cells[2].get_text().strip(),
            category=category,
            subcategory=subcategory,
        )

    if skipped:
        logger.warning("Skipped %d emoji rows with no category header above them", skipped)
    return cache


def write_cache(cache: EmojiCache, path: Path) -> None:
    """Write the whole cache as pretty-printed JSON.

    The file is written beside ``path`` and swapped in with ``os.replace``,
    so a failed write leaves any existing cache intact.
    """
    data = {name: record.to_cache_dict() for name, record in cache.items()}
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
                f.write("\n")
            os.replace(tmp_name, path)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as e:
        raise CacheWriteError(path=str(path)) from e

    logger.info("Wrote %d emojis to %s", len(cache), path)


def import_emojis(
    path: Path,
    url: str | None = None,
    session: requests.Session | None = None,
) -> EmojiCache:
    """Fetch, parse and persist the emoji table, replacing any existing cache."""
    url = url or get_table_url()
    cache = parse_emoji_table(fetch_emoji_table(url, session))
    if not cache:
        raise ImportFailedError("No emojis found in table", url=url)

    write_cache(cache, path)
    return cache
