"""Tests for importing the HTML emoji table."""

import json
from unittest.mock import MagicMock, Mock, patch

import pytest
import requests

from remoji.exceptions import CacheWriteError, ImportFailedError
from remoji.models import load_cache
from remoji.services.importer import (
    fetch_emoji_table,
    import_emojis,
    parse_emoji_table,
    write_cache,
)

EMOJI_TABLE_HTML = """
<html><body><table>
<tr><th colspan="15" class="bighead"><a name="smileys">Smileys &amp; Emotion</a></th></tr>
<tr><th colspan="15" class="mediumhead"><a name="face-smiling">face-smiling</a></th></tr>
<tr><th class="rchars">№</th><th class="rchars">Code</th><th class="cchars">Browser</th><th>CLDR Short Name</th></tr>
<tr><td class="rchars">1</td><td class="code">U+1F600</td><td class="chars">\U0001f600</td><td class="andr"></td><td class="name">grinning face</td></tr>
<tr><td class="rchars">2</td><td class="code">U+1F603</td><td class="chars">\U0001f603</td><td class="andr"></td><td class="name">grinning face with big eyes</td></tr>
<tr><th colspan="15" class="mediumhead">face-affection</th></tr>
<tr><td class="rchars">3</td><td class="code">U+1F970</td><td class="chars">\U0001f970</td><td class="andr"></td><td class="name">smiling face with hearts</td></tr>
<tr><th colspan="15" class="bighead">Travel &amp; Places</th></tr>
<tr><th colspan="15" class="mediumhead">transport-air</th></tr>
<tr><td class="rchars">4</td><td class="code">U+1F680</td><td class="chars">\U0001f680</td><td class="andr"></td><td class="name"> rocket </td></tr>
</table></body></html>
"""


class TestParseEmojiTable:
    """Test parse_emoji_table function."""

    def test_rows_in_document_order(self):
        cache = parse_emoji_table(EMOJI_TABLE_HTML)
        assert list(cache) == [
            "grinning face",
            "grinning face with big eyes",
            "smiling face with hearts",
            "rocket",
        ]

    def test_fields(self):
        record = parse_emoji_table(EMOJI_TABLE_HTML)["grinning face"]
        assert record.codepoint == "U+1F600"
        assert record.glyph == "\U0001f600"
        assert record.category == "Smileys & Emotion"
        assert record.subcategory == "face-smiling"

    def test_inherits_nearest_headers(self):
        cache = parse_emoji_table(EMOJI_TABLE_HTML)
        assert cache["smiling face with hearts"].category == "Smileys & Emotion"
        assert cache["smiling face with hearts"].subcategory == "face-affection"
        assert cache["rocket"].category == "Travel & Places"
        assert cache["rocket"].subcategory == "transport-air"

    def test_rows_before_headers_skipped(self, caplog):
        html = (
            "<table>"
            "<tr><td>0</td><td>U+2B50</td><td>⭐</td><td>star</td></tr>"
            "<tr><th class='bighead'>Travel &amp; Places</th></tr>"
            "<tr><th class='mediumhead'>sky &amp; weather</th></tr>"
            "<tr><td>1</td><td>U+1F31F</td><td>\U0001f31f</td><td>glowing star</td></tr>"
            "</table>"
        )
        cache = parse_emoji_table(html)
        assert list(cache) == ["glowing star"]
        assert "Skipped 1" in caplog.text

    def test_first_name_wins(self):
        html = (
            "<table>"
            "<tr><th class='bighead'>Symbols</th></tr>"
            "<tr><th class='mediumhead'>geometric</th></tr>"
            "<tr><td>1</td><td>U+1F534</td><td>\U0001f534</td><td>red circle</td></tr>"
            "<tr><td>2</td><td>U+2B55</td><td>⭕</td><td>red circle</td></tr>"
            "</table>"
        )
        assert parse_emoji_table(html)["red circle"].codepoint == "U+1F534"

    def test_empty_document(self):
        assert parse_emoji_table("<html></html>") == {}


class TestWriteCache:
    """Test write_cache function."""

    def test_round_trips_through_loader(self, tmp_path):
        cache = parse_emoji_table(EMOJI_TABLE_HTML)
        path = tmp_path / "nested" / "emojis.json"
        write_cache(cache, path)
        assert load_cache(path) == cache

    def test_persisted_format(self, tmp_path):
        path = tmp_path / "emojis.json"
        write_cache(parse_emoji_table(EMOJI_TABLE_HTML), path)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["rocket"] == {
            "code": "U+1F680",
            "sym": "\U0001f680",
            "cat": "Travel & Places",
            "subcat": "transport-air",
        }
        assert "\U0001f680" in path.read_text(encoding="utf-8")

    def test_failed_write_keeps_existing_cache(self, tmp_path):
        path = tmp_path / "emojis.json"
        path.write_text("{\"old\": 1}", encoding="utf-8")
        with patch("remoji.services.importer.json.dump", side_effect=OSError("disk full")):
            with pytest.raises(CacheWriteError) as exc_info:
                write_cache(parse_emoji_table(EMOJI_TABLE_HTML), path)
        assert exc_info.value.context["path"] == str(path)
        assert path.read_text(encoding="utf-8") == "{\"old\": 1}"
        assert [p.name for p in tmp_path.iterdir()] == ["emojis.json"]

    def test_parent_is_a_file(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        with pytest.raises(CacheWriteError) as exc_info:
            write_cache(parse_emoji_table(EMOJI_TABLE_HTML), blocker / "emojis.json")
        assert isinstance(exc_info.value.__cause__, OSError)


def make_session(text="", error=None):
    response = Mock()
    response.text = text
    response.content = text.encode("utf-8")
    response.encoding = "utf-8"
    if error:
        response.raise_for_status.side_effect = error
    session = Mock()
    session.get.return_value = response
    return session


class TestFetchAndImport:
    """Test fetching and the full import."""

    def test_fetch(self):
        session = make_session(EMOJI_TABLE_HTML)
        assert fetch_emoji_table("http://example.test/list.html", session) == EMOJI_TABLE_HTML
        session.get.assert_called_once()
        assert session.get.call_args.args[0] == "http://example.test/list.html"

    def test_http_error(self):
        session = make_session(error=requests.HTTPError("404"))
        with pytest.raises(ImportFailedError) as exc_info:
            fetch_emoji_table("http://example.test/missing.html", session)
        assert exc_info.value.context["url"] == "http://example.test/missing.html"

    def test_connection_error(self):
        session = Mock()
        session.get.side_effect = requests.ConnectionError("down")
        with pytest.raises(ImportFailedError):
            fetch_emoji_table("http://example.test/list.html", session)

    def test_import_writes_cache(self, tmp_path):
        path = tmp_path / "emojis.json"
        cache = import_emojis(path, "http://example.test/list.html", make_session(EMOJI_TABLE_HTML))
        assert len(cache) == 4
        assert load_cache(path) == cache

    def test_import_uses_configured_url(self, tmp_path, monkeypatch):
        monkeypatch.setenv("REMOJI_EMOJI_TABLE_URL", "http://mirror.test/emoji.html")
        session = make_session(EMOJI_TABLE_HTML)
        import_emojis(tmp_path / "emojis.json", session=session)
        assert session.get.call_args.args[0] == "http://mirror.test/emoji.html"

    def test_import_empty_table_fails(self, tmp_path):
        path = tmp_path / "emojis.json"
        with pytest.raises(ImportFailedError):
            import_emojis(path, "http://example.test/list.html", make_session("<table></table>"))
        assert not path.exists()

    def test_fetch_closes_own_session(self):
        session = make_session(EMOJI_TABLE_HTML)
        session_cls = MagicMock()
        session_cls.return_value.__enter__.return_value = session
        with patch("remoji.services.importer.requests.Session", session_cls):
            assert fetch_emoji_table("http://example.test/list.html") == EMOJI_TABLE_HTML
        session_cls.return_value.__exit__.assert_called_once()
        session.get.assert_called_once()
