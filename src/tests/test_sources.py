from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from triage_tui.config import DEFAULT_SEED_PATH, RETRY_ATTEMPTS
from triage_tui.source_manager import get_source
from triage_tui.sources.base import SeedError, article_from_record
from triage_tui.sources.rss import RSSSource
from triage_tui.sources.static import StaticSource, parse_seed


@pytest.fixture
def seed_file(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(
        json.dumps(
            {
                "saved": [
                    {"id": 1, "title": "One", "body": "First", "extra": "ignored"},
                    {"id": "2", "title": "Two", "expanded": True},
                ],
                "trashed": [{"id": "3", "title": "Three"}],
            }
        )
    )
    return path


def test_static_source_reads_seed(seed_file):
    seed = StaticSource({"path": str(seed_file)}).get_seed()
    assert [a.id for a in seed.saved] == ["1", "2"]
    assert seed.saved[0].title == "One"
    assert seed.saved[1].expanded is True
    assert seed.favorited == []
    assert seed.archived == []
    assert [a.id for a in seed.trashed] == ["3"]


def test_static_source_defaults_to_packaged_seed():
    source = StaticSource({})
    assert source.path == DEFAULT_SEED_PATH
    seed = source.get_seed()
    assert seed.saved
    ids = [a.id for a in seed.saved + seed.archived]
    assert len(ids) == len(set(ids))


def test_static_source_missing_file(tmp_path):
    with pytest.raises(SeedError):
        StaticSource({"path": str(tmp_path / "nope.json")}).get_seed()


def test_static_source_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    with pytest.raises(SeedError):
        StaticSource({"path": str(path)}).get_seed()


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"saved": {"id": "1"}},
        {"saved": [{"title": "No id"}]},
        {"saved": ["1"]},
    ],
)
def test_parse_seed_rejects_malformed_documents(data):
    with pytest.raises(SeedError):
        parse_seed(data)


def test_article_from_record_coerces_id():
    article = article_from_record({"id": 42, "title": "Answer"})
    assert article.id == "42"
    assert article.expanded is False
    assert article.author is None


def test_article_from_record_coerces_optional_fields():
    article = article_from_record(
        {"id": "1", "author": 42, "published": 2024, "url": None}
    )
    assert article.author == "42"
    assert article.published == "2024"
    assert article.url is None


def test_get_source_by_name():
    assert isinstance(get_source({}), StaticSource)
    assert isinstance(get_source({"source": "rss", "sources": {"rss": {"url": "http://f"}}}), RSSSource)
    with pytest.raises(ValueError):
        get_source({"source": "carrier-pigeon"})


@pytest.fixture
def rss_source():
    return RSSSource({"url": "http://feed.example.com/rss"})


def test_rss_get_seed(rss_source):
    with patch("triage_tui.sources.rss.RSSSource._fetch_feed") as mock_fetch, patch(
        "triage_tui.sources.rss.feedparser.parse"
    ) as mock_parse:
        mock_fetch.return_value = b"<rss/>"
        mock_feed = MagicMock()
        mock_feed.bozo = False
        mock_feed.entries = [
            {
                "id": "urn:story-1",
                "title": "Story 1",
                "link": "http://story1.com",
                "summary": "<p>Summary <b>1</b></p>",
                "author": "Reporter",
            },
            {
                "title": "Story 2",
                "link": "http://story2.com",
                "summary": "Summary 2",
            },
            {
                "title": "Duplicate of 2",
                "link": "http://story2.com",
            },
        ]
        mock_parse.return_value = mock_feed

        seed = rss_source.get_seed()

        mock_parse.assert_called_once_with(b"<rss/>")
        assert [a.id for a in seed.saved] == ["urn:story-1", "http://story2.com"]
        assert seed.saved[0].body == "Summary 1"
        assert seed.saved[0].author == "Reporter"
        assert seed.saved[1].url == "http://story2.com"
        assert seed.favorited == seed.archived == seed.trashed == []


def test_rss_fetch_failure_raises(rss_source):
    with patch.object(
        rss_source.session, "get", side_effect=requests.ConnectionError("down")
    ) as mock_get:
        with pytest.raises(SeedError):
            rss_source.get_seed()
        mock_get.assert_called_once()


def test_rss_requires_url():
    with pytest.raises(SeedError):
        RSSSource({}).get_seed()


def test_rss_retries_live_in_the_adapter(rss_source):
    adapter = rss_source.session.get_adapter("https://feed.example.com/rss")
    assert adapter.max_retries.total == RETRY_ATTEMPTS
    assert 503 in adapter.max_retries.status_forcelist
