from __future__ import annotations

import logging
from typing import Any, Dict, List

import feedparser
import requests
from bs4 import BeautifulSoup
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import (
    HTTP_TIMEOUT,
    REQUEST_HEADERS,
    RETRY_ATTEMPTS,
    RETRY_BACKOFF_FACTOR,
)
from ..datamodels import Article, Seed
from .base import SeedError, Source

logger = logging.getLogger("triage")


class RSSSource(Source):
    """Seeds the queue from the entries of a single RSS or Atom feed."""

    def __init__(self, config: Dict[str, Any]):
        super().__init__(config)
        self.url = self.config.get("url")
        self.session = requests.Session()
        self.session.headers.update(REQUEST_HEADERS)
        # Retries and backoff happen in the adapter.
        adapter = HTTPAdapter(
            max_retries=Retry(
                total=RETRY_ATTEMPTS,
                backoff_factor=RETRY_BACKOFF_FACTOR,
                status_forcelist=[429, 500, 502, 503, 504],
            )
        )
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

    def _fetch_feed(self) -> bytes:
        logger.debug("Fetching feed %s", self.url)
        try:
            resp = self.session.get(self.url, timeout=HTTP_TIMEOUT)
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.warning("Fetching feed %s failed: %s", self.url, e)
            raise SeedError(f"Unable to fetch feed {self.url}: {e}") from e
        return resp.content

    def get_seed(self) -> Seed:
        if not self.url:
            raise SeedError("No feed URL configured for the rss source")

        feed = feedparser.parse(self._fetch_feed())
        if feed.bozo and not feed.entries:
            raise SeedError(f"Unable to parse feed {self.url}: {feed.bozo_exception}")

        articles: List[Article] = []
        seen_ids = set()
        for entry in feed.entries:
            article_id = entry.get("id") or entry.get("link")
            if not article_id or article_id in seen_ids:
                continue
            seen_ids.add(article_id)
            summary_html = entry.get("summary", "")
            articles.append(
                Article(
                    id=article_id,
                    title=entry.get("title", ""),
                    author=entry.get("author"),
                    body=BeautifulSoup(summary_html, "lxml").get_text().strip(),
                    url=entry.get("link"),
                    published=entry.get("published"),
                )
            )
        logger.info("Loaded %d articles from feed %s", len(articles), self.url)
        return Seed(saved=articles)
