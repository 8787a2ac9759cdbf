from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import httpx
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from dateutil import parser as date_parser

from ..config import Settings, get_settings
from ..http_client import get_http_client
from ..logging import get_logger
from ..models.news import FeedSource, NewsItem

logger = get_logger(__name__)

UNTITLED = "Untitled"
MISSING_LINK = "#"

FEED_ACCEPT = "application/rss+xml, application/atom+xml, application/xml;q=0.9, */*;q=0.8"


@dataclass(slots=True)
class FeedOutcome:
    """Result of fetching one configured feed: its articles, or why it failed."""

    source: FeedSource
    items: list[NewsItem] = field(default_factory=list)
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class FeedFetcher:
    settings: Settings | None = None
    client: httpx.AsyncClient | None = None

    def __post_init__(self) -> None:
        if self.settings is None:
            self.settings = get_settings()

    async def fetch(self, feed_url: str, source_name: str) -> list[NewsItem]:
        """Fetch one feed; failures are logged and yield an empty list."""
        try:
            items = await self._fetch_items(feed_url, source_name)
        except (httpx.HTTPError, ParserRejectedMarkup, ValueError, TypeError) as exc:
            logger.warning(
                "feed_fetch_failed",
                source=source_name,
                url=feed_url,
                error=str(exc) or exc.__class__.__name__,
            )
            return []
        if not items:
            logger.warning("feed_empty", source=source_name, url=feed_url)
        return items

    async def _fetch_items(self, feed_url: str, source_name: str) -> list[NewsItem]:
        client = self.client or await get_http_client()
        response = await client.get(feed_url, headers={"Accept": FEED_ACCEPT})
        response.raise_for_status()
        return parse_feed(
            response.content, source_name, limit=self.settings.items_per_feed
        )


def parse_feed(content: bytes | str, source_name: str, limit: int = 10) -> list[NewsItem]:
    """Turn an RSS 2.0 or Atom document into at most ``limit`` articles, in feed order."""
    soup = BeautifulSoup(content, "xml")
    if soup.find(["rss", "feed", "RDF"]) is None:
        raise ValueError(f"{source_name} did not return an RSS or Atom document")

    entries = soup.find_all(["item", "entry"])
    return [_build_item(entry, source_name) for entry in entries[:limit]]


def _build_item(entry: Any, source_name: str) -> NewsItem:
    title = _text(entry.find("title", recursive=False))
    published = _text(
        entry.find(["pubDate", "published", "updated", "date"], recursive=False)
    )
    return NewsItem(
        title=title or UNTITLED,
        link=_link(entry) or MISSING_LINK,
        pub_date=published or datetime.now(timezone.utc).isoformat(),
        source=source_name,
        content_snippet=_snippet(entry),
    )


def _text(tag: Any) -> str:
    if tag is None:
        return ""
    return tag.get_text(strip=True)


def _link(entry: Any) -> str:
    for tag in entry.find_all("link", recursive=False):
        href = tag.get("href")
        if href and tag.get("rel", "alternate") == "alternate":
            return href.strip()
        text = tag.get_text(strip=True)
        if text:
            return text
    return ""


def _snippet(entry: Any) -> str:
    summary = entry.find(["description", "summary"], recursive=False)
    if summary is not None:
        snippet = _strip_html(summary.get_text())
        if snippet:
            return snippet
    content = entry.find(["encoded", "content"], recursive=False)
    if content is not None:
        return content.get_text().strip()
    return ""


def _strip_html(markup: str) -> str:
    if "<" not in markup:
        return " ".join(markup.split())
    text = BeautifulSoup(markup, "lxml").get_text(" ")
    return " ".join(text.split())


def parse_pub_date(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        parsed = date_parser.parse(value)
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    except (ValueError, TypeError, OverflowError):
        return None
