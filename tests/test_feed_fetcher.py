from datetime import datetime, timedelta, timezone

import httpx
import pytest
import respx
from structlog.testing import capture_logs

from vibes.config import Settings
from vibes.services.feeds import FeedFetcher, parse_feed, parse_pub_date

FEED_URL = "https://goodnews.example/feed/"


def _rss(items: str) -> str:
    return f"""<?xml version="1.0" encoding="UTF-8"?>
    <rss version="2.0"
         xmlns:content="http://purl.org/rss/1.0/modules/content/"
         xmlns:dc="http://purl.org/dc/elements/1.1/">
      <channel>
        <title>Good News</title>
        {items}
      </channel>
    </rss>
    """


@pytest.mark.asyncio
async def test_fetch_parses_rss_items_in_feed_order() -> None:
    rss = _rss(
        """
        <item>
          <title>Otters return to the river</title>
          <link>https://goodnews.example/otters</link>
          <pubDate>Mon, 20 May 2024 15:20:00 +0000</pubDate>
          <description><![CDATA[<p>The <b>otters</b> are back.</p>]]></description>
        </item>
        <item>
          <title>Kids build a library</title>
          <link>https://goodnews.example/library</link>
          <pubDate>Tue, 21 May 2024 08:00:00 +0000</pubDate>
          <description>Plain teaser</description>
        </item>
        """
    )

    async with httpx.AsyncClient() as client:
        fetcher = FeedFetcher(settings=Settings(), client=client)
        with respx.mock(assert_all_called=True) as mock:
            mock.get(FEED_URL).respond(200, text=rss)
            items = await fetcher.fetch(FEED_URL, "Good News")

    assert [item.title for item in items] == [
        "Otters return to the river",
        "Kids build a library",
    ]
    first = items[0]
    assert first.source == "Good News"
    assert first.link == "https://goodnews.example/otters"
    assert first.pub_date == "Mon, 20 May 2024 15:20:00 +0000"
    assert first.content_snippet == "The otters are back."
    assert items[1].content_snippet == "Plain teaser"


@pytest.mark.asyncio
async def test_fetch_takes_at_most_items_per_feed() -> None:
    entries = "".join(
        f"<item><title>Story {index}</title><link>https://goodnews.example/{index}</link></item>"
        for index in range(12)
    )

    async with httpx.AsyncClient() as client:
        fetcher = FeedFetcher(settings=Settings(items_per_feed=10), client=client)
        with respx.mock(assert_all_called=True) as mock:
            mock.get(FEED_URL).respond(200, text=_rss(entries))
            items = await fetcher.fetch(FEED_URL, "Good News")

    assert [item.title for item in items] == [f"Story {index}" for index in range(10)]


def test_missing_fields_are_defaulted() -> None:
    before = datetime.now(timezone.utc) - timedelta(seconds=1)

    items = parse_feed(_rss("<item><guid>abc</guid></item>").encode(), "Upworthy")

    assert len(items) == 1
    item = items[0]
    assert item.title == "Untitled"
    assert item.link == "#"
    assert item.content_snippet == ""
    published = parse_pub_date(item.pub_date)
    assert published is not None
    assert published >= before


def test_snippet_falls_back_to_full_content() -> None:
    rss = _rss(
        """
        <item>
          <title>Reef recovery</title>
          <link>https://goodnews.example/reef</link>
          <dc:date>2024-05-20T10:00:00Z</dc:date>
          <content:encoded><![CDATA[<p>Full body</p>]]></content:encoded>
        </item>
        """
    )

    item = parse_feed(rss.encode(), "Positive News")[0]

    assert item.content_snippet == "<p>Full body</p>"
    assert item.pub_date == "2024-05-20T10:00:00Z"


def test_parses_atom_entries() -> None:
    atom = """<?xml version="1.0" encoding="utf-8"?>
    <feed xmlns="http://www.w3.org/2005/Atom">
      <title>Cheerful</title>
      <entry>
        <title>Cities go car-free on Sundays</title>
        <link rel="alternate" href="https://cheerful.example/car-free"/>
        <updated>2024-05-19T09:30:00Z</updated>
        <summary>Streets for people.</summary>
      </entry>
    </feed>
    """

    items = parse_feed(atom.encode(), "Reasons to be Cheerful")

    assert len(items) == 1
    assert items[0].link == "https://cheerful.example/car-free"
    assert items[0].pub_date == "2024-05-19T09:30:00Z"
    assert items[0].content_snippet == "Streets for people."


@pytest.mark.asyncio
async def test_http_error_yields_empty_list_and_warning() -> None:
    async with httpx.AsyncClient() as client:
        fetcher = FeedFetcher(settings=Settings(), client=client)
        with respx.mock(assert_all_called=True) as mock:
            mock.get(FEED_URL).respond(503)
            with capture_logs() as logs:
                items = await fetcher.fetch(FEED_URL, "Good News")

    assert items == []
    failures = [entry for entry in logs if entry["event"] == "feed_fetch_failed"]
    assert len(failures) == 1
    assert failures[0]["log_level"] == "warning"
    assert failures[0]["source"] == "Good News"


@pytest.mark.asyncio
async def test_network_error_yields_empty_list() -> None:
    async with httpx.AsyncClient() as client:
        fetcher = FeedFetcher(settings=Settings(), client=client)
        with respx.mock(assert_all_called=True) as mock:
            mock.get(FEED_URL).mock(side_effect=httpx.ConnectError)
            items = await fetcher.fetch(FEED_URL, "Good News")

    assert items == []


@pytest.mark.asyncio
async def test_non_feed_document_yields_empty_list() -> None:
    async with httpx.AsyncClient() as client:
        fetcher = FeedFetcher(settings=Settings(), client=client)
        with respx.mock(assert_all_called=True) as mock:
            mock.get(FEED_URL).respond(200, text="<html><body>Moved</body></html>")
            items = await fetcher.fetch(FEED_URL, "Good News")

    assert items == []


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Mon, 20 May 2024 15:20:00 +0200", datetime(2024, 5, 20, 13, 20, tzinfo=timezone.utc)),
        ("2024-05-20T10:00:00", datetime(2024, 5, 20, 10, 0, tzinfo=timezone.utc)),
        ("not a date", None),
        ("0001-01-01T00:00:00+05:00", None),
        ("", None),
    ],
)
def test_parse_pub_date(raw: str, expected: datetime | None) -> None:
    assert parse_pub_date(raw) == expected
