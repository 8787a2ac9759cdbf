from __future__ import annotations

from ..models.news import FeedSource

FEED_SOURCES: tuple[FeedSource, ...] = (
    FeedSource(
        url="https://www.positive.news/feed/",
        name="Positive News",
        homepage="https://www.positive.news/",
    ),
    FeedSource(
        url="https://reasonstobecheerful.world/feed/",
        name="Reasons to be Cheerful",
        homepage="https://reasonstobecheerful.world/",
    ),
    FeedSource(
        url="https://www.upworthy.com/feeds/feed.rss",
        name="Upworthy",
        homepage="https://www.upworthy.com/",
    ),
    FeedSource(
        url="https://www.goodnewsnetwork.org/category/news/science/feed/",
        name="Good News Network - Science",
        homepage="https://www.goodnewsnetwork.org/category/news/science/",
    ),
)
