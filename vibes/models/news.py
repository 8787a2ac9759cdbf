from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .quote import Quote


class NewsItem(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(description="Article headline, used for duplicate detection")
    link: str = Field(description="Article URL or '#' when the feed omitted it")
    pub_date: str = Field(
        alias="pubDate", description="Publication timestamp as published by the feed"
    )
    source: str = Field(description="Display name of the feed the article came from")
    content_snippet: str = Field(
        default="", alias="contentSnippet", description="Plain-text teaser"
    )


class FeedSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str = Field(description="RSS/Atom feed URL")
    name: str = Field(description="Display name, becomes NewsItem.source")
    homepage: str = Field(description="Publisher homepage")


class NewsResponse(BaseModel):
    success: bool = True
    news: list[NewsItem] = Field(default_factory=list)
    refreshed: bool = False
    timestamp: datetime


class NewsErrorResponse(BaseModel):
    success: bool = False
    error: str
    news: list[NewsItem] = Field(default_factory=list)


class TierInfo(BaseModel):
    is_cached: bool
    item_count: int | None = None
    age_seconds: float | None = None
    remaining_seconds: float | None = None
    sources: list[str] | None = None
    message: str | None = None


class CacheInfo(BaseModel):
    feed_cache: TierInfo
    selection_cache: TierInfo


class PageData(BaseModel):
    news: list[NewsItem] = Field(default_factory=list)
    quote: Quote
    feeds: list[FeedSource] = Field(default_factory=list)
    content_snippet_length: int
    error: str | None = None
