from __future__ import annotations

import asyncio
import random
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Protocol

from ..config import Settings, get_settings
from ..data.feeds import FEED_SOURCES
from ..logging import get_logger
from ..models.news import CacheInfo, FeedSource, NewsItem, TierInfo
from .cache import Clock, TtlSlot
from .dedup import filter_duplicates
from .feeds import FeedFetcher, FeedOutcome, parse_pub_date
from .sampling import sample_diverse, sample_uniform

logger = get_logger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ArticleFetcher(Protocol):
    async def fetch(self, feed_url: str, source_name: str) -> list[NewsItem]: ...


def recency_key(item: NewsItem) -> datetime:
    return parse_pub_date(item.pub_date) or EPOCH


@dataclass
class NewsAggregator:
    """Good-news pipeline behind two caches.

    The aggregated tier fetches every feed, drops near-duplicate titles,
    keeps the most recent ``top_articles_to_consider`` articles and samples
    them across sources. It is expensive and lives for ``feed_ttl``. The
    selection tier re-samples the aggregated tier's output for
    ``selection_ttl`` so that page views see some variety without touching
    the network.
    """

    settings: Settings | None = None
    fetcher: ArticleFetcher | None = None
    feeds: Sequence[FeedSource] | None = None
    rng: random.Random | None = None
    clock: Clock = time.monotonic
    _aggregated: TtlSlot[list[NewsItem]] = field(init=False, repr=False)
    _selection: TtlSlot[list[NewsItem]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.settings is None:
            self.settings = get_settings()
        if self.fetcher is None:
            self.fetcher = FeedFetcher(settings=self.settings)
        if self.feeds is None:
            self.feeds = FEED_SOURCES
        if self.rng is None:
            self.rng = random.Random()
        self._aggregated = TtlSlot(ttl=self.settings.feed_ttl, clock=self.clock)
        self._selection = TtlSlot(ttl=self.settings.selection_ttl, clock=self.clock)

    async def fetch_all(self) -> list[FeedOutcome]:
        """Fetch every configured feed concurrently and wait for all of them."""
        results = await asyncio.gather(
            *(self.fetcher.fetch(feed.url, feed.name) for feed in self.feeds),
            return_exceptions=True,
        )
        outcomes: list[FeedOutcome] = []
        for feed, result in zip(self.feeds, results, strict=True):
            if isinstance(result, BaseException):
                outcomes.append(FeedOutcome(source=feed, error=result))
            else:
                outcomes.append(FeedOutcome(source=feed, items=list(result)))
        return outcomes

    async def get_aggregated_pool(self) -> list[NewsItem]:
        items, hit = await self._aggregated.get_or_compute(self._build_aggregated)
        if hit:
            logger.debug("aggregated_cache_hit", count=len(items))
        return list(items)

    async def _build_aggregated(self) -> list[NewsItem]:
        logger.info("aggregated_recompute", feeds=len(self.feeds))
        merged: list[NewsItem] = []
        for outcome in await self.fetch_all():
            if not outcome.ok:
                logger.warning(
                    "feed_discarded",
                    source=outcome.source.name,
                    error=repr(outcome.error),
                )
                continue
            merged.extend(outcome.items)

        unique = filter_duplicates(merged, self.settings.similarity_threshold)
        ranked = sorted(unique, key=recency_key, reverse=True)
        pool = ranked[: self.settings.top_articles_to_consider]
        selected = sample_diverse(pool, self.settings.final_news_count, self.rng)
        logger.info(
            "aggregated_stored",
            fetched=len(merged),
            unique=len(unique),
            pool=len(pool),
            selected=len(selected),
        )
        return selected

    async def get_selection(self) -> list[NewsItem]:
        items, hit = await self._selection.get_or_compute(self._build_selection)
        if hit:
            logger.debug("selection_cache_hit", count=len(items))
        return list(items)

    async def _build_selection(self) -> list[NewsItem]:
        candidates = await self._selection_candidates()
        selected = sample_uniform(candidates, self.settings.final_news_count, self.rng)
        logger.info("selection_stored", candidates=len(candidates), selected=len(selected))
        return selected

    async def _selection_candidates(self) -> list[NewsItem]:
        # The aggregated tier already stores a sampled subset, so this
        # re-samples at most final_news_count articles.
        return await self.get_aggregated_pool()

    def clear_caches(self) -> None:
        self._aggregated.clear()
        self._selection.clear()
        logger.info("news_cache_cleared")

    def cache_info(self) -> CacheInfo:
        return CacheInfo(
            feed_cache=_tier_info(self._aggregated, "No feed cache", with_sources=True),
            selection_cache=_tier_info(self._selection, "No selection cache"),
        )


def _tier_info(
    slot: TtlSlot[list[NewsItem]], empty_message: str, with_sources: bool = False
) -> TierInfo:
    entry = slot.entry
    if entry is None:
        return TierInfo(is_cached=False, message=empty_message)
    sources = None
    if with_sources:
        sources = list(dict.fromkeys(item.source for item in entry.data))
    return TierInfo(
        is_cached=True,
        item_count=len(entry.data),
        age_seconds=slot.age(),
        remaining_seconds=slot.remaining(),
        sources=sources,
    )
