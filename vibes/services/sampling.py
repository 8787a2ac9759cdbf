from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

from ..models.news import NewsItem

T = TypeVar("T")


def sample_uniform(
    items: Sequence[T], count: int, rng: random.Random | None = None
) -> list[T]:
    """Pick ``count`` items uniformly at random.

    When there are no more items than requested they are returned as-is,
    without shuffling.
    """
    if count <= 0:
        return []
    if len(items) <= count:
        return list(items)
    shuffled = list(items)
    (rng or random).shuffle(shuffled)
    return shuffled[:count]


def sample_diverse(
    pool: Sequence[NewsItem], count: int, rng: random.Random | None = None
) -> list[NewsItem]:
    """Pick ``count`` articles, covering as many distinct sources as possible.

    Every source contributes one article (in first-seen order) before any
    source contributes a second. Further rounds visit the sources that still
    have unpicked articles in a shuffled order. The result never holds the
    same article twice and its length is ``min(count, len(pool))``.
    """
    rng = rng or random
    if not pool or count <= 0:
        return []

    remaining: dict[str, list[NewsItem]] = {}
    for item in pool:
        remaining.setdefault(item.source, []).append(item)

    result: list[NewsItem] = []
    sources = list(remaining)
    while len(result) < count and sources:
        for source in sources:
            if len(result) >= count:
                break
            candidates = remaining[source]
            result.append(candidates.pop(rng.randrange(len(candidates))))
        sources = [source for source in sources if remaining[source]]
        rng.shuffle(sources)

    return result
