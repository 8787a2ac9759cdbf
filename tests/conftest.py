from __future__ import annotations

from collections.abc import Callable

import pytest

from vibes.models.news import NewsItem


class FakeClock:
    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_item() -> Callable[..., NewsItem]:
    def _make(
        title: str,
        source: str = "Positive News",
        pub_date: str = "Mon, 20 May 2024 12:00:00 +0000",
        link: str | None = None,
    ) -> NewsItem:
        slug = title.lower().replace(" ", "-")
        return NewsItem(
            title=title,
            link=link or f"https://example.org/{slug}",
            pub_date=pub_date,
            source=source,
        )

    return _make
