from __future__ import annotations

from collections.abc import Iterable

from ..models.news import NewsItem

DEFAULT_SIMILARITY_THRESHOLD = 0.85


def title_similarity(first: str, second: str) -> float:
    """Score two titles in ``[0, 1]`` by positional character agreement.

    Characters are compared index by index (no alignment), and the score is
    penalised by the relative length difference, capped at 0.5.
    """
    a = first.lower()
    b = second.lower()
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0

    matches = sum(1 for left, right in zip(a, b) if left == right)
    base_score = matches / max_len
    length_penalty = min(abs(len(a) - len(b)) / max_len, 0.5)
    return max(0.0, base_score - length_penalty)


def filter_duplicates(
    items: Iterable[NewsItem],
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> list[NewsItem]:
    """Keep the first of every group of near-identical titles, preserving order."""
    accepted: list[NewsItem] = []
    for item in items:
        if any(title_similarity(kept.title, item.title) > threshold for kept in accepted):
            continue
        accepted.append(item)
    return accepted
