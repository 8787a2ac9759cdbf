import random

import pytest

from vibes.services.sampling import sample_diverse, sample_uniform

SOURCES = ("Positive News", "Reasons to be Cheerful", "Upworthy")


@pytest.fixture
def pool(make_item):
    return [
        make_item(f"{source} story {index}", source=source)
        for index in range(4)
        for source in SOURCES
    ]


def test_diverse_sample_covers_distinct_sources_in_first_seen_order(pool) -> None:
    picked = sample_diverse(pool, 3, random.Random(7))

    assert [item.source for item in picked] == list(SOURCES)
    assert all(item in pool for item in picked)


@pytest.mark.parametrize("seed", range(10))
def test_diverse_sample_never_repeats_a_source_when_enough_exist(pool, seed) -> None:
    picked = sample_diverse(pool, 2, random.Random(seed))

    assert len(picked) == 2
    assert len({item.source for item in picked}) == 2


@pytest.mark.parametrize("count", range(0, 15))
def test_diverse_sample_length_is_capped_by_pool(pool, count) -> None:
    picked = sample_diverse(pool, count, random.Random(count))

    assert len(picked) == min(count, len(pool))
    assert len(set(picked)) == len(picked)


def test_diverse_sample_repeats_sources_only_after_full_coverage(make_item) -> None:
    pool = [
        make_item("First from A", source="A"),
        make_item("Second from A", source="A"),
        make_item("First from B", source="B"),
        make_item("Second from B", source="B"),
    ]

    for seed in range(10):
        picked = sample_diverse(pool, 3, random.Random(seed))
        assert len(picked) == 3
        assert [item.source for item in picked[:2]] == ["A", "B"]
        assert picked[2].source in {"A", "B"}
        assert len(set(picked)) == 3


def test_diverse_sample_returns_whole_pool_when_it_is_too_small(make_item) -> None:
    pool = [make_item("Only A", source="A"), make_item("Only B", source="B")]

    picked = sample_diverse(pool, 3, random.Random(1))

    assert sorted(item.title for item in picked) == ["Only A", "Only B"]


def test_diverse_sample_of_empty_pool_is_empty() -> None:
    assert sample_diverse([], 3) == []


def test_uniform_sample_returns_small_inputs_unchanged(make_item) -> None:
    items = [make_item("one"), make_item("two")]

    assert sample_uniform(items, 3, random.Random(3)) == items
    assert sample_uniform(items, 2, random.Random(3)) == items


def test_uniform_sample_truncates_after_shuffling(pool) -> None:
    picked = sample_uniform(pool, 5, random.Random(11))

    assert len(picked) == 5
    assert len(set(picked)) == 5
    assert all(item in pool for item in picked)


def test_uniform_sample_with_non_positive_count_is_empty(pool) -> None:
    assert sample_uniform(pool, 0) == []
    assert sample_uniform(pool, -1) == []
