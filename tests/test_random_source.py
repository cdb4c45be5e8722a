import pytest

from random_source import SeededRandomSource, SequenceRandomSource


@pytest.mark.parametrize("seed", ["test", 42, ""])
def test_same_seed_gives_same_sequence(seed):
    first = SeededRandomSource(seed)
    second = SeededRandomSource(seed)

    assert [first.next_in_range(0, 100) for _ in range(50)] == [
        second.next_in_range(0, 100) for _ in range(50)
    ]


def test_values_stay_in_half_open_range():
    source = SeededRandomSource("range")

    values = [source.next_in_range(3, 7) for _ in range(500)]

    assert min(values) >= 3
    assert max(values) <= 6


def test_different_seeds_diverge():
    first = SeededRandomSource("test")
    second = SeededRandomSource("test2")

    assert [first.next_in_range(0, 100) for _ in range(50)] != [
        second.next_in_range(0, 100) for _ in range(50)
    ]


def test_empty_range_rejected():
    with pytest.raises(ValueError):
        SeededRandomSource(1).next_in_range(5, 5)


def test_sequence_source_replays_and_wraps():
    source = SequenceRandomSource([1, 2])

    assert [source.next_in_range(0, 10) for _ in range(3)] == [1, 2, 1]
    assert source.draws == 3
    with pytest.raises(ValueError):
        SequenceRandomSource([50]).next_in_range(0, 10)
