import pytest

from rangeaddr import DecoratedRange, Range


def test_wrap_attaches_payload() -> None:
    decorated = Range(4, 2).wrap("node-a")

    assert isinstance(decorated, DecoratedRange)
    assert decorated.offset == 4
    assert decorated.length == 2
    assert decorated.unwrap() == "node-a"


def test_decouple_returns_plain_range_and_payload() -> None:
    payload = {"kind": "bytes", "owner": 7}
    for rng in (Range(0, 0), Range(3, 5), Range.empty(12)):
        plain, data = rng.wrap(payload).decouple()

        assert (plain, data) == (rng, payload)
        assert type(plain) is Range
        assert data is payload


def test_payload_participates_in_equality() -> None:
    assert Range(1, 2).wrap("a") == Range(1, 2).wrap("a")
    assert Range(1, 2).wrap("a") != Range(1, 2).wrap("b")
    assert Range(1, 2).wrap("a") != Range(1, 2)


def test_rewrap_replaces_payload() -> None:
    decorated = Range(1, 2).wrap("old").wrap(3)

    assert decorated.unwrap() == 3
    assert decorated.decouple() == (Range(1, 2), 3)


def test_decorated_range_keeps_range_arithmetic() -> None:
    decorated = Range(2, 5).wrap("payload")

    assert decorated.next_offset() == 7
    assert decorated.is_empty() is False
    assert list(decorated.iter()) == [2, 3, 4, 5, 6]
    assert decorated.shrink() == Range(3, 3)
    assert decorated.intersect(Range(5, 3)) == Range(5, 2)
    assert Range(7, 1).ends_intersect(decorated) == Range(7, 0)


def test_decorated_range_validates_bounds() -> None:
    with pytest.raises(ValueError, match="offset cannot be negative"):
        DecoratedRange(-1, 0, None)


def test_hash_requires_hashable_payload() -> None:
    assert hash(Range(1, 2).wrap("a")) == hash(DecoratedRange(1, 2, "a"))

    with pytest.raises(TypeError):
        hash(Range(1, 2).wrap(["unhashable"]))


def test_decorated_ranges_order_by_bounds_only() -> None:
    ordered = sorted([Range(3, 1).wrap("b"), Range(1, 2).wrap(["a"])])

    assert [rng.decouple()[0] for rng in ordered] == [Range(1, 2), Range(3, 1)]


def test_mixed_plain_and_decorated_ranges_do_not_order() -> None:
    with pytest.raises(TypeError):
        sorted([Range(3, 1), Range(1, 2).wrap("a")])


def test_repr_shows_payload() -> None:
    assert repr(Range(1, 2).wrap("a")) == "DecoratedRange(1, 2, 'a')"
