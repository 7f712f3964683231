"""Tests for Ordering and cmp."""

import pytest

import fluentiter as fi


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (1, 2, fi.Ordering.LESS),
        (2, 2, fi.Ordering.EQUAL),
        (3, 2, fi.Ordering.GREATER),
        ("a", "b", fi.Ordering.LESS),
        ((1, 2), (1, 1), fi.Ordering.GREATER),
    ],
)
def test_cmp(a: object, b: object, expected: fi.Ordering) -> None:
    """Test three-way comparison of builtin values."""
    assert fi.cmp(a, b) is expected  # type: ignore[arg-type]


def test_ordering_is_int_like() -> None:
    """Test members compare and negate like their values."""
    assert fi.Ordering.LESS < fi.Ordering.EQUAL < fi.Ordering.GREATER
    assert fi.Ordering.LESS.reverse() is fi.Ordering.GREATER
    assert fi.Ordering.EQUAL.reverse() is fi.Ordering.EQUAL


def test_predicates() -> None:
    """Test is_lt / is_eq / is_gt."""
    assert fi.Ordering.LESS.is_lt()
    assert fi.Ordering.EQUAL.is_eq()
    assert fi.Ordering.GREATER.is_gt()
    assert not fi.Ordering.GREATER.is_lt()
