"""Tests for slot usage in fluentiter classes."""

import fluentiter as fi


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(fi.Iter(()))
    assert _check_slots(fi.Iter(()).peekable())
    assert _check_slots(fi.AsyncIter.empty())
    assert _check_slots(fi.Seq(()))
    assert _check_slots(fi.Some(42))
    assert _check_slots(fi.NONE)
    assert _check_slots(fi.Err[int, object](42))
    assert _check_slots(fi.Ok[int, object](42))
    assert _check_slots(fi.Cell(0))
    assert _check_slots(fi.get_config())
