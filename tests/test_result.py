"""Tests for the Result type."""

import pytest

import fluentiter as fi


def _parse(s: str) -> fi.Result[int, str]:
    try:
        return fi.Ok(int(s))
    except ValueError:
        return fi.Err(f"bad int: {s!r}")


class TestResultBasics:
    """Test inspection and unwrapping."""

    def test_variants(self) -> None:
        """Test is_ok / is_err and their predicate forms."""
        assert _parse("1").is_ok()
        assert _parse("x").is_err()
        assert fi.Ok(3).is_ok_and(lambda x: x > 2)
        assert not fi.Err("e").is_ok_and(lambda x: True)
        assert fi.Err("e").is_err_and(lambda e: e == "e")

    def test_unwrap(self) -> None:
        """Test unwrap and unwrap_err on the wrong variant raise."""
        assert fi.Ok(1).unwrap() == 1
        assert fi.Err("e").unwrap_err() == "e"
        with pytest.raises(fi.ResultUnwrapError, match="called `unwrap` on Err"):
            fi.Err("e").unwrap()
        with pytest.raises(fi.ResultUnwrapError, match="called `unwrap_err` on Ok"):
            fi.Ok(1).unwrap_err()

    def test_expect_messages(self) -> None:
        """Test expect and expect_err put the caller's message first."""
        with pytest.raises(fi.ResultUnwrapError, match="^reading config"):
            fi.Err("missing").expect("reading config")
        with pytest.raises(fi.ResultUnwrapError, match="^should fail"):
            fi.Ok(1).expect_err("should fail")
        assert fi.Err("e").expect_err("unused") == "e"

    def test_defaults(self) -> None:
        """Test unwrap_or and unwrap_or_else."""
        assert fi.Err("e").unwrap_or(0) == 0
        assert fi.Err("abc").unwrap_or_else(len) == 3
        assert fi.Ok(1).unwrap_or_else(len) == 1

    def test_pattern_matching(self) -> None:
        """Test structural pattern matching on both variants."""
        match _parse("12"):
            case fi.Ok(value):
                assert value == 12
            case fi.Err(_):
                pytest.fail("expected Ok")

    def test_repr(self) -> None:
        """Test the reprs of both variants."""
        assert repr(fi.Ok(2)) == "Ok(2)"
        assert repr(fi.Err("x")) == "Err('x')"


class TestResultCombinators:
    """Test the Result combinators."""

    def test_map(self) -> None:
        """Test map only runs on Ok and map_err only on Err."""
        assert fi.Ok(1).map(lambda x: x + 1) == fi.Ok(2)
        assert fi.Err("e").map(lambda x: x + 1) == fi.Err("e")
        assert fi.Err("e").map_err(str.upper) == fi.Err("E")
        assert fi.Ok(1).map_err(str.upper) == fi.Ok(1)

    def test_map_or(self) -> None:
        """Test map_or and map_or_else."""
        assert fi.Ok(2).map_or(0, lambda x: x * 2) == 4
        assert fi.Err("e").map_or(0, lambda x: x * 2) == 0
        assert fi.Err("abc").map_or_else(len, lambda x: x * 2) == 3
        assert fi.Ok(2).map_or_else(len, lambda x: x * 2) == 4

    def test_and_then_or_else(self) -> None:
        """Test chaining on success and recovering on failure."""
        assert fi.Ok("4").and_then(_parse) == fi.Ok(4)
        assert fi.Ok("x").and_then(_parse).is_err()
        assert fi.Err("e").and_then(_parse) == fi.Err("e")
        assert fi.Err("e").or_else(lambda e: fi.Ok(len(e))) == fi.Ok(1)
        assert fi.Ok(1).or_else(lambda e: fi.Ok(0)) == fi.Ok(1)

    def test_and_or(self) -> None:
        """Test the eager boolean combinators."""
        assert fi.Ok(1).and_(fi.Ok("a")) == fi.Ok("a")
        assert fi.Err("e").and_(fi.Ok("a")) == fi.Err("e")
        assert fi.Err("e").or_(fi.Ok(2)) == fi.Ok(2)
        assert fi.Ok(1).or_(fi.Ok(2)) == fi.Ok(1)

    def test_option_conversions(self) -> None:
        """Test ok, err and transpose."""
        assert fi.Ok(1).ok() == fi.Some(1)
        assert fi.Err("e").ok().is_none()
        assert fi.Err("e").err() == fi.Some("e")
        assert fi.Ok(fi.Some(1)).transpose() == fi.Some(fi.Ok(1))
        assert fi.Ok(fi.NONE).transpose().is_none()
        assert fi.Err("e").transpose() == fi.Some(fi.Err("e"))

    def test_inspect(self) -> None:
        """Test inspect and inspect_err only see their own variant."""
        seen: list[object] = []
        fi.Ok(1).inspect(seen.append).inspect_err(seen.append)
        fi.Err("e").inspect(seen.append).inspect_err(seen.append)
        assert seen == [1, "e"]

    def test_iter(self) -> None:
        """Test iter yields the Ok value only."""
        assert fi.Ok(1).iter().collect() == (1,)
        assert fi.Err("e").iter().collect() == ()

    def test_collect_results(self) -> None:
        """Test collecting parsed values from an Iter."""
        parsed = fi.Iter(["1", "2", "x"]).map(_parse)
        assert parsed.try_collect().is_none()
        assert fi.Iter(["1", "2"]).map(_parse).try_collect() == fi.Some(fi.Seq([1, 2]))

    def test_subscripted_construction(self) -> None:
        """Test variants can be built through their parametrized aliases."""
        assert fi.Ok[int, str](1) == fi.Ok(1)
        assert fi.Err[int, object](42).unwrap_err() == 42
