"""Tests for the lazy Iter engine."""

import pytest

import fluentiter as fi


class _Counting:
    """Iterable counting how many elements were pulled from it."""

    def __init__(self, data: list[int]) -> None:
        self.data = data
        self.pulled = 0

    def __iter__(self):
        for item in self.data:
            self.pulled += 1
            yield item


class TestConstructors:
    """Test the ways to build an Iter."""

    def test_collect_roundtrip(self) -> None:
        """Test that collecting an Iter gives back the same elements."""
        assert fi.Iter([1, 2, 3]).collect() == fi.Seq([1, 2, 3])
        assert fi.Iter([]).collect() == fi.Seq()

    def test_from_unpacked(self) -> None:
        """Test from_ with unpacked values and with an iterable."""
        assert fi.Iter.from_(1, 2, 3).collect() == (1, 2, 3)
        assert fi.Iter.from_([1, 2, 3]).collect() == (1, 2, 3)

    def test_once_and_empty(self) -> None:
        """Test the single-element and empty constructors."""
        assert fi.Iter.once(7).collect() == (7,)
        assert fi.Iter.empty().next().is_none()

    def test_from_count(self) -> None:
        """Test the infinite counter."""
        assert fi.Iter.from_count(5, -2).take(3).collect() == (5, 3, 1)

    def test_from_fn_stops_on_none(self) -> None:
        """Test from_fn ends when the generator returns NONE."""

        def countdown(n: int) -> fi.Option[tuple[int, int]]:
            return fi.Some((n, n - 1)) if n > 0 else fi.NONE

        assert fi.Iter.from_fn(3, countdown).collect() == (3, 2, 1)

    def test_successors_from_none(self) -> None:
        """Test successors starting from NONE yields nothing."""
        assert fi.Iter.successors(fi.NONE, lambda x: fi.Some(x)).count() == 0


class TestPull:
    """Test the pull protocol."""

    def test_next_after_exhaustion(self) -> None:
        """Test next keeps returning NONE once done."""
        it = fi.Iter([1])
        assert it.next() == fi.Some(1)
        assert it.next().is_none()
        assert it.next().is_none()

    def test_none_elements_are_values(self) -> None:
        """Test that None elements are not mistaken for exhaustion."""
        it = fi.Iter([None, None])
        assert it.next() == fi.Some(None)
        assert it.last() == fi.Some(None)

    def test_python_iteration(self) -> None:
        """Test Iter works with for loops and builtins."""
        assert list(fi.Iter(range(3)).map(lambda x: x + 1)) == [1, 2, 3]

    def test_laziness(self) -> None:
        """Test no element is pulled until a terminal operation runs."""
        src = _Counting([1, 2, 3])
        it = fi.Iter(src).map(lambda x: x * 2).filter(lambda x: x > 0)
        assert src.pulled == 0
        assert it.next() == fi.Some(2)
        assert src.pulled == 1


class TestCombinators:
    """Test the lazy adapters."""

    def test_filter_keeps_matching_subsequence(self) -> None:
        """Test filter keeps order and only matching elements."""
        assert fi.Iter(range(10)).filter(lambda x: x % 3 == 0).collect() == (0, 3, 6, 9)

    def test_map_composition(self) -> None:
        """Test map(f).map(g) equals map(g . f)."""
        data = [1, 2, 3]

        def f(x: int) -> int:
            return x + 1

        def g(x: int) -> int:
            return x * 3

        assert fi.Iter(data).map(f).map(g).collect() == fi.Iter(data).map(lambda x: g(f(x))).collect()

    def test_filter_map(self) -> None:
        """Test filter_map yields unwrapped Some values."""
        result = fi.Iter(["1", "x", "3"]).filter_map(
            lambda s: fi.Some(int(s)) if s.isdigit() else fi.NONE
        )
        assert result.collect() == (1, 3)

    def test_flat_map_and_flatten(self) -> None:
        """Test flat_map is map followed by flatten."""
        assert fi.Iter([1, 2]).flat_map(lambda x: [x] * x).collect() == (1, 2, 2)
        assert fi.Iter([[1], [], [2, 3]]).flatten().collect() == (1, 2, 3)

    def test_chain(self) -> None:
        """Test chain exhausts self first, then each other in order."""
        assert fi.Iter([1]).chain([2, 3], (4,)).collect() == (1, 2, 3, 4)
        assert fi.Iter([1]).chain().collect() == (1,)

    def test_enumerate(self) -> None:
        """Test enumerate pairs indexes with values."""
        pairs = fi.Iter("ab").enumerate().collect()
        assert pairs == ((0, "a"), (1, "b"))
        assert pairs[1].idx == 1
        assert pairs[1].value == "b"

    def test_zip_shortest(self) -> None:
        """Test zip stops at the shortest side."""
        assert fi.Iter([1, 2, 3, 4]).zip([5, 6]).collect() == fi.Seq([(1, 5), (2, 6)])

    def test_zip_strict(self) -> None:
        """Test strict zip raises on length mismatch."""
        with pytest.raises(ValueError, match="zip"):
            fi.Iter([1, 2]).zip([1], strict=True).collect()

    def test_zip_drops_unmatched_left(self) -> None:
        """Test zip consumes one extra element of the longer left side."""
        it = fi.Iter([1, 2, 3])
        assert it.zip([9]).collect() == ((1, 9),)
        assert it.next() == fi.Some(3)

    def test_take_does_not_overpull(self) -> None:
        """Test take never pulls the element after the n-th."""
        src = _Counting([1, 2, 3, 4])
        assert fi.Iter(src).take(2).collect() == (1, 2)
        assert src.pulled == 2

    def test_take_and_skip_bounds(self) -> None:
        """Test take and skip with counts larger than the input."""
        assert fi.Iter([1, 2]).take(10).collect() == (1, 2)
        assert fi.Iter([1, 2]).skip(10).collect() == ()
        assert fi.Iter([1, 2]).take(0).collect() == ()

    def test_negative_counts_raise(self) -> None:
        """Test negative take/skip counts are rejected."""
        with pytest.raises(ValueError):
            fi.Iter([1]).take(-1)
        with pytest.raises(ValueError):
            fi.Iter([1]).skip(-1)

    def test_step_by(self) -> None:
        """Test step_by yields the first element then every step-th."""
        assert fi.Iter(range(7)).step_by(2).collect() == (0, 2, 4, 6)
        with pytest.raises(ValueError, match="step"):
            fi.Iter([1]).step_by(0)

    def test_take_while_stops_for_good(self) -> None:
        """Test take_while never resumes after the first failure."""
        assert fi.Iter([1, 2, 3, 4]).take_while(lambda x: x < 3).collect() == (1, 2)
        assert fi.Iter([1, 5, 1]).take_while(lambda x: x < 3).collect() == (1,)

    def test_skip_while(self) -> None:
        """Test skip_while only skips the leading run."""
        assert fi.Iter([1, 5, 1]).skip_while(lambda x: x < 3).collect() == (5, 1)

    def test_map_while(self) -> None:
        """Test map_while stops at the first NONE."""
        result = fi.Iter([2, 4, 5, 6]).map_while(
            lambda x: fi.Some(x // 2) if x % 2 == 0 else fi.NONE
        )
        assert result.collect() == (1, 2)

    def test_inspect_runs_once_per_element(self) -> None:
        """Test inspect sees each element exactly once, in order."""
        seen: list[int] = []
        assert fi.Iter([1, 2, 3]).inspect(seen.append).take(2).collect() == (1, 2)
        assert seen == [1, 2]

    def test_scan_cell_state(self) -> None:
        """Test scan shares a Cell between iterations."""

        def step(cell: fi.Cell[int], x: int) -> int:
            cell.value = cell.value * 10 + x
            return cell.value

        assert fi.Iter([1, 2, 3]).scan(0, step).collect() == (1, 12, 123)

    def test_scan_state_is_per_iterator(self) -> None:
        """Test two scans never share their state."""

        def total(cell: fi.Cell[int], x: int) -> int:
            cell.value += x
            return cell.value

        first = fi.Iter([1, 1]).scan(0, total)
        second = fi.Iter([1, 1]).scan(0, total)
        assert first.collect() == (1, 2)
        assert second.collect() == (1, 2)

    def test_cycle(self) -> None:
        """Test pull k of a cycle equals pull k % n of the input."""
        data = [1, 2, 3]
        cycled = fi.Iter(data).cycle().take(10).collect()
        assert all(cycled[k] == data[k % len(data)] for k in range(10))

    def test_cycle_empty(self) -> None:
        """Test cycling an empty iterator is done immediately."""
        assert fi.Iter([]).cycle().next().is_none()

    def test_peekable(self) -> None:
        """Test peek never consumes."""
        it = fi.Iter([1, 2]).peekable()
        assert it.peek() == fi.Some(1)
        assert it.peek() == fi.Some(1)
        assert it.next() == fi.Some(1)
        assert it.next_if(lambda x: x == 2) == fi.Some(2)
        assert it.peek().is_none()


class TestTerminals:
    """Test the consuming operations."""

    def test_count(self) -> None:
        """Test count consumes and counts."""
        it = fi.Iter(range(4))
        assert it.count() == 4
        assert it.next().is_none()

    def test_fold_and_reduce(self) -> None:
        """Test fold with a seed and reduce without one."""
        assert fi.Iter([1, 2, 3]).fold(10, lambda acc, x: acc + x) == 16
        assert fi.Iter([1, 2, 3]).reduce(lambda a, b: a + b) == fi.Some(6)
        assert fi.Iter([]).reduce(lambda a, b: a + b).is_none()

    def test_sum_and_product(self) -> None:
        """Test sum and product, including on empty input."""
        assert fi.Iter([1.5, 2.5]).sum() == 4.0
        assert fi.Iter([]).sum() == 0
        assert fi.Iter([2, 5]).product() == 10
        assert fi.Iter([]).product() == 1

    def test_all_any_short_circuit(self) -> None:
        """Test all and any stop at the deciding element."""
        it = fi.Iter([1, 2, 3, 4])
        assert it.any(lambda x: x == 2) is True
        assert it.next() == fi.Some(3)
        it = fi.Iter([1, 2, 3, 4])
        assert it.all(lambda x: x < 2) is False
        assert it.next() == fi.Some(3)
        assert fi.Iter([]).all() is True
        assert fi.Iter([0, ""]).any() is False

    def test_find_and_position(self) -> None:
        """Test searching terminals."""
        assert fi.Iter([1, 2, 3]).find(lambda x: x > 1) == fi.Some(2)
        assert fi.Iter([1, 2, 3]).find(lambda x: x > 5).is_none()
        assert fi.Iter("abc").position(lambda c: c == "c") == fi.Some(2)
        assert fi.Iter([1, 2]).find_map(lambda x: fi.Some(x * 10) if x > 1 else fi.NONE) == fi.Some(20)

    def test_nth_and_last(self) -> None:
        """Test positional terminals."""
        assert fi.Iter("abc").nth(0) == fi.Some("a")
        assert fi.Iter("abc").nth(3).is_none()
        assert fi.Iter("abc").last() == fi.Some("c")
        assert fi.Iter([]).last().is_none()

    def test_max_min(self) -> None:
        """Test max and min, including on empty input."""
        assert fi.Iter([1, 1, 3, 2, 3, 4]).max() == fi.Some(4)
        assert fi.Iter([]).max().is_none()
        assert fi.Iter([3, 1, 2]).min() == fi.Some(1)

    def test_max_by_key_tie_keeps_last(self) -> None:
        """Test max ties return the later element and min ties the earlier one."""
        data = [(1, "a"), (2, "b"), (2, "c"), (1, "d")]
        assert fi.Iter(data).max_by_key(lambda p: p[0]) == fi.Some((2, "c"))
        assert fi.Iter(data).min_by_key(lambda p: p[0]) == fi.Some((1, "a"))

    def test_max_by_key_calls_key_once(self) -> None:
        """Test key is evaluated exactly once per element."""
        calls: list[int] = []

        def key(x: int) -> int:
            calls.append(x)
            return -x

        assert fi.Iter([1, 2, 3]).max_by_key(key) == fi.Some(1)
        assert calls == [1, 2, 3]

    def test_max_by_min_by(self) -> None:
        """Test comparator-based extremes."""
        by_len = lambda a, b: fi.cmp(len(a), len(b))  # noqa: E731
        assert fi.Iter(["aa", "b", "cc"]).max_by(by_len) == fi.Some("cc")
        assert fi.Iter(["aa", "b", "c"]).min_by(by_len) == fi.Some("b")

    def test_eq_ne(self) -> None:
        """Test ne is always the negation of eq."""
        cases = [([1, 2], [1, 2]), ([1, 2], [1]), ([1], [1, 2]), ([], []), ([1], [2])]
        for left, right in cases:
            assert fi.Iter(left).ne(right) is (not fi.Iter(left).eq(right))
        assert fi.Iter([1, 2]).eq(fi.Iter([1, 2])) is True
        assert fi.Iter([1, 2]).eq([1]) is False

    def test_cmp(self) -> None:
        """Test lexicographic comparison."""
        assert fi.Iter([1, 2]).cmp([1, 2]) is fi.Ordering.EQUAL
        assert fi.Iter([1, 2]).cmp([1, 3]) is fi.Ordering.LESS
        assert fi.Iter([2]).cmp([1, 9]) is fi.Ordering.GREATER
        assert fi.Iter([1, 2]).cmp([1]) is fi.Ordering.GREATER

    def test_partition(self) -> None:
        """Test partition splits while keeping relative order."""
        even, odd = fi.Iter([1, 2, 3, 4]).partition(lambda x: x % 2 == 0)
        assert (even, odd) == (fi.Seq([2, 4]), fi.Seq([1, 3]))

    def test_unzip(self) -> None:
        """Test unzip splits pairs."""
        result = fi.Iter([(1, "a"), (2, "b")]).unzip()
        assert result.left == (1, 2)
        assert result.right == ("a", "b")

    def test_try_collect(self) -> None:
        """Test try_collect short-circuits on the first failure."""
        assert fi.Iter([fi.Ok(1), fi.Ok(2)]).try_collect() == fi.Some(fi.Seq([1, 2]))
        assert fi.Iter([fi.Some(1), fi.NONE]).try_collect().is_none()

    def test_try_collect_plain_values(self) -> None:
        """Test try_collect keeps elements that are neither Option nor Result."""
        assert fi.Iter([fi.Some(1), 2, fi.Some(3)]).try_collect() == fi.Some(fi.Seq([1, 2, 3]))
        assert fi.Iter(["a", fi.Ok("b")]).try_collect() == fi.Some(fi.Seq(["a", "b"]))

    def test_try_collect_resumes_after_failure(self) -> None:
        """Test the iterator stays usable after the failing element."""
        it = fi.Iter([fi.Ok(1), fi.Err("bad"), fi.Ok(3), fi.Ok(4)])
        assert it.try_collect().is_none()
        assert it.try_collect() == fi.Some(fi.Seq([3, 4]))
        assert it.try_collect() == fi.Some(fi.Seq())

    def test_for_each_and_into(self) -> None:
        """Test side-effect consumption and piping."""
        seen: list[int] = []
        fi.Iter([1, 2]).for_each(seen.append)
        assert seen == [1, 2]
        assert fi.Iter([2, 1]).into(sorted) == [1, 2]

    def test_callback_exception_propagates(self) -> None:
        """Test exceptions raised by callbacks reach the caller unchanged."""

        def boom(x: int) -> int:
            raise KeyError(x)

        it = fi.Iter([1]).map(boom)
        with pytest.raises(KeyError):
            it.collect()


class TestSeq:
    """Test the materialized sequence."""

    def test_seq_is_reusable(self) -> None:
        """Test a Seq can be iterated many times."""
        seq = fi.Iter(range(3)).collect()
        assert seq.iter().sum() == 3
        assert seq.iter().sum() == 3

    def test_seq_indexing(self) -> None:
        """Test indexing, slicing and first."""
        seq = fi.Seq("abcd")
        assert seq[0] == "a"
        assert seq[1:3] == fi.Seq("bc")
        assert isinstance(seq[1:3], fi.Seq)
        assert seq.first() == fi.Some("a")
        assert fi.Seq().first().is_none()

    def test_repr_truncation(self) -> None:
        """Test Seq repr is truncated according to the config."""
        with fi.config_context(seq_repr_max_items=3):
            assert repr(fi.Seq(range(5))) == "Seq(0, 1, 2, ...)"
        assert repr(fi.Seq(range(3))) == "Seq(0, 1, 2)"

    def test_inner(self) -> None:
        """Test inner gives back the wrapped tuple."""
        assert fi.Seq([1, 2]).inner() == (1, 2)
