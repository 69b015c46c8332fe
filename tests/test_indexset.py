import pytest

from minicir.indexset import IndexSet


def make(items, count=0):
    s = IndexSet()
    for i in items:
        s.set(i)
    s.count = count
    return s


def test_set_get_reset():
    s = IndexSet()
    s.set(4)
    assert s.get(4) is True
    assert 4 in s
    s.reset(4)
    assert s.get(4) is False
    assert not s


def test_reset_missing_is_harmless():
    s = make([1])
    s.reset(9)
    assert list(s) == [1]


def test_iteration_sorted_and_len():
    s = make([9, 2, 5])
    assert list(s) == sorted([9, 2, 5])
    assert len(s) == 3


def test_str_format():
    s = make([2, 1])
    assert str(s) == "1 2 "
    assert str(IndexSet()) == ""


def test_min_max():
    s = make([7, 3, 11])
    assert s.min() == 3
    assert s.max() == 11


def test_min_max_empty_raise():
    with pytest.raises(ValueError):
        IndexSet().max()
    with pytest.raises(ValueError):
        IndexSet().min()


@pytest.mark.parametrize(
    "op, ref",
    [
        (lambda a, b: a & b, lambda a, b: a & b),
        (lambda a, b: a | b, lambda a, b: a | b),
        (lambda a, b: a - b, lambda a, b: a - b),
        (lambda a, b: a ^ b, lambda a, b: a ^ b),
    ],
)
def test_binary_ops_match_set_semantics(op, ref):
    left = [1, 2, 3, 8]
    right = [2, 3, 4]
    result = op(make(left, 5), make(right, 9))
    assert set(result) == ref(set(left), set(right))
    assert result.count == 9


def test_binary_ops_do_not_mutate_operands():
    a = make([1, 2])
    b = make([2, 3])
    _ = a | b
    assert list(a) == [1, 2]
    assert list(b) == [2, 3]


def test_invert_within_count():
    s = IndexSet()
    s.fill(5, True)
    s.reset(1)
    s.reset(3)
    inv = ~s
    assert list(inv) == [1, 3]
    assert inv.count == s.count


def test_invert_drops_indices_beyond_count():
    s = make([0, 10], count=3)
    inv = ~s
    assert 10 not in inv
    assert set(inv) == set(range(3)) - {0}


def test_double_invert_restores_within_count():
    s = make([0, 2, 4], count=6)
    assert ~~s == s


def test_fill_true_sets_prefix():
    s = IndexSet()
    s.fill(4, True)
    assert list(s) == list(range(4))
    assert s.count == 4


def test_fill_false_shrinking_clears_everything():
    s = IndexSet()
    s.fill(10, True)
    s.fill(3, False)
    assert len(s) == 0
    assert s.count == 3


def test_fill_false_growing_only_clears_prefix():
    s = make([1, 7])
    s.fill(3, False)
    assert list(s) == [7]
    assert s.count == 3


def test_fill_range_half_open():
    s = IndexSet()
    s.fill_range(2, 5, True)
    assert list(s) == list(range(2, 5))
    s.fill_range(3, 4, False)
    assert 3 not in s
    assert 4 in s


def test_clear_keeps_count():
    s = make([1, 2], count=4)
    s.clear()
    assert not s
    assert s.count == 4


def test_equality_ignores_count():
    assert make([1, 2], count=3) == make([2, 1], count=8)
    assert not (make([1]) == make([2]))
    assert make([1]) != make([2])


def test_equality_with_other_type():
    assert (IndexSet() == set()) is False


def test_unhashable():
    with pytest.raises(TypeError):
        hash(IndexSet())