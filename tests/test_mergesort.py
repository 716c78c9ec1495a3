from weaves.mergesort import Mergesort, merge, merge_sort
from weaves.order import Leq, Lt, Poset, random_poset


def test_merge_sort_random_poset():
    strategy = Mergesort()
    numbers = random_poset(Leq())
    actual = numbers.sort(strategy)
    assert len(actual.members) == len(numbers.members)
    assert numbers.is_partially_ordered() is True


def test_random_poset_result_is_sorted():
    numbers = random_poset(Leq())
    actual = numbers.sort(Mergesort())
    assert list(actual.members) == sorted(numbers.members)


def test_strategy_name():
    assert Mergesort().strategy() == "Mergesort"


def test_run_keeps_order_relation():
    order = Leq()
    result = Mergesort().run(Poset([3, 1, 2], order))
    assert result.members == (1, 2, 3)
    assert result.order is order


def test_merge_sort_descending_input():
    assert merge_sort([10, 9, 8, 7, 6, 5, 4, 3, 2, 1], Leq()) == [
        1, 2, 3, 4, 5, 6, 7, 8, 9, 10
    ]


def test_merge_sort_with_duplicates_and_lt():
    assert merge_sort([3, 1, 3, 2, 1], Lt()) == [1, 1, 2, 3, 3]


def test_merge_sort_small_inputs():
    assert merge_sort([], Leq()) == []
    assert merge_sort([7], Leq()) == [7]


def test_merge_sort_does_not_modify_input():
    data = [5, 4, 3]
    merge_sort(data, Leq())
    assert data == [5, 4, 3]


def test_merge():
    assert merge([1, 4, 6], [2, 3, 7, 8], Leq()) == [1, 2, 3, 4, 6, 7, 8]
    assert merge([], [1, 2], Leq()) == [1, 2]
    assert merge([1, 2], [], Leq()) == [1, 2]