from collections import deque

import suite
from colltools import (
    values, unmodifiable, empty, Shape, SortedSet, OrderedSet,
    ReadOnlyView, ReadOnlyList, ReadOnlySet, ArgumentError, UnsupportedOperationError
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


# --- values ---

@test("values flattens in mapping order and keeps duplicates")
def test_values_flatten():
    result = values([{'a': 1, 'b': 2}, {}, {'c': 1, 'd': 3}])
    assert_that(result == [1, 2, 1, 3], f"got {result}")
    assert_that(values([]) == [], "no mappings, no values")
    assert_raises(ArgumentError, values, None)


# --- unmodifiable ---

@test("a read-only view is live, not a snapshot")
def test_unmodifiable_is_live():
    backing = [1, 2]
    view = unmodifiable(backing)
    backing.append(3)
    assert_that(list(view) == [1, 2, 3], f"view should reflect the addition, got {list(view)}")
    assert_that(len(view) == 3 and 3 in view, "len and membership should be live")


@test("a read-only view rejects mutation")
def test_unmodifiable_rejects_mutation():
    backing = [1, 2]
    view = unmodifiable(backing)
    assert_that(isinstance(view, ReadOnlyList), "sequences get a ReadOnlyList")
    for name in ('append', 'extend', 'remove', 'pop', 'sort', 'reverse', 'clear'):
        assert_raises(UnsupportedOperationError, getattr(view, name), 1)
    assert_raises(UnsupportedOperationError, view.__setitem__, 0, 5)
    assert_raises(UnsupportedOperationError, view.__iadd__, [9])
    assert_that(backing == [1, 2], f"backing list should be unchanged, got {backing}")


@test("non-mutating attributes are delegated")
def test_unmodifiable_delegates():
    view = unmodifiable(['a', 'b', 'a'])
    assert_that(view.count('a') == 2 and view.index('b') == 1, "count and index")
    assert_that(view[0:2] == ['a', 'b'], "slicing reads through")
    assert_that(hasattr(view, 'append'), "hasattr should not raise")


@test("sets and other collections get matching views")
def test_unmodifiable_shapes():
    set_view = unmodifiable({1, 2})
    assert_that(isinstance(set_view, ReadOnlySet), "sets get a ReadOnlySet")
    assert_that(set_view == {1, 2} and (set_view | {3}) == frozenset({1, 2, 3}), "set algebra works")
    assert_raises(UnsupportedOperationError, set_view.add, 3)
    assert_raises(UnsupportedOperationError, set_view.discard, 1)

    ordered_view = unmodifiable(OrderedSet(['b', 'a']))
    assert_that(list(ordered_view) == ['b', 'a'], "ordered sets keep their order through the view")

    keys_view = unmodifiable({'k': 1}.keys())
    assert_that(isinstance(keys_view, ReadOnlySet), "dict keys are a set")

    linked_view = unmodifiable(deque([1]))
    assert_that(isinstance(linked_view, ReadOnlyView), "deques get a view")
    assert_raises(UnsupportedOperationError, linked_view.appendleft, 0)


@test("a read-only mapping view rejects item assignment and deletion")
def test_unmodifiable_mapping():
    backing = {'a': 1}
    view = unmodifiable(backing)
    assert_that(type(view) is ReadOnlyView, "mappings get a plain ReadOnlyView")
    assert_raises(UnsupportedOperationError, view.__setitem__, 'b', 2)
    assert_raises(UnsupportedOperationError, view.__delitem__, 'a')
    assert_raises(UnsupportedOperationError, view.update, {'c': 3})
    assert_raises(UnsupportedOperationError, view.setdefault, 'd', 4)
    assert_that(backing == {'a': 1}, f"backing mapping should be unchanged, got {backing}")

    backing['e'] = 5
    assert_that(view['e'] == 5 and view.get('a') == 1, "reads go through to the live mapping")
    assert_that(list(view) == ['a', 'e'], "iteration yields the mapping's keys")


# --- empty ---

@test("empty returns shared empties per shape")
def test_empty_shapes():
    assert_that(empty() == [] and isinstance(empty(), ReadOnlyList), "None gives an empty list")
    assert_that(empty(Shape.LIST) is empty(), "list empties are shared")
    assert_that(empty(Shape.SET) == frozenset(), "set shape gives frozenset()")
    sorted_empty = empty(Shape.SORTED_SET)
    assert_that(len(sorted_empty) == 0 and sorted_empty is empty(Shape.NAVIGABLE_SET), "sorted empties are shared")
    assert_that(sorted_empty.floor(3) is None, "navigation is available on the sorted empty")
    assert_raises(UnsupportedOperationError, sorted_empty.add, 1)
    assert_raises(UnsupportedOperationError, empty().append, 1)


@test("empty accepts classes")
def test_empty_classes():
    assert_that(empty(list) is empty(Shape.LIST), "list class")
    assert_that(empty(tuple) is empty(Shape.LIST), "tuple class")
    assert_that(empty(set) is empty(Shape.SET), "set class")
    assert_that(empty(frozenset) is empty(Shape.SET), "frozenset class")
    assert_that(empty(SortedSet) is empty(Shape.SORTED_SET), "SortedSet class")


@test("empty rejects unsupported shapes")
def test_empty_unsupported():
    assert_raises(ArgumentError, empty, dict)
    assert_raises(ArgumentError, empty, int)
    assert_raises(ArgumentError, empty, str)
    assert_raises(ArgumentError, empty, 'list')


# --- sorted set ---

@test("SortedSet keeps comparator order and navigates")
def test_sorted_set():
    numbers = SortedSet([5, 1, 3, 3], comparator=lambda a, b: b - a)
    assert_that(list(numbers) == [5, 3, 1], f"got {list(numbers)}")
    assert_that(numbers.first() == 5 and numbers.last() == 1, "first/last follow the comparator")
    assert_that(numbers.higher(3) == 1 and numbers.lower(3) == 5, "higher/lower")
    numbers.discard(3)
    assert_that(3 not in numbers and len(numbers) == 2, "discard")


if __name__ == "__main__":
    suite.main(title="colltools accessors test suite")
