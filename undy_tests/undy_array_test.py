import suite
from undy import (
    first, head, take, last, initial, rest, tail, drop, compact, flatten, zip, table,
    index_of, last_index_of, sorted_index, range, InvalidArgument
)

assert_that = suite.assert_that


# first() / last() / initial() / rest() tests

@suite.test("first returns up to n leading elements")
def test_first():
    assert_that(first([1, 2, 3], 2) == [1, 2], "first two")
    assert_that(first([1, 2, 3]) == [1], "defaults to one element")
    assert_that(first([1, 2, 3], 10) == [1, 2, 3], "n is clamped to the length")
    assert_that(first([1, 2, 3], 0) == [] and first([1, 2, 3], -2) == [], "n <= 0 gives empty")
    assert_that(head is first and take is first, "aliases should exist")


@suite.test("last returns up to n trailing elements")
def test_last():
    assert_that(last([1, 2, 3], 2) == [2, 3], "last two")
    assert_that(last([1, 2, 3]) == [3], "defaults to one element")
    assert_that(last([1, 2, 3], 7) == [1, 2, 3], "n is clamped to the length")
    assert_that(last([1, 2, 3], 0) == [], "zero gives empty")
    assert_that(last((1, 2), 1) == [2], "tuples are sequences too")


@suite.test("initial drops the last n elements")
def test_initial():
    assert_that(initial([1, 2, 3], 1) == [1, 2], "drops one")
    assert_that(initial([1, 2, 3]) == [1, 2], "defaults to one")
    assert_that(initial([1, 2, 3], 2) == [1], "drops two")


@suite.test("initial returns the whole sequence when n reaches the length")
def test_initial_pinned_quirk():
    # pinned: n >= length resets n to zero instead of emptying the result
    assert_that(initial([1, 2, 3], 3) == [1, 2, 3], "n == length keeps everything")
    assert_that(initial([1, 2, 3], 9) == [1, 2, 3], "n > length keeps everything")
    assert_that(initial([], 1) == [], "empty stays empty")


@suite.test("rest returns elements from an index onward")
def test_rest():
    assert_that(rest([1, 2, 3], 1) == [2, 3], "from index one")
    assert_that(rest([1, 2, 3]) == [2, 3], "defaults to index one")
    assert_that(rest([1, 2, 3], 0) == [1, 2, 3] and rest([1, 2, 3], -4) == [1, 2, 3], "clamped at zero")
    assert_that(rest([1, 2, 3], 5) == [], "clamped at the length")
    assert_that(tail is rest and drop is rest, "aliases should exist")


@suite.test("slicing functions return new lists and reject non-sequences")
def test_slicing_copies():
    data = [1, 2]
    assert_that(first(data, 2) is not data, "result should be a new list")
    assert_that(first(None) == [], "none is an empty sequence")
    with suite.raises(InvalidArgument, match="rest()"):
        rest({'a': 1})


# compact() / flatten() tests

@suite.test("compact removes none, zero and false only")
def test_compact():
    data = [0, 1, None, False, 2, 0.0, '', [], 'a', True]
    assert_that(compact(data) == [1, 2, '', [], 'a', True], f"got {compact(data)}")


@suite.test("flatten deep and shallow")
def test_flatten():
    nested = [1, [2, [3, [4]]], (5, 6), 'ab', {'k': [7]}]
    assert_that(flatten(nested) == [1, 2, 3, 4, 5, 6, 'ab', {'k': [7]}], f"got {flatten(nested)}")
    assert_that(flatten(nested, True) == [1, 2, [3, [4]], 5, 6, 'ab', {'k': [7]}], "one level only")


@suite.test("flatten is idempotent and a no-op on flat input")
def test_flatten_idempotent():
    flat = [1, 'x', None, 2.5]
    assert_that(flatten(flat) == flat, "flat input comes back unchanged")
    nested = [[1, [2]], [[[3]]], 4]
    assert_that(flatten(flatten(nested)) == flatten(nested), "second flatten changes nothing")


# zip() / table() tests

@suite.test("zip transposes and pads with none")
def test_zip():
    assert_that(zip([1, 2], ['a', 'b']) == [[1, 'a'], [2, 'b']], "equal lengths")
    assert_that(zip([1, 2, 3], ['a']) == [[1, 'a'], [2, None], [3, None]], "short sequences are padded")
    assert_that(zip() == [], "no input gives empty")


@suite.test("table builds mappings from pairs or parallel lists")
def test_table():
    assert_that(table([['a', 1], ['b', 2]]) == {'a': 1, 'b': 2}, "from pairs")
    assert_that(table(['a', 'b'], [1, 2]) == {'a': 1, 'b': 2}, "from keys and values")
    assert_that(table(['a', 'b', 'c'], [1]) == {'a': 1}, "keys without values get no slot")
    assert_that(table([('a', 1), ('a', 2)]) == {'a': 2}, "later pairs win")


# index_of() / last_index_of() / sorted_index() tests

@suite.test("index_of and last_index_of")
def test_index_of():
    data = ['a', 'b', 'a', 'c']
    assert_that(index_of(data, 'a') == 0 and index_of(data, 'z') == -1, "first index or -1")
    assert_that(last_index_of(data, 'a') == 2, "last index")
    assert_that(last_index_of(data, 'a', 1) == 0, "search runs backwards from from_index")
    assert_that(last_index_of(data, 'a', 3) == 2, "from_index at the end still finds later matches")
    assert_that(last_index_of(data, 'a', 10) == 2, "from_index past the end searches everything")
    assert_that(last_index_of(data, 'a', -2) == 2 and last_index_of(data, 'a', -3) == 0, "negative from_index counts from the end")
    assert_that(last_index_of(data, 'a', -10) == -1, "from_index before the start finds nothing")
    assert_that(last_index_of(data, 'z') == -1, "missing gives -1")


@suite.test("sorted_index finds the leftmost insertion point")
def test_sorted_index():
    assert_that(sorted_index([10, 20, 30], 25) == 2, "between 20 and 30")
    assert_that(sorted_index([10, 20, 20, 30], 20) == 1, "leftmost among equals")
    assert_that(sorted_index([], 5) == 0, "empty sequence")
    people = [{'age': 20}, {'age': 30}, {'age': 40}]
    assert_that(sorted_index(people, {'age': 35}, 'age') == 2, "slot name criteria")
    assert_that(sorted_index(['a', 'bbb'], 'cc', len) == 1, "function criteria")


# range() tests

@suite.test("range with one, two and three arguments")
def test_range():
    assert_that(range(5) == [0, 1, 2, 3, 4], "range(5)")
    assert_that(range(1, 5) == [1, 2, 3, 4], "range(1, 5)")
    assert_that(range(0, 5, 2) == [0, 2, 4], "range(0, 5, 2)")
    assert_that(range(5, 0, -2) == [5, 3, 1], "negative step")
    assert_that(range(0) == [] and range(5, 1) == [], "empty ranges")
    assert_that(range(0, 1, 0.25) == [0, 0.25, 0.5, 0.75], "float steps")


@suite.test("range rejects a zero step")
def test_range_zero_step():
    with suite.raises(InvalidArgument, match="step"):
        range(0, 5, 0)


if __name__ == "__main__":
    suite.run(title="undy sequence tests")
