from .core import (
    each, map, reduce, reduce_right, find, filter, reject, where, find_where,
    every, some, contains, invoke, pluck, max, min, size
)
from .grouping import sort_by, group_by, count_by
from .array import (
    first, last, initial, rest, compact, flatten, zip, table,
    index_of, last_index_of, sorted_index, range
)
from .set import uniq, without, union, intersection, difference
from .combinators import identity, once, after, memoize, compose, wrap
from .objects import (
    slots, values, pairs, invert, functions, extend, defaults,
    pick, omit, copy, tap, has, is_empty
)
from .predicates import (
    is_array, is_table, is_function, is_string, is_integer, is_float,
    is_number, is_boolean, is_null, is_falsy
)
from .utility import times

# --- aliases ---
for_each = each
collect = map
inject = reduce
foldl = reduce
foldr = reduce_right
detect = find
select = filter
all_of = every
any_of = some
include = contains
head = first
take = first
tail = rest
drop = rest
unique = uniq
keys = slots
methods = functions
clone = copy

# camelCase spellings
findWhere = find_where
reduceRight = reduce_right
sortBy = sort_by
groupBy = group_by
countBy = count_by
indexOf = index_of
lastIndexOf = last_index_of
sortedIndex = sorted_index
isEmpty = is_empty
isArray = is_array
isTable = is_table
isFunction = is_function
isString = is_string
isInteger = is_integer
isFloat = is_float
isNumber = is_number
isBoolean = is_boolean
isNull = is_null
isFalsy = is_falsy

__all__ = [
    "each",
    "map",
    "reduce",
    "reduce_right",
    "find",
    "filter",
    "reject",
    "where",
    "find_where",
    "every",
    "some",
    "contains",
    "invoke",
    "pluck",
    "max",
    "min",
    "size",
    "sort_by",
    "group_by",
    "count_by",
    "first",
    "last",
    "initial",
    "rest",
    "compact",
    "flatten",
    "zip",
    "table",
    "index_of",
    "last_index_of",
    "sorted_index",
    "range",
    "uniq",
    "without",
    "union",
    "intersection",
    "difference",
    "identity",
    "once",
    "after",
    "memoize",
    "compose",
    "wrap",
    "slots",
    "values",
    "pairs",
    "invert",
    "functions",
    "extend",
    "defaults",
    "pick",
    "omit",
    "copy",
    "tap",
    "has",
    "is_empty",
    "is_array",
    "is_table",
    "is_function",
    "is_string",
    "is_integer",
    "is_float",
    "is_number",
    "is_boolean",
    "is_null",
    "is_falsy",
    "times",
    "for_each",
    "collect",
    "inject",
    "foldl",
    "foldr",
    "detect",
    "select",
    "all_of",
    "any_of",
    "include",
    "head",
    "take",
    "tail",
    "drop",
    "unique",
    "keys",
    "methods",
    "clone",
    "findWhere",
    "reduceRight",
    "sortBy",
    "groupBy",
    "countBy",
    "indexOf",
    "lastIndexOf",
    "sortedIndex",
    "isEmpty",
    "isArray",
    "isTable",
    "isFunction",
    "isString",
    "isInteger",
    "isFloat",
    "isNumber",
    "isBoolean",
    "isNull",
    "isFalsy"
]
