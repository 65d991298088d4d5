import numpy as np
import pandas as pd
import suite
from dgen import from_schema
from undy import chain, Chain, pluck

assert_that = suite.assert_that

employee_schema = {
    'id': {'_qen_provider': 'sequence', 'start': 1},
    'name': 'first_name',
    'team': {'_qen_provider': 'choice', 'from': ['core', 'web', 'data']},
    'salary': ('pyint', {'min_value': 40, 'max_value': 90})
}

employees = from_schema(employee_schema, seed=21).take(15)


@suite.test("chain exposes library functions as steps")
def test_chain_basic():
    result = chain([3, 1, 2, 3]).uniq().sort_by().map(lambda x: x * 10).value()
    assert_that(result == [10, 20, 30], f"got {result}")


@suite.test("chain accepts aliases")
def test_chain_aliases():
    result = chain([5, 6, 7, 8]).select(lambda x: x % 2 == 0).head(1).value()
    assert_that(result == [6], f"got {result}")


@suite.test("chain steps are lazy and cached")
def test_chain_lazy():
    calls = []
    pipeline = chain([1, 2, 3]).map(lambda x: calls.append(x) or x)
    assert_that(calls == [], "nothing runs before the value is requested")
    pipeline.value()
    pipeline.value()
    assert_that(calls == [1, 2, 3], "the step ran exactly once")


@suite.test("tap inspects an intermediate value without breaking the chain")
def test_chain_tap():
    seen = []
    result = chain(employees).where({'team': 'data'}).tap(lambda rows: seen.append(len(rows))).pluck('id').value()
    assert_that(seen == [len(result)], "interceptor saw the filtered records")
    assert_that(result == [e['id'] for e in employees if e['team'] == 'data'], "chain continued after tap")


@suite.test("chain groups and counts generated records")
def test_chain_grouping():
    counts = chain(employees).count_by('team').value()
    assert_that(sum(counts.values()) == len(employees), "every employee is counted")
    top = chain(employees).max(lambda e: e['salary']).value()
    assert_that(top['salary'] == max(pluck(employees, 'salary')), "max salary record")


@suite.test("chain converts to numpy and pandas")
def test_chain_terminals():
    salaries = chain(employees).pluck('salary')
    array = salaries.to_array()
    assert_that(isinstance(array, np.ndarray) and array.tolist() == pluck(employees, 'salary'), "numpy array")
    series = salaries.to_series()
    assert_that(isinstance(series, pd.Series) and len(series) == len(employees), "pandas series")
    frame = chain(employees).sort_by('name').to_frame()
    assert_that(isinstance(frame, pd.DataFrame), "pandas dataframe")
    assert_that(list(frame.columns) == ['id', 'name', 'team', 'salary'], "record slots become columns")
    assert_that(frame['name'].tolist() == sorted(pluck(employees, 'name')), "rows follow the chain order")


@suite.test("chain supports iteration, len and repr")
def test_chain_protocols():
    wrapped = chain({'a': 1, 'b': 2})
    assert_that(isinstance(wrapped, Chain), "chain returns a Chain")
    assert_that(list(wrapped) == [('a', 1), ('b', 2)], "mappings iterate as pairs")
    assert_that(len(wrapped) == 2, "len uses size()")
    assert_that(list(chain([1, 2]).map(str)) == ['1', '2'], "sequences iterate as values")
    assert_that(repr(chain([1]).first()) == 'Chain(pending)', "unevaluated chains say so")


@suite.test("unknown operations raise attribute errors")
def test_chain_unknown():
    with suite.raises(AttributeError, match="no_such_thing"):
        chain([]).no_such_thing()
    with suite.raises(AttributeError):
        chain([]).InvalidArgument()


if __name__ == "__main__":
    suite.run(title="undy chaining tests")
