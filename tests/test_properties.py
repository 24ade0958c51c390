"""Property-based checks of the range expander."""

from hypothesis import assume, given
from hypothesis import strategies as st

import pytest

from numrange import SeparatorsMustBeDifferent, StartBiggerThanEnd, parse, parse_with

small_ints = st.integers(min_value=-1000, max_value=1000)
separators = st.text(alphabet=";:/|.", min_size=1, max_size=3)


@given(small_ints)
def test_single_value_roundtrip(value):
    assert parse(str(value)) == [value]


@given(small_ints, small_ints)
def test_inclusive_range(a, b):
    assume(a <= b)
    values = parse(f"{a}-{b}")
    assert len(values) == b - a + 1
    assert values == list(range(a, b + 1))


@given(small_ints, small_ints)
def test_reversed_range_fails(a, b):
    assume(a > b)
    with pytest.raises(StartBiggerThanEnd):
        parse(f"{a}-{b}")


@given(st.lists(st.tuples(small_ints, st.integers(min_value=0, max_value=5)), min_size=1))
def test_parts_keep_source_order(pairs):
    expr = ",".join(f"{start}-{start + span}" for start, span in pairs)
    expected = [v for start, span in pairs for v in range(start, start + span + 1)]
    assert parse(expr) == expected


@given(st.text(max_size=20), separators)
def test_equal_separators_always_fail(expr, separator):
    with pytest.raises(SeparatorsMustBeDifferent):
        parse_with(expr, separator, separator)


@given(small_ints, st.integers(min_value=0, max_value=20))
def test_custom_separators_match_defaults(start, span):
    expr = f"{start}..{start + span};{start}"
    assert parse_with(expr, ";", "..") == parse(f"{start}-{start + span},{start}")


@given(st.integers(min_value=-50, max_value=50), st.integers(min_value=0, max_value=10))
def test_float_range_steps_by_one(start, span):
    values = parse(f"{float(start)}-{float(start + span)}", float)
    assert values == [float(v) for v in range(start, start + span + 1)]


@given(st.text(alphabet="0123-, ", max_size=7))
def test_parse_is_repeatable(expr):
    try:
        first = parse(expr)
    except Exception as e:
        with pytest.raises(type(e)):
            parse(expr)
    else:
        assert parse(expr) == first
