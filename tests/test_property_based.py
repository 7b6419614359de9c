"""Property-based tests for traversal and round-trip behaviour."""

from hypothesis import given
from hypothesis import strategies as st

import warden as w
from warden import MISSING, Err, Ok

json_scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False),
    st.text(max_size=10),
)

json_values = st.recursive(
    json_scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(st.text(max_size=5), children, max_size=4),
    ),
    max_leaves=20,
)

mixed_items = st.lists(st.one_of(st.text(max_size=5), st.integers()), max_size=15)

schemas = st.sampled_from(
    [
        w.string,
        w.number,
        w.boolean,
        lambda: w.array(w.number()),
        lambda: w.object({"a": w.string(), "b": w.number().optional()}),
        lambda: w.literal(["x", 1]),
        lambda: w.union([w.string(), w.array(w.boolean())]),
    ]
)


@given(st.text())
def test_string_round_trip(text):
    result = w.string().safe_parse(text)
    assert isinstance(result, Ok)
    assert result.value is text


@given(st.one_of(st.integers(), st.floats(allow_nan=False)))
def test_number_round_trip(number):
    assert w.number().parse(number) is number


@given(mixed_items)
def test_retained_array_reports_every_invalid_element(items):
    result = w.array(w.string()).safe_parse(items)
    invalid = [i for i, item in enumerate(items) if not isinstance(item, str)]

    if not invalid:
        assert result == Ok(items)
    else:
        assert isinstance(result, Err)
        assert [entry.index for entry in result.error.issues] == invalid


@given(mixed_items)
def test_immediate_array_reports_first_invalid_element(items):
    result = w.array(w.string()).immediate().safe_parse(items)
    invalid = [i for i, item in enumerate(items) if not isinstance(item, str)]

    if not invalid:
        assert isinstance(result, Ok)
    else:
        assert [entry.index for entry in result.error.issues] == invalid[:1]


@given(st.dictionaries(st.sampled_from("abcdef"), st.one_of(st.text(), st.integers())))
def test_retained_object_reports_every_invalid_field(data):
    fields = {key: w.string() for key in "abcdef"}
    result = w.object(fields).safe_parse(data)
    invalid = [k for k in "abcdef" if not isinstance(data.get(k), str)]

    if not invalid:
        assert isinstance(result, Ok)
    else:
        assert [entry.field for entry in result.error.issues] == invalid


@given(schemas, json_values)
def test_safe_parse_is_idempotent(factory, value):
    schema = factory()
    assert schema.safe_parse(value) == schema.safe_parse(value)


@given(schemas)
def test_optional_accepts_missing(factory):
    assert factory().optional().safe_parse(MISSING) == Ok(MISSING)


@given(schemas)
def test_optional_forwards_none(factory):
    schema = factory()
    assert schema.optional().safe_parse(None) == schema.safe_parse(None)


@given(st.dictionaries(st.text(max_size=5), json_scalars, max_size=5))
def test_strict_output_has_only_declared_keys(extra):
    data = {**extra, "a": "value"}
    result = w.object({"a": w.string()}).strict().safe_parse(data)
    assert result == Ok({"a": "value"})
