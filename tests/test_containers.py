"""
Tests for array and object schemas: traversal modes, projection, paths, extend.
"""

from types import MappingProxyType

import pytest

import warden as w
from warden import (
    MISSING,
    ArraySchemaIssue,
    ArrayTypeIssue,
    Err,
    ObjectSchemaIssue,
    ObjectTypeIssue,
    Ok,
    RequiredIssue,
    StringIssue,
)


class TestArray:
    def test_parses_lists(self):
        strarr = w.array(w.string())
        assert strarr.parse(["test"]) == ["test"]
        assert strarr.parse([]) == []
        assert strarr.parse(["nina", "cat", "pet"]) == ["nina", "cat", "pet"]

    def test_tuple_becomes_list(self):
        assert w.array(w.number()).parse((1, 2)) == [1, 2]

    def test_reuses_unchanged_list(self):
        data = ["a", "b"]
        assert w.array(w.string()).parse(data) is data

    def test_new_list_when_element_changes(self):
        data = ["a", "b"]
        upper = w.array(w.string().transform(lambda v, _: v.upper()))
        result = upper.parse(data)
        assert result == ["A", "B"]
        assert data == ["a", "b"]

    def test_type_error(self):
        result = w.array(w.string(), "expected array").safe_parse("test")
        assert isinstance(result.error, ArrayTypeIssue)
        assert result.error.message == "expected array"
        assert isinstance(w.array(w.string()).safe_parse({}).error, ArrayTypeIssue)

    def test_required(self):
        arr = w.array(w.string()).required("list required")
        assert arr.safe_parse(None).error == RequiredIssue(message="list required")
        assert isinstance(arr.safe_parse(MISSING).error, RequiredIssue)

    def test_min_max(self):
        arr = w.array(w.string()).min(1, "too few").max(2, "too many")
        assert arr.parse(["a"]) == ["a"]
        assert arr.safe_parse([]).error.message == "too few"
        assert arr.safe_parse(["a", "b", "c"]).error.message == "too many"

    def test_max_checked_before_min(self):
        arr = w.array(w.string()).min(5, "min").max(1, "max")
        assert arr.safe_parse(["a", "b"]).error.message == "max"

    def test_retained_collects_every_failure(self):
        strarr = w.array(w.string("expected string"))
        result = strarr.safe_parse([1, "ok", 2])
        assert isinstance(result, Err)
        issue = result.error
        assert isinstance(issue, ArraySchemaIssue)
        assert [entry.index for entry in issue.issues] == [0, 2]
        assert all(entry.issue.message == "expected string" for entry in issue.issues)

    def test_immediate_stops_at_first_failure(self):
        strarr = w.array(w.string("expected string")).immediate()
        result = strarr.safe_parse(["test", 1, 2])
        issue = result.error
        assert isinstance(issue, ArraySchemaIssue)
        assert len(issue.issues) == 1
        assert issue.issues[0].index == 1
        assert issue.issues[0].issue == StringIssue(message="expected string")

    def test_retained_after_immediate(self):
        arr = w.array(w.string()).immediate().retained()
        assert len(arr.safe_parse([1, 2]).error.issues) == 2

    def test_element_must_be_schema(self):
        with pytest.raises(TypeError):
            w.array(str)


class TestObject:
    def test_parses_objects(self):
        obj = w.object({"name": w.string()})
        assert obj.parse({"name": "test"}) == {"name": "test"}

    def test_type_error(self):
        obj = w.object({"name": w.string()})
        assert isinstance(obj.safe_parse("test").error, ObjectTypeIssue)
        assert isinstance(obj.safe_parse(["name"]).error, ObjectTypeIssue)
        assert isinstance(obj.safe_parse(None).error, RequiredIssue)

    def test_accepts_any_mapping(self):
        obj = w.object({"name": w.string()})
        assert obj.parse(MappingProxyType({"name": "x"})) == {"name": "x"}

    def test_immediate_field_error(self):
        obj = w.object({"name": w.string("name error"), "age": w.number()}).immediate()
        result = obj.safe_parse({"name": 2, "age": "x"})
        issue = result.error
        assert isinstance(issue, ObjectSchemaIssue)
        assert len(issue.issues) == 1
        assert issue.issues[0].field == "name"
        assert issue.issues[0].issue == StringIssue(message="name error")

    def test_retained_collects_in_declared_order(self):
        obj = w.object(
            {
                "name": w.string("name error"),
                "age": w.number("age error").required("age required"),
            }
        )
        assert isinstance(obj.safe_parse({"name": "test", "age": 18}), Ok)

        issue = obj.safe_parse({"age": None, "name": 2}).error
        assert [(e.field, e.issue.kind, e.issue.message) for e in issue.issues] == [
            ("name", "string", "name error"),
            ("age", "required", "age required"),
        ]

    def test_nested_retained(self):
        obj = w.object(
            {
                "name": w.string("name error"),
                "traits": w.object(
                    {"height": w.number("height error").required("height required")},
                    "invalid traits",
                ),
            },
            "invalid object",
        )
        issue = obj.safe_parse({"name": 2, "traits": {}}).error
        assert issue.message == "invalid object"
        traits = issue.issues[1]
        assert traits.field == "traits"
        assert traits.issue.message == "invalid traits"
        assert traits.issue.issues[0].field == "height"
        assert traits.issue.issues[0].issue == RequiredIssue(message="height required")

    def test_non_strict_passes_unknown_keys(self):
        obj = w.object({"a": w.number()})
        assert obj.parse({"a": 1, "b": 2}) == {"a": 1, "b": 2}

    def test_non_strict_reuses_unchanged_input(self):
        data = {"a": 1, "b": 2}
        assert w.object({"a": w.number()}).parse(data) is data

    def test_non_strict_overlays_changed_fields(self):
        obj = w.object({"a": w.number().transform(lambda v, _: v + 1)})
        data = {"a": 1, "b": 2}
        assert obj.parse(data) == {"a": 2, "b": 2}
        assert data == {"a": 1, "b": 2}

    def test_strict_drops_unknown_keys(self):
        obj = w.object({"a": w.number()}).strict()
        data = {"a": 1, "b": 2}
        result = obj.parse(data)
        assert result == {"a": 1}
        assert result is not data

    def test_missing_optional_field_is_omitted(self):
        obj = w.object({"a": w.number(), "b": w.string().optional()})
        assert obj.parse({"a": 1}) == {"a": 1}
        assert obj.strict().parse({"a": 1}) == {"a": 1}

    def test_fields_are_copied(self):
        obj = w.object({"a": w.number()})
        obj.fields["b"] = w.string()
        assert list(obj.fields) == ["a"]

    def test_invalid_fields(self):
        with pytest.raises(TypeError):
            w.object({"a": int})
        with pytest.raises(TypeError):
            w.object([("a", w.number())])


class TestPathed:
    def test_nested_paths(self):
        obj = w.object(
            {
                "name": w.string(),
                "traits": w.object({"height": w.number().required("h")}),
            }
        ).pathed()
        issue = obj.safe_parse({"name": 2, "traits": {}}).error

        name, traits = issue.issues
        assert name.issue.path == ("name",)
        assert traits.issue.path == ("traits",)
        assert traits.issue.issues[0].issue.path == ("traits", "height")
        assert traits.issue.issues[0].issue.message == "h"

    def test_paths_through_arrays(self):
        obj = w.object(
            {"pets": w.array(w.object({"name": w.string()}))},
        ).pathed()
        issue = obj.safe_parse({"pets": [{"name": "a"}, {"name": 1}]}).error
        pets = issue.issues[0].issue
        assert pets.path == ("pets",)
        assert pets.issues[0].issue.path == ("pets", 1)
        assert pets.issues[0].issue.issues[0].issue.path == ("pets", 1, "name")

    def test_inner_pathed_object_relocated(self):
        inner = w.object({"x": w.number()}).pathed()
        outer = w.object({"point": inner}).pathed()
        issue = outer.safe_parse({"point": {"x": "1"}}).error
        assert issue.issues[0].issue.issues[0].issue.path == ("point", "x")

    def test_unpathed_has_no_paths(self):
        obj = w.object({"name": w.string()})
        assert obj.safe_parse({"name": 1}).error.issues[0].issue.path is None

    def test_disable(self):
        obj = w.object({"name": w.string()}).pathed().pathed(False)
        assert obj.safe_parse({"name": 1}).error.issues[0].issue.path is None


class TestExtend:
    def test_returns_new_schema(self):
        base = w.object({"name": w.string()})
        extended = base.extend({"age": w.number()})
        assert extended is not base
        assert list(base.fields) == ["name"]
        assert list(extended.fields) == ["name", "age"]

    def test_argument_wins(self):
        base = w.object({"id": w.string()})
        extended = base.extend({"id": w.number()})
        assert extended.parse({"id": 1}) == {"id": 1}
        assert isinstance(base.safe_parse({"id": 1}), Err)

    def test_copies_flags_and_stages(self):
        base = (
            w.object({"a": w.number()}, "bad object")
            .strict()
            .immediate()
            .pathed()
            .required("object required")
            .check(lambda v, _: v["a"] > 0, "a must be positive")
        )
        extended = base.extend({"b": w.number()})
        assert extended.is_strict and extended.is_immediate and extended.is_pathed
        assert extended.parse({"a": 1, "b": 2, "c": 3}) == {"a": 1, "b": 2}
        assert extended.safe_parse(None).error.message == "object required"
        assert extended.safe_parse({"a": -1, "b": 2}).error.message == "a must be positive"
        assert len(extended.safe_parse({"a": "x", "b": "y"}).error.issues) == 1

    def test_stage_lists_are_independent(self):
        base = w.object({"a": w.number()})
        extended = base.extend({})
        extended.check(lambda v, _: False, "never")
        assert isinstance(base.safe_parse({"a": 1}), Ok)
        assert isinstance(extended.safe_parse({"a": 1}), Err)
