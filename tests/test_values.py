"""Tests for minijson.values."""

from minijson.values import (
    JArray,
    JBool,
    JFloat,
    JInteger,
    JObject,
    JString,
    Null,
    _NullType,
)


class TestNull:
    def test_singleton(self):
        assert Null is _NullType()

    def test_falsy(self):
        assert not Null

    def test_repr(self):
        assert repr(Null) == "Null"

    def test_not_none(self):
        assert Null is not None


class TestScalars:
    def test_integer_and_float_differ(self):
        assert JInteger(1) != JFloat(1.0)

    def test_str(self):
        assert str(JBool(True)) == "true"
        assert str(JInteger(-3)) == "-3"
        assert str(JFloat(0.5)) == "0.5"
        assert str(JString("hi")) == "hi"


class TestJArray:
    def test_append_and_index(self):
        arr = JArray()
        arr.append(JInteger(1))
        arr.append(JString("x"))
        assert len(arr) == 2
        assert arr[1] == JString("x")
        assert list(arr) == [JInteger(1), JString("x")]

    def test_order_matters_for_equality(self):
        assert JArray([JInteger(1), JInteger(2)]) != JArray([JInteger(2), JInteger(1)])


class TestJObject:
    def test_set_get(self):
        obj = JObject()
        obj.set("a", JInteger(1))
        assert obj.get("a") == JInteger(1)
        assert obj.get("missing") is None
        assert "a" in obj
        assert obj["a"] == JInteger(1)

    def test_overwrite_keeps_first_position(self):
        obj = JObject()
        obj.set("a", JInteger(1))
        obj.set("b", JInteger(2))
        obj.set("a", JInteger(3))
        assert list(obj) == ["a", "b"]
        assert obj["a"] == JInteger(3)
        assert len(obj) == 2

    def test_equality_ignores_key_order(self):
        left = JObject({"a": Null, "b": JBool(False)})
        right = JObject({"b": JBool(False), "a": Null})
        assert left == right
