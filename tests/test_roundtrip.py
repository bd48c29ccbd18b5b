"""Round-trip tests: decode(encode(v)) and encode(decode(encode(v)))."""

import pytest

from minijson import (
    JArray,
    JBool,
    JFloat,
    JInteger,
    JObject,
    JString,
    Null,
    decode,
    encode,
)


TREES = [
    Null,
    JBool(True),
    JInteger(-9223372036854775808),
    JFloat(1e16),
    JFloat(-0.0),
    JFloat(1.5e-07),
    JString(""),
    JString('quote " back \\ slash / tab \t nl \n'),
    JString("café € \U0001F600 \x01"),
    JArray(),
    JObject(),
    JArray([JInteger(1), JArray([JArray([Null])]), JObject({"k": JFloat(2.5)})]),
    JObject({
        "b": JArray([JInteger(1), JInteger(2), JInteger(3)]),
        "a": JObject({"nested": JString("x"), "flag": JBool(False)}),
        "": Null,
    }),
]


@pytest.mark.parametrize("tree", TREES)
def test_decode_encode_roundtrip(tree):
    assert decode(encode(tree)) == tree


@pytest.mark.parametrize("tree", TREES)
def test_encode_is_stable(tree):
    text = encode(tree)
    assert encode(decode(text)) == text


def test_object_order_survives_roundtrip():
    text = '{"z":1,"y":2,"x":3}'
    assert encode(decode(text)) == text


def test_whole_float_stays_float():
    assert decode(encode(JFloat(2.0))) == JFloat(2.0)
    assert decode(encode(JInteger(2))) == JInteger(2)
