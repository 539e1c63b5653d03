import random

from class_compare.cir.model import (
    Attribute,
    AttributeSignature,
    Method,
    MethodSignature,
    Parameter,
)
from class_compare.compare.signatures import reduce_signatures


def _attrs():
    return [
        Attribute("private", "int", "a"),
        Attribute("public", "String", "b"),
        Attribute("private", "int", "c"),
        Attribute("default", "double", "d"),
        Attribute("public", "String", "e"),
        Attribute("private", "int", "f"),
    ]


def test_counts_by_signature():
    counts = reduce_signatures(_attrs())
    assert counts[AttributeSignature("private", "int")] == 3
    assert counts[AttributeSignature("public", "String")] == 2
    assert counts[AttributeSignature("default", "double")] == 1


def test_reduction_ignores_input_order():
    attrs = _attrs()
    expected = set(reduce_signatures(attrs).items())
    rng = random.Random(7)
    for _ in range(5):
        shuffled = attrs[:]
        rng.shuffle(shuffled)
        assert set(reduce_signatures(shuffled).items()) == expected


def test_keys_follow_first_occurrence():
    counts = reduce_signatures(_attrs())
    assert [sig.key for sig in counts] == ["private|int", "public|String", "default|double"]

    rotated = reduce_signatures(_attrs()[3:] + _attrs()[:3])
    assert [sig.key for sig in rotated] == ["default|double", "public|String", "private|int"]


def test_method_signature_ignores_name():
    methods = [
        Method("public", "int", "add", (Parameter("int", "a"), Parameter("int", "b"))),
        Method("public", "int", "sub", (Parameter("int", "x"), Parameter("int", "y"))),
    ]
    counts = reduce_signatures(methods)
    assert counts == {MethodSignature("public", "int", ("int", "int")): 2}


def test_parameter_order_matters():
    first = Method("public", "void", "f", (Parameter("int", "a"), Parameter("String", "b")))
    second = Method("public", "void", "f", (Parameter("String", "b"), Parameter("int", "a")))
    assert first.signature() != second.signature()
    assert first.signature().key == "public|void|int,String"
    assert second.signature().key == "public|void|String,int"


def test_no_parameter_key():
    assert Method("private", "void", "reset").signature().key == "private|void|"


def test_delimiter_in_type_does_not_collide():
    # both render the same key string, but stay distinct values
    a = MethodSignature("public", "void", ("Map<A,B>",))
    b = MethodSignature("public", "void", ("Map<A", "B>"))
    assert a.key == b.key
    assert a != b
