from class_compare.adapters.java_adapter import JavaAdapter

SHAPES = """
// Shapes
public class Shape {
    protected String name;
    private int sides;

    public Shape(String name) {
        this.name = name;
    }

    public String getName() {
        return name;
    }

    public double area() {
        return 0;
    }
}

class Circle extends Shape {
    private double radius;

    /* ctor */
    Circle(double radius) {
        super("circle");
        this.radius = radius;
    }

    public double area() {
        return Math.PI * radius * radius;
    }

    public void scale(final double factor, int times) {
        radius = radius * factor * times;
    }
}
"""


def test_parse_classes_in_source_order():
    result = JavaAdapter().parse(SHAPES)
    assert result.errors == ()
    assert [c.name for c in result.classes] == ["Shape", "Circle"]
    assert result.classes[0].extends is None
    assert result.classes[1].extends == "Shape"


def test_attributes_with_and_without_modifier():
    adapter = JavaAdapter()
    attrs = adapter.parse_attributes("protected String name; int count; private List<Item> items;")
    assert [(a.modifier, a.type_name, a.name) for a in attrs] == [
        ("protected", "String", "name"),
        ("default", "int", "count"),
        ("private", "List<Item>", "items"),
    ]


def test_return_statement_is_not_an_attribute():
    attrs = JavaAdapter().parse_attributes("int x; int get() { return x; }")
    assert [a.name for a in attrs] == ["x"]


def test_initialised_field_is_not_matched():
    attrs = JavaAdapter().parse_attributes("private int x = 5; private int y;")
    assert [a.name for a in attrs] == ["y"]


def test_methods_exclude_constructors():
    result = JavaAdapter().parse(SHAPES)
    shape, circle = result.classes
    assert [m.name for m in shape.methods] == ["getName", "area"]
    assert [m.name for m in circle.methods] == ["area", "scale"]
    assert shape.methods[0].modifier == "public"
    assert shape.methods[0].return_type == "String"


def test_method_parameters_drop_final():
    circle = JavaAdapter().parse(SHAPES).classes[1]
    scale = circle.methods[1]
    assert [(p.type_name, p.name) for p in scale.parameters] == [("double", "factor"), ("int", "times")]


def test_method_needs_following_brace():
    methods = JavaAdapter().parse_methods("abstract void run(); void go() { run(); }")
    assert [m.name for m in methods] == ["go"]
    assert methods[0].modifier == "default"


def test_parameters_split_on_top_level_commas():
    params = JavaAdapter().parse_parameters("Map<String, Integer> counts, String[] args")
    assert [(p.type_name, p.name) for p in params] == [
        ("Map<String, Integer>", "counts"),
        ("String[]", "args"),
    ]


def test_malformed_parameter_is_skipped():
    params = JavaAdapter().parse_parameters("int, final, String s")
    assert [(p.type_name, p.name) for p in params] == [("String", "s")]


def test_well_balanced_classes_yield_one_body_each():
    source = "class A { void f() { if (x) { y(); } } } class B extends A { } class C {}"
    bodies, errors = JavaAdapter().extract_class_bodies(source)
    assert errors == []
    assert [b.name for b in bodies] == ["A", "B", "C"]
    assert bodies[1].extends == "A"
    assert bodies[2].body == ""
    assert source[bodies[0].body_start - 1] == "{"


def test_unbalanced_class_is_dropped_with_error():
    source = "class Good { int x; }\nclass Broken { void f() {"
    result = JavaAdapter().parse(source)
    assert [c.name for c in result.classes] == ["Good"]
    assert len(result.errors) == 1
    assert "Broken" in result.errors[0]


def test_no_classes_is_a_single_advisory():
    result = JavaAdapter().parse("interface Runner { void run(); }")
    assert result.classes == ()
    assert result.errors == ("No class declarations found",)


def test_commented_out_class_is_ignored():
    result = JavaAdapter().parse("/* class Hidden { } */ // class Also {}\nclass Seen { }")
    assert [c.name for c in result.classes] == ["Seen"]


def test_duplicate_class_keeps_first_declaration():
    result = JavaAdapter().parse("class A { int x; } class A { String y; }")
    assert len(result.classes) == 1
    assert result.classes[0].attributes[0].type_name == "int"
    assert result.errors == ("Duplicate class 'A' ignored",)


def test_unexpected_failure_becomes_advisory(monkeypatch):
    adapter = JavaAdapter()

    def boom(body):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(adapter, "parse_methods", boom)
    result = adapter.parse("class A { }")
    assert result.classes == ()
    assert result.errors == ("Error parsing: kaboom",)


def test_parse_units_pools_in_name_order():
    units = {
        "b/Zeta.java": "class Zeta { }",
        "a/Alpha.java": "class Alpha { }",
        "Empty.java": "// nothing here",
    }
    result = JavaAdapter().parse_units(units)
    assert [c.name for c in result.classes] == ["Alpha", "Zeta"]
    assert result.errors == ("Empty.java: No class declarations found",)


def test_parse_units_accepts_repeated_names():
    result = JavaAdapter().parse_units([
        ("Shape.java", "class A { }"),
        ("Base.java", "// empty"),
        ("Shape.java", "class B { }"),
    ])
    assert [c.name for c in result.classes] == ["A", "B"]
    assert result.errors == ("Base.java: No class declarations found",)
