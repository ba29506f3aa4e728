"""
Tests for serialization and deserialization of objtasks objects.

These tests ensure compact JSON output and that parsed text is rebuilt
into instances of the requested class using `objtasks.serialization`.
"""

import pytest
from objtasks.model import Circle, Rectangle
from objtasks.serialization import (
    SerializationError,
    from_dict,
    from_json,
    from_yaml,
    get_json,
    to_dict,
    to_yaml,
)


class TestGetJson:
    """Test JSON output."""

    def test_list(self):
        """Lists are emitted without spaces."""
        assert get_json([1, 2, 3]) == "[1,2,3]"

    def test_rectangle(self):
        """Only fields are emitted, in declaration order."""
        assert get_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_dict(self):
        """Plain dicts keep insertion order."""
        assert get_json({"height": 10, "width": 20}) == '{"height":10,"width":20}'

    def test_scalars(self):
        """Scalars serialize as JSON scalars."""
        assert get_json("abc") == '"abc"'
        assert get_json(None) == "null"

    def test_list_of_shapes(self):
        """Shapes nested in a list are emitted as objects."""
        assert get_json([Rectangle(1, 2)]) == '[{"width":1,"height":2}]'

    def test_dict_of_shapes(self):
        """Shapes nested in a dict are emitted as objects."""
        assert get_json({"shape": Circle(3)}) == '{"shape":{"radius":3}}'

    def test_tuple_becomes_array(self):
        assert get_json((1, Circle(2))) == '[1,{"radius":2}]'

    def test_unsupported_nested_type(self):
        """Unsupported objects are rejected inside containers too."""
        with pytest.raises(TypeError):
            get_json([object()])

    def test_unsupported_type(self):
        """Arbitrary objects are rejected."""
        with pytest.raises(TypeError):
            get_json(object())


class TestFromJson:
    """Test JSON input into typed objects."""

    def test_circle(self):
        """Parsed object has the target class and its behavior."""
        c = from_json(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10
        assert c.get_circumference() == Circle(10).get_circumference()

    def test_rectangle(self):
        """Rectangle rebuilt from its own JSON is equal to the original."""
        r = Rectangle(10, 20)
        restored = from_json(Rectangle, get_json(r))
        assert restored == r
        assert restored.get_area() == 200

    def test_invalid_json(self):
        """Malformed JSON raises SerializationError."""
        with pytest.raises(SerializationError):
            from_json(Circle, '{"radius":')

    def test_unknown_field(self):
        """Fields the class does not declare are rejected."""
        with pytest.raises(SerializationError, match="Unknown fields"):
            from_json(Circle, '{"radius":1,"color":"red"}')

    def test_missing_field(self):
        """Required fields must be present."""
        with pytest.raises(SerializationError, match="Missing fields"):
            from_json(Rectangle, '{"width":1}')

    def test_not_a_mapping(self):
        """A JSON array cannot become a Circle."""
        with pytest.raises(SerializationError):
            from_json(Circle, "[1,2,3]")

    def test_target_must_be_dataclass(self):
        """Only dataclass targets are supported."""
        with pytest.raises(TypeError):
            from_dict(dict, {"a": 1})


class TestYaml:
    """Test YAML conversion."""

    def test_yaml_roundtrip(self):
        r = Rectangle(10, 20)
        restored = from_yaml(Rectangle, to_yaml(r))
        assert to_dict(restored) == to_dict(r)

    def test_yaml_field_order(self):
        """YAML keeps declaration order."""
        assert to_yaml(Rectangle(10, 20)) == "width: 10\nheight: 20\n"

    def test_yaml_unknown_mixed_keys(self):
        """Unknown int and str keys are reported, not compared."""
        with pytest.raises(SerializationError, match="Unknown fields"):
            from_yaml(Circle, "1: 2\na: 3")

    def test_yaml_nested_shapes(self):
        assert to_yaml([Circle(1)]) == "- radius: 1\n"

    def test_invalid_yaml(self):
        with pytest.raises(SerializationError):
            from_yaml(Circle, "radius: [1, 2")
