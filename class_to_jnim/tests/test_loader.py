"""
Tests for loading class documents into class model trees.
"""

from __future__ import annotations

import json

import pytest

from class_to_jnim.loader import DocumentError, load_document, load_file


def class_record(**overrides):
    record = {"name": "Foo", "package": "p", "full_name": "Foo", "is_interface": False}
    record.update(overrides)
    return record


class TestLoadDocument:
    def test_empty_document(self):
        assert load_document([]) == []

    def test_minimal_record_defaults(self):
        (cls,) = load_document([class_record()])
        assert cls.name == "Foo"
        assert cls.package_name == "p"
        assert cls.full_name == "Foo"
        assert cls.is_interface is False
        assert cls.super_class == ""
        assert cls.methods == []
        assert cls.fields == []
        assert cls.nested_classes == []
        assert cls.depth == 0

    def test_null_superclass_means_none(self):
        (cls,) = load_document([class_record(superclass=None)])
        assert cls.super_class == ""

    def test_superclass(self):
        (cls,) = load_document([class_record(superclass="Base")])
        assert cls.super_class == "Base"

    def test_document_order_is_kept(self):
        classes = load_document([class_record(name="A", full_name="A"), class_record(name="B", full_name="B")])
        assert [c.name for c in classes] == ["A", "B"]

    def test_methods(self):
        record = class_record(
            methods=[
                {
                    "name": "bar",
                    "return_type": "int",
                    "modifiers": ["public", "static", "final"],
                    "parameters": [{"type": "String", "name": "s"}, {"type": "int[]", "name": "xs"}],
                },
                {"name": "baz", "return_type": "void", "modifiers": ["private"]},
            ]
        )
        (cls,) = load_document([record])
        bar, baz = cls.methods
        assert bar.name == "bar"
        assert bar.return_type == "int"
        assert bar.is_public and bar.is_static
        assert [(p.type_name, p.name) for p in bar.params] == [("String", "s"), ("int[]", "xs")]
        assert baz.returns_void
        assert not baz.is_public and not baz.is_static
        assert baz.params == []
        assert cls.public_methods == [bar]

    def test_fields(self):
        record = class_record(
            fields=[
                {"name": "count", "type": "int", "modifiers": ["public"]},
                {"name": "NAME", "type": "String", "modifiers": ["static", "public"]},
                {"name": "hidden", "type": "long", "modifiers": []},
            ]
        )
        (cls,) = load_document([record])
        count, name, hidden = cls.fields
        assert (count.field_type, count.is_public, count.is_static) == ("int", True, False)
        assert (name.is_public, name.is_static) == (True, True)
        assert (hidden.is_public, hidden.is_static) == (False, False)
        assert [f.name for f in cls.public_fields] == ["count", "NAME"]

    def test_nested_classes_get_depth(self):
        deep = class_record(name="Deep", full_name="Outer$Inner$Deep")
        inner = class_record(name="Inner", full_name="Outer$Inner", nested_classes=[deep])
        (outer,) = load_document([class_record(name="Outer", full_name="Outer", nested_classes=[inner])])
        assert [(c.name, c.depth) for c in outer.walk()] == [("Outer", 0), ("Inner", 1), ("Deep", 2)]
        assert not outer.is_nested
        assert outer.nested_classes[0].is_nested

    def test_unknown_keys_are_ignored(self):
        (cls,) = load_document([class_record(modifiers=["public"], annotations=["Deprecated"])])
        assert cls.name == "Foo"


class TestMalformedDocuments:
    def test_top_level_must_be_a_list(self):
        with pytest.raises(DocumentError, match="expected a list of class records, got dict"):
            load_document({"name": "Foo"}, "doc.json")

    def test_record_must_be_an_object(self):
        with pytest.raises(DocumentError) as exc_info:
            load_document(["Foo"])
        assert exc_info.value.location == "[0]"

    @pytest.mark.parametrize("key", ["name", "package", "full_name", "is_interface"])
    def test_missing_required_class_field(self, key):
        record = class_record()
        del record[key]
        with pytest.raises(DocumentError) as exc_info:
            load_document([record], "doc.json")
        error = exc_info.value
        assert error.document == "doc.json"
        assert error.location == "[0]"
        assert f"'{key}'" in error.reason

    def test_wrong_type(self):
        with pytest.raises(DocumentError) as exc_info:
            load_document([class_record(is_interface="no")])
        assert exc_info.value.location == "[0].is_interface"
        assert exc_info.value.reason == "expected bool, got str"

    def test_error_location_inside_methods(self):
        record = class_record(
            methods=[
                {"name": "ok", "return_type": "int", "modifiers": []},
                {"name": "broken", "modifiers": ["public"]},
            ]
        )
        with pytest.raises(DocumentError) as exc_info:
            load_document([class_record(), record], "doc.json")
        assert exc_info.value.location == "[1].methods[1]"
        assert str(exc_info.value) == "doc.json at [1].methods[1]: missing required field 'return_type'"

    def test_missing_modifiers(self):
        record = class_record(fields=[{"name": "x", "type": "int"}])
        with pytest.raises(DocumentError, match="'modifiers'"):
            load_document([record])

    def test_non_string_modifier(self):
        record = class_record(fields=[{"name": "x", "type": "int", "modifiers": ["public", 1]}])
        with pytest.raises(DocumentError) as exc_info:
            load_document([record])
        assert exc_info.value.location == "[0].fields[0].modifiers[1]"

    def test_parameter_missing_name(self):
        record = class_record(methods=[{"name": "m", "return_type": "void", "modifiers": [], "parameters": [{"type": "int"}]}])
        with pytest.raises(DocumentError) as exc_info:
            load_document([record])
        assert exc_info.value.location == "[0].methods[0].parameters[0]"

    def test_error_in_nested_class(self):
        nested = class_record(full_name="Foo$Bar")
        del nested["package"]
        with pytest.raises(DocumentError) as exc_info:
            load_document([class_record(nested_classes=[nested])])
        assert exc_info.value.location == "[0].nested_classes[0]"

    def test_optional_list_of_wrong_shape(self):
        with pytest.raises(DocumentError) as exc_info:
            load_document([class_record(methods={"name": "m"})])
        assert exc_info.value.location == "[0].methods"


class TestLoadFile:
    def test_load_file(self, tmp_path):
        path = tmp_path / "Foo.json"
        path.write_text(json.dumps([class_record()]))
        (cls,) = load_file(path)
        assert cls.name == "Foo"

    def test_empty_file_document(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("[]")
        assert load_file(path) == []

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[{")
        with pytest.raises(DocumentError, match="invalid JSON") as exc_info:
            load_file(path)
        assert exc_info.value.document == str(path)
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_invalid_encoding(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b"\xff\xfe[]")
        with pytest.raises(DocumentError, match="invalid encoding") as exc_info:
            load_file(path)
        assert exc_info.value.document == str(path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_file(tmp_path / "nope.json")
