"""
Class document loader.

Builds class model trees from the JSON documents produced by the Java
class extractor. A document is an ordered list of class records; each
record may nest further class records.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .model import ClassDef, FieldDef, MethodDef, ParamDef

PUBLIC_MODIFIER = "public"
STATIC_MODIFIER = "static"


class DocumentError(Exception):
    """Raised when a class document is malformed.

    Attributes:
        document: Name of the offending document (usually its path)
        location: Path of the offending value inside the document,
            e.g. "[0].methods[2].return_type"
        reason: What is wrong with that value
    """

    def __init__(self, document: str, location: str, reason: str):
        self.document = document
        self.location = location
        self.reason = reason
        where = f" at {location}" if location else ""
        super().__init__(f"{document}{where}: {reason}")


class DocumentLoader:
    """Validates a decoded class document and converts it to ClassDef trees."""

    def __init__(self, document: str = "<document>"):
        self.document = document

    def load(self, data: Any) -> list[ClassDef]:
        """
        Load every top-level class record of a document.

        Args:
            data: The decoded JSON document

        Returns:
            Class trees in document order (empty if the document has no records)

        Raises:
            DocumentError: If any record is malformed
        """
        if not isinstance(data, list):
            raise DocumentError(self.document, "", f"expected a list of class records, got {_type_name(data)}")
        return [self._parse_class(record, f"[{i}]", depth=0) for i, record in enumerate(data)]

    def _parse_class(self, record: Any, path: str, depth: int) -> ClassDef:
        record = self._expect(record, dict, path)

        superclass = record.get("superclass")
        if superclass is not None:
            superclass = self._expect(superclass, str, f"{path}.superclass")

        methods = self._optional_list(record, "methods", path)
        fields = self._optional_list(record, "fields", path)
        nested = self._optional_list(record, "nested_classes", path)

        return ClassDef(
            name=self._required(record, "name", str, path),
            package_name=self._required(record, "package", str, path),
            full_name=self._required(record, "full_name", str, path),
            super_class=superclass or "",
            is_interface=self._required(record, "is_interface", bool, path),
            methods=[self._parse_method(m, f"{path}.methods[{i}]") for i, m in enumerate(methods)],
            fields=[self._parse_field(f, f"{path}.fields[{i}]") for i, f in enumerate(fields)],
            nested_classes=[self._parse_class(n, f"{path}.nested_classes[{i}]", depth + 1) for i, n in enumerate(nested)],
            depth=depth,
        )

    def _parse_method(self, record: Any, path: str) -> MethodDef:
        record = self._expect(record, dict, path)
        modifiers = self._modifiers(record, path)
        params = self._optional_list(record, "parameters", path)
        return MethodDef(
            name=self._required(record, "name", str, path),
            return_type=self._required(record, "return_type", str, path),
            params=[self._parse_param(p, f"{path}.parameters[{i}]") for i, p in enumerate(params)],
            is_public=PUBLIC_MODIFIER in modifiers,
            is_static=STATIC_MODIFIER in modifiers,
        )

    def _parse_param(self, record: Any, path: str) -> ParamDef:
        record = self._expect(record, dict, path)
        return ParamDef(
            type_name=self._required(record, "type", str, path),
            name=self._required(record, "name", str, path),
        )

    def _parse_field(self, record: Any, path: str) -> FieldDef:
        record = self._expect(record, dict, path)
        modifiers = self._modifiers(record, path)
        return FieldDef(
            name=self._required(record, "name", str, path),
            field_type=self._required(record, "type", str, path),
            is_public=PUBLIC_MODIFIER in modifiers,
            is_static=STATIC_MODIFIER in modifiers,
        )

    def _modifiers(self, record: dict, path: str) -> set[str]:
        modifiers = self._required(record, "modifiers", list, path)
        return {self._expect(m, str, f"{path}.modifiers[{i}]") for i, m in enumerate(modifiers)}

    def _required(self, record: dict, key: str, expected: type, path: str) -> Any:
        if key not in record:
            raise DocumentError(self.document, path, f"missing required field '{key}'")
        return self._expect(record[key], expected, f"{path}.{key}")

    def _optional_list(self, record: dict, key: str, path: str) -> list:
        value = record.get(key)
        if value is None:
            return []
        return self._expect(value, list, f"{path}.{key}")

    def _expect(self, value: Any, expected: type, path: str) -> Any:
        if not isinstance(value, expected):
            raise DocumentError(self.document, path, f"expected {expected.__name__}, got {_type_name(value)}")
        return value


def _type_name(value: Any) -> str:
    return "null" if value is None else type(value).__name__


def load_document(data: Any, document: str = "<document>") -> list[ClassDef]:
    """Load class trees from an already decoded document."""
    return DocumentLoader(document).load(data)


def load_file(path: str | Path) -> list[ClassDef]:
    """
    Read a JSON class document and load its class trees.

    Raises:
        DocumentError: If the file is not valid UTF-8 JSON or the document is malformed
        OSError: If the file cannot be read
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise DocumentError(str(path), "", f"invalid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise DocumentError(str(path), "", f"invalid encoding: {e}") from e
    return load_document(data, str(path))
