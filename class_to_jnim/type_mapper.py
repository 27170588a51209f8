"""
Java to jnim type mapping.

Turns a raw Java type string into the type expression used in jnim
bindings. Unknown names pass through unchanged: there is no symbol table,
so anything that is not a primitive or a well-known name is assumed to be
resolvable by the binding layer as written.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .model import NAMESPACE_SEPARATOR, NESTING_SEPARATOR

ARRAY_MARKER = "[]"

JAVA_TO_NIM_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "void": "",
        "boolean": "jboolean",
        "byte": "jbyte",
        "char": "jchar",
        "short": "jshort",
        "int": "jint",
        "long": "jlong",
        "float": "jfloat",
        "double": "jdouble",
        "String": "string",
        "java.lang.String": "string",
        "Object": "JObject",
        "java.lang.Object": "JObject",
    }
)


def split_type_arguments(text: str) -> list[str]:
    """Split a generic argument list on commas that are not inside nested brackets.

    Examples:
        "String, Object" -> ["String", "Object"]
        "String, Map<K, V>" -> ["String", "Map<K, V>"]
    """
    args = []
    depth = 0
    start = 0
    for i, ch in enumerate(text):
        if ch == "<":
            depth += 1
        elif ch == ">":
            depth -= 1
        elif ch == "," and depth == 0:
            args.append(text[start:i].strip())
            start = i + 1
    args.append(text[start:].strip())
    return args


class TypeMapper:
    """Maps Java type strings to jnim type expressions."""

    def __init__(self, overrides: Mapping[str, str] | None = None):
        """
        Args:
            overrides: Extra Java name -> jnim name entries, consulted before
                the built-in table.
        """
        table = dict(JAVA_TO_NIM_TYPES)
        if overrides:
            table.update(overrides)
        self.table: Mapping[str, str] = MappingProxyType(table)

    def map_type(self, raw: str) -> str:
        """
        Map a Java type to its jnim equivalent.

        Args:
            raw: The Java type as written in the class document

        Returns:
            The jnim type expression, "" for void
        """
        clean_type = raw.strip()

        # Array of a generic type, e.g. List<String>[]
        if clean_type.endswith(ARRAY_MARKER) and ">" in clean_type:
            return self._map_array(clean_type)

        generic_suffix = ""
        start = clean_type.find("<")
        end = clean_type.rfind(">")
        if start > 0 and end > start:
            params = split_type_arguments(clean_type[start + 1 : end])
            generic_suffix = "[" + ", ".join(self.map_type(p) for p in params) + "]"
            clean_type = clean_type[:start].strip()

        if clean_type in self.table:
            return self.table[clean_type] + generic_suffix

        if clean_type.endswith(ARRAY_MARKER):
            return self._map_array(clean_type)

        if NESTING_SEPARATOR in clean_type:
            clean_type = clean_type.replace(NESTING_SEPARATOR, NAMESPACE_SEPARATOR)

        return clean_type + generic_suffix

    def _map_array(self, clean_type: str) -> str:
        element_type = clean_type[: -len(ARRAY_MARKER)].strip()
        return f"seq[{self.map_type(element_type)}]"


_default_mapper = TypeMapper()

map_type = _default_mapper.map_type
