"""
Class model node definitions.

These nodes describe one class-metadata document: classes, their methods,
fields and nested classes. They are built once by the loader and only read
afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field

NESTING_SEPARATOR = "$"
NAMESPACE_SEPARATOR = "."

VOID_TYPE = "void"


@dataclass
class ParamDef:
    """A method parameter."""

    type_name: str
    name: str


@dataclass
class MethodDef:
    """A method declaration."""

    name: str
    return_type: str = VOID_TYPE
    params: list[ParamDef] = field(default_factory=list)
    is_public: bool = False
    is_static: bool = False

    @property
    def returns_void(self) -> bool:
        return self.return_type == VOID_TYPE


@dataclass
class FieldDef:
    """A field declaration."""

    name: str
    field_type: str
    is_public: bool = False
    is_static: bool = False


@dataclass
class ClassDef:
    """A class or interface declaration and its nested classes."""

    name: str
    package_name: str = ""
    full_name: str = ""
    super_class: str = ""
    is_interface: bool = False
    methods: list[MethodDef] = field(default_factory=list)
    fields: list[FieldDef] = field(default_factory=list)
    nested_classes: list[ClassDef] = field(default_factory=list)

    # 0 for document entries, parent depth + 1 for nested classes
    depth: int = 0

    @property
    def is_nested(self) -> bool:
        return self.depth > 0

    @property
    def public_methods(self) -> list[MethodDef]:
        return [m for m in self.methods if m.is_public]

    @property
    def public_fields(self) -> list[FieldDef]:
        return [f for f in self.fields if f.is_public]

    def walk(self):
        """Yield this class and every nested class, depth-first."""
        yield self
        for nested in self.nested_classes:
            yield from nested.walk()
