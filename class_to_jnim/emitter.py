"""
jnim binding emitter.

Renders class model trees as jnim declarations:

    import jnim

    jclass a.b.Outer* of JVMObject:
      proc size*(): jint
      NAME*: string {.`static`.}

    jclass a.b.Outer.Inner* as OuterInner of JVMObject:

Nested classes follow their enclosing class, depth-first, in declaration
order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

from . import __version__
from .config import GeneratorConfig
from .model import NAMESPACE_SEPARATOR, NESTING_SEPARATOR, ClassDef, FieldDef, MethodDef
from .type_mapper import TypeMapper

TEMPLATE_DIR = Path(__file__).parent / "templates" / "nim"

# Superclass names that mean "no explicit superclass"
UNIVERSAL_BASE_TYPES = frozenset({"Object", "java.lang.Object"})


class BindingEmitter:
    """Generates jnim binding text from ClassDef trees."""

    def __init__(self, config: GeneratorConfig | None = None):
        self.config = config or GeneratorConfig()
        self.type_mapper = TypeMapper(self.config.type_overrides)
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self.prefix_template = self.jinja_env.get_template("prefix.nim.jinja2")
        self.class_template = self.jinja_env.get_template("class.nim.jinja2")

    def emit_document(self, classes: list[ClassDef], generation_comment: str = "") -> str:
        """
        Generate the bindings for every class of one document.

        The import line is written once, before the first top-level class
        that has a package.

        Args:
            classes: Top-level classes in document order
            generation_comment: Text for the "Generated by" header; only
                used when add_generation_comment is enabled

        Returns:
            The binding source text
        """
        parts = []
        if self.config.add_generation_comment:
            parts.append(
                self.prefix_template.render(
                    VERSION=__version__,
                    GENERATION_COMMENT=generation_comment or "class_to_jnim",
                )
            )

        import_pending = True
        for cls in classes:
            parts.append(self.emit(cls, import_header=import_pending))
            if cls.package_name:
                import_pending = False
        return "".join(parts)

    def emit(self, cls: ClassDef, import_header: bool = True) -> str:
        """
        Generate the bindings for a class followed by all of its nested classes.

        Args:
            cls: The class to render
            import_header: Whether this class may carry the import line.
                Nested classes never do.

        Returns:
            The binding source text
        """
        out = self.class_template.render(self._prepare_class_context(cls, import_header))
        for nested in cls.nested_classes:
            out += self.emit(nested, import_header=False)
        return out

    def _prepare_class_context(self, cls: ClassDef, import_header: bool) -> dict[str, Any]:
        """
        Prepare the template context for a class.

        Args:
            cls: The class definition
            import_header: Whether the import line may be written

        Returns:
            Dictionary of template variables
        """
        wants_import = import_header and not cls.is_nested and bool(cls.package_name)
        qualified_name, alias = self.resolve_names(cls)

        return {
            "IMPORT_MODULE": self.config.import_module if wants_import else "",
            "CLASS_NAME": qualified_name,
            "ALIAS": alias,
            "EXTENDS": self._extends(cls),
            "METHODS": [self.method_declaration(m) for m in cls.public_methods],
            "FIELDS": [self.field_declaration(f) for f in cls.public_fields],
        }

    @staticmethod
    def resolve_names(cls: ClassDef) -> tuple[str, str]:
        """
        Compute the qualified jnim name of a class and its alias.

        A nested class such as "Outer$Inner" in package "a.b" is declared as
        "a.b.Outer.Inner" with the alias "OuterInner". Other classes get no
        alias.

        Returns:
            (qualified_name, alias) with alias "" when there is none
        """
        full_name = cls.full_name
        alias = ""
        if NESTING_SEPARATOR in full_name:
            parts = full_name.split(NESTING_SEPARATOR)
            enclosing = parts[0].split(NAMESPACE_SEPARATOR)[-1]
            alias = enclosing + parts[-1]
            full_name = full_name.replace(NESTING_SEPARATOR, NAMESPACE_SEPARATOR)

        if cls.package_name:
            full_name = cls.package_name + NAMESPACE_SEPARATOR + full_name
        return full_name, alias

    def _extends(self, cls: ClassDef) -> str:
        # Superclass names are written as-is, without type mapping
        if cls.super_class and cls.super_class not in UNIVERSAL_BASE_TYPES:
            return cls.super_class
        return self.config.base_object_type

    def method_declaration(self, method: MethodDef) -> str:
        """Render one method line, e.g. "proc bar*(s: string): jint"."""
        params = ", ".join(f"{p.name}: {self.type_mapper.map_type(p.type_name)}" for p in method.params)
        decl = f"proc {method.name}*({params})"
        if not method.returns_void:
            decl += f": {self.type_mapper.map_type(method.return_type)}"
        if method.is_static:
            decl += f" {self.config.static_pragma}"
        return decl

    def field_declaration(self, field: FieldDef) -> str:
        """Render one field line, e.g. "count*: jint"."""
        decl = f"{field.name}*: {self.type_mapper.map_type(field.field_type)}"
        if field.is_static:
            decl += f" {self.config.static_pragma}"
        return decl
