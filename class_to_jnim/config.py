"""
Configuration for the binding generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class GeneratorConfig:
    """Configuration options for binding generation."""

    # Module imported at the top of every document that declares a package
    import_module: str = "jnim"

    # Superclass used when a class has no explicit one
    base_object_type: str = "JVMObject"

    # Annotation appended to static methods and fields
    static_pragma: str = "{.`static`.}"

    # Extension of generated files
    output_extension: str = ".nim"

    # Files picked up when converting a directory
    input_pattern: str = "*.json"

    # Add a "Generated by" comment at the top of each file
    add_generation_comment: bool = False

    # Extra Java -> Nim type mappings, checked before the built-in table
    type_overrides: dict[str, str] = field(default_factory=dict)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "import_module": self.import_module,
            "base_object_type": self.base_object_type,
            "static_pragma": self.static_pragma,
            "output_extension": self.output_extension,
            "input_pattern": self.input_pattern,
            "add_generation_comment": self.add_generation_comment,
            "type_overrides": self.type_overrides,
        }
