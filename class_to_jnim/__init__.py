"""Java class model to jnim binding generator

Converts the JSON class documents produced by a Java class extractor into
Nim jnim binding declarations.
"""

__version__ = "1.0.0"

from .config import GeneratorConfig
from .driver import ConversionResult, Converter, convert_directory, convert_file
from .emitter import BindingEmitter
from .loader import DocumentError, DocumentLoader, load_document, load_file
from .model import ClassDef, FieldDef, MethodDef, ParamDef
from .type_mapper import TypeMapper, map_type
from .writer import AtomicWriter, BindingWriteError

__all__ = [
    "BindingEmitter",
    "TypeMapper",
    "map_type",
    "DocumentLoader",
    "DocumentError",
    "load_document",
    "load_file",
    "ClassDef",
    "MethodDef",
    "ParamDef",
    "FieldDef",
    "GeneratorConfig",
    "Converter",
    "ConversionResult",
    "convert_file",
    "convert_directory",
    "AtomicWriter",
    "BindingWriteError",
]
