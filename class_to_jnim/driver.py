"""
Conversion of class documents on disk.

Each document is loaded, rendered and written on its own; when converting
a directory, a failing document is recorded in its result and the others
are still converted.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import GeneratorConfig
from .emitter import BindingEmitter
from .loader import DocumentError, load_file
from .writer import AtomicWriter, BindingWriteError


@dataclass
class ConversionResult:
    """Outcome of converting one class document.

    Attributes:
        source: The input document
        output: Where the bindings were written (None if nothing was written)
        class_count: Number of top-level classes found in the document
        binding_count: Number of jclass declarations generated, nested classes included
        error: Failure message, None on success
    """

    source: Path
    output: Path | None = None
    class_count: int = 0
    binding_count: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def written(self) -> bool:
        return self.output is not None


class Converter:
    """Loads class documents, generates their bindings and writes them out."""

    def __init__(self, config: GeneratorConfig | None = None, generation_comment: str = ""):
        self.config = config or GeneratorConfig()
        self.emitter = BindingEmitter(self.config)
        self.writer = AtomicWriter()
        self.generation_comment = generation_comment

    def output_path_for(self, source: Path) -> Path:
        return source.with_suffix(self.config.output_extension)

    def convert_file(self, source: Path, output: Path | None = None) -> ConversionResult:
        """
        Convert a single document.

        Documents without any class produce no output file.

        Raises:
            DocumentError: If the document is malformed
            BindingWriteError: If the generated bindings fail validation
            OSError: If reading or writing fails
        """
        source = Path(source)
        classes = load_file(source)
        result = ConversionResult(source=source, class_count=len(classes))
        if not classes:
            return result

        output = Path(output) if output is not None else self.output_path_for(source)
        code = self.emitter.emit_document(classes, self.generation_comment)
        self.writer.write(output, code)
        result.output = output
        result.binding_count = sum(1 for cls in classes for _ in cls.walk())
        return result

    def iter_documents(self, directory: Path) -> list[Path]:
        """All documents under a directory, recursively, in a stable order."""
        return sorted(p for p in Path(directory).rglob(self.config.input_pattern) if p.is_file())

    def convert_directory(self, directory: Path) -> list[ConversionResult]:
        """
        Convert every document found under a directory.

        Each output file is written next to its document.

        Returns:
            One result per document, failures included
        """
        results = []
        for source in self.iter_documents(directory):
            try:
                results.append(self.convert_file(source))
            except (DocumentError, BindingWriteError, OSError) as e:
                results.append(ConversionResult(source=source, error=str(e)))
        return results


def convert_file(path: str | Path, output: str | Path | None = None, config: GeneratorConfig | None = None) -> ConversionResult:
    """Convert a single class document to jnim bindings."""
    return Converter(config).convert_file(Path(path), Path(output) if output is not None else None)


def convert_directory(path: str | Path, config: GeneratorConfig | None = None) -> list[ConversionResult]:
    """Convert every class document under a directory to jnim bindings."""
    return Converter(config).convert_directory(Path(path))
