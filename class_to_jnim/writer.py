"""
Atomic file writer for generated bindings.

Ensures that an interrupted or rejected write never leaves a partially
written binding file behind.
"""

from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path


class BindingWriteError(Exception):
    """Raised when generated bindings fail validation before being written."""

    pass


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_nim: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_nim: Optional validation function for the generated text
        """
        self._validate_nim = validate_nim or self._default_validate_nim

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            BindingWriteError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate_nim(content)

            temp_path.replace(path)

        except Exception:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup
            raise

    def _default_validate_nim(self, content: str) -> None:
        """Default structural check of jnim bindings.

        Every top-level line must be a comment, an import or a jclass header.

        Raises:
            BindingWriteError: If validation fails
        """
        if "jclass " not in content:
            raise BindingWriteError("Generated bindings have no class declarations")

        for lineno, line in enumerate(content.splitlines(), start=1):
            if not line.strip() or line[0].isspace() or line.startswith(("#", "import ")):
                continue
            if not (line.startswith("jclass ") and line.endswith(":")):
                raise BindingWriteError(f"Unexpected top-level line {lineno}: {line!r}")
