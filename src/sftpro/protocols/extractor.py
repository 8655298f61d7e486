"""Protocol for document text extractors."""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class TextExtractor(Protocol):
    """Protocol for per-format text extractors.

    Implementations handle one document format (pdf, docx, ...).
    Uses structural subtyping - no inheritance required.
    """

    @property
    def extensions(self) -> frozenset[str]:
        """Lowercased extensions (without the dot) this extractor reads."""
        ...

    def can_handle(self, path: Path) -> bool:
        """Check if this extractor can read the given file."""
        ...

    def extract(self, path: Path) -> str:
        """Return the full text of the document.

        Raises ExtractionError if the file cannot be read.
        """
        ...
