"""Per-format text extractors for SFT Pro."""

from pathlib import Path
from typing import Optional

from sftpro.extractors.docx_extractor import DocxExtractor
from sftpro.extractors.pdf_extractor import PdfExtractor
from sftpro.protocols import TextExtractor

# Registry of available extractors
_EXTRACTORS: list[TextExtractor] = [
    PdfExtractor(),
    DocxExtractor(),
]


def get_extractor(path: Path | str) -> Optional[TextExtractor]:
    """Find an extractor that can handle the given file.

    Args:
        path: Path to the document

    Returns:
        A TextExtractor instance that can handle the file, or None
    """
    file_path = Path(path)
    for extractor in _EXTRACTORS:
        if extractor.can_handle(file_path):
            return extractor
    return None


def register_extractor(extractor: TextExtractor) -> None:
    """Register a custom extractor (for plugins/extensions).

    Args:
        extractor: An object implementing the TextExtractor protocol
    """
    _EXTRACTORS.append(extractor)


def supported_extensions() -> list[str]:
    """All extensions some registered extractor accepts, sorted."""
    return sorted({ext for extractor in _EXTRACTORS for ext in extractor.extensions})


__all__ = [
    "get_extractor",
    "register_extractor",
    "supported_extensions",
    "PdfExtractor",
    "DocxExtractor",
]
