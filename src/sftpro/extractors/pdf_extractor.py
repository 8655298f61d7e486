"""Extractor for PDF documents."""

import logging
from pathlib import Path

from pypdf import PdfReader

from sftpro.errors import ExtractionError
from sftpro.models import file_extension

logger = logging.getLogger(__name__)


class PdfExtractor:
    """Extractor for PDF files, backed by pypdf."""

    extensions = frozenset({"pdf"})

    def can_handle(self, path: Path) -> bool:
        """Check if the file has a .pdf extension."""
        return file_extension(path).lower() in self.extensions

    def extract(self, path: Path) -> str:
        """Concatenate the text of every page, in page order.

        Args:
            path: Path to the PDF file

        Returns:
            Page texts joined by newlines

        Raises:
            ExtractionError: if the file is missing, encrypted or corrupt
        """
        try:
            with path.open("rb") as fh:
                reader = PdfReader(fh)
                pages = [page.extract_text() or "" for page in reader.pages]
        except Exception as exc:  # noqa: BLE001 - pypdf raises a wide range of errors on bad input
            raise ExtractionError(f"Error extracting text from PDF: {exc}") from exc

        logger.debug(f"Read {len(pages)} page(s) from {path.name}")
        return "\n".join(pages)
