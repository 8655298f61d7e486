"""Extractor for Word (.docx) documents."""

import logging
from pathlib import Path
from typing import Iterator

import docx
from docx.table import Table
from docx.text.paragraph import Paragraph

from sftpro.errors import ExtractionError
from sftpro.models import file_extension

logger = logging.getLogger(__name__)


class DocxExtractor:
    """Extractor for .docx files, backed by python-docx.

    Produces one line per paragraph and per table row (cells separated by
    tabs), in body order. Header text comes first and footer text last;
    headers and footers linked to the previous section are not repeated.
    """

    extensions = frozenset({"docx"})

    def can_handle(self, path: Path) -> bool:
        """Check if the file has a .docx extension."""
        return file_extension(path).lower() in self.extensions

    def extract(self, path: Path) -> str:
        """Return the document text.

        Raises:
            ExtractionError: if the file is missing or not a valid .docx
        """
        try:
            with path.open("rb") as fh:
                document = docx.Document(fh)
                lines = list(self._lines(document))
        except Exception as exc:  # noqa: BLE001 - python-docx surfaces zip, xml and key errors
            raise ExtractionError(f"Error extracting text from DOCX: {exc}") from exc

        logger.debug(f"Read {len(lines)} line(s) from {path.name}")
        return "".join(line + "\n" for line in lines)

    def _lines(self, document) -> Iterator[str]:
        for section in document.sections:
            if not section.header.is_linked_to_previous:
                yield from self._block_lines(section.header.iter_inner_content())

        yield from self._block_lines(document.iter_inner_content())

        for section in document.sections:
            if not section.footer.is_linked_to_previous:
                yield from self._block_lines(section.footer.iter_inner_content())

    def _block_lines(self, blocks) -> Iterator[str]:
        for block in blocks:
            if isinstance(block, Paragraph):
                yield block.text  # run and hyperlink text
            elif isinstance(block, Table):
                for row in block.rows:
                    yield "\t".join(cell.text for cell in row.cells)
