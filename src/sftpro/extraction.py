"""Document-to-text extraction with a hard character cap."""

import logging
from pathlib import Path

from sftpro.config import DEFAULT_TEXT_LIMIT
from sftpro.errors import ExtractionError, SftProError, UnsupportedFileTypeError
from sftpro.extractors import get_extractor
from sftpro.models import ExtractedText, Result, SourceDocument

logger = logging.getLogger(__name__)


def truncate(text: str, limit: int = DEFAULT_TEXT_LIMIT) -> str:
    """Cut text to at most ``limit`` characters.

    A plain front slice: it may split a word in two.

    Raises:
        ValueError: if ``limit`` is negative
    """
    if limit < 0:
        raise ValueError(f"text limit must not be negative, got {limit}")
    return text[:limit]


def read_document(path: Path | str, limit: int = DEFAULT_TEXT_LIMIT) -> ExtractedText:
    """Extract and cap the text of a document.

    Raises:
        UnsupportedFileTypeError: no extractor handles the extension
        ExtractionError: the document could not be read
        ValueError: ``limit`` is negative
    """
    if limit < 0:
        raise ValueError(f"text limit must not be negative, got {limit}")

    document = SourceDocument.from_path(path)
    extractor = get_extractor(document.path)
    if extractor is None:
        raise UnsupportedFileTypeError(document.extension)

    try:
        text = extractor.extract(document.path)
    except SftProError:
        raise
    except Exception as exc:  # noqa: BLE001 - registered extractors may raise anything
        raise ExtractionError(
            f"Error extracting text from {document.kind.upper()}: {exc}"
        ) from exc

    capped = truncate(text, limit)
    if len(capped) < len(text):
        logger.info(f"Truncated {document.path.name} from {len(text):,} to {limit:,} characters")
    return ExtractedText(text=capped, source=document.path, truncated=len(capped) < len(text))


def extract_document(path: Path | str, limit: int = DEFAULT_TEXT_LIMIT) -> Result:
    """Extract text from a PDF or DOCX file as a tagged Result.

    Never raises for unsupported or unreadable documents; the failure kind
    tells the two apart. A negative ``limit`` is a ValueError.
    """
    try:
        extracted = read_document(path, limit)
    except SftProError as exc:
        logger.debug(f"Extraction failed for {path}: {exc}")
        return Result.failed(exc.kind, truncate(str(exc), limit))
    return Result.success(extracted.text)


def extract_text(path: Path | str, limit: int = DEFAULT_TEXT_LIMIT) -> str:
    """Extract text from a PDF or DOCX file.

    On failure the returned string is an error message such as
    ``"Unsupported file type: txt"`` rather than document text.
    """
    return extract_document(path, limit).text
