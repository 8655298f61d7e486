"""Core data models for input documents and their extracted text."""

from dataclasses import dataclass
from pathlib import Path


def file_extension(path: Path | str) -> str:
    """Text after the last dot of the file name, or "" when there is none.

    Unlike ``Path.suffix`` this treats ``.pdf`` as a file with extension "pdf".
    """
    name = Path(path).name
    return name.rpartition(".")[2] if "." in name else ""


@dataclass(frozen=True)
class SourceDocument:
    """A document on disk, identified by its path and extension."""

    path: Path
    extension: str  # as written on the file, without the dot

    @classmethod
    def from_path(cls, path: Path | str) -> "SourceDocument":
        path = Path(path)
        return cls(path=path, extension=file_extension(path))

    @property
    def kind(self) -> str:
        """Lowercased extension used for extractor dispatch."""
        return self.extension.lower()


@dataclass(frozen=True)
class ExtractedText:
    """Text pulled out of a document, already capped to the character limit."""

    text: str
    source: Path
    truncated: bool = False
