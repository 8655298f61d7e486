"""Protocol definitions for extensible components."""

from sftpro.protocols.extractor import TextExtractor

__all__ = ["TextExtractor"]
