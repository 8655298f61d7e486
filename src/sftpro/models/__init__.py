"""Data models for SFT Pro."""

from sftpro.models.document import ExtractedText, SourceDocument, file_extension
from sftpro.models.inference import InferenceRequest, InferenceResponse
from sftpro.models.result import FailureKind, Result

__all__ = [
    "SourceDocument",
    "ExtractedText",
    "file_extension",
    "InferenceRequest",
    "InferenceResponse",
    "FailureKind",
    "Result",
]
