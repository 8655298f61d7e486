"""Exception types raised inside the pipeline.

Each carries the FailureKind it maps to; the public entry points catch
SftProError and hand back a tagged Result instead.
"""

from sftpro.models.result import FailureKind


class SftProError(Exception):
    """Base exception for pipeline failures."""

    kind: FailureKind = FailureKind.EXTRACTION


class UnsupportedFileTypeError(SftProError):
    """Raised when no extractor handles the file's extension."""

    kind = FailureKind.UNSUPPORTED_INPUT

    def __init__(self, extension: str):
        super().__init__(f"Unsupported file type: {extension}")
        self.extension = extension


class ExtractionError(SftProError):
    """Raised when a supported document cannot be read."""

    kind = FailureKind.EXTRACTION


class TransportError(SftProError):
    """Raised when the Ollama server cannot be reached."""

    kind = FailureKind.TRANSPORT


class ServerStatusError(SftProError):
    """Raised when Ollama answers with a non-200 status."""

    kind = FailureKind.PROTOCOL

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Error: {status_code} - {body}")
        self.status_code = status_code
        self.body = body


class DeserializationError(SftProError):
    """Raised when the response body does not have the expected shape."""

    kind = FailureKind.DESERIALIZATION
