"""Tagged results returned by the extraction and inference entry points."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FailureKind(str, Enum):
    """Why an operation did not produce usable text."""

    UNSUPPORTED_INPUT = "unsupported_input"
    EXTRACTION = "extraction"
    TRANSPORT = "transport"
    PROTOCOL = "protocol"
    DESERIALIZATION = "deserialization"


@dataclass(frozen=True)
class Result:
    """Either success text or a failure kind with a readable message.

    ``text`` holds the produced value on success and the message on failure,
    so callers that only want a string can always use it.
    """

    text: str
    failure: Optional[FailureKind] = None

    @classmethod
    def success(cls, text: str) -> "Result":
        return cls(text=text)

    @classmethod
    def failed(cls, kind: FailureKind, message: str) -> "Result":
        return cls(text=message, failure=kind)

    @property
    def ok(self) -> bool:
        return self.failure is None

    def __str__(self) -> str:
        return self.text
