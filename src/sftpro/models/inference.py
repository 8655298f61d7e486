"""Request and response shapes for the Ollama generate endpoint."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class InferenceRequest:
    """Body posted to /api/generate."""

    model: str
    prompt: str
    stream: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"model": self.model, "prompt": self.prompt, "stream": self.stream}


@dataclass(frozen=True)
class InferenceResponse:
    """Non-streaming reply from /api/generate.

    Ollama adds timing and context fields to the body; anything beyond the
    four fields below is ignored.
    """

    model: str
    created_at: str
    response: str
    done: bool

    @classmethod
    def from_dict(cls, data: Any) -> "InferenceResponse":
        """Build from a decoded JSON body.

        Raises:
            ValueError: if the body is not an object or lacks a field
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        missing = [k for k in ("model", "created_at", "response", "done") if k not in data]
        if missing:
            raise ValueError(f"missing field(s) in response: {', '.join(missing)}")
        if not isinstance(data["response"], str):
            raise ValueError("field 'response' is not a string")
        return cls(
            model=str(data["model"]),
            created_at=str(data["created_at"]),
            response=data["response"],
            done=bool(data["done"]),
        )
