"""HTTP client for the local Ollama generate endpoint."""

import logging
from typing import Optional

import requests

from sftpro.config import DEFAULT_OLLAMA_URL
from sftpro.errors import DeserializationError, ServerStatusError, SftProError, TransportError
from sftpro.models import InferenceRequest, InferenceResponse, Result

logger = logging.getLogger(__name__)

PROMPT_PREAMBLE = """You are an expert in preparing data for Supervised Fine-Tuning (SFT).
Your task is to convert the following document text into a JSONL format.
Each line in the output must be a valid JSON object.
Extract the most important information from the document and represent it as key-value pairs in the JSON objects.
The goal is to create a dataset that could be used to fine-tune a model to understand and extract information from similar documents.

Here is the document text:
---
"""

PROMPT_POSTAMBLE = """
---

Produce the JSONL output now."""


def build_prompt(text: str) -> str:
    """Wrap document text in the SFT conversion instructions.

    The text is embedded verbatim between the two ``---`` marker lines.
    """
    return f"{PROMPT_PREAMBLE}{text}{PROMPT_POSTAMBLE}"


def _unreachable(exc: Exception) -> str:
    return f"Error connecting to Ollama: {exc}. Make sure Ollama is running."


class OllamaClient:
    """Client for Ollama's non-streaming /api/generate endpoint.

    The caller owns the ``requests.Session``; one client can be reused for
    any number of calls since no per-call state is kept.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        url: str = DEFAULT_OLLAMA_URL,
        timeout: Optional[float] = None,
    ):
        self.session = session if session is not None else requests.Session()
        self.url = url
        self.timeout = timeout

    def complete(self, text: str, model: str) -> InferenceResponse:
        """Send one generate request and return the parsed reply.

        Raises:
            TransportError: the server could not be reached
            ServerStatusError: the server answered with a non-200 status
            DeserializationError: the body was not the expected JSON shape
        """
        request = InferenceRequest(model=model, prompt=build_prompt(text))
        logger.debug(f"POST {self.url} model={model} prompt={len(request.prompt):,} chars")

        try:
            response = self.session.post(self.url, json=request.to_dict(), timeout=self.timeout)
        except requests.RequestException as exc:
            raise TransportError(_unreachable(exc)) from exc

        if response.status_code != 200:
            raise ServerStatusError(response.status_code, response.text)

        try:
            return InferenceResponse.from_dict(response.json())
        except ValueError as exc:
            raise DeserializationError(_unreachable(exc)) from exc

    def generate(self, text: str, model: str) -> Result:
        """Turn document text into JSONL with the given model.

        The model output is returned verbatim; it is not checked to be
        valid JSONL.
        """
        try:
            reply = self.complete(text, model)
        except SftProError as exc:
            logger.debug(f"Generation failed ({exc.kind.value}): {exc}")
            return Result.failed(exc.kind, str(exc))
        return Result.success(reply.response)

    def generate_jsonl(self, text: str, model: str) -> str:
        """Like generate(), but always returns a plain string.

        On failure the string is the error message.
        """
        return self.generate(text, model).text

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "OllamaClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def create_client(url: str = DEFAULT_OLLAMA_URL, timeout: Optional[float] = None) -> OllamaClient:
    """Build a client with a fresh session, for process-lifetime use."""
    return OllamaClient(requests.Session(), url=url, timeout=timeout)
