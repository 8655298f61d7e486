"""Runtime settings, read from the environment (and a .env file if present)."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_OLLAMA_URL = "http://localhost:11434/api/generate"
DEFAULT_TEXT_LIMIT = 16000

# Relative to the Ollama models root
MANIFESTS_SUBPATH = Path("manifests") / "registry.ollama.ai" / "library"


def default_manifests_dir() -> Path:
    """Where Ollama keeps installed model manifests.

    Honors OLLAMA_MODELS the same way the Ollama server does, falling back
    to ~/.ollama/models.
    """
    models_root = os.getenv("OLLAMA_MODELS")
    if models_root:
        return Path(models_root).expanduser() / MANIFESTS_SUBPATH
    return Path.home() / ".ollama" / "models" / MANIFESTS_SUBPATH


@dataclass
class Settings:
    ollama_url: str = DEFAULT_OLLAMA_URL
    text_limit: int = DEFAULT_TEXT_LIMIT
    request_timeout: Optional[float] = None  # None = no timeout, as requests does by default
    manifests_dir: Path = field(default_factory=default_manifests_dir)


def _text_limit(raw: Optional[str]) -> int:
    if not raw:
        return DEFAULT_TEXT_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"SFTPRO_TEXT_LIMIT must be a whole number, got {raw!r}") from None
    if limit < 0:
        raise ValueError(f"SFTPRO_TEXT_LIMIT must not be negative, got {limit}")
    return limit


def _timeout(raw: Optional[str]) -> Optional[float]:
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"SFTPRO_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if timeout <= 0:
        raise ValueError(f"SFTPRO_TIMEOUT must be positive, got {raw}")
    return timeout


def load_settings() -> Settings:
    """Build Settings from environment variables.

    Raises:
        ValueError: if SFTPRO_TEXT_LIMIT or SFTPRO_TIMEOUT is malformed
    """
    load_dotenv()

    return Settings(
        ollama_url=os.getenv("OLLAMA_URL", DEFAULT_OLLAMA_URL),
        text_limit=_text_limit(os.getenv("SFTPRO_TEXT_LIMIT")),
        request_timeout=_timeout(os.getenv("SFTPRO_TIMEOUT")),
        manifests_dir=default_manifests_dir(),
    )
