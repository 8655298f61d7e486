"""Discovery of locally installed Ollama models."""

import logging
from pathlib import Path
from typing import Optional

from sftpro.config import default_manifests_dir

logger = logging.getLogger(__name__)


def list_models(manifests_dir: Optional[Path | str] = None) -> list[str]:
    """Scan the Ollama manifests directory for installed models.

    Each sub-directory is a model family and each entry inside it a tag.
    Nothing is checked against the running server, so a stale or partially
    pulled manifest is listed like any other.

    Args:
        manifests_dir: Directory to scan. Defaults to the
            ``registry.ollama.ai/library`` manifests folder.

    Returns:
        Model identifiers like ``"llama3:latest"``, in filesystem order.
        Empty when the directory does not exist.
    """
    root = Path(manifests_dir) if manifests_dir is not None else default_manifests_dir()

    if not root.is_dir():
        logger.debug(f"No manifests directory at {root}")
        return []

    models = []
    for family in root.iterdir():
        if not family.is_dir():
            continue
        for tag in family.iterdir():
            models.append(f"{family.name}:{tag.name}")
    return models
