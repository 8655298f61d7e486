"""One document through the whole flow: extract, generate, write."""

import logging
from pathlib import Path
from typing import Optional

from sftpro.client import OllamaClient
from sftpro.config import DEFAULT_TEXT_LIMIT
from sftpro.extraction import extract_document
from sftpro.models import Result
from sftpro.output import write_output

logger = logging.getLogger(__name__)


def generate_for_document(
    input_path: Path | str,
    model: str,
    client: OllamaClient,
    text_limit: int = DEFAULT_TEXT_LIMIT,
) -> Result:
    """Extract a document and ask the model for JSONL.

    Stops at the first failure; an extraction error is never sent to the
    model as if it were document text.
    """
    input_path = Path(input_path)

    logger.info(f"Extracting text from {input_path.name}...")
    extracted = extract_document(input_path, text_limit)
    if not extracted.ok:
        return extracted

    logger.info(f"Generating JSONL with Ollama model: {model}...")
    return client.generate(extracted.text, model)


def process_document(
    input_path: Path | str,
    output_path: Path | str,
    model: str,
    client: OllamaClient,
    text_limit: int = DEFAULT_TEXT_LIMIT,
) -> tuple[Result, Optional[Path]]:
    """Run the full pipeline and save the model output.

    Returns:
        The generation result and the written path (None on failure)
    """
    result = generate_for_document(input_path, model, client, text_limit)
    if not result.ok:
        return result, None

    written = write_output(result.text, output_path)
    logger.info(f"Successfully saved JSONL to {written}")
    return result, written
