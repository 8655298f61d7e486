"""FastMCP server implementation for SFT Pro."""

from pathlib import Path

from mcp.server.fastmcp import FastMCP

from sftpro.client import OllamaClient
from sftpro.config import Settings
from sftpro.extraction import extract_text as extract_document_text
from sftpro.output import ensure_jsonl_suffix, write_output
from sftpro.pipeline import generate_for_document
from sftpro.scanner import list_models as scan_models


def create_mcp_server(client: OllamaClient, settings: Settings) -> FastMCP:
    """Create an MCP server backed by one Ollama client.

    Args:
        client: Client used for every generate call (process lifetime)
        settings: Text limit and manifests location

    Returns:
        Configured FastMCP server instance
    """
    mcp = FastMCP(
        name="sftpro",
    )

    @mcp.tool()
    def list_models() -> str:
        """List Ollama models installed on this machine.

        Returns:
            One "family:tag" identifier per line
        """
        models = scan_models(settings.manifests_dir)

        if not models:
            return "No Ollama models found. Install one first (e.g. 'ollama pull llama3')."

        return "\n".join(models)

    @mcp.tool()
    def extract_text(path: str) -> str:
        """Extract the text of a PDF or DOCX document.

        Args:
            path: Path to the document on the server's filesystem

        Returns:
            Document text, capped to the configured character limit,
            or an error message
        """
        return extract_document_text(path, settings.text_limit)

    @mcp.tool()
    def generate_jsonl(path: str, model: str, output: str = "") -> str:
        """Convert a document into JSONL fine-tuning records with a local model.

        Args:
            path: Path to the PDF or DOCX document
            model: Ollama model identifier such as "llama3:latest"
            output: Optional file to save the JSONL to (".jsonl" is appended
                if missing)

        Returns:
            The generated JSONL text, or an error message
        """
        result = generate_for_document(Path(path), model, client, settings.text_limit)

        if not result.ok:
            return f"[{result.failure.value}] {result.text}"

        if output:
            written = write_output(result.text, ensure_jsonl_suffix(output))
            return f"Saved to {written}\n\n{result.text}"

        return result.text

    return mcp
