"""CLI entry point for SFT Pro."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from sftpro.client import create_client
from sftpro.config import Settings, load_settings
from sftpro.extraction import extract_document
from sftpro.output import default_output_path, invalid_jsonl_lines, write_output
from sftpro.pipeline import process_document
from sftpro.scanner import list_models

logger = logging.getLogger(__name__)


def choose_model(models: list[str], ask: Optional[Callable[[str], str]] = None) -> Optional[str]:
    """Pick a model the way the desktop app did.

    No models -> None. One model -> that model. Several -> numbered prompt.

    Args:
        models: Discovered model identifiers
        ask: Prompt function (defaults to input)

    Returns:
        The chosen identifier, or None when nothing usable was chosen
    """
    if not models:
        logger.error("Error: No Ollama models found. Please install a model first (e.g., 'ollama pull llama3').")
        return None

    if len(models) == 1:
        logger.info(f"Found one model, using '{models[0]}' by default.")
        return models[0]

    print("Multiple Ollama models found. Please select one:")
    for index, model in enumerate(models, 1):
        print(f"  {index}: {model}")

    ask = ask or input
    try:
        choice = int(ask("Enter number: ").strip())
    except (ValueError, EOFError):
        choice = 0

    if 1 <= choice <= len(models):
        return models[choice - 1]

    logger.error("Invalid selection. Aborting.")
    return None


def generate(source: str, output: Optional[str], model: Optional[str], settings: Settings, check: bool = False) -> None:
    """Convert one document into a JSONL file.

    Args:
        source: Path to a .pdf or .docx document
        output: Output path (default: next to the input, .jsonl suffix)
        model: Ollama model; scanned and chosen interactively if omitted
        settings: Runtime settings
        check: Warn about output lines that are not JSON objects
    """
    input_path = Path(source)
    if not input_path.is_file():
        logger.error("Error: Input file '-i' not specified or does not exist.")
        sys.exit(1)

    if model is None:
        model = choose_model(list_models(settings.manifests_dir))
        if model is None:
            sys.exit(1)

    output_path = Path(output) if output else default_output_path(input_path)

    with create_client(settings.ollama_url, settings.request_timeout) as client:
        try:
            result, written = process_document(input_path, output_path, model, client, settings.text_limit)
        except OSError as e:
            logger.error(f"Error: Cannot write {output_path}: {e}")
            sys.exit(1)

    if not result.ok:
        logger.error(result.text)
        sys.exit(1)

    if check:
        bad = invalid_jsonl_lines(result.text)
        if bad:
            shown = ", ".join(str(n) for n in bad[:10])
            logger.warning(f"Warning: {len(bad)} line(s) are not JSON objects (lines {shown})")
        else:
            logger.info("All lines are valid JSON objects.")


def models(settings: Settings) -> None:
    """Print installed Ollama models, one per line."""
    found = list_models(settings.manifests_dir)
    if not found:
        logger.error(f"No Ollama models found in {settings.manifests_dir}")
        sys.exit(1)

    for model in found:
        print(model)


def extract(source: str, output: Optional[str], settings: Settings) -> None:
    """Print (or save) the capped text of a document.

    Args:
        source: Path to a .pdf or .docx document
        output: Optional text file to write instead of printing
        settings: Runtime settings
    """
    result = extract_document(source, settings.text_limit)
    if not result.ok:
        logger.error(result.text)
        sys.exit(1)

    if output:
        try:
            written = write_output(result.text, output)
        except OSError as e:
            logger.error(f"Error: Cannot write {output}: {e}")
            sys.exit(1)
        logger.info(f"Saved {len(result.text):,} characters to {written}")
    else:
        print(result.text)


def serve(settings: Settings, transport: str = "stdio") -> None:
    """Start the MCP tool server.

    Args:
        settings: Runtime settings
        transport: Transport protocol (stdio or sse)
    """
    # Import here to avoid loading MCP unless needed
    from sftpro.server import create_mcp_server

    from typing import cast, Literal

    logger.info(f"Serving SFT Pro tools via {transport}")
    with create_client(settings.ollama_url, settings.request_timeout) as client:
        mcp = create_mcp_server(client, settings)
        mcp.run(transport=cast(Literal["stdio", "sse", "streamable-http"], transport))


def studio(settings: Settings) -> None:
    """Launch the studio TUI."""
    from sftpro.studio import main as studio_main

    with create_client(settings.ollama_url, settings.request_timeout) as client:
        studio_main(client, settings)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sftpro",
        description="SFT Pro - turn PDF/DOCX documents into JSONL fine-tuning data with Ollama",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command")

    # generate command
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a JSONL file from a document",
    )
    generate_parser.add_argument("-i", "--input", help="Input document file (PDF, DOCX)")
    generate_parser.add_argument("-o", "--output", help="Output JSONL file path")
    generate_parser.add_argument("-m", "--model", help="Ollama model to use")
    generate_parser.add_argument(
        "--check",
        action="store_true",
        help="Report output lines that are not valid JSON objects",
    )

    # models command
    subparsers.add_parser(
        "models",
        help="List installed Ollama models",
    )

    # extract command
    extract_parser = subparsers.add_parser(
        "extract",
        help="Show the text that would be sent to the model",
    )
    extract_parser.add_argument("-i", "--input", required=True, help="Input document file (PDF, DOCX)")
    extract_parser.add_argument("-o", "--output", help="Write the text to this file instead")

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start the MCP tool server",
    )
    serve_parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )

    # studio command
    subparsers.add_parser(
        "studio",
        help="Launch the interactive studio (default when no command is given)",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )
    try:
        settings = load_settings()
    except ValueError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    if args.command == "generate":
        generate(args.input or "", args.output, args.model, settings, check=args.check)
    elif args.command == "models":
        models(settings)
    elif args.command == "extract":
        extract(args.input, args.output, settings)
    elif args.command == "serve":
        serve(settings, args.transport)
    else:
        studio(settings)


if __name__ == "__main__":
    main()
