"""SFT Studio - a TUI for turning one document at a time into JSONL."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Iterable

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.message import Message
from textual.widgets import (
    Button,
    DirectoryTree,
    Footer,
    Header,
    Input,
    Label,
    Log,
    Rule,
    Select,
    Static,
    TextArea,
)

from sftpro.client import OllamaClient
from sftpro.config import Settings
from sftpro.extraction import extract_document
from sftpro.extractors import supported_extensions
from sftpro.models import Result, file_extension
from sftpro.output import ensure_jsonl_suffix, write_output
from sftpro.scanner import list_models


class DocumentTree(DirectoryTree):
    """Directory browser that only shows folders and supported documents."""

    def filter_paths(self, paths: Iterable[Path]) -> Iterable[Path]:
        extensions = set(supported_extensions())
        return [
            path
            for path in paths
            if not path.name.startswith(".")
            and (path.is_dir() or file_extension(path).lower() in extensions)
        ]


class SftStudio(App):
    """Pick a document and a model, generate, review, save."""

    # Messages for thread-safe communication
    class StatusChanged(Message):
        def __init__(self, status: str) -> None:
            self.status = status
            super().__init__()

    class GenerationFinished(Message):
        def __init__(self, result: Result) -> None:
            self.result = result
            super().__init__()

    CSS = """
    Screen {
        background: $surface;
    }

    #main-container {
        layout: horizontal;
        height: 100%;
    }

    #left-panel {
        width: 40;
        background: $surface-darken-1;
        border-right: solid $primary-darken-2;
        padding: 1;
    }

    #center-panel {
        width: 1fr;
        padding: 1;
    }

    #right-panel {
        width: 32;
        background: $surface-darken-1;
        border-left: solid $primary-darken-2;
        padding: 1;
    }

    #status {
        height: auto;
        padding: 1;
        background: $boost;
        border: round $secondary;
        margin-bottom: 1;
    }

    #models-warning {
        color: $error;
        margin-bottom: 1;
    }

    #action-buttons {
        layout: horizontal;
        height: 3;
        margin-bottom: 1;
    }

    #action-buttons Button {
        margin-right: 1;
    }

    #output-area {
        height: 1fr;
        border: round $primary-darken-1;
    }

    #log-panel {
        height: 10;
        border: round $primary-darken-2;
        background: $surface-darken-2;
    }

    .section-title {
        text-style: bold;
        color: $text;
        margin-bottom: 1;
    }

    DirectoryTree {
        height: 100%;
        border: round $primary-darken-1;
        background: $surface-darken-2;
    }
    """

    BINDINGS = [
        Binding("ctrl+g", "generate", "Generate", show=True),
        Binding("ctrl+s", "save", "Save JSONL", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    TITLE = "SFT Pro Doc Extractor"
    SUB_TITLE = "Document to JSONL"

    def __init__(self, client: OllamaClient, settings: Settings) -> None:
        super().__init__()
        self.client = client
        self.settings = settings
        self.models = list_models(settings.manifests_dir)
        self._in_flight = False

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Container(id="main-container"):
            # Left panel - document, model and actions
            with Vertical(id="left-panel"):
                yield Label("DOCUMENT", classes="section-title")
                yield Input(placeholder="Path to a .pdf or .docx file...", id="document-input")
                yield Label("Ollama Model")
                if self.models:
                    yield Select(
                        [(model, model) for model in self.models],
                        id="model-select",
                        allow_blank=False,
                    )
                else:
                    yield Static(
                        "Warning: No Ollama models found. Please install a model first.",
                        id="models-warning",
                    )
                    yield Select([], id="model-select", prompt="No models found", disabled=True)
                with Horizontal(id="action-buttons"):
                    yield Button("Generate", id="generate-btn", variant="success")
                yield Rule()
                yield Static("Status: Ready", id="status")
                yield Rule()
                yield Label("Save As")
                yield Input(placeholder="dataset.jsonl", id="save-input")
                yield Button("Save JSONL", id="save-btn", variant="primary")

            # Center panel - generated output and log
            with Vertical(id="center-panel"):
                yield Label("GENERATED JSONL OUTPUT", classes="section-title")
                yield TextArea(id="output-area")
                yield Label("SYSTEM LOG", classes="section-title")
                yield Log(id="log-panel", highlight=True, auto_scroll=True)

            # Right panel - document browser
            with Vertical(id="right-panel"):
                yield Label("FILE BROWSER", classes="section-title")
                yield DocumentTree(Path.cwd(), id="dir-tree")

        yield Footer()

    def on_mount(self) -> None:
        self._log(f"Found {len(self.models)} Ollama model(s)")
        self._log("Choose a document and press Generate")

    def _log(self, message: str) -> None:
        """Add a message to the system log."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.query_one("#log-panel", Log).write_line(f"[{timestamp}] {message}")

    def _set_status(self, status: str) -> None:
        self.query_one("#status", Static).update(f"Status: {status}")
        self._log(status)

    def _selected_model(self) -> str | None:
        value = self.query_one("#model-select", Select).value
        return value if isinstance(value, str) and value else None

    # Message handlers for thread-safe updates
    def on_sft_studio_status_changed(self, event: StatusChanged) -> None:
        self._set_status(event.status)

    def on_sft_studio_generation_finished(self, event: GenerationFinished) -> None:
        self._in_flight = False
        self.query_one("#generate-btn", Button).disabled = False

        result = event.result
        if result.ok:
            self.query_one("#output-area", TextArea).load_text(result.text)
            self._set_status("Done")
        else:
            self._set_status(f"Error ({result.failure.value}): {result.text}")

    def on_directory_tree_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        document = Path(event.path)
        self.query_one("#document-input", Input).value = str(document)
        self.query_one("#save-input", Input).value = str(document.with_suffix(".jsonl"))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "generate-btn":
            self.action_generate()
        elif event.button.id == "save-btn":
            self.action_save()

    def action_generate(self) -> None:
        """Start generation for the chosen document."""
        if self._in_flight:
            self._log("A request is already running - wait for it to finish")
            return

        source = self.query_one("#document-input", Input).value.strip()
        if not source:
            self._log("ERROR: No document selected")
            return
        path = Path(source)
        if not path.is_file():
            self._log(f"ERROR: File not found: {source}")
            return

        model = self._selected_model()
        if model is None:
            self._log("ERROR: No Ollama model selected")
            return

        self._in_flight = True
        self.query_one("#generate-btn", Button).disabled = True
        self.run_generation(path, model)

    def action_save(self) -> None:
        """Save the (possibly edited) output to the chosen file."""
        text = self.query_one("#output-area", TextArea).text
        if not text.strip():
            self._log("Nothing to save yet")
            return

        target = self.query_one("#save-input", Input).value.strip()
        if not target:
            self._log("ERROR: No output file specified")
            return

        try:
            written = write_output(text, ensure_jsonl_suffix(target))
        except OSError as e:
            self._set_status(f"Error saving: {e}")
            return
        self._set_status(f"Saved to {written.name}")

    @work(exclusive=True, thread=True)
    def run_generation(self, path: Path, model: str) -> None:
        """Extract and generate in a background thread."""
        self.post_message(self.StatusChanged(f"Extracting text from {path.name}..."))
        extracted = extract_document(path, self.settings.text_limit)
        if not extracted.ok:
            self.post_message(self.GenerationFinished(extracted))
            return

        self.post_message(self.StatusChanged(f"Generating JSONL with Ollama model: {model}..."))
        result = self.client.generate(extracted.text, model)
        self.post_message(self.GenerationFinished(result))


def main(client: OllamaClient, settings: Settings) -> None:
    """Run the studio TUI."""
    app = SftStudio(client, settings)
    app.run()
