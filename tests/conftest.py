import json
from pathlib import Path

import docx
import pytest
import requests
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = ""):
        self.status_code = status_code
        self.text = text

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Stands in for requests.Session; records posts and replays one outcome."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[dict] = []
        self.closed = False

    def post(self, url, json=None, timeout=None):
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


def ollama_body(response: str, model: str = "llama3:latest") -> str:
    return json.dumps(
        {"model": model, "created_at": "2024-05-01T10:00:00Z", "response": response, "done": True}
    )


@pytest.fixture
def make_pdf(tmp_path):
    def _make(pages: list[str], name: str = "doc.pdf") -> Path:
        path = tmp_path / name
        pdf = canvas.Canvas(str(path), pagesize=A4)
        for text in pages:
            pdf.setFont("Helvetica", 12)
            pdf.drawString(72, 750, text)
            pdf.showPage()
        pdf.save()
        return path

    return _make


@pytest.fixture
def make_docx(tmp_path):
    def _make(paragraphs: list[str], table: list[list[str]] | None = None, name: str = "doc.docx") -> Path:
        path = tmp_path / name
        document = docx.Document()
        for text in paragraphs:
            document.add_paragraph(text)
        if table:
            grid = document.add_table(rows=len(table), cols=len(table[0]))
            for r, row in enumerate(table):
                for c, value in enumerate(row):
                    grid.cell(r, c).text = value
        document.save(str(path))
        return path

    return _make


@pytest.fixture
def ok_session():
    return FakeSession(FakeResponse(200, ollama_body('{"a":1}\n')))


@pytest.fixture
def refused_session():
    return FakeSession(error=requests.ConnectionError("[Errno 111] Connection refused"))


@pytest.fixture
def manifests(tmp_path):
    """An Ollama manifests tree with llama3:latest, mistral:v1 and mistral:v2."""
    root = tmp_path / "manifests"
    for family, tags in {"llama3": ["latest"], "mistral": ["v1", "v2"]}.items():
        (root / family).mkdir(parents=True)
        for tag in tags:
            (root / family / tag).write_text("{}")
    return root
