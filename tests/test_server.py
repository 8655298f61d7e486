import asyncio

import pytest

from conftest import FakeSession
from sftpro.client import OllamaClient
from sftpro.config import Settings
from sftpro.server import create_mcp_server


def call(mcp, name: str, **arguments) -> str:
    """Run a tool and flatten its result to text."""
    result = asyncio.run(mcp.call_tool(name, arguments))
    # mcp 1.x returns either content blocks or (content blocks, structured output)
    if isinstance(result, tuple):
        result = result[0]
    if isinstance(result, dict):
        return result["result"]
    return "".join(block.text for block in result)


@pytest.fixture
def server_for(manifests):
    def _make(session: FakeSession, **settings):
        settings.setdefault("manifests_dir", manifests)
        return create_mcp_server(OllamaClient(session), Settings(**settings))

    return _make


def test_exposes_pipeline_tools(server_for):
    mcp = server_for(FakeSession())
    tools = asyncio.run(mcp.list_tools())
    assert {tool.name for tool in tools} == {"list_models", "extract_text", "generate_jsonl"}


def test_list_models(server_for):
    text = call(server_for(FakeSession()), "list_models")
    assert set(text.splitlines()) == {"llama3:latest", "mistral:v1", "mistral:v2"}


def test_list_models_none_installed(server_for, tmp_path):
    mcp = server_for(FakeSession(), manifests_dir=tmp_path / "missing")
    assert call(mcp, "list_models").startswith("No Ollama models found.")


def test_extract_text_respects_limit(server_for, make_docx):
    doc = make_docx(["abcdefghij"])
    mcp = server_for(FakeSession(), text_limit=4)
    assert call(mcp, "extract_text", path=str(doc)) == "abcd"


def test_extract_text_unsupported(server_for, tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("x")
    assert call(server_for(FakeSession()), "extract_text", path=str(path)) == "Unsupported file type: txt"


def test_generate_returns_model_output(server_for, make_docx, ok_session):
    doc = make_docx(["Lease agreement"])
    text = call(server_for(ok_session), "generate_jsonl", path=str(doc), model="llama3:latest")
    assert text == '{"a":1}\n'
    assert ok_session.calls[0]["json"]["model"] == "llama3:latest"


def test_generate_saves_with_jsonl_suffix(server_for, make_docx, ok_session, tmp_path):
    doc = make_docx(["Lease agreement"])
    target = tmp_path / "exports" / "lease"

    text = call(server_for(ok_session), "generate_jsonl", path=str(doc), model="m:t", output=str(target))

    saved = tmp_path / "exports" / "lease.jsonl"
    assert saved.read_text(encoding="utf-8") == '{"a":1}\n'
    assert text.startswith(f"Saved to {saved.absolute()}")
    assert text.endswith('{"a":1}\n')


def test_generate_failure_is_tagged(server_for, make_docx, refused_session, tmp_path):
    doc = make_docx(["Lease agreement"])
    target = tmp_path / "lease.jsonl"

    text = call(server_for(refused_session), "generate_jsonl", path=str(doc), model="m:t", output=str(target))

    assert text.startswith("[transport] Error connecting to Ollama")
    assert not target.exists()


def test_generate_unsupported_input_is_tagged(server_for, tmp_path):
    path = tmp_path / "slides.pptx"
    path.write_text("x")
    session = FakeSession()

    text = call(server_for(session), "generate_jsonl", path=str(path), model="m:t")

    assert text == "[unsupported_input] Unsupported file type: pptx"
    assert session.calls == []
