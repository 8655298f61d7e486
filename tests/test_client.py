import requests

from conftest import FakeResponse, FakeSession, ollama_body
from sftpro.client import PROMPT_POSTAMBLE, PROMPT_PREAMBLE, OllamaClient, build_prompt
from sftpro.config import DEFAULT_OLLAMA_URL
from sftpro.extraction import extract_text
from sftpro.models import FailureKind


def test_success_returns_response_verbatim(ok_session):
    client = OllamaClient(ok_session)
    assert client.generate_jsonl("doc", "llama3:latest") == '{"a":1}\n'
    assert client.generate("doc", "llama3:latest").ok


def test_request_body_and_url(ok_session):
    OllamaClient(ok_session).generate("some text", "mistral:v1")
    (call,) = ok_session.calls
    assert call["url"] == DEFAULT_OLLAMA_URL
    assert call["json"] == {"model": "mistral:v1", "prompt": build_prompt("some text"), "stream": False}
    assert call["timeout"] is None


def test_custom_url_and_timeout(ok_session):
    OllamaClient(ok_session, url="http://gpu-box:11434/api/generate", timeout=30).generate("x", "m:t")
    assert ok_session.calls[0]["url"] == "http://gpu-box:11434/api/generate"
    assert ok_session.calls[0]["timeout"] == 30


def test_malformed_model_output_passes_through():
    session = FakeSession(FakeResponse(200, ollama_body("not json at all\n{broken")))
    assert OllamaClient(session).generate_jsonl("doc", "m:t") == "not json at all\n{broken"


def test_unknown_response_fields_are_ignored():
    body = '{"model":"m","created_at":"t","response":"ok","done":true,"total_duration":123,"context":[1,2]}'
    session = FakeSession(FakeResponse(200, body))
    assert OllamaClient(session).generate_jsonl("doc", "m") == "ok"


def test_connection_refused_does_not_raise(refused_session):
    result = OllamaClient(refused_session).generate("doc", "llama3:latest")
    assert not result.ok
    assert result.failure is FailureKind.TRANSPORT
    assert "Error connecting to Ollama" in result.text
    assert "Make sure Ollama is running." in result.text


def test_timeout_is_transport_failure():
    session = FakeSession(error=requests.Timeout("read timed out"))
    assert OllamaClient(session).generate("doc", "m").failure is FailureKind.TRANSPORT


def test_non_200_is_protocol_failure():
    session = FakeSession(FakeResponse(404, '{"error":"model \'nope\' not found"}'))
    result = OllamaClient(session).generate("doc", "nope")
    assert result.failure is FailureKind.PROTOCOL
    assert result.text == "Error: 404 - {\"error\":\"model 'nope' not found\"}"


def test_invalid_json_body_is_deserialization_failure():
    session = FakeSession(FakeResponse(200, "<html>proxy error</html>"))
    result = OllamaClient(session).generate("doc", "m")
    assert result.failure is FailureKind.DESERIALIZATION
    assert "Make sure Ollama is running." in result.text


def test_missing_field_is_deserialization_failure():
    session = FakeSession(FakeResponse(200, '{"model":"m","done":true}'))
    result = OllamaClient(session).generate("doc", "m")
    assert result.failure is FailureKind.DESERIALIZATION
    assert "response" in result.text


def test_context_manager_closes_session(ok_session):
    with OllamaClient(ok_session) as client:
        client.generate("doc", "m")
    assert ok_session.closed


def test_prompt_wraps_text_verbatim():
    text = "Line one\n  indented {\"json\": true}\n"
    prompt = build_prompt(text)
    assert prompt == PROMPT_PREAMBLE + text + PROMPT_POSTAMBLE
    assert PROMPT_PREAMBLE.endswith("Here is the document text:\n---\n")
    assert prompt.endswith("---\n\nProduce the JSONL output now.")


def test_prompt_from_two_page_pdf(make_pdf):
    path = make_pdf(["Alpha section on safety", "Beta section on budgets"])
    text = extract_text(path)
    prompt = build_prompt(text)

    start = prompt.index("---\n") + len("---\n")
    end = prompt.rindex("\n---\n")
    assert prompt[start:end] == text
    assert "Alpha section on safety" in prompt[start:end]
    assert "Beta section on budgets" in prompt[start:end]
