import asyncio

import pytest
import requests

from wellbeing.services.ai_client import AIServiceError, ChatCompletionClient

API_URL = "https://ai.example.com/v1/chat/completions"


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=""):
        self.status_code = status_code
        self._body = body
        self.text = text

    def json(self):
        if self._body is None:
            raise ValueError("No JSON object could be decoded")
        return self._body


def reply(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


@pytest.fixture
def posted(monkeypatch):
    """Replace requests.post; returns the list of recorded calls and a setter for the response."""
    calls = []
    state = {"response": FakeResponse(body=reply("ok"))}

    def fake_post(url, json=None, headers=None, timeout=None):
        calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if isinstance(state["response"], Exception):
            raise state["response"]
        return state["response"]

    monkeypatch.setattr(requests, "post", fake_post)

    def respond_with(response):
        state["response"] = response

    return calls, respond_with


def make_client(**kwargs):
    return ChatCompletionClient(api_url=API_URL, api_key="secret", model="test-model", timeout=4, **kwargs)


def test_payload_shape_and_headers(posted):
    calls, _ = posted

    content = asyncio.run(make_client().generate("How am I doing?", "Be kind."))

    assert content == "ok"
    call = calls[0]
    assert call["url"] == API_URL
    assert call["json"] == {
        "model": "test-model",
        "messages": [
            {"role": "system", "content": "Be kind."},
            {"role": "user", "content": "How am I doing?"},
        ],
        "temperature": 0.3,
        "max_tokens": 500,
    }
    assert call["headers"]["Authorization"] == "Bearer secret"
    assert call["headers"]["Content-Type"] == "application/json"
    assert call["timeout"] == 4


def test_no_auth_header_without_key(posted):
    calls, _ = posted
    client = ChatCompletionClient(api_url=API_URL)

    asyncio.run(client.generate("hi", "sys"))

    assert "Authorization" not in calls[0]["headers"]


def test_overrides_reach_the_request(posted):
    calls, _ = posted

    asyncio.run(make_client().generate("Hello", "sys", max_tokens=5, timeout=1.5))

    assert calls[0]["json"]["max_tokens"] == 5
    assert calls[0]["timeout"] == 1.5


def test_non_200_raises_with_status_code(posted):
    _, respond_with = posted
    respond_with(FakeResponse(status_code=503, body={"error": "busy"}, text="busy"))

    with pytest.raises(AIServiceError) as exc_info:
        asyncio.run(make_client().generate("hi", "sys"))

    assert exc_info.value.status_code == 503
    assert "503" in str(exc_info.value)


@pytest.mark.parametrize("response", [
    FakeResponse(body={}),
    FakeResponse(body=None, text="<html>oops</html>"),
    FakeResponse(body={"choices": []}),
    FakeResponse(body={"choices": [{"message": None}]}),
])
def test_malformed_body_raises(posted, response):
    _, respond_with = posted
    respond_with(response)

    with pytest.raises(AIServiceError) as exc_info:
        asyncio.run(make_client().generate("hi", "sys"))

    assert exc_info.value.status_code is None


def test_empty_content_becomes_empty_string(posted):
    _, respond_with = posted
    respond_with(FakeResponse(body=reply(None)))

    assert asyncio.run(make_client().generate("hi", "sys")) == ""


def test_connection_error_is_wrapped(posted):
    _, respond_with = posted
    respond_with(requests.ConnectionError("connection refused"))

    with pytest.raises(AIServiceError) as exc_info:
        asyncio.run(make_client().generate("hi", "sys"))

    assert isinstance(exc_info.value.__cause__, requests.RequestException)
    assert "unreachable" in str(exc_info.value)


def test_timeout_is_wrapped(posted):
    _, respond_with = posted
    respond_with(requests.Timeout("read timed out"))

    with pytest.raises(AIServiceError):
        asyncio.run(make_client().generate("hi", "sys"))


def test_default_timeout_is_a_few_seconds(posted):
    calls, _ = posted

    asyncio.run(ChatCompletionClient(api_url=API_URL).generate("hi", "sys"))

    assert calls[0]["timeout"] == 5
