import asyncio

from conftest import FakeGenerator
from wellbeing.schemas.chat import ChatMessage
from wellbeing.services.chat_responder import (
    CHAT_SYSTEM_PROMPT,
    RESPONSES,
    ChatResponder,
    build_chat_prompt,
    classify_message,
    local_response,
)


def test_classify_message():
    assert classify_message("hello there") == "greeting"
    assert classify_message("I feel GREAT") == "feelingGood"
    assert classify_message("so sad") == "feelingBad"
    assert classify_message("I am overwhelmed") == "stress"
    assert classify_message("any advice?") == "recommendations"
    assert classify_message("thanks a lot") == "thankYou"
    assert classify_message("Tell me about the weather") == "default"
    assert classify_message("") == "default"


def test_local_response_comes_from_category(rng):
    assert local_response("hello there", rng) in RESPONSES["greeting"]
    assert local_response("Tell me about the weather", rng) in RESPONSES["default"]


def test_build_chat_prompt_includes_history():
    history = [ChatMessage(role="user", content="hi"), ChatMessage(role="assistant", content="hello!")]

    prompt = build_chat_prompt("I'm stressed", history)

    assert prompt.startswith("Previous conversation:\nuser: hi\nassistant: hello!")
    assert prompt.endswith("User message: I'm stressed")


def test_respond_without_generator(rng):
    reply = asyncio.run(ChatResponder(rng=rng).respond("hello"))

    assert reply in RESPONSES["greeting"]


def test_respond_prefers_generator():
    generator = FakeGenerator(reply="Try a short walk.")

    reply = asyncio.run(ChatResponder(generator).respond("any advice?"))

    assert reply == "Try a short walk."
    assert generator.calls[0]["system_prompt"] == CHAT_SYSTEM_PROMPT


def test_respond_falls_back_on_error_or_blank(failing_generator, rng):
    reply = asyncio.run(ChatResponder(failing_generator, rng).respond("thank you"))
    assert reply in RESPONSES["thankYou"]

    reply = asyncio.run(ChatResponder(FakeGenerator(reply="   "), rng).respond("thank you"))
    assert reply in RESPONSES["thankYou"]


def test_chat_is_always_available():
    assert ChatResponder().is_available() is True
