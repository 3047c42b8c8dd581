# wellbeing/services/ai_client.py

import logging
from typing import Optional, Protocol

import requests
from fastapi.concurrency import run_in_threadpool

from wellbeing.config import (
    AI_API_KEY,
    AI_API_URL,
    AI_ENABLED,
    AI_MODEL,
    AI_TIMEOUT_SECONDS,
)

logger = logging.getLogger(__name__)


class AIServiceError(Exception):
    """The chat-completion endpoint failed or answered with something unusable."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TextGenerator(Protocol):
    async def generate(
        self,
        prompt: str,
        system_prompt: str,
        max_tokens: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> str: ...


class ChatCompletionClient:
    """
    Client for an OpenAI-compatible chat-completion endpoint.

    The blocking HTTP call runs in the threadpool so the event loop is never
    held up while waiting for the model.
    """

    def __init__(
        self,
        api_url: str,
        api_key: str = "",
        model: str = AI_MODEL,
        max_tokens: int = 500,
        temperature: float = 0.3,
        timeout: float = AI_TIMEOUT_SECONDS,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = timeout

    def build_payload(self, prompt: str, system_prompt: str, max_tokens: Optional[int] = None) -> dict:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            "temperature": self.temperature,
            "max_tokens": max_tokens or self.max_tokens,
        }

    def _post(self, payload: dict, timeout: float) -> str:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        logger.info(f"Sending request to AI service using model {self.model}")

        try:
            response = requests.post(self.api_url, json=payload, headers=headers, timeout=timeout)
        except requests.RequestException as e:
            raise AIServiceError(f"AI service is unreachable: {e}") from e

        if response.status_code != 200:
            logger.error(f"AI API error: {response.status_code}, {response.text}")
            raise AIServiceError(f"AI service returned error: {response.status_code}", response.status_code)

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise AIServiceError(f"Unexpected AI response shape: {e}") from e

        return content or ""

    async def generate(
        self,
        prompt: str,
        system_prompt: str,
        max_tokens: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> str:
        payload = self.build_payload(prompt, system_prompt, max_tokens)
        return await run_in_threadpool(self._post, payload, timeout or self.timeout)


def get_text_generator() -> Optional[TextGenerator]:
    # FastAPI dependency: AI 가 꺼져 있거나 설정이 없으면 None
    if not AI_ENABLED or not AI_API_URL:
        return None
    return ChatCompletionClient(api_url=AI_API_URL, api_key=AI_API_KEY, model=AI_MODEL)
