"""Google Gemini API wrapper with error handling.

The client is constructed explicitly and injected where it is needed, so
tests can hand in a fake with the same ``complete`` coroutine.
"""

import logging

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from config import Settings
from services.errors import ConfigurationError, LLMError

logger = logging.getLogger(__name__)

_ROLE_MAP = {"user": "user", "assistant": "model", "model": "model"}


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence, if present."""
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


def to_contents(messages: list[dict[str, str]]) -> tuple[str | None, list[types.Content]]:
    """Split chat-style messages into a system instruction and Gemini contents."""
    system_parts: list[str] = []
    contents: list[types.Content] = []
    for message in messages:
        role = message.get("role", "user")
        content = message.get("content", "")
        if role == "system":
            system_parts.append(content)
            continue
        if role not in _ROLE_MAP:
            raise ValueError(f"Unsupported message role: {role}")
        contents.append(types.Content(role=_ROLE_MAP[role], parts=[types.Part(text=content)]))
    return ("\n\n".join(system_parts) or None), contents


class LLMClient:
    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        temperature: float = 0.3,
        max_output_tokens: int = 2048,
    ):
        if not api_key:
            raise ValueError("api_key is required")
        self._client = genai.Client(api_key=api_key)
        self.model = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens

    @classmethod
    def from_settings(cls, settings: Settings) -> "LLMClient | None":
        if not settings.gemini_api_key:
            if settings.llm_strict:
                raise ConfigurationError("LLM_STRICT is set but GEMINI_API_KEY is missing")
            logger.warning("No GEMINI_API_KEY set - LLM enhancement disabled")
            return None
        return cls(
            api_key=settings.gemini_api_key,
            model=settings.llm_model,
            temperature=settings.llm_temperature,
            max_output_tokens=settings.llm_max_output_tokens,
        )

    async def complete(
        self,
        messages: list[dict[str, str]],
        *,
        temperature: float | None = None,
        max_output_tokens: int | None = None,
    ) -> str:
        """Send chat messages and return the reply text."""
        system_instruction, contents = to_contents(messages)
        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=self.temperature if temperature is None else temperature,
            max_output_tokens=max_output_tokens or self.max_output_tokens,
        )

        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=contents,
                config=config,
            )
        except genai_errors.APIError as e:
            logger.error("Gemini API error (%s): %s", e.code, e.message)
            raise LLMError(f"LLM provider error: {e.message}", provider_status=e.code) from e

        text = (response.text or "").strip()
        if not text:
            raise LLMError("LLM returned an empty response")
        return text
