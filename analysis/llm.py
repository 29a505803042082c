"""
Language model capability used by the analysis engine.

The engine only needs ``complete(prompt) -> str``. ``OpenAIChatModel``
provides it over the OpenAI Responses API; tests substitute any object with
the same method.
"""
from __future__ import annotations

import logging
import os
from typing import Any, List, Optional, Protocol

from django.conf import settings
from openai import OpenAI

from .exceptions import AnalysisFailedError

logger = logging.getLogger(__name__)


class ChatModel(Protocol):
    def complete(self, prompt: str) -> str:
        ...


def _setting(env_key: str, default: Any) -> Any:
    return os.environ.get(env_key) or getattr(settings, env_key, default)


class OpenAIChatModel:
    """
    Text completion through the OpenAI Responses API.

    Any client or transport failure is raised as ``AnalysisFailedError``;
    timeouts are the client's responsibility and surface the same way.
    """

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
        timeout: Optional[float] = None,
        client: Any = None,
    ):
        self.api_key = api_key or _setting("OPENAI_API_KEY", "")
        if client is None and not self.api_key:
            raise AnalysisFailedError("OPENAI_API_KEY is not configured.")

        self.model = model or _setting("OPENAI_MODEL", "gpt-4o-mini")
        self.temperature = float(
            temperature if temperature is not None else _setting("OPENAI_TEMPERATURE", 0.2)
        )
        self.max_output_tokens = int(
            max_output_tokens
            if max_output_tokens is not None
            else _setting("OPENAI_MAX_OUTPUT_TOKENS", 800)
        )
        self.timeout = float(
            timeout if timeout is not None else _setting("OPENAI_TIMEOUT_SECONDS", 60)
        )
        self.client = client or OpenAI(api_key=self.api_key, timeout=self.timeout)

    def complete(self, prompt: str) -> str:
        try:
            response = self.client.responses.create(
                model=self.model,
                input=prompt,
                temperature=self.temperature,
                max_output_tokens=self.max_output_tokens,
            )
        except Exception as exc:  # noqa: BLE001
            logger.error("OpenAI request failed (model=%s): %s", self.model, exc)
            raise AnalysisFailedError(f"OpenAI request failed: {exc}") from exc

        text = self._extract_text(response)
        if not text:
            raise AnalysisFailedError("Received empty response from OpenAI.")
        return text

    @staticmethod
    def _extract_text(response: Any) -> str:
        text = getattr(response, "output_text", "") or ""
        if text:
            return text

        # Older SDK versions do not expose ``output_text``
        parts: List[str] = []
        for item in getattr(response, "output", []) or []:
            for block in getattr(item, "content", []) or []:
                if getattr(block, "type", None) == "output_text":
                    parts.append(getattr(block, "text", ""))
        return "".join(parts)


def get_chat_model() -> ChatModel:
    """
    Build the configured model capability.
    """
    return OpenAIChatModel()
