"""
LLM client factory.

One client per process, built on first use from the configured Ollama host.
"""

from __future__ import annotations

from typing import Any, Protocol

from ollama_boolean.config import config


class LLMClient(Protocol):
    def chat_completion(
        self,
        messages: list[dict[str, str]],
        model: str,
        temperature: float = 0.0,
        json_mode: bool = False,
    ) -> dict[str, Any]: ...

    def get_usage_stats(self) -> dict[str, int]: ...


_client: LLMClient | None = None
_host: str | None = None


def llm() -> LLMClient:
    global _client, _host

    host = config.host()
    if _client is not None and _host == host:
        return _client

    from .ollama_client import OllamaClient

    _client = OllamaClient(host=host)
    _host = host
    return _client
