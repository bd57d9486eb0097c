"""
Shared fixtures: a fake LLM client standing in for the Ollama server
"""

from typing import Any

import pytest


class FakeLLM:
    """Records calls and replies with a canned content string or raises"""

    def __init__(self, content: Any = '{"result": 1}', error: Exception | None = None):
        self.content = content
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def chat_completion(self, messages, model, temperature=0.0, json_mode=False):
        self.calls.append({
            "messages": messages,
            "model": model,
            "temperature": temperature,
            "json_mode": json_mode,
        })
        if self.error is not None:
            raise self.error
        return {
            "content": self.content,
            "tokens_input": 42,
            "tokens_output": 7,
            "processing_time_ms": 5,
        }

    def get_usage_stats(self) -> dict[str, int]:
        return {"request_count": len(self.calls)}


@pytest.fixture
def fake_llm():
    """Factory fixture: fake_llm('{"result": 0}') or fake_llm(error=...)"""
    def _make(content: Any = '{"result": 1}', error: Exception | None = None) -> FakeLLM:
        return FakeLLM(content=content, error=error)
    return _make
