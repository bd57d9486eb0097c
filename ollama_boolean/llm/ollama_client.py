"""
Ollama client (OpenAI-compatible endpoint) with token tracking
"""

import logging
import time
from typing import Any
from openai import OpenAI

from ollama_boolean.config import config

logger = logging.getLogger(__name__)


class OllamaClient:
    """Wrapper for a local Ollama server through its /v1 chat completions API"""

    def __init__(self, host: str | None = None, timeout: float | None = None):
        self.base_url = f"{host.rstrip('/')}/v1" if host else config.base_url()
        self.timeout = timeout if timeout is not None else config.OLLAMA_TIMEOUT

        # Ollama ignores the key but the SDK requires one.
        # max_retries=0: one request per invocation, failures surface immediately.
        self.client = OpenAI(
            api_key="ollama",
            base_url=self.base_url,
            timeout=self.timeout,
            max_retries=0,
        )

        # Token usage tracking
        self.total_tokens_input = 0
        self.total_tokens_output = 0
        self.request_count = 0

    def chat_completion(
        self,
        messages: list[dict[str, str]],
        model: str,
        temperature: float = 0.0,
        json_mode: bool = False
    ) -> dict[str, Any]:
        """
        Send chat completion request to Ollama.

        Args:
            messages: List of message dicts with 'role' and 'content'
            model: Ollama model name (e.g. "qwen3", "llama3.2")
            temperature: Sampling temperature, 0 for deterministic output
            json_mode: If True, constrain the response to a JSON object

        Returns:
            Dict with 'content', 'tokens_input', 'tokens_output', 'processing_time_ms'.
            'content' is the raw response text; callers do their own parsing.
        """
        start_time = time.time()

        kwargs: dict[str, Any] = {
            "model": model,
            "messages": messages,
            "temperature": temperature,
        }

        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        logger.debug("POST %s/chat/completions model=%s json_mode=%s", self.base_url, model, json_mode)
        response = self.client.chat.completions.create(**kwargs)

        # Track token usage
        usage = response.usage
        tokens_in = usage.prompt_tokens if usage else 0
        tokens_out = usage.completion_tokens if usage else 0
        self.total_tokens_input += tokens_in
        self.total_tokens_output += tokens_out
        self.request_count += 1

        content = response.choices[0].message.content

        return {
            "content": content,
            "tokens_input": tokens_in,
            "tokens_output": tokens_out,
            "processing_time_ms": int((time.time() - start_time) * 1000)
        }

    def get_usage_stats(self) -> dict[str, int]:
        """Get current session token usage statistics"""
        return {
            "total_tokens_input": self.total_tokens_input,
            "total_tokens_output": self.total_tokens_output,
            "total_tokens": self.total_tokens_input + self.total_tokens_output,
            "request_count": self.request_count
        }
