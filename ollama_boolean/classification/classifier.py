"""
Yes/No LLM Classifier
Asks an Ollama model a question and maps its answer to 0, 1 or 2
"""

import json
import logging
import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from ollama_boolean.config import config
from ollama_boolean.llm import LLMClient, llm as default_llm
from .prompts import construct_messages

logger = logging.getLogger(__name__)


class Classification(IntEnum):
    """The three answers the backend may give"""

    NEGATIVE = 0
    AFFIRMATIVE = 1
    INDETERMINATE = 2

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_value(cls, value: Any) -> "Classification | None":
        """
        Strict lookup: only the ints 0, 1 and 2 are accepted.

        bool is an int subclass and 1.0 == 1, so both are rejected explicitly.
        Strings are never coerced.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


_LABELS = {
    Classification.NEGATIVE: "No/Negative",
    Classification.AFFIRMATIVE: "Yes/Positive",
    Classification.INDETERMINATE: "Unknown/Subjective",
}


@dataclass(frozen=True)
class ClassificationRequest:
    """One request to the backend, built fresh per call"""

    prompt: str
    model: str
    temperature: float = 0.0
    output_format: str = "json"

    @property
    def messages(self) -> list[dict[str, str]]:
        return construct_messages(self.prompt)

    @property
    def json_mode(self) -> bool:
        return self.output_format == "json"


@dataclass
class ClassificationResult:
    """Result of one classification; classification is None when unavailable"""

    classification: Classification | None
    model: str
    error: str = ""
    raw_content: str | None = None

    # Metadata
    tokens_input: int = 0
    tokens_output: int = 0
    processing_time_ms: int = 0

    @property
    def is_available(self) -> bool:
        return self.classification is not None

    @property
    def value(self) -> int | None:
        return int(self.classification) if self.classification is not None else None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "result": self.value,
            "label": self.classification.label if self.classification is not None else None,
            "model": self.model,
            "error": self.error,
            "tokens_input": self.tokens_input,
            "tokens_output": self.tokens_output,
            "processing_time_ms": self.processing_time_ms
        }


class MalformedResponseError(ValueError):
    """Backend replied, but not with a usable {"result": 0|1|2} object"""


def parse_result(content: Any) -> Classification:
    """
    Parse the backend's response text into a Classification.

    Raises:
        MalformedResponseError: content is not a JSON object, has no
            "result" field, or "result" is not exactly 0, 1 or 2
    """
    if not isinstance(content, str):
        raise MalformedResponseError(f"expected response text, got {type(content).__name__}")

    try:
        data = json.loads(content)
    except (json.JSONDecodeError, RecursionError) as e:
        raise MalformedResponseError(f"response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedResponseError(f"expected a JSON object, got {type(data).__name__}")
    if "result" not in data:
        raise MalformedResponseError("response has no 'result' field")

    classification = Classification.from_value(data["result"])
    if classification is None:
        raise MalformedResponseError(f"invalid result value: {data['result']!r}")
    return classification


class YesNoClassifier:
    """
    Single-call yes/no/unknown classifier.

    classify() never raises: backend errors and malformed replies both come
    back as an unavailable ClassificationResult with the reason in .error.
    """

    def __init__(self, llm: LLMClient | None = None):
        """
        Initialize classifier.

        Args:
            llm: Client to use; the process-wide Ollama client if omitted
        """
        self._llm = llm

    @property
    def llm(self) -> LLMClient:
        """Lazy load LLM client"""
        if self._llm is None:
            self._llm = default_llm()
        return self._llm

    def classify(self, prompt: str, model: str | None = None) -> ClassificationResult:
        """
        Classify a question.

        Args:
            prompt: The question (already validated as non-blank by the caller)
            model: Ollama model name, defaults to OLLAMA_MODEL or "qwen3"

        Returns:
            ClassificationResult; check .is_available before using .classification
        """
        start_time = time.time()
        request = ClassificationRequest(prompt=prompt, model=model or config.model())

        try:
            llm_response = self.llm.chat_completion(
                messages=request.messages,
                model=request.model,
                temperature=request.temperature,
                json_mode=request.json_mode
            )
        except Exception as e:
            logger.error(f"Backend request failed for model '{request.model}': {e}")
            return ClassificationResult(
                classification=None,
                model=request.model,
                error=str(e) or e.__class__.__name__,
                processing_time_ms=int((time.time() - start_time) * 1000)
            )

        content = llm_response.get("content")
        processing_time = int((time.time() - start_time) * 1000)

        try:
            classification = parse_result(content)
        except MalformedResponseError as e:
            logger.warning(f"Malformed response from '{request.model}': {e} (content={content!r})")
            return ClassificationResult(
                classification=None,
                model=request.model,
                error=str(e),
                raw_content=content if isinstance(content, str) else None,
                tokens_input=llm_response.get("tokens_input", 0),
                tokens_output=llm_response.get("tokens_output", 0),
                processing_time_ms=processing_time
            )

        logger.debug(f"Classified as {classification.name} in {processing_time}ms")
        return ClassificationResult(
            classification=classification,
            model=request.model,
            raw_content=content,
            tokens_input=llm_response.get("tokens_input", 0),
            tokens_output=llm_response.get("tokens_output", 0),
            processing_time_ms=processing_time
        )
