"""
Classification Module
Yes/No/Unknown classification of a question via a local LLM
"""

from .classifier import (
    Classification,
    ClassificationRequest,
    ClassificationResult,
    MalformedResponseError,
    YesNoClassifier,
    parse_result,
)
from .prompts import SYSTEM_PROMPT, construct_messages

__all__ = [
    "Classification",
    "ClassificationRequest",
    "ClassificationResult",
    "MalformedResponseError",
    "YesNoClassifier",
    "parse_result",
    "SYSTEM_PROMPT",
    "construct_messages"
]
