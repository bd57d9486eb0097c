"""
LLM module - Ollama client wrapper
"""

from .ollama_client import OllamaClient
from .factory import LLMClient, llm

__all__ = ["LLMClient", "OllamaClient", "llm"]
