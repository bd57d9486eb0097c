"""
Configuration module - Load environment variables and settings
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
PROJECT_ROOT = Path(__file__).parent.parent
load_dotenv(PROJECT_ROOT / ".env")

DEFAULT_HOST = "http://localhost:11434"
DEFAULT_MODEL = "qwen3"
DEFAULT_TIMEOUT = 120.0


class Config:
    """Application configuration from environment variables"""

    # Ollama server
    OLLAMA_HOST: str = os.getenv("OLLAMA_HOST", DEFAULT_HOST)
    OLLAMA_MODEL: str = os.getenv("OLLAMA_MODEL") or DEFAULT_MODEL
    try:
        OLLAMA_TIMEOUT: float = float(os.getenv("OLLAMA_TIMEOUT", str(DEFAULT_TIMEOUT)))
    except ValueError:
        OLLAMA_TIMEOUT = DEFAULT_TIMEOUT

    # Debug
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")

    @classmethod
    def host(cls) -> str:
        """Ollama host with a scheme, as accepted by OLLAMA_HOST (e.g. "127.0.0.1:11434")."""
        host = (cls.OLLAMA_HOST or DEFAULT_HOST).strip().rstrip("/")
        if "://" not in host:
            host = f"http://{host}"
        return host

    @classmethod
    def base_url(cls) -> str:
        """OpenAI-compatible endpoint exposed by Ollama"""
        return f"{cls.host()}/v1"

    @classmethod
    def model(cls) -> str:
        """Default model name; a blank OLLAMA_MODEL means the built-in default"""
        return (cls.OLLAMA_MODEL or "").strip() or DEFAULT_MODEL

    @classmethod
    def log_level(cls) -> str:
        if cls.DEBUG:
            return "DEBUG"
        return (cls.LOG_LEVEL or "WARNING").strip().upper()


# Singleton instance
config = Config()
