"""
LLM Configuration

Settings for the completion API and model selection.
"""

from dataclasses import dataclass
from typing import Optional
import os


DEFAULT_API_BASE = "https://api.openai.com/v1"


@dataclass
class LLMConfig:
    """Configuration for the completion API provider."""

    # OpenAI settings
    api_base: str = DEFAULT_API_BASE
    data_model: str = "gpt-5.1"
    chat_model: str = "gpt-5.1-mini"

    # None keeps the transport default
    timeout: Optional[float] = None

    # Caching
    cache_ttl_seconds: int = 86400  # 24 hours

    # API key from environment
    @property
    def openai_key(self) -> str:
        """Get OpenAI API key from environment."""
        return os.environ.get("OPENAI_API_KEY", "")

    @classmethod
    def from_env(cls) -> 'LLMConfig':
        """Create config with environment overrides applied."""
        timeout = os.environ.get("WORLDS_LLM_TIMEOUT")
        return cls(
            api_base=os.environ.get("OPENAI_BASE_URL", DEFAULT_API_BASE),
            data_model=os.environ.get("WORLDS_DATA_MODEL", cls.data_model),
            chat_model=os.environ.get("WORLDS_CHAT_MODEL", cls.chat_model),
            timeout=float(timeout) if timeout else None,
        )
