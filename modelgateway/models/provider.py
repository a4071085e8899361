"""Provider identity and per-request gateway metadata"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from modelgateway.core.exceptions import ValidationException


class Provider(str, Enum):
    """Model providers the gateway can front."""

    OPENAI = "openai"
    AZURE_OPENAI = "azure_openai"
    ANTHROPIC = "anthropic"
    GOOGLE_GENAI = "google_genai"
    HUGGINGFACEHUB = "huggingfacehub"
    OLLAMA = "ollama"
    MISTRAL = "mistral"
    COHERE = "cohere"

    @classmethod
    def parse(cls, value: str) -> "Provider":
        """Parse a provider name, accepting common aliases."""
        normalized = value.strip().lower().replace("-", "_")
        normalized = _PROVIDER_ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            raise ValidationException(f"Unsupported provider: {value}") from None


_PROVIDER_ALIASES = {
    "azure": "azure_openai",
    "google": "google_genai",
    "gemini": "google_genai",
    "huggingface": "huggingfacehub",
    "hf": "huggingfacehub",
    "claude": "anthropic",
}


class ModelKind(str, Enum):
    """Kinds of model pipelines."""

    CHAT = "chat"
    AUDIO_TRANSCRIPTION = "audio_transcription"
    IMAGE_EDIT = "image_edit"
    IMAGE_GENERATION = "image_generation"
    EMBEDDING = "embedding"


class GatewayParams(BaseModel):
    """Per-request routing metadata attached by the router; read-only to pipelines"""

    model_config = ConfigDict(frozen=True)

    provider: Provider
    model: Optional[str] = None
    stream: bool = False
    request_id: str = ""
