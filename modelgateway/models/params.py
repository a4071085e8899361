"""Typed parameters each model-kind pipeline operates on"""
from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Conversation message role."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"

    @classmethod
    def from_string(cls, role: str) -> "Role":
        """Parse role from string."""
        role_lower = role.lower()
        if role_lower in ("function", "tool"):
            return cls.TOOL
        return cls(role_lower)


class ChatMessage(BaseModel):
    """A single conversation message."""

    role: Role
    content: Union[str, list[dict[str, Any]], None] = None
    name: Optional[str] = None
    tool_calls: Optional[list[dict[str, Any]]] = None
    tool_call_id: Optional[str] = None


class BaseModelParams(BaseModel):
    """Fields shared by every model kind."""

    # Binary inputs (uploads, blobs) are carried as-is
    model_config = ConfigDict(arbitrary_types_allowed=True)

    model: Optional[str] = None


class ChatModelParams(BaseModelParams):
    input: list[ChatMessage]
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    max_tokens: Optional[int] = Field(default=None, gt=0)
    stop: Union[str, list[str], None] = None
    stream: bool = False
    tools: Optional[list[dict[str, Any]]] = None
    tool_choice: Union[str, dict[str, Any], None] = None


class ImageGenerationParams(BaseModelParams):
    prompt: str
    n: int = Field(default=1, ge=1)
    size: Optional[str] = None
    quality: Optional[str] = None
    style: Optional[str] = None
    response_format: Literal["url", "b64_json"] = "url"


class ImageEditParams(BaseModelParams):
    prompt: str
    image: Any = Field(description="Binary object exposing async read() and content_type")
    mask: Any = None
    n: int = Field(default=1, ge=1)
    size: Optional[str] = None
    response_format: Literal["url", "b64_json"] = "url"


class EmbeddingParams(BaseModelParams):
    input: Union[str, list[str]]
    dimensions: Optional[int] = Field(default=None, gt=0)
    encoding_format: Literal["float", "base64"] = "float"


class TranscriptionParams(BaseModelParams):
    file: Any = Field(description="Binary object exposing async read() and content_type")
    language: Optional[str] = None
    prompt: Optional[str] = None
    response_format: Literal["json", "text", "srt", "verbose_json", "vtt"] = "json"
    temperature: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    timestamp_granularities: Optional[list[Literal["word", "segment"]]] = None
