"""Data models"""

from .provider import Provider, ModelKind, GatewayParams
from .params import (
    Role,
    ChatMessage,
    BaseModelParams,
    ChatModelParams,
    ImageGenerationParams,
    ImageEditParams,
    EmbeddingParams,
    TranscriptionParams,
)
from .schemas import (
    TranscriptionJson,
    TranscriptionVerboseJson,
    TranscriptionWord,
    TranscriptionSegment,
)
from .outputs import (
    Blob,
    MessageChunk,
    ReadResult,
    StreamIterator,
    StreamReader,
    IterableReadableStream,
    ChatOutput,
    TranscriptionOutput,
    ImageOutput,
    EmbeddingOutput,
)

__all__ = [
    "Provider",
    "ModelKind",
    "GatewayParams",
    "Role",
    "ChatMessage",
    "BaseModelParams",
    "ChatModelParams",
    "ImageGenerationParams",
    "ImageEditParams",
    "EmbeddingParams",
    "TranscriptionParams",
    "TranscriptionJson",
    "TranscriptionVerboseJson",
    "TranscriptionWord",
    "TranscriptionSegment",
    "Blob",
    "MessageChunk",
    "ReadResult",
    "StreamIterator",
    "StreamReader",
    "IterableReadableStream",
    "ChatOutput",
    "TranscriptionOutput",
    "ImageOutput",
    "EmbeddingOutput",
]
