# Model-Kind Base Pipelines
#
# One base service per model kind. Concrete provider adapters subclass these
# and supply stages 1, 3 and 4.

from modelgateway.models.outputs import (
    ChatOutput,
    EmbeddingOutput,
    ImageOutput,
    TranscriptionOutput,
)
from modelgateway.models.params import (
    ChatModelParams,
    EmbeddingParams,
    ImageEditParams,
    ImageGenerationParams,
    TranscriptionParams,
)
from modelgateway.models.provider import ModelKind

from .base import ModelService


class ChatService(ModelService[ChatModelParams, ChatOutput]):
    """Chat completion service.

    Stage 2 strips system messages when the request is routed to
    HuggingFace Hub and leaves the params untouched otherwise.
    """

    kind = ModelKind.CHAT


class AudioTranscriptionService(ModelService[TranscriptionParams, TranscriptionOutput]):
    """Audio transcription service."""

    kind = ModelKind.AUDIO_TRANSCRIPTION


class ImageEditService(ModelService[ImageEditParams, ImageOutput]):
    """Image editing service."""

    kind = ModelKind.IMAGE_EDIT


class ImageGenerationService(ModelService[ImageGenerationParams, ImageOutput]):
    kind = ModelKind.IMAGE_GENERATION


class EmbeddingService(ModelService[EmbeddingParams, EmbeddingOutput]):
    """Embedding service."""

    kind = ModelKind.EMBEDDING


BASE_SERVICES: dict[ModelKind, type[ModelService]] = {
    ModelKind.CHAT: ChatService,
    ModelKind.AUDIO_TRANSCRIPTION: AudioTranscriptionService,
    ModelKind.IMAGE_EDIT: ImageEditService,
    ModelKind.IMAGE_GENERATION: ImageGenerationService,
    ModelKind.EMBEDDING: EmbeddingService,
}
