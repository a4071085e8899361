# Model Pipeline Module
#
# This module provides the four-stage model service contract, the base
# pipelines for each model kind, and the runner that executes them.

from .base import ModelService, STAGES
from .services import (
    ChatService,
    AudioTranscriptionService,
    ImageEditService,
    ImageGenerationService,
    EmbeddingService,
    BASE_SERVICES,
)
from .normalizers import (
    CHAT_NORMALIZERS,
    PROVIDER_NORMALIZERS,
    get_normalizer,
    normalize_for_provider,
    strip_system_messages,
)
from .composed import ComposedService, compose_service
from .context import attach_gateway_params, find_gateway_params, get_gateway_params
from .runner import run_pipeline

__all__ = [
    # Contract
    "ModelService",
    "STAGES",
    # Base pipelines
    "ChatService",
    "AudioTranscriptionService",
    "ImageEditService",
    "ImageGenerationService",
    "EmbeddingService",
    "BASE_SERVICES",
    # Provider rules
    "CHAT_NORMALIZERS",
    "PROVIDER_NORMALIZERS",
    "get_normalizer",
    "normalize_for_provider",
    "strip_system_messages",
    # Composition
    "ComposedService",
    "compose_service",
    # Request context
    "attach_gateway_params",
    "find_gateway_params",
    "get_gateway_params",
    # Runner
    "run_pipeline",
]
