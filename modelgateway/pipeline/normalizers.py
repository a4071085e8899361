# Provider-Conditional Normalizers
#
# This module holds the stage-2 rules applied before params reach a provider.
# Rules are keyed by model kind and provider identity, so every
# provider-specific adjustment lives in one table.

from typing import Any, Callable, Optional, TypeVar

from fastapi import Request

from modelgateway.core.logging import get_logger
from modelgateway.models.params import ChatModelParams
from modelgateway.models.provider import ModelKind, Provider
from modelgateway.utils.messages import remove_system_messages

from .context import get_gateway_params

logger = get_logger()

P = TypeVar("P")

Normalizer = Callable[[Any], Any]


def strip_system_messages(params: ChatModelParams) -> ChatModelParams:
    """Drop system-role messages; some hosted chat backends reject them."""
    params.input = remove_system_messages(params.input)
    return params


CHAT_NORMALIZERS: dict[Provider, Normalizer] = {
    Provider.HUGGINGFACEHUB: strip_system_messages,
}

# Only chat carries provider rules; other kinds pass params through.
PROVIDER_NORMALIZERS: dict[ModelKind, dict[Provider, Normalizer]] = {
    ModelKind.CHAT: CHAT_NORMALIZERS,
    ModelKind.AUDIO_TRANSCRIPTION: {},
    ModelKind.IMAGE_EDIT: {},
    ModelKind.IMAGE_GENERATION: {},
    ModelKind.EMBEDDING: {},
}


def get_normalizer(kind: ModelKind, provider: Provider) -> Optional[Normalizer]:
    """Get the rule registered for ``provider`` under ``kind``, if any."""
    return PROVIDER_NORMALIZERS.get(kind, {}).get(provider)


def normalize_for_provider(kind: ModelKind, request: Request, params: P) -> P:
    """
    Apply the provider rule for ``kind`` to ``params``.

    Kinds without rules return ``params`` without reading the request. When the
    selected provider has no rule, the same object is returned untouched.
    """
    rules = PROVIDER_NORMALIZERS.get(kind)
    if not rules:
        return params

    provider = get_gateway_params(request).provider
    normalizer = rules.get(provider)
    if normalizer is None:
        return params

    logger.debug(f"Applying {normalizer.__name__} for {kind.value}/{provider.value}")
    return normalizer(params)
