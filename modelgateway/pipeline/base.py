# Model Service Contract
#
# This module defines the four-stage contract every model pipeline follows:
# prepare params -> provider readiness -> execute -> deliver.

from typing import Generic, TypeVar

from fastapi import Request
from fastapi.responses import Response

from modelgateway.core.exceptions import NotImplementedException
from modelgateway.models.params import BaseModelParams
from modelgateway.models.provider import ModelKind

from .normalizers import normalize_for_provider

P = TypeVar("P", bound=BaseModelParams)
O = TypeVar("O")

STAGES = (
    "prepare_model_params",
    "ready_for_model",
    "execute_model",
    "deliver_output",
)


class ModelService(Generic[P, O]):
    """
    Base class for model services with generic parameter and result types.

    The four stages run strictly in order for one request:
    1. prepare_model_params: inbound request -> typed params
    2. ready_for_model: provider-conditional adjustments to the params
    3. execute_model: call the provider and return its result
    4. deliver_output: result -> outbound response

    Stages 1, 3 and 4 have no generic behaviour and raise
    NotImplementedException until a concrete adapter provides them. Stage 2
    applies the provider rules registered for the service's kind.
    """

    kind: ModelKind

    async def prepare_model_params(self, request: Request) -> P:
        raise NotImplementedException(type(self).__name__, "prepare_model_params")

    async def ready_for_model(self, request: Request, params: P) -> P:
        return normalize_for_provider(self.kind, request, params)

    async def execute_model(self, request: Request, params: P) -> O:
        raise NotImplementedException(type(self).__name__, "execute_model")

    async def deliver_output(self, request: Request, output: O) -> Response:
        raise NotImplementedException(type(self).__name__, "deliver_output")
