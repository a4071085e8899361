# Composed Pipelines
#
# Assemble a pipeline from stage callables instead of subclassing a base
# service. Stage 2 falls back to the kind's provider rules when no override
# is given.

from typing import Any, Awaitable, Callable, Optional

from fastapi import Request
from fastapi.responses import Response

from modelgateway.models.provider import ModelKind

from .base import ModelService

PrepareStage = Callable[[Request], Awaitable[Any]]
ReadyStage = Callable[[Request, Any], Awaitable[Any]]
ExecuteStage = Callable[[Request, Any], Awaitable[Any]]
DeliverStage = Callable[[Request, Any], Awaitable[Response]]


class ComposedService(ModelService[Any, Any]):
    """A pipeline built from stage callables."""

    def __init__(
        self,
        kind: ModelKind,
        prepare: PrepareStage,
        execute: ExecuteStage,
        deliver: DeliverStage,
        ready: Optional[ReadyStage] = None,
        name: Optional[str] = None,
    ) -> None:
        self.kind = kind
        self.name = name or f"{kind.value}_pipeline"
        self._prepare = prepare
        self._ready = ready
        self._execute = execute
        self._deliver = deliver

    async def prepare_model_params(self, request: Request) -> Any:
        return await self._prepare(request)

    async def ready_for_model(self, request: Request, params: Any) -> Any:
        if self._ready is None:
            return await super().ready_for_model(request, params)
        return await self._ready(request, params)

    async def execute_model(self, request: Request, params: Any) -> Any:
        return await self._execute(request, params)

    async def deliver_output(self, request: Request, output: Any) -> Response:
        return await self._deliver(request, output)

    def __repr__(self) -> str:
        return f"ComposedService(name={self.name!r}, kind={self.kind.value!r})"


def compose_service(
    kind: ModelKind,
    *,
    prepare: PrepareStage,
    execute: ExecuteStage,
    deliver: DeliverStage,
    ready: Optional[ReadyStage] = None,
    name: Optional[str] = None,
) -> ComposedService:
    """
    Build a pipeline for ``kind`` from stage callables.

    Args:
        kind: Model kind; selects the default stage-2 rules
        prepare: Stage 1, request -> params
        execute: Stage 3, (request, params) -> result
        deliver: Stage 4, (request, result) -> response
        ready: Optional stage-2 override
        name: Name used in logs

    Raises:
        TypeError: a required stage is missing or not callable
    """
    for stage_name, stage in (("prepare", prepare), ("execute", execute), ("deliver", deliver)):
        if not callable(stage):
            raise TypeError(f"{stage_name} stage must be callable, got {type(stage).__name__}")
    if ready is not None and not callable(ready):
        raise TypeError(f"ready stage must be callable, got {type(ready).__name__}")

    return ComposedService(
        kind=kind,
        prepare=prepare,
        execute=execute,
        deliver=deliver,
        ready=ready,
        name=name,
    )
