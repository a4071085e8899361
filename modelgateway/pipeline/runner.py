# Pipeline Runner
#
# Runs the four stages of a model service for one request, in order, and
# returns the single outbound response.

import json
import time
from typing import Any, Awaitable, Callable, Optional

import httpx
from fastapi import Request
from fastapi.responses import Response
from pydantic import ValidationError

from modelgateway.core.exception_handling import ExceptionHandling
from modelgateway.core.exceptions import (
    ErrorKind,
    LangException,
    NetworkException,
    ValidationException,
)
from modelgateway.core.logging import (
    clear_provider_context,
    get_logger,
    set_provider_context,
)
from modelgateway.core.metrics import (
    PIPELINE_FAILURES,
    PIPELINE_RUNS,
    PIPELINE_STAGE_DURATION,
)

from .base import ModelService
from .context import find_gateway_params

logger = get_logger()

# Only malformed inbound requests are client errors; bad data later on is ours
PREPARE_STAGE = "prepare_model_params"


def _request_validation_error(error: Exception) -> ValidationException:
    if isinstance(error, ValidationError):
        return ValidationException(
            "Invalid request parameters",
            detail=error.errors(include_url=False, include_context=False, include_input=False),
        )
    return ValidationException("Request body is not valid JSON", detail=str(error))


async def _run_stage(kind: str, stage: str, call: Callable[[], Awaitable[Any]]) -> Any:
    start_time = time.perf_counter()
    try:
        return await call()
    except LangException as e:
        PIPELINE_FAILURES.labels(kind=kind, stage=stage, error_kind=e.kind.value).inc()
        raise
    except httpx.TimeoutException as e:
        PIPELINE_FAILURES.labels(kind=kind, stage=stage, error_kind=ErrorKind.NETWORK.value).inc()
        logger.error(f"Timeout during {stage} ({kind}): {e}")
        raise NetworkException("Provider request timed out", detail=str(e)) from e
    except httpx.RequestError as e:
        PIPELINE_FAILURES.labels(kind=kind, stage=stage, error_kind=ErrorKind.NETWORK.value).inc()
        logger.error(f"Network error during {stage} ({kind}): {e}")
        raise NetworkException("Provider network error", detail=str(e)) from e
    except (ValidationError, json.JSONDecodeError) as e:
        if stage != PREPARE_STAGE:
            PIPELINE_FAILURES.labels(kind=kind, stage=stage, error_kind=ErrorKind.INTERNAL.value).inc()
            logger.exception(f"Invalid data during {stage} ({kind})")
            raise LangException(
                ErrorKind.INTERNAL, f"Unexpected error during {stage}", detail=repr(e)
            ) from e
        PIPELINE_FAILURES.labels(kind=kind, stage=stage, error_kind=ErrorKind.VALIDATION.value).inc()
        raise _request_validation_error(e) from e
    except Exception as e:
        PIPELINE_FAILURES.labels(kind=kind, stage=stage, error_kind=ErrorKind.INTERNAL.value).inc()
        logger.exception(f"Unexpected error during {stage} ({kind})")
        raise LangException(
            ErrorKind.INTERNAL, f"Unexpected error during {stage}", detail=repr(e)
        ) from e
    finally:
        PIPELINE_STAGE_DURATION.labels(kind=kind, stage=stage).observe(
            time.perf_counter() - start_time
        )


async def run_pipeline(
    service: ModelService,
    request: Request,
    exception_handler: Optional[ExceptionHandling] = None,
) -> Response:
    """
    Run all four stages of ``service`` for ``request``.

    A failing stage aborts the rest. The resulting ``LangException``
    propagates, or is rendered by ``exception_handler`` when one is given.
    httpx transport errors are reported as ``NetworkException`` and any other
    unexpected error as an internal ``LangException``.
    """
    kind = service.kind.value
    gateway_params = find_gateway_params(request)
    provider = gateway_params.provider.value if gateway_params else "unknown"

    set_provider_context(provider)
    logger.debug(f"Running {kind} pipeline for provider {provider}")
    try:
        params = await _run_stage(
            kind, PREPARE_STAGE, lambda: service.prepare_model_params(request)
        )
        params = await _run_stage(
            kind, "ready_for_model", lambda: service.ready_for_model(request, params)
        )
        output = await _run_stage(
            kind, "execute_model", lambda: service.execute_model(request, params)
        )
        response = await _run_stage(
            kind, "deliver_output", lambda: service.deliver_output(request, output)
        )
    except LangException as e:
        PIPELINE_RUNS.labels(kind=kind, provider=provider, outcome="error").inc()
        logger.warning(f"{kind} pipeline failed for provider {provider}: {e.message}")
        if exception_handler is None:
            raise
        return exception_handler.handle_exception(e)
    finally:
        clear_provider_context()

    PIPELINE_RUNS.labels(kind=kind, provider=provider, outcome="success").inc()
    logger.debug(f"{kind} pipeline completed for provider {provider} ({response.status_code})")
    return response
