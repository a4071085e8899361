"""Access to per-request gateway metadata"""
from typing import Optional

from fastapi import Request

from modelgateway.core.exceptions import ErrorKind, LangException
from modelgateway.models.provider import GatewayParams

GATEWAY_PARAMS_ATTR = "gateway_params"


def attach_gateway_params(request: Request, params: GatewayParams) -> None:
    """Attach routing metadata to the request (done by the router)"""
    setattr(request.state, GATEWAY_PARAMS_ATTR, params)


def find_gateway_params(request: Request) -> Optional[GatewayParams]:
    return getattr(request.state, GATEWAY_PARAMS_ATTR, None)


def get_gateway_params(request: Request) -> GatewayParams:
    """Get the routing metadata attached to the request

    Raises:
        LangException: no metadata was attached, which is a routing defect
    """
    params = find_gateway_params(request)
    if params is None:
        raise LangException(
            ErrorKind.INTERNAL, "Gateway parameters were not attached to the request"
        )
    return params
