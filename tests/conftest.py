"""Shared test fixtures and configuration"""
import json
from typing import Any, Callable, Optional

import pytest
from fastapi import Request

from modelgateway.core import config as config_module
from modelgateway.core import http_client as http_client_module
from modelgateway.models import ChatMessage, ChatModelParams, GatewayParams, Provider, Role
from modelgateway.pipeline import attach_gateway_params


def build_request(
    provider: Optional[Provider] = None,
    body: Any = None,
    path: str = "/v1/chat/completions",
    raw_body: Optional[bytes] = None,
) -> Request:
    """Build a Starlette request carrying an optional JSON body and gateway params"""
    if raw_body is None:
        raw_body = b"" if body is None else json.dumps(body).encode()
    scope = {
        "type": "http",
        "method": "POST",
        "path": path,
        "query_string": b"",
        "headers": [(b"content-type", b"application/json")],
    }

    async def receive():
        return {"type": "http.request", "body": raw_body, "more_body": False}

    request = Request(scope, receive)
    if provider is not None:
        attach_gateway_params(request, GatewayParams(provider=provider, request_id="test-request-id"))
    return request


@pytest.fixture
def make_request() -> Callable[..., Request]:
    """Factory for test requests"""
    return build_request


@pytest.fixture
def chat_messages() -> list[ChatMessage]:
    """A conversation with a leading system prompt"""
    return [
        ChatMessage(role=Role.SYSTEM, content="You are a helpful assistant."),
        ChatMessage(role=Role.USER, content="Hello"),
        ChatMessage(role=Role.ASSISTANT, content="Hi! How can I help?"),
        ChatMessage(role=Role.USER, content="Tell me a joke"),
    ]


@pytest.fixture
def chat_params(chat_messages: list[ChatMessage]) -> ChatModelParams:
    return ChatModelParams(model="meta-llama/Llama-3-8B-Instruct", input=chat_messages)


@pytest.fixture(autouse=True)
def clear_config_cache():
    """Reload configuration from the environment for every test"""
    config_module.clear_config_cache()
    yield
    config_module.clear_config_cache()


@pytest.fixture
def reset_http_client():
    """Drop the shared HTTP client so each test builds its own"""
    http_client_module._http_client = None
    yield
    http_client_module._http_client = None
