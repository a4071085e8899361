"""Helpers for conversation message sequences"""
from collections.abc import Mapping
from typing import Any, Sequence

from modelgateway.models.params import Role


def message_role(message: Any) -> str:
    """Role of a message given as a model or a plain dict"""
    role = message.get("role") if isinstance(message, Mapping) else getattr(message, "role", None)
    if isinstance(role, Role):
        return role.value
    return str(role).lower() if role is not None else ""


def remove_system_messages(messages: Sequence[Any]) -> list[Any]:
    """Return the messages without system-role entries, order preserved"""
    return [m for m in messages if message_role(m) != Role.SYSTEM.value]
