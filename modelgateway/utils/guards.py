"""Structural checks for values arriving from untyped boundaries.

Provider SDKs and deserialized JSON give no reliable type tags, so these
checks look only at which fields or operations a value exposes. Mappings are
checked by key, everything else by attribute.
"""
from collections.abc import Mapping
from typing import Any


def _has_member(obj: Any, name: str) -> bool:
    if isinstance(obj, Mapping):
        return name in obj
    return hasattr(obj, name)


def _get_member(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj[name]
    return getattr(obj, name)


def _is_object(obj: Any) -> bool:
    return obj is not None and not isinstance(obj, (str, bytes, int, float, bool, type))


def is_iterable_readable_stream(obj: Any) -> bool:
    """True when ``obj`` exposes ``locked``, ``cancel`` and ``get_reader``."""
    return (
        _is_object(obj)
        and _has_member(obj, "locked")
        and _has_member(obj, "cancel")
        and _has_member(obj, "get_reader")
    )


def is_chat_completion_named_tool_choice(obj: Any) -> bool:
    """True when ``obj`` has ``type`` and a ``function`` carrying a ``name``."""
    if not (
        _is_object(obj)
        and _has_member(obj, "type")
        and _has_member(obj, "function")
    ):
        return False
    function = _get_member(obj, "function")
    return _is_object(function) and _has_member(function, "name")
