"""Binary, stream and type-guard helpers shared by model pipelines"""

from .binary import (
    BASE64_CHUNK_SIZE,
    bytes_to_base64,
    to_data_url,
    blob_to_base64,
    blob_to_data_url,
    url_to_data_url,
)
from .messages import message_role, remove_system_messages
from .guards import is_iterable_readable_stream, is_chat_completion_named_tool_choice
from .streaming import (
    format_sse_data,
    format_sse_done,
    serialize_chunk,
    stream_to_sse,
    create_streaming_response,
)

__all__ = [
    "BASE64_CHUNK_SIZE",
    "bytes_to_base64",
    "to_data_url",
    "blob_to_base64",
    "blob_to_data_url",
    "url_to_data_url",
    "message_role",
    "remove_system_messages",
    "is_iterable_readable_stream",
    "is_chat_completion_named_tool_choice",
    "format_sse_data",
    "format_sse_done",
    "serialize_chunk",
    "stream_to_sse",
    "create_streaming_response",
]
