"""Streaming response utilities"""
import json
from typing import Any, AsyncIterator

from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from modelgateway.core.logging import get_logger
from modelgateway.models.outputs import IterableReadableStream

logger = get_logger()


def format_sse_data(data: str) -> str:
    """Format a simple data-only SSE event."""
    return f"data: {data}\n\n"


def format_sse_done() -> str:
    """Format the SSE done marker."""
    return "data: [DONE]\n\n"


def serialize_chunk(chunk: Any) -> str:
    """Serialize one streamed chunk to JSON text"""
    if isinstance(chunk, BaseModel):
        return chunk.model_dump_json(exclude_none=True)
    if isinstance(chunk, str):
        return json.dumps({"content": chunk})
    return json.dumps(chunk)


async def stream_to_sse(stream: IterableReadableStream) -> AsyncIterator[str]:
    """Turn a chunk stream into SSE events terminated by ``[DONE]``"""
    chunk_count = 0
    async for chunk in stream:
        chunk_count += 1
        yield format_sse_data(serialize_chunk(chunk))
    logger.debug(f"Stream finished after {chunk_count} chunks")
    yield format_sse_done()


def create_streaming_response(stream: IterableReadableStream) -> StreamingResponse:
    """Wrap a chunk stream in an SSE ``StreamingResponse``"""
    return StreamingResponse(
        stream_to_sse(stream),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
    )
