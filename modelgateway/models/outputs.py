# Pipeline Result Types
#
# This module defines what stage 3 of each model-kind pipeline may return:
# plain text, a single streamed chunk, a lazy stream of chunks, a binary blob,
# or embedding vectors.

from dataclasses import dataclass
from typing import (
    Any,
    AsyncIterable,
    AsyncIterator,
    Generic,
    Iterable,
    NamedTuple,
    Optional,
    TypeVar,
    Union,
)

from pydantic import BaseModel, Field

from .params import Role
from .schemas import TranscriptionJson, TranscriptionVerboseJson

T = TypeVar("T")


# =============================================================================
# Binary Objects
# =============================================================================


@dataclass
class Blob:
    """In-memory binary object with a declared content type."""

    data: bytes
    content_type: str = "application/octet-stream"

    async def read(self) -> bytes:
        return self.data

    @property
    def size(self) -> int:
        return len(self.data)


# =============================================================================
# Streamed Chat Chunks
# =============================================================================


class MessageChunk(BaseModel):
    """One streamed piece of a chat completion."""

    content: str = ""
    role: Optional[Role] = None
    tool_call_chunks: list[dict[str, Any]] = Field(default_factory=list)
    finish_reason: Optional[str] = None

    def __add__(self, other: "MessageChunk") -> "MessageChunk":
        if not isinstance(other, MessageChunk):
            return NotImplemented
        return MessageChunk(
            content=self.content + other.content,
            role=self.role or other.role,
            tool_call_chunks=[*self.tool_call_chunks, *other.tool_call_chunks],
            finish_reason=other.finish_reason or self.finish_reason,
        )


class ReadResult(NamedTuple):
    done: bool
    value: Any = None


class StreamReader(Generic[T]):
    """Exclusive reader over an ``IterableReadableStream``."""

    def __init__(self, stream: "IterableReadableStream[T]") -> None:
        self._stream = stream
        self._released = False

    async def read(self) -> ReadResult:
        if self._released:
            raise RuntimeError("Reader has been released")
        return await self._stream._pull()

    def release_lock(self) -> None:
        if not self._released:
            self._released = True
            self._stream._reader = None

    async def cancel(self) -> None:
        await self._stream._close()
        self.release_lock()


class IterableReadableStream(Generic[T]):
    """
    Lazy sequence of chunks produced by a streaming provider call.

    Reading goes through a single reader at a time: ``get_reader`` locks the
    stream until the reader releases it. Async iteration takes the lock only
    while each chunk is pulled.
    """

    def __init__(self, source: AsyncIterable[T]) -> None:
        self._iterator: AsyncIterator[T] = source.__aiter__()
        self._reader: Optional[StreamReader[T]] = None
        self._closed = False

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> "IterableReadableStream[T]":
        async def _generate() -> AsyncIterator[T]:
            for item in items:
                yield item

        return cls(_generate())

    @property
    def locked(self) -> bool:
        return self._reader is not None

    def get_reader(self) -> StreamReader[T]:
        if self.locked:
            raise RuntimeError("Stream is already locked to a reader")
        self._reader = StreamReader(self)
        return self._reader

    async def cancel(self) -> None:
        if self.locked:
            raise RuntimeError("Cannot cancel a locked stream")
        await self._close()

    async def _pull(self) -> ReadResult:
        if self._closed:
            return ReadResult(done=True)
        try:
            value = await self._iterator.__anext__()
        except StopAsyncIteration:
            self._closed = True
            return ReadResult(done=True)
        return ReadResult(done=False, value=value)

    async def _close(self) -> None:
        if self._closed:
            return
        self._closed = True
        aclose = getattr(self._iterator, "aclose", None)
        if aclose is not None:
            await aclose()

    def __aiter__(self) -> "StreamIterator[T]":
        if self.locked:
            raise RuntimeError("Stream is already locked to a reader")
        return StreamIterator(self)


class StreamIterator(Generic[T]):
    """
    Async iterator over an ``IterableReadableStream``.

    The reader lock is held only while a chunk is being pulled, so leaving an
    ``async for`` early never strands the stream. ``aclose`` cancels it.
    """

    def __init__(self, stream: IterableReadableStream[T]) -> None:
        self._stream = stream

    def __aiter__(self) -> "StreamIterator[T]":
        return self

    async def __anext__(self) -> T:
        reader = self._stream.get_reader()
        try:
            result = await reader.read()
        finally:
            reader.release_lock()
        if result.done:
            raise StopAsyncIteration
        return result.value

    async def aclose(self) -> None:
        await self._stream.cancel()


# =============================================================================
# Output Unions per Model Kind
# =============================================================================


ChatOutput = Union[str, MessageChunk, IterableReadableStream]
TranscriptionOutput = Union[TranscriptionVerboseJson, TranscriptionJson, str]
ImageOutput = Union[Blob, str]
EmbeddingOutput = Union[list[float], list[list[float]]]
