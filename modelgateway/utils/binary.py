"""Conversions between remote resources, binary objects, base64 and data URLs"""
import base64
from typing import Any, Optional

import httpx

from modelgateway.core.exceptions import NetworkException
from modelgateway.core.http_client import get_http_client
from modelgateway.core.logging import get_logger
from modelgateway.core.metrics import REMOTE_FETCHES

logger = get_logger()

# Bytes encoded per window when building base64 text
BASE64_CHUNK_SIZE = 1024

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def bytes_to_base64(data: bytes, chunk_size: int = BASE64_CHUNK_SIZE) -> str:
    """Encode ``data`` as base64 in fixed-size windows.

    base64 maps 3 input bytes to 4 output characters, so each window hands its
    unaligned tail to the next one. The joined result is identical to encoding
    the whole payload at once.
    """
    view = memoryview(data)
    parts: list[str] = []
    carry = b""
    for start in range(0, len(view), chunk_size):
        window = carry + view[start:start + chunk_size].tobytes()
        aligned = len(window) - len(window) % 3
        parts.append(base64.b64encode(window[:aligned]).decode("ascii"))
        carry = window[aligned:]
    if carry:
        parts.append(base64.b64encode(carry).decode("ascii"))
    return "".join(parts)


def to_data_url(data: bytes, content_type: Optional[str]) -> str:
    """Build a ``data:`` URL for raw bytes."""
    return f"data:{content_type or DEFAULT_CONTENT_TYPE};base64,{bytes_to_base64(data)}"


async def blob_to_base64(blob: Any) -> str:
    """Read a binary object fully and return its base64 text.

    ``blob`` is anything with an async ``read()`` returning bytes, e.g.
    ``Blob`` or Starlette's ``UploadFile``. Read errors propagate.
    """
    data = await blob.read()
    return bytes_to_base64(data)


async def blob_to_data_url(blob: Any) -> str:
    """Read a binary object fully and return it as a data URL."""
    data = await blob.read()
    return to_data_url(data, getattr(blob, "content_type", None))


async def url_to_data_url(url: str) -> str:
    """Download ``url`` and return the payload as a data URL.

    Raises:
        NetworkException: the request failed or returned a non-success status
    """
    client = get_http_client()
    try:
        response = await client.get(url)
    except httpx.HTTPError as e:
        REMOTE_FETCHES.labels(status="error").inc()
        logger.warning(f"Failed to download {url}: {e}")
        raise NetworkException("Failed to download.", detail=str(e)) from e

    REMOTE_FETCHES.labels(status=str(response.status_code)).inc()
    if not response.is_success:
        logger.warning(f"Failed to download {url}: HTTP {response.status_code}")
        raise NetworkException(
            "Failed to download.",
            detail={"url": url, "status_code": response.status_code},
        )

    return to_data_url(response.content, response.headers.get("content-type"))
