"""
Server-sent-event framing for streamed chat replies.

Wire format, one frame per event::

    data: {"content":"..."}\\n\\n     (repeated, in arrival order)
    data: {"done":true}\\n\\n         (after the last chunk)
    data: {"error":"..."}\\n\\n       (instead of "done" if the stream fails)
"""

from __future__ import annotations

import json
import logging
from typing import Any, AsyncIterable, AsyncIterator

from .chat_relay import FALLBACK_REPLY

logger = logging.getLogger(__name__)

STREAM_ERROR_MESSAGE = "Failed to process message"


def sse_event(payload: dict[str, Any]) -> str:
    """Frame *payload* as a single SSE ``data:`` event."""
    return f"data: {json.dumps(payload, separators=(',', ':'))}\n\n"


async def relay_sse(chunks: AsyncIterable[str]) -> AsyncIterator[str]:
    """Turn a stream of text chunks into SSE frames.

    Never raises: a failure mid-stream becomes a final error frame.  A stream
    that ends without any text sends ``FALLBACK_REPLY`` as its only content,
    so the client never records an empty assistant turn.
    """
    sent = False
    try:
        async for content in chunks:
            if content:
                sent = True
                yield sse_event({"content": content})
    except Exception:
        logger.exception("Chat stream failed")
        yield sse_event({"error": STREAM_ERROR_MESSAGE})
        return
    if not sent:
        logger.warning("Chat stream produced no text")
        yield sse_event({"content": FALLBACK_REPLY})
    yield sse_event({"done": True})
