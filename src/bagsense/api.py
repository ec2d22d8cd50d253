"""
REST API for BagSense using FastAPI.

Endpoints
---------
GET  /           - Redirect to the Swagger UI
GET  /health     - Health check
POST /api/chat   - Chat turn; JSON reply, or an SSE stream when
                   ``stream`` is true / ``Accept: text/event-stream``

Error bodies always have the shape ``{"error": "..."}`` and never carry
upstream details.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

import sentry_sdk
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse, StreamingResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from config import (
    API_HOST,
    API_PORT,
    CORS_ORIGINS,
    LLM_API_KEY,
    LLM_BASE_URL,
    LLM_MAX_TOKENS,
    LLM_MODEL,
    LLM_TEMPERATURE,
    LLM_TIMEOUT_SECONDS,
    RATE_LIMIT_CHAT,
    SENTRY_DSN,
    SENTRY_ENVIRONMENT,
    SENTRY_TRACES_SAMPLE_RATE,
)
from .chat_context import assemble_messages, build_token_context
from .chat_relay import ChatRelay
from .data_sources._clients import close_clients, init_clients
from .logging_config import generate_request_id, request_id_ctx, setup_logging
from .models import ChatRequest, ChatResponse
from .streaming import STREAM_ERROR_MESSAGE, relay_sse

# Initialise structured logging early
setup_logging()
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Sentry – initialise before anything else so startup errors are captured
# ---------------------------------------------------------------------------
if SENTRY_DSN:
    sentry_sdk.init(
        dsn=SENTRY_DSN,
        environment=SENTRY_ENVIRONMENT,
        traces_sample_rate=SENTRY_TRACES_SAMPLE_RATE,
        send_default_pii=False,
        # Don't capture 4xx client errors as Sentry events
        before_send=lambda event, hint: (
            None
            if (hint.get("exc_info") and
                isinstance(hint["exc_info"][1], StarletteHTTPException) and
                (hint["exc_info"][1].status_code or 500) < 500)
            else event
        ),
    )
    logger.info("Sentry initialised (env=%s)", SENTRY_ENVIRONMENT)
else:
    logger.info("SENTRY_DSN not set – error tracking disabled")

_start_time = time.monotonic()

_SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}

# ---------------------------------------------------------------------------
# LLM relay (lazy singleton)
# ---------------------------------------------------------------------------
_relay: Optional[ChatRelay] = None


def get_relay() -> ChatRelay:
    global _relay
    if _relay is None:
        _relay = ChatRelay(
            LLM_API_KEY,
            base_url=LLM_BASE_URL,
            model=LLM_MODEL,
            max_tokens=LLM_MAX_TOKENS,
            temperature=LLM_TEMPERATURE,
            timeout=LLM_TIMEOUT_SECONDS,
        )
    return _relay


async def close_relay() -> None:
    global _relay
    if _relay is not None:
        await _relay.close()
        _relay = None


# ---------------------------------------------------------------------------
# Rate limiter
# ---------------------------------------------------------------------------
limiter = Limiter(key_func=get_remote_address)


# ---------------------------------------------------------------------------
# Lifespan: startup / shutdown
# ---------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(application: FastAPI):
    """Initialise shared HTTP clients on startup, close on shutdown."""
    if not LLM_API_KEY:
        logger.error("LLM_API_KEY is not set – every chat turn will fail")
    logger.info("Starting up – initialising HTTP clients …")
    await init_clients()
    yield
    logger.info("Shutting down – closing HTTP clients …")
    await close_clients()
    await close_relay()


app = FastAPI(
    title="BagSense API",
    description="Chat assistant for bags.fm traders with live token data and risk scores.",
    version="1.0.0",
    lifespan=lifespan,
)

# Attach rate-limiter state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Accept"],
)


# ---------------------------------------------------------------------------
# Error shape: {"error": "..."}
# ---------------------------------------------------------------------------
@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected malformed body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


# ---------------------------------------------------------------------------
# Request-ID & access-log middleware
# ---------------------------------------------------------------------------
class RequestIdMiddleware(BaseHTTPMiddleware):
    """Attach a unique request ID to every request for tracing."""

    async def dispatch(self, request: Request, call_next):
        rid = generate_request_id()
        request_id_ctx.set(rid)
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        response.headers["X-Request-ID"] = rid
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response


app.add_middleware(RequestIdMiddleware)


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------


@app.get("/", tags=["system"], include_in_schema=False)
async def root():
    """Redirect to Swagger UI."""
    return RedirectResponse(url="/docs")


@app.get("/health", tags=["system"])
async def health() -> dict:
    """Liveness check with uptime."""
    return {
        "status": "ok",
        "uptime_seconds": round(time.monotonic() - _start_time, 1),
    }


@app.post("/api/chat", tags=["chat"], response_model=None)
@limiter.limit(RATE_LIMIT_CHAT)
async def chat(request: Request, body: ChatRequest):
    """Answer one chat turn, enriched with live token data."""
    if not body.message:
        raise HTTPException(status_code=400, detail="Message is required")

    try:
        context = await build_token_context(body.message)
        messages = assemble_messages(body.message, body.history, context)
    except Exception as exc:
        logger.exception("Preparing chat context failed")
        raise HTTPException(status_code=500, detail=STREAM_ERROR_MESSAGE) from exc

    relay = get_relay()

    if body.stream or _wants_event_stream(request):
        return StreamingResponse(
            relay_sse(relay.stream(messages)),
            media_type="text/event-stream",
            headers=_SSE_HEADERS,
        )

    try:
        content = await relay.complete(messages)
    except Exception as exc:
        logger.exception("LLM completion failed")
        raise HTTPException(status_code=500, detail=STREAM_ERROR_MESSAGE) from exc
    return ChatResponse(content=content)


def _wants_event_stream(request: Request) -> bool:
    return "text/event-stream" in request.headers.get("accept", "")


# ------------------------------------------------------------------
# Run with: python -m bagsense.api
# ------------------------------------------------------------------

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bagsense.api:app",
        host=API_HOST,
        port=API_PORT,
        reload=True,
    )
