"""Request ID middleware: tags every request and logs its outcome."""

from __future__ import annotations

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

log = structlog.get_logger("printerhub.api")

REQUEST_ID_HEADER = "X-Request-ID"


def resolve_request_id(raw: str | None) -> str:
    """Return *raw* if it is a UUID, otherwise a freshly generated one."""
    if raw:
        try:
            return str(uuid.UUID(raw))
        except ValueError:
            pass
    return str(uuid.uuid4())


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Bind request_id / method / path into structlog contextvars.

    Completed requests are logged at info, 4xx at warning and 5xx at error,
    so rejected brand names and storage failures stand out in the stream.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        tokens = structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            log.exception("request.failed", duration_ms=_elapsed_ms(start))
            raise
        else:
            status = response.status_code
            if status >= 500:
                emit = log.error
            elif status >= 400:
                emit = log.warning
            else:
                emit = log.info
            emit("request.completed", status_code=status, duration_ms=_elapsed_ms(start))
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            structlog.contextvars.reset_contextvars(**tokens)


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 1)
