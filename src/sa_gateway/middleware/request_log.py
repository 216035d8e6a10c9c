"""Request logging middleware.

One log line per request on the "sa.request" logger. A caller-supplied
X-Request-ID is reused; otherwise a short id is minted. Either way it is
stored on request.state and echoed back in the X-Request-ID header.

Server errors, unhandled exceptions included, are logged at WARNING,
everything else at INFO:
    INFO [POST] /api/v1/accounts → 201 (23ms) req_a1b2c3d4e5f6
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("sa.request")

REQUEST_ID_HEADER = "X-Request-ID"
_MAX_INBOUND_ID_LENGTH = 64


def _request_id(request: Request) -> str:
    inbound = request.headers.get(REQUEST_ID_HEADER, "").strip()
    if inbound and len(inbound) <= _MAX_INBOUND_ID_LENGTH:
        return inbound
    return f"req_{uuid.uuid4().hex[:12]}"


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = _request_id(request)
        request.state.request_id = request_id

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # The catch-all handler in src.main renders the 500 and echoes the id
            logger.warning(
                "[%s] %s → 500 (%.0fms) %s unhandled",
                request.method,
                request.url.path,
                (time.perf_counter() - start) * 1000,
                request_id,
            )
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.log(
            logging.WARNING if response.status_code >= 500 else logging.INFO,
            "[%s] %s → %d (%.0fms) %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id,
        )
        return response
