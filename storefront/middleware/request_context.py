"""
Request context middleware

Assigns every request an id (or propagates the caller's) and reports how long
it took, both as response headers and in the access log.
"""
import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "x-storefront-request-id"
REQUEST_DURATION_HEADER = "x-storefront-request-duration"


class RequestContextMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        request.state.started_at = time.perf_counter()

        response = await call_next(request)

        duration_ms = (time.perf_counter() - request.state.started_at) * 1000
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[REQUEST_DURATION_HEADER] = f"{duration_ms:.2f}ms"
        logger.debug(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"[{request_id}] {duration_ms:.2f}ms"
        )
        return response
