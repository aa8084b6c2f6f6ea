from fastapi import Request
import logging
import time
import uuid
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("app.requests")

REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tags every request with an id (the caller's X-Request-ID if sent) and
    logs one line on the way in and one on the way out. The id and the
    handling time are echoed back as response headers.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        started = time.perf_counter()

        logger.info(f"[{request_id}] {request.method} {target}")
        try:
            response = await call_next(request)
        except Exception:
            elapsed = time.perf_counter() - started
            logger.exception(f"[{request_id}] {request.method} {target} failed after {elapsed:.4f}s")
            raise

        elapsed = time.perf_counter() - started
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(level, f"[{request_id}] {response.status_code} {request.method} {target} in {elapsed:.4f}s")

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[PROCESS_TIME_HEADER] = f"{elapsed:.4f}"
        return response
