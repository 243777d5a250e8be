"""
Error translation middleware.

Wraps the whole request pipeline. Assigns each request a trace id and
converts any exception that escapes the routes into the error envelope.
"""

import logging
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.shared.errors.handlers import build_error_response
from app.shared.logging import trace_id_context

logger = logging.getLogger(__name__)

TRACE_HEADER = "X-Request-ID"


class ErrorTranslationMiddleware(BaseHTTPMiddleware):
    """Middleware that turns uncaught exceptions into error envelopes.

    The trace id is taken from the incoming ``X-Request-ID`` header when
    present, otherwise generated. It is stored on ``request.state``, bound
    to the logging context and echoed on every response.
    """

    def __init__(self, app: ASGIApp, include_details: bool = False) -> None:
        super().__init__(app)
        self._include_details = include_details

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Run the request and translate any failure."""
        trace_id = request.headers.get(TRACE_HEADER) or uuid4().hex
        request.state.trace_id = trace_id
        token = trace_id_context.set(trace_id)
        try:
            try:
                response = await call_next(request)
            except Exception as exc:
                logger.exception(
                    "Unhandled error on %s %s", request.method, request.url.path
                )
                response = build_error_response(exc, trace_id, self._include_details)
            response.headers[TRACE_HEADER] = trace_id
            return response
        finally:
            trace_id_context.reset(token)
