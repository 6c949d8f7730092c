# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# This file keeps a diary of every request made to the platform, recording what was asked for,
# how long it took to respond, and whether it worked.
# 🧪 Purpose (Technical Summary):
# Request logging middleware with request-id correlation (X-Request-ID), timing, slow-request
# warnings and sensitive-header filtering. The request id is exposed to log records via a context var.
# 🔗 Dependencies:
# FastAPI, starlette, app.shared.utils.logging, uuid
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration), all API endpoints

import logging
import time
import uuid
from typing import Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.utils.logging import request_id_var, user_id_var

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware

    Features:
    - Request/response timing
    - Request id correlation
    - Sensitive header filtering
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold
        self.sensitive_headers = {
            "authorization",
            "cookie",
            "set-cookie",
        }
        self.excluded_paths = {"/health", "/api/v1/health"}

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process and log HTTP requests/responses

        Args:
            request: HTTP request
            call_next: Next middleware or endpoint

        Returns:
            HTTP response
        """
        request_id = self._get_or_create_request_id(request)
        request_token = request_id_var.set(request_id)
        user_token = user_id_var.set("")

        if request.url.path in self.excluded_paths:
            try:
                response = await call_next(request)
                response.headers[REQUEST_ID_HEADER] = request_id
                return response
            finally:
                request_id_var.reset(request_token)
                user_id_var.reset(user_token)

        start_time = time.perf_counter()
        logger.info(
            f"Request started: {request.method} {request.url.path}",
            extra={"headers": self._filter_sensitive_headers(dict(request.headers))},
        )

        try:
            response = await call_next(request)
            processing_time = time.perf_counter() - start_time

            log = logger.warning if processing_time > self.slow_request_threshold else logger.info
            log(
                f"Request completed: {request.method} {request.url.path} "
                f"{response.status_code} in {processing_time:.3f}s",
                extra={"status_code": response.status_code, "duration": processing_time},
            )

            response.headers[REQUEST_ID_HEADER] = request_id
            return response

        except Exception as e:
            processing_time = time.perf_counter() - start_time
            logger.error(
                f"Request failed: {request.method} {request.url.path} "
                f"after {processing_time:.3f}s: {type(e).__name__}"
            )
            raise
        finally:
            request_id_var.reset(request_token)
            user_id_var.reset(user_token)

    def _get_or_create_request_id(self, request: Request) -> str:
        request_id = request.headers.get(REQUEST_ID_HEADER.lower()) or str(uuid.uuid4())
        request.state.request_id = request_id
        return request_id

    def _filter_sensitive_headers(self, headers: Dict[str, str]) -> Dict[str, str]:
        return {
            key: ("[FILTERED]" if key.lower() in self.sensitive_headers else value)
            for key, value in headers.items()
        }
