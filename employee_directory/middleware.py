"""
HTTP middleware for the employee directory.

Every page passes through the same chain: request ID and access log,
Prometheus accounting, HSTS outside development, cache headers for
``/static`` assets, and case-insensitive matching of page routes.
"""

import logging
import re
import time
from typing import Awaitable, Callable, List, Optional, Pattern, Tuple

from fastapi import Request, Response
from fastapi.routing import APIRoute
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from .logging_config import clear_request_id, get_logger, set_request_id

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
STATIC_PREFIX = "/static"
UNMATCHED_ENDPOINT = "unmatched"

ErrorRenderer = Callable[[Request, Exception], Awaitable[Response]]


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Assigns a request ID and writes one access log line per request.

    The caller's X-Request-ID is reused when present. The ID is stored on
    ``request.state.request_id`` for the error page and echoed on the
    response. Requests slower than ``slow_request_threshold_ms`` are
    logged at WARNING instead of INFO.
    """

    def __init__(self, app: ASGIApp, slow_request_threshold_ms: float = 1000.0) -> None:
        super().__init__(app)
        self.slow_request_threshold_ms = slow_request_threshold_ms

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = set_request_id(request.headers.get(REQUEST_ID_HEADER) or None)
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"{request.method} {request.url.path} raised {type(exc).__name__}",
                extra={"extra_fields": {"error": str(exc)}},
            )
            raise
        finally:
            clear_request_id()

        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers[REQUEST_ID_HEADER] = request_id

        slow = elapsed_ms > self.slow_request_threshold_ms
        logger.log(
            logging.WARNING if slow else logging.INFO,
            f"{'Slow request' if slow else 'Served'} {request.method} {request.url.path} "
            f"[{response.status_code}] in {elapsed_ms:.1f}ms",
            extra={
                "extra_fields": {
                    "request_id": request_id,
                    "status_code": response.status_code,
                    "duration_ms": round(elapsed_ms, 2),
                    "client_host": request.client.host if request.client else None,
                }
            },
        )
        return response


class ErrorPageMiddleware(BaseHTTPMiddleware):
    """
    Turns exceptions raised by a page into the rendered error page.

    Installed innermost outside development mode, so the error page still
    passes through logging, metrics and HSTS.
    """

    def __init__(self, app: ASGIApp, render: ErrorRenderer) -> None:
        super().__init__(app)
        self.render = render

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return await self.render(request, exc)


class HSTSMiddleware(BaseHTTPMiddleware):
    """Adds Strict-Transport-Security to every response."""

    def __init__(self, app: ASGIApp, max_age: int = 2592000) -> None:
        super().__init__(app)
        self.header_value = f"max-age={max_age}"

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        response.headers["Strict-Transport-Security"] = self.header_value
        return response


class StaticFileCacheMiddleware(BaseHTTPMiddleware):
    """
    Lets browsers cache the bundled stylesheet and script for a day.

    Only successful responses under ``/static`` are touched.
    """

    MAX_AGE_SECONDS = 86400
    CACHEABLE_SUFFIXES = (".css", ".js")

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        path = request.url.path
        if (
            path.startswith(STATIC_PREFIX + "/")
            and path.endswith(self.CACHEABLE_SUFFIXES)
            and response.status_code == 200
        ):
            response.headers["Cache-Control"] = f"public, max-age={self.MAX_AGE_SECONDS}"
        return response


class CaseInsensitiveRoutingMiddleware(BaseHTTPMiddleware):
    """
    Matches page routes regardless of letter case.

    ``/home/privacy`` is rewritten to the declared ``/Home/Privacy`` before
    routing. Path parameters keep the case they were sent with. Static
    files are left alone.
    """

    def __init__(self, app: ASGIApp) -> None:
        super().__init__(app)
        self._patterns: Optional[List[Tuple[Pattern, Pattern, str]]] = None

    def _route_patterns(self, request: Request) -> List[Tuple[Pattern, Pattern, str]]:
        if self._patterns is None:
            self._patterns = [
                (
                    route.path_regex,
                    re.compile(route.path_regex.pattern, re.IGNORECASE),
                    route.path_format,
                )
                for route in request.app.router.routes
                if isinstance(route, APIRoute)
            ]
        return self._patterns

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.scope["path"]
        if not path.startswith(STATIC_PREFIX + "/"):
            patterns = self._route_patterns(request)
            if not any(exact.match(path) for exact, _, _ in patterns):
                for _, folded, path_format in patterns:
                    match = folded.match(path)
                    if match:
                        request.scope["path"] = path_format.format(**match.groupdict())
                        break
        return await call_next(request)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """
    Reports method, endpoint, status and duration of each request.

    The endpoint label is the matched route template, so ``/Home/Index/7``
    and ``/Home/Index/8`` share one series. Static assets share ``/static``
    and requests matching no route share ``unmatched``.
    """

    def __init__(self, app: ASGIApp, track_func: Callable) -> None:
        super().__init__(app)
        self.track_func = track_func

    @staticmethod
    def endpoint_label(request: Request) -> str:
        route = request.scope.get("route")
        if route is not None:
            return route.path
        if request.url.path.startswith(STATIC_PREFIX + "/"):
            return STATIC_PREFIX
        return UNMATCHED_ENDPOINT

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        self.track_func(
            method=request.method,
            endpoint=self.endpoint_label(request),
            status_code=response.status_code,
            duration=time.perf_counter() - started,
        )
        return response
