"""
Employee Directory - Main FastAPI Application.

Renders the employee list, privacy and error pages with Jinja2 templates.
Employees are read from a per-request data source and projected into
view records before rendering.
"""

from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional
from uuid import uuid4

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from . import __version__
from .config import Settings, settings
from .dependencies import get_employee_service
from .domain.entities import EmployeeModel, ErrorViewModel
from .logging_config import get_logger, get_request_id, setup_logging
from .metrics import (
    metrics_endpoint,
    track_employees_projected,
    track_error_page,
    track_page_view,
    track_request_metrics,
)
from .middleware import (
    CaseInsensitiveRoutingMiddleware,
    ErrorPageMiddleware,
    HSTSMiddleware,
    PrometheusMiddleware,
    RequestLoggingMiddleware,
    StaticFileCacheMiddleware,
)
from .services.employee_service import EmployeeService
from .tracing import configure_opentelemetry, instrument_fastapi

logger = get_logger(__name__)

BASE_PATH = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(BASE_PATH / "templates"))

NO_STORE_HEADERS = {
    "Cache-Control": "no-store, no-cache",
    "Pragma": "no-cache",
}


def format_date(value: Optional[date]) -> str:
    """
    Format a date for display.

    Args:
        value: Date to format, or None

    Returns:
        Formatted date string (e.g., "Dec 05, 2015"), or empty string if None
    """
    if value is None:
        return ""
    return value.strftime("%b %d, %Y")


def blank_if_none(value: Any) -> Any:
    """Render missing values as empty table cells."""
    return "" if value is None else value


templates.env.filters["format_date"] = format_date
templates.env.filters["blank_if_none"] = blank_if_none


def _current_request_id(request: Request) -> str:
    """Request ID assigned by the logging middleware, or a fresh one."""
    return (
        getattr(request.state, "request_id", None) or get_request_id() or str(uuid4())
    )


def _page_context(request: Request, **extra: Any) -> Dict[str, Any]:
    app_settings: Settings = request.app.state.settings
    context: Dict[str, Any] = {
        "app_name": app_settings.APP_NAME,
        "environment": app_settings.ENVIRONMENT,
    }
    context.update(extra)
    return context


router = APIRouter()


@router.get(
    "/",
    response_class=HTMLResponse,
    tags=["Pages"],
    summary="Employee list",
    description="Employees projected into view records and rendered as a table",
)
@router.get("/Home", response_class=HTMLResponse, include_in_schema=False)
@router.get("/Home/Index", response_class=HTMLResponse, include_in_schema=False)
@router.get("/Home/Index/{id}", response_class=HTMLResponse, include_in_schema=False)
async def index(
    request: Request,
    service: EmployeeService = Depends(get_employee_service),
) -> HTMLResponse:
    """
    Render the employee list.

    Args:
        request: FastAPI request object
        service: Employee service scoped to this request

    Returns:
        Rendered HTML response
    """
    employees: List[EmployeeModel] = service.get_employees()

    track_page_view("home_index")
    track_employees_projected(len(employees))

    logger.info(
        "Rendering employee list",
        extra={"extra_fields": {"employee_count": len(employees)}},
    )

    return templates.TemplateResponse(
        request=request,
        name="home/index.html",
        context=_page_context(request, employees=employees),
    )


@router.get(
    "/Home/Privacy",
    response_class=HTMLResponse,
    tags=["Pages"],
    summary="Privacy page",
)
async def privacy(request: Request) -> HTMLResponse:
    """Render privacy page."""
    track_page_view("home_privacy")
    return templates.TemplateResponse(
        request=request,
        name="home/privacy.html",
        context=_page_context(request),
    )


@router.get(
    "/Home/Error",
    response_class=HTMLResponse,
    tags=["Pages"],
    summary="Error page",
)
async def error(request: Request) -> HTMLResponse:
    """
    Render the shared error page.

    The response is never cached so the request ID shown is always current.
    """
    track_error_page("requested")
    return render_error_page(request, status_code=200)


@router.get(
    "/health",
    tags=["Health"],
    summary="Health check",
)
async def health_check(
    request: Request,
    service: EmployeeService = Depends(get_employee_service),
) -> Dict[str, Any]:
    """
    Report service health.

    Returns:
        Dictionary with status, service name and number of employees served
    """
    app_settings: Settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": app_settings.SERVICE_NAME,
        "employees": len(service.get_employees()),
    }


@router.get("/metrics", include_in_schema=False)
async def metrics():
    """Prometheus metrics endpoint."""
    return await metrics_endpoint()


def render_error_page(request: Request, status_code: int = 500) -> HTMLResponse:
    """
    Render the shared error page for the current request.

    Args:
        request: Request that failed or asked for the error page
        status_code: HTTP status of the response

    Returns:
        Rendered HTML response with caching disabled
    """
    model = ErrorViewModel(request_id=_current_request_id(request))
    return templates.TemplateResponse(
        request=request,
        name="shared/error.html",
        context=_page_context(request, model=model),
        status_code=status_code,
        headers=NO_STORE_HEADERS,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> HTMLResponse:
    """
    Render the error page for exceptions no route handled.

    Installed outside development mode only.
    """
    request_id = _current_request_id(request)
    logger.error(
        f"Unhandled exception: {request.method} {request.url.path}",
        exc_info=exc,
        extra={
            "extra_fields": {
                "request_id": request_id,
                "error_type": type(exc).__name__,
            }
        },
    )
    track_error_page("unhandled_exception")
    return render_error_page(request, status_code=500)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to use, defaults to the global settings

    Returns:
        Configured FastAPI application
    """
    app_settings = app_settings or settings

    setup_logging(
        log_level=app_settings.LOG_LEVEL,
        service_name=app_settings.SERVICE_NAME,
        use_json=app_settings.LOG_JSON,
    )

    application = FastAPI(
        title=app_settings.APP_NAME,
        description="Employee list rendered from projected view records",
        version=__version__,
        debug=app_settings.is_development,
        docs_url="/api/docs" if app_settings.DEBUG else None,
        redoc_url="/api/redoc" if app_settings.DEBUG else None,
    )
    application.state.settings = app_settings

    if not app_settings.is_development:
        application.add_exception_handler(Exception, unhandled_exception_handler)

    # First added is innermost
    if not app_settings.is_development:
        application.add_middleware(ErrorPageMiddleware, render=unhandled_exception_handler)
    application.add_middleware(CaseInsensitiveRoutingMiddleware)
    application.add_middleware(StaticFileCacheMiddleware)
    if not app_settings.is_development:
        application.add_middleware(HSTSMiddleware, max_age=app_settings.HSTS_MAX_AGE)
    application.add_middleware(
        RequestLoggingMiddleware,
        slow_request_threshold_ms=app_settings.SLOW_REQUEST_THRESHOLD_MS,
    )
    application.add_middleware(PrometheusMiddleware, track_func=track_request_metrics)
    if app_settings.HTTPS_REDIRECT:
        application.add_middleware(HTTPSRedirectMiddleware)

    application.mount(
        "/static",
        StaticFiles(directory=str(BASE_PATH / "static")),
        name="static",
    )
    application.include_router(router)

    if app_settings.ENABLE_TRACING:
        configure_opentelemetry(
            service_name=app_settings.SERVICE_NAME,
            service_version=__version__,
            environment=app_settings.ENVIRONMENT,
            otlp_endpoint=app_settings.OTLP_ENDPOINT,
        )
        instrument_fastapi(application)

    logger.info(
        "Application configured",
        extra={
            "extra_fields": {
                "app_name": app_settings.APP_NAME,
                "environment": app_settings.ENVIRONMENT,
                "https_redirect": app_settings.HTTPS_REDIRECT,
                "tracing": app_settings.ENABLE_TRACING,
            }
        },
    )

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
