import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.router import APP_VERSION, create_limiter, router
from config import Settings, settings as default_settings
from services.errors import ResumeMatchError
from services.llm_client import LLMClient

logger = logging.getLogger(__name__)

_FROM_SETTINGS = object()


async def _service_error(request: Request, exc: ResumeMatchError):
    if exc.status_code >= 500:
        logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)


async def _request_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid request: {location + ': ' if location else ''}{first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


async def _unexpected_error(request: Request, exc: Exception):
    logger.exception("Unexpected error on %s", request.url.path)
    return JSONResponse(status_code=500, content={"error": "An unexpected error occurred"})


def create_app(settings: Settings | None = None, llm_client=_FROM_SETTINGS) -> FastAPI:
    """Build the API. ``llm_client`` defaults to one built from settings."""
    settings = settings or default_settings

    app = FastAPI(
        title="Resume Match API",
        description="Resume / job description skill matching with optional LLM insights",
        version=APP_VERSION,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.llm_client = LLMClient.from_settings(settings) if llm_client is _FROM_SETTINGS else llm_client
    app.state.started_at = time.monotonic()
    app.state.limiter = create_limiter(settings)

    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ResumeMatchError, _service_error)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(Exception, _unexpected_error)

    app.include_router(router)
    return app


logging.basicConfig(
    level=default_settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
app = create_app()
