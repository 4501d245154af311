import logging
import time

from fastapi import APIRouter, Depends, Request, Response
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.datastructures import UploadFile

from api.dependencies import get_llm_client, get_settings
from config import Settings
from models.requests import QuickAnalyzeRequest
from models.responses import Analysis, ErrorResponse, HealthResponse
from services import document_parser, resume_analyzer
from services.errors import InputValidationError
from services.validation import validate_job_description, validate_resume_upload

logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"

ANALYZE_ERRORS = {
    400: {"model": ErrorResponse, "description": "Invalid upload or job description"},
    429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
    502: {"model": ErrorResponse, "description": "LLM enhancement failed (strict mode)"},
    504: {"model": ErrorResponse, "description": "Analysis timed out (strict mode)"},
}

router = APIRouter(prefix="/api")


async def _read_text_field(value) -> str:
    """Accept a form field sent either as plain text or as a blob part."""
    if isinstance(value, UploadFile):
        return document_parser.decode_text(await value.read())
    if isinstance(value, str):
        return value
    raise InputValidationError("Job description is required")


@router.get("/health", response_model=HealthResponse)
async def health(request: Request, response: Response, settings: Settings = Depends(get_settings)):
    response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
    llm_configured = get_llm_client(request) is not None
    return HealthResponse(
        status="ok" if llm_configured else "degraded",
        version=APP_VERSION,
        environment=settings.environment,
        uptime_seconds=round(time.monotonic() - request.app.state.started_at, 3),
        llm_configured=llm_configured,
    )


@router.post("/analyze", response_model=Analysis, responses=ANALYZE_ERRORS)
async def analyze(
    request: Request,
    settings: Settings = Depends(get_settings),
    llm_client=Depends(get_llm_client),
):
    form = await request.form()
    resume = form.get("resume")
    if not isinstance(resume, UploadFile):
        raise InputValidationError("Invalid resume file upload")
    job_description = await _read_text_field(form.get("jobDescription"))

    content = await resume.read()
    validate_resume_upload(resume.filename, resume.content_type, len(content), settings)
    validate_job_description(job_description, settings)
    logger.info(
        "Analyze request: file=%s type=%s size=%d jd_chars=%d",
        resume.filename, resume.content_type, len(content), len(job_description),
    )

    resume_text = document_parser.extract_text(content, resume.filename, resume.content_type)
    if not resume_text.strip():
        raise InputValidationError("No text could be extracted from the resume")

    return await resume_analyzer.analyze(resume_text, job_description, llm_client, settings)


@router.post("/analyze/quick", response_model=Analysis, responses=ANALYZE_ERRORS)
async def analyze_quick(
    body: QuickAnalyzeRequest,
    settings: Settings = Depends(get_settings),
    llm_client=Depends(get_llm_client),
):
    validate_job_description(body.job_description, settings)
    return await resume_analyzer.analyze(body.resume_text, body.job_description, llm_client, settings)


def create_limiter(settings: Settings) -> Limiter:
    """Per-app limiter: ``settings.rate_limit`` on every route except health.

    Enforced by ``SlowAPIMiddleware``, which reads it from ``app.state.limiter``.
    """
    limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
    limiter.exempt(health)
    return limiter
