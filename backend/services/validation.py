"""Request input validation, applied before any analysis runs."""

from config import Settings
from services.document_parser import detect_kind
from services.errors import InputValidationError


def validate_resume_upload(
    filename: str | None,
    content_type: str | None,
    size: int,
    settings: Settings,
) -> str:
    """Check type and size of an uploaded resume; return its detected kind."""
    kind = detect_kind(filename, content_type)
    if kind is None:
        raise InputValidationError("Invalid file type. Please upload a PDF, DOC, DOCX, or TXT file.")
    if size == 0:
        raise InputValidationError("Resume file is empty")
    if size > settings.max_upload_bytes:
        raise InputValidationError(f"File too large. Maximum size is {settings.max_upload_size_mb}MB.")
    return kind


def validate_job_description(text: str, settings: Settings) -> None:
    if not text.strip():
        raise InputValidationError("Job description cannot be empty")
    if len(text.strip()) < settings.job_description_min_chars:
        raise InputValidationError(
            f"Job description must be at least {settings.job_description_min_chars} characters long"
        )
    if len(text) > settings.job_description_max_chars:
        raise InputValidationError(
            f"Job description cannot exceed {settings.job_description_max_chars} characters"
        )
