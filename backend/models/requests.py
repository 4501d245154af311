from pydantic import Field

from models.responses import CamelModel


class QuickAnalyzeRequest(CamelModel):
    """Plain-text variant of the upload request; accepts camelCase or snake_case keys."""

    resume_text: str = Field(..., min_length=1, max_length=50000, description="Plain text resume content")
    job_description: str = Field(..., description="Job description text")
