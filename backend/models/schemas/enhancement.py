"""LLM reply contract: insights that enrich a local analysis."""

from pydantic import BaseModel, Field, field_validator


class Enhancement(BaseModel):
    """Structured reply to one enhancement prompt.

    The LLM may only add narrative and suggestions; it has no score or
    skill fields, so it can never override the local result.
    """
    insights: str = Field(..., min_length=1)
    improvements: list[str] = []
    strengths: list[str] = []

    @field_validator("improvements", "strengths")
    @classmethod
    def _drop_blank(cls, items: list[str]) -> list[str]:
        return [item.strip() for item in items if item.strip()]
