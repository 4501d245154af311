from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SkillMatch(CamelModel):
    name: str
    match: bool


class Recommendations(CamelModel):
    improvements: list[str] = []
    strengths: list[str] = []
    skill_gaps: list[str] = []
    format: list[str] = []


class Analysis(CamelModel):
    score: int = Field(0, ge=0, le=100)
    matched_skills: list[SkillMatch] = []
    missing_skills: list[str] = []
    recommendations: Recommendations = Recommendations()
    detailed_analysis: str = ""
    low_confidence: bool = False
    is_chunked: bool = False
    enhanced: bool = False

    @model_validator(mode="after")
    def _missing_matches_unmatched(self):
        unmatched = [s.name for s in self.matched_skills if not s.match]
        if unmatched != self.missing_skills:
            raise ValueError("missing_skills must list exactly the unmatched skills, in order")
        return self


class HealthResponse(CamelModel):
    status: str
    version: str
    environment: str
    uptime_seconds: float
    llm_configured: bool


class ErrorResponse(BaseModel):
    error: str
