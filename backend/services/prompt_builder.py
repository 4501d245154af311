"""Prompt templates for the LLM enhancement call."""

from models.responses import Analysis

SYSTEM_PROMPT = (
    "You are an expert resume analyst and career advisor. "
    "Provide specific, actionable feedback grounded in the text you are given."
)

_JOB_DESCRIPTION_PREVIEW = 1500


def build_enhancement_messages(
    resume_chunk: str,
    job_description: str,
    analysis: Analysis,
    index: int = 0,
    total: int = 1,
) -> list[dict[str, str]]:
    """Ask for insights on one resume chunk, calibrated by the local analysis.

    The local score is context only; the reply format has no score field.
    """
    matched = [s.name for s in analysis.matched_skills if s.match]
    part = f" (part {index + 1} of {total})" if total > 1 else ""

    prompt = f"""Review this resume{part} against the job description.

LOCAL SKILL ANALYSIS (already computed, do not re-score):
- Match score: {analysis.score}%
- Matched skills: {', '.join(matched) or 'none'}
- Missing skills: {', '.join(analysis.missing_skills) or 'none'}
---

JOB DESCRIPTION:
---
{job_description[:_JOB_DESCRIPTION_PREVIEW]}
---

RESUME{part.upper()}:
---
{resume_chunk}
---

Cover career alignment, experience that should be emphasised, industry-specific
advice, how the skills are presented, and achievements that could be quantified.

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "insights": "<one or two paragraphs of analysis>",
  "improvements": [<2-5 specific, actionable improvements>],
  "strengths": [<1-5 strengths with evidence from the resume>]
}}"""

    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": prompt},
    ]
