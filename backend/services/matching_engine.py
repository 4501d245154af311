"""Local resume / job-description matching engine.

Pipeline:
1. Detect taxonomy skills mentioned in the job description
2. Check each of them against the resume text
3. Score = share of job skills present in the resume
4. Synthesize recommendations
5. Render the detailed text report

Pure and synchronous: no I/O, no clock, no randomness. The result doubles
as the fallback whenever LLM enhancement is unavailable.
"""

import logging

from models.responses import Analysis, Recommendations, SkillMatch
from services.recommendations import synthesize
from services.scoring import compute_score
from services.skill_matcher import find_matches, group_by_category
from services.taxonomy import all_skills, category_label

logger = logging.getLogger(__name__)


def analyze(resume_text: str, job_description: str) -> Analysis:
    """Compare a resume against a job description using the skill taxonomy."""
    job_skills = find_matches(job_description, all_skills())

    matched_skills = [
        SkillMatch(name=skill, match=bool(find_matches(resume_text, [skill])))
        for skill in job_skills
    ]
    missing_skills = [s.name for s in matched_skills if not s.match]
    matched_count = len(matched_skills) - len(missing_skills)

    score = compute_score(matched_count, len(job_skills))
    low_confidence = not job_skills
    if low_confidence:
        logger.info("No taxonomy skills found in job description; score is not meaningful")

    recommendations = synthesize(missing_skills, matched_skills, score)

    return Analysis(
        score=score,
        matched_skills=matched_skills,
        missing_skills=missing_skills,
        recommendations=recommendations,
        detailed_analysis=render_report(score, matched_skills, recommendations, low_confidence),
        low_confidence=low_confidence,
    )


def _bullets(title: str, items: list[str]) -> str:
    return "\n".join([title, *(f"- {item}" for item in items)])


def render_report(
    score: int,
    matched_skills: list[SkillMatch],
    recommendations: Recommendations,
    low_confidence: bool = False,
) -> str:
    """Render the multi-section report. Empty sections are omitted."""
    present = [s.name for s in matched_skills if s.match]
    absent = [s.name for s in matched_skills if not s.match]

    overview = [f"Overall match score: {score}%"]
    if low_confidence:
        overview.append(
            "No recognizable skills were found in the job description, "
            "so this score carries little meaning."
        )
    else:
        overview.append(
            f"Found {len(present)} of {len(matched_skills)} job description skills in the resume "
            f"({len(absent)} missing)."
        )
    sections = ["\n".join(overview)]

    if matched_skills:
        present_set = set(present)
        lines = ["Skills by category:"]
        for category, skills in group_by_category(s.name for s in matched_skills).items():
            hits = [s for s in skills if s in present_set]
            misses = [s for s in skills if s not in present_set]
            rate = round(len(hits) / len(skills) * 100)
            lines.append(f"{category_label(category)} ({rate}% match)")
            if hits:
                lines.append(f"  Matched: {', '.join(hits)}")
            if misses:
                lines.append(f"  Missing: {', '.join(misses)}")
        sections.append("\n".join(lines))

    for title, items in (
        ("Skill development priorities:", recommendations.skill_gaps),
        ("Key strengths:", recommendations.strengths),
        ("Recommended actions:", recommendations.improvements),
        ("Format recommendations:", recommendations.format),
    ):
        if items:
            sections.append(_bullets(title, items))

    return "\n\n".join(sections)
