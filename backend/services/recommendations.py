"""Turn matched/missing skills and the score into readable recommendations."""

from models.responses import Recommendations, SkillMatch
from services.skill_matcher import group_by_category
from services.taxonomy import IMPROVEMENT_TEMPLATES, category_label

LOW_SCORE_THRESHOLD = 50
MID_SCORE_THRESHOLD = 75

FUNDAMENTALS_IMPROVEMENTS = (
    "Your resume needs significant alignment with the job requirements",
    "Focus on acquiring and highlighting the skills the role asks for",
    "Consider courses or certifications in the missing skills",
    "Mirror the job description's terminology where it truthfully describes your experience",
)

ENHANCE_IMPROVEMENTS = (
    "Your resume shows good potential but could use some enhancement",
    "Highlight more specific examples of using the required skills",
)

FORMAT_TIPS = (
    "Use a clear, professional layout with standard section headings",
    "Make sure your contact information is prominent",
    "Use bullet points to highlight achievements",
    "Include relevant metrics and results where possible",
    "Keep formatting simple so applicant tracking systems can parse it",
)


def synthesize(
    missing_skills: list[str],
    matched_skills: list[SkillMatch],
    score: int,
) -> Recommendations:
    improvements: list[str] = []
    skill_gaps: list[str] = []
    strengths: list[str] = []

    for category, skills in group_by_category(missing_skills).items():
        joined = ", ".join(skills)
        skill_gaps.append(f"{category_label(category)}: consider adding experience with {joined}")
        template = IMPROVEMENT_TEMPLATES.get(category)
        if template:
            improvements.append(template.format(skills=joined))

    if score < LOW_SCORE_THRESHOLD:
        improvements.extend(FUNDAMENTALS_IMPROVEMENTS)
    elif score < MID_SCORE_THRESHOLD:
        improvements.extend(ENHANCE_IMPROVEMENTS)

    present = [s.name for s in matched_skills if s.match]
    for category, skills in group_by_category(present).items():
        strengths.append(f"{category_label(category)}: strong background in {', '.join(skills)}")

    return Recommendations(
        improvements=improvements,
        strengths=strengths,
        skill_gaps=skill_gaps,
        format=list(FORMAT_TIPS),
    )
