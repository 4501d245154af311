"""Tests for the local matching engine."""

import pytest

from models.responses import Analysis, SkillMatch
from services.matching_engine import analyze

from helpers import SAMPLE_JD, SAMPLE_RESUME


def test_javascript_react_aws_scenario():
    result = analyze(
        "John Doe, JavaScript, React expert",
        "Seeking engineer with JavaScript, React, AWS experience",
    )
    assert result.matched_skills == [
        SkillMatch(name="javascript", match=True),
        SkillMatch(name="react", match=True),
        SkillMatch(name="aws", match=False),
    ]
    assert result.missing_skills == ["aws"]
    assert result.score == 67
    assert result.low_confidence is False


def test_empty_resume_scenario():
    result = analyze("", "Need Python and Docker")
    assert [s.match for s in result.matched_skills] == [False, False]
    assert result.missing_skills == ["python", "docker"]
    assert result.score == 0


def test_empty_job_description_is_neutral_and_low_confidence():
    result = analyze("Python expert", "")
    assert result.score == 0
    assert result.matched_skills == []
    assert result.missing_skills == []
    assert result.low_confidence is True
    assert "No recognizable skills" in result.detailed_analysis


def test_both_empty_does_not_raise():
    result = analyze("", "")
    assert isinstance(result, Analysis)
    assert result.score == 0


def test_sample_documents():
    result = analyze(SAMPLE_RESUME, SAMPLE_JD)
    assert [s.name for s in result.matched_skills] == [
        "python", "django", "graphql", "postgresql", "redis",
        "docker", "kubernetes", "terraform", "leadership",
    ]
    assert result.missing_skills == ["graphql", "redis", "terraform", "leadership"]
    assert result.score == 56


def test_deterministic():
    first = analyze(SAMPLE_RESUME, SAMPLE_JD)
    second = analyze(SAMPLE_RESUME, SAMPLE_JD)
    assert first.model_dump() == second.model_dump()


@pytest.mark.parametrize("resume", ["", "Python", SAMPLE_RESUME, SAMPLE_JD, "x" * 10000])
def test_score_bounds_and_partition(resume):
    result = analyze(resume, SAMPLE_JD)
    assert 0 <= result.score <= 100
    assert [s.name for s in result.matched_skills if not s.match] == result.missing_skills


def test_adding_job_skills_never_lowers_score():
    job_skills = [s.name for s in analyze("", SAMPLE_JD).matched_skills]
    resume = "Generalist engineer."
    previous = analyze(resume, SAMPLE_JD).score
    for skill in job_skills:
        resume += f" {skill}"
        score = analyze(resume, SAMPLE_JD).score
        assert score >= previous
        previous = score
    assert previous == 100


def test_report_category_breakdown():
    report = analyze(SAMPLE_RESUME, SAMPLE_JD).detailed_analysis
    assert report.startswith("Overall match score: 56%")
    assert "Programming languages (100% match)" in report
    assert "Backend (50% match)" in report
    assert "Cloud & DevOps (67% match)" in report
    assert "Soft skills (0% match)" in report
    assert "  Missing: graphql" in report


def test_report_sections_in_fixed_order():
    report = analyze(SAMPLE_RESUME, SAMPLE_JD).detailed_analysis
    headings = [
        "Skills by category:",
        "Skill development priorities:",
        "Key strengths:",
        "Recommended actions:",
        "Format recommendations:",
    ]
    positions = [report.index(h) for h in headings]
    assert positions == sorted(positions)


def test_report_omits_empty_sections():
    report = analyze("Python expert", "").detailed_analysis
    assert "Skills by category:" not in report
    assert "Skill development priorities:" not in report
    assert "Key strengths:" not in report
    assert "Format recommendations:" in report


def test_full_match_report_has_no_gaps():
    result = analyze("Python and Docker", "Need Python and Docker")
    assert result.score == 100
    assert result.recommendations.skill_gaps == []
    assert result.recommendations.improvements == []
    assert "Skill development priorities:" not in result.detailed_analysis


def test_serializes_to_camel_case():
    payload = analyze("John Doe, JavaScript", "JavaScript and AWS").model_dump(by_alias=True)
    assert set(payload) >= {"score", "matchedSkills", "missingSkills", "recommendations", "detailedAnalysis"}
    assert set(payload["recommendations"]) == {"improvements", "strengths", "skillGaps", "format"}
