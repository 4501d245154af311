"""Tests for recommendation synthesis."""

from models.responses import SkillMatch
from services.recommendations import (
    ENHANCE_IMPROVEMENTS,
    FORMAT_TIPS,
    FUNDAMENTALS_IMPROVEMENTS,
    synthesize,
)


def _skills(**matches):
    return [SkillMatch(name=name, match=match) for name, match in matches.items()]


def test_skill_gaps_grouped_by_category_in_taxonomy_order():
    recs = synthesize(["scrum", "aws", "redis", "python"], [], 0)
    assert len(recs.skill_gaps) == 4
    assert recs.skill_gaps[0].startswith("Programming languages")
    assert "python" in recs.skill_gaps[0]
    assert recs.skill_gaps[1].startswith("Databases")
    assert recs.skill_gaps[2].startswith("Cloud & DevOps")
    assert recs.skill_gaps[3].startswith("Soft skills")


def test_one_gap_entry_per_category():
    recs = synthesize(["aws", "docker"], [], 0)
    assert recs.skill_gaps == ["Cloud & DevOps: consider adding experience with aws, docker"]


def test_category_improvements_precede_generic_ones():
    recs = synthesize(["aws"], _skills(aws=False), 0)
    assert "aws" in recs.improvements[0]
    assert recs.improvements[1:] == list(FUNDAMENTALS_IMPROVEMENTS)


def test_low_score_adds_fundamentals():
    recs = synthesize([], [], 49)
    assert recs.improvements == list(FUNDAMENTALS_IMPROVEMENTS)
    assert 3 <= len(FUNDAMENTALS_IMPROVEMENTS) <= 4


def test_mid_score_adds_enhance_examples():
    recs = synthesize([], [], 50)
    assert recs.improvements == list(ENHANCE_IMPROVEMENTS)
    assert synthesize([], [], 74).improvements == list(ENHANCE_IMPROVEMENTS)


def test_high_score_adds_no_generic_improvements():
    assert synthesize([], [], 75).improvements == []
    assert synthesize([], [], 100).improvements == []


def test_strengths_from_matched_skills_by_category():
    recs = synthesize(["aws"], _skills(react=True, javascript=True, aws=False), 67)
    assert recs.strengths == [
        "Programming languages: strong background in javascript",
        "Frontend: strong background in react",
    ]


def test_no_strengths_without_matches():
    assert synthesize(["aws"], _skills(aws=False), 0).strengths == []


def test_format_tips_are_fixed():
    a = synthesize([], [], 0)
    b = synthesize(["python"], _skills(react=True, python=False), 90)
    assert a.format == b.format == list(FORMAT_TIPS)
    assert 4 <= len(FORMAT_TIPS) <= 5
