"""Keyword-based skill detection against the static taxonomy.

Matching is a case-insensitive substring test with no stemming or word
boundaries, so "java" is found inside "javascript". When several candidates
are checked together, a keyword whose every occurrence lies inside an
occurrence of a longer matching candidate is dropped ("sql" inside
"postgresql"). A single-candidate check stays a plain substring test.
"""

from collections.abc import Iterable, Sequence

from services.taxonomy import OTHER_CATEGORY, SKILL_TAXONOMY


def _occurrences(text: str, keyword: str) -> list[tuple[int, int]]:
    spans = []
    start = text.find(keyword)
    while start != -1:
        spans.append((start, start + len(keyword)))
        start = text.find(keyword, start + 1)
    return spans


def find_matches(text: str, skills: Sequence[str]) -> list[str]:
    """Return the skills present in ``text``, in input order (duplicates kept)."""
    if not text or not skills:
        return []

    haystack = text.lower()
    spans: dict[str, list[tuple[int, int]]] = {}
    for skill in skills:
        found = _occurrences(haystack, skill.lower())
        if found:
            spans[skill] = found

    if len(spans) < 2:
        return [skill for skill in skills if skill in spans]

    def shadowed(skill: str) -> bool:
        keyword_len = len(skill)
        covering = [
            span
            for other, other_spans in spans.items()
            if len(other) > keyword_len
            for span in other_spans
        ]
        return all(
            any(c_start <= start and end <= c_end for c_start, c_end in covering)
            for start, end in spans[skill]
        )

    kept = {skill for skill in spans if not shadowed(skill)}
    return [skill for skill in skills if skill in kept]


def category_of(skill: str) -> str:
    """Return the first taxonomy category listing ``skill``, else "other"."""
    needle = skill.lower()
    for category, keywords in SKILL_TAXONOMY.items():
        if needle in keywords:
            return category
    return OTHER_CATEGORY


def group_by_category(skills: Iterable[str]) -> dict[str, list[str]]:
    """Group skills by category, categories in taxonomy order ("other" last)."""
    groups: dict[str, list[str]] = {category: [] for category in SKILL_TAXONOMY}
    groups[OTHER_CATEGORY] = []
    for skill in skills:
        groups[category_of(skill)].append(skill)
    return {category: members for category, members in groups.items() if members}
