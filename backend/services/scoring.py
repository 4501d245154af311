"""Match score: share of job-description skills found in the resume."""

# Score reported when the job description names no taxonomy skills
NEUTRAL_SCORE = 0


def compute_score(matched_count: int, total_count: int) -> int:
    """Return ``round(matched / total * 100)`` clamped to 0-100.

    A job description without recognizable skills (``total_count == 0``)
    yields NEUTRAL_SCORE; callers flag such analyses as low confidence.
    """
    if total_count <= 0:
        return NEUTRAL_SCORE
    score = round(matched_count / total_count * 100)
    return min(100, max(0, score))
