"""LLM enhancement of a local analysis.

The resume is chunked to stay within prompt limits; each chunk gets one
enhancement call (with retries), the replies are shape-checked, and the
valid ones are merged into the local analysis in chunk order. Merging only
appends: score, skills, skill gaps and format tips are left untouched.
"""

import json
import logging
from typing import Protocol

from config import Settings
from models.responses import Analysis
from models.result import Err, Ok, check_shape
from models.schemas import Enhancement
from services import prompt_builder
from services.chunking import process_in_chunks, with_retry
from services.errors import UpstreamResponseError
from services.llm_client import strip_code_fences

logger = logging.getLogger(__name__)

INSIGHTS_HEADING = "AI-enhanced insights:"


class CompletionClient(Protocol):
    async def complete(self, messages: list[dict[str, str]], **options) -> str: ...


def parse_reply(raw: str) -> Ok[Enhancement] | Err:
    """Decode an LLM reply and check it against the Enhancement contract."""
    text = strip_code_fences(raw)
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(f"reply is not valid JSON: {e.msg}")
    return check_shape(Enhancement, payload)


def _append_unique(base: list[str], extra: list[str]) -> list[str]:
    merged = list(base)
    seen = {item.lower() for item in merged}
    for item in extra:
        if item.lower() not in seen:
            seen.add(item.lower())
            merged.append(item)
    return merged


def merge(analysis: Analysis, enhancements: list[Enhancement], chunked: bool = False) -> Analysis:
    """Return a copy of ``analysis`` augmented with the given enhancements."""
    if not enhancements:
        return analysis

    improvements = analysis.recommendations.improvements
    strengths = analysis.recommendations.strengths
    for enhancement in enhancements:
        improvements = _append_unique(improvements, enhancement.improvements)
        strengths = _append_unique(strengths, enhancement.strengths)

    insights = "\n\n".join(e.insights.strip() for e in enhancements)
    recommendations = analysis.recommendations.model_copy(
        update={"improvements": improvements, "strengths": strengths}
    )
    return analysis.model_copy(
        update={
            "recommendations": recommendations,
            "detailed_analysis": f"{analysis.detailed_analysis}\n\n{INSIGHTS_HEADING}\n{insights}".strip(),
            "is_chunked": chunked,
            "enhanced": True,
        }
    )


async def enhance(
    resume_text: str,
    job_description: str,
    analysis: Analysis,
    client: CompletionClient,
    settings: Settings,
) -> Analysis:
    """Enhance ``analysis`` with LLM insights.

    Raises UpstreamResponseError if no chunk produced a usable reply;
    chunk, timeout and provider errors propagate to the caller.
    """

    async def process_chunk(chunk: str, index: int, total: int) -> Ok[Enhancement] | Err:
        messages = prompt_builder.build_enhancement_messages(
            chunk, job_description, analysis, index, total
        )
        raw = await with_retry(
            lambda attempt: client.complete(messages),
            max_attempts=settings.llm_max_attempts,
            base_delay=settings.llm_retry_base_delay,
            max_delay=settings.llm_retry_max_delay,
            timeout=settings.llm_timeout_seconds,
        )
        checked = parse_reply(raw)
        if isinstance(checked, Err):
            logger.warning("Discarding malformed reply for chunk %d/%d: %s", index + 1, total, checked.message)
        return checked

    results = await process_in_chunks(
        resume_text,
        process_chunk,
        max_chunk_size=settings.chunk_size,
        parallel=settings.chunk_parallel,
        concurrency=settings.chunk_concurrency,
        timeout=settings.chunk_timeout_seconds,
    )

    enhancements = [r.value for r in results if isinstance(r, Ok)]
    if not enhancements:
        reason = next((r.message for r in results if isinstance(r, Err)), "no reply")
        raise UpstreamResponseError(f"Invalid response from LLM: {reason}")

    logger.info("Merged %d/%d enhancement replies", len(enhancements), len(results))
    return merge(analysis, enhancements, chunked=len(results) > 1)
