"""Orchestrator: local skill analysis plus optional LLM enhancement.

Pipeline:
1. Local matching engine (always runs, zero latency, never fails)
2. LLM enhancement over resume chunks (optional, bounded by a time budget)
3. Fallback to the local result when enhancement is unavailable or fails,
   unless strict mode asks for the failure to surface
"""

import asyncio
import logging
import time

from config import Settings
from models.responses import Analysis
from services import enhancer, matching_engine
from services.chunking import ChunkProcessingError, ChunkTimeoutError
from services.errors import AnalysisTimeoutError, LLMError, UpstreamResponseError

logger = logging.getLogger(__name__)


async def analyze(
    resume_text: str,
    job_description: str,
    llm_client: enhancer.CompletionClient | None,
    settings: Settings,
) -> Analysis:
    """Run the local analysis and enhance it with the LLM when possible."""
    started = time.monotonic()
    local = matching_engine.analyze(resume_text, job_description)
    logger.info(
        "Local analysis: score=%d matched=%d missing=%d",
        local.score, len(local.matched_skills) - len(local.missing_skills), len(local.missing_skills),
    )

    if llm_client is None:
        return local

    if (
        len(resume_text) < settings.enhancement_min_chars
        or len(job_description) < settings.enhancement_min_chars
    ):
        logger.info("Content too short for LLM enhancement, using local analysis")
        return local

    try:
        result = await asyncio.wait_for(
            enhancer.enhance(resume_text, job_description, local, llm_client, settings),
            settings.analysis_timeout_seconds,
        )
    except asyncio.TimeoutError:
        logger.warning("LLM enhancement timed out after %.0fs", settings.analysis_timeout_seconds)
        if settings.llm_strict:
            raise AnalysisTimeoutError(
                f"Analysis timed out after {settings.analysis_timeout_seconds:.0f} seconds"
            ) from None
        return local
    except ChunkProcessingError as e:
        logger.warning("LLM enhancement failed on chunk %d: %s", e.index + 1, e)
        if settings.llm_strict:
            if isinstance(e, ChunkTimeoutError) or isinstance(e.__cause__, TimeoutError):
                raise AnalysisTimeoutError(str(e)) from e
            raise UpstreamResponseError(f"LLM enhancement failed: {e}") from e
        return local
    except (LLMError, UpstreamResponseError) as e:
        logger.warning("LLM enhancement unavailable: %s", e)
        if settings.llm_strict:
            raise
        return local

    logger.info("Analysis completed in %.2fs", time.monotonic() - started)
    return result
