"""Chunking, per-chunk timeouts and retry with backoff for LLM calls.

Keeps prompts under token limits and every provider call under a time
budget. Timeouts cancel the work they guard (``asyncio.wait_for`` and
``asyncio.timeout``), so a slow call is stopped rather than left running
in the background.
"""

import asyncio
import logging
import random
import re
import time
from collections import deque
from collections.abc import Awaitable, Callable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CHUNK_SIZE = 5000
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_PARAGRAPH_SEPARATOR = "\n\n"


class ChunkProcessingError(Exception):
    """A chunk processor failed; ``__cause__`` holds the original error."""

    def __init__(self, index: int, elapsed: float, message: str | None = None):
        self.index = index
        self.elapsed = elapsed
        super().__init__(message or f"Chunk {index + 1} failed after {elapsed:.2f}s")


class ChunkTimeoutError(ChunkProcessingError):
    def __init__(self, index: int, elapsed: float, timeout: float):
        self.timeout = timeout
        super().__init__(
            index, elapsed, f"Chunk {index + 1} timed out after {elapsed:.2f}s (limit {timeout}s)"
        )


def _split_words(paragraph: str, max_chunk_size: int) -> list[str]:
    """Pack words into pieces of at most max_chunk_size; overlong words stay whole."""
    pieces: list[str] = []
    current = ""
    for word in paragraph.split():
        candidate = f"{current} {word}" if current else word
        if current and len(candidate) > max_chunk_size:
            pieces.append(current)
            current = word
        else:
            current = candidate
    if current:
        pieces.append(current)
    return pieces


def chunk_text(text: str, max_chunk_size: int = DEFAULT_CHUNK_SIZE) -> list[str]:
    """Split text on blank lines, greedily packing paragraphs into chunks.

    Paragraphs inside a chunk are joined by a blank line. A paragraph longer
    than ``max_chunk_size`` is split on whitespace; a single word longer than
    the limit becomes its own oversized chunk.
    """
    if max_chunk_size < 1:
        raise ValueError("max_chunk_size must be at least 1")

    chunks: list[str] = []
    current = ""
    for raw in _PARAGRAPH_BREAK.split(text):
        paragraph = raw.strip()
        if not paragraph:
            continue

        candidate = f"{current}{_PARAGRAPH_SEPARATOR}{paragraph}" if current else paragraph
        if len(candidate) <= max_chunk_size:
            current = candidate
            continue

        if current:
            chunks.append(current)
            current = ""
        if len(paragraph) <= max_chunk_size:
            current = paragraph
        else:
            pieces = _split_words(paragraph, max_chunk_size)
            chunks.extend(pieces[:-1])
            current = pieces[-1]

    if current:
        chunks.append(current)
    return chunks


async def _run_chunk(
    processor: Callable[[str, int, int], Awaitable[T]],
    chunk: str,
    index: int,
    total: int,
    timeout: float,
) -> T:
    started = time.monotonic()
    timer = asyncio.timeout(timeout)
    try:
        async with timer:
            return await processor(chunk, index, total)
    except ChunkProcessingError:
        raise
    except Exception as e:
        elapsed = time.monotonic() - started
        # A TimeoutError raised by the processor itself is an ordinary failure.
        if isinstance(e, TimeoutError) and timer.expired():
            raise ChunkTimeoutError(index, elapsed, timeout) from None
        reason = str(e) or type(e).__name__
        logger.error("Error processing chunk %d/%d after %.2fs: %s", index + 1, total, elapsed, reason)
        raise ChunkProcessingError(index, elapsed, f"Chunk {index + 1} failed after {elapsed:.2f}s: {reason}") from e


async def process_in_chunks(
    text: str,
    processor: Callable[[str, int, int], Awaitable[T]],
    max_chunk_size: int = DEFAULT_CHUNK_SIZE,
    parallel: bool = False,
    concurrency: int = 3,
    timeout: float = 30.0,
) -> list[T]:
    """Apply ``processor(chunk, index, total)`` to every chunk of ``text``.

    Results come back in chunk order. In parallel mode ``concurrency`` workers
    pull chunks from a shared queue; the first failure cancels the remaining
    workers and propagates. Each processor call is bounded by ``timeout``
    seconds and raises ChunkTimeoutError when it runs over.
    """
    if concurrency < 1:
        raise ValueError("concurrency must be at least 1")

    chunks = chunk_text(text, max_chunk_size)
    total = len(chunks)

    if not parallel:
        results: list[T] = []
        for index, chunk in enumerate(chunks):
            results.append(await _run_chunk(processor, chunk, index, total, timeout))
        return results

    slots: list[T | None] = [None] * total
    queue = deque(enumerate(chunks))

    async def worker() -> None:
        while queue:
            index, chunk = queue.popleft()
            slots[index] = await _run_chunk(processor, chunk, index, total, timeout)

    workers = [asyncio.create_task(worker()) for _ in range(min(concurrency, total))]
    try:
        await asyncio.gather(*workers)
    except BaseException:
        for task in workers:
            task.cancel()
        await asyncio.gather(*workers, return_exceptions=True)
        raise
    return slots  # type: ignore[return-value]


async def with_retry(
    fn: Callable[[int], Awaitable[T]],
    *,
    max_attempts: int = 3,
    base_delay: float = 1.0,
    max_delay: float = 5.0,
    timeout: float | None = 30.0,
) -> T:
    """Call ``fn(attempt)`` until it succeeds, backing off between attempts.

    Delay before retry n+1 is ``min(base_delay * 1.5**(n-1) * jitter, max_delay)``
    with jitter in [0.8, 1.2]. Each attempt is bounded by ``timeout`` seconds.
    After the last attempt the last error is re-raised unchanged.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    for attempt in range(1, max_attempts + 1):
        try:
            if timeout:
                return await asyncio.wait_for(fn(attempt), timeout)
            return await fn(attempt)
        except Exception as e:
            if attempt == max_attempts:
                raise
            delay = min(base_delay * 1.5 ** (attempt - 1) * random.uniform(0.8, 1.2), max_delay)
            logger.warning(
                "Attempt %d/%d failed (%s), retrying in %.2fs",
                attempt, max_attempts, str(e) or type(e).__name__, delay,
            )
            await asyncio.sleep(delay)

    raise AssertionError("unreachable")
