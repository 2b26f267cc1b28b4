"""
Flatten, chunk and dispatch: turn per-document fragments into tagged work units,
split them into request-sized batches and run the batch calls with a bounded
number in flight.
"""

import asyncio
from typing import AsyncIterator, Awaitable, Callable, Iterable, NamedTuple, Sequence, TypeVar

from docembed.config.logging import get_logger, log_extra

logger = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")

# Total fragments allowed in flight across concurrent requests
FANOUT_BUDGET = 1024


class WorkUnit(NamedTuple):
    """One fragment tagged with the position of the document it came from."""

    document_id: int
    text: str


def flatten_documents(fragment_sets: Iterable[Iterable[str]]) -> list[WorkUnit]:
    """Concatenate every document's fragments in order, tagging each with the document's index."""
    return [
        WorkUnit(document_id, text)
        for document_id, fragments in enumerate(fragment_sets)
        for text in fragments
    ]


def effective_batch_size(max_batch_size: int | None) -> int:
    """Backend limit as used for chunking; 0 or unset means one item per batch."""
    return max_batch_size if max_batch_size and max_batch_size > 0 else 1


def chunk_batches(items: Sequence[T], max_size: int) -> list[list[T]]:
    """
    Partition ``items`` into consecutive batches of at most ``max_size``.
    Only the last batch can be shorter; concatenating the batches gives back ``items``.
    """
    if max_size < 1:
        raise ValueError(f"max_size must be >= 1, got {max_size}")
    return [list(items[i : i + max_size]) for i in range(0, len(items), max_size)]


def concurrency_limit(max_batch_size: int | None) -> int:
    """Batch calls allowed in flight: max(1, 1024 // batch size)."""
    return max(1, FANOUT_BUDGET // effective_batch_size(max_batch_size))


async def dispatch_bounded(
    batches: Iterable[T],
    call: Callable[[T], Awaitable[R]],
    limit: int,
) -> AsyncIterator[R]:
    """
    Run ``call`` for each batch with at most ``limit`` calls outstanding, submitting
    in order and yielding results as they complete (any order). A freed slot is
    refilled with the next unscheduled batch before the result is yielded.

    The first failed call is re-raised. Calls still in flight at that point, or
    when the consumer stops iterating, are cancelled and their results dropped.
    """
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")
    queue = iter(batches)
    pending: set[asyncio.Task[R]] = set()

    def submit() -> bool:
        for batch in queue:
            pending.add(asyncio.ensure_future(call(batch)))
            return True
        return False

    try:
        while len(pending) < limit and submit():
            pass
        while pending:
            done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
            # Retrieve every exception so none is reported as unhandled
            failures = [t.exception() for t in done if t.exception() is not None]
            if failures:
                logger.warning(
                    "Batch call failed; abandoning in-flight batches",
                    **log_extra({"error": str(failures[0]), "in_flight": len(pending)}),
                )
                raise failures[0]
            for task in done:
                submit()
                yield task.result()
    finally:
        for task in pending:
            task.cancel()
