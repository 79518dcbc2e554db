#!/usr/bin/env python3
"""Recompute stored reply counts for comments.

Usage:
    python scripts/reconcile_reply_counts.py                  # every comment
    python scripts/reconcile_reply_counts.py <comment_id> ...  # only these
"""

import asyncio
import sys
from uuid import UUID

import logfire
from dishka import AsyncContainer
from pydantic import BaseModel

from cinema.config import Settings
from cinema.domain.error import NotFoundError
from cinema.domain.repository import CommentRepository
from cinema.domain.service import CommentService
from cinema.domain.value import CommentId
from cinema.util.di.container import create_container
from cinema.util.logging import get_logger, setup_logging
from cinema.util.observability import configure_logfire

logger = get_logger(__name__)

BATCH_SIZE = 500


class ReconcileSummary(BaseModel):
    """Outcome of one reconcile run."""

    checked: int = 0
    fixed: int = 0
    missing: list[str] = []


async def _all_comment_ids(container: AsyncContainer, batch_size: int):
    offset = 0
    while True:
        async with container() as request_container:
            repository = await request_container.get(CommentRepository)
            batch = await repository.find_ids(limit=batch_size, offset=offset)
        for comment_id in batch:
            yield comment_id
        if len(batch) < batch_size:
            return
        offset += batch_size


async def _given_ids(comment_ids: list[CommentId]):
    for comment_id in comment_ids:
        yield comment_id


async def reconcile(
    container: AsyncContainer,
    comment_ids: list[CommentId] | None = None,
    batch_size: int = BATCH_SIZE,
) -> ReconcileSummary:
    """Repair drifted reply counts.

    Args:
        container: App-scoped DI container
        comment_ids: Comments to check; every comment when None
        batch_size: Page size used to walk all comment IDs

    Returns:
        Counts of checked and repaired comments, plus IDs that no longer exist
    """
    summary = ReconcileSummary()
    if comment_ids is None:
        ids = _all_comment_ids(container, batch_size)
    else:
        ids = _given_ids(comment_ids)

    async for comment_id in ids:
        # One request scope per comment so each repair commits on its own
        async with container() as request_container:
            service = await request_container.get(CommentService)
            try:
                before = await service.get_comment_by_id(comment_id)
                after = await service.reconcile_reply_count(comment_id)
            except NotFoundError:
                logger.warning("Comment %s not found, skipping", comment_id)
                summary.missing.append(str(comment_id))
                continue

        summary.checked += 1
        if after.reply_count != before.reply_count:
            summary.fixed += 1
            logger.info(
                "Repaired %s: %d -> %d",
                comment_id,
                before.reply_count,
                after.reply_count,
            )
    return summary


async def _run(comment_ids: list[CommentId] | None) -> ReconcileSummary:
    container = create_container(with_fastapi=False)
    try:
        return await reconcile(container, comment_ids)
    finally:
        await container.close()


def main(argv: list[str]) -> int:
    try:
        comment_ids = [CommentId(UUID(arg)) for arg in argv] or None
    except ValueError as e:
        print(f"Invalid comment id: {e}\n{__doc__}")
        return 2

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    summary = asyncio.run(_run(comment_ids))
    logfire.info(
        "Reply counts reconciled",
        checked=summary.checked,
        fixed=summary.fixed,
        missing=len(summary.missing),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
