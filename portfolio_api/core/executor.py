"""
Runs built statements against the store and shapes the result for the
HTTP layer.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Sequence, Union

import asyncpg

from portfolio_api.core import db
from portfolio_api.core.errors import QueryFailed, ValidationFailed
from portfolio_api.core.query import Batch, Statement

logger = logging.getLogger(__name__)

STORE_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)


def summarize_status(tag: str) -> dict[str, Any]:
    """
    Turn an asyncpg status tag ("INSERT 0 1", "UPDATE 3") into a small dict.
    """
    parts = (tag or "").split()
    affected = int(parts[-1]) if parts and parts[-1].isdigit() else 0
    return {"status": tag, "affected_rows": affected}


def ensure_valid(errors: Sequence[dict[str, Any]] | None) -> None:
    """Raise ValidationFailed when `errors` is non-empty."""
    if errors:
        raise ValidationFailed(errors)


async def _run_statement(statement: Statement) -> Any:
    if statement.returns_rows:
        return await db.fetch_all(statement.sql, *statement.params)
    return summarize_status(await db.execute(statement.sql, *statement.params))


async def _run_batch(batch: Batch) -> list[dict[str, Any]]:
    if not batch:
        logger.debug("skipping empty batch")
        return []
    tags = await db.execute_batch([(statement.sql, statement.params) for statement in batch])
    return [summarize_status(tag) for tag in tags]


async def run(
    statement: Union[Statement, Batch],
    errors: Sequence[dict[str, Any]] | None = None,
) -> Any:
    """
    Execute `statement` (or every statement of a batch) and return its result.

    - Non-empty `errors` raise ValidationFailed without touching the store.
    - Row-returning statements give a list of row dicts; other statements
      give {"status", "affected_rows"}; a batch gives one such dict per
      statement.
    - Store failures raise QueryFailed carrying the store's message.
    """
    ensure_valid(errors)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("running_query sql=%s", statement.render())
    try:
        if isinstance(statement, Batch):
            return await _run_batch(statement)
        return await _run_statement(statement)
    except STORE_ERRORS as exc:
        logger.warning("query_failed error=%s sql=%s", exc, statement.render())
        raise QueryFailed.from_exception(exc) from exc
