"""
Page persistence.

A page is keyed by `name`, the slug derived from `pretty_name`.
"""

from __future__ import annotations

from typing import Any, Sequence

from portfolio_api.core import executor, query
from portfolio_api.core.query import Key, Value


async def list_pages() -> list[dict]:
    return await executor.run(query.select_all("Page"))


async def list_pages_by_visibility(*, hidden: bool) -> list[dict]:
    return await executor.run(query.select_where("Page", "hidden", hidden))


async def get_page(name: str) -> list[dict]:
    return await executor.run(query.select_where("Page", "name", name))


async def create_page(
    data: dict[str, Value],
    *,
    errors: Sequence[dict] = (),
) -> Any:
    executor.ensure_valid(errors)
    return await executor.run(query.insert("Page", data))


async def delete_page(name: str) -> Any:
    return await executor.run(query.delete_where("Page", {"name": name}))


async def update_page(
    primary_key: str,
    data: dict[str, Value],
    *,
    errors: Sequence[dict] = (),
) -> Any:
    executor.ensure_valid(errors)
    statement = query.update_by_key("Page", Key("name", primary_key), query.fully_strip(data))
    return await executor.run(statement)
