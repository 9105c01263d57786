"""
Category and Technology persistence.

Both are tags keyed by `name`.
"""

from __future__ import annotations

from typing import Any

from portfolio_api.core import executor, query
from portfolio_api.core.query import Key, Value


async def list_categories() -> list[dict]:
    return await executor.run(query.select_all("Category"))


async def create_category(name: str) -> Any:
    return await executor.run(query.insert("Category", {"name": name}))


async def delete_category(name: str) -> Any:
    return await executor.run(query.delete_where("Category", {"name": name}))


async def update_category(primary_key: str, *, name: str) -> Any:
    return await executor.run(query.update_by_key("Category", Key("name", primary_key), {"name": name}))


async def list_technologies() -> list[dict]:
    return await executor.run(query.select_all("Technology"))


async def create_technology(name: str, *, color: Value) -> Any:
    return await executor.run(query.insert("Technology", {"color": color, "name": name}))


async def delete_technology(name: str) -> Any:
    return await executor.run(query.delete_where("Technology", {"name": name}))


async def update_technology(primary_key: str, *, name: Value, color: Value) -> Any:
    return await executor.run(
        query.update_by_key("Technology", Key("name", primary_key), {"name": name, "color": color})
    )
