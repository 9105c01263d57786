"""
Image persistence.
"""

from __future__ import annotations

from typing import Any

from portfolio_api.core import executor, query
from portfolio_api.core.query import Key, Value


async def list_images() -> list[dict]:
    return await executor.run(query.select_all("Image"))


async def get_image(image_id: int) -> list[dict]:
    return await executor.run(query.select_where("Image", "id", image_id))


async def create_image(*, name: str, description: Value, static_url: str) -> list[dict]:
    data = {"description": description, "name": name, "static_url": static_url}
    return await executor.run(query.insert("Image", data, returning=("id",)))


async def delete_image(image_id: int) -> Any:
    return await executor.run(query.delete_where("Image", {"id": image_id}))


async def update_image(image_id: int, data: dict[str, Value]) -> Any:
    return await executor.run(query.update_by_key("Image", Key("id", image_id), query.fully_strip(data)))
