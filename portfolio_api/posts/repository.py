"""
Post persistence, including the PostCategory and PostImage links.
"""

from __future__ import annotations

from typing import Any, Sequence

from portfolio_api.core import associations, executor, query
from portfolio_api.core.query import Key, Value


async def list_posts() -> list[dict]:
    return await executor.run(query.select_all("Post"))


async def list_visible_posts() -> list[dict]:
    return await executor.run(query.select_where("Post", "hidden", False))


async def get_post(column: str, value: Any) -> list[dict]:
    return await executor.run(query.select_where("Post", column, value))


async def create_post(data: dict[str, Value], *, errors: Sequence[dict] = ()) -> list[dict]:
    executor.ensure_valid(errors)
    return await executor.run(query.insert("Post", data, returning=("id",)))


async def delete_post(post_id: int) -> Any:
    return await executor.run(query.delete_where("Post", {"id": post_id}))


async def update_post(post_id: int, data: dict[str, Value]) -> Any:
    return await executor.run(query.update_by_key("Post", Key("id", post_id), query.fully_strip(data)))


async def post_categories(post_id: int | None = None) -> list[dict]:
    return await executor.run(associations.associations_of("Post", "Category", post_id))


async def add_category(post_id: int, category_name: str) -> list[dict]:
    assoc = associations.tag_association("Post", "Category")
    statements = associations.ensure_tag_statements(assoc, post_id, category_name, ignore_existing_link=False)
    return await executor.run(query.Batch(tuple(statements)))


async def add_categories(post_id: int, categories: str) -> list[dict]:
    return await executor.run(associations.batch_tag_upsert(categories, "Category", "PostCategory", post_id))


async def remove_category(post_id: int, category_name: str) -> Any:
    return await executor.run(
        query.delete_where("PostCategory", {"post_id": post_id, "category_name": category_name})
    )


async def post_images(post_id: int | None = None) -> list[dict]:
    return await executor.run(associations.media_of("Post", post_id))


async def add_image(post_id: int, image_id: int) -> Any:
    return await executor.run(query.insert("PostImage", {"post_id": post_id, "image_id": image_id}))


async def remove_image(post_id: int, image_id: int) -> Any:
    return await executor.run(query.delete_where("PostImage", {"post_id": post_id, "image_id": image_id}))
