"""
Project persistence, including the ProjectTechnology and ProjectImage links.
"""

from __future__ import annotations

from typing import Any

from portfolio_api.core import associations, executor, query
from portfolio_api.core.query import Key, Value


async def list_projects() -> list[dict]:
    return await executor.run(query.select_all("Project"))


async def list_projects_by_scrap(*, is_scrap: bool) -> list[dict]:
    return await executor.run(query.select_where("Project", "is_scrap", is_scrap))


async def get_project(project_id: int) -> list[dict]:
    return await executor.run(query.select_where("Project", "id", project_id))


async def create_project(data: dict[str, Value]) -> list[dict]:
    return await executor.run(query.insert("Project", data, returning=("id",)))


async def delete_project(project_id: int) -> Any:
    return await executor.run(query.delete_where("Project", {"id": project_id}))


async def update_project(project_id: int, data: dict[str, Value]) -> Any:
    statement = query.update_by_key("Project", Key("id", project_id), query.fully_strip(data))
    return await executor.run(statement)


async def project_technologies(project_id: int | None = None) -> list[dict]:
    return await executor.run(associations.associations_of("Project", "Technology", project_id))


async def add_technology(project_id: int, technology_name: str) -> list[dict]:
    # The technology is created on demand; a duplicate link is still an error.
    assoc = associations.tag_association("Project", "Technology")
    statements = associations.ensure_tag_statements(
        assoc, project_id, technology_name, ignore_existing_link=False
    )
    return await executor.run(query.Batch(tuple(statements)))


async def add_technologies(project_id: int, technologies: str) -> list[dict]:
    batch = associations.batch_tag_upsert(technologies, "Technology", "ProjectTechnology", project_id)
    return await executor.run(batch)


async def remove_technology(project_id: int, technology_name: str) -> Any:
    statement = query.delete_where(
        "ProjectTechnology", {"project_id": project_id, "technology_name": technology_name}
    )
    return await executor.run(statement)


async def update_technology_link(
    project_primary_key: int,
    technology_primary_key: str,
    data: dict[str, Value],
) -> Any:
    keys = [
        Key("project_id", project_primary_key),
        Key("technology_name", technology_primary_key),
    ]
    return await executor.run(query.update_by_keys("ProjectTechnology", keys, query.fully_strip(data)))


async def project_images(project_id: int | None = None) -> list[dict]:
    return await executor.run(associations.media_of("Project", project_id))


async def add_image(project_id: int, image_id: int) -> Any:
    return await executor.run(query.insert("ProjectImage", {"project_id": project_id, "image_id": image_id}))


async def remove_image(project_id: int, image_id: int) -> Any:
    return await executor.run(query.delete_where("ProjectImage", {"project_id": project_id, "image_id": image_id}))
