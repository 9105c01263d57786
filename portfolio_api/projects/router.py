"""
Project endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from portfolio_api.auth import dependencies as auth_dependencies

from . import repository, schemas

router = APIRouter()


@router.get("/projects/all")
async def get_all_projects() -> list[dict]:
    return await repository.list_projects()


@router.get("/projects/non-scrap")
async def get_full_projects() -> list[dict]:
    return await repository.list_projects_by_scrap(is_scrap=False)


@router.get("/projects/scrap")
async def get_scrap_projects() -> list[dict]:
    return await repository.list_projects_by_scrap(is_scrap=True)


@router.get("/projects/id/{project_id}")
async def get_project(project_id: int) -> list[dict]:
    return await repository.get_project(project_id)


@router.get("/projects/technologies/all")
async def get_all_project_technologies() -> list[dict]:
    return await repository.project_technologies()


@router.get("/projects/technologies/id/{project_id}")
async def get_project_technologies(project_id: int) -> list[dict]:
    return await repository.project_technologies(project_id)


@router.get("/projects/images/all")
async def get_all_project_images() -> list[dict]:
    return await repository.project_images()


@router.get("/projects/images/id/{project_id}")
async def get_project_images(project_id: int) -> list[dict]:
    return await repository.project_images(project_id)


@router.post("/projects/create")
async def create_project(
    request: schemas.ProjectCreate,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    data = {
        "deployed_url": request.provided("deployed_url"),
        "description": request.description,
        "github_url": request.provided("github_url"),
        "is_scrap": request.is_scrap,
        "title": request.title,
    }
    return await repository.create_project(data)


@router.post("/projects/delete")
async def delete_project(
    request: schemas.ProjectDelete,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.delete_project(request.id)


@router.post("/projects/update")
async def update_project(
    request: schemas.ProjectUpdate,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    data = {
        "title": request.provided("title"),
        "is_scrap": request.provided("is_scrap"),
        "deployed_url": request.provided("deployed_url"),
        "github_url": request.provided("github_url"),
        "description": request.provided("description"),
    }
    return await repository.update_project(request.primary_key, data)


@router.post("/projects/technologies/create/batch")
async def batch_create_project_technologies(
    request: schemas.ProjectTechnologyBatch,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.add_technologies(request.project_id, request.technologies)


@router.post("/projects/technologies/create")
async def create_project_technology(
    request: schemas.ProjectTechnologyLink,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.add_technology(request.project_id, request.technology_name)


@router.post("/projects/technologies/delete")
async def delete_project_technology(
    request: schemas.ProjectTechnologyLink,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.remove_technology(request.project_id, request.technology_name)


@router.post("/projects/technologies/update")
async def update_project_technology(
    request: schemas.ProjectTechnologyUpdate,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    data = {
        "project_id": request.provided("project_id"),
        "technology_name": request.provided("technology_name"),
    }
    return await repository.update_technology_link(
        request.project_primary_key,
        request.technology_primary_key,
        data,
    )


@router.post("/projects/images/create")
async def create_project_image(
    request: schemas.ProjectImageLink,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.add_image(request.project_id, request.image_id)


@router.post("/projects/images/delete")
async def delete_project_image(
    request: schemas.ProjectImageLink,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.remove_image(request.project_id, request.image_id)
