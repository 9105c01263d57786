"""
Category and Technology endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from portfolio_api.auth import dependencies as auth_dependencies

from . import repository, schemas

router = APIRouter()


@router.get("/categories/all")
async def get_all_categories() -> list[dict]:
    return await repository.list_categories()


@router.get("/technologies/all")
async def get_all_technologies() -> list[dict]:
    return await repository.list_technologies()


@router.post("/categories/create")
async def create_category(
    request: schemas.CategoryCreate,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.create_category(request.name)


@router.post("/categories/delete")
async def delete_category(
    request: schemas.CategoryDelete,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.delete_category(request.name)


@router.post("/categories/update")
async def update_category(
    request: schemas.CategoryUpdate,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.update_category(request.primary_key, name=request.name)


@router.post("/technologies/create")
async def create_technology(
    request: schemas.TechnologyCreate,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.create_technology(request.name, color=request.provided("color"))


@router.post("/technologies/delete")
async def delete_technology(
    request: schemas.TechnologyDelete,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.delete_technology(request.name)


@router.post("/technologies/update")
async def update_technology(
    request: schemas.TechnologyUpdate,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.update_technology(
        request.primary_key,
        name=request.provided("name"),
        color=request.provided("color"),
    )
