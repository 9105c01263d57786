"""
Image endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from portfolio_api.auth import dependencies as auth_dependencies

from . import repository, schemas

router = APIRouter()


@router.get("/images/all")
async def get_all_images() -> list[dict]:
    return await repository.list_images()


@router.get("/images/id/{image_id}")
async def get_image(image_id: int) -> list[dict]:
    return await repository.get_image(image_id)


@router.post("/images/create")
async def create_image(
    request: schemas.ImageCreate,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.create_image(
        name=request.name,
        description=request.provided("description"),
        static_url=request.static_url,
    )


@router.post("/images/delete")
async def delete_image(
    request: schemas.ImageDelete,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.delete_image(request.id)


@router.post("/images/update")
async def update_image(
    request: schemas.ImageUpdate,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    data = {
        "name": request.provided("name"),
        "description": request.provided("description"),
        "static_url": request.provided("static_url"),
    }
    return await repository.update_image(request.primary_key, data)
