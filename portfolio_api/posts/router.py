"""
Post endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from portfolio_api.auth import dependencies as auth_dependencies
from portfolio_api.core.errors import field_error
from portfolio_api.core.query import slugify

from . import repository, schemas

router = APIRouter()


@router.get("/posts/all")
async def get_all_posts() -> list[dict]:
    return await repository.list_posts()


@router.get("/posts/visible")
async def get_visible_posts() -> list[dict]:
    return await repository.list_visible_posts()


@router.get("/posts/id/{post_id}")
async def get_post_by_id(post_id: int) -> list[dict]:
    return await repository.get_post("id", post_id)


@router.get("/posts/slug/{slug}")
async def get_post_by_slug(slug: str) -> list[dict]:
    return await repository.get_post("slug", slug)


@router.get("/posts/categories/all")
async def get_all_post_categories() -> list[dict]:
    return await repository.post_categories()


@router.get("/posts/categories/id/{post_id}")
async def get_post_categories(post_id: int) -> list[dict]:
    return await repository.post_categories(post_id)


@router.get("/posts/images/all")
async def get_all_post_images() -> list[dict]:
    return await repository.post_images()


@router.get("/posts/images/id/{post_id}")
async def get_post_images(post_id: int) -> list[dict]:
    return await repository.post_images(post_id)


@router.post("/posts/create")
async def create_post(
    request: schemas.PostCreate,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    slug = slugify(request.title)
    errors = []
    if not slug:
        errors.append(field_error("title", "Title must contain at least one URL-safe character.", request.title))
    data = {
        "title": request.title,
        "hidden": request.hidden,
        "body": request.body,
        "slug": slug,
    }
    return await repository.create_post(data, errors=errors)


@router.post("/posts/delete")
async def delete_post(
    request: schemas.PostDelete,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.delete_post(request.id)


@router.post("/posts/update")
async def update_post(
    request: schemas.PostUpdate,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    data = {
        "title": request.provided("title"),
        "hidden": request.provided("hidden"),
        "body": request.provided("body"),
    }
    return await repository.update_post(request.primary_key, data)


@router.post("/posts/categories/create/batch")
async def batch_create_post_categories(
    request: schemas.PostCategoryBatch,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.add_categories(request.post_id, request.categories)


@router.post("/posts/categories/create")
async def create_post_category(
    request: schemas.PostCategoryLink,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.add_category(request.post_id, request.category_name)


@router.post("/posts/categories/delete")
async def delete_post_category(
    request: schemas.PostCategoryLink,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.remove_category(request.post_id, request.category_name)


@router.post("/posts/images/create")
async def create_post_image(
    request: schemas.PostImageLink,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.add_image(request.post_id, request.image_id)


@router.post("/posts/images/delete")
async def delete_post_image(
    request: schemas.PostImageLink,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.remove_image(request.post_id, request.image_id)
