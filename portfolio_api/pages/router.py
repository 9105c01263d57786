"""
Page endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from portfolio_api.auth import dependencies as auth_dependencies
from portfolio_api.core.errors import field_error
from portfolio_api.core.query import ABSENT, slugify

from . import repository, schemas

router = APIRouter()


def _slug_errors(name: Any) -> list[dict]:
    if name is ABSENT or slugify(name):
        return []
    return [field_error("name", "Name must contain at least one URL-safe character.", name)]


@router.get("/pages/all")
async def get_all_pages() -> list[dict]:
    return await repository.list_pages()


@router.get("/pages/visible")
async def get_visible_pages() -> list[dict]:
    return await repository.list_pages_by_visibility(hidden=False)


@router.get("/pages/hidden")
async def get_hidden_pages() -> list[dict]:
    return await repository.list_pages_by_visibility(hidden=True)


@router.get("/pages/{page}")
async def get_page(page: str) -> list[dict]:
    return await repository.get_page(page)


@router.post("/pages/create")
async def create_page(
    request: schemas.PageCreate,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    data = {
        "name": slugify(request.name),
        "pretty_name": request.name,
        "hidden": request.hidden,
        "body": request.provided("body"),
    }
    return await repository.create_page(data, errors=_slug_errors(request.name))


@router.post("/pages/delete")
async def delete_page(
    request: schemas.PageDelete,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    return await repository.delete_page(request.name)


@router.post("/pages/update")
async def update_page(
    request: schemas.PageUpdate,
    _: str = Depends(auth_dependencies.require_admin),
) -> Any:
    name = request.provided("name")
    if name == "":
        name = ABSENT
    data = {
        "body": request.provided("body"),
        "hidden": request.provided("hidden"),
        "name": ABSENT if name is ABSENT else slugify(name),
        "pretty_name": name,
    }
    return await repository.update_page(request.primary_key, data, errors=_slug_errors(name))
