"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import schemas, service

router = APIRouter()


@router.post("/auth/login")
def login(request: schemas.LoginRequest) -> schemas.TokenResponse:
    return service.login(request)
