"""
Auth business logic.

There is a single administrator account configured through the environment
(`ADMIN_USERNAME`, `ADMIN_PASSWORD_HASH`); every mutating route requires its
access token.
"""

from __future__ import annotations

import hmac
import logging

from fastapi import HTTPException, status

from . import schemas, security

logger = logging.getLogger(__name__)


def login(payload: schemas.LoginRequest) -> schemas.TokenResponse:
    password_hash = security.admin_password_hash()
    if not password_hash:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Admin login is not configured.",
        )

    username_ok = hmac.compare_digest(
        payload.username.strip().encode("utf-8"),
        security.admin_username().encode("utf-8"),
    )
    password_ok = security.verify_password(payload.password, password_hash)
    if not (username_ok and password_ok):
        logger.info("login_failed username=%s", payload.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password.",
        )

    return schemas.TokenResponse(access_token=security.build_access_token(username=security.admin_username()))


def admin_from_access_token(access_token: str) -> str:
    try:
        payload = security.decode_access_token(access_token)
    except security.AuthSecurityError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc

    subject = str(payload.get("sub") or "").strip()
    if subject != security.admin_username():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid access token subject.",
        )
    return subject
