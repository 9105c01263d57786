"""
Request schemas for images.
"""

from __future__ import annotations

from portfolio_api.core.validation import Form, Text


class ImageCreate(Form):
    name: Text
    description: str | None = None
    static_url: Text


class ImageDelete(Form):
    id: int


class ImageUpdate(Form):
    primary_key: int
    name: str | None = None
    description: str | None = None
    static_url: str | None = None
