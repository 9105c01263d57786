"""
Request schemas for categories and technologies.
"""

from __future__ import annotations

from pydantic import Field

from portfolio_api.core.validation import Form, Text


class CategoryCreate(Form):
    name: Text


class CategoryDelete(Form):
    name: Text


class CategoryUpdate(Form):
    name: Text
    primary_key: Text


class TechnologyCreate(Form):
    name: Text
    color: str | None = Field(default=None, max_length=32)


class TechnologyDelete(Form):
    name: Text


class TechnologyUpdate(Form):
    primary_key: Text
    name: str | None = Field(default=None, max_length=100)
    color: str | None = Field(default=None, max_length=32)
