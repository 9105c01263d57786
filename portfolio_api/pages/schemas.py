"""
Request schemas for pages.
"""

from __future__ import annotations

from portfolio_api.core.validation import Flag, Form, OptionalFlag, Text


class PageCreate(Form):
    # Display name; the URL-safe `name` column is derived from it.
    name: Text
    hidden: Flag = False
    body: str | None = None


class PageDelete(Form):
    name: Text


class PageUpdate(Form):
    primary_key: Text
    name: str | None = None
    hidden: OptionalFlag = None
    body: str | None = None
