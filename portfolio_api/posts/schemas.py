"""
Request schemas for posts and their category/image links.
"""

from __future__ import annotations

from portfolio_api.core.validation import Flag, Form, OptionalFlag, TagList, Text


class PostCreate(Form):
    title: Text
    hidden: Flag = False
    body: Text


class PostDelete(Form):
    id: int


class PostUpdate(Form):
    primary_key: int
    title: str | None = None
    hidden: OptionalFlag = None
    body: str | None = None


class PostCategoryLink(Form):
    post_id: int
    category_name: Text


class PostCategoryBatch(Form):
    post_id: int
    categories: TagList


class PostImageLink(Form):
    post_id: int
    image_id: int
