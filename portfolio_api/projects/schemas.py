"""
Request schemas for projects and their technology/image links.
"""

from __future__ import annotations

from portfolio_api.core.validation import Flag, Form, OptionalFlag, TagList, Text


class ProjectCreate(Form):
    title: Text
    description: Text
    deployed_url: str | None = None
    github_url: str | None = None
    is_scrap: Flag = False


class ProjectDelete(Form):
    id: int


class ProjectUpdate(Form):
    primary_key: int
    title: str | None = None
    is_scrap: OptionalFlag = None
    deployed_url: str | None = None
    github_url: str | None = None
    description: str | None = None


class ProjectTechnologyLink(Form):
    project_id: int
    technology_name: Text


class ProjectTechnologyBatch(Form):
    project_id: int
    technologies: TagList


class ProjectTechnologyUpdate(Form):
    project_primary_key: int
    technology_primary_key: Text
    project_id: int | None = None
    technology_name: str | None = None


class ProjectImageLink(Form):
    project_id: int
    image_id: int
