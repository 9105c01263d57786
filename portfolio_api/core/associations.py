"""
Many-to-many association queries.

Join tables are looked up in an explicit registry keyed by the
(primary, secondary) pair instead of being derived from table names, so an
unsupported pair can never produce a join against a table that does not
exist.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from portfolio_api.core import query
from portfolio_api.core.errors import UnsupportedAssociation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Association:
    primary: str
    secondary: str
    join_table: str
    # join-table column pointing at `{primary}.id`
    primary_key_column: str
    # join-table column pointing at `{secondary}.{secondary_match_column}`
    secondary_key_column: str
    secondary_match_column: str
    selected: tuple[str, ...]


TAG_ASSOCIATIONS: dict[tuple[str, str], Association] = {
    ("Project", "Technology"): Association(
        primary="Project",
        secondary="Technology",
        join_table="ProjectTechnology",
        primary_key_column="project_id",
        secondary_key_column="technology_name",
        secondary_match_column="name",
        selected=("name",),
    ),
    ("Post", "Category"): Association(
        primary="Post",
        secondary="Category",
        join_table="PostCategory",
        primary_key_column="post_id",
        secondary_key_column="category_name",
        secondary_match_column="name",
        selected=("name",),
    ),
}

MEDIA_ASSOCIATIONS: dict[str, Association] = {
    primary: Association(
        primary=primary,
        secondary="Image",
        join_table=f"{primary}Image",
        primary_key_column=f"{primary.lower()}_id",
        secondary_key_column="image_id",
        secondary_match_column="id",
        selected=("created", "description", "static_url"),
    )
    for primary in ("Post", "Project")
}


def tag_association(primary: str, secondary: str) -> Association:
    try:
        return TAG_ASSOCIATIONS[(primary, secondary)]
    except KeyError:
        raise UnsupportedAssociation(f"No association between {primary} and {secondary}.") from None


def media_association(primary: str) -> Association:
    try:
        return MEDIA_ASSOCIATIONS[primary]
    except KeyError:
        raise UnsupportedAssociation(f"{primary} has no image association.") from None


def _join_query(assoc: Association, primary_id: int | None) -> query.Statement:
    p, s, j = assoc.primary, assoc.secondary, assoc.join_table
    columns = ", ".join([f"{p}.id"] + [f"{s}.{column}" for column in assoc.selected])
    sql = (
        f"SELECT {columns} FROM {p} "
        f"JOIN {j} ON {p}.id = {j}.{assoc.primary_key_column} "
        f"JOIN {s} ON {j}.{assoc.secondary_key_column} = {s}.{assoc.secondary_match_column}"
    )
    if primary_id is None:
        return query.Statement(sql=sql, returns_rows=True)
    query.check_scalar(primary_id)
    return query.Statement(
        sql=f"{sql} WHERE {j}.{assoc.primary_key_column} = $1",
        params=(primary_id,),
        returns_rows=True,
    )


def associations_of(primary: str, secondary: str, primary_id: int | None = None) -> query.Statement:
    """
    Tags (secondary rows) linked to one primary row, or to all of them when
    `primary_id` is None.
    """
    return _join_query(tag_association(primary, secondary), primary_id)


def media_of(primary: str, primary_id: int | None = None) -> query.Statement:
    """
    Images linked to one Post/Project, or to all of them.
    """
    return _join_query(media_association(primary), primary_id)


def split_tags(tags: str) -> list[str]:
    # Blank entries (trailing commas, "a,,b") are skipped.
    return [token.strip() for token in (tags or "").split(",") if token.strip()]


def _by_tables(tag_table: str, join_table: str) -> Association:
    for assoc in TAG_ASSOCIATIONS.values():
        if assoc.secondary == tag_table and assoc.join_table == join_table:
            return assoc
    raise UnsupportedAssociation(f"{join_table} does not link {tag_table} tags.")


def ensure_tag_statements(
    assoc: Association,
    primary_id: int,
    tag: str,
    *,
    ignore_existing_link: bool = True,
) -> list[query.Statement]:
    """
    The two statements that make `tag` exist and link it to `primary_id`.

    With `ignore_existing_link=False` a duplicate link is an error instead of
    a no-op.
    """
    link = {assoc.primary_key_column: primary_id, assoc.secondary_key_column: tag}
    build_link = query.insert_ignore if ignore_existing_link else query.insert
    return [
        query.insert_ignore(assoc.secondary, {assoc.secondary_match_column: tag}),
        build_link(assoc.join_table, link),
    ]


def batch_tag_upsert(tags: str, tag_table: str, join_table: str, primary_id: int) -> query.Batch:
    """
    Ensure every comma-separated tag exists and is linked to `primary_id`.

    Emits an insert-or-ignore for the tag followed by an insert-or-ignore for
    the link, per tag, in input order. An input with no tags yields an empty
    batch.
    """
    assoc = _by_tables(tag_table, join_table)
    statements: list[query.Statement] = []
    for tag in split_tags(tags):
        statements.extend(ensure_tag_statements(assoc, primary_id, tag))
    logger.debug("batch_tag_upsert join_table=%s primary_id=%s statements=%s", join_table, primary_id, len(statements))
    return query.Batch(tuple(statements))
