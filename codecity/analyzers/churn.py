"""Lines added/removed per entity, and per entity and author."""

from __future__ import annotations

from typing import Iterable

from codecity.models import ChangeRecord, ChurnRow, EntityOwnership


def get_churn(records: Iterable[ChangeRecord]) -> list[ChurnRow]:
    """Return added/deleted line totals and the number of touching commits per entity.

    Rows are in the order each entity first appears in *records*.
    """
    churn: dict[str, ChurnRow] = {}
    for r in records:
        row = churn.get(r.entity)
        if row is None:
            row = churn[r.entity] = ChurnRow(entity=r.entity, added=0, deleted=0, commits=0)
        row.added += r.loc_added
        row.deleted += r.loc_deleted
        row.commits += 1
    return list(churn.values())


def get_entity_ownership(records: Iterable[ChangeRecord]) -> list[EntityOwnership]:
    """Return added/deleted line totals for every (entity, author) pair."""
    ownership: dict[tuple[str, str], EntityOwnership] = {}
    for r in records:
        key = (r.entity, r.author)
        row = ownership.get(key)
        if row is None:
            row = ownership[key] = EntityOwnership(entity=r.entity, author=r.author, added=0, deleted=0)
        row.added += r.loc_added
        row.deleted += r.loc_deleted
    return list(ownership.values())
