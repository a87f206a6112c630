"""Aggregate author contribution counts per entity."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from codecity.models import ChangeRecord, EntityAuthors, EntityEffort


def get_authors(records: Iterable[ChangeRecord]) -> list[EntityAuthors]:
    """Return the number of commits each author made to each entity."""
    counts: Counter[tuple[str, str]] = Counter((r.entity, r.author) for r in records)
    return [
        EntityAuthors(entity=entity, author=author, commits=commits)
        for (entity, author), commits in counts.items()
    ]


def get_effort(records: Iterable[ChangeRecord]) -> list[EntityEffort]:
    """Return each author's share of commits on each entity.

    Sorted by ``author_revs`` descending; ties are broken by entity and then
    author name so the output is stable across runs.
    """
    author_revs: Counter[tuple[str, str]] = Counter()
    total_revs: Counter[str] = Counter()
    for r in records:
        author_revs[(r.entity, r.author)] += 1
        total_revs[r.entity] += 1

    rows = [
        EntityEffort(entity=entity, author=author, author_revs=revs, total_revs=total_revs[entity])
        for (entity, author), revs in author_revs.items()
    ]
    return sorted(rows, key=lambda e: (-e.author_revs, e.entity, e.author))
