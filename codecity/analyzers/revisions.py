"""Revision counts per entity and whole-log summary statistics."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from codecity.models import ChangeRecord, Revisions, SummaryStat


def get_revisions(records: Iterable[ChangeRecord]) -> list[Revisions]:
    """Return the number of change records for each entity."""
    counts: Counter[str] = Counter(r.entity for r in records)
    return [Revisions(entity=entity, n_revs=n) for entity, n in counts.items()]


def get_summary(records: Iterable[ChangeRecord]) -> list[SummaryStat]:
    """Return distinct commits, distinct entities, total changes and distinct authors."""
    revs: set[str] = set()
    entities: set[str] = set()
    authors: set[str] = set()
    changes = 0
    for r in records:
        revs.add(r.rev)
        entities.add(r.entity)
        authors.add(r.author)
        changes += 1

    return [
        SummaryStat(statistic="number-of-commits", value=len(revs)),
        SummaryStat(statistic="number-of-entities", value=len(entities)),
        SummaryStat(statistic="number-of-entities-changed", value=changes),
        SummaryStat(statistic="number-of-authors", value=len(authors)),
    ]
