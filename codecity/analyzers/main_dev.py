"""Identify the dominant contributor (and the dominant remover) of each entity."""

from __future__ import annotations

from collections import defaultdict
from typing import Callable, Iterable

from codecity.analyzers.rounding import round_half_up_to
from codecity.models import ChangeRecord, MainDeveloper, RefactoringMainDeveloper


def _ownership(part: int, total: int) -> float:
    return round_half_up_to(part / total * 100, 2) if total else 0


def _leaders(
    records: Iterable[ChangeRecord],
    measure: Callable[[ChangeRecord], int],
) -> list[tuple[str, str, int, int]]:
    """Return ``(entity, author, author_total, entity_total)`` for the top author of each entity.

    The author with the largest summed *measure* wins. Equal totals go to the
    alphabetically first author name.
    """
    per_author: dict[str, dict[str, int]] = defaultdict(lambda: defaultdict(int))
    for r in records:
        per_author[r.entity][r.author] += measure(r)

    leaders = []
    for entity, authors in per_author.items():
        author, amount = min(authors.items(), key=lambda kv: (-kv[1], kv[0]))
        leaders.append((entity, author, amount, sum(authors.values())))
    return leaders


def get_main_dev(records: Iterable[ChangeRecord]) -> list[MainDeveloper]:
    """Return, per entity, the author who added the most lines and their ownership share."""
    return [
        MainDeveloper(
            entity=entity,
            main_dev=author,
            added=added,
            total_added=total,
            ownership=_ownership(added, total),
        )
        for entity, author, added, total in _leaders(records, lambda r: r.loc_added)
    ]


def get_refactoring_main_dev(records: Iterable[ChangeRecord]) -> list[RefactoringMainDeveloper]:
    """Return, per entity, the author who removed the most lines and their share of removals."""
    return [
        RefactoringMainDeveloper(
            entity=entity,
            main_dev=author,
            removed=removed,
            total_removed=total,
            ownership=_ownership(removed, total),
        )
        for entity, author, removed, total in _leaders(records, lambda r: r.loc_deleted)
    ]
