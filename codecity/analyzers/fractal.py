"""Fractal value: how fragmented the authorship of an entity is."""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Iterable

from codecity.analyzers.rounding import round_half_up_to
from codecity.models import ChangeRecord, FractalValue


def get_fractal_value(records: Iterable[ChangeRecord]) -> list[FractalValue]:
    """Return the Gini-Simpson index of each entity's commit distribution over authors.

    ``1 - sum((author_revs / total_revs) ** 2)``: 0 for a single author,
    approaching 1 as work spreads over many authors. Sorted by value
    descending, then entity.
    """
    per_author: dict[str, Counter[str]] = defaultdict(Counter)
    for r in records:
        per_author[r.entity][r.author] += 1

    rows = []
    for entity, authors in per_author.items():
        total = sum(authors.values())
        concentration = sum((revs / total) ** 2 for revs in authors.values())
        rows.append(FractalValue(entity=entity, fractal_value=round_half_up_to(1 - concentration, 4), total_revs=total))
    return sorted(rows, key=lambda f: (-f.fractal_value, f.entity))
