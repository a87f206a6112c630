"""Most recent modification date per entity."""

from __future__ import annotations

from typing import Iterable

from codecity.models import ChangeRecord, CodeAge


def get_code_age(records: Iterable[ChangeRecord]) -> list[CodeAge]:
    """Return the latest date each entity was touched.

    Dates are ISO ``YYYY-MM-DD`` strings, so the maximum is a plain string
    comparison.
    """
    latest: dict[str, str] = {}
    for r in records:
        if r.entity not in latest or r.date > latest[r.entity]:
            latest[r.entity] = r.date
    return [CodeAge(entity=entity, date=date) for entity, date in latest.items()]
