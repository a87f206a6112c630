"""Pairwise measures: logical coupling of entities and communication between authors.

Both follow the same shape. Records are grouped (entities by commit, authors
by entity), every member of a group gets one occurrence, and every unordered
pair inside a group gets one shared occurrence. Pairs are only enumerated
within a group, so the cost grows with the group sizes and not with the
length of the log.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from itertools import combinations
from typing import Iterable

from codecity.analyzers.rounding import round_half_up
from codecity.models import ChangeRecord, Communication, Coupling


def _pair_counts(groups: Iterable[set[str]]) -> tuple[Counter[str], Counter[tuple[str, str]]]:
    occurrences: Counter[str] = Counter()
    shared: Counter[tuple[str, str]] = Counter()
    for members in groups:
        occurrences.update(members)
        # sorted() makes every pair canonical: (a, b) with a < b
        shared.update(combinations(sorted(members), 2))
    return occurrences, shared


def get_coupling(records: Iterable[ChangeRecord]) -> list[Coupling]:
    """Return every pair of entities changed together in at least one commit.

    ``shared_revs`` counts the commits touching both, ``average_revs`` is the
    rounded mean of the two entities' commit counts and ``degree`` is the
    shared count relative to that mean, in percent. Sorted by degree
    descending.
    """
    by_rev: dict[str, set[str]] = defaultdict(set)
    for r in records:
        by_rev[r.rev].add(r.entity)

    revs, shared = _pair_counts(by_rev.values())

    rows = []
    for (entity, coupled), shared_revs in shared.items():
        average = (revs[entity] + revs[coupled]) / 2
        rows.append(
            Coupling(
                entity=entity,
                coupled=coupled,
                degree=round_half_up(shared_revs / average * 100),
                average_revs=round_half_up(average),
                shared_revs=shared_revs,
            )
        )
    return sorted(rows, key=lambda c: (-c.degree, c.entity, c.coupled))


def get_communication(records: Iterable[ChangeRecord]) -> list[Communication]:
    """Return every pair of authors who worked on at least one common entity.

    ``shared`` counts the entities both touched, ``average`` is the rounded
    mean of the number of entities each touched and ``strength`` is shared
    relative to average, in percent (0 when the average is 0). Sorted by
    strength descending.
    """
    by_entity: dict[str, set[str]] = defaultdict(set)
    for r in records:
        by_entity[r.entity].add(r.author)

    entities, shared = _pair_counts(by_entity.values())

    rows = []
    for (author, peer), count in shared.items():
        average = round_half_up((entities[author] + entities[peer]) / 2)
        strength = round_half_up(count / average * 100) if average else 0
        rows.append(Communication(author=author, peer=peer, shared=count, average=average, strength=strength))
    return sorted(rows, key=lambda c: (-c.strength, c.author, c.peer))
