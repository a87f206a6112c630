"""Join per-entity revision counts with per-file code line counts."""

from __future__ import annotations

import posixpath
from typing import Iterable, Mapping

from codecity.cloc import CLOC_RESERVED_KEYS
from codecity.models import MergedFile, Revisions


def normalize_path(path: str) -> str:
    """Return *path* without a leading ``./``, with forward slashes, normalized."""
    if path.startswith("./"):
        path = path[2:]
    return posixpath.normpath(path.replace("\\", "/"))


def merge(revisions: Iterable[Revisions], line_counts: Mapping[str, int]) -> list[MergedFile]:
    """Attach the code line count to every entity of *revisions*.

    Entities without a line count (typically files deleted since) are
    dropped, and files that were never changed do not appear. The result is
    sorted by revision count, highest first.
    """
    lines_by_path = {
        normalize_path(path): lines
        for path, lines in line_counts.items()
        if path not in CLOC_RESERVED_KEYS
    }

    merged = []
    for rev in revisions:
        file_path = normalize_path(rev.entity)
        if file_path not in lines_by_path:
            continue
        merged.append(MergedFile(file_path=file_path, revisions=rev.n_revs, lines=lines_by_path[file_path]))
    return sorted(merged, key=lambda m: -m.revisions)
