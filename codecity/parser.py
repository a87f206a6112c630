"""Parse ``git log --numstat`` output into :class:`ChangeRecord` objects.

The log must be produced with the custom header format ``--%h--%ad--%aN``
(see :data:`codecity.repo.GIT_LOG_ARGS`). Each header line opens a commit
context; every numstat line after it becomes one record stamped with that
commit's revision, date and author. Anything else is skipped.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator

from codecity.models import ChangeRecord

logger = logging.getLogger(__name__)

_HEADER_RE = re.compile(r"^--([0-9a-f]+)--(\d{4}-\d{2}-\d{2})--(.+)$")
_CHANGE_RE = re.compile(r"^(\d+|-)\t(\d+|-)\t([^\t]+)$")
_LINE_SPLIT_RE = re.compile(r"\r?\n")


def _loc(value: str) -> int:
    # numstat prints "-" for binary files
    return 0 if value == "-" else int(value)


def parse_log_lines(lines: Iterable[str]) -> Iterator[ChangeRecord]:
    """Yield a :class:`ChangeRecord` for every change line that follows a header.

    *lines* may be any iterable of text lines, including an open file; it is
    consumed lazily.
    """
    rev = date = author = None
    skipped = 0
    for raw in lines:
        line = raw.rstrip("\r\n")

        header = _HEADER_RE.match(line)
        if header:
            rev, date, author = header.groups()
            continue

        change = _CHANGE_RE.match(line)
        if change and rev is not None:
            added, deleted, entity = change.groups()
            yield ChangeRecord(
                entity=entity,
                date=date,
                author=author,
                rev=rev,
                loc_added=_loc(added),
                loc_deleted=_loc(deleted),
            )
        elif line:
            skipped += 1

    if skipped:
        logger.debug("Skipped %d unrecognised log line(s)", skipped)


def parse_log(text: str) -> list[ChangeRecord]:
    """Parse a complete log held in memory."""
    records = list(parse_log_lines(_LINE_SPLIT_RE.split(text)))
    logger.debug("Parsed %d change record(s)", len(records))
    return records


def read_log_file(path: str | Path, encoding: str = "utf-8") -> list[ChangeRecord]:
    """Parse a log previously saved to *path*, streaming it line by line."""
    with open(path, encoding=encoding) as f:
        records = list(parse_log_lines(f))
    logger.debug("Parsed %d change record(s) from %s", len(records), path)
    return records
