from __future__ import annotations

import pytest

from codecity.models import ChangeRecord
from codecity.parser import parse_log

SCENARIO_LOG = (
    "--aaa--2024-01-01--Alice\n"
    "10\t0\tsrc/a.js\n"
    "\n"
    "--bbb--2024-01-02--Bob\n"
    "5\t2\tsrc/a.js\n"
    "3\t0\tsrc/b.js\n"
)


def rec(entity: str, author: str, rev: str, added: int = 0, deleted: int = 0, date: str = "2024-01-01") -> ChangeRecord:
    return ChangeRecord(entity=entity, date=date, author=author, rev=rev, loc_added=added, loc_deleted=deleted)


@pytest.fixture()
def scenario_log() -> str:
    return SCENARIO_LOG


@pytest.fixture()
def scenario_records() -> list[ChangeRecord]:
    return parse_log(SCENARIO_LOG)


@pytest.fixture()
def team_records() -> list[ChangeRecord]:
    """Three authors over four commits and three files."""
    return [
        rec("core.py", "alice", "c1", 40, 0, "2024-01-01"),
        rec("util.py", "alice", "c1", 10, 0, "2024-01-01"),
        rec("core.py", "bob", "c2", 5, 12, "2024-02-01"),
        rec("util.py", "bob", "c2", 2, 1, "2024-02-01"),
        rec("docs.md", "carol", "c3", 30, 0, "2024-03-01"),
        rec("core.py", "carol", "c4", 1, 20, "2024-01-15"),
        rec("docs.md", "alice", "c4", 0, 4, "2024-01-15"),
    ]


@pytest.fixture()
def make_record():
    return rec
