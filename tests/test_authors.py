from __future__ import annotations

from codecity.analyzers.age import get_code_age
from codecity.analyzers.authors import get_authors, get_effort
from codecity.analyzers.revisions import get_revisions, get_summary
from codecity.models import CodeAge, EntityAuthors, EntityEffort, Revisions, SummaryStat


def test_authors_scenario(scenario_records):
    assert get_authors(scenario_records) == [
        EntityAuthors("src/a.js", "Alice", 1),
        EntityAuthors("src/a.js", "Bob", 1),
        EntityAuthors("src/b.js", "Bob", 1),
    ]


def test_effort_sorted_with_tie_breaks(team_records, make_record):
    records = team_records + [make_record("util.py", "bob", "c5")]
    rows = get_effort(records)
    assert rows[0] == EntityEffort("util.py", "bob", 2, 3)
    assert [(e.entity, e.author) for e in rows[1:]] == [
        ("core.py", "alice"),
        ("core.py", "bob"),
        ("core.py", "carol"),
        ("docs.md", "alice"),
        ("docs.md", "carol"),
        ("util.py", "alice"),
    ]
    assert all(e.total_revs == 3 for e in rows if e.entity == "core.py")


def test_code_age_uses_latest_date(team_records):
    assert get_code_age(team_records) == [
        CodeAge("core.py", "2024-02-01"),
        CodeAge("util.py", "2024-02-01"),
        CodeAge("docs.md", "2024-03-01"),
    ]


def test_revisions(team_records):
    assert get_revisions(team_records) == [
        Revisions("core.py", 3),
        Revisions("util.py", 2),
        Revisions("docs.md", 2),
    ]


def test_summary(team_records):
    assert get_summary(team_records) == [
        SummaryStat("number-of-commits", 4),
        SummaryStat("number-of-entities", 3),
        SummaryStat("number-of-entities-changed", 7),
        SummaryStat("number-of-authors", 3),
    ]


def test_summary_of_empty_log():
    assert [s.value for s in get_summary([])] == [0, 0, 0, 0]
