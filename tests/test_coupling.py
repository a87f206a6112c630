from __future__ import annotations

from codecity.analyzers.coupling import get_communication, get_coupling
from codecity.models import Communication, Coupling


def test_coupling_scenario(scenario_records):
    # commit bbb changes both files
    assert get_coupling(scenario_records) == [
        Coupling(entity="src/a.js", coupled="src/b.js", degree=67, average_revs=2, shared_revs=1),
    ]


def test_coupling_team(team_records):
    assert get_coupling(team_records) == [
        Coupling("core.py", "util.py", degree=80, average_revs=3, shared_revs=2),
        Coupling("core.py", "docs.md", degree=40, average_revs=3, shared_revs=1),
    ]


def test_no_coupling_without_shared_commits(make_record):
    records = [make_record("a", "x", "r1"), make_record("b", "x", "r2")]
    assert get_coupling(records) == []


def test_coupling_pairs_are_canonical_and_unique(make_record):
    records = [
        make_record("z.py", "x", "r1"),
        make_record("a.py", "x", "r1"),
        make_record("a.py", "y", "r2"),
        make_record("z.py", "y", "r2"),
        make_record("m.py", "y", "r2"),
    ]
    pairs = [(c.entity, c.coupled) for c in get_coupling(records)]
    assert len(pairs) == len(set(pairs)) == 3
    assert all(a < b for a, b in pairs)
    assert {frozenset(p) for p in pairs} == {
        frozenset({"a.py", "z.py"}),
        frozenset({"a.py", "m.py"}),
        frozenset({"m.py", "z.py"}),
    }


def test_same_file_twice_in_one_commit_counts_once(make_record):
    records = [
        make_record("a", "x", "r1"),
        make_record("a", "x", "r1"),
        make_record("b", "x", "r1"),
    ]
    assert get_coupling(records) == [Coupling("a", "b", degree=100, average_revs=1, shared_revs=1)]


def test_communication_team(team_records):
    assert get_communication(team_records) == [
        Communication("alice", "bob", shared=2, average=3, strength=67),
        Communication("alice", "carol", shared=2, average=3, strength=67),
        Communication("bob", "carol", shared=1, average=2, strength=50),
    ]


def test_communication_single_author_has_no_pairs(make_record):
    records = [make_record("a", "solo", "r1"), make_record("b", "solo", "r2")]
    assert get_communication(records) == []
