from __future__ import annotations

from codecity.analyzers.fractal import get_fractal_value
from codecity.models import FractalValue


def test_fractal_value_team(team_records):
    assert get_fractal_value(team_records) == [
        FractalValue("core.py", 0.6667, 3),
        FractalValue("docs.md", 0.5, 2),
        FractalValue("util.py", 0.5, 2),
    ]


def test_fractal_value_scenario(scenario_records):
    rows = {f.entity: f for f in get_fractal_value(scenario_records)}
    # one commit each by Alice and Bob
    assert rows["src/a.js"].fractal_value == 0.5
    assert rows["src/b.js"].fractal_value == 0


def test_fractal_value_range(team_records, make_record):
    records = team_records + [make_record("core.py", "alice", f"x{i}") for i in range(5)]
    for row in get_fractal_value(records):
        assert 0 <= row.fractal_value < 1


def test_single_author_is_exactly_zero(make_record):
    records = [make_record("f", "solo", str(i)) for i in range(7)]
    assert get_fractal_value(records)[0].fractal_value == 0


def test_fractal_value_ties_round_up(make_record):
    # 6/1/1 commits: 1 - (36 + 1 + 1) / 64 is exactly 0.40625
    records = [make_record("f.py", "amy", f"a{i}") for i in range(6)]
    records += [make_record("f.py", "bo", "b"), make_record("f.py", "cy", "c")]
    assert get_fractal_value(records)[0].fractal_value == 0.4063
