from __future__ import annotations

import pytest

from codecity.analyzers.rounding import round_half_up, round_half_up_to


@pytest.mark.parametrize("value,expected", [(0.5, 1), (1.5, 2), (2.5, 3), (2.4, 2), (66.666, 67), (0, 0)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


@pytest.mark.parametrize(
    "value,digits,expected",
    [
        (53.125, 2, 53.13),
        (0.40625, 4, 0.4063),
        (0.125, 2, 0.13),
        (66.66666666666667, 2, 66.67),
        (100.0, 2, 100.0),
        (0.0, 4, 0.0),
        (45.45454545, 2, 45.45),
    ],
)
def test_round_half_up_to(value, digits, expected):
    assert round_half_up_to(value, digits) == expected
