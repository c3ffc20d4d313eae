from __future__ import annotations

import pytest

from smartrange._utils import kernels


@pytest.mark.unit
@pytest.mark.parametrize(
    ('start', 'end', 'step', 'valid', 'length'),
    [
        (0, 10, 1, True, 10),
        (0, 10, 3, True, 4),
        (10, 0, -3, True, -4),
        (0, -10, -2, True, -5),
        (5, 5, 1, True, 0),
        (5, 5, -1, True, 0),
        (2, -8, 1, False, 0),
        (2, 10, -3, False, 0),
    ],
)
def test_validity_and_length(start, end, step, valid, length) -> None:
    assert kernels.is_valid(start, end, step) == valid
    assert kernels.length(start, end, step) == length


@pytest.mark.unit
def test_direction_and_default_step() -> None:
    assert kernels.direction(0, 3) == 1
    assert kernels.direction(3, 0) == -1
    assert kernels.direction(3, 3) == 0
    assert kernels.default_step(0, 3) == 1
    assert kernels.default_step(3, 0) == -1
    assert kernels.default_step(3, 3) == -1


@pytest.mark.unit
@pytest.mark.parametrize(
    ('n', 'i', 'expected'),
    [
        (5, 0, 0),
        (5, 4, 4),
        (5, 5, -1),
        (5, -1, 4),
        (5, -5, 0),
        (5, -6, -1),
        (0, 0, -1),
        (0, -1, -1),
    ],
)
def test_position(n, i, expected) -> None:
    assert kernels.position(n, i) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    ('start', 'end', 'step', 'v', 'expected'),
    [
        (5, 18, 2, 5, True),
        (5, 18, 2, 6, False),
        (5, 18, 2, 17, True),
        (5, 18, 2, 18, False),
        (5, 18, 2, 3, False),
        (10, 0, -3, 1, True),
        (10, 0, -3, 0, False),
        (10, 0, -3, 13, False),
        (10, 0, 3, 10, False),
        (4, 4, 1, 4, False),
    ],
)
def test_includes(start, end, step, v, expected) -> None:
    assert kernels.includes(start, end, step, v) == expected
