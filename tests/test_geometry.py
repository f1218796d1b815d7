import pytest

from energy_collector.world import (
    Neighborhood,
    Position,
    calculate_distance,
    calculate_energy_consumption,
)


def test_energy_consumption_is_squared_distance():
    assert calculate_energy_consumption(Position(55, 19), Position(72, 15)) == 305


def test_distance_is_squared():
    assert calculate_distance(Position(2, 2), Position(4, 4)) == 8


@pytest.mark.parametrize(
    "a, b",
    [
        (Position(0, 0), Position(99, 99)),
        (Position(10, 3), Position(4, 40)),
        (Position(7, 7), Position(7, 8)),
    ],
)
def test_cost_symmetric_and_positive(a, b):
    assert calculate_energy_consumption(a, b) == calculate_energy_consumption(b, a)
    assert calculate_distance(a, b) == calculate_energy_consumption(a, b)
    assert calculate_energy_consumption(a, b) > 0


def test_cost_zero_on_same_cell():
    assert calculate_energy_consumption(Position(42, 17), Position(42, 17)) == 0


def test_neighborhood_clamped_to_grid():
    area = Neighborhood.around(Position(5, 95), 20)
    assert (area.min_x, area.min_y, area.max_x, area.max_y) == (0, 75, 25, 99)


def test_neighborhood_bounds_inclusive():
    area = Neighborhood.around(Position(50, 50), 20)
    assert area.contains(Position(30, 70))
    assert area.contains(Position(70, 30))
    assert not area.contains(Position(71, 50))
    assert not area.contains(Position(50, 29))
