from energy_collector.config import AUTHOR
from energy_collector.world import Position, count_owned, is_station_free

from conftest import robot


def test_own_position_does_not_block():
    robots = [robot(9, 4), robot(5, 7, energy=80)]
    assert is_station_free(robots[0], robots, Position(9, 4))


def test_other_robot_blocks_station():
    robots = [robot(9, 4), robot(5, 7, energy=80)]
    assert not is_station_free(robots[1], robots, Position(9, 4))


def test_generic_query_counts_every_robot():
    robots = [robot(9, 4)]
    assert not is_station_free(None, robots, Position(9, 4))
    assert is_station_free(None, robots, Position(1, 1))


def test_identical_robots_are_distinct():
    twin_a = robot(9, 4)
    twin_b = robot(9, 4)
    assert not is_station_free(twin_a, [twin_a, twin_b], Position(9, 4))


def test_count_owned_ignores_competitors():
    robots = [robot(0, 0, owner=AUTHOR), robot(1, 0, owner="Rival"), robot(2, 0, owner=AUTHOR)]
    assert count_owned(robots, AUTHOR) == 2
    assert count_owned(robots, "Nobody") == 0
