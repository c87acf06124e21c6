"""Tests for the playfield model."""

import random

import pytest

from findkitten.constants import OBJECT_DENSITY
from findkitten.descriptions import DESCRIPTIONS
from findkitten.entities import Direction, GameObject, Point
from findkitten.errors import InvariantError
from findkitten.world import World


def make_world(*objects, bounds=Point(40, 20), player=None):
    world = World(bounds, rng=random.Random(7))
    world.objects = list(objects)
    if player is not None:
        world.player.coordinate = player
    return world


def kitten_at(x, y):
    return GameObject("K", "Kitten!", Point(x, y), 3, is_goal=True)


def test_generation_counts_and_ranges():
    for seed in range(20):
        world = World(Point(40, 20), rng=random.Random(seed))
        goals = [obj for obj in world.objects if obj.is_goal]
        others = [obj for obj in world.objects if not obj.is_goal]

        assert len(goals) == 1
        assert world.objects[-1] is goals[0]
        assert len(others) == (40 * 20) // OBJECT_DENSITY
        for obj in world.objects:
            assert 1 <= obj.coordinate.x <= 39
            assert 1 <= obj.coordinate.y <= 19
            assert "!" <= obj.symbol <= "~"
            assert 1 <= obj.fg_color <= 15


def test_goal_and_descriptions():
    world = World(Point(40, 20), rng=random.Random(3))
    assert world.goal.description == "Kitten!"
    for obj in world.objects[:-1]:
        assert obj.description in DESCRIPTIONS[1:]


def test_player_starts_in_the_middle():
    assert World(Point(40, 20)).player.coordinate == Point(20, 10)
    assert World(Point(7, 5)).player.coordinate == Point(3, 2)


def test_same_seed_same_layout():
    first = World(Point(40, 20), rng=random.Random(11))
    second = World(Point(40, 20), rng=random.Random(11))
    assert first.objects == second.objects


def test_tiny_world_is_rejected():
    with pytest.raises(InvariantError):
        World(Point(1, 20))
    with pytest.raises(InvariantError):
        World(Point(-4, -4))


def test_unblocked_moves_step_exactly_one_cell():
    for direction in Direction:
        world = make_world(player=Point(10, 10))
        assert world.move_player(direction) is None
        assert world.player.coordinate == Point(10, 10) + direction.delta
        assert world.status == ""


def test_blocked_moves_leave_player_in_place():
    for direction in Direction:
        target = Point(10, 10) + direction.delta
        rock = GameObject("o", "A rock.", target, 2)
        world = make_world(rock, player=Point(10, 10))

        assert world.move_player(direction) == rock
        assert world.player.coordinate == Point(10, 10)
        assert world.status == "A rock."


def test_moves_off_the_edge_are_rejected():
    edges = {
        Direction.LEFT: Point(0, 5),
        Direction.UP: Point(5, 0),
        Direction.RIGHT: Point(40, 5),
        Direction.DOWN: Point(5, 20),
    }
    for direction, start in edges.items():
        world = make_world(player=start)
        world.status = "unchanged"
        assert world.move_player(direction) is None
        assert world.player.coordinate == start
        assert world.status == "unchanged"


def test_up_up_left_from_the_start():
    world = make_world()
    for direction in (Direction.UP, Direction.UP, Direction.LEFT):
        world.move_player(direction)
    assert world.player.coordinate == Point(19, 8)


def test_bumping_into_the_kitten():
    kitten = kitten_at(12, 7)
    world = make_world(kitten, player=Point(11, 7))

    found = world.move_player(Direction.RIGHT)

    assert found == kitten
    assert found.is_goal
    assert world.status == "Kitten!"
    assert world.player.coordinate == Point(11, 7)


def test_first_object_in_insertion_order_wins():
    first = GameObject("a", "First.", Point(5, 6), 1)
    second = GameObject("b", "Second.", Point(5, 6), 2)
    world = make_world(first, second, player=Point(5, 5))

    assert world.move_player(Direction.DOWN) is first
    assert world.status == "First."


def test_bumping_again_repeats_the_description():
    rock = GameObject("o", "A rock.", Point(6, 5), 2)
    world = make_world(rock, player=Point(5, 5))

    assert world.move_player(Direction.RIGHT) is rock
    world.status = ""
    assert world.move_player(Direction.RIGHT) is rock

    assert world.status == "A rock."
    assert world.player.coordinate == Point(5, 5)
    assert world.objects == [rock]


def test_object_at_and_in_bounds():
    rock = GameObject("o", "A rock.", Point(3, 4), 2)
    world = make_world(rock)
    assert world.object_at(Point(3, 4)) is rock
    assert world.object_at(Point(4, 3)) is None
    assert world.in_bounds(Point(0, 0))
    assert world.in_bounds(Point(40, 20))
    assert not world.in_bounds(Point(41, 20))
    assert not world.in_bounds(Point(0, -1))
