import pytest

from hexlattice.coords import Cube, Direction, Tilt


def test_direction_indices_match_cube_neighbors():
    assert [int(d) for d in Direction] == list(range(6))
    assert Cube.ORIGIN.neighbor(Direction.NORTHEAST) == Cube(1, 0, -1)
    assert Cube.ORIGIN.neighbor(Direction.SOUTHWEST) == Cube(-1, 0, 1)


@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_is_three_steps(direction: Direction):
    assert direction.opposite.opposite is direction
    assert direction.clockwise(3) is direction.opposite
    assert direction.clockwise().counterclockwise() is direction


def test_turning_wraps():
    assert Direction.NORTH.clockwise() is Direction.NORTHEAST
    assert Direction.NORTHEAST.counterclockwise(2) is Direction.NORTHWEST


def test_compass_names_depend_on_tilt():
    assert [d.compass(Tilt.FLAT) for d in Direction] == ["NE", "SE", "S", "SW", "NW", "N"]
    assert [d.compass(Tilt.SHARP) for d in Direction] == ["NE", "E", "SE", "SW", "W", "NW"]
    assert Direction.SOUTH.compass() == "S"
