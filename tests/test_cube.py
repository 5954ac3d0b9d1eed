import itertools

import pytest

from hexlattice.coords import Cube
from hexlattice.errors import DivisionByZero, InvalidCoordinate


def test_cube_invariant():
    c = Cube(1, -2, 1)
    assert c.x + c.y + c.z == 0


def test_invalid_cube_is_rejected():
    with pytest.raises(InvalidCoordinate):
        Cube(1, 1, 1)
    with pytest.raises(ValueError):
        Cube.from_tuple((1, 2, 0))


@pytest.mark.parametrize(("x", "y"), [(0, 0), (1, 2), (-3, -4), (-5, 6), (7, -8)])
def test_from_axes_derives_z(x: int, y: int):
    c = Cube.from_axes(x, y)
    assert (c.x, c.y) == (x, y)
    assert c.x + c.y + c.z == 0


def test_cube_is_immutable():
    c = Cube(1, 2, -3)
    with pytest.raises(AttributeError):
        c.x = 5  # type: ignore[misc]
    moved = c.with_coords(4, -1)
    assert moved == Cube(4, -1, -3)
    assert c == Cube(1, 2, -3)


def test_cube_arithmetic():
    assert Cube(2, -4, 2) + Cube(5, 6, -11) == Cube(7, 2, -9)
    assert Cube(7, 2, -9) - Cube(5, 6, -11) == Cube(2, -4, 2)
    assert Cube(1, 2, -3) * 3 == Cube(3, 6, -9)
    assert 3 * Cube(1, 2, -3) == Cube(3, 6, -9)
    assert -Cube(1, 2, -3) == Cube(-1, -2, 3)
    assert Cube(2, -4, 2) / 2 == Cube(1, -2, 1)
    assert Cube(1, 2, -3) / -1 == Cube(-1, -2, 3)


def test_division_truncates_toward_zero():
    assert Cube(3, -1, -2) / 2 == Cube(1, 0, -1)
    assert Cube(-7, 4, 3) / 3 == Cube(-2, 1, 1)


def test_division_repairs_zero_sum():
    # plain truncation gives (0, 0, -1); y lost the most and is re-derived
    assert Cube(1, 1, -2) / 2 == Cube(0, 1, -1)


def test_division_by_zero():
    with pytest.raises(DivisionByZero):
        Cube(1, -1, 0) / 0
    with pytest.raises(ZeroDivisionError):
        Cube.ORIGIN / 0


def test_cube_neighbors():
    assert Cube.ORIGIN.neighbors() == [
        Cube(1, 0, -1),
        Cube(1, -1, 0),
        Cube(0, -1, 1),
        Cube(-1, 0, 1),
        Cube(-1, 1, 0),
        Cube(0, 1, -1),
    ]
    c = Cube(-4, 13, -9)
    assert c.neighbors() == [
        Cube(-3, 13, -10),
        Cube(-3, 12, -9),
        Cube(-4, 12, -8),
        Cube(-5, 13, -8),
        Cube(-5, 14, -9),
        Cube(-4, 14, -10),
    ]
    assert c.neighbor(6) == c.neighbor(0)
    assert c.neighbor(-1) == c.neighbor(5)


@pytest.mark.parametrize("index", range(6))
def test_neighbor_of_neighbor_returns(index: int):
    c = Cube(2, 3, -5)
    assert c.neighbor(index).neighbor((index + 3) % 6) == c


def test_cube_diagonals():
    assert Cube.ORIGIN.diagonals() == [
        Cube(1, -2, 1),
        Cube(-1, -1, 2),
        Cube(-2, 1, 1),
        Cube(-1, 2, -1),
        Cube(1, 1, -2),
        Cube(2, -1, -1),
    ]
    c = Cube(3, -1, -2)
    assert c.diagonal(0) == Cube(4, -3, -1)
    assert c.diagonal(9) == c.diagonal(3)
    assert all(c.distance(d) == 2 for d in c.diagonals())


def test_distance_properties():
    coords = [Cube(0, 0, 0), Cube(1, -2, 1), Cube(-3, 5, -2), Cube(4, 0, -4)]
    for a, b in itertools.product(coords, repeat=2):
        assert a.distance(b) == b.distance(a)
        assert (a.distance(b) == 0) == (a == b)
    for a, b, c in itertools.product(coords, repeat=3):
        assert a.distance(c) <= a.distance(b) + b.distance(c)
    assert Cube(0, 0, 0).distance(Cube(1, -2, 1)) == 2


def test_rotation():
    pivot = Cube(2, 3, -5)
    start = pivot.neighbor(0)
    assert start.rotate_cw(pivot, 1) == pivot.neighbor(1)
    assert start.rotate_cw(pivot, 2) == pivot.neighbor(2)
    assert start.rotate_ccw(pivot, 1) == pivot.neighbor(5)
    assert start.rotate_cw(pivot, 6) == start
    assert start.rotate_cw(pivot, 7) == start.rotate_cw(pivot, 1)
    assert pivot.rotate_cw(pivot, 3) == pivot

    far = Cube(3, -1, -2)
    assert far.rotate_cw(Cube.ORIGIN, 1) == Cube(2, -3, 1)
    assert far.rotate_cw(Cube.ORIGIN, 3) == -far
    for turns in range(7):
        assert far.rotate_ccw(Cube.ORIGIN, turns).rotate_cw(Cube.ORIGIN, turns) == far


def test_rings():
    assert Cube.ORIGIN.ring(0) == [Cube.ORIGIN]
    assert Cube.ORIGIN.ring(1) == Cube.ORIGIN.neighbors()
    assert Cube.ORIGIN.ring(2) == [
        Cube(2, 0, -2),
        Cube(2, -1, -1),
        Cube(2, -2, 0),
        Cube(1, -2, 1),
        Cube(0, -2, 2),
        Cube(-1, -1, 2),
        Cube(-2, 0, 2),
        Cube(-2, 1, 1),
        Cube(-2, 2, 0),
        Cube(-1, 2, -1),
        Cube(0, 2, -2),
        Cube(1, 1, -2),
    ]
    assert Cube(2, 3, -5).ring(2) == [
        Cube(4, 3, -7),
        Cube(4, 2, -6),
        Cube(4, 1, -5),
        Cube(3, 1, -4),
        Cube(2, 1, -3),
        Cube(1, 2, -3),
        Cube(0, 3, -3),
        Cube(0, 4, -4),
        Cube(0, 5, -5),
        Cube(1, 5, -6),
        Cube(2, 5, -7),
        Cube(3, 4, -7),
    ]


@pytest.mark.parametrize("radius", [0, 1, 2, 5, 9])
def test_ring_and_spiral_sizes(radius: int):
    center = Cube(5, -3, -2)
    ring = center.ring(radius)
    assert len(ring) == (1 if radius == 0 else 6 * radius)
    assert len(set(ring)) == len(ring)
    assert all(center.distance(c) == radius for c in ring)

    spiral = center.spiral(radius)
    assert len(spiral) == 1 + 3 * radius * (radius + 1)
    assert len(set(spiral)) == len(spiral)
    assert spiral[0] == center


def test_ring_is_continuous():
    ring = Cube.ORIGIN.ring(5)
    for current, following in zip(ring, ring[1:] + ring[:1]):
        assert current.distance(following) == 1


def test_spiral_concatenates_rings():
    c = Cube(5, -3, -2)
    assert c.spiral(2) == c.ring(0) + c.ring(1) + c.ring(2)


def test_negative_radius_rejected():
    with pytest.raises(ValueError):
        Cube.ORIGIN.ring(-1)
    with pytest.raises(ValueError):
        Cube.ORIGIN.spiral(-1)
