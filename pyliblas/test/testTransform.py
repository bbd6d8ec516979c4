#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test script for SpatialReference, ReprojectionTransform and Bounds.project.
"""

import numpy as np
import pytest
from scipy.spatial.transform import Rotation

from pyliblas.src.Bounds import Bounds
from pyliblas.src.Point import Point
from pyliblas.src.SpatialReference import SpatialReference
from pyliblas.src.Transform import TransformI, ReprojectionTransform


class MockTransform(TransformI):
    """Records the points it sees and moves them by +1 in X."""

    def __init__(self, inRef, outRef):
        self.inRef = inRef
        self.outRef = outRef
        self.seen = []

    def transform(self, point):
        self.seen.append(point.getCoordinates())
        point.setX(point.getX() + 1.0)
        return True


def test_spatial_reference():
    print("Testing SpatialReference...")

    world = SpatialReference("world")
    assert world.getName() == "world"
    assert np.allclose(world.toWorldMatrix(), np.identity(4))

    local = SpatialReference("local", origin=[100.0, 200.0, 0.0], scale=2.0)
    m = local.toWorldMatrix()
    assert np.allclose(m[:3, 3], [100.0, 200.0, 0.0])
    assert np.allclose(local.fromWorldMatrix() @ m, np.identity(4))

    assert SpatialReference("a") == SpatialReference("a")
    assert SpatialReference("a") != SpatialReference("b")
    assert SpatialReference("a", origin=[1.0, 0.0, 0.0]) != SpatialReference("a")

    with pytest.raises(ValueError):
        SpatialReference("bad", scale=0.0)

    print("SpatialReference test passed!")


def test_identity_transform():
    ref = SpatialReference("utm")
    trans = ReprojectionTransform(ref, ref)
    assert trans.isIdentity()

    p = Point(1.5, 2.5, 3.5)
    assert trans.transform(p)
    assert p == Point(1.5, 2.5, 3.5)


def test_offset_transform():
    world = SpatialReference("world")
    local = SpatialReference("local", origin=[10.0, 20.0, 30.0])

    p = Point(1.0, 2.0, 3.0)
    ReprojectionTransform(local, world).transform(p)
    assert p == Point(11.0, 22.0, 33.0)

    ReprojectionTransform(world, local).transform(p)
    assert np.allclose(p.getCoordinates(), [1.0, 2.0, 3.0]), "Round trip should restore the point"


def test_rotated_and_scaled_transform():
    world = SpatialReference("world")
    rotated = SpatialReference.fromEuler("rotated", [0.0, 0.0, 0.0], [0.0, 0.0, 90.0])
    scaled = SpatialReference("feet", scale=0.3048)

    p = Point(1.0, 0.0, 0.0)
    ReprojectionTransform(rotated, world).transform(p)
    assert np.allclose(p.getCoordinates(), [0.0, 1.0, 0.0])

    p = Point(10.0, 0.0, 0.0)
    ReprojectionTransform(scaled, world).transform(p)
    assert np.isclose(p.getX(), 3.048)

    expected = Rotation.from_euler("xyz", [0.0, 0.0, 90.0], degrees=True)
    assert np.allclose(rotated.rotation.as_matrix(), expected.as_matrix())


def test_non_finite_result_raises():
    world = SpatialReference("world")
    local = SpatialReference("local", origin=[1.0, 0.0, 0.0])
    p = Point(np.inf, 0.0, 0.0)
    with pytest.raises(RuntimeError):
        ReprojectionTransform(local, world).transform(p)


def test_project_identity():
    ref = SpatialReference("EPSG:26915")
    b = Bounds(289814.15, 4320978.61, 166.78, 289818.50, 4320980.59, 170.76)
    projected = b.project(ref, ref)

    assert projected is not b
    assert projected.dimension() == 3
    assert projected == b, "Identity projection should keep the corners"


def test_project_always_three_axes():
    world = SpatialReference("world")
    local = SpatialReference("local", origin=[5.0, 5.0, 5.0])

    flat = Bounds(0.0, 0.0, 1.0, 1.0)
    projected = flat.project(local, world)
    assert projected.dimension() == 3
    assert projected == Bounds(5.0, 5.0, 5.0, 6.0, 6.0, 5.0)

    wide = Bounds([])
    for axis in range(5):
        wide.min(axis, 0.0)
        wide.max(axis, 1.0)
    assert wide.project(world, world).dimension() == 3


def test_project_keeps_empty_bounds_empty():
    e = Bounds()
    e.dimension(3)
    ref = SpatialReference("world")
    projected = e.project(ref, ref)

    assert e.empty()
    assert projected.empty(), "Projecting empty bounds should give empty bounds"
    assert all(r.empty() for r in projected.dims())
    assert projected == e


def test_project_with_injected_transform():
    b = Bounds(0.0, 0.0, 0.0, 1.0, 1.0, 1.0)
    projected = b.project("in", "out", transformClass=MockTransform)
    assert projected == Bounds(1.0, 0.0, 0.0, 2.0, 1.0, 1.0)
    assert b == Bounds(0.0, 0.0, 0.0, 1.0, 1.0, 1.0), "project() leaves self alone"


def test_point():
    p = Point()
    assert (p.getX(), p.getY(), p.getZ()) == (0.0, 0.0, 0.0)
    p.setCoordinates(1.0, 2.0, 3.0)
    p.setZ(4.0)
    c = p.getCoordinates()
    c[0] = 100.0
    assert p.getX() == 1.0, "getCoordinates returns a copy"
    assert p == Point(1.0, 2.0, 4.0)
    assert str(p) == "(1.0, 2.0, 4.0)"


def run_all_tests():
    print("=== Starting Transform Tests ===")
    test_spatial_reference()
    test_identity_transform()
    test_offset_transform()
    test_rotated_and_scaled_transform()
    test_non_finite_result_raises()
    test_project_identity()
    test_project_always_three_axes()
    test_project_keeps_empty_bounds_empty()
    test_project_with_injected_transform()
    test_point()
    print("=== All tests passed! ===")


if __name__ == "__main__":
    run_all_tests()
