#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from pyliblas.src.lasmath import Vector3r, Real, numericTraits, compareDistance


class Point:
    """3D point used for bounds corners and reprojection."""

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self.coords = Vector3r(x, y, z)

    def getX(self):
        return self.coords[0]

    def getY(self):
        return self.coords[1]

    def getZ(self):
        return self.coords[2]

    def setX(self, value):
        self.coords[0] = value

    def setY(self, value):
        self.coords[1] = value

    def setZ(self, value):
        self.coords[2] = value

    def setCoordinates(self, x, y, z):
        """Set all three coordinates at once."""
        self.coords[0] = x
        self.coords[1] = y
        self.coords[2] = z

    def getCoordinates(self):
        """Return a copy of the coordinates as a Vector3r."""
        return self.coords.copy()

    def equal(self, other) -> bool:
        """Coordinates equal within the tolerance of Real."""
        eps = numericTraits(Real).epsilon
        return all(
            compareDistance(a, b, eps) for a, b in zip(self.coords, other.coords)
        )

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.equal(other)

    def __ne__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return not self.equal(other)

    def __str__(self):
        return f"({self.coords[0]}, {self.coords[1]}, {self.coords[2]})"

    def __repr__(self):
        return f"Point(x={self.coords[0]}, y={self.coords[1]}, z={self.coords[2]})"
