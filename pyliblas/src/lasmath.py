#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os
import math
import functools
import numpy as np
from scipy.spatial.transform import Rotation

# Define precision
USE_SINGLE_PRECISION = False

if USE_SINGLE_PRECISION:
    Real = np.float32
else:
    Real = np.float64

# Run verify() from the corner constructors
DEBUG_VERIFY = os.environ.get("PYLIBLAS_DEBUG", "0").lower() not in ("", "0", "false")

# Mathematical constants
EPSILON = 1e-6


def Vector3r(x=0.0, y=0.0, z=0.0):
    """Create a 3D real vector."""
    return np.array([x, y, z], dtype=Real)


class NumericTraits:
    """
    Capabilities a coordinate type must provide to be stored in a Range.

    Only signed/unsigned integer and floating point types qualify: they are
    totally ordered, support + - *, and have a largest and smallest
    representable value which the empty Range reads back as.
    """

    def __init__(self, dtype):
        if dtype is float:
            dtype = np.float64
        elif dtype is int:
            dtype = np.int64

        try:
            self.dtype = np.dtype(dtype)
        except TypeError:
            raise TypeError(f"Unsupported coordinate type: {dtype!r}")

        if self.dtype.kind == "f":
            info = np.finfo(self.dtype)
            self.epsilon = self.dtype.type(info.eps)
        elif self.dtype.kind in "iu":
            info = np.iinfo(self.dtype)
            self.epsilon = self.dtype.type(0)
        else:
            raise TypeError(
                f"Coordinate type {self.dtype} is not an integer or floating point type"
            )

        self.highest = self.dtype.type(info.max)
        self.lowest = self.dtype.type(info.min)

    @property
    def isInteger(self) -> bool:
        return self.dtype.kind in "iu"

    def zero(self):
        """Default-constructed value of the type."""
        return self.dtype.type(0)

    def cast(self, value):
        """Convert value to the coordinate type."""
        return self.dtype.type(value)

    def __repr__(self):
        return f"NumericTraits({self.dtype})"


@functools.lru_cache(maxsize=None)
def numericTraits(dtype=Real) -> NumericTraits:
    """Return the (shared) NumericTraits for dtype."""
    return NumericTraits(dtype)


def compareDistance(actual, expected, epsilon) -> bool:
    """
    Tolerant equality of two scalars.

    Args:
        actual: Value to test
        expected: Reference value
        epsilon: Accepted difference for magnitudes up to 1; larger values
            are allowed epsilon times their magnitude

    Returns:
        True if the values are equal or close within epsilon
    """
    if actual == expected:
        return True
    if epsilon == 0:
        return False

    # Python floats give inf instead of an overflow warning near the limits
    a = float(actual)
    b = float(expected)
    diff = a - b
    if math.isnan(diff):
        return False
    tolerance = epsilon * max(1.0, abs(a), abs(b))
    return -tolerance <= diff <= tolerance


def homogeneousTransform(rotation=None, scale=1.0, origin=None):
    """
    Build the 4x4 matrix taking local coordinates to world coordinates.

    world = rotation * (scale * local) + origin
    """
    m = np.identity(4, dtype=Real)
    if rotation is None:
        rotation = Rotation.identity()
    m[:3, :3] = rotation.as_matrix() * scale
    if origin is not None:
        m[:3, 3] = origin
    return m


def applyHomogeneous(m, xyz):
    """Apply a 4x4 homogeneous matrix to a 3D point."""
    p = m @ np.array([xyz[0], xyz[1], xyz[2], 1.0], dtype=Real)
    return p[:3] / p[3]
