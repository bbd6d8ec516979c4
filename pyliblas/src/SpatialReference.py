#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import numpy as np
from scipy.spatial.transform import Rotation

from pyliblas.src.lasmath import Vector3r, Real, EPSILON, homogeneousTransform


class SpatialReference:
    """
    Cartesian reference frame placed in a shared world frame.

    A coordinate given in this frame maps to the world frame as
    rotation * (scale * local) + origin.
    """

    def __init__(self, name="", origin=None, rotation=None, scale=1.0):
        """
        Create a spatial reference.

        Args:
            name: Identifier of the frame
            origin: Position of the frame origin in world coordinates
            rotation: scipy Rotation of the frame axes, identity if None
            scale: Length of one frame unit in world units

        Raises:
            ValueError: If scale is zero
        """
        if scale == 0:
            raise ValueError(f"SpatialReference '{name}': scale must be non-zero")
        self.name = name
        self.origin = Vector3r() if origin is None else np.asarray(origin, dtype=Real)
        self.rotation = Rotation.identity() if rotation is None else rotation
        self.scale = float(scale)

    @classmethod
    def fromEuler(cls, name, origin, angles, seq="xyz", degrees=True, scale=1.0):
        """Create a frame whose axes are rotated by Euler angles."""
        rotation = Rotation.from_euler(seq, angles, degrees=degrees)
        return cls(name, origin=origin, rotation=rotation, scale=scale)

    def getName(self):
        return self.name

    def toWorldMatrix(self):
        """4x4 matrix taking frame coordinates to world coordinates."""
        return homogeneousTransform(self.rotation, self.scale, self.origin)

    def fromWorldMatrix(self):
        """4x4 matrix taking world coordinates to frame coordinates."""
        return np.linalg.inv(self.toWorldMatrix())

    def equal(self, other) -> bool:
        """Same name and same placement in the world frame."""
        return self.name == other.name and np.allclose(
            self.toWorldMatrix(), other.toWorldMatrix(), atol=EPSILON
        )

    def __eq__(self, other):
        if not isinstance(other, SpatialReference):
            return NotImplemented
        return self.equal(other)

    def __ne__(self, other):
        if not isinstance(other, SpatialReference):
            return NotImplemented
        return not self.equal(other)

    def __repr__(self):
        return (
            f"SpatialReference(name={self.name!r}, origin={self.origin.tolist()}, "
            f"rotation={self.rotation.as_quat().tolist()}, scale={self.scale})"
        )
