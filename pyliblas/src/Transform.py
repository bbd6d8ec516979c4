#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from abc import ABC, abstractmethod

import numpy as np

from pyliblas.src.LASLogging import LAS_LOGGER
from pyliblas.src.lasmath import applyHomogeneous


class TransformI(ABC):
    """Interface for in-place point transforms."""

    @abstractmethod
    def transform(self, point) -> bool:
        """Transform point in place. Returns True on success."""
        pass


@LAS_LOGGER
class ReprojectionTransform(TransformI):
    """Transform points from one SpatialReference to another."""

    def __init__(self, inRef, outRef):
        self.inRef = inRef
        self.outRef = outRef
        if inRef == outRef:
            self.matrix = None
        else:
            self.matrix = outRef.fromWorldMatrix() @ inRef.toWorldMatrix()
        self.debug(
            f"Reprojection {inRef.getName()!r} -> {outRef.getName()!r}"
            f"{' (identity)' if self.matrix is None else ''}"
        )

    def isIdentity(self) -> bool:
        return self.matrix is None

    def transform(self, point) -> bool:
        """
        Reproject point in place.

        Raises:
            RuntimeError: If the result is not finite
        """
        if self.matrix is None:
            return True

        xyz = applyHomogeneous(self.matrix, (point.getX(), point.getY(), point.getZ()))
        if not np.all(np.isfinite(xyz)):
            raise RuntimeError(
                f"Could not project point {point} from {self.inRef.getName()!r} "
                f"to {self.outRef.getName()!r}"
            )
        point.setCoordinates(xyz[0], xyz[1], xyz[2])
        return True
