#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from typing import List, Optional, Sequence

from pyliblas.src import lasmath
from pyliblas.src.lasmath import Real, numericTraits
from pyliblas.src.Range import Range
from pyliblas.src.Point import Point
from pyliblas.src.Transform import ReprojectionTransform
from pyliblas.src.LASErrors import DimensionalityError, InvalidExtentError
from pyliblas.src.LASLogging import LAS_LOGGER


def _isPointLike(obj) -> bool:
    return all(hasattr(obj, attr) for attr in ("getX", "getY", "getZ"))


@LAS_LOGGER
class Bounds:
    """
    Axis-aligned bounds made of one Range per axis (0 = X, 1 = Y, 2 = Z).

    The number of axes is not fixed. Writing to an axis past the end adds
    empty axes up to it; reading one returns zero.

    Construction::

        Bounds()                                  # no axes
        Bounds(other)                             # copy
        Bounds([Range(0, 1), Range(0, 2)])        # explicit ranges
        Bounds(minx, miny, maxx, maxy)            # 2 axes
        Bounds(minx, miny, minz, maxx, maxy, maxz)  # 3 axes
        Bounds(minPoint, maxPoint)                # 3 axes from two Points
    """

    def __init__(self, *args, dtype=None):
        self.ranges: List[Range] = []

        if len(args) == 0:
            self.traits = numericTraits(Real if dtype is None else dtype)

        elif len(args) == 1 and isinstance(args[0], Bounds):
            other = args[0]
            self.traits = numericTraits(other.dtype if dtype is None else dtype)
            self.ranges = [r.copy(self.dtype) for r in other.ranges]

        elif len(args) == 1:
            rngs = list(args[0])
            if dtype is None:
                dtype = rngs[0].dtype if rngs else Real
            self.traits = numericTraits(dtype)
            self.ranges = [r.copy(self.dtype) for r in rngs]

        elif len(args) == 2 and _isPointLike(args[0]) and _isPointLike(args[1]):
            lo, hi = args
            self.traits = numericTraits(Real if dtype is None else dtype)
            self.ranges = [
                Range(lo.getX(), hi.getX(), dtype=self.dtype),
                Range(lo.getY(), hi.getY(), dtype=self.dtype),
                Range(lo.getZ(), hi.getZ(), dtype=self.dtype),
            ]
            self._debugVerify()

        elif len(args) == 4:
            minx, miny, maxx, maxy = args
            self.traits = numericTraits(Real if dtype is None else dtype)
            self.ranges = [
                Range(minx, maxx, dtype=self.dtype),
                Range(miny, maxy, dtype=self.dtype),
            ]
            self._debugVerify()

        elif len(args) == 6:
            minx, miny, minz, maxx, maxy, maxz = args
            self.traits = numericTraits(Real if dtype is None else dtype)
            self.ranges = [
                Range(minx, maxx, dtype=self.dtype),
                Range(miny, maxy, dtype=self.dtype),
                Range(minz, maxz, dtype=self.dtype),
            ]
            self._debugVerify()

        else:
            raise TypeError(
                f"Bounds() takes 0, 1, 2, 4 or 6 positional arguments ({len(args)} given)"
            )

    def _debugVerify(self):
        if lasmath.DEBUG_VERIFY:
            self.verify()

    @property
    def dtype(self):
        return self.traits.dtype

    def copy(self):
        return Bounds(self)

    # Per-axis accessors

    def min(self, index: Optional[int] = None, value=None):
        """
        Lower bound access.

        min() returns the minimum corner as a Point, min(i) the lower bound
        of axis i (zero if there is no such axis), and min(i, v) sets it,
        adding axes as needed. A negative index raises IndexError.
        """
        if index is None:
            return self._corner("min")
        self._checkIndex(index)
        if value is None:
            if self.dimension() <= index:
                return self.traits.zero()
            return self.ranges[index].min
        if self.dimension() <= index:
            self.dimension(index + 1)
        self.ranges[index].min = value

    def max(self, index: Optional[int] = None, value=None):
        """Upper bound access; same forms as min()."""
        if index is None:
            return self._corner("max")
        self._checkIndex(index)
        if value is None:
            if self.dimension() <= index:
                return self.traits.zero()
            return self.ranges[index].max
        if self.dimension() <= index:
            self.dimension(index + 1)
        self.ranges[index].max = value

    def _checkIndex(self, index):
        if index < 0:
            raise IndexError(f"Bounds axis index must not be negative (got {index})")

    def _corner(self, end) -> Point:
        p = Point()
        try:
            p.setCoordinates(
                getattr(self.ranges[0], end),
                getattr(self.ranges[1], end),
                getattr(self.ranges[2], end),
            )
        except IndexError:
            # No Z axis
            p.setCoordinates(
                getattr(self.ranges[0], end), getattr(self.ranges[1], end), 0
            )
        return p

    def minx(self):
        return self.min(0)

    def miny(self):
        return self.min(1)

    def minz(self):
        return self.min(2)

    def maxx(self):
        return self.max(0)

    def maxy(self):
        return self.max(1)

    def maxz(self):
        return self.max(2)

    def dims(self):
        """The per-axis ranges."""
        return tuple(self.ranges)

    def dimension(self, d: Optional[int] = None):
        """
        dimension() returns the number of axes; dimension(d) grows the
        bounds to at least d axes. Axes are never removed.
        """
        if d is None:
            return len(self.ranges)
        if len(self.ranges) < d:
            self.debug(f"Growing bounds from {len(self.ranges)} to {d} dimensions")
            self.ranges.extend(Range(dtype=self.dtype) for _ in range(d - len(self.ranges)))

    # Comparison and predicates. other must have at least as many axes as
    # self, otherwise IndexError.

    def equal(self, other) -> bool:
        for i in range(self.dimension()):
            if self.ranges[i] != other.ranges[i]:
                return False
        return True

    def __eq__(self, other):
        if not isinstance(other, Bounds):
            return NotImplemented
        return self.equal(other)

    def __ne__(self, other):
        if not isinstance(other, Bounds):
            return NotImplemented
        return not self.equal(other)

    def intersects(self, other) -> bool:
        """True if any single axis overlaps. See intersectsBox()."""
        for i in range(self.dimension()):
            if self.ranges[i].overlaps(other.ranges[i]):
                return True
        return False

    def overlaps(self, other) -> bool:
        """Synonym for intersects."""
        return self.intersects(other)

    def contains(self, other) -> bool:
        """
        Axis-wise containment check whose answer is True whatever the
        per-axis results are; only a missing axis in other raises. See
        containsBox() for real containment.
        """
        for i in range(self.dimension()):
            if self.ranges[i].contains(other.ranges[i]):
                return True
        return True

    def intersectsBox(self, other) -> bool:
        """True if every axis overlaps."""
        return all(
            self.ranges[i].overlaps(other.ranges[i]) for i in range(self.dimension())
        )

    def containsBox(self, other) -> bool:
        """True if every axis of other lies within the matching axis."""
        return all(
            self.ranges[i].contains(other.ranges[i]) for i in range(self.dimension())
        )

    def empty(self) -> bool:
        """True if any axis is empty."""
        for r in self.ranges:
            if r.empty():
                return True
        return False

    # Mutators

    def _checkDeltas(self, operation, deltas):
        if self.dimension() <= len(deltas):
            msg = (
                f"pyliblas.Bounds.{operation}: Delta vector size, {len(deltas)}, "
                f"is larger than the dimensionality of the bounds, {self.dimension()}."
            )
            self.error(msg)
            raise DimensionalityError(msg)

    def shift(self, deltas: Sequence):
        """
        Shift axes 0..len(deltas)-1 by deltas.

        Raises:
            DimensionalityError: If len(deltas) >= dimension()
        """
        self._checkDeltas("shift", deltas)
        for i, d in enumerate(deltas):
            self.ranges[i].shift(d)

    def scale(self, deltas: Sequence):
        """
        Scale axes 0..len(deltas)-1 by deltas.

        Raises:
            DimensionalityError: If len(deltas) >= dimension()
        """
        self._checkDeltas("scale", deltas)
        for i, d in enumerate(deltas):
            self.ranges[i].scale(d)

    def clip(self, r):
        """Clip each axis to the extent of r."""
        ds = r.dims()
        for i in range(self.dimension()):
            self.ranges[i].clip(ds[i])

    def grow(self, other):
        """
        Grow to the union with another Bounds, or to include a point.

        Growing by a point touches axes 0-2 only and needs dimension() >= 3.
        Empty axes of another Bounds are skipped.
        """
        if isinstance(other, Bounds):
            ds = other.dims()
            for i in range(self.dimension()):
                if ds[i].empty():
                    continue
                self.ranges[i].grow(ds[i].min)
                self.ranges[i].grow(ds[i].max)
        elif _isPointLike(other):
            self.ranges[0].grow(other.getX())
            self.ranges[1].grow(other.getY())
            self.ranges[2].grow(other.getZ())
        else:
            raise TypeError(f"Cannot grow Bounds by {type(other).__name__}")

    def volume(self):
        # The accumulator is not seeded with one, so the product stays zero
        output = self.traits.zero()
        for r in self.ranges:
            output = output * r.length()
        return output

    def verify(self):
        """
        Raises:
            InvalidExtentError: If an axis has min > max and neither end is
                at the infinity value of the type
        """
        eps = self.traits.epsilon
        for d in range(self.dimension()):
            if self.min(d) > self.max(d):
                if not (
                    lasmath.compareDistance(self.min(d), self.traits.highest, eps)
                    or lasmath.compareDistance(self.max(d), self.traits.lowest, eps)
                ):
                    msg = (
                        f"pyliblas.Bounds.verify: Minimum point at dimension {d} "
                        f"is greater than maximum point.  Neither point is infinity."
                    )
                    self.error(msg)
                    raise InvalidExtentError(msg)

    def project(self, inRef, outRef, transformClass=None):
        """
        Reproject the corners from inRef to outRef.

        Args:
            inRef: SpatialReference of this bounds
            outRef: Target SpatialReference
            transformClass: Transform type constructed as (inRef, outRef),
                ReprojectionTransform by default

        Returns:
            New 3-axis Bounds built from the transformed corners
        """
        trans = (transformClass or ReprojectionTransform)(inRef, outRef)

        minimum = self.min()
        maximum = self.max()
        trans.transform(minimum)
        trans.transform(maximum)
        self.debug(f"Projected {self} to corners {minimum} / {maximum}")
        return Bounds(minimum, maximum, dtype=self.dtype)

    def __str__(self):
        return "(" + ", ".join(str(r) for r in self.ranges) + ")"

    def __repr__(self):
        return f"Bounds({', '.join(repr(r) for r in self.ranges)})"
