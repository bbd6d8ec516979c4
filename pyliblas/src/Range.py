#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from pyliblas.src.lasmath import Real, numericTraits, compareDistance


class Range:
    """
    Closed interval [min, max] along a single axis.

    A default Range is empty. It reads back min as the largest and max as
    the smallest representable value of its type, so the first grow() sets
    both ends. Assigning either end, or growing, makes it populated. Nothing
    keeps min <= max: scaling by a negative factor or clipping against a
    disjoint range leaves an inverted interval, which is not empty. A range
    whose ends are exactly the empty values is empty however it got them.
    """

    def __init__(self, mmin=None, mmax=None, dtype=Real):
        """
        Create a range.

        Args:
            mmin: Lower end, or None to leave it at the empty value
            mmax: Upper end, or None to leave it at the empty value
            dtype: Coordinate type (integer or floating point)
        """
        self.traits = numericTraits(dtype)
        self.clear()
        if mmin is not None:
            self.min = mmin
        if mmax is not None:
            self.max = mmax

    @property
    def dtype(self):
        return self.traits.dtype

    @property
    def min(self):
        """Lower end of the range."""
        return self._min

    @min.setter
    def min(self, value):
        self._min = self.traits.cast(value)
        self._empty = False

    @property
    def max(self):
        """Upper end of the range."""
        return self._max

    @max.setter
    def max(self, value):
        self._max = self.traits.cast(value)
        self._empty = False

    def clear(self):
        """Reset to the empty state."""
        self._min = self.traits.highest
        self._max = self.traits.lowest
        self._empty = True

    def copy(self, dtype=None):
        """
        Return an independent copy of this range.

        Args:
            dtype: Coordinate type of the copy, this range's type if None
        """
        if dtype is None or numericTraits(dtype).dtype == self.dtype:
            r = Range(dtype=self.dtype)
            r._min = self._min
            r._max = self._max
            r._empty = self._empty
            return r
        r = Range(dtype=dtype)
        if not self.empty():
            # Unset ends map to the empty values of the new type
            r.min = r.traits.highest if self._min == self.traits.highest else self._min
            r.max = r.traits.lowest if self._max == self.traits.lowest else self._max
        return r

    def equal(self, other) -> bool:
        """Both ends equal within the tolerance of the coordinate type."""
        eps = self.traits.epsilon
        return compareDistance(self.min, other.min, eps) and compareDistance(
            self.max, other.max, eps
        )

    def __eq__(self, other):
        if not isinstance(other, Range):
            return NotImplemented
        return self.equal(other)

    def __ne__(self, other):
        if not isinstance(other, Range):
            return NotImplemented
        return not self.equal(other)

    def overlaps(self, r) -> bool:
        """Ranges touching at an end overlap."""
        return bool(self.min <= r.max and self.max >= r.min)

    def contains(self, other) -> bool:
        """
        Check containment of another Range or of a single value.

        Args:
            other: Range or scalar

        Returns:
            True if other lies within [min, max]
        """
        if isinstance(other, Range):
            return bool(self.min <= other.min and other.max <= self.max)
        return bool(self.min <= other and other <= self.max)

    def empty(self) -> bool:
        """True until an end is assigned or a value grown in, and whenever
        the ends sit exactly at the empty values."""
        return self._empty or (
            self._min == self.traits.highest and self._max == self.traits.lowest
        )

    def shift(self, v):
        if self.empty():
            return
        v = self.traits.cast(v)
        self.min = self.min + v
        self.max = self.max + v

    def scale(self, v):
        """Multiply both ends by v. A negative v inverts the range."""
        if self.empty():
            return
        v = self.traits.cast(v)
        self.min = self.min * v
        self.max = self.max * v

    def clip(self, r):
        """Narrow to the intersection with r, without checking the result."""
        if self.empty():
            return
        if r.empty():
            self.clear()
            return
        if r.min > self.min:
            self.min = r.min
        if r.max < self.max:
            self.max = r.max

    def grow(self, v):
        """Expand to include the value v."""
        v = self.traits.cast(v)
        if v < self._min:
            self._min = v
        if v > self._max:
            self._max = v
        self._empty = False

    def length(self):
        """max - min; negative for an inverted range, zero when empty."""
        if self.empty():
            return self.traits.zero()
        return self.max - self.min

    def __str__(self):
        return f"[{self.min}, {self.max}]"

    def __repr__(self):
        if self.empty():
            return f"Range(dtype={self.dtype})"
        return f"Range({self.min}, {self.max}, dtype={self.dtype})"
