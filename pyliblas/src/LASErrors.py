#!/usr/bin/env python3
# -*- coding: utf-8 -*-


class LASError(RuntimeError):
    """Base class for errors raised by pyliblas."""


class DimensionalityError(LASError):
    """A per-axis argument does not fit the dimensionality of a Bounds."""


class InvalidExtentError(LASError):
    """A Bounds axis has its minimum above its maximum."""
