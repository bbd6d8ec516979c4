"""
PyLibLAS - bounds and ranges for LAS point cloud extents
"""

__version__ = "0.1.0"

from pyliblas.src.LASLogging import setupLogging

# Configure logging
logger = setupLogging()

# Import core modules
from pyliblas.src.lasmath import Real, Vector3r, NumericTraits, numericTraits
from pyliblas.src.Range import Range
from pyliblas.src.Bounds import Bounds
from pyliblas.src.Point import Point

# Import reprojection classes
from pyliblas.src.SpatialReference import SpatialReference
from pyliblas.src.Transform import TransformI, ReprojectionTransform

# Import errors
from pyliblas.src.LASErrors import LASError, DimensionalityError, InvalidExtentError


# Export common symbols
__all__ = [
    "Real",
    "Vector3r",
    "NumericTraits",
    "numericTraits",
    "Range",
    "Bounds",
    "Point",
    "SpatialReference",
    "TransformI",
    "ReprojectionTransform",
    "LASError",
    "DimensionalityError",
    "InvalidExtentError",
]


def version():
    """Return PyLibLAS version."""
    return __version__
