"""
PyVoreeal - integer axis-aligned regions for voxel volumes
"""

__version__ = "0.1.0"

# Import core modules
from pyvoreeal.src.voxmath import Vector3i, Vector3r
from pyvoreeal.src.Region import ContainmentType, Region
from pyvoreeal.src.VoxelRegion import VoxelRegion
from pyvoreeal.src.RegionArchive import (
    RegionArchive,
    loadRegions,
    packRegions,
    saveRegions,
    unpackRegions,
)
from pyvoreeal.src import RegionSchema

# Export common symbols
__all__ = [
    "Vector3i",
    "Vector3r",
    "ContainmentType",
    "Region",
    "VoxelRegion",
    "RegionArchive",
    "RegionSchema",
    "loadRegions",
    "packRegions",
    "saveRegions",
    "unpackRegions",
]


def version():
    """Return PyVoreeal version."""
    return __version__
