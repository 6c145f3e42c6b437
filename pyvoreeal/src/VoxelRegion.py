#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import numpy as np

from pyvoreeal.src.voxmath import Vector3i, asVector3, wrapInt32


class VoxelRegion:
    """
    Region of a voxel volume given by its lower and upper corners.

    This is the corner-pair representation used by voxel storage libraries.
    Width, height and depth are the per-axis differences between the upper
    and the lower corner, and are what Region reads when converting.
    """

    def __init__(self, lowerX=0, lowerY=0, lowerZ=0, upperX=0, upperY=0, upperZ=0):
        self.lower = Vector3i(lowerX, lowerY, lowerZ)
        self.upper = Vector3i(upperX, upperY, upperZ)

    @classmethod
    def fromCorners(cls, lower, upper):
        """Create a region from two 3-component corners."""
        return cls(*asVector3(lower), *asVector3(upper))

    def getLowerX(self):
        return int(self.lower[0])

    def getLowerY(self):
        return int(self.lower[1])

    def getLowerZ(self):
        return int(self.lower[2])

    def getUpperX(self):
        return int(self.upper[0])

    def getUpperY(self):
        return int(self.upper[1])

    def getUpperZ(self):
        return int(self.upper[2])

    def getLowerCorner(self):
        """Get a copy of the lower corner."""
        return self.lower.copy()

    def getUpperCorner(self):
        """Get a copy of the upper corner."""
        return self.upper.copy()

    def getWidth(self):
        """Get the extent along X."""
        return wrapInt32(self.getUpperX() - self.getLowerX())

    def getHeight(self):
        """Get the extent along Y."""
        return wrapInt32(self.getUpperY() - self.getLowerY())

    def getDepth(self):
        """Get the extent along Z."""
        return wrapInt32(self.getUpperZ() - self.getLowerZ())

    def getDimensions(self):
        """Get width, height and depth as an integer vector."""
        return Vector3i(self.getWidth(), self.getHeight(), self.getDepth())

    def containsPoint(self, point):
        """Check if region contains point, both corners inclusive."""
        return bool(np.all(point >= self.lower) and np.all(point <= self.upper))

    def isValid(self):
        """Check if the upper corner is not below the lower one on any axis."""
        return bool(np.all(self.upper >= self.lower))

    def extend(self, point):
        """Extend region to include point."""
        self.lower = np.minimum(self.lower, Vector3i(*asVector3(point)))
        self.upper = np.maximum(self.upper, Vector3i(*asVector3(point)))

    def shift(self, dx, dy, dz):
        """Move both corners by the given amount."""
        offset = Vector3i(dx, dy, dz)
        self.lower = self.lower + offset
        self.upper = self.upper + offset

    def __eq__(self, other):
        if not isinstance(other, VoxelRegion):
            return NotImplemented
        return bool(
            np.array_equal(self.lower, other.lower)
            and np.array_equal(self.upper, other.upper)
        )

    __hash__ = None

    def __str__(self):
        """String representation of region."""
        return (
            f"VoxelRegion(lower=[{self.lower[0]}, {self.lower[1]}, {self.lower[2]}], "
            f"upper=[{self.upper[0]}, {self.upper[1]}, {self.upper[2]}])"
        )

    __repr__ = __str__
