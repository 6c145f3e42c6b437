#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import numpy as np

# Define precision
USE_SINGLE_PRECISION = False

if USE_SINGLE_PRECISION:
    Real = np.float32
else:
    Real = np.float64

# Integer type of every region field
Int = np.int32
INT32_MIN = int(np.iinfo(Int).min)
INT32_MAX = int(np.iinfo(Int).max)


def Vector3i(x=0, y=0, z=0):
    """Create a 3D integer vector, wrapping components as an int32 cast does."""
    return np.array([wrapInt32(x), wrapInt32(y), wrapInt32(z)], dtype=Int)


def Vector3r(x=0.0, y=0.0, z=0.0):
    """Create a 3D real vector."""
    return np.array([x, y, z], dtype=Real)


def asVector3(value):
    """Unpack any 3-component sequence (tuple, list, ndarray) into a tuple."""
    if len(value) != 3:
        raise ValueError(f"Expected 3 components, got {len(value)}")
    return value[0], value[1], value[2]


def truncDiv(a, b):
    """Integer division rounding toward zero, as C does (Python's // floors)."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        return -q
    return q


def toInt(value):
    """Convert a scalar to int the way a float-to-int32 cast does (truncate)."""
    return int(value)


def wrapInt32(value):
    """Truncate to int and wrap into the signed 32-bit range (two's complement)."""
    return (toInt(value) - INT32_MIN) % 2**32 + INT32_MIN


def fitsInt32(value):
    """Check if value can be stored in a signed 32-bit field."""
    return INT32_MIN <= value <= INT32_MAX
