#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Binary persistence for Region.

A region is stored as six signed 32-bit integers in the order X, Y, Z,
Width, Height, Depth (24 bytes). There is no header, version or count;
a file of regions is a plain concatenation of records.
"""

import numpy as np

from pyvoreeal.src.Region import Region
from pyvoreeal.src.RegionSchema import FIELD_ORDER, getPropertyValues, setPropertyValues
from pyvoreeal.src.VoreealLogging import VOREEAL_LOGGER
from pyvoreeal.src.voxmath import fitsInt32

# Little-endian, as written by the engine on every supported platform.
# Source-level setting: RECORD_DTYPE is built from it at import.
BYTE_ORDER = "<"

RECORD_DTYPE = np.dtype([(name, BYTE_ORDER + "i4") for name in FIELD_ORDER])
RECORD_SIZE = RECORD_DTYPE.itemsize


def _toRecord(region):
    values = getPropertyValues(region)
    for name in FIELD_ORDER:
        if not fitsInt32(values[name]):
            raise OverflowError(
                f"Region field {name}={values[name]} does not fit in int32"
            )
    return tuple(values[name] for name in FIELD_ORDER)


def _fromRecord(record, region=None):
    if region is None:
        region = Region()
    return setPropertyValues(region, {name: int(record[name]) for name in FIELD_ORDER})


def packRegions(regions):
    """Encode regions as concatenated 24-byte records."""
    records = np.array([_toRecord(region) for region in regions], dtype=RECORD_DTYPE)
    return records.tobytes()


def unpackRegions(data):
    """Decode concatenated 24-byte records into a list of regions."""
    if len(data) % RECORD_SIZE != 0:
        raise ValueError(
            f"Region data length {len(data)} is not a multiple of {RECORD_SIZE}"
        )
    records = np.frombuffer(data, dtype=RECORD_DTYPE)
    return [_fromRecord(record) for record in records]


@VOREEAL_LOGGER
class RegionArchive:
    """
    Reads or writes regions on a binary stream.

    The direction is fixed at construction. serialize() works both ways:
    when loading it fills the given region from the stream, when saving it
    writes the region to the stream. The archive never closes the stream.
    """

    def __init__(self, stream, loading=False):
        self.stream = stream
        self.loading = loading
        self.count = 0

    def isLoading(self):
        return self.loading

    def isSaving(self):
        return not self.loading

    def serialize(self, region):
        """Transfer one region in the direction of the archive."""
        if self.loading:
            _fromRecord(self._readRecord(), region)
        else:
            self.stream.write(packRegions([region]))
        self.count += 1
        return region

    def writeRegion(self, region):
        if self.loading:
            raise RuntimeError("Cannot write to a loading archive")
        self.serialize(region)

    def readRegion(self):
        if not self.loading:
            raise RuntimeError("Cannot read from a saving archive")
        return self.serialize(Region())

    def __iter__(self):
        """Yield regions until the stream ends on a record boundary."""
        if not self.loading:
            raise RuntimeError("Cannot read from a saving archive")
        while True:
            data = self.stream.read(RECORD_SIZE)
            if not data:
                return
            self.count += 1
            yield _fromRecord(self._decode(data))

    def _readRecord(self):
        return self._decode(self.stream.read(RECORD_SIZE))

    @staticmethod
    def _decode(data):
        if len(data) != RECORD_SIZE:
            raise EOFError(
                f"Truncated region record: expected {RECORD_SIZE} bytes, got {len(data)}"
            )
        return np.frombuffer(data, dtype=RECORD_DTYPE)[0]


def saveRegions(path, regions):
    """Write regions to a file, replacing its contents."""
    data = packRegions(regions)
    with open(path, "wb") as f:
        f.write(data)
    RegionArchive.debug(f"Saved {len(data) // RECORD_SIZE} regions to {path}")


def loadRegions(path):
    """Read every region stored in a file."""
    with open(path, "rb") as f:
        data = f.read()
    regions = unpackRegions(data)
    RegionArchive.debug(f"Loaded {len(regions)} regions from {path}")
    return regions
