#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Region demo.

Run with:  pyvoreeal run example/regionDemo.py
"""

import logging

from pyvoreeal import ContainmentType, Region, VoxelRegion

logger = logging.getLogger("PyVoreeal.Demo")

chunk = Region(0, 0, 0, 16, 16, 16)
brush = Region(4, 4, 4, 3, 3, 3)

logger.info(f"chunk:  {chunk}")
logger.info(f"brush:  {brush}")
logger.info(f"chunk vs brush: {Region.contains(chunk, brush).name}")

# Grow the brush until it pokes out of the chunk
while Region.contains(chunk, brush) is ContainmentType.Contains:
    brush.growUnified(1)
logger.info(f"brush after growing: {brush} -> {Region.contains(chunk, brush).name}")

# Neighbouring chunk shares a face: classified as intersecting
neighbour = Region(16, 0, 0, 16, 16, 16)
logger.info(f"chunk vs neighbour: {Region.contains(chunk, neighbour).name}")

# Cell (16, 0, 0) belongs to the neighbour only
logger.info(f"chunk has cell 15: {Region.contains(chunk, (15, 0, 0))}")
logger.info(f"chunk has cell 16: {Region.contains(chunk, (16, 0, 0))}")

voxels = chunk.toVoxelRegion()
logger.info(f"as voxel region: {voxels}")
logger.info(f"round trip equal: {Region.fromVoxelRegion(voxels) == chunk}")
