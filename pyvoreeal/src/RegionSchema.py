#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Property table for Region.

Host integrations (editors, scripting bridges) read this table instead of
annotations on the Region class. The order of REGION_PROPERTIES is also the
order in which RegionArchive stores the fields.
"""

from collections import namedtuple
from numbers import Integral


RegionProperty = namedtuple(
    "RegionProperty",
    ["name", "attribute", "description", "editable", "blueprintReadWrite"],
)

REGION_PROPERTIES = (
    RegionProperty("X", "x", "Position X component.", True, True),
    RegionProperty("Y", "y", "Position Y component.", True, True),
    RegionProperty("Z", "z", "Position Z component.", True, True),
    RegionProperty("Width", "width", "Extent along X.", True, True),
    RegionProperty("Height", "height", "Extent along Y.", True, True),
    RegionProperty("Depth", "depth", "Extent along Z.", True, True),
)

FIELD_ORDER = tuple(prop.name for prop in REGION_PROPERTIES)

_BY_NAME = {prop.name: prop for prop in REGION_PROPERTIES}


def getProperty(name):
    """Look up a property by its display name."""
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown region property: {name}") from None


def getPropertyValues(region):
    """Return the region fields keyed by property name, in storage order."""
    return {prop.name: getattr(region, prop.attribute) for prop in REGION_PROPERTIES}


def setPropertyValues(region, values):
    """Apply a mapping of property name to integer value to region."""
    updates = []
    for name, value in values.items():
        prop = getProperty(name)
        if not prop.editable:
            raise KeyError(f"Region property is read-only: {name}")
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise TypeError(
                f"Region property {name} expects an integer, got {type(value).__name__}"
            )
        updates.append((prop.attribute, int(value)))

    # Nothing is written until every value has been checked
    for attribute, value in updates:
        setattr(region, attribute, value)
    return region
