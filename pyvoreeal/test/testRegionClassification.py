#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for region/region and region/point classification.
Region tests treat upper faces as inclusive; point tests treat the upper
bound as exclusive.
"""

import numpy as np
import pytest

from pyvoreeal.src.Region import ContainmentType, Region


def test_containment_type_order():
    assert [t.value for t in ContainmentType] == [0, 1, 2]
    assert [t.name for t in ContainmentType] == ["Disjoint", "Contains", "Intersects"]


@pytest.mark.parametrize(
    "region",
    [Region(0, 0, 0, 1, 1, 1), Region(-5, 3, 8, 10, 2, 7), Region(0, 0, 0, 0, 0, 0)],
)
def test_region_contains_itself(region):
    assert Region.contains(region, region.copy()) is ContainmentType.Contains
    assert Region.intersect(region, region.copy()) is False


def test_contained_region():
    a = Region(0, 0, 0, 10, 10, 10)
    b = Region(2, 2, 2, 3, 3, 3)

    assert Region.contains(a, b) is ContainmentType.Contains
    assert Region.intersect(a, b) is False, "Contained region does not intersect"


def test_classification_is_not_symmetric():
    a = Region(0, 0, 0, 10, 10, 10)
    b = Region(2, 2, 2, 3, 3, 3)

    assert Region.contains(b, a) is ContainmentType.Intersects
    assert Region.intersect(b, a) is True


@pytest.mark.parametrize(
    "other",
    [
        Region(11, 0, 0, 2, 2, 2),
        Region(0, 11, 0, 2, 2, 2),
        Region(0, 0, 11, 2, 2, 2),
        Region(-5, 0, 0, 2, 2, 2),
        Region(0, -5, 0, 2, 2, 2),
        Region(0, 0, -5, 2, 2, 2),
    ],
)
def test_region_outside_on_one_axis_is_disjoint(other):
    a = Region(0, 0, 0, 10, 10, 10)
    assert Region.contains(a, other) is ContainmentType.Disjoint
    assert Region.intersect(a, other) is False


def test_shared_face_intersects():
    a = Region(0, 0, 0, 1, 1, 1)
    b = Region(1, 0, 0, 1, 1, 1)

    assert Region.contains(a, b) is ContainmentType.Intersects
    assert Region.contains(b, a) is ContainmentType.Intersects
    assert Region.intersect(a, b) is True


def test_touching_below_intersects():
    a = Region(0, 0, 0, 4, 4, 4)
    b = Region(-2, 0, 0, 2, 4, 4)
    assert Region.contains(a, b) is ContainmentType.Intersects


def test_partial_overlap():
    a = Region(0, 0, 0, 4, 4, 4)
    b = Region(2, 2, 2, 4, 4, 4)

    assert Region.contains(a, b) is ContainmentType.Intersects
    assert Region.intersect(a, b) is True


def test_region_on_inner_face_is_contained():
    a = Region(0, 0, 0, 4, 4, 4)
    b = Region(4, 0, 0, 0, 4, 4)
    assert Region.contains(a, b) is ContainmentType.Contains


def test_unit_box_point_containment():
    unit = Region(0, 0, 0, 1, 1, 1)

    assert Region.contains(unit, (0, 0, 0)) is True
    assert Region.contains(unit, (1, 0, 0)) is False
    assert Region.contains(unit, (0, 1, 0)) is False
    assert Region.contains(unit, (0, 0, 1)) is False
    assert Region.contains(unit, (-1, 0, 0)) is False


def test_point_containment_bounds():
    region = Region(2, 3, 4, 5, 6, 7)

    assert Region.containsPoint(region, (2, 3, 4))
    assert Region.containsPoint(region, (6, 8, 10)), "Last cell is upper - 1"
    assert not Region.containsPoint(region, (7, 8, 10))
    assert not Region.containsPoint(region, (1.9, 3, 4))
    assert Region.containsPoint(region, np.array([5.5, 7.5, 9.5]))
    assert not Region.containsPoint(region, np.array([6.5, 3.0, 4.0]))


def test_empty_region_contains_no_point():
    assert Region.contains(Region(), (0, 0, 0)) is False


def test_point_needs_three_components():
    with pytest.raises(ValueError):
        Region.contains(Region(0, 0, 0, 1, 1, 1), (0, 0))


def test_contains_dispatch():
    region = Region(0, 0, 0, 2, 2, 2)

    assert isinstance(Region.contains(region, [1, 1, 1]), bool)
    assert isinstance(Region.contains(region, Region()), ContainmentType)
    assert Region.containsRegion(region, Region(0, 0, 0, 1, 1, 1)) is (
        ContainmentType.Contains
    )


def test_classification_handles_values_beyond_int32():
    a = Region(2**40, 0, 0, 10, 10, 10)
    b = Region(2**40 + 2, 2, 2, 3, 3, 3)
    assert Region.contains(a, b) is ContainmentType.Contains
