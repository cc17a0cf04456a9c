import pytest

from solarium.interval import Box, Interval
from solarium.vector3 import Vector3


def make_box():
    return Box(Interval(-4.0, 4.0), Interval(-2.0, 6.0), Interval(0.0, 8.0))


def test_midpoint_lies_within_interval():
    interval = Interval(-3.0, 7.0)
    assert interval.min <= interval.midpoint() <= interval.max
    assert interval.midpoint() - interval.min == interval.max - interval.midpoint()


def test_width_of_degenerate_interval():
    assert Interval(5.0, 5.0).width() == 0.0


def test_symmetric_box_center_is_origin():
    box = Box(Interval(-1.0, 1.0), Interval(-1.0, 1.0), Interval(-1.0, 1.0))
    assert box.center() == Vector3()


def test_largest_side_picks_longest_axis():
    box = Box(Interval(0.0, 1.0), Interval(0.0, 2.0), Interval(0.0, 3.0))
    assert box.largest_side() == 3.0
    box = Box(Interval(0.0, 3.0), Interval(0.0, 2.0), Interval(0.0, 1.0))
    assert box.largest_side() == 3.0
    box = Box(Interval(0.0, 1.0), Interval(0.0, 3.0), Interval(0.0, 2.0))
    assert box.largest_side() == 3.0


def test_octant_zero_is_upper_in_every_axis():
    box = make_box()
    center = box.center()
    sub = box.subregion(0)
    assert sub.x_interval == Interval(center.x, box.x_interval.max)
    assert sub.y_interval == Interval(center.y, box.y_interval.max)
    assert sub.z_interval == Interval(center.z, box.z_interval.max)


def test_octant_seven_is_lower_in_every_axis():
    box = make_box()
    center = box.center()
    sub = box.subregion(7)
    assert sub.x_interval == Interval(box.x_interval.min, center.x)
    assert sub.y_interval == Interval(box.y_interval.min, center.y)
    assert sub.z_interval == Interval(box.z_interval.min, center.z)


def test_octant_one_splits_only_z_low():
    box = make_box()
    center = box.center()
    sub = box.subregion(1)
    assert sub.x_interval == Interval(center.x, box.x_interval.max)
    assert sub.y_interval == Interval(center.y, box.y_interval.max)
    assert sub.z_interval == Interval(box.z_interval.min, center.z)


@pytest.mark.parametrize("octant", range(8))
def test_subregions_are_half_size(octant):
    box = make_box()
    sub = box.subregion(octant)
    assert sub.x_interval.width() * 2 == box.x_interval.width()
    assert sub.y_interval.width() * 2 == box.y_interval.width()
    assert sub.z_interval.width() * 2 == box.z_interval.width()


def test_subregions_are_all_distinct():
    box = make_box()
    subs = {box.subregion(i) for i in range(8)}
    assert len(subs) == 8


@pytest.mark.parametrize("octant", [-1, 8])
def test_subregion_rejects_bad_index(octant):
    with pytest.raises(ValueError):
        make_box().subregion(octant)