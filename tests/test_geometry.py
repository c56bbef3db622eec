from __future__ import annotations

from face_runner.runner import Box, overlaps


def test_overlapping_boxes():
    assert overlaps(Box(0, 0, 10, 10), Box(5, 5, 10, 10))


def test_edge_adjacent_boxes_do_not_overlap():
    a = Box(0, 0, 10, 10)
    assert not overlaps(a, Box(10, 0, 10, 10))
    assert not overlaps(a, Box(0, 10, 10, 10))
    assert not overlaps(Box(10, 0, 10, 10), a)


def test_separated_boxes():
    assert not overlaps(Box(0, 0, 10, 10), Box(50, 50, 1, 1))
