import dataclasses

import numpy as np
import pytest

from geometry import dimension
from geometry.coords import CoordinateSequence, equals_2d
from geometry.orientation import is_ccw
from relate.errors import SegmentIndexError, WalkPreconditionError
from relate.segment_string import RelateSegmentString

CW_SQUARE = [(0, 0), (0, 10), (10, 10), (10, 0), (0, 0)]
CCW_SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]


def line(pts, is_a=True, orient=False):
    return RelateSegmentString.create_line(np.array(pts, float), is_a, 1, None, orient=orient)


def ring(pts, ring_id=0, orient=False):
    return RelateSegmentString.create_ring(np.array(pts, float), True, 1, ring_id, "poly", None,
                                           orient=orient)


def _xy(p):
    return None if p is None else (float(p[0]), float(p[1]))


# --------------------
# Construction
# --------------------
def test_factories_set_context():
    ls = line([(0, 0), (5, 0)], is_a=False)
    assert ls.operand == "B" and not ls.is_a
    assert ls.dimension == dimension.L
    assert ls.ring_id is None and ls.polygonal is None
    assert ls.element_id == 1

    rs = ring(CW_SQUARE, ring_id=2)
    assert rs.operand == "A"
    assert rs.dimension == dimension.A
    assert rs.ring_id == 2 and rs.polygonal == "poly"
    assert not rs.is_owned and not rs.is_normalized


def test_construction_borrows_sequence():
    seq = CoordinateSequence(np.array(CW_SQUARE, float))
    rs = RelateSegmentString.create_ring(seq, True, 1, 0, None)
    assert rs.coordinates is seq


def test_precondition_violations_fail_fast():
    with pytest.raises(WalkPreconditionError):
        line([(0, 0)])
    with pytest.raises(WalkPreconditionError):
        ring([(0, 0), (10, 0), (10, 10)])


# --------------------
# Neighbour lookup
# --------------------
def test_node_section_at_interior_vertex_of_open_line():
    ns = line([(0, 0), (5, 0), (10, 0)]).create_node_section(0, (5, 0))
    assert ns.is_at_vertex
    assert _xy(ns.previous) == (0.0, 0.0)
    assert _xy(ns.point) == (5.0, 0.0)
    assert _xy(ns.next) == (10.0, 0.0)


def test_node_section_in_segment_interior():
    ns = line([(0, 0), (5, 0), (10, 0)]).create_node_section(1, (7, 0))
    assert not ns.is_at_vertex and ns.is_proper
    assert _xy(ns.previous) == (5.0, 0.0)
    assert _xy(ns.next) == (10.0, 0.0)


def test_open_line_neighbours_absent_only_at_ends():
    ls = line([(0, 0), (5, 0), (10, 0)])
    assert ls.prev_vertex(0, (0, 0)) is None
    assert _xy(ls.prev_vertex(1, (5, 0))) == (0.0, 0.0)
    assert _xy(ls.prev_vertex(0, (2, 0))) == (0.0, 0.0)
    assert ls.next_vertex(1, (10, 0)) is None
    assert _xy(ls.next_vertex(0, (5, 0))) == (10.0, 0.0)
    assert _xy(ls.next_vertex(0, (0, 0))) == (5.0, 0.0)

    ns = ls.create_node_section(0, (0, 0))
    assert ns.previous is None and _xy(ns.next) == (5.0, 0.0)
    ns = ls.create_node_section(1, (10, 0))
    assert ns.next is None and _xy(ns.previous) == (5.0, 0.0)


def test_ring_neighbours_wrap_over_closing_point():
    rs = ring(CW_SQUARE)
    assert _xy(rs.prev_vertex(0, (0, 0))) == (10.0, 0.0)
    assert _xy(rs.next_vertex(3, (0, 0))) == (0.0, 10.0)


def test_ring_neighbours_never_absent():
    rs = ring(CW_SQUARE)
    for i in range(rs.size() - 1):
        c0, c1 = rs.segment(i)
        mid = (c0 + c1) / 2.0
        for pt in (c0, c1, mid):
            assert rs.prev_vertex(i, pt) is not None
            assert rs.next_vertex(i, pt) is not None
            ns = rs.create_node_section(i, pt)
            assert not equals_2d(ns.previous, pt)
            assert not equals_2d(ns.next, pt)


def test_unknown_index_on_two_point_walk():
    ls = line([(0, 0), (10, 0)])
    assert _xy(ls.next_vertex(None, (10, 0))) == (0.0, 0.0)
    assert _xy(ls.next_vertex(None, (4, 0))) == (10.0, 0.0)
    assert ls.prev_vertex(None, (0, 0)) is None
    # an explicit index keeps the open-end behaviour
    assert ls.next_vertex(0, (10, 0)) is None


def test_unknown_index_rejected_for_longer_walks():
    with pytest.raises(SegmentIndexError):
        line([(0, 0), (5, 0), (10, 0)]).next_vertex(None, (10, 0))


def test_out_of_range_segment_index():
    ls = line([(0, 0), (5, 0), (10, 0)])
    with pytest.raises(SegmentIndexError) as exc:
        ls.create_node_section(2, (10, 0))
    assert "seg_index=2" in str(exc.value)
    with pytest.raises(SegmentIndexError):
        ls.is_containing_segment(-1, (0, 0))


def test_node_section_is_independent_of_walk():
    rs = ring(CW_SQUARE)
    ns = rs.create_node_section(0, (0, 0))
    assert not np.shares_memory(ns.previous, rs.coordinates.get_coordinate(3))
    assert not ns.point.flags.writeable
    with pytest.raises(dataclasses.FrozenInstanceError):
        ns.is_at_vertex = False
    assert ns.polygonal == "poly" and ns.ring_id == 0 and ns.element_id == 1


def test_node_section_equality_is_2d():
    ls = RelateSegmentString.create_line(np.array([(0, 0, 1), (5, 0, 2), (10, 0, 3)]), True, 1)
    ns = ls.create_node_section(0, (5, 0))
    assert ns.is_at_vertex
    assert _xy(ns.next) == (10.0, 0.0)


# --------------------
# Intersection ownership
# --------------------
def _claims(ss, pt):
    claims = 0
    for i in range(ss.size() - 1):
        c0, c1 = ss.segment(i)
        if (equals_2d(pt, c0) or equals_2d(pt, c1)) and ss.is_containing_segment(i, pt):
            claims += 1
    return claims


def test_each_ring_vertex_claimed_exactly_once():
    rs = ring(CW_SQUARE)
    for k in range(rs.size() - 1):
        assert _claims(rs, rs.get_coordinate(k)) == 1


def test_each_line_vertex_claimed_exactly_once():
    ls = line([(0, 0), (5, 0), (10, 0), (10, 5)])
    for k in range(ls.size()):
        assert _claims(ls, ls.get_coordinate(k)) == 1


def test_two_point_line_owns_its_terminal_vertex():
    ls = line([(0, 0), (10, 0)])
    assert ls.is_containing_segment(0, (10, 0))
    assert ls.is_containing_segment(0, (0, 0))
    assert ls.is_containing_segment(0, (3, 0))


def test_interior_shared_vertex_goes_to_following_segment():
    ls = line([(0, 0), (5, 0), (10, 0)])
    assert not ls.is_containing_segment(0, (5, 0))
    assert ls.is_containing_segment(1, (5, 0))
    rs = ring(CW_SQUARE)
    assert not rs.is_containing_segment(3, (0, 0))
    assert rs.is_containing_segment(0, (0, 0))


# --------------------
# Normalization
# --------------------
def test_orient_removes_duplicate_and_flips_to_cw():
    src = np.array([(0, 0), (0, 0), (10, 0), (10, 10), (0, 10), (0, 0)], float)
    rs = ring(src)
    rs.orient_and_remove_repeated(True)
    np.testing.assert_array_equal(rs.coordinates.to_numpy(),
                                  [(0, 0), (0, 10), (10, 10), (10, 0), (0, 0)])
    assert rs.is_owned and rs.is_normalized
    # borrowed input is untouched
    assert src.shape == (6, 2) and tuple(src[2]) == (10.0, 0.0)


def test_orient_is_noop_when_already_conditioned():
    seq = CoordinateSequence(np.array(CW_SQUARE, float))
    rs = RelateSegmentString.create_ring(seq, True, 1, 0, None)
    rs.orient_and_remove_repeated(True)
    assert rs.coordinates is seq
    assert not rs.is_owned


def test_orient_reverses_opposite_ring_keeping_points():
    rs = ring(CCW_SQUARE)
    rs.orient_and_remove_repeated(True)
    out = rs.coordinates.to_numpy()
    np.testing.assert_array_equal(out, np.array(CCW_SQUARE, float)[::-1])
    assert sorted(map(tuple, out.tolist())) == sorted(map(tuple, np.array(CCW_SQUARE, float).tolist()))
    assert not is_ccw(rs.coordinates)


def test_orient_small_ring_far_from_origin():
    x0 = y0 = 1e9
    d = 0.001
    src = np.array([(x0, y0), (x0 + d, y0), (x0 + d, y0 + d), (x0, y0 + d), (x0, y0)])
    rs = ring(src)
    rs.orient_and_remove_repeated(True)
    assert not is_ccw(rs.coordinates)
    np.testing.assert_array_equal(rs.coordinates.to_numpy(), src[::-1])

    hole = ring(src[::-1], ring_id=1)
    hole.orient_and_remove_repeated(False)
    np.testing.assert_array_equal(hole.coordinates.to_numpy(), src)


def test_orient_twice_equals_once():
    once = ring(CCW_SQUARE)
    once.orient_and_remove_repeated(True)
    twice = ring(CCW_SQUARE)
    twice.orient_and_remove_repeated(True)
    twice.orient_and_remove_repeated(True)
    assert twice.coordinates.equals_2d(once.coordinates)


def test_orient_ccw_request():
    rs = ring(CW_SQUARE, ring_id=1)
    rs.orient_and_remove_repeated(False)
    assert is_ccw(rs.coordinates)


def test_remove_repeated_noop_and_idempotent():
    ls = line([(0, 0), (5, 0), (10, 0)])
    before = ls.coordinates
    ls.remove_repeated()
    assert ls.coordinates is before and not ls.is_owned

    dup = line([(0, 0), (5, 0), (5, 0), (10, 0)])
    dup.remove_repeated()
    first = dup.coordinates.to_numpy()
    dup.remove_repeated()
    np.testing.assert_array_equal(dup.coordinates.to_numpy(), first)
    np.testing.assert_array_equal(first, [(0, 0), (5, 0), (10, 0)])
    assert dup.is_owned


def test_orient_flag_on_construction():
    shell = ring(CCW_SQUARE, ring_id=0, orient=True)
    assert not is_ccw(shell.coordinates)
    hole = ring(CW_SQUARE, ring_id=1, orient=True)
    assert is_ccw(hole.coordinates)
    ls = line([(0, 0), (0, 0), (3, 3)], orient=True)
    assert ls.size() == 2 and ls.is_normalized


def test_collapsing_to_single_point_is_rejected():
    ls = line([(1, 1), (1, 1)])
    with pytest.raises(WalkPreconditionError):
        ls.remove_repeated()
