import numpy as np

from geometry import dimension
from geometry.orientation import is_ccw
from relate.config import build_options
from relate.relate_geometry import RelateGeometry
from shapely.geometry import (
    GeometryCollection, LineString, MultiLineString, MultiPolygon, Point, Polygon,
)

SHELL = [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]
HOLE = [(4, 4), (4, 6), (6, 6), (6, 4), (4, 4)]


def test_polygon_rings_become_oriented_walks():
    poly = Polygon(SHELL, holes=[HOLE])
    walks = RelateGeometry(poly).extract_segment_strings()
    assert [w.ring_id for w in walks] == [0, 1]
    assert all(w.element_id == 1 for w in walks)
    assert all(w.dimension == dimension.A for w in walks)
    assert all(w.polygonal is poly for w in walks)
    shell, hole = walks
    assert not is_ccw(shell.coordinates)
    assert is_ccw(hole.coordinates)


def test_multipolygon_rings_reference_parent():
    mp = MultiPolygon([Polygon(SHELL), Polygon([(20, 0), (30, 0), (30, 10), (20, 0)])])
    rg = RelateGeometry(mp, is_a=False)
    walks = rg.extract_segment_strings()
    assert [w.element_id for w in walks] == [1, 2]
    assert all(w.polygonal is mp for w in walks)
    assert all(w.operand == "B" and w.geometry is rg for w in walks)
    assert rg.is_polygonal() and rg.dimension == dimension.A and rg.name == "B"


def test_collection_numbers_elements_and_skips_points_and_empties():
    gc = GeometryCollection([
        Point(1, 1),
        LineString(),
        LineString([(0, 0), (0, 0), (5, 5)]),
        Polygon(SHELL),
    ])
    walks = RelateGeometry(gc).extract_segment_strings()
    assert [(w.dimension, w.element_id) for w in walks] == [(dimension.L, 1), (dimension.A, 2)]
    line_walk = walks[0]
    assert line_walk.ring_id is None and line_walk.polygonal is None
    assert line_walk.size() == 2


def test_bounds_filter_skips_far_elements():
    mls = MultiLineString([[(0, 0), (1, 1)], [(100, 100), (101, 101)]])
    walks = RelateGeometry(mls).extract_segment_strings(bounds=(90, 90, 110, 110))
    assert len(walks) == 1
    assert walks[0].element_id == 1
    np.testing.assert_array_equal(walks[0].get_coordinate(0), (100, 100))


def test_bounds_filter_skips_far_holes():
    poly = Polygon([(0, 0), (100, 0), (100, 100), (0, 100)],
                   holes=[[(10, 10), (20, 10), (20, 20), (10, 10)],
                          [(80, 80), (90, 80), (90, 90), (80, 80)]])
    walks = RelateGeometry(poly).extract_segment_strings(bounds=(75, 75, 95, 95))
    assert [w.ring_id for w in walks] == [0, 2]


def test_options_control_normalization():
    poly = Polygon(SHELL)
    raw = RelateGeometry(poly).extract_segment_strings(options=build_options(orient_rings=False))
    assert is_ccw(raw[0].coordinates) and not raw[0].is_owned

    ccw = RelateGeometry(poly).extract_segment_strings(options=build_options(shell_cw=False))
    assert is_ccw(ccw[0].coordinates)

    line = LineString([(0, 0), (0, 0), (5, 5)])
    kept = RelateGeometry(line).extract_segment_strings(
        options=build_options(remove_repeated_lines=False))
    assert kept[0].size() == 3


def test_ring_walks_normalized_after_extraction_only_when_enabled():
    poly = Polygon(SHELL)
    walks = RelateGeometry(poly).extract_segment_strings()
    assert walks[0].is_normalized

    raw = RelateGeometry(poly).extract_segment_strings(options=build_options(orient_rings=False))
    assert not raw[0].is_normalized
    # left to the caller, who can still normalize once
    raw[0].orient_and_remove_repeated(True)
    assert raw[0].is_normalized and not is_ccw(raw[0].coordinates)


def test_empty_geometry_has_no_walks():
    rg = RelateGeometry(Polygon())
    assert rg.extract_segment_strings() == []
    assert rg.bounds is None
    assert rg.dimension == dimension.FALSE


def test_nested_multipolygon_in_collection():
    mp = MultiPolygon([Polygon(SHELL)])
    gc = GeometryCollection([LineString([(0, 0), (1, 1)]), mp])
    walks = RelateGeometry(gc).extract_segment_strings()
    assert [w.element_id for w in walks] == [1, 2]
    assert walks[1].polygonal.geom_type == "MultiPolygon"
