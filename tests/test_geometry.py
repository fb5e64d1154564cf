"""Tests for vector, line and plain geometry helpers."""

# Standard Library
import math

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_smilesdraw_to_sys_path()

# local repo modules
from smilesdraw import geometry
from smilesdraw.line import Line
from smilesdraw.vector2 import Vector2


#============================================
def test_rotate_around_quarter_turn():
	vec = Vector2(2.0, 1.0)
	vec.rotate_around(math.pi / 2.0, Vector2(1.0, 1.0))
	assert vec.x == pytest.approx(1.0)
	assert vec.y == pytest.approx(2.0)


#============================================
def test_angle_between_zero_vector_is_nan():
	assert math.isnan(Vector2.angle_between(Vector2(0.0, 0.0), Vector2(1.0, 0.0)))
	assert Vector2.angle_between(Vector2(1.0, 0.0), Vector2(0.0, 3.0)) == pytest.approx(math.pi / 2.0)


#============================================
def test_rotate_away_from_angle_increases_distance():
	point = Vector2(1.0, 0.0)
	center = Vector2(0.0, 0.0)
	other = Vector2(0.0, 1.0)
	angle = point.get_rotate_away_from_angle(other, center, math.radians(120))
	rotated = point.clone().rotate_around(angle, center)
	assert rotated.distance(other) > point.distance(other)


#============================================
def test_units_are_normalized_normals():
	normals = Vector2.units(Vector2(0.0, 0.0), Vector2(3.0, 0.0))
	assert normals[0].as_tuple() == pytest.approx((0.0, 1.0))
	assert normals[1].as_tuple() == pytest.approx((0.0, -1.0))


#============================================
def test_polygon_helpers():
	assert geometry.poly_circumradius(30.0, 6) == pytest.approx(30.0)
	assert geometry.central_angle(4) == pytest.approx(math.pi / 2.0)
	assert geometry.inner_angle(6) == pytest.approx(math.radians(120))
	assert geometry.apothem_from_side_length(2.0, 4) == pytest.approx(1.0)


#============================================
def test_find_parallel_side_matches_on_which_side():
	x1, y1, x2, y2 = geometry.find_parallel(0.0, 0.0, 10.0, 0.0, 2.0)
	assert (y1, y2) == pytest.approx((2.0, 2.0))
	assert geometry.on_which_side_is_point((0.0, 0.0, 10.0, 0.0), (5.0, 2.0)) == 1
	assert geometry.on_which_side_is_point((0.0, 0.0, 10.0, 0.0), (5.0, -2.0)) == -1
	assert geometry.on_which_side_is_point((0.0, 0.0, 10.0, 0.0), (5.0, 0.0)) == 0


#============================================
@pytest.mark.parametrize("angle", [0.0, 0.1, 0.3, -0.3, 1.0, -2.5, 3.1])
def test_snap_angle_lands_on_multiple_of_thirty_degrees(angle):
	snapped = geometry.snap_angle(angle)
	steps = snapped / geometry.SNAP_ANGLE
	assert steps == pytest.approx(round(steps), abs=1e-9)
	assert abs(snapped - angle) <= geometry.SNAP_ANGLE / 2.0 + 1e-12


#============================================
def test_line_shorten_is_symmetric():
	line = Line(Vector2(0.0, 0.0), Vector2(10.0, 0.0))
	line.shorten(4.0)
	assert line.start.as_tuple() == pytest.approx((2.0, 0.0))
	assert line.end.as_tuple() == pytest.approx((8.0, 0.0))
	assert line.get_length() == pytest.approx(6.0)


#============================================
def test_line_left_and_right_follow_x():
	line = Line(Vector2(5.0, 0.0), Vector2(1.0, 0.0), "O", "C")
	assert line.get_left_element() == "C"
	assert line.get_right_element() == "O"
	line.shorten_right(1.0)
	assert line.start.as_tuple() == pytest.approx((4.0, 0.0))


#============================================
def test_degree_radian_conversion():
	assert geometry.to_deg(math.pi) == pytest.approx(180.0)
	assert geometry.to_rad(geometry.to_deg(0.3)) == pytest.approx(0.3)


#============================================
def test_elongate_line_moves_end_point():
	assert geometry.elongate_line(0, 0, 3, 4, 5) == pytest.approx((6.0, 8.0))
	assert geometry.elongate_line(0, 0, 3, 4, -5) == pytest.approx((0.0, 0.0))
	assert geometry.elongate_line(1, 1, 1, 1, 5) == (1, 1)


#============================================
@pytest.mark.parametrize("value, expected", [(3.2, 1), (-0.1, -1), (0, 0)])
def test_signum(value, expected):
	assert geometry.signum(value) == expected
