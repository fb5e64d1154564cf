#--------------------------------------------------------------------------
#     This file is part of smilesdraw - a free chemical python library
#
#     This program is free software; you can redistribute it and/or modify
#     it under the terms of the GNU General Public License as published by
#     the Free Software Foundation; either version 2 of the License, or
#     (at your option) any later version.
#
#     This program is distributed in the hope that it will be useful,
#     but WITHOUT ANY WARRANTY; without even the implied warranty of
#     MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#     GNU General Public License for more details.
#
#     Complete text of GNU GPL can be found in the file LICENSE in the
#     main directory of the program
#
#--------------------------------------------------------------------------

"""Plain geometry helpers working on numbers and tuples."""

# Standard Library
import math


# 30 degrees, the snapping step of the final drawing rotation
SNAP_ANGLE = math.pi / 6.0


#============================================
def to_rad(degrees):
	return degrees * math.pi / 180.0


#============================================
def to_deg(radians):
	return radians * 180.0 / math.pi


#============================================
def poly_circumradius(side_length, n_sides):
	"""Circumradius of a regular polygon with the given side length."""
	return side_length / (2.0 * math.sin(math.pi / n_sides))


#============================================
def apothem(circumradius, n_sides):
	return circumradius * math.cos(math.pi / n_sides)


#============================================
def apothem_from_side_length(side_length, n_sides):
	return apothem(poly_circumradius(side_length, n_sides), n_sides)


#============================================
def central_angle(n_sides):
	return 2.0 * math.pi / n_sides


#============================================
def inner_angle(n_sides):
	return to_rad((n_sides - 2) * 180.0 / n_sides)


#============================================
def point_distance(x1, y1, x2, y2):
	return math.hypot(x2 - x1, y2 - y1)


#============================================
def find_parallel(x1, y1, x2, y2, d):
	"""Return the line parallel to (x1, y1)-(x2, y2) shifted by distance d.

	Returns:
		tuple: (x1, y1, x2, y2) of the shifted line.
	"""
	length = point_distance(x1, y1, x2, y2)
	if length == 0:
		return (x1, y1, x2, y2)
	dx = (x2 - x1) / length
	dy = (y2 - y1) / length
	px = -dy * d
	py = dx * d
	return (x1 + px, y1 + py, x2 + px, y2 + py)


#============================================
def on_which_side_is_point(line, point):
	"""Return 1, -1 or 0 for the side of line (x1, y1, x2, y2) point lies on."""
	x1, y1, x2, y2 = line
	x, y = point
	cross = (x2 - x1) * (y - y1) - (y2 - y1) * (x - x1)
	if cross > 0:
		return 1
	if cross < 0:
		return -1
	return 0


#============================================
def elongate_line(x1, y1, x2, y2, dl):
	"""Move the end point (x2, y2) along the line by dl; negative dl shortens."""
	length = point_distance(x1, y1, x2, y2)
	if length == 0:
		return (x2, y2)
	ratio = (length + dl) / length
	return (x1 + (x2 - x1) * ratio, y1 + (y2 - y1) * ratio)


#============================================
def signum(value):
	if value > 0:
		return 1
	if value < 0:
		return -1
	return 0


#============================================
def snap_angle(angle, step=SNAP_ANGLE):
	"""Round angle to the nearest multiple of step."""
	remainder = math.fmod(angle, step)
	if remainder < 0:
		remainder += step
	if remainder < step / 2.0:
		return angle - remainder
	return angle + step - remainder
