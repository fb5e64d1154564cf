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

"""Line segment between two atoms, as handed to the renderer."""

# Standard Library
import math

# local repo modules
from .vector2 import Vector2


#============================================
class Line(object):
	"""A segment with the element symbols and stereo flags of its two ends.

	"Left" and "right" refer to the end with the smaller and larger x
	coordinate, which is what label-aware shortening works with.
	"""

	def __init__(self, start=None, end=None, element_start=None, element_end=None,
			chiral_start=False, chiral_end=False):
		self.start = start.clone() if start is not None else Vector2(0.0, 0.0)
		self.end = end.clone() if end is not None else Vector2(0.0, 0.0)
		self.element_start = element_start
		self.element_end = element_end
		self.chiral_start = chiral_start
		self.chiral_end = chiral_end

	def clone(self):
		return Line(self.start, self.end, self.element_start, self.element_end,
				self.chiral_start, self.chiral_end)

	def get_length(self):
		return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)

	def get_angle(self):
		diff = Vector2.subtract_vectors(self.get_right_vector(), self.get_left_vector())
		return diff.angle()

	def _start_is_left(self):
		return self.start.x < self.end.x

	def get_right_vector(self):
		return self.end if self._start_is_left() else self.start

	def get_left_vector(self):
		return self.start if self._start_is_left() else self.end

	def get_right_element(self):
		return self.element_end if self._start_is_left() else self.element_start

	def get_left_element(self):
		return self.element_start if self._start_is_left() else self.element_end

	def get_right_chiral(self):
		return self.chiral_end if self._start_is_left() else self.chiral_start

	def get_left_chiral(self):
		return self.chiral_start if self._start_is_left() else self.chiral_end

	def set_right_vector(self, x, y):
		self.get_right_vector().set(x, y)
		return self

	def set_left_vector(self, x, y):
		self.get_left_vector().set(x, y)
		return self

	def rotate_to_x_axis(self):
		left = self.get_left_vector()
		self.set_right_vector(left.x + self.get_length(), left.y)
		return self

	def rotate(self, theta):
		"""Rotate the right end around the left end by theta."""
		left = self.get_left_vector()
		right = self.get_right_vector()
		sin_theta = math.sin(theta)
		cos_theta = math.cos(theta)
		dx = right.x - left.x
		dy = right.y - left.y
		x = cos_theta * dx - sin_theta * dy + left.x
		y = sin_theta * dx + cos_theta * dy + left.y
		right.set(x, y)
		return self

	def shorten_from(self, by):
		step = Vector2.subtract_vectors(self.end, self.start).normalize().multiply_scalar(by)
		self.start.add(step)
		return self

	def shorten_to(self, by):
		step = Vector2.subtract_vectors(self.start, self.end).normalize().multiply_scalar(by)
		self.end.add(step)
		return self

	def shorten_right(self, by):
		if self._start_is_left():
			self.shorten_to(by)
		else:
			self.shorten_from(by)
		return self

	def shorten_left(self, by):
		if self._start_is_left():
			self.shorten_from(by)
		else:
			self.shorten_to(by)
		return self

	def shorten(self, by):
		"""Shorten symmetrically, by/2 from each end."""
		step = Vector2.subtract_vectors(self.start, self.end).normalize().multiply_scalar(by / 2.0)
		self.end.add(step)
		self.start.subtract(step)
		return self
