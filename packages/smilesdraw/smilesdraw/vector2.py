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

"""Mutable 2D vector used for every position in a layout.

In-place operations return the vector itself so calls can be chained,
e.g. ``v.invert().normalize().multiply_scalar(30).add(origin)``.
"""

# Standard Library
import math


#============================================
class Vector2(object):

	__slots__ = ("x", "y")

	def __init__(self, x=0.0, y=0.0):
		self.x = x
		self.y = y

	def __repr__(self):
		return "Vector2(%r, %r)" % (self.x, self.y)

	def __iter__(self):
		yield self.x
		yield self.y

	def clone(self):
		return Vector2(self.x, self.y)

	def as_tuple(self):
		return (self.x, self.y)

	def set(self, x, y):
		self.x = x
		self.y = y
		return self

	def add(self, vec):
		self.x += vec.x
		self.y += vec.y
		return self

	def subtract(self, vec):
		self.x -= vec.x
		self.y -= vec.y
		return self

	def divide(self, scalar):
		self.x /= scalar
		self.y /= scalar
		return self

	def multiply(self, vec):
		self.x *= vec.x
		self.y *= vec.y
		return self

	def multiply_scalar(self, scalar):
		self.x *= scalar
		self.y *= scalar
		return self

	def invert(self):
		self.x = -self.x
		self.y = -self.y
		return self

	def angle(self):
		"""Angle of the vector against the positive x axis, in radians."""
		return math.atan2(self.y, self.x)

	def distance(self, vec):
		return math.sqrt((vec.x - self.x) ** 2 + (vec.y - self.y) ** 2)

	def distance_sq(self, vec):
		return (vec.x - self.x) ** 2 + (vec.y - self.y) ** 2

	def length(self):
		return math.sqrt(self.x * self.x + self.y * self.y)

	def length_sq(self):
		return self.x * self.x + self.y * self.y

	def normalize(self):
		length = self.length()
		if length:
			self.divide(length)
		return self

	def normalized(self):
		return self.clone().normalize()

	def clockwise(self, vec):
		"""Return -1 if vec lies clockwise of this vector, 1 if counter-clockwise, 0 if collinear."""
		a = self.y * vec.x
		b = self.x * vec.y
		if a > b:
			return -1
		if a == b:
			return 0
		return 1

	def relative_clockwise(self, center, vec):
		a = (self.y - center.y) * (vec.x - center.x)
		b = (self.x - center.x) * (vec.y - center.y)
		if a > b:
			return -1
		if a == b:
			return 0
		return 1

	def rotate(self, angle):
		cos_angle = math.cos(angle)
		sin_angle = math.sin(angle)
		x = self.x * cos_angle - self.y * sin_angle
		y = self.x * sin_angle + self.y * cos_angle
		self.x = x
		self.y = y
		return self

	def rotate_around(self, angle, vec):
		s = math.sin(angle)
		c = math.cos(angle)
		dx = self.x - vec.x
		dy = self.y - vec.y
		self.x = dx * c - dy * s + vec.x
		self.y = dx * s + dy * c + vec.y
		return self

	def rotate_to(self, vec, center, offset_angle=0.0):
		"""Rotate around center so this vector points at vec."""
		self.x += 0.001
		self.y -= 0.001
		a = Vector2.subtract_vectors(self, center)
		b = Vector2.subtract_vectors(vec, center)
		angle = Vector2.angle_between(b, a)
		self.rotate_around(angle + offset_angle, center)
		return self

	def rotate_away_from(self, vec, center, angle):
		self.rotate_around(angle, center)
		dist_a = self.distance_sq(vec)
		self.rotate_around(-2.0 * angle, center)
		dist_b = self.distance_sq(vec)
		if dist_b < dist_a:
			self.rotate_around(2.0 * angle, center)
		return self

	def get_rotate_away_from_angle(self, vec, center, angle):
		"""Return +angle or -angle, whichever moves this vector farther from vec.

		The rotation is around center; the vector itself is not modified.
		"""
		tmp = self.clone()
		tmp.rotate_around(angle, center)
		dist_a = tmp.distance_sq(vec)
		tmp.rotate_around(-2.0 * angle, center)
		dist_b = tmp.distance_sq(vec)
		if dist_b < dist_a:
			return angle
		return -angle

	def get_rotate_toward_angle(self, vec, center, angle):
		tmp = self.clone()
		tmp.rotate_around(angle, center)
		dist_a = tmp.distance_sq(vec)
		tmp.rotate_around(-2.0 * angle, center)
		dist_b = tmp.distance_sq(vec)
		if dist_b > dist_a:
			return angle
		return -angle

	def which_side(self, vec_a, vec_b):
		"""Sign of the cross product telling on which side of line a->b this point is."""
		return (self.x - vec_a.x) * (vec_b.y - vec_a.y) - (self.y - vec_a.y) * (vec_b.x - vec_a.x)

	def same_side_as(self, vec_a, vec_b, vec_c):
		d = self.which_side(vec_a, vec_b)
		e = vec_c.which_side(vec_a, vec_b)
		return (d < 0 and e < 0) or (d == 0 and e == 0) or (d > 0 and e > 0)

	def is_nan(self):
		return math.isnan(self.x) or math.isnan(self.y)

	#============================================
	@staticmethod
	def add_vectors(vec_a, vec_b):
		return Vector2(vec_a.x + vec_b.x, vec_a.y + vec_b.y)

	@staticmethod
	def subtract_vectors(vec_a, vec_b):
		return Vector2(vec_a.x - vec_b.x, vec_a.y - vec_b.y)

	@staticmethod
	def scaled(vec, scalar):
		return Vector2(vec.x * scalar, vec.y * scalar)

	@staticmethod
	def midpoint(vec_a, vec_b):
		return Vector2((vec_a.x + vec_b.x) / 2.0, (vec_a.y + vec_b.y) / 2.0)

	@staticmethod
	def normals(vec_a, vec_b):
		"""Return the two (unnormalized) normals of the line a->b."""
		delta = Vector2.subtract_vectors(vec_b, vec_a)
		return [Vector2(-delta.y, delta.x), Vector2(delta.y, -delta.x)]

	@staticmethod
	def units(vec_a, vec_b):
		delta = Vector2.subtract_vectors(vec_b, vec_a)
		return [Vector2(-delta.y, delta.x).normalize(), Vector2(delta.y, -delta.x).normalize()]

	@staticmethod
	def dot(vec_a, vec_b):
		return vec_a.x * vec_b.x + vec_a.y * vec_b.y

	@staticmethod
	def angle_between(vec_a, vec_b):
		"""Unsigned angle between two vectors; NaN when either has zero length."""
		denominator = vec_a.length() * vec_b.length()
		if denominator == 0:
			return float("nan")
		cosine = Vector2.dot(vec_a, vec_b) / denominator
		cosine = max(-1.0, min(1.0, cosine))
		return math.acos(cosine)

	@staticmethod
	def three_point_angle(vec_a, vec_b, vec_c):
		"""Angle at vec_b formed by vec_a and vec_c."""
		ab = Vector2.subtract_vectors(vec_b, vec_a)
		bc = Vector2.subtract_vectors(vec_c, vec_b)
		denominator = ab.length() * bc.length()
		if denominator == 0:
			return float("nan")
		cosine = max(-1.0, min(1.0, Vector2.dot(ab, bc) / denominator))
		return math.acos(cosine)

	@staticmethod
	def average_direction(vecs):
		avg = Vector2(0.0, 0.0)
		for vec in vecs:
			avg.add(vec)
		return avg.normalize()
