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

"""Graph vertex: an atom with a position and spanning tree links."""

# Standard Library
import math

# local repo modules
from .vector2 import Vector2


#============================================
class Vertex(object):
	"""A vertex owned by a Graph.

	Only ids are stored for parent, children and neighbours; the vertex list
	of the owning graph resolves them.
	"""

	def __init__(self, value, x=0.0, y=0.0):
		self.id = None
		self.value = value
		self.position = Vector2(x, y)
		self.previous_position = Vector2(0.0, 0.0)
		self.parent_vertex_id = None
		self.children = []
		self.spanning_tree_children = []
		self.edges = []
		self.neighbours = []
		self.positioned = False
		self.force_positioned = False
		self.angle = None

	def __repr__(self):
		return "Vertex(%s, %r)" % (self.id, self.value.element)

	def set_position(self, x, y):
		self.position.set(x, y)

	def set_position_from_vector(self, vec):
		self.position.set(vec.x, vec.y)

	def add_child(self, vertex_id):
		self.children.append(vertex_id)
		self.neighbours.append(vertex_id)

	def add_ringbond_child(self, vertex_id):
		self.children.append(vertex_id)
		self.neighbours.append(vertex_id)

	def set_parent_vertex_id(self, parent_vertex_id):
		self.parent_vertex_id = parent_vertex_id
		self.neighbours.append(parent_vertex_id)

	def is_terminal(self):
		return (self.parent_vertex_id is None and len(self.children) < 2) or len(self.children) == 0

	def get_angle(self, reference_vector=None, as_degrees=False):
		"""Angle of the vector from the reference (default: previous position) to this vertex."""
		if reference_vector is None:
			u = Vector2.subtract_vectors(self.position, self.previous_position)
		else:
			u = Vector2.subtract_vectors(self.position, reference_vector)
		if as_degrees:
			return math.degrees(u.angle())
		return u.angle()

	def get_text_direction(self, vertices):
		"""Return 'left', 'right', 'up' or 'down' for the side a label's hydrogens go to."""
		neighbours = self.get_drawn_neighbours(vertices)
		if len(vertices) == 1 or not neighbours:
			return "right"
		sin_sum = 0.0
		cos_sum = 0.0
		for neighbour_id in neighbours:
			angle = self.get_angle(vertices[neighbour_id].position)
			sin_sum += math.sin(angle)
			cos_sum += math.cos(angle)
		text_angle = math.atan2(sin_sum, cos_sum)
		if self.is_terminal():
			if round(text_angle, 2) == 1.57:
				text_angle -= 0.2
			text_angle = round(round(text_angle / math.pi) * math.pi)
		else:
			half_pi = math.pi / 2.0
			text_angle = round(round(text_angle / half_pi) * half_pi)
		if text_angle == 2:
			return "down"
		if text_angle == -2:
			return "up"
		if text_angle == 0:
			return "right"
		if text_angle in (3, -3):
			return "left"
		return "down"

	def get_neighbours(self, vertex_id=None):
		if vertex_id is None:
			return list(self.neighbours)
		return [neighbour for neighbour in self.neighbours if neighbour != vertex_id]

	def get_drawn_neighbours(self, vertices):
		return [neighbour for neighbour in self.neighbours if vertices[neighbour].value.is_drawn]

	def get_neighbour_count(self):
		return len(self.neighbours)

	def get_spanning_tree_neighbours(self, vertex_id=None):
		neighbours = [child for child in self.spanning_tree_children if child != vertex_id]
		if self.parent_vertex_id is not None and self.parent_vertex_id != vertex_id:
			neighbours.append(self.parent_vertex_id)
		return neighbours

	def get_next_in_ring(self, vertices, ring_id, previous_vertex_id):
		for neighbour in self.neighbours:
			if neighbour == previous_vertex_id:
				continue
			if ring_id in vertices[neighbour].value.rings:
				return neighbour
		return None
