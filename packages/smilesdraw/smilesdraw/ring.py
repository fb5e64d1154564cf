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

"""A ring of the smallest set of smallest rings."""

# Standard Library
import math

# local repo modules
from .ring_connection import RingConnection
from .vector2 import Vector2


#============================================
class Ring(object):
	"""Ring membership, placement state and classification flags.

	Attributes:
		members: vertex ids of the ring.
		neighbours: ids of rings sharing at least one vertex with this one.
		center: center of the placed polygon.
		central_angle: 2*pi/n once the ring has been placed.
		rings: clones of the rings merged into a bridged macro-ring.
	"""

	def __init__(self, members):
		self.id = None
		self.members = list(members)
		self.edges = []
		self.insiders = []
		self.neighbours = []
		self.positioned = False
		self.center = Vector2(0.0, 0.0)
		self.rings = []
		self.is_bridged = False
		self.is_part_of_bridged = False
		self.is_spiro = False
		self.is_fused = False
		self.central_angle = 0.0
		self.can_flip = True

	def __repr__(self):
		return "Ring(%s, %s)" % (self.id, self.members)

	def clone(self):
		clone = Ring(self.members)
		clone.id = self.id
		clone.insiders = list(self.insiders)
		clone.neighbours = list(self.neighbours)
		clone.positioned = self.positioned
		clone.center = self.center.clone()
		clone.rings = list(self.rings)
		clone.is_bridged = self.is_bridged
		clone.is_part_of_bridged = self.is_part_of_bridged
		clone.is_spiro = self.is_spiro
		clone.is_fused = self.is_fused
		clone.central_angle = self.central_angle
		clone.can_flip = self.can_flip
		return clone

	def get_size(self):
		return len(self.members)

	def get_polygon(self, vertices):
		return [vertices[member].position for member in self.members]

	def get_angle(self):
		"""Interior angle of the regular polygon."""
		return math.pi - self.central_angle

	def each_member(self, vertices, callback, start_vertex_id=None, previous_vertex_id=None):
		"""Walk around the ring from start_vertex_id, calling callback on each member id.

		The walk follows neighbours that carry this ring id and stops when it
		gets back to the start or runs out of ring neighbours.
		"""
		if start_vertex_id is None:
			start_vertex_id = self.members[0]
		current = start_vertex_id
		# guard against walks that never return to the start
		max_steps = 0
		while current is not None and max_steps < 100:
			previous = current
			callback(previous)
			current = vertices[current].get_next_in_ring(vertices, self.id, previous_vertex_id)
			previous_vertex_id = previous
			if current == start_vertex_id:
				current = None
			max_steps += 1

	def get_ordered_neighbours(self, ring_connections):
		"""Neighbouring ring ids, the ones sharing the most vertices first."""
		ordered = []
		for neighbour_id in self.neighbours:
			shared = RingConnection.get_vertices(ring_connections, self.id, neighbour_id)
			ordered.append((len(shared), neighbour_id))
		ordered.sort(key=lambda item: item[0], reverse=True)
		return [{"n": n, "neighbour": neighbour_id} for n, neighbour_id in ordered]

	def is_benzene_like(self, vertices):
		double_bonds = self.get_double_bond_count(vertices)
		length = len(self.members)
		return (double_bonds == 3 and length == 6) or (double_bonds == 2 and length == 5)

	def get_double_bond_count(self, vertices):
		count = 0
		for member in self.members:
			atom = vertices[member].value
			if atom.bond_type == "=" or atom.branch_bond == "=":
				count += 1
		return count

	def contains(self, vertex_id):
		return vertex_id in self.members
