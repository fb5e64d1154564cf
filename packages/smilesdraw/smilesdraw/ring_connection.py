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

"""Relation between two rings that share vertices."""


#============================================
class RingConnection(object):
	"""Two rings and the vertex ids they have in common."""

	def __init__(self, first_ring, second_ring):
		self.id = None
		self.first_ring_id = first_ring.id
		self.second_ring_id = second_ring.id
		second_members = set(second_ring.members)
		self.vertices = {member for member in first_ring.members if member in second_members}

	def __repr__(self):
		return "RingConnection(%s, %s, %s)" % (self.first_ring_id, self.second_ring_id, sorted(self.vertices))

	def clone(self):
		clone = RingConnection.__new__(RingConnection)
		clone.id = self.id
		clone.first_ring_id = self.first_ring_id
		clone.second_ring_id = self.second_ring_id
		clone.vertices = set(self.vertices)
		return clone

	def add_vertex(self, vertex_id):
		self.vertices.add(vertex_id)

	def update_other(self, ring_id, other_ring_id):
		"""Replace the ring id that is not other_ring_id with ring_id."""
		if self.first_ring_id == other_ring_id:
			self.second_ring_id = ring_id
		else:
			self.first_ring_id = ring_id

	def contains_ring(self, ring_id):
		return self.first_ring_id == ring_id or self.second_ring_id == ring_id

	def is_bridge(self, vertices):
		"""True when the shared part is more than an edge or touches a third ring."""
		if len(self.vertices) > 2:
			return True
		for vertex_id in self.vertices:
			if len(vertices[vertex_id].value.rings) > 2:
				return True
		return False

	def shares_edge(self, graph):
		"""True when exactly two bonded vertices are shared."""
		if len(self.vertices) != 2:
			return False
		vertex_a, vertex_b = sorted(self.vertices)
		return graph.has_edge(vertex_a, vertex_b)

	#============================================
	@staticmethod
	def _find(ring_connections, first_ring_id, second_ring_id):
		for ring_connection in ring_connections:
			if ((ring_connection.first_ring_id == first_ring_id and ring_connection.second_ring_id == second_ring_id)
					or (ring_connection.first_ring_id == second_ring_id and ring_connection.second_ring_id == first_ring_id)):
				return ring_connection
		return None

	@staticmethod
	def is_bridge_static(ring_connections, vertices, first_ring_id, second_ring_id):
		ring_connection = RingConnection._find(ring_connections, first_ring_id, second_ring_id)
		if ring_connection is None:
			return False
		return ring_connection.is_bridge(vertices)

	@staticmethod
	def get_neighbours(ring_connections, ring_id):
		neighbours = []
		for ring_connection in ring_connections:
			if ring_connection.first_ring_id == ring_id:
				neighbours.append(ring_connection.second_ring_id)
			elif ring_connection.second_ring_id == ring_id:
				neighbours.append(ring_connection.first_ring_id)
		return neighbours

	@staticmethod
	def get_vertices(ring_connections, first_ring_id, second_ring_id):
		ring_connection = RingConnection._find(ring_connections, first_ring_id, second_ring_id)
		if ring_connection is None:
			return []
		return sorted(ring_connection.vertices)
