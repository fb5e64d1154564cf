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

"""2D layout of a molecular graph.

Layout.init() builds the graph, closes ring bonds, perceives rings and
merges bridged ring systems; Layout.process() places every vertex, restores
the original ring information, resolves overlaps by subtree rotation and
pairwise push-apart, annotates stereo wedges, marks compact ring carbons
and finally rotates the drawing to a canonical orientation.
"""

# Standard Library
import collections
import logging
import math

# local repo modules
from . import geometry
from . import kamada_kawai
from . import sssr
from .atom import Atom
from .atom import COMPACT_GLYPH
from .edge import AROMATIC_BOND
from .edge import Edge
from .edge import WEDGE_DOWN
from .edge import WEDGE_UP
from .graph import Graph
from .graph import implicit_bond_type
from .options import Options
from .ring import Ring
from .ring_connection import RingConnection
from .vector2 import Vector2
from .vertex import Vertex


logger = logging.getLogger(__name__)

# average subtree score above which the first resolution pass rotates
PRIMARY_OVERLAP_THRESHOLD = 0.1
ROTATION_ANGLE = math.radians(120)
# bound on the push passes of the secondary resolution
SECONDARY_OVERLAP_PASSES = 500
# fraction of the bond length a pushed pair may stay short of it
SECONDARY_OVERLAP_TOLERANCE = 1e-3
# 60 degrees, the default zig-zag angle of chains
CHAIN_ANGLE = 1.0472

OverlapScore = collections.namedtuple("OverlapScore", ["total", "vertex_scores", "scores"])


#============================================
class Layout(object):
	"""Owns the graph, rings and ring connections of one drawing.

	Attributes:
		graph: the Graph, populated by init().
		rings: Ring objects; during positioning bridged systems are replaced
			by one merged ring, process() puts the original rings back.
		ring_connections: RingConnection objects between the rings.
		total_overlap_score: overlap score after resolve_overlaps().
	"""

	def __init__(self, options=None):
		if options is None:
			options = Options()
		elif isinstance(options, dict):
			options = Options.from_dict(options)
		self.options = options
		self.graph = None
		self.rings = []
		self.ring_connections = []
		self.original_rings = []
		self.original_ring_connections = []
		self.bridged_ring = False
		self.total_overlap_score = 0.0
		self.implicit_hydrogens = []
		self._original_ring_neighbours = {}
		self._ring_id_counter = 0
		self._ring_connection_id_counter = 0
		self._double_bond_config_count = 0
		self._double_bond_config = None

	#============================================
	def init(self, parse_tree):
		"""Build the graph of parse_tree and its ring information; no positions yet."""
		self._ring_id_counter = 0
		self._ring_connection_id_counter = 0
		self.graph = Graph(parse_tree, self.options.isomeric)
		self.rings = []
		self.ring_connections = []
		self.original_rings = []
		self.original_ring_connections = []
		self.bridged_ring = False
		self.implicit_hydrogens = []
		self._double_bond_config_count = 0
		self._double_bond_config = None
		self.total_overlap_score = 0.0
		self.init_rings()
		self.init_hydrogens()
		return self

	def process(self):
		"""Run the positioning and overlap resolution on an initialized layout."""
		self.position()
		self.restore_ring_information()
		self.resolve_overlaps()
		if self.options.isomeric:
			self.annotate_stereochemistry()
		if self.options.compact_drawing and self.options.atom_visualization == "default":
			self.init_pseudo_elements()
		self.place_implicit_hydrogens()
		self.rotate_drawing()

		logger.debug("Layout done, total overlap score %.4f", self.get_overlap_score().total)
		if self.options.debug:
			logger.debug("Ring info:\n%s", self.print_ring_info())
		return self

	def draw(self, parse_tree):
		"""init() followed by process()."""
		self.init(parse_tree)
		return self.process()

	#============================================
	def init_rings(self):
		"""Close ring bonds, perceive the SSSR and build rings and ring connections."""
		graph = self.graph
		open_bonds = {}
		for vertex in graph.vertices:
			for ringbond in vertex.value.ringbonds:
				ring_id = ringbond["id"]
				if ring_id not in open_bonds:
					open_bonds[ring_id] = (vertex.id, ringbond["bond_type"])
					continue
				# ring bond ids may be reused, an id is free again once closed
				source_id, source_bond = open_bonds.pop(ring_id)
				self._close_ring_bond(source_id, source_bond, vertex.id, ringbond["bond_type"])

		rings = sssr.get_rings(graph, self.options.experimental_sssr) or []
		for members in rings:
			ring = Ring(members)
			self.add_ring(ring)
			for member in members:
				graph.vertices[member].value.rings.append(ring.id)

		self._demote_open_aromatic_bonds()

		for i, ring in enumerate(self.rings):
			for other in self.rings[i + 1:]:
				ring_connection = RingConnection(ring, other)
				if ring_connection.vertices:
					self.add_ring_connection(ring_connection)

		for ring in self.rings:
			ring.neighbours = RingConnection.get_neighbours(self.ring_connections, ring.id)
			self._classify_ring(ring)
		for ring in self.rings:
			graph.vertices[ring.members[0]].value.add_anchored_ring(ring.id)

		self.backup_ring_information()

		while self.rings:
			ring_id = None
			for ring in self.rings:
				# merged rings carry the rings they replaced
				if self.is_part_of_bridged_ring(ring.id) and not ring.rings:
					ring_id = ring.id
			if ring_id is None:
				break
			involved_ring_ids = self.get_bridged_ring_rings(ring_id)
			self.bridged_ring = True
			self.create_bridged_ring(involved_ring_ids)
			for involved_ring_id in involved_ring_ids:
				self.remove_ring(involved_ring_id)

	def _close_ring_bond(self, source_id, source_bond, target_id, target_bond):
		graph = self.graph
		if source_id == target_id or graph.has_edge(source_id, target_id):
			return
		source = graph.vertices[source_id]
		target = graph.vertices[target_id]
		# a written bond type on either side wins over the implied one
		if source_bond and source_bond != "-":
			bond_type = source_bond
		else:
			bond_type = target_bond or source_bond
		edge = Edge(source_id, target_id, 1)
		edge.set_bond_type(implicit_bond_type(bond_type, source.value, target.value))
		edge.is_ring_closure = True
		graph.add_edge(edge)
		source.add_ringbond_child(target_id)
		target.add_ringbond_child(source_id)
		source.value.add_neighbouring_element(target.value.element)
		target.value.add_neighbouring_element(source.value.element)

	def _demote_open_aromatic_bonds(self):
		# aromatic atoms joined outside a common ring, as in c1ccccc1c1ccccc1
		for edge in self.graph.edges:
			if edge.bond_type != AROMATIC_BOND:
				continue
			source = self.graph.vertices[edge.source_id].value
			target = self.graph.vertices[edge.target_id].value
			if set(source.rings) & set(target.rings):
				continue
			self.graph.set_edge_bond_type(edge, "-")
			edge.is_part_of_aromatic_ring = False

	def _classify_ring(self, ring):
		vertices = self.graph.vertices
		shared_counts = []
		for ring_connection in self.ring_connections:
			if not ring_connection.contains_ring(ring.id):
				continue
			shared_counts.append(len(ring_connection.vertices))
			if ring_connection.is_bridge(vertices):
				ring.is_bridged = True
			if ring_connection.shares_edge(self.graph):
				ring.is_fused = True
		# exactly one vertex, shared with exactly one other ring
		ring.is_spiro = shared_counts == [1]

	#============================================
	def init_hydrogens(self):
		"""Add hidden hydrogen vertices so every non-aromatic atom reaches its valence.

		Bracket atoms keep their written hydrogen count and are skipped, as
		are aromatic atoms and atoms outside the organic subset.
		"""
		if not self.options.explicit_hydrogens:
			return
		for vertex in list(self.graph.vertices):
			atom = vertex.value
			if atom.is_part_of_aromatic_ring or atom.element == "H" or atom.bracket:
				continue
			max_bonds = atom.get_max_bonds()
			if max_bonds is None:
				continue
			n_hydrogens = int(max_bonds - atom.bond_count)
			for _ in range(n_hydrogens):
				hydrogen = Vertex(Atom("H"))
				hydrogen.value.is_drawn = False
				self.graph.add_vertex(hydrogen)
				self.graph.add_edge(Edge(vertex.id, hydrogen.id, 1))
				self.implicit_hydrogens.append((hydrogen.id, vertex.id))

	#============================================
	def add_ring(self, ring):
		ring.id = self._ring_id_counter
		self._ring_id_counter += 1
		self.rings.append(ring)
		return ring.id

	def remove_ring(self, ring_id):
		self.rings = [ring for ring in self.rings if ring.id != ring_id]
		self.ring_connections = [rc for rc in self.ring_connections if not rc.contains_ring(ring_id)]
		for ring in self.rings:
			ring.neighbours = [n for n in ring.neighbours if n != ring_id]

	def get_ring(self, ring_id):
		for ring in self.rings:
			if ring.id == ring_id:
				return ring
		return None

	def add_ring_connection(self, ring_connection):
		ring_connection.id = self._ring_connection_id_counter
		self._ring_connection_id_counter += 1
		self.ring_connections.append(ring_connection)
		return ring_connection.id

	def remove_ring_connections_between(self, ring_id_a, ring_id_b):
		self.ring_connections = [
			rc for rc in self.ring_connections
			if not (rc.contains_ring(ring_id_a) and rc.contains_ring(ring_id_b))
		]

	def get_ring_connections(self, ring_id, ring_ids):
		return [
			rc for rc in self.ring_connections
			if rc.contains_ring(ring_id) and any(
				rc.contains_ring(other) for other in ring_ids if other != ring_id)
		]

	def backup_ring_information(self):
		"""Snapshot rings, ring connections and atom ring membership before merging."""
		self.original_rings = list(self.rings)
		self._original_ring_neighbours = {ring.id: list(ring.neighbours) for ring in self.rings}
		self.original_ring_connections = [rc.clone() for rc in self.ring_connections]
		for vertex in self.graph.vertices:
			vertex.value.backup_rings()

	def restore_ring_information(self):
		"""Put the rings from before bridged merging back, keeping the placed centers."""
		for bridged in self.get_bridged_rings():
			for sub_ring in bridged.rings:
				for ring in self.original_rings:
					if ring.id == sub_ring.id:
						ring.center = sub_ring.center
		self.rings = list(self.original_rings)
		for ring in self.rings:
			ring.neighbours = list(self._original_ring_neighbours.get(ring.id, ring.neighbours))
		self.ring_connections = [rc.clone() for rc in self.original_ring_connections]
		for vertex in self.graph.vertices:
			vertex.value.restore_rings()

	#============================================
	def is_part_of_bridged_ring(self, ring_id):
		for ring_connection in self.ring_connections:
			if ring_connection.contains_ring(ring_id) and ring_connection.is_bridge(self.graph.vertices):
				return True
		return False

	def get_bridged_ring_rings(self, ring_id):
		"""Ids of all rings reachable from ring_id through bridge connections."""
		involved = []
		stack = [ring_id]
		while stack:
			current_id = stack.pop()
			if current_id in involved:
				continue
			involved.append(current_id)
			ring = self.get_ring(current_id)
			for neighbour_id in reversed(ring.neighbours):
				if neighbour_id in involved or neighbour_id == current_id:
					continue
				if RingConnection.is_bridge_static(self.ring_connections, self.graph.vertices,
						current_id, neighbour_id):
					stack.append(neighbour_id)
		return involved

	def edge_ring_count(self, edge_id):
		edge = self.graph.edges[edge_id]
		a = self.graph.vertices[edge.source_id]
		b = self.graph.vertices[edge.target_id]
		return min(len(a.value.rings), len(b.value.rings))

	def create_bridged_ring(self, ring_ids):
		"""Merge the rings ring_ids into one ring placed as a whole.

		Members that belong to one of the merged rings only are plain
		members. The others are bridge nodes when they sit on the outline of
		the system (one of their bonds is in a single ring) and bridges
		otherwise.
		"""
		vertices = self.graph.vertices
		vertex_ids = []
		neighbours = []
		for ring_id in ring_ids:
			ring = self.get_ring(ring_id)
			ring.is_part_of_bridged = True
			for member in ring.members:
				if member not in vertex_ids:
					vertex_ids.append(member)
			for neighbour_id in ring.neighbours:
				if neighbour_id not in ring_ids and neighbour_id not in neighbours:
					neighbours.append(neighbour_id)

		members = []
		leftovers = []
		for vertex_id in vertex_ids:
			atom = vertices[vertex_id].value
			shared = [ring_id for ring_id in atom.rings if ring_id in ring_ids]
			if len(atom.rings) == 1 or len(shared) == 1:
				members.append(vertex_id)
			else:
				leftovers.append(vertex_id)
		for vertex_id in leftovers:
			vertex = vertices[vertex_id]
			on_ring = any(self.edge_ring_count(edge_id) == 1 for edge_id in vertex.edges)
			if on_ring:
				vertex.value.is_bridge_node = True
			else:
				vertex.value.is_bridge = True
			members.append(vertex_id)

		bridged = Ring(members)
		bridged.is_bridged = True
		self.add_ring(bridged)
		bridged.neighbours = list(neighbours)
		for ring_id in ring_ids:
			bridged.rings.append(self.get_ring(ring_id).clone())
		for vertex_id in members:
			atom = vertices[vertex_id].value
			atom.bridged_ring = bridged.id
			atom.rings = [ring_id for ring_id in atom.rings if ring_id not in ring_ids]
			atom.rings.append(bridged.id)

		for i, ring_id in enumerate(ring_ids):
			for other_id in ring_ids[i + 1:]:
				self.remove_ring_connections_between(ring_id, other_id)
		for neighbour_id in neighbours:
			for ring_connection in self.get_ring_connections(neighbour_id, ring_ids):
				ring_connection.update_other(bridged.id, neighbour_id)
			self.get_ring(neighbour_id).neighbours.append(bridged.id)

		logger.debug("Merged rings %s into bridged ring %d (%d members)",
			ring_ids, bridged.id, len(members))
		return bridged

	#============================================
	def position(self):
		"""Place every drawn vertex, one connected component after the other."""
		placed = []
		for component in self.graph.get_connected_components():
			if len(component) == 1 and not self.graph.vertices[component[0]].value.is_drawn:
				continue
			start_vertex = self._get_start_vertex(component)
			self.create_next_bond(start_vertex, None, 0.0)
			if placed:
				self._move_beside(component, placed)
			placed.extend(component)

	def _get_start_vertex(self, component):
		vertices = self.graph.vertices
		in_component = set(component)
		for vertex_id in component:
			if vertices[vertex_id].value.bridged_ring is not None:
				return vertices[vertex_id]
		component_rings = [ring for ring in self.rings if ring.members[0] in in_component]
		for ring in component_rings:
			if ring.is_bridged:
				return vertices[ring.members[0]]
		if component_rings:
			return vertices[component_rings[0].members[0]]
		return vertices[min(component)]

	def _move_beside(self, component, placed):
		# shift a freshly placed molecule to the right of the ones before it
		vertices = self.graph.vertices
		previous_max_x = max(vertices[i].position.x for i in placed)
		previous_ys = [vertices[i].position.y for i in placed]
		xs = [vertices[i].position.x for i in component]
		ys = [vertices[i].position.y for i in component]
		offset = Vector2(
			previous_max_x + 2.0 * self.options.bond_length - min(xs),
			(min(previous_ys) + max(previous_ys)) / 2.0 - (min(ys) + max(ys)) / 2.0,
		)
		in_component = set(component)
		for vertex_id in component:
			vertices[vertex_id].position.add(offset)
		for ring in self.rings:
			if ring.members[0] in in_component:
				ring.center.add(offset)
				for sub_ring in ring.rings:
					sub_ring.center.add(offset)

	def get_current_center_of_mass(self):
		total = Vector2(0.0, 0.0)
		count = 0
		for vertex in self.graph.vertices:
			if vertex.positioned:
				total.add(vertex.position)
				count += 1
		if count == 0:
			return total
		return total.divide(count)

	def get_last_vertex_with_angle(self, vertex_id):
		vertex = None
		angle = 0
		while not angle and vertex_id is not None:
			vertex = self.graph.vertices[vertex_id]
			angle = vertex.angle
			vertex_id = vertex.parent_vertex_id
		return vertex

	def set_ring_center(self, ring):
		total = Vector2(0.0, 0.0)
		for member in ring.members:
			total.add(self.graph.vertices[member].position)
		ring.center = total.divide(len(ring.members))

	#============================================
	def create_ring(self, ring, center=None, start_vertex=None, previous_vertex=None):
		"""Place ring as a regular polygon around center, then its neighbours.

		Neighbouring rings are placed in order of the number of shared
		vertices: fused rings across the shared edge, spiro rings across the
		shared vertex. Substituents of the ring members follow.
		"""
		if ring.positioned:
			return
		if center is None:
			center = Vector2(0.0, 0.0)
		vertices = self.graph.vertices
		ordered_neighbours = ring.get_ordered_neighbours(self.ring_connections)
		if start_vertex is not None:
			starting_angle = Vector2.subtract_vectors(start_vertex.position, center).angle()
		else:
			starting_angle = 0.0
		radius = geometry.poly_circumradius(self.options.bond_length, ring.get_size())
		angle_step = geometry.central_angle(ring.get_size())
		ring.central_angle = angle_step

		start_vertex_id = start_vertex.id if start_vertex is not None else None
		if start_vertex_id not in ring.members:
			if start_vertex is not None:
				start_vertex.positioned = False
			start_vertex_id = ring.members[0]

		if ring.is_bridged:
			kamada_kawai.kk_layout(
				self.graph, list(ring.members), center, self.options.bond_length,
				threshold=self.options.kk_threshold,
				inner_threshold=self.options.kk_inner_threshold,
				max_iteration=self.options.kk_max_iteration,
				max_inner_iteration=self.options.kk_max_inner_iteration,
				max_energy=self.options.kk_max_energy,
			)
			ring.positioned = True
			self.set_ring_center(ring)
			center = ring.center
			for sub_ring in ring.rings:
				self.set_ring_center(sub_ring)
		else:
			state = {"angle": starting_angle}

			def place(vertex_id):
				vertex = vertices[vertex_id]
				if not vertex.positioned:
					vertex.set_position(center.x + math.cos(state["angle"]) * radius,
						center.y + math.sin(state["angle"]) * radius)
				state["angle"] += angle_step
				vertex.angle = state["angle"]
				vertex.positioned = True

			previous_vertex_id = previous_vertex.id if previous_vertex is not None else None
			ring.each_member(vertices, place, start_vertex_id, previous_vertex_id)

		ring.positioned = True
		ring.center = center

		for entry in ordered_neighbours:
			neighbour = self.get_ring(entry["neighbour"])
			if neighbour is None or neighbour.positioned:
				continue
			shared = RingConnection.get_vertices(self.ring_connections, ring.id, neighbour.id)
			if len(shared) == 2:
				self._create_fused_ring(ring, neighbour, shared, center)
			elif len(shared) == 1:
				vertex_a = vertices[shared[0]]
				next_center = Vector2.subtract_vectors(center, vertex_a.position)
				next_center.invert().normalize()
				next_center.multiply_scalar(geometry.poly_circumradius(self.options.bond_length,
					neighbour.get_size()))
				next_center.add(vertex_a.position)
				self.create_ring(neighbour, next_center, vertex_a)

		for member in ring.members:
			ring_member = vertices[member]
			for neighbour_id in list(ring_member.neighbours):
				neighbour = vertices[neighbour_id]
				if neighbour.positioned:
					continue
				neighbour.value.is_connected_to_ring = True
				self.create_next_bond(neighbour, ring_member, 0.0)

	def _create_fused_ring(self, ring, neighbour, shared, center):
		vertex_a = self.graph.vertices[shared[0]]
		vertex_b = self.graph.vertices[shared[1]]
		midpoint = Vector2.midpoint(vertex_a.position, vertex_b.position)
		normals = Vector2.normals(vertex_a.position, vertex_b.position)
		radius = geometry.poly_circumradius(self.options.bond_length, neighbour.get_size())
		apothem = geometry.apothem(radius, neighbour.get_size())
		for normal in normals:
			normal.normalize().multiply_scalar(apothem).add(midpoint)
		# the new center lies on the far side of the shared edge
		next_center = normals[0]
		if (Vector2.subtract_vectors(center, normals[1]).length_sq()
				> Vector2.subtract_vectors(center, normals[0]).length_sq()):
			next_center = normals[1]
		pos_a = Vector2.subtract_vectors(vertex_a.position, next_center)
		pos_b = Vector2.subtract_vectors(vertex_b.position, next_center)
		if pos_a.clockwise(pos_b) == -1:
			self.create_ring(neighbour, next_center, vertex_a, vertex_b)
		else:
			self.create_ring(neighbour, next_center, vertex_b, vertex_a)

	#============================================
	def create_next_bond(self, vertex, previous_vertex=None, angle=0.0, origin_shortest=False,
			skip_positioning=False):
		"""Place vertex relative to previous_vertex and continue into its neighbours."""
		if vertex.positioned and not skip_positioning:
			return
		graph = self.graph
		double_bond_config_set = False

		if previous_vertex is not None:
			edge = graph.get_edge(vertex.id, previous_vertex.id)
			if edge.bond_type in ("/", "\\"):
				self._double_bond_config_count += 1
				if self._double_bond_config_count % 2 == 1 and self._double_bond_config is None:
					self._double_bond_config = edge.bond_type
					double_bond_config_set = True
					# a branch bond right after the first atom reads the other way
					if previous_vertex.parent_vertex_id is None and vertex.value.branch_bond:
						self._double_bond_config = "\\" if self._double_bond_config == "/" else "/"

		if not skip_positioning:
			self._place_vertex(vertex, previous_vertex, angle)

		if vertex.value.bridged_ring is not None:
			next_ring = self.get_ring(vertex.value.bridged_ring)
			if next_ring is not None and not next_ring.positioned:
				self.create_ring(next_ring, self._next_ring_center(vertex, next_ring), vertex)
		elif vertex.value.rings:
			next_ring = self.get_ring(vertex.value.rings[0])
			if next_ring is not None and not next_ring.positioned:
				self.create_ring(next_ring, self._next_ring_center(vertex, next_ring), vertex)
		else:
			self._create_chain_bonds(vertex, previous_vertex, origin_shortest, double_bond_config_set)

	def _place_vertex(self, vertex, previous_vertex, angle):
		bond_length = self.options.bond_length
		if previous_vertex is None:
			# the first vertex gets a dummy predecessor 60 degrees below the x axis
			dummy = Vector2(bond_length, 0.0)
			dummy.rotate(geometry.to_rad(-60))
			vertex.previous_position = dummy
			vertex.set_position(bond_length, 0.0)
			vertex.angle = geometry.to_rad(-60)
			# bridged ring members are placed by the spring layout
			if vertex.value.bridged_ring is None:
				vertex.positioned = True
			return

		if previous_vertex.value.rings:
			joined_vertex = None
			if previous_vertex.value.bridged_ring is None and len(previous_vertex.value.rings) > 1:
				for neighbour_id in previous_vertex.neighbours:
					neighbour = self.graph.vertices[neighbour_id]
					if set(previous_vertex.value.rings).issubset(neighbour.value.rings):
						joined_vertex = neighbour
						break
			if joined_vertex is None:
				pos = Vector2(0.0, 0.0)
				for neighbour_id in previous_vertex.neighbours:
					neighbour = self.graph.vertices[neighbour_id]
					if neighbour.positioned and self.are_vertices_in_same_ring(neighbour, previous_vertex):
						pos.add(Vector2.subtract_vectors(neighbour.position, previous_vertex.position))
				pos.invert().normalize().multiply_scalar(bond_length).add(previous_vertex.position)
			else:
				pos = joined_vertex.position.clone().rotate_around(math.pi, previous_vertex.position)
		else:
			pos = Vector2(bond_length, 0.0)
			pos.rotate(angle)
			pos.add(previous_vertex.position)
		vertex.previous_position = previous_vertex.position.clone()
		vertex.set_position_from_vector(pos)
		vertex.positioned = True

	def _next_ring_center(self, vertex, ring):
		next_center = Vector2.subtract_vectors(vertex.previous_position, vertex.position)
		next_center.invert().normalize()
		next_center.multiply_scalar(geometry.poly_circumradius(self.options.bond_length, ring.get_size()))
		return next_center.add(vertex.position)

	def _create_chain_bonds(self, vertex, previous_vertex, origin_shortest, double_bond_config_set):
		graph = self.graph
		vertices = graph.vertices
		neighbours = vertex.get_drawn_neighbours(vertices)
		if previous_vertex is not None:
			neighbours = [n for n in neighbours if n != previous_vertex.id]
		previous_angle = vertex.get_angle()

		if len(neighbours) == 1:
			next_vertex = vertices[neighbours[0]]
			triple = vertex.value.bond_type == "#" or (
				previous_vertex is not None and previous_vertex.value.bond_type == "#")
			cumulated = (vertex.value.bond_type == "=" and previous_vertex is not None
				and not previous_vertex.value.rings and previous_vertex.value.bond_type == "="
				and vertex.value.branch_bond != "-")
			if triple or cumulated:
				# linear: sp carbons and allenes
				vertex.value.draw_explicit = False
				if previous_vertex is not None:
					graph.get_edge(vertex.id, previous_vertex.id).center = True
				graph.get_edge(vertex.id, next_vertex.id).center = True
				if triple:
					next_vertex.angle = 0.0
				self.create_next_bond(next_vertex, vertex, previous_angle + (next_vertex.angle or 0.0))
			elif previous_vertex is not None and previous_vertex.value.rings:
				# leaving a ring: point away from what is already drawn
				proposed_a = geometry.to_rad(60)
				proposed_b = -proposed_a
				vector_a = Vector2(self.options.bond_length, 0.0).rotate(proposed_a).add(vertex.position)
				vector_b = Vector2(self.options.bond_length, 0.0).rotate(proposed_b).add(vertex.position)
				center_of_mass = self.get_current_center_of_mass()
				if vector_a.distance_sq(center_of_mass) < vector_b.distance_sq(center_of_mass):
					next_vertex.angle = proposed_b
				else:
					next_vertex.angle = proposed_a
				self.create_next_bond(next_vertex, vertex, previous_angle + next_vertex.angle)
			else:
				a = vertex.angle
				if previous_vertex is not None and len(previous_vertex.neighbours) > 3:
					if a and a > 0:
						a = min(CHAIN_ANGLE, a)
					elif a and a < 0:
						a = max(-CHAIN_ANGLE, a)
					else:
						a = CHAIN_ANGLE
				elif not a:
					last = self.get_last_vertex_with_angle(vertex.id)
					a = last.angle if last is not None else None
					if not a:
						a = CHAIN_ANGLE
				if previous_vertex is not None and not double_bond_config_set:
					bond_type = graph.get_edge(vertex.id, next_vertex.id).bond_type
					if bond_type == "/":
						if self._double_bond_config == "\\":
							a = -a
						self._double_bond_config = None
					elif bond_type == "\\":
						if self._double_bond_config == "/":
							a = -a
						self._double_bond_config = None
				next_vertex.angle = a if origin_shortest else -a
				self.create_next_bond(next_vertex, vertex, previous_angle + next_vertex.angle)

		elif len(neighbours) == 2:
			a = vertex.angle or CHAIN_ANGLE
			depth_a = graph.get_tree_depth(neighbours[0], vertex.id)
			depth_b = graph.get_tree_depth(neighbours[1], vertex.id)
			left = vertices[neighbours[0]]
			right = vertices[neighbours[1]]
			left.value.subtree_depth = depth_a
			right.value.subtree_depth = depth_b
			previous_id = previous_vertex.id if previous_vertex is not None else None
			depth_c = graph.get_tree_depth(previous_id, vertex.id)
			if previous_vertex is not None:
				previous_vertex.value.subtree_depth = depth_c

			cis, trans = 0, 1
			# carbon chains go cis
			if right.value.element == "C" and left.value.element != "C" and depth_b > 1 and depth_a < 5:
				cis, trans = 1, 0
			elif right.value.element != "C" and left.value.element == "C" and depth_a > 1 and depth_b < 5:
				cis, trans = 0, 1
			elif depth_b > depth_a:
				cis, trans = 1, 0
			cis_vertex = vertices[neighbours[cis]]
			trans_vertex = vertices[neighbours[trans]]
			origin_is_shortest = depth_c < depth_a and depth_c < depth_b

			trans_vertex.angle = a
			cis_vertex.angle = -a
			if self._double_bond_config in ("/", "\\") and trans_vertex.value.branch_bond == self._double_bond_config:
				trans_vertex.angle = -a
				cis_vertex.angle = a
			self.create_next_bond(trans_vertex, vertex, previous_angle + trans_vertex.angle, origin_is_shortest)
			self.create_next_bond(cis_vertex, vertex, previous_angle + cis_vertex.angle, origin_is_shortest)

		elif len(neighbours) == 3:
			depths = [graph.get_tree_depth(n, vertex.id) for n in neighbours]
			for neighbour_id, depth in zip(neighbours, depths):
				vertices[neighbour_id].value.subtree_depth = depth
			order = [0, 1, 2]
			# the longest subtree goes straight on
			if depths[1] > depths[0] and depths[1] > depths[2]:
				order = [1, 0, 2]
			elif depths[2] > depths[0] and depths[2] > depths[1]:
				order = [2, 0, 1]
			straight = vertices[neighbours[order[0]]]
			left = vertices[neighbours[order[1]]]
			right = vertices[neighbours[order[2]]]
			cross = (previous_vertex is not None and not previous_vertex.value.rings
				and not straight.value.rings and not left.value.rings and not right.value.rings
				and depths[order[1]] == 1 and depths[order[2]] == 1 and depths[order[0]] > 1)
			if cross:
				vertex_angle = vertex.angle or 0.0
				straight.angle = -vertex_angle
				if vertex_angle >= 0:
					left.angle = geometry.to_rad(30)
					right.angle = geometry.to_rad(90)
				else:
					left.angle = -geometry.to_rad(30)
					right.angle = -geometry.to_rad(90)
			else:
				straight.angle = 0.0
				left.angle = geometry.to_rad(90)
				right.angle = -geometry.to_rad(90)
			for next_vertex in (straight, left, right):
				self.create_next_bond(next_vertex, vertex, previous_angle + next_vertex.angle)

		elif len(neighbours) == 4:
			depths = [graph.get_tree_depth(n, vertex.id) for n in neighbours]
			order = [0, 1, 2, 3]
			for index in (1, 2, 3):
				if all(depths[index] > depths[other] for other in range(4) if other != index):
					order = [index] + [other for other in range(4) if other != index]
					break
			angles = (-geometry.to_rad(36), geometry.to_rad(36), -geometry.to_rad(108), geometry.to_rad(108))
			for index, next_angle in zip(order, angles):
				next_vertex = vertices[neighbours[index]]
				next_vertex.angle = next_angle
			for index in order:
				next_vertex = vertices[neighbours[index]]
				self.create_next_bond(next_vertex, vertex, previous_angle + next_vertex.angle)

	#============================================
	def get_overlap_score(self):
		"""Score every drawn vertex pair closer than the bond length.

		Returns:
			OverlapScore: total, per-vertex scores and a list of the scored
			pairs as dicts with a, b, dist (squared) and score.
		"""
		vertices = self.graph.vertices
		bond_length = self.options.bond_length
		bond_length_sq = self.options.bond_length_sq
		total = 0.0
		vertex_scores = [0.0] * len(vertices)
		scores = []
		for i, vertex_a in enumerate(vertices):
			if not vertex_a.value.is_drawn:
				continue
			for j in range(i + 1, len(vertices)):
				vertex_b = vertices[j]
				if not vertex_b.value.is_drawn:
					continue
				dist = vertex_a.position.distance_sq(vertex_b.position)
				if not dist < bond_length_sq:
					continue
				in_ring_a = len(vertex_a.value.rings) > 0
				in_ring_b = len(vertex_b.value.rings) > 0
				weighting = 1.0
				if in_ring_a and in_ring_b:
					weighting = 0.1
				elif in_ring_a or in_ring_b:
					weighting = 0.2
				score = ((bond_length - math.sqrt(dist)) * weighting) ** 2
				vertex_scores[i] += score
				vertex_scores[j] += score
				total += score
				scores.append({"a": vertex_a.id, "b": vertex_b.id, "dist": dist, "score": score})
		return OverlapScore(total, vertex_scores, scores)

	def get_subtree_overlap_score(self, vertex_id_a, vertex_id_b, vertex_scores):
		"""Average score of the subtree from vertex_id_a away from vertex_id_b."""
		tree = self.graph.get_tree(vertex_id_a, vertex_id_b)
		scores = [{"id": vertex_id, "score": vertex_scores[vertex_id]} for vertex_id in tree]
		if not tree:
			return {"value": 0.0, "scores": scores}
		total = sum(entry["score"] for entry in scores)
		return {"value": total / len(tree), "scores": scores}

	def get_total_overlap_score(self):
		return self.total_overlap_score

	def is_edge_rotatable(self, edge):
		"""Single bonds between two non-terminal vertices that do not close a ring."""
		vertex_a = self.graph.vertices[edge.source_id]
		vertex_b = self.graph.vertices[edge.target_id]
		if edge.bond_type != "-":
			return False
		if vertex_a.is_terminal() or vertex_b.is_terminal():
			return False
		if vertex_a.value.rings and vertex_b.value.rings and self.are_vertices_in_same_ring(vertex_a, vertex_b):
			return False
		return True

	def resolve_primary_overlaps(self):
		"""Rotation pass with the fixed primary threshold."""
		overlap_score = self.get_overlap_score()
		self.total_overlap_score = overlap_score.total
		for _ in range(self.options.overlap_resolution_iterations):
			for edge in self.graph.edges:
				if not self.is_edge_rotatable(edge):
					continue
				if self._resolve_edge(edge, overlap_score.vertex_scores, PRIMARY_OVERLAP_THRESHOLD):
					overlap_score = self.get_overlap_score()
		return overlap_score

	def _resolve_edge(self, edge, vertex_scores, threshold):
		"""Try rotating the substituents on the shallow side of edge.

		Returns True when the subtree score exceeded threshold and a
		rotation was attempted.
		"""
		graph = self.graph
		depth_a = graph.get_tree_depth(edge.source_id, edge.target_id)
		depth_b = graph.get_tree_depth(edge.target_id, edge.source_id)
		a = edge.target_id
		b = edge.source_id
		if depth_a > depth_b:
			a = edge.source_id
			b = edge.target_id

		subtree_overlap = self.get_subtree_overlap_score(b, a, vertex_scores)
		if not subtree_overlap["value"] > threshold:
			return False
		vertex_a = graph.vertices[a]
		vertex_b = graph.vertices[b]
		neighbours_b = vertex_b.get_neighbours(a)

		if len(neighbours_b) == 1:
			rotating = [graph.vertices[neighbours_b[0]]]
		elif len(neighbours_b) == 2:
			if vertex_b.value.rings and vertex_a.value.rings:
				return False
			neighbour_a = graph.vertices[neighbours_b[0]]
			neighbour_b = graph.vertices[neighbours_b[1]]
			rings_a = neighbour_a.value.rings
			rings_b = neighbour_b.value.rings
			if len(rings_a) == 1 and len(rings_b) == 1:
				if rings_a[0] != rings_b[0]:
					return False
			elif rings_a or rings_b:
				return False
			rotating = [neighbour_a, neighbour_b]
		else:
			return False

		if vertex_a.position.is_nan() or vertex_b.position.is_nan():
			return False
		if vertex_a.position.distance_sq(vertex_b.position) == 0:
			return False
		angles = [neighbour.position.get_rotate_away_from_angle(vertex_a.position, vertex_b.position,
			ROTATION_ANGLE) for neighbour in rotating]

		snapshot = [(vertex, vertex.position.x, vertex.position.y) for vertex in graph.vertices]
		for neighbour, angle in zip(rotating, angles):
			self.rotate_subtree(neighbour.id, vertex_b.id, angle, vertex_b.position)
		new_total = self.get_overlap_score().total
		if new_total < self.total_overlap_score:
			logger.debug("Rotated subtree at %d by %s, overlap %.4f -> %.4f",
				vertex_b.id, angles, self.total_overlap_score, new_total)
			self.total_overlap_score = new_total
		else:
			for vertex, x, y in snapshot:
				vertex.position.set(x, y)
		return True

	def resolve_overlaps(self):
		"""Primary rotations, sensitivity rotations, then the secondary push.

		Running it again on a resolved layout leaves every position as is.
		"""
		overlap_score = self.resolve_primary_overlaps()
		self.total_overlap_score = overlap_score.total
		for _ in range(self.options.overlap_resolution_iterations):
			for edge in self.graph.edges:
				if not self.is_edge_rotatable(edge):
					continue
				if self._resolve_edge(edge, overlap_score.vertex_scores, self.options.overlap_sensitivity):
					overlap_score = self.get_overlap_score()
		self.resolve_secondary_overlaps(overlap_score.scores)
		self.total_overlap_score = self.get_overlap_score().total
		return self.total_overlap_score

	def resolve_secondary_overlaps(self, scores):
		"""Push too close pairs apart to the bond length until none is left.

		The first pass works on scores, later passes on a fresh overlap
		score. Pairs within SECONDARY_OVERLAP_TOLERANCE of the bond length
		count as resolved. Coincident pairs are split along the x axis.

		Returns:
			int: the number of passes that moved a vertex.
		"""
		vertices = self.graph.vertices
		bond_length = self.options.bond_length
		min_distance = bond_length * (1.0 - SECONDARY_OVERLAP_TOLERANCE)
		for passes in range(SECONDARY_OVERLAP_PASSES):
			moved = False
			for score in scores:
				vertex_a = vertices[score["a"]]
				vertex_b = vertices[score["b"]]
				dist = vertex_a.position.distance_sq(vertex_b.position)
				if dist == 0:
					logger.debug("Vertices %d and %d coincide, splitting them", vertex_a.id, vertex_b.id)
					displacement = Vector2(bond_length / 2.0, 0.0)
				else:
					distance = math.sqrt(dist)
					if distance >= min_distance:
						continue
					displacement = Vector2.subtract_vectors(vertex_a.position, vertex_b.position)
					displacement.divide(distance).multiply_scalar((bond_length - distance) / 2.0)
				vertex_a.position.add(displacement)
				vertex_b.position.subtract(displacement)
				moved = True
			if not moved:
				return passes
			scores = self.get_overlap_score().scores
		logger.debug("Secondary overlaps still open after %d passes", SECONDARY_OVERLAP_PASSES)
		return SECONDARY_OVERLAP_PASSES

	def rotate_subtree(self, vertex_id, parent_vertex_id, angle, origin):
		for subtree_vertex_id in self.graph.get_tree(vertex_id, parent_vertex_id):
			self.graph.vertices[subtree_vertex_id].position.rotate_around(angle, origin)

	#============================================
	def annotate_stereochemistry(self):
		"""Mark wedges around chiral bracket atoms outside rings with three neighbours.

		Of the three angles between consecutive neighbours, the bond opening
		the smallest one becomes a solid wedge and the one opening the
		largest a hashed wedge. Both edges are oriented away from the center.
		"""
		vertices = self.graph.vertices
		for vertex in vertices:
			atom = vertex.value
			if atom.rings or not atom.bracket or not atom.bracket.get("chirality"):
				continue
			neighbours = vertex.get_neighbours()
			if len(neighbours) != 3:
				continue
			vectors = [Vector2.subtract_vectors(vertices[n].position, vertex.position) for n in neighbours]
			angles = [Vector2.angle_between(vectors[i], vectors[(i + 1) % 3]) for i in range(3)]
			if any(math.isnan(angle) for angle in angles):
				continue
			wedge_pos = angles.index(min(angles))
			hash_pos = angles.index(max(angles))
			if wedge_pos == hash_pos:
				hash_pos = (wedge_pos + 1) % 3
			self._set_wedge(vertex.id, neighbours[wedge_pos], WEDGE_UP)
			self._set_wedge(vertex.id, neighbours[hash_pos], WEDGE_DOWN)

	def _set_wedge(self, center_id, neighbour_id, wedge):
		edge = self.graph.get_edge(center_id, neighbour_id)
		if edge.source_id != center_id:
			edge.flip()
		edge.wedge = wedge

	def init_pseudo_elements(self):
		"""Mark plain ring carbons with exactly two carbon neighbours as compact."""
		vertices = self.graph.vertices
		for vertex in vertices:
			atom = vertex.value
			if len(atom.rings) != 1 or atom.element != "C":
				continue
			neighbours = vertex.get_neighbours()
			if len(neighbours) != 2:
				continue
			if all(vertices[n].value.element == "C" for n in neighbours):
				atom.compact_glyph = COMPACT_GLYPH

	def place_implicit_hydrogens(self):
		# hidden hydrogens sit on their heavy atom
		for hydrogen_id, parent_id in self.implicit_hydrogens:
			hydrogen = self.graph.vertices[hydrogen_id]
			hydrogen.set_position_from_vector(self.graph.vertices[parent_id].position)
			hydrogen.positioned = True

	def rotate_drawing(self):
		"""Rotate by a multiple of 30 degrees so the longest axis is near horizontal."""
		vertices = self.graph.vertices
		a = 0
		b = 0
		max_dist = 0.0
		for i, vertex_a in enumerate(vertices):
			if not vertex_a.value.is_drawn:
				continue
			for j in range(i + 1, len(vertices)):
				vertex_b = vertices[j]
				if not vertex_b.value.is_drawn:
					continue
				dist = vertex_a.position.distance_sq(vertex_b.position)
				if dist > max_dist:
					max_dist = dist
					a = i
					b = j
		if max_dist == 0:
			return 0.0
		angle = -Vector2.subtract_vectors(vertices[a].position, vertices[b].position).angle()
		if math.isnan(angle):
			return 0.0
		angle = geometry.snap_angle(angle)
		origin = vertices[b].position.clone()
		for vertex in vertices:
			vertex.position.rotate_around(angle, origin)
		for ring in self.rings:
			ring.center.rotate_around(angle, origin)
		return angle

	#============================================
	def get_ring_count(self):
		return len(self.rings)

	def has_bridged_ring(self):
		return self.bridged_ring

	def get_bridged_rings(self):
		return [ring for ring in self.rings if ring.is_bridged]

	def get_fused_rings(self):
		return [ring for ring in self.rings if ring.is_fused]

	def get_spiros(self):
		return [ring for ring in self.rings if ring.is_spiro]

	def get_heavy_atom_count(self):
		return sum(1 for vertex in self.graph.vertices if vertex.value.element != "H")

	def print_ring_info(self):
		"""One line per ring: id;size;neighbours;spiro;fused;bridged;merged rings;"""
		lines = []
		for ring in self.rings:
			lines.append("%d;%d;%d;%s;%s;%s;%d;" % (
				ring.id, len(ring.members), len(ring.neighbours),
				_js_bool(ring.is_spiro), _js_bool(ring.is_fused), _js_bool(ring.is_bridged),
				len(ring.rings)))
		return "\n".join(lines)

	def get_molecular_formula(self):
		"""Hill-style formula: C, then H, then the other elements alphabetically."""
		counts = collections.Counter()
		for vertex in self.graph.vertices:
			atom = vertex.value
			counts[atom.element] += 1
			if atom.bracket and atom.bracket.get("chirality"):
				continue
			counts["H"] += atom.get_hydrogen_count()
		formula = ""
		for element in ["C", "H"] + sorted(e for e in counts if e not in ("C", "H")):
			count = counts.get(element, 0)
			if count > 0:
				formula += element + (str(count) if count > 1 else "")
		return formula

	def get_ringbond_type(self, vertex_a, vertex_b):
		"""Bond type written on the ring bond joining the two vertices, or None."""
		for ringbond_a in vertex_a.value.ringbonds:
			for ringbond_b in vertex_b.value.ringbonds:
				if ringbond_a["id"] == ringbond_b["id"]:
					if ringbond_a["bond_type"] in (None, "-"):
						return ringbond_b["bond_type"]
					return ringbond_a["bond_type"]
		return None

	def are_vertices_in_same_ring(self, vertex_a, vertex_b):
		return bool(set(vertex_a.value.rings) & set(vertex_b.value.rings))

	def get_common_rings(self, vertex_a, vertex_b):
		rings_b = set(vertex_b.value.rings)
		return [ring_id for ring_id in vertex_a.value.rings if ring_id in rings_b]

	def get_largest_or_aromatic_common_ring(self, vertex_a, vertex_b):
		"""The first benzene-like common ring, else the largest one."""
		largest = None
		max_size = 0
		for ring_id in self.get_common_rings(vertex_a, vertex_b):
			ring = self.get_ring(ring_id)
			if ring is None:
				continue
			if ring.is_benzene_like(self.graph.vertices) or self.is_ring_aromatic(ring):
				return ring
			if ring.get_size() > max_size:
				max_size = ring.get_size()
				largest = ring
		return largest

	def is_ring_aromatic(self, ring):
		return all(self.graph.vertices[member].value.is_part_of_aromatic_ring for member in ring.members)

	def get_edge_normals(self, edge):
		"""Unit normals of the edge."""
		position_a = self.graph.vertices[edge.source_id].position
		position_b = self.graph.vertices[edge.target_id].position
		return Vector2.units(position_a, position_b)


#============================================
def _js_bool(value):
	return "true" if value else "false"


#============================================
def molecular_formula(parse_tree, options=None):
	"""Formula of parse_tree without laying it out."""
	return Layout(options).init(parse_tree).get_molecular_formula()
