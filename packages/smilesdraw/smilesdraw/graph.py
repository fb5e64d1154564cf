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

"""Molecular graph built from a SMILES parse tree.

Vertices and edges live in flat lists and are addressed by their integer
ids, which are dense and follow insertion order. Every traversal uses an
explicit stack so deep chains do not hit the recursion limit.
"""

# Standard Library
import collections
import math

# local repo modules
from .atom import Atom
from .edge import AROMATIC_BOND
from .edge import Edge
from .vertex import Vertex


DISCONNECTED_BOND = "."


#============================================
def implicit_bond_type(bond_type, atom_a, atom_b):
	"""Resolve an unwritten (None) bond: aromatic between aromatic atoms, else single."""
	if bond_type:
		return bond_type
	if atom_a.is_part_of_aromatic_ring and atom_b.is_part_of_aromatic_ring:
		return AROMATIC_BOND
	return "-"


#============================================
def _hydrogen_node():
	return {
		"atom": "H",
		"bond": "-",
		"branchBond": None,
		"branches": [],
		"branchCount": 0,
		"ringbonds": [],
		"ringbondCount": 0,
		"next": None,
		"hasNext": False,
	}


#============================================
def _floyd_warshall(adjacency_matrix):
	length = len(adjacency_matrix)
	dist = [[math.inf] * length for _ in range(length)]
	for i in range(length):
		dist[i][i] = 0
		for j in range(length):
			if adjacency_matrix[i][j] == 1:
				dist[i][j] = 1
	for k in range(length):
		for i in range(length):
			dist_ik = dist[i][k]
			if dist_ik == math.inf:
				continue
			row_i = dist[i]
			row_k = dist[k]
			for j in range(length):
				if row_i[j] > dist_ik + row_k[j]:
					row_i[j] = dist_ik + row_k[j]
	return dist


#============================================
class Graph(object):
	"""Atoms and bonds of one molecule (or of several disconnected ones)."""

	def __init__(self, parse_tree=None, isomeric=False):
		self.vertices = []
		self.edges = []
		self.vertex_ids_to_edge_id = {}
		self.atom_idx_to_vertex_id = []
		self.isomeric = isomeric
		self._atom_idx = 0
		if parse_tree is not None:
			self._init(parse_tree)

	def __repr__(self):
		return "Graph(%d vertices, %d edges)" % (len(self.vertices), len(self.edges))

	#============================================
	def _init(self, parse_tree):
		"""Create vertices and edges in the depth-first order of the parse tree.

		For every atom the order is: the atom itself, hydrogens of a bracket
		stereocenter, its branches left to right, then the chain continuation.
		"""
		# (node, parent vertex id, reached through a branch)
		stack = [(parse_tree, None, False)]
		while stack:
			node, parent_vertex_id, is_branch = stack.pop()
			vertex_id = self._add_node(node, parent_vertex_id, is_branch)
			atom = self.vertices[vertex_id].value
			pending = []
			if atom.bracket and atom.bracket.get("chirality"):
				atom.is_stereo_center = True
				for _ in range(atom.bracket.get("hcount") or 0):
					pending.append((_hydrogen_node(), vertex_id, True))
			for branch in node.get("branches") or []:
				pending.append((branch, vertex_id, True))
			if node.get("hasNext") and node.get("next") is not None:
				pending.append((node["next"], vertex_id, False))
			stack.extend(reversed(pending))

	def _add_node(self, node, parent_vertex_id, is_branch):
		raw_atom = node["atom"]
		if isinstance(raw_atom, dict):
			element = raw_atom["element"]
			bracket = dict(raw_atom)
		else:
			element = raw_atom
			bracket = None

		atom = Atom(element, node.get("bond"))
		if atom.element != "H" or (not node.get("hasNext") and parent_vertex_id is None):
			atom.idx = self._atom_idx
			self._atom_idx += 1
		atom.branch_bond = node.get("branchBond")
		atom.ringbonds = [
			{"id": ringbond["id"], "bond_type": ringbond.get("bond")}
			for ringbond in node.get("ringbonds") or []
		]
		atom.bracket = bracket
		if bracket:
			atom.chirality = bracket.get("chirality") or ""
			atom.atom_class = bracket.get("class")

		vertex = Vertex(atom)
		vertex_id = self.add_vertex(vertex)
		if atom.idx is not None:
			self.atom_idx_to_vertex_id.append(vertex_id)

		if parent_vertex_id is not None:
			parent = self.vertices[parent_vertex_id]
			link_bond = atom.branch_bond if is_branch else parent.value.bond_type
			if link_bond == DISCONNECTED_BOND:
				# "." starts a new molecule, the vertex becomes another tree root
				return vertex_id
			vertex.set_parent_vertex_id(parent_vertex_id)
			atom.add_neighbouring_element(parent.value.element)
			parent.add_child(vertex_id)
			parent.value.add_neighbouring_element(atom.element)
			parent.spanning_tree_children.append(vertex_id)

			edge = Edge(parent_vertex_id, vertex_id, 1)
			edge.set_bond_type(implicit_bond_type(link_bond, parent.value, atom))
			self.add_edge(edge)
		return vertex_id

	#============================================
	def clear(self):
		self.vertices = []
		self.edges = []
		self.vertex_ids_to_edge_id = {}
		self.atom_idx_to_vertex_id = []
		self._atom_idx = 0

	def add_vertex(self, vertex):
		vertex.id = len(self.vertices)
		self.vertices.append(vertex)
		return vertex.id

	def add_edge(self, edge):
		"""Register edge, both lookup directions, and the endpoint bond counts."""
		source = self.vertices[edge.source_id]
		target = self.vertices[edge.target_id]
		edge.id = len(self.edges)
		self.edges.append(edge)
		self.vertex_ids_to_edge_id[(edge.source_id, edge.target_id)] = edge.id
		self.vertex_ids_to_edge_id[(edge.target_id, edge.source_id)] = edge.id
		edge.is_part_of_aromatic_ring = (source.value.is_part_of_aromatic_ring
				and target.value.is_part_of_aromatic_ring)
		source.value.bond_count += edge.weight
		target.value.bond_count += edge.weight
		source.edges.append(edge.id)
		target.edges.append(edge.id)
		return edge.id

	def set_edge_bond_type(self, edge, bond_type):
		"""Rewrite the bond type of an existing edge, keeping bond counts in step."""
		old_weight = edge.weight
		edge.set_bond_type(bond_type)
		delta = edge.weight - old_weight
		self.vertices[edge.source_id].value.bond_count += delta
		self.vertices[edge.target_id].value.bond_count += delta

	def get_edge(self, vertex_id_a, vertex_id_b):
		edge_id = self.vertex_ids_to_edge_id.get((vertex_id_a, vertex_id_b))
		if edge_id is None:
			return None
		return self.edges[edge_id]

	def get_edges(self, vertex_id):
		edge_ids = []
		for neighbour_id in self.vertices[vertex_id].neighbours:
			edge_id = self.vertex_ids_to_edge_id.get((vertex_id, neighbour_id))
			if edge_id is not None:
				edge_ids.append(edge_id)
		return edge_ids

	def has_edge(self, vertex_id_a, vertex_id_b):
		return (vertex_id_a, vertex_id_b) in self.vertex_ids_to_edge_id

	def get_vertex_list(self):
		return [vertex.id for vertex in self.vertices]

	def get_edge_list(self):
		return [(edge.source_id, edge.target_id) for edge in self.edges]

	#============================================
	def get_adjacency_matrix(self):
		length = len(self.vertices)
		matrix = [[0] * length for _ in range(length)]
		for edge in self.edges:
			matrix[edge.source_id][edge.target_id] = 1
			matrix[edge.target_id][edge.source_id] = 1
		return matrix

	def get_components_adjacency_matrix(self):
		"""Adjacency matrix with every bridge removed, leaving only ring systems connected."""
		matrix = self.get_adjacency_matrix()
		for source_id, target_id in self.get_bridges():
			matrix[source_id][target_id] = 0
			matrix[target_id][source_id] = 0
		return matrix

	def get_subgraph_adjacency_matrix(self, vertex_ids):
		length = len(vertex_ids)
		matrix = [[0] * length for _ in range(length)]
		for i in range(length):
			for j in range(length):
				if i != j and self.has_edge(vertex_ids[i], vertex_ids[j]):
					matrix[i][j] = 1
		return matrix

	def get_distance_matrix(self):
		return _floyd_warshall(self.get_adjacency_matrix())

	def get_subgraph_distance_matrix(self, vertex_ids):
		return _floyd_warshall(self.get_subgraph_adjacency_matrix(vertex_ids))

	def get_adjacency_list(self):
		adjacency_list = []
		for vertex in self.vertices:
			adjacency_list.append([n for n in vertex.neighbours if self.has_edge(vertex.id, n)])
		return adjacency_list

	def get_subgraph_adjacency_list(self, vertex_ids):
		adjacency_list = []
		for i in range(len(vertex_ids)):
			row = []
			for j in range(len(vertex_ids)):
				if i != j and self.has_edge(vertex_ids[i], vertex_ids[j]):
					row.append(j)
			adjacency_list.append(row)
		return adjacency_list

	#============================================
	def get_bridges(self):
		"""Return the cut edges as (u, v) pairs, using Tarjan's low-link numbers.

		Returns:
			list: (u, v) tuples where u is the endpoint discovered first.
		"""
		length = len(self.vertices)
		adjacency_list = self.get_adjacency_list()
		visited = [False] * length
		disc = [0] * length
		low = [0] * length
		parent = [None] * length
		bridges = []
		time = 0
		for root in range(length):
			if visited[root]:
				continue
			visited[root] = True
			time += 1
			disc[root] = low[root] = time
			stack = [(root, iter(adjacency_list[root]))]
			while stack:
				u, neighbours = stack[-1]
				advanced = False
				for v in neighbours:
					if not visited[v]:
						visited[v] = True
						parent[v] = u
						time += 1
						disc[v] = low[v] = time
						stack.append((v, iter(adjacency_list[v])))
						advanced = True
						break
					if v != parent[u]:
						low[u] = min(low[u], disc[v])
				if advanced:
					continue
				stack.pop()
				if stack:
					p = stack[-1][0]
					low[p] = min(low[p], low[u])
					if low[u] > disc[p]:
						bridges.append((p, u))
		return bridges

	def get_connected_components(self):
		"""Return the vertex ids of each connected component, singletons included."""
		adjacency_list = self.get_adjacency_list()
		visited = [False] * len(self.vertices)
		components = []
		for root in range(len(self.vertices)):
			if visited[root]:
				continue
			component = []
			visited[root] = True
			stack = [root]
			while stack:
				v = stack.pop()
				component.append(v)
				for u in reversed(adjacency_list[v]):
					if not visited[u]:
						visited[u] = True
						stack.append(u)
			components.append(component)
		return components

	@staticmethod
	def connected_components_of(adjacency_matrix):
		"""Components with more than one vertex of the graph given as adjacency matrix."""
		length = len(adjacency_matrix)
		visited = [False] * length
		components = []
		for root in range(length):
			if visited[root]:
				continue
			component = []
			visited[root] = True
			stack = [root]
			while stack:
				v = stack.pop()
				component.append(v)
				for u in range(length - 1, -1, -1):
					if adjacency_matrix[v][u] == 1 and not visited[u]:
						visited[u] = True
						stack.append(u)
			if len(component) > 1:
				components.append(component)
		return components

	@staticmethod
	def connected_component_count_of(adjacency_matrix):
		length = len(adjacency_matrix)
		visited = [False] * length
		count = 0
		for root in range(length):
			if visited[root]:
				continue
			count += 1
			visited[root] = True
			stack = [root]
			while stack:
				v = stack.pop()
				for u in range(length):
					if adjacency_matrix[v][u] == 1 and not visited[u]:
						visited[u] = True
						stack.append(u)
		return count

	#============================================
	def traverse_tree(self, vertex_id, parent_vertex_id, callback, max_depth=999999, ignore_first=False):
		"""Call callback on every vertex reachable from vertex_id without passing parent_vertex_id."""
		visited = set()
		if parent_vertex_id is not None:
			visited.add(parent_vertex_id)
		stack = [(vertex_id, 1)]
		while stack:
			current_id, depth = stack.pop()
			if depth > max_depth + 1 or current_id in visited:
				continue
			visited.add(current_id)
			if not ignore_first or depth > 1:
				callback(self.vertices[current_id])
			for neighbour_id in reversed(self.vertices[current_id].neighbours):
				if neighbour_id not in visited:
					stack.append((neighbour_id, depth + 1))

	def get_tree(self, vertex_id, parent_vertex_id, max_depth=999999):
		"""Vertex ids of the subtree rooted at vertex_id on the far side of parent_vertex_id."""
		tree = []
		self.traverse_tree(vertex_id, parent_vertex_id, lambda vertex: tree.append(vertex.id), max_depth)
		return tree

	def get_tree_depth(self, vertex_id, parent_vertex_id):
		"""Depth of the spanning tree hanging from vertex_id, walking away from parent_vertex_id."""
		if vertex_id is None or parent_vertex_id is None:
			return 0
		depths = {}
		# post-order walk: a node is finished once all its spanning tree neighbours are
		stack = [(vertex_id, parent_vertex_id, False)]
		while stack:
			current_id, previous_id, expanded = stack.pop()
			neighbours = self.vertices[current_id].get_spanning_tree_neighbours(previous_id)
			if expanded:
				depths[current_id] = 1 + max((depths[n] for n in neighbours), default=0)
				continue
			stack.append((current_id, previous_id, True))
			for neighbour_id in neighbours:
				stack.append((neighbour_id, current_id, False))
		return depths[vertex_id]

	def traverse_bf(self, start_vertex_id, callback):
		"""Breadth-first walk over all vertices reachable from start_vertex_id."""
		visited = {start_vertex_id}
		queue = collections.deque([start_vertex_id])
		while queue:
			current_id = queue.popleft()
			vertex = self.vertices[current_id]
			callback(vertex)
			for neighbour_id in vertex.neighbours:
				if neighbour_id not in visited:
					visited.add(neighbour_id)
					queue.append(neighbour_id)
