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

"""Smallest set of smallest rings.

Rings are searched per connected component of the graph with all bridges
removed. For each component, a Floyd-Warshall pass records the shortest
paths between every vertex pair (pe) and the paths one bond longer
(pe_prime). Each pair then yields ring candidates: two shortest paths form
an even ring of 2*d vertices, a shortest plus a longer path an odd ring of
2*d + 1 vertices. Candidates are accepted smallest first until the
expected number of rings is reached.

Paths are lists of bonds, a bond being a (u, v) tuple of component-local
vertex indices.
"""

# Standard Library
import copy
import logging
import math

# local repo modules
from .graph import Graph


logger = logging.getLogger(__name__)

# ring count used when the expected count is not trusted
EXPERIMENTAL_RING_CAP = 999


#============================================
def get_rings(graph, experimental=False):
	"""Return the SSSR of graph as lists of vertex ids.

	Args:
		graph: a Graph whose ring-closure edges are already present.
		experimental: do not stop at the expected ring count.

	Returns:
		list: one list of vertex ids per ring, or None for an empty graph.
	"""
	adjacency_matrix = graph.get_components_adjacency_matrix()
	if not adjacency_matrix:
		return None

	rings = []
	for component in Graph.connected_components_of(adjacency_matrix):
		cc_adjacency_matrix = graph.get_subgraph_adjacency_matrix(component)
		bond_counts = [sum(row) for row in cc_adjacency_matrix]
		ring_counts = [0] * len(cc_adjacency_matrix)

		n_edges = 0
		for j in range(len(cc_adjacency_matrix)):
			for k in range(j + 1, len(cc_adjacency_matrix)):
				n_edges += cc_adjacency_matrix[j][k]
		n_sssr = n_edges - len(cc_adjacency_matrix) + 1
		# Euler: a cubic graph drawn on a sphere has one more face to count
		if all(count == 3 for count in bond_counts):
			n_sssr = 2 + n_edges - len(cc_adjacency_matrix)

		if n_sssr == 1:
			rings.append(list(component))
			continue
		if experimental:
			n_sssr = EXPERIMENTAL_RING_CAP

		d, pe, pe_prime = get_path_included_distance_matrices(cc_adjacency_matrix)
		candidates = get_ring_candidates(d, pe, pe_prime)
		sssr = get_sssr(candidates, d, cc_adjacency_matrix, pe, pe_prime,
				bond_counts, ring_counts, n_sssr)
		for ring in sssr:
			rings.append([component[index] for index in sorted(ring)])

	logger.debug("SSSR found %d ring(s)", len(rings))
	return rings


#============================================
def matrix_to_string(matrix):
	lines = []
	for row in matrix:
		lines.append(" ".join(str(value) for value in row) + " ")
	return "\n".join(lines) + "\n"


#============================================
def _join_paths(path_a, path_b):
	return list(path_a) + list(path_b)


#============================================
def get_path_included_distance_matrices(adjacency_matrix):
	"""Return (d, pe, pe_prime) for the graph given as adjacency matrix.

	d[i][j] is the shortest distance, pe[i][j] the list of shortest paths
	and pe_prime[i][j] the list of paths of length d[i][j] + 1.
	"""
	length = len(adjacency_matrix)
	d = [[0] * length for _ in range(length)]
	pe = [[None] * length for _ in range(length)]
	pe_prime = [[[] for _ in range(length)] for _ in range(length)]

	for i in range(length):
		for j in range(length):
			if i == j:
				d[i][j] = 0
			elif adjacency_matrix[i][j] == 1:
				d[i][j] = 1
			else:
				d[i][j] = math.inf
			if d[i][j] == 1:
				pe[i][j] = [[(i, j)]]
			else:
				pe[i][j] = []

	for k in range(length):
		for i in range(length):
			for j in range(length):
				previous_length = d[i][j]
				new_length = d[i][k] + d[k][j]
				if new_length == math.inf:
					continue
				if previous_length > new_length:
					if previous_length == new_length + 1:
						pe_prime[i][j] = copy.deepcopy(pe[i][j])
					else:
						pe_prime[i][j] = []
					d[i][j] = new_length
					pe[i][j] = [_join_paths(pe[i][k][0], pe[k][j][0])]
				elif previous_length == new_length:
					if pe[i][k] and pe[k][j]:
						pe[i][j].append(_join_paths(pe[i][k][0], pe[k][j][0]))
				elif previous_length == new_length - 1:
					if pe[i][k] and pe[k][j]:
						pe_prime[i][j].append(_join_paths(pe[i][k][0], pe[k][j][0]))
	return d, pe, pe_prime


#============================================
def get_ring_candidates(d, pe, pe_prime):
	"""Ring candidates (size, paths, longer paths), smallest first."""
	candidates = []
	length = len(d)
	for i in range(length):
		for j in range(length):
			if d[i][j] == 0 or d[i][j] == math.inf:
				continue
			if pe_prime[i][j]:
				size = 2 * d[i][j] + 1
			else:
				size = 2 * d[i][j]
			candidates.append((size, pe[i][j], pe_prime[i][j]))
	# stable sort keeps the pair order for equal sizes
	candidates.sort(key=lambda candidate: candidate[0])
	return candidates


#============================================
def get_sssr(candidates, d, adjacency_matrix, pe, pe_prime, bond_counts, ring_counts, n_sssr):
	"""Accept candidates greedily into the ring set.

	A candidate is accepted when its vertices induce exactly as many bonds
	as it has vertices (it is a simple cycle) and path_sets_contain does not
	reject it. The search ends once n_sssr rings were accepted.

	Returns:
		list: sets of component-local vertex indices.
	"""
	c_sssr = []
	all_bonds = set()
	for size, paths, longer_paths in candidates:
		if size % 2 != 0:
			bond_sets = [_join_paths(paths[0], longer_path) for longer_path in longer_paths]
		else:
			bond_sets = [_join_paths(paths[j], paths[j + 1]) for j in range(len(paths) - 1)]
		for bonds in bond_sets:
			atoms = bonds_to_atoms(bonds)
			if get_bond_count(atoms, adjacency_matrix) != len(atoms):
				continue
			if path_sets_contain(c_sssr, atoms, bonds, all_bonds, bond_counts, ring_counts):
				continue
			c_sssr.append(atoms)
			for u, v in bonds:
				all_bonds.add(frozenset((u, v)))
			if len(c_sssr) >= n_sssr:
				return c_sssr
	return c_sssr


#============================================
def get_edge_count(adjacency_matrix):
	count = 0
	length = len(adjacency_matrix)
	for i in range(length):
		for j in range(i + 1, length):
			if adjacency_matrix[i][j] == 1:
				count += 1
	return count


#============================================
def get_edge_list(adjacency_matrix):
	edge_list = []
	length = len(adjacency_matrix)
	for i in range(length):
		for j in range(i + 1, length):
			if adjacency_matrix[i][j] == 1:
				edge_list.append((i, j))
	return edge_list


#============================================
def bonds_to_atoms(bonds):
	atoms = set()
	for u, v in bonds:
		atoms.add(u)
		atoms.add(v)
	return atoms


#============================================
def get_bond_count(atoms, adjacency_matrix):
	"""Number of bonds among the given vertex indices."""
	count = 0
	for u in atoms:
		for v in atoms:
			if u != v:
				count += adjacency_matrix[u][v]
	return count // 2


#============================================
def path_sets_contain(path_sets, path_set, bonds, all_bonds, bond_counts, ring_counts):
	"""Return True when path_set must be rejected against the accepted rings.

	Rejected are supersets of (or sets equal to) an accepted ring, and rings
	whose bonds are all covered by accepted rings, unless one of the
	vertices still has fewer rings than bonds. On acceptance the ring
	counts of the vertices are incremented.
	"""
	for accepted in path_sets:
		if is_superset_of(path_set, accepted):
			return True
		if len(accepted) != len(path_set):
			continue
		if are_sets_equal(accepted, path_set):
			return True

	all_contained = bool(bonds) and all(frozenset(bond) in all_bonds for bond in bonds)
	if all_contained:
		special_case = any(ring_counts[element] < bond_counts[element] for element in path_set)
		if not special_case:
			return True

	for element in path_set:
		ring_counts[element] += 1
	return False


#============================================
def are_sets_equal(set_a, set_b):
	return set(set_a) == set(set_b)


#============================================
def is_superset_of(set_a, set_b):
	"""True when set_a contains every element of set_b."""
	return set(set_b).issubset(set_a)
