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

"""Kamada-Kawai spring placement for bridged ring systems.

Every pair of vertices is joined by a spring whose rest length is the
graph distance times the bond length and whose strength falls off with the
square of the graph distance. The vertex with the largest energy gradient
is moved by Newton steps until its gradient drops below the inner
threshold; this repeats until every free vertex is below the threshold.
Vertices that were already positioned stay where they are.
"""

# Standard Library
import logging
import math

# local repo modules
from . import geometry


logger = logging.getLogger(__name__)

# radius of the circle free vertices start on, as a side length
START_CIRCLE_SIDE = 500.0


#============================================
def _pair_gradient(ux, uy, vx, vy, strength, rest_length):
	dx = ux - vx
	dy = uy - vy
	distance = math.hypot(dx, dy)
	if distance == 0:
		return 0.0, 0.0
	inverse = 1.0 / distance
	return (strength * (dx - rest_length * dx * inverse),
			strength * (dy - rest_length * dy * inverse))


#============================================
def kk_layout(graph, vertex_ids, center, bond_length, threshold=0.1, inner_threshold=0.1,
		max_iteration=2000, max_inner_iteration=50, max_energy=1e9):
	"""Place vertex_ids of graph around center and mark them positioned.

	Args:
		graph: the Graph owning the vertices.
		vertex_ids: ids of the members of the bridged ring system.
		center: Vector2 around which free vertices start.
		bond_length: rest length of a spring between bonded vertices.

	Returns:
		int: number of outer iterations used.
	"""
	length = len(vertex_ids)
	if length == 0:
		return 0
	distances = graph.get_subgraph_distance_matrix(vertex_ids)
	radius = geometry.poly_circumradius(START_CIRCLE_SIDE, max(length, 3))
	step = geometry.central_angle(max(length, 3))

	xs = [0.0] * length
	ys = [0.0] * length
	fixed = [False] * length
	angle = 0.0
	for i, vertex_id in enumerate(vertex_ids):
		vertex = graph.vertices[vertex_id]
		if vertex.positioned:
			xs[i] = vertex.position.x
			ys[i] = vertex.position.y
		else:
			xs[i] = center.x + math.cos(angle) * radius
			ys[i] = center.y + math.sin(angle) * radius
		fixed[i] = vertex.positioned
		angle += step

	rest_lengths = [[0.0] * length for _ in range(length)]
	strengths = [[0.0] * length for _ in range(length)]
	for i in range(length):
		for j in range(length):
			graph_distance = distances[i][j]
			if i == j or graph_distance == math.inf:
				continue
			rest_lengths[i][j] = bond_length * graph_distance
			strengths[i][j] = bond_length * graph_distance ** -2.0

	# gradient[i][j]: contribution of the spring i-j to the gradient at i
	gradient = [[(0.0, 0.0)] * length for _ in range(length)]
	sum_x = [0.0] * length
	sum_y = [0.0] * length
	for i in range(length):
		for j in range(length):
			if i == j:
				continue
			gx, gy = _pair_gradient(xs[i], ys[i], xs[j], ys[j], strengths[i][j], rest_lengths[i][j])
			gradient[i][j] = (gx, gy)
			sum_x[i] += gx
			sum_y[i] += gy

	def energy(index):
		return sum_x[index] * sum_x[index] + sum_y[index] * sum_y[index]

	def highest_energy():
		best_index = 0
		best_energy = 0.0
		for index in range(length):
			delta = energy(index)
			if delta > best_energy and not fixed[index]:
				best_energy = delta
				best_index = index
		return best_index, best_energy

	def update(index):
		ux = xs[index]
		uy = ys[index]
		dxx = 0.0
		dyy = 0.0
		dxy = 0.0
		for j in range(length):
			if j == index:
				continue
			dx = ux - xs[j]
			dy = uy - ys[j]
			squared = dx * dx + dy * dy
			if squared == 0:
				continue
			denominator = 1.0 / squared ** 1.5
			k = strengths[index][j]
			rest = rest_lengths[index][j]
			dxx += k * (1.0 - rest * dy * dy * denominator)
			dyy += k * (1.0 - rest * dx * dx * denominator)
			dxy += k * (rest * dx * dy * denominator)
		determinant = dxx * dyy - dxy * dxy
		if determinant == 0:
			return False
		step_x = (-sum_x[index] * dyy + sum_y[index] * dxy) / determinant
		step_y = (-sum_y[index] * dxx + sum_x[index] * dxy) / determinant
		xs[index] += step_x
		ys[index] += step_y

		new_x = 0.0
		new_y = 0.0
		for j in range(length):
			if j == index:
				continue
			gx, gy = _pair_gradient(xs[index], ys[index], xs[j], ys[j],
					strengths[index][j], rest_lengths[index][j])
			gradient[index][j] = (gx, gy)
			new_x += gx
			new_y += gy
			# the spring pulls j the opposite way
			old_jx, old_jy = gradient[j][index]
			gradient[j][index] = (-gx, -gy)
			sum_x[j] += -gx - old_jx
			sum_y[j] += -gy - old_jy
		sum_x[index] = new_x
		sum_y[index] = new_y
		return True

	iteration = 0
	while max_energy > threshold and max_iteration > iteration:
		iteration += 1
		index, max_energy = highest_energy()
		delta = max_energy
		inner_iteration = 0
		while delta > inner_threshold and max_inner_iteration > inner_iteration:
			inner_iteration += 1
			if not update(index):
				break
			delta = energy(index)

	for i, vertex_id in enumerate(vertex_ids):
		vertex = graph.vertices[vertex_id]
		vertex.position.set(xs[i], ys[i])
		vertex.positioned = True
		vertex.force_positioned = True
	logger.debug("Kamada-Kawai placed %d vertices in %d iterations", length, iteration)
	return iteration
