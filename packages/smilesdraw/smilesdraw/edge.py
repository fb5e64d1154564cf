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

"""Bond between two vertices of a graph."""


AROMATIC_BOND = ":"

BOND_WEIGHTS = {
	"-": 1,
	"/": 1,
	"\\": 1,
	":": 1.5,
	"=": 2,
	"#": 3,
	"$": 4,
}

WEDGE_UP = "up"
WEDGE_DOWN = "down"


#============================================
class Edge(object):
	"""An undirected bond that remembers its parse order as source -> target.

	Attributes:
		weight: bond order (1.5 for aromatic bonds).
		bond_type: SMILES bond symbol, ":" for aromatic.
		is_ring_closure: True when the edge was created from a ring-bond pair.
		is_part_of_aromatic_ring: True when both endpoints are aromatic.
		center: draw a double bond centered on the axis.
		wedge: "" or "up" (solid wedge) or "down" (hashed wedge).
	"""

	def __init__(self, source_id, target_id, weight=1):
		self.id = None
		self.source_id = source_id
		self.target_id = target_id
		self.weight = weight
		self.bond_type = "-"
		self.is_ring_closure = False
		self.is_part_of_aromatic_ring = False
		self.center = False
		self.wedge = ""

	def __repr__(self):
		return "Edge(%s%s%s)" % (self.source_id, self.bond_type, self.target_id)

	def set_bond_type(self, bond_type):
		if bond_type not in BOND_WEIGHTS:
			raise ValueError(f"Unknown bond type: {bond_type!r}")
		self.bond_type = bond_type
		self.weight = BOND_WEIGHTS[bond_type]

	def other(self, vertex_id):
		if vertex_id == self.source_id:
			return self.target_id
		return self.source_id

	def flip(self):
		"""Swap source and target, used to put a stereocenter at the narrow end of a wedge."""
		self.source_id, self.target_id = self.target_id, self.source_id

	@staticmethod
	def get_bond_weight(bond_type):
		return BOND_WEIGHTS[bond_type]
