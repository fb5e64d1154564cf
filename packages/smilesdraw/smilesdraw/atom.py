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

"""Chemical payload carried by a graph vertex."""

# local repo modules
from . import elements


# glyph used when compact drawing collapses a plain ring carbon
COMPACT_GLYPH = "∴"


#============================================
def canonical_element(symbol):
	"""Return (element, aromatic) for a SMILES element symbol.

	Lowercase symbols denote aromatic atoms; the element itself is always
	returned capitalized ("c" -> "C", "se" -> "Se").
	"""
	aromatic = symbol != symbol.upper()
	if len(symbol) == 1:
		return symbol.upper(), aromatic
	if aromatic and symbol.islower():
		return symbol.capitalize(), True
	return symbol, False


#============================================
class Atom(object):
	"""An atom as read from the parse tree plus the flags the layout sets on it.

	Attributes:
		element: element symbol, single letters upper-cased.
		bond_type: bond symbol written after this atom, towards the next chain
			atom; None when the bond is implicit.
		branch_bond: bond symbol written at the start of the branch, if any.
		bracket: dict with hcount, charge, isotope, chirality, class, or None.
		ringbonds: pending ring bonds, dicts with "id" and "bond_type" (None
			when implicit).
		rings: ids of the rings this atom belongs to.
		original_rings: snapshot of rings taken before bridged ring merging.
		bond_count: sum of the weights of all edges touching this atom.
	"""

	def __init__(self, element, bond_type="-"):
		self.idx = None
		self.element, self.is_part_of_aromatic_ring = canonical_element(element)
		self.draw_explicit = False
		self.ringbonds = []
		self.rings = []
		self.bond_type = bond_type
		self.branch_bond = None
		self.is_bridge = False
		self.is_bridge_node = False
		self.original_rings = []
		self.bridged_ring = None
		self.anchored_rings = []
		self.bracket = None
		self.plane = 0
		self.is_drawn = True
		self.is_connected_to_ring = False
		self.neighbouring_elements = []
		self.bond_count = 0
		self.chirality = ""
		self.is_stereo_center = False
		self.subtree_depth = 1
		self.compact_glyph = None
		self.atom_class = None

	def __repr__(self):
		return "Atom(%r)" % self.element

	def add_neighbouring_element(self, element):
		self.neighbouring_elements.append(element)

	def neighbouring_elements_equal(self, other_elements):
		return sorted(other_elements) == sorted(self.neighbouring_elements)

	def is_hetero_atom(self):
		return self.element not in ("C", "H")

	def add_anchored_ring(self, ring_id):
		if ring_id not in self.anchored_rings:
			self.anchored_rings.append(ring_id)

	def get_ringbond_count(self):
		return len(self.ringbonds)

	def backup_rings(self):
		self.original_rings = list(self.rings)

	def restore_rings(self):
		self.rings = list(self.original_rings)

	def get_atomic_number(self):
		return elements.atomic_number(self.element)

	def get_max_bonds(self):
		return elements.max_bonds(self.element)

	def get_hydrogen_count(self):
		"""Number of hydrogens implied by the SMILES for this atom."""
		if self.bracket:
			return self.bracket.get("hcount") or 0
		max_bonds = self.get_max_bonds()
		if max_bonds is None:
			return 0
		if self.is_part_of_aromatic_ring and self.element != "C":
			return 0
		return max(0, int(max_bonds - self.bond_count))

	@staticmethod
	def have_common_ringbond(atom_a, atom_b):
		ids_a = {ringbond["id"] for ringbond in atom_a.ringbonds}
		return any(ringbond["id"] in ids_a for ringbond in atom_b.ringbonds)
