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

"""Reaction SMILES: reactants>reagents>products."""

# local repo modules
from . import smiles_parser


#============================================
class Reaction(object):
	"""The three sides of a reaction, each a list of SMILES and of parse trees.

	Molecules within one side are separated by "."; an empty side stays an
	empty list.
	"""

	def __init__(self, reaction_smiles):
		parts = reaction_smiles.split(">")
		if len(parts) != 3:
			raise ValueError("Invalid reaction SMILES, expected exactly two '>' separators:"
				f" {reaction_smiles!r}")
		self.reactants_smiles = _split_side(parts[0])
		self.reagents_smiles = _split_side(parts[1])
		self.products_smiles = _split_side(parts[2])

		self.reactants = [smiles_parser.parse(smiles) for smiles in self.reactants_smiles]
		self.reagents = [smiles_parser.parse(smiles) for smiles in self.reagents_smiles]
		self.products = [smiles_parser.parse(smiles) for smiles in self.products_smiles]

	def __repr__(self):
		return "Reaction(%s>%s>%s)" % (
			".".join(self.reactants_smiles),
			".".join(self.reagents_smiles),
			".".join(self.products_smiles),
		)


#============================================
def _split_side(text):
	if text == "":
		return []
	return text.split(".")


#============================================
def parse_reaction(reaction_smiles):
	return Reaction(reaction_smiles)
