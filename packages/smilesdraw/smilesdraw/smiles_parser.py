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

"""Read a SMILES string into the nested parse tree the Graph is built from.

Every atom becomes a dict node::

	{"atom": "C" or {bracket dict}, "bond": None, "branchBond": None,
	"branches": [...], "branchCount": 0, "ringbonds": [{"id": 1, "bond": None}],
	"ringbondCount": 1, "next": node or None, "hasNext": False}

"bond" is the bond written after the atom, towards "next"; "branchBond" is
the bond written at the start of a branch, stored on the first atom of the
branch. Bonds that are not written are None. Ring bond ids may be reused
once the ring is closed, so consumers have to pair them in order.
"""

# local repo modules
from . import elements


ORGANIC_SUBSET = ("Cl", "Br", "B", "C", "N", "O", "P", "S", "F", "I", "*")
AROMATIC_ORGANIC = ("b", "c", "n", "o", "p", "s")
AROMATIC_BRACKET = ("se", "as", "te", "b", "c", "n", "o", "p", "s")
BOND_SYMBOLS = ("-", "=", "#", "$", ":", "/", "\\", ".")
CHIRALITY_CLASSES = ("TH", "AL", "SP", "TB", "OH")


#============================================
class SmilesParseError(ValueError):
	"""Malformed SMILES; position is the offset of the offending character."""

	def __init__(self, message, position=None):
		if position is not None:
			message = f"{message} at position {position}"
		super().__init__(message)
		self.position = position


#============================================
class _Tokenizer(object):
	"""Character access to the SMILES string with lookahead."""

	__slots__ = ("_string", "_pos")

	def __init__(self, string):
		self._string = string
		self._pos = 0

	@property
	def position(self):
		return self._pos

	def peek(self, offset=0):
		pos = self._pos + offset
		if pos >= len(self._string):
			return None
		return self._string[pos]

	def next(self):
		char = self.peek()
		if char is not None:
			self._pos += 1
		return char

	def rewind(self, position):
		self._pos = position

	def startswith(self, text):
		return self._string.startswith(text, self._pos)

	def read_digits(self):
		start = self._pos
		while self.peek() is not None and self.peek().isdigit():
			self._pos += 1
		return self._string[start:self._pos]


#============================================
def _new_node(atom):
	return {
		"atom": atom,
		"bond": None,
		"branchBond": None,
		"branches": [],
		"branchCount": 0,
		"ringbonds": [],
		"ringbondCount": 0,
		"next": None,
		"hasNext": False,
	}


#============================================
def parse(smiles):
	"""Parse one SMILES string (no reaction arrows) into its root node.

	Raises:
		SmilesParseError: on empty input, unknown characters, unbalanced
			parentheses or ring bonds that are never closed.
	"""
	if smiles is None or not smiles.strip():
		raise SmilesParseError("Empty SMILES string", 0)
	tokenizer = _Tokenizer(smiles.strip())
	open_rings = {}
	root = _parse_chain(tokenizer, open_rings, None)
	char = tokenizer.peek()
	if char == ")":
		raise SmilesParseError("Unbalanced parentheses", tokenizer.position)
	if char is not None:
		raise SmilesParseError(f"Unexpected character {char!r}", tokenizer.position)
	if open_rings:
		ring_id, position = min(open_rings.items(), key=lambda item: item[1])
		raise SmilesParseError(f"Ring bond {ring_id} is never closed", position)
	return root


#============================================
def _parse_chain(tokenizer, open_rings, branch_bond):
	first = None
	previous = None
	while True:
		node = _parse_atom(tokenizer)
		if first is None:
			first = node
			node["branchBond"] = branch_bond
		else:
			previous["next"] = node
			previous["hasNext"] = True
		_parse_ringbonds(tokenizer, node, open_rings)
		while tokenizer.peek() == "(":
			start = tokenizer.position
			tokenizer.next()
			bond = _parse_bond(tokenizer)
			node["branches"].append(_parse_chain(tokenizer, open_rings, bond))
			if tokenizer.next() != ")":
				raise SmilesParseError("Unbalanced parentheses", start)
		node["branchCount"] = len(node["branches"])

		bond_position = tokenizer.position
		bond = _parse_bond(tokenizer)
		if not _starts_atom(tokenizer.peek()):
			if bond is not None:
				raise SmilesParseError(f"Bond {bond!r} without a following atom", bond_position)
			return first
		node["bond"] = bond
		previous = node


#============================================
def _starts_atom(char):
	if char is None:
		return False
	return char == "[" or char == "*" or char in "BCNOPSFIbcnops"


#============================================
def _parse_bond(tokenizer):
	char = tokenizer.peek()
	if char is not None and char in BOND_SYMBOLS:
		tokenizer.next()
		return char
	return None


#============================================
def _parse_ringbonds(tokenizer, node, open_rings):
	while True:
		start = tokenizer.position
		bond = _parse_bond(tokenizer)
		char = tokenizer.peek()
		if char is not None and char.isdigit():
			tokenizer.next()
			ring_id = int(char)
		elif char == "%":
			tokenizer.next()
			digits = tokenizer.peek(0), tokenizer.peek(1)
			if not all(digit is not None and digit.isdigit() for digit in digits):
				raise SmilesParseError("Ring bond '%' needs two digits", start)
			tokenizer.next()
			tokenizer.next()
			ring_id = int(digits[0] + digits[1])
		else:
			# a bond not followed by a ring id belongs to the next atom
			tokenizer.rewind(start)
			break
		if bond == ".":
			raise SmilesParseError("'.' cannot close a ring", start)
		if ring_id in open_rings:
			del open_rings[ring_id]
		else:
			open_rings[ring_id] = start
		node["ringbonds"].append({"id": ring_id, "bond": bond})
	node["ringbondCount"] = len(node["ringbonds"])


#============================================
def _parse_atom(tokenizer):
	position = tokenizer.position
	char = tokenizer.peek()
	if char is None:
		raise SmilesParseError("Expected an atom", position)
	if char == "[":
		return _new_node(_parse_bracket_atom(tokenizer))
	for symbol in ORGANIC_SUBSET + AROMATIC_ORGANIC:
		if tokenizer.startswith(symbol):
			for _ in symbol:
				tokenizer.next()
			return _new_node(symbol)
	if char == ")":
		raise SmilesParseError("Unbalanced parentheses", position)
	raise SmilesParseError(f"Unexpected character {char!r}", position)


#============================================
def _parse_bracket_atom(tokenizer):
	start = tokenizer.position
	tokenizer.next()
	isotope_text = tokenizer.read_digits()
	element = _parse_bracket_element(tokenizer)
	chirality = _parse_chirality(tokenizer)

	hcount = 0
	if tokenizer.peek() == "H":
		tokenizer.next()
		digits = tokenizer.read_digits()
		hcount = int(digits) if digits else 1

	charge = 0
	sign = tokenizer.peek()
	if sign in ("+", "-"):
		tokenizer.next()
		digits = tokenizer.read_digits()
		if digits:
			charge = int(digits)
		else:
			charge = 1
			while tokenizer.peek() == sign:
				tokenizer.next()
				charge += 1
		if sign == "-":
			charge = -charge

	atom_class = None
	if tokenizer.peek() == ":":
		tokenizer.next()
		digits = tokenizer.read_digits()
		if not digits:
			raise SmilesParseError("Atom class needs a number", tokenizer.position)
		atom_class = int(digits)

	if tokenizer.next() != "]":
		raise SmilesParseError("Unterminated bracket atom", start)
	return {
		"element": element,
		"hcount": hcount,
		"charge": charge,
		"isotope": int(isotope_text) if isotope_text else None,
		"chirality": chirality,
		"class": atom_class,
	}


#============================================
def _parse_bracket_element(tokenizer):
	position = tokenizer.position
	char = tokenizer.peek()
	if char is None:
		raise SmilesParseError("Unterminated bracket atom", position)
	if char == "*":
		tokenizer.next()
		return char
	if char.isupper():
		second = tokenizer.peek(1)
		if second is not None and second.islower() and (char + second) in elements.ATOMIC_NUMBERS:
			tokenizer.next()
			tokenizer.next()
			return char + second
		if char in elements.ATOMIC_NUMBERS:
			tokenizer.next()
			return char
	for symbol in AROMATIC_BRACKET:
		if tokenizer.startswith(symbol):
			for _ in symbol:
				tokenizer.next()
			return symbol
	raise SmilesParseError(f"Unknown element in bracket atom {char!r}", position)


#============================================
def _parse_chirality(tokenizer):
	if tokenizer.peek() != "@":
		return None
	tokenizer.next()
	if tokenizer.peek() == "@":
		tokenizer.next()
		return "@@"
	for chirality_class in CHIRALITY_CLASSES:
		if tokenizer.startswith(chirality_class):
			tokenizer.next()
			tokenizer.next()
			return "@" + chirality_class + tokenizer.read_digits()
	return "@"
