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

"""Layout and drawing options."""

# Standard Library
import dataclasses
import re


#============================================
@dataclasses.dataclass
class Options:
	width: float = 500
	height: float = 500
	scale: float = 0.0
	bond_thickness: float = 1.0
	bond_length: float = 30
	short_bond_length: float = 0.8
	bond_spacing: float = 0.17 * 30
	atom_visualization: str = "default"
	isomeric: bool = True
	debug: bool = False
	terminal_carbons: bool = False
	explicit_hydrogens: bool = True
	overlap_sensitivity: float = 0.42
	overlap_resolution_iterations: int = 1
	compact_drawing: bool = True
	font_family: str = "Arial, Helvetica, sans-serif"
	font_size_large: float = 11
	font_size_small: float = 3
	padding: float = 10.0
	experimental_sssr: bool = False
	kk_threshold: float = 0.1
	kk_inner_threshold: float = 0.1
	kk_max_iteration: int = 20000
	kk_max_inner_iteration: int = 50
	kk_max_energy: float = 1e9

	@property
	def half_bond_spacing(self):
		return self.bond_spacing / 2.0

	@property
	def bond_length_sq(self):
		return self.bond_length * self.bond_length

	@property
	def half_font_size_large(self):
		return self.font_size_large / 2.0

	@property
	def quarter_font_size_large(self):
		return self.font_size_large / 4.0

	@property
	def fifth_font_size_small(self):
		return self.font_size_small / 5.0

	#============================================
	@classmethod
	def from_dict(cls, values=None):
		"""Build options from a dict, accepting snake_case or camelCase keys.

		Raises:
			ValueError: on a key that is not a known option.
		"""
		options = cls()
		if values:
			options.update(values)
		return options

	def update(self, values):
		known = {field.name for field in dataclasses.fields(self)}
		for key, value in values.items():
			name = _snake_case(key)
			if name not in known:
				raise ValueError(f"Unknown option: {key}")
			setattr(self, name, value)
		return self


#============================================
def _snake_case(key):
	"""experimentalSSSR -> experimental_sssr, bondLength -> bond_length."""
	key = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", key)
	key = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", key)
	return key.lower()
