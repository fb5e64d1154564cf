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

"""Render ops for a whole reaction: reactants, arrow and products in one row.

Each molecule is laid out on its own and its ops are moved right of the
previous element. Molecules of one side are separated by a plus sign, the
sides by an arrow. The reagents are written as molecular formulas above the
arrow. Everything is centered on y = 0, the arrow line.
"""

# Standard Library
import collections

# local repo modules
from . import render_ops
from .layout import Layout
from .layout import molecular_formula
from .options import Options
from .reaction import Reaction


SPACING = 10.0
PLUS_SIZE = 9.0
PLUS_THICKNESS = 1.0
ARROW_HEAD_SIZE = 6.0
ARROW_THICKNESS = 1.0
# gap between the arrow and the text above and below it
ARROW_TEXT_MARGIN = 3.0

ReactionDrawing = collections.namedtuple("ReactionDrawing",
	["ops", "reactants", "products", "arrow", "text_above", "text_below"])


#============================================
def _resolve_options(layout_options):
	if layout_options is None:
		return Options()
	if isinstance(layout_options, dict):
		return Options.from_dict(layout_options)
	return layout_options


#============================================
def plus_ops(x, color, op_id):
	"""A plus sign PLUS_SIZE wide with its left end at (x, 0)."""
	half = PLUS_SIZE / 2.0
	return [
		render_ops.LineOp((x, 0.0), (x + PLUS_SIZE, 0.0), width=PLUS_THICKNESS,
			color=color, op_id=op_id),
		render_ops.LineOp((x + half, -half), (x + half, half), width=PLUS_THICKNESS,
			color=color, op_id=op_id + "_v"),
	]


#============================================
def arrow_ops(x1, x2, color):
	"""Line from (x1, 0) and a filled head ending at (x2, 0)."""
	head_length = ARROW_HEAD_SIZE * 1.5
	half = ARROW_HEAD_SIZE / 2.0
	return [
		render_ops.LineOp((x1, 0.0), (x2 - head_length, 0.0), width=ARROW_THICKNESS,
			color=color, op_id="arrow"),
		render_ops.PolygonOp(((x2 - head_length, -half), (x2, 0.0), (x2 - head_length, half)),
			fill=color, op_id="arrowhead"),
	]


#============================================
def reagents_text(reaction, options=None):
	"""Molecular formulas of the reagents, comma separated."""
	return ", ".join(molecular_formula(tree, options) for tree in reaction.reagents)


#============================================
def _molecule_ops(tree, options, theme, x, id_prefix):
	layout = Layout(options).draw(tree)
	ops = render_ops.build_ops(layout, theme)
	bbox = render_ops.ops_bbox(ops)
	if bbox is None:
		return layout, [], 0.0
	x1, y1, x2, y2 = bbox
	ops = render_ops.translate_ops(ops, x - x1, -(y1 + y2) / 2.0, id_prefix=id_prefix)
	return layout, ops, x2 - x1


#============================================
def _side_ops(trees, options, theme, color, x, name, plus_start):
	"""Molecules of one side left to right from x, with plus signs between."""
	layouts = []
	ops = []
	plus_count = plus_start
	for i, tree in enumerate(trees):
		if i > 0:
			ops.extend(plus_ops(x, color, f"plus{plus_count}"))
			plus_count += 1
			x += PLUS_SIZE + SPACING
		layout, molecule_ops, width = _molecule_ops(tree, options, theme, x, f"{name}{i}_")
		layouts.append(layout)
		ops.extend(molecule_ops)
		x += width + SPACING
	return layouts, ops, x, plus_count


#============================================
def reaction_to_ops(reaction, layout_options=None, theme=None, text_above="{reagents}", text_below=""):
	"""Lay out and draw every molecule of a reaction in one row.

	Args:
		reaction: a Reaction or a reaction SMILES string.
		layout_options: Options, dict or None, used for every molecule.
		theme: ThemeManager, theme name or None.
		text_above: text over the arrow; {reagents} is replaced by the
			reagent formulas.
		text_below: text under the arrow.

	Returns:
		ReactionDrawing: ops, the reactant and product layouts, the arrow
		as (x1, x2) on y = 0 and the two arrow texts.

	Raises:
		ValueError: for a malformed reaction SMILES.
	"""
	if isinstance(reaction, str):
		reaction = Reaction(reaction)
	options = _resolve_options(layout_options)
	theme = render_ops.resolve_theme(theme)
	color = render_ops.color_to_hex(theme.get_color("C"))
	font_size = options.font_size_large * 0.8
	text_above = text_above.replace("{reagents}", reagents_text(reaction, options))

	reactants, ops, x, plus_count = _side_ops(reaction.reactants, options, theme, color, 0.0,
		"reactant", 0)

	text_width = max(len(text_above), len(text_below)) * font_size * 0.60
	arrow_length = max(options.bond_length * 4.0, text_width + 2 * SPACING)
	arrow = (x, x + arrow_length)
	ops.extend(arrow_ops(arrow[0], arrow[1], color))
	center = (arrow[0] + arrow[1]) / 2.0
	if text_above:
		ops.append(render_ops.TextOp(x=center, y=-ARROW_HEAD_SIZE / 2.0 - ARROW_TEXT_MARGIN,
			text=text_above, font_size=font_size, font_name=options.font_family,
			color=color, z=3, op_id="text_above"))
	if text_below:
		ops.append(render_ops.TextOp(x=center, y=ARROW_HEAD_SIZE / 2.0 + ARROW_TEXT_MARGIN + font_size,
			text=text_below, font_size=font_size, font_name=options.font_family,
			color=color, z=3, op_id="text_below"))

	products, product_ops, _, _ = _side_ops(reaction.products, options, theme, color,
		arrow[1] + SPACING, "product", plus_count)
	ops.extend(product_ops)
	return ReactionDrawing(ops, reactants, products, arrow, text_above, text_below)
