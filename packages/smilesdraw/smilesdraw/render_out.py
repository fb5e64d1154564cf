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

# Standard Library
import os

# local repo modules
from . import smiles_parser
from . import svg_out
from .layout import Layout
from .reaction import Reaction


#============================================
def _resolve_format(filename, format_override):
	if format_override:
		output_format = format_override.lower()
		if output_format not in ("svg", "png", "pdf"):
			raise ValueError(f"Unsupported output format: {format_override}")
		return output_format
	extension = os.path.splitext(filename)[1].lower().lstrip(".")
	if extension in ("svg", "png", "pdf"):
		return extension
	raise ValueError(
		"Output format could not be determined; use format=svg|png|pdf or a matching filename."
	)


#============================================
def _apply_svg_options(renderer, options):
	for key, value in options.items():
		if not hasattr(renderer, key):
			raise ValueError(f"Unknown svg_out option: {key}")
		setattr(renderer, key, value)


#============================================
def smiles_to_layout(smiles, layout_options=None):
	"""Parse smiles and return the processed Layout."""
	return Layout(layout_options).draw(smiles_parser.parse(smiles))


#============================================
def layout_to_output(layout, filename, format=None, theme=None, **options):
	"""Render a processed layout to SVG or Cairo-backed output using a single entry point."""
	output_format = _resolve_format(filename, format)
	if output_format == "svg":
		renderer = svg_out.svg_out(theme=theme)
		if options:
			_apply_svg_options(renderer, options)
		doc = renderer.layout_to_svg(layout)
		svg_text = svg_out.pretty_print_svg(doc.toxml("utf-8"))
		with open(filename, "w", encoding="utf-8") as handle:
			handle.write(svg_text)
		return filename
	try:
		from . import cairo_out
	except ImportError as exc:
		raise RuntimeError("Cairo output requires pycairo.") from exc
	cairo_out.layout_to_cairo(layout, filename, format=output_format, theme=theme, **options)
	return filename


#============================================
def smiles_to_output(smiles, filename, format=None, layout_options=None, theme=None, **options):
	"""Parse, lay out and render smiles into filename."""
	layout = smiles_to_layout(smiles, layout_options)
	return layout_to_output(layout, filename, format=format, theme=theme, **options)


#============================================
def reaction_to_output(reaction_smiles, filename, format=None, layout_options=None, theme=None, **options):
	"""Lay out every molecule of a reaction SMILES and render the row into filename.

	Raises:
		ValueError: for a malformed reaction or an unknown format or option.
		RuntimeError: for PNG or PDF output without pycairo.
	"""
	output_format = _resolve_format(filename, format)
	reaction = Reaction(reaction_smiles)
	if output_format == "svg":
		renderer = svg_out.svg_out(theme=theme)
		if options:
			_apply_svg_options(renderer, options)
		doc = renderer.reaction_to_svg(reaction, layout_options=layout_options)
		svg_text = svg_out.pretty_print_svg(doc.toxml("utf-8"))
		with open(filename, "w", encoding="utf-8") as handle:
			handle.write(svg_text)
		return filename
	try:
		from . import cairo_out
	except ImportError as exc:
		raise RuntimeError("Cairo output requires pycairo.") from exc
	cairo_out.reaction_to_cairo(reaction, filename, format=output_format, layout_options=layout_options,
		theme=theme, **options)
	return filename
