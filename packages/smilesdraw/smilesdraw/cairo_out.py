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

"""PNG and PDF writer for finished layouts, drawn with pycairo."""

# Standard Library
import math

# Third Party
import cairo

# local repo modules
from . import reaction_ops
from . import render_ops


DEFAULT_OPTIONS = {
	"scaling": 1.0,
	"margin": 15,
	"antialias": True,
}


#============================================
def _create_surface(filename, output_format, width, height):
	if output_format == "png":
		return cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)
	if output_format == "pdf":
		return cairo.PDFSurface(filename, width, height)
	raise ValueError(f"Unknown cairo output format: {output_format}")


#============================================
def _settings(options):
	settings = dict(DEFAULT_OPTIONS)
	for key, value in options.items():
		if key not in settings:
			raise ValueError(f"Unknown cairo_out option: {key}")
		settings[key] = value
	return settings


#============================================
def ops_to_cairo_file(ops, bbox, filename, format="png", theme=None, **options):
	"""Paint ops into filename as PNG or PDF, cropped to bbox plus the margin.

	Raises:
		ValueError: for an unknown option or output format.
	"""
	settings = _settings(options)
	scaling = settings["scaling"]
	margin = settings["margin"]
	theme = render_ops.resolve_theme(theme)

	x1, y1, x2, y2 = bbox or (0.0, 0.0, 0.0, 0.0)
	width = int(math.ceil((x2 - x1 + 2 * margin) * scaling))
	height = int(math.ceil((y2 - y1 + 2 * margin) * scaling))
	surface = _create_surface(filename, format, width, height)
	context = cairo.Context(surface)
	if not settings["antialias"]:
		context.set_antialias(cairo.ANTIALIAS_NONE)

	background = render_ops.color_to_hex(theme.get_color("BACKGROUND"))
	if not render_ops.set_cairo_color(context, background):
		context.set_source_rgb(1, 1, 1)
	context.rectangle(0, 0, width, height)
	context.fill()

	context.scale(scaling, scaling)
	context.translate(-x1 + margin, -y1 + margin)
	render_ops.ops_to_cairo(context, ops)
	context.show_page()
	if format == "png":
		surface.write_to_png(filename)
	surface.finish()
	return filename


#============================================
def layout_to_cairo(layout, filename, format="png", theme=None, **options):
	"""Draw layout into filename as PNG or PDF.

	Recognized options are the keys of DEFAULT_OPTIONS; the picture is
	cropped to the drawn atoms plus the margin.

	Raises:
		ValueError: for an unknown option or output format.
	"""
	settings = _settings(options)
	settings["margin"] = max(settings["margin"], layout.options.padding)
	theme = render_ops.resolve_theme(theme)
	ops = render_ops.build_ops(layout, theme)
	bbox = render_ops.drawing_bbox(layout)
	return ops_to_cairo_file(ops, bbox, filename, format=format, theme=theme, **settings)


#============================================
def reaction_to_cairo(reaction, filename, format="png", layout_options=None, theme=None, **options):
	"""Draw a Reaction or reaction SMILES into filename as PNG or PDF."""
	theme = render_ops.resolve_theme(theme)
	drawing = reaction_ops.reaction_to_ops(reaction, layout_options=layout_options, theme=theme)
	bbox = render_ops.ops_bbox(drawing.ops)
	return ops_to_cairo_file(drawing.ops, bbox, filename, format=format, theme=theme, **options)
