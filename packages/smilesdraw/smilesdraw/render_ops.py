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

"""Render ops for shared Cairo/SVG drawing of a finished layout."""

# Standard Library
import collections
import dataclasses
import json
import math

# local repo modules
from . import dom_extensions
from . import geometry
from .edge import WEDGE_DOWN
from .edge import WEDGE_UP
from .line import Line
from .theme import ThemeManager
from .vector2 import Vector2


#============================================
@dataclasses.dataclass(frozen=True)
class LineOp:
	p1: tuple[float, float]
	p2: tuple[float, float]
	width: float
	cap: str = "butt"
	join: str = ""
	color: object | None = None
	z: int = 0
	op_id: str | None = None


#============================================
@dataclasses.dataclass(frozen=True)
class PolygonOp:
	points: tuple[tuple[float, float], ...]
	fill: object | None
	stroke: object | None = None
	stroke_width: float = 0.0
	z: int = 0
	op_id: str | None = None


#============================================
@dataclasses.dataclass(frozen=True)
class CircleOp:
	center: tuple[float, float]
	radius: float
	fill: object | None
	stroke: object | None = None
	stroke_width: float = 0.0
	z: int = 0
	op_id: str | None = None


#============================================
@dataclasses.dataclass(frozen=True)
class TextOp:
	x: float
	y: float
	text: str
	font_size: float
	font_name: str = "sans-serif"
	anchor: str = "middle"
	weight: str = "normal"
	color: object | None = None
	z: int = 0
	op_id: str | None = None


#============================================
@dataclasses.dataclass(frozen=True)
class BondRenderContext:
	layout: object
	theme: ThemeManager
	line_width: float
	bond_spacing: float
	wedge_width: float
	shown_vertices: frozenset = frozenset()
	hydrogen_counts: dict | None = None


#============================================
def _normalize_hex_color(text):
	if text.lower() == "none":
		return "none"
	if not text.startswith("#"):
		return text
	value = text[1:]
	if len(value) == 3:
		value = "".join(ch * 2 for ch in value)
	if len(value) != 6:
		return text
	return "#" + value.lower()


#============================================
def _color_tuple_to_hex(color):
	if len(color) not in (3, 4):
		return None
	values = list(color[:3])
	scale = 255.0 if max(values) <= 1.0 else 1.0
	channels = [max(0, min(int(round(value * scale)), 255)) for value in values]
	return "#%02x%02x%02x" % (channels[0], channels[1], channels[2])


#============================================
def color_to_hex(color):
	"""Return a lowercase #rrggbb string for a hex string or an rgb tuple."""
	if color is None:
		return None
	if isinstance(color, str):
		text = color.strip()
		if not text:
			return None
		return _normalize_hex_color(text)
	if isinstance(color, (tuple, list)):
		return _color_tuple_to_hex(color)
	return None


#============================================
def _color_to_rgba(color):
	text = color_to_hex(color)
	if not text or text == "none" or not text.startswith("#") or len(text) != 7:
		return None
	r = int(text[1:3], 16) / 255.0
	g = int(text[3:5], 16) / 255.0
	b = int(text[5:7], 16) / 255.0
	a = 1.0
	if isinstance(color, (tuple, list)) and len(color) == 4:
		a = min(float(color[3]), 1.0)
	return (r, g, b, a)


#============================================
def sort_ops(ops):
	ordered = []
	for index, op in sorted(enumerate(ops), key=lambda item: (getattr(item[1], "z", 0), item[0])):
		ordered.append(op)
	return ordered


#============================================
def _serialize_number(value, digits):
	if isinstance(value, float):
		return round(value, digits)
	return value


#============================================
def _serialize_list(value, digits):
	return [ _serialize_number(item, digits) for item in value ]


#============================================
def ops_to_json_dict(ops, round_digits=3):
	serialized = []
	for op in sort_ops(ops):
		if isinstance(op, LineOp):
			entry = {
				"kind": "line",
				"p1": _serialize_list(op.p1, round_digits),
				"p2": _serialize_list(op.p2, round_digits),
				"width": _serialize_number(op.width, round_digits),
				"cap": op.cap,
				"join": op.join,
				"color": color_to_hex(op.color),
				"z": op.z,
			}
		elif isinstance(op, PolygonOp):
			entry = {
				"kind": "polygon",
				"points": [ _serialize_list(point, round_digits) for point in op.points ],
				"fill": color_to_hex(op.fill),
				"stroke": color_to_hex(op.stroke),
				"stroke_width": _serialize_number(op.stroke_width, round_digits),
				"z": op.z,
			}
		elif isinstance(op, CircleOp):
			entry = {
				"kind": "circle",
				"center": _serialize_list(op.center, round_digits),
				"radius": _serialize_number(op.radius, round_digits),
				"fill": color_to_hex(op.fill),
				"stroke": color_to_hex(op.stroke),
				"stroke_width": _serialize_number(op.stroke_width, round_digits),
				"z": op.z,
			}
		elif isinstance(op, TextOp):
			entry = {
				"kind": "text",
				"x": _serialize_number(op.x, round_digits),
				"y": _serialize_number(op.y, round_digits),
				"text": op.text,
				"font_size": _serialize_number(op.font_size, round_digits),
				"anchor": op.anchor,
				"color": color_to_hex(op.color),
				"z": op.z,
			}
		else:
			continue
		if op.op_id:
			entry["id"] = op.op_id
		serialized.append(entry)
	return serialized


#============================================
def ops_to_json_text(ops, round_digits=3):
	return json.dumps(ops_to_json_dict(ops, round_digits=round_digits), indent=2, sort_keys=True)


#============================================
def set_cairo_color(context, color):
	rgba = _color_to_rgba(color)
	if not rgba:
		return False
	r, g, b, a = rgba
	if a >= 1.0:
		context.set_source_rgb(r, g, b)
	else:
		context.set_source_rgba(r, g, b, a)
	return True


#============================================
def _svg_paint_attrs(op):
	attrs = (( 'fill', color_to_hex(op.fill) or "none"),)
	stroke = color_to_hex(op.stroke)
	if stroke:
		attrs += (( 'stroke', stroke),
				( 'stroke-width', str(op.stroke_width)))
	else:
		attrs += (( 'stroke', "none"),)
	return attrs


#============================================
def ops_to_svg(parent, ops):
	"""Append one svg element per op under parent, lowest z first."""
	for op in sort_ops(ops):
		if isinstance(op, LineOp):
			attrs = (( 'x1', str(op.p1[0])),
					( 'y1', str(op.p1[1])),
					( 'x2', str(op.p2[0])),
					( 'y2', str(op.p2[1])),
					( 'stroke-width', str(op.width)),
					( 'stroke', color_to_hex(op.color) or "#000"))
			if op.cap:
				attrs += (( 'stroke-linecap', op.cap),)
			if op.join:
				attrs += (( 'stroke-linejoin', op.join),)
			element = dom_extensions.elementUnder(parent, 'line', attrs)
		elif isinstance(op, PolygonOp):
			points_text = " ".join("%s,%s" % (x, y) for x, y in op.points)
			attrs = (( 'points', points_text),) + _svg_paint_attrs(op)
			element = dom_extensions.elementUnder(parent, 'polygon', attrs)
		elif isinstance(op, CircleOp):
			attrs = (( 'cx', str(op.center[0])),
					( 'cy', str(op.center[1])),
					( 'r', str(op.radius))) + _svg_paint_attrs(op)
			element = dom_extensions.elementUnder(parent, 'circle', attrs)
		elif isinstance(op, TextOp):
			attrs = (( 'x', str(op.x)),
					( 'y', str(op.y)),
					( 'font-family', op.font_name),
					( 'font-size', str(op.font_size)),
					( 'text-anchor', op.anchor),
					( 'fill', color_to_hex(op.color) or "#000"),
					( 'stroke', "none"))
			if op.weight != "normal":
				attrs += (( 'font-weight', op.weight),)
			element = dom_extensions.textOnlyElementUnder(parent, 'text', op.text, attrs)
		else:
			continue
		if op.op_id:
			element.setAttribute("id", op.op_id)


#============================================
def _fill_and_stroke_cairo(context, op):
	if op.fill and op.fill != "none":
		if not set_cairo_color(context, op.fill):
			context.set_source_rgb(0, 0, 0)
		if op.stroke:
			context.fill_preserve()
		else:
			context.fill()
	if op.stroke:
		if not set_cairo_color(context, op.stroke):
			context.set_source_rgb(0, 0, 0)
		context.set_line_width(op.stroke_width)
		context.stroke()
	context.new_path()


#============================================
def ops_to_cairo(context, ops):
	"""Paint ops on a pycairo context, lowest z first."""
	for op in sort_ops(ops):
		if isinstance(op, LineOp):
			context.set_line_width(op.width)
			if op.cap == "round":
				context.set_line_cap(1)
			elif op.cap == "square":
				context.set_line_cap(2)
			else:
				context.set_line_cap(0)
			if op.join == "round":
				context.set_line_join(1)
			elif op.join == "bevel":
				context.set_line_join(2)
			else:
				context.set_line_join(0)
			if not set_cairo_color(context, op.color):
				context.set_source_rgb(0, 0, 0)
			context.move_to(op.p1[0], op.p1[1])
			context.line_to(op.p2[0], op.p2[1])
			context.stroke()
			continue
		if isinstance(op, PolygonOp):
			points = list(op.points)
			if not points:
				continue
			context.new_path()
			context.move_to(points[0][0], points[0][1])
			for x, y in points[1:]:
				context.line_to(x, y)
			context.close_path()
			_fill_and_stroke_cairo(context, op)
			continue
		if isinstance(op, CircleOp):
			context.new_path()
			context.arc(op.center[0], op.center[1], op.radius, 0, 2 * math.pi)
			_fill_and_stroke_cairo(context, op)
			continue
		if isinstance(op, TextOp):
			# cairo wants one family name, not a css list
			font_name = op.font_name.split(",")[0].strip()
			context.select_font_face(font_name, 0, 1 if op.weight == "bold" else 0)
			context.set_font_size(op.font_size)
			x = op.x
			advance = context.text_extents(op.text).x_advance
			if op.anchor == "middle":
				x -= advance / 2.0
			elif op.anchor == "end":
				x -= advance
			if not set_cairo_color(context, op.color):
				context.set_source_rgb(0, 0, 0)
			context.move_to(x, op.y)
			context.show_text(op.text)
			context.new_path()


#============================================
def _line_ops(start, end, width, color1, color2, gradient, cap):
	if gradient and color1 and color2 and color1 != color2:
		mid = ((start[0] + end[0]) / 2.0, (start[1] + end[1]) / 2.0)
		return [
			LineOp(start, mid, width=width, cap="butt", color=color1),
			LineOp(mid, end, width=width, cap="butt", color=color2),
		]
	return [LineOp(start, end, width=width, cap=cap, color=color1 or "#000")]


#============================================
def _wedge_ops(start, end, line_width, wedge_width, color):
	"""Solid wedge polygon, narrow at start."""
	x1, y1 = start
	x2, y2 = end
	x, y, x0, y0 = geometry.find_parallel(x1, y1, x2, y2, wedge_width / 2.0)
	xa, ya, xb, yb = geometry.find_parallel(x1, y1, x2, y2, line_width / 2.0)
	points = ((xa, ya), (x0, y0), (2 * x2 - x0, 2 * y2 - y0), (2 * x1 - xa, 2 * y1 - ya))
	return [PolygonOp(points=points, fill=color or "#000")]


#============================================
def _hashed_ops(start, end, line_width, wedge_width, color1, color2, gradient):
	x1, y1 = start
	x2, y2 = end
	d = geometry.point_distance(x1, y1, x2, y2)
	if d == 0:
		return []
	x, y, x0, y0 = geometry.find_parallel(x1, y1, x2, y2, wedge_width / 2.0)
	xa, ya, xb, yb = geometry.find_parallel(x1, y1, x2, y2, line_width / 2.0)
	dx1 = (x0 - xa) / d
	dy1 = (y0 - ya) / d
	dx2 = (2 * x2 - x0 - 2 * x1 + xa) / d
	dy2 = (2 * y2 - y0 - 2 * y1 + ya) / d
	step_size = 2 * line_width
	ns = round(d / step_size) or 1
	step_size = d / ns
	ops = []
	total = int(round(d / step_size)) + 1
	middle = max(1, total // 2)
	for i in range(1, total):
		p1 = (xa + dx1 * i * step_size, ya + dy1 * i * step_size)
		p2 = (2 * x1 - xa + dx2 * i * step_size, 2 * y1 - ya + dy2 * i * step_size)
		color = color1
		if gradient and color2 and i >= middle:
			color = color2
		ops.append(LineOp(p1, p2, width=line_width, cap="butt", color=color))
	return ops


#============================================
def resolve_theme(theme):
	if theme is None:
		return ThemeManager()
	if isinstance(theme, str):
		return ThemeManager(theme_name=theme)
	return theme


#============================================
def _resolve_edge_colors(vertex_a, vertex_b, context):
	color1 = color_to_hex(context.theme.get_color(vertex_a.value.element)) or "#000"
	color2 = color_to_hex(context.theme.get_color(vertex_b.value.element)) or "#000"
	has_shown_vertex = vertex_a.id in context.shown_vertices or vertex_b.id in context.shown_vertices
	if has_shown_vertex and color1 != color2:
		return color1, color2, True
	return color1, color1, False


#============================================
def ring_centroid(ring, vertices):
	"""Mean position of the ring members.

	Stored ring centers do not follow subtree rotations of overlap resolution.
	"""
	total = Vector2(0.0, 0.0)
	for member in ring.members:
		total.add(vertices[member].position)
	return total.divide(len(ring.members))


#============================================
def _parallel_line_ops(line, offset, shorten_by, width, colors):
	color1, color2, gradient = colors
	parallel = Line(Vector2.add_vectors(line.start, offset), Vector2.add_vectors(line.end, offset))
	if shorten_by:
		parallel.shorten(shorten_by)
	return _line_ops(parallel.start.as_tuple(), parallel.end.as_tuple(), width,
			color1, color2, gradient, "round")


#============================================
def _double_bond_ops(edge, vertex_a, vertex_b, context, colors):
	layout = context.layout
	options = layout.options
	vertices = layout.graph.vertices
	line = Line(vertex_a.position, vertex_b.position, vertex_a.value.element, vertex_b.value.element)
	coords = (line.start.x, line.start.y, line.end.x, line.end.y)
	# normals[0] points to the positive side of on_which_side_is_point()
	normals = layout.get_edge_normals(edge)
	shorten_by = options.bond_length - options.short_bond_length * options.bond_length

	side = 0
	ring = None
	if layout.are_vertices_in_same_ring(vertex_a, vertex_b):
		ring = layout.get_largest_or_aromatic_common_ring(vertex_a, vertex_b)
	if ring is not None:
		# rings decide first, the second line goes inside
		side = geometry.on_which_side_is_point(coords, ring_centroid(ring, vertices).as_tuple())
	elif not edge.center and not (vertex_a.is_terminal() and vertex_b.is_terminal()):
		for neighbour_id in vertex_a.get_drawn_neighbours(vertices) + vertex_b.get_drawn_neighbours(vertices):
			if neighbour_id in (vertex_a.id, vertex_b.id):
				continue
			side += geometry.on_which_side_is_point(coords, vertices[neighbour_id].position.as_tuple())

	ops = []
	if side:
		normal = normals[0] if side > 0 else normals[1]
		ops.extend(_line_ops(line.start.as_tuple(), line.end.as_tuple(), context.line_width,
				colors[0], colors[1], colors[2], "round"))
		ops.extend(_parallel_line_ops(line, Vector2.scaled(normal, context.bond_spacing),
				shorten_by, context.line_width, colors))
	else:
		for normal in normals:
			ops.extend(_parallel_line_ops(line, Vector2.scaled(normal, context.bond_spacing / 2.0),
					0, context.line_width, colors))
	return ops


#============================================
def _multiple_bond_ops(vertex_a, vertex_b, context, colors, offsets):
	line = Line(vertex_a.position, vertex_b.position)
	normal = Vector2.units(line.start, line.end)[0]
	ops = []
	for offset in offsets:
		ops.extend(_parallel_line_ops(line, Vector2.scaled(normal, offset * context.bond_spacing),
				0, context.line_width, colors))
	return ops


#============================================
def _edge_ops(edge, context):
	layout = context.layout
	vertices = layout.graph.vertices
	vertex_a = vertices[edge.source_id]
	vertex_b = vertices[edge.target_id]
	if not vertex_a.value.is_drawn or not vertex_b.value.is_drawn:
		return []
	colors = _resolve_edge_colors(vertex_a, vertex_b, context)
	color1, color2, gradient = colors
	start = vertex_a.position.as_tuple()
	end = vertex_b.position.as_tuple()

	if (edge.bond_type == "=" or layout.get_ringbond_type(vertex_a, vertex_b) == "="
			or (edge.is_part_of_aromatic_ring and layout.bridged_ring)):
		ops = _double_bond_ops(edge, vertex_a, vertex_b, context, colors)
	elif edge.bond_type == "#":
		ops = _multiple_bond_ops(vertex_a, vertex_b, context, colors, (0.0, 1 / 1.5, -1 / 1.5))
	elif edge.bond_type == "$":
		ops = _multiple_bond_ops(vertex_a, vertex_b, context, colors, (0.5, -0.5, 1.5, -1.5))
	elif edge.wedge == WEDGE_UP:
		ops = _wedge_ops(start, end, context.line_width, context.wedge_width, color1)
	elif edge.wedge == WEDGE_DOWN:
		ops = _hashed_ops(start, end, context.line_width, context.wedge_width, color1, color2, gradient)
	else:
		ops = _line_ops(start, end, context.line_width, color1, color2, gradient, "round")
	return [dataclasses.replace(op, op_id=f"e{edge.id}" if index == 0 else None)
			for index, op in enumerate(ops)]


#============================================
def _aromatic_ring_ops(context):
	layout = context.layout
	if layout.bridged_ring:
		return []
	options = layout.options
	vertices = layout.graph.vertices
	ops = []
	for ring in layout.rings:
		if not layout.is_ring_aromatic(ring):
			continue
		if any(not vertices[member].value.is_drawn for member in ring.members):
			continue
		radius = geometry.apothem_from_side_length(options.bond_length, ring.get_size()) - context.bond_spacing
		if radius <= 0:
			continue
		ops.append(CircleOp(
			center=ring_centroid(ring, vertices).as_tuple(),
			radius=radius,
			fill=None,
			stroke=color_to_hex(context.theme.get_color("C")),
			stroke_width=context.line_width,
			z=1,
			op_id=f"ring{ring.id}",
		))
	return ops


#============================================
def is_label_shown(layout, vertex, drawn_count):
	"""True when the vertex gets an element label instead of a bare bond junction."""
	atom = vertex.value
	if not atom.is_drawn:
		return False
	if drawn_count < 3:
		return True
	if atom.element != "C" or atom.draw_explicit:
		return True
	if atom.bracket and (atom.bracket.get("charge") or atom.bracket.get("isotope")):
		return True
	return layout.options.terminal_carbons and vertex.is_terminal()


#============================================
def label_hydrogen_count(vertex, hydrogen_counts):
	atom = vertex.value
	if atom.bracket:
		# stereocenter hydrogens are vertices of their own
		if atom.bracket.get("chirality"):
			return 0
		return atom.bracket.get("hcount") or 0
	return hydrogen_counts.get(vertex.id, 0) + atom.get_hydrogen_count()


#============================================
def charge_text(charge):
	if not charge:
		return ""
	if charge == 1:
		return "+"
	if charge == -1:
		return "-"
	if charge > 1:
		return str(charge) + "+"
	return str(charge)


#============================================
def label_text(vertex, vertices, hydrogen_counts):
	"""Element label with hydrogens on the free side, isotope and charge."""
	atom = vertex.value
	hydrogens = label_hydrogen_count(vertex, hydrogen_counts)
	hydrogen_text = ""
	if hydrogens == 1:
		hydrogen_text = "H"
	elif hydrogens > 1:
		hydrogen_text = "H%d" % hydrogens
	if hydrogen_text and vertex.get_text_direction(vertices) == "left":
		text = hydrogen_text + atom.element
	else:
		text = atom.element + hydrogen_text
	if atom.bracket:
		if atom.bracket.get("isotope"):
			text = str(atom.bracket["isotope"]) + text
		text += charge_text(atom.bracket.get("charge") or 0)
	return text


#============================================
def _vertex_ops(vertex, context):
	layout = context.layout
	options = layout.options
	atom = vertex.value
	x, y = vertex.position.as_tuple()
	if vertex.id not in context.shown_vertices:
		if atom.is_drawn and atom.compact_glyph:
			return [TextOp(x=x, y=y + options.font_size_small * 0.35, text=atom.compact_glyph,
					font_size=options.font_size_small, font_name=options.font_family,
					color=color_to_hex(context.theme.get_color("C")), z=3, op_id=f"v{vertex.id}")]
		return []
	vertices = layout.graph.vertices
	text = label_text(vertex, vertices, context.hydrogen_counts)
	font_size = options.font_size_large
	anchor = "middle"
	text_x = x
	if text != atom.element and text.startswith(atom.element):
		anchor = "start"
		text_x = x - font_size * 0.35 * len(atom.element)
	elif text != atom.element and text.endswith(atom.element):
		anchor = "end"
		text_x = x + font_size * 0.35 * len(atom.element)
	return [
		CircleOp(
			center=(x, y),
			radius=font_size * 0.75,
			fill=color_to_hex(context.theme.get_color("BACKGROUND")),
			z=2,
			op_id=f"mask{vertex.id}",
		),
		TextOp(
			x=text_x,
			y=y + font_size * 0.35,
			text=text,
			font_size=font_size,
			font_name=options.font_family,
			anchor=anchor,
			color=color_to_hex(context.theme.get_color(atom.element)),
			z=3,
			op_id=f"v{vertex.id}",
		),
	]


#============================================
def build_context(layout, theme=None):
	options = layout.options
	vertices = layout.graph.vertices
	drawn_count = sum(1 for vertex in vertices if vertex.value.is_drawn)
	shown = frozenset(vertex.id for vertex in vertices if is_label_shown(layout, vertex, drawn_count))
	hydrogen_counts = collections.Counter(parent_id for _, parent_id in layout.implicit_hydrogens)
	return BondRenderContext(
		layout=layout,
		theme=resolve_theme(theme),
		line_width=options.bond_thickness,
		bond_spacing=options.bond_spacing,
		wedge_width=options.bond_spacing,
		shown_vertices=shown,
		hydrogen_counts=dict(hydrogen_counts),
	)


#============================================
def build_ops(layout, theme=None):
	"""Drawing ops for a processed layout, in layout coordinates.

	Args:
		layout: a Layout after process().
		theme: ThemeManager, theme name or None for the default theme.

	Returns:
		list: LineOp, PolygonOp, CircleOp and TextOp instances. Bonds sit at
		z 0, aromatic ring circles at 1, label masks at 2 and text at 3.
	"""
	context = build_context(layout, theme)
	ops = []
	for edge in layout.graph.edges:
		ops.extend(_edge_ops(edge, context))
	ops.extend(_aromatic_ring_ops(context))
	for vertex in layout.graph.vertices:
		ops.extend(_vertex_ops(vertex, context))
	return ops


#============================================
def drawing_bbox(layout):
	"""(x1, y1, x2, y2) of the drawn vertices, or None for an empty drawing."""
	x1, y1, x2, y2 = None, None, None, None
	for vertex in layout.graph.vertices:
		if not vertex.value.is_drawn:
			continue
		x, y = vertex.position.as_tuple()
		if x1 is None or x1 > x:
			x1 = x
		if x2 is None or x2 < x:
			x2 = x
		if y1 is None or y1 > y:
			y1 = y
		if y2 is None or y2 < y:
			y2 = y
	if x1 is None:
		return None
	return (x1, y1, x2, y2)


#============================================
def text_bbox(op):
	"""Approximate (x1, y1, x2, y2) of a TextOp, baseline at op.y."""
	width = len(op.text) * op.font_size * 0.60
	if op.anchor == "middle":
		x_left = op.x - width / 2.0
	elif op.anchor == "end":
		x_left = op.x - width
	else:
		x_left = op.x
	return (x_left, op.y - op.font_size, x_left + width, op.y + op.font_size * 0.25)


#============================================
def ops_bbox(ops):
	"""(x1, y1, x2, y2) around everything ops paint, or None without ops."""
	xs = []
	ys = []
	for op in ops:
		if isinstance(op, LineOp):
			pad = op.width / 2.0
			for x, y in (op.p1, op.p2):
				xs.extend((x - pad, x + pad))
				ys.extend((y - pad, y + pad))
		elif isinstance(op, PolygonOp):
			for x, y in op.points:
				xs.append(x)
				ys.append(y)
		elif isinstance(op, CircleOp):
			cx, cy = op.center
			xs.extend((cx - op.radius, cx + op.radius))
			ys.extend((cy - op.radius, cy + op.radius))
		elif isinstance(op, TextOp):
			x1, y1, x2, y2 = text_bbox(op)
			xs.extend((x1, x2))
			ys.extend((y1, y2))
	if not xs:
		return None
	return (min(xs), min(ys), max(xs), max(ys))


#============================================
def _shift(point, dx, dy):
	return (point[0] + dx, point[1] + dy)


#============================================
def translate_ops(ops, dx, dy, id_prefix=""):
	"""Copies of ops moved by (dx, dy); op ids get id_prefix in front."""
	moved = []
	for op in ops:
		op_id = op.op_id
		if op_id and id_prefix:
			op_id = id_prefix + op_id
		if isinstance(op, LineOp):
			op = dataclasses.replace(op, p1=_shift(op.p1, dx, dy), p2=_shift(op.p2, dx, dy))
		elif isinstance(op, PolygonOp):
			op = dataclasses.replace(op, points=tuple(_shift(point, dx, dy) for point in op.points))
		elif isinstance(op, CircleOp):
			op = dataclasses.replace(op, center=_shift(op.center, dx, dy))
		elif isinstance(op, TextOp):
			op = dataclasses.replace(op, x=op.x + dx, y=op.y + dy)
		moved.append(dataclasses.replace(op, op_id=op_id))
	return moved
