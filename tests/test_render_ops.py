"""Tests for the drawing ops built from a processed layout."""

# Standard Library
import json
import math

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_smilesdraw_to_sys_path()

# local repo modules
from smilesdraw import render_ops
from smilesdraw import smiles_parser
from smilesdraw.atom import COMPACT_GLYPH
from smilesdraw.layout import Layout


#============================================
def _ops(smiles, **options):
	layout = Layout(options or None).draw(smiles_parser.parse(smiles))
	return layout, render_ops.build_ops(layout)


#============================================
def _ops_of_type(ops, op_type):
	return [op for op in ops if isinstance(op, op_type)]


#============================================
def test_benzene_ops():
	layout, ops = _ops("c1ccccc1")
	lines = _ops_of_type(ops, render_ops.LineOp)
	assert len(lines) == 6
	assert sorted(op.op_id for op in lines) == ["e%d" % i for i in range(6)]
	circles = _ops_of_type(ops, render_ops.CircleOp)
	assert len(circles) == 1
	assert circles[0].op_id == "ring0"
	assert circles[0].z == 1
	texts = _ops_of_type(ops, render_ops.TextOp)
	assert [op.text for op in texts] == [COMPACT_GLYPH] * 6


#============================================
def test_benzene_without_compact_drawing_has_no_text():
	layout, ops = _ops("c1ccccc1", compact_drawing=False)
	assert not _ops_of_type(ops, render_ops.TextOp)


#============================================
def test_terminal_double_bond_is_centered():
	layout, ops = _ops("C=C")
	lines = _ops_of_type(ops, render_ops.LineOp)
	assert len(lines) == 2
	assert lines[0].op_id == "e0"
	assert lines[1].op_id is None
	texts = sorted(op.text for op in _ops_of_type(ops, render_ops.TextOp))
	assert all(text in ("CH2", "H2C") for text in texts)


#============================================
def test_triple_bond_has_three_lines():
	layout, ops = _ops("CC#N")
	edge_ids = {op.op_id for op in ops if op.op_id and op.op_id.startswith("e")}
	assert edge_ids == {"e0", "e1"}
	nitrile_edge = layout.graph.get_edge(1, 2)
	assert nitrile_edge.bond_type == "#"
	assert len(_ops_of_type(ops, render_ops.LineOp)) >= 4


#============================================
def test_heteroatom_label_and_mask():
	layout, ops = _ops("CCO")
	texts = _ops_of_type(ops, render_ops.TextOp)
	assert len(texts) == 1
	assert texts[0].text in ("OH", "HO")
	assert texts[0].color == "#e74c3c"
	assert texts[0].z == 3
	masks = [op for op in _ops_of_type(ops, render_ops.CircleOp) if op.op_id.startswith("mask")]
	assert len(masks) == 1
	assert masks[0].fill == "#ffffff"
	assert masks[0].z == 2


#============================================
def test_gradient_splits_heteroatom_bond():
	layout, ops = _ops("CCO")
	edge = layout.graph.get_edge(1, 2)
	edge_lines = [op for op in _ops_of_type(ops, render_ops.LineOp)
			if op.color in ("#222222", "#e74c3c")]
	colors = {op.color for op in edge_lines}
	assert colors == {"#222222", "#e74c3c"}
	assert edge.bond_type == "-"


#============================================
def test_stereo_center_has_wedge_and_hashes():
	layout, ops = _ops("N[C@@](C)O")
	assert len(_ops_of_type(ops, render_ops.PolygonOp)) == 1
	up = [edge for edge in layout.graph.edges if edge.wedge == "up"][0]
	polygon = _ops_of_type(ops, render_ops.PolygonOp)[0]
	assert polygon.op_id == "e%d" % up.id


#============================================
@pytest.mark.parametrize("charge, expected", [(0, ""), (1, "+"), (-1, "-"), (2, "2+"), (-3, "-3")])
def test_charge_text(charge, expected):
	assert render_ops.charge_text(charge) == expected


#============================================
def test_bracket_label_carries_isotope_and_charge():
	layout, ops = _ops("[13CH3+]")
	texts = _ops_of_type(ops, render_ops.TextOp)
	assert len(texts) == 1
	assert texts[0].text == "13CH3+"


#============================================
def test_sort_ops_is_stable_by_z():
	ops = [
		render_ops.TextOp(x=0, y=0, text="a", font_size=1, z=3),
		render_ops.LineOp((0, 0), (1, 1), width=1, z=0, op_id="first"),
		render_ops.CircleOp(center=(0, 0), radius=1, fill=None, z=1),
		render_ops.LineOp((1, 1), (2, 2), width=1, z=0, op_id="second"),
	]
	ordered = render_ops.sort_ops(ops)
	assert [op.z for op in ordered] == [0, 0, 1, 3]
	assert ordered[0].op_id == "first"
	assert ordered[1].op_id == "second"


#============================================
@pytest.mark.parametrize("color, expected", [
	("#FFF", "#ffffff"),
	("#E74C3C", "#e74c3c"),
	((1.0, 0.0, 0.0), "#ff0000"),
	((0, 128, 255), "#0080ff"),
	("none", "none"),
	(None, None),
])
def test_color_to_hex(color, expected):
	assert render_ops.color_to_hex(color) == expected


#============================================
def test_json_ops_are_sorted_and_tagged():
	layout, ops = _ops("c1ccccc1O")
	data = json.loads(render_ops.ops_to_json_text(ops))
	z_values = [entry["z"] for entry in data]
	assert z_values == sorted(z_values)
	kinds = {entry["kind"] for entry in data}
	assert kinds == {"line", "circle", "text"}
	assert any(entry.get("id") == "ring0" for entry in data)


#============================================
def test_drawing_bbox():
	layout, ops = _ops("CC")
	x1, y1, x2, y2 = render_ops.drawing_bbox(layout)
	assert math.hypot(x2 - x1, y2 - y1) == pytest.approx(30.0, abs=1e-3)
	assert x1 <= x2 and y1 <= y2


#============================================
def test_unknown_theme_is_rejected():
	layout = Layout().draw(smiles_parser.parse("CC"))
	with pytest.raises(ValueError, match="Unknown theme"):
		render_ops.build_ops(layout, "no-such-theme")


#============================================
def test_ops_bbox_covers_every_op_kind():
	ops = [
		render_ops.LineOp((0.0, 0.0), (10.0, 0.0), width=2.0),
		render_ops.PolygonOp(((20.0, -5.0), (25.0, 0.0), (20.0, 5.0)), fill="#000"),
		render_ops.CircleOp((-5.0, 0.0), 3.0, fill=None),
		render_ops.TextOp(x=10.0, y=20.0, text="OH", font_size=10.0),
	]
	assert render_ops.ops_bbox(ops) == pytest.approx((-8.0, -5.0, 25.0, 22.5))
	assert render_ops.ops_bbox([]) is None


#============================================
def test_text_bbox_follows_the_anchor():
	text = render_ops.TextOp(x=0.0, y=0.0, text="NH", font_size=10.0, anchor="start")
	assert render_ops.text_bbox(text) == pytest.approx((0.0, -10.0, 12.0, 2.5))
	end = render_ops.TextOp(x=0.0, y=0.0, text="NH", font_size=10.0, anchor="end")
	assert render_ops.text_bbox(end)[2] == pytest.approx(0.0)


#============================================
def test_translate_ops_moves_and_renames():
	layout, ops = _ops("c1ccccc1O")
	moved = render_ops.translate_ops(ops, 100.0, -50.0, id_prefix="m0_")
	assert len(moved) == len(ops)
	x1, y1, x2, y2 = render_ops.ops_bbox(ops)
	assert render_ops.ops_bbox(moved) == pytest.approx((x1 + 100.0, y1 - 50.0, x2 + 100.0, y2 - 50.0))
	for op, moved_op in zip(ops, moved):
		assert type(moved_op) is type(op)
		if op.op_id:
			assert moved_op.op_id == "m0_" + op.op_id
		else:
			assert moved_op.op_id is None
