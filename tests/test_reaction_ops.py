"""Tests for drawing a reaction as one row of molecules, plus signs and an arrow."""

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_smilesdraw_to_sys_path()

# local repo modules
from smilesdraw import reaction_ops
from smilesdraw import render_ops
from smilesdraw.reaction import Reaction


ESTERIFICATION = "CC(=O)O.OCC>CCO>CC(=O)OCC.O"


#============================================
def _ops_with_prefix(ops, prefix):
	return [op for op in ops if op.op_id and op.op_id.startswith(prefix)]


#============================================
def _op_by_id(ops, op_id):
	matches = [op for op in ops if op.op_id == op_id]
	assert len(matches) == 1
	return matches[0]


#============================================
def test_reaction_is_drawn_left_to_right():
	drawing = reaction_ops.reaction_to_ops(ESTERIFICATION)
	assert len(drawing.reactants) == 2
	assert len(drawing.products) == 2
	arrow_start, arrow_end = drawing.arrow
	assert arrow_end > arrow_start

	first = render_ops.ops_bbox(_ops_with_prefix(drawing.ops, "reactant0_"))
	second = render_ops.ops_bbox(_ops_with_prefix(drawing.ops, "reactant1_"))
	assert first[2] < second[0]
	assert second[2] <= arrow_start + 1e-6
	products = render_ops.ops_bbox(_ops_with_prefix(drawing.ops, "product"))
	assert products[0] >= arrow_end - 1e-6


#============================================
def test_plus_signs_sit_between_molecules_of_one_side():
	drawing = reaction_ops.reaction_to_ops(ESTERIFICATION)
	ids = {op.op_id for op in drawing.ops if op.op_id}
	assert {"plus0", "plus0_v", "plus1", "plus1_v"} <= ids
	assert "plus2" not in ids
	plus = _op_by_id(drawing.ops, "plus0")
	assert isinstance(plus, render_ops.LineOp)
	assert plus.p1[1] == 0.0 and plus.p2[1] == 0.0
	assert plus.p2[0] <= drawing.arrow[0]
	product_plus = _op_by_id(drawing.ops, "plus1")
	assert product_plus.p1[0] >= drawing.arrow[1]


#============================================
def test_arrow_and_reagent_text():
	drawing = reaction_ops.reaction_to_ops(ESTERIFICATION)
	arrow_start, arrow_end = drawing.arrow
	line = _op_by_id(drawing.ops, "arrow")
	head = _op_by_id(drawing.ops, "arrowhead")
	assert isinstance(line, render_ops.LineOp)
	assert isinstance(head, render_ops.PolygonOp)
	assert line.p1 == (arrow_start, 0.0)
	assert (arrow_end, 0.0) in head.points

	assert drawing.text_above == "C2H6O"
	text = _op_by_id(drawing.ops, "text_above")
	assert isinstance(text, render_ops.TextOp)
	assert text.text == "C2H6O"
	assert text.y < 0.0
	assert text.x == pytest.approx((arrow_start + arrow_end) / 2.0)
	assert not _ops_with_prefix(drawing.ops, "text_below")


#============================================
def test_reaction_without_reagents_has_a_plain_arrow():
	drawing = reaction_ops.reaction_to_ops(Reaction("CC>>C=C"))
	assert drawing.text_above == ""
	assert not _ops_with_prefix(drawing.ops, "text_above")
	arrow_start, arrow_end = drawing.arrow
	assert arrow_end - arrow_start == pytest.approx(4 * 30.0)
	assert not _ops_with_prefix(drawing.ops, "plus")


#============================================
def test_arrow_grows_with_long_reagent_text():
	drawing = reaction_ops.reaction_to_ops("CC>CCO.CCCCCCCCCC.CCN.O>CC", text_below="reflux")
	text = _op_by_id(drawing.ops, "text_above")
	x1, _, x2, _ = render_ops.text_bbox(text)
	arrow_start, arrow_end = drawing.arrow
	assert arrow_end - arrow_start > 4 * 30.0
	assert arrow_start < x1 and x2 < arrow_end
	below = _op_by_id(drawing.ops, "text_below")
	assert below.text == "reflux"
	assert below.y > 0.0


#============================================
def test_molecules_are_centered_on_the_arrow_line():
	drawing = reaction_ops.reaction_to_ops("CCCCCC>>c1ccccc1")
	for prefix in ("reactant0_", "product0_"):
		x1, y1, x2, y2 = render_ops.ops_bbox(_ops_with_prefix(drawing.ops, prefix))
		assert y1 < 0.0 < y2


#============================================
def test_malformed_reaction_is_rejected():
	with pytest.raises(ValueError, match="exactly two"):
		reaction_ops.reaction_to_ops("CC>CC")
