"""Smoke tests for SVG, PNG and PDF output."""

# Standard Library
import os

# Third Party
import defusedxml.minidom
import pytest

# Local repo modules
import conftest


conftest.add_smilesdraw_to_sys_path()

# local repo modules
import smilesdraw
from smilesdraw import render_out
from smilesdraw import svg_out


DEFAULT_SMILES = "CC(=O)Oc1ccccc1C(=O)O"


#============================================
def output_path(output_dir, filename):
	return os.path.join(str(output_dir), filename)


#============================================
def _groups_by_id(document):
	return {group.getAttribute("id"): group for group in document.getElementsByTagName("g")
			if group.getAttribute("id")}


#============================================
def test_svg_document_structure():
	layout = render_out.smiles_to_layout(DEFAULT_SMILES)
	document = svg_out.svg_out().layout_to_svg(layout)
	top = document.documentElement
	assert top.tagName == "svg"
	assert top.getAttribute("xmlns") == "http://www.w3.org/2000/svg"
	assert top.getAttribute("viewBox") == "0 0 %s %s" % (top.getAttribute("width"), top.getAttribute("height"))
	groups = _groups_by_id(document)
	assert set(groups) == {"bonds", "rings", "atoms"}
	assert len(groups["rings"].getElementsByTagName("circle")) == 1
	assert groups["bonds"].getElementsByTagName("line")
	assert groups["atoms"].getElementsByTagName("text")


#============================================
def test_svg_callbacks_and_ungrouped_output():
	seen = []
	renderer = svg_out.svg_out(theme="dark")
	renderer.group_items = False
	renderer.show_background = False
	layout = render_out.smiles_to_layout("CCO")
	document = renderer.layout_to_svg(layout, before=seen.append, after=seen.append)
	assert seen == [renderer, renderer]
	assert not document.getElementsByTagName("rect")
	assert not _groups_by_id(document)


#============================================
def test_smiles_to_svg_file(output_dir):
	svg_path = output_path(output_dir, "smilesdraw_aspirin.svg")
	render_out.smiles_to_output(DEFAULT_SMILES, svg_path, theme="light")
	assert os.path.isfile(svg_path)
	with open(svg_path, "r", encoding="utf-8") as handle:
		svg_text = handle.read()
	document = defusedxml.minidom.parseString(svg_text)
	assert document.documentElement.tagName == "svg"
	assert "#e74c3c" in svg_text
	assert "\n\n" not in svg_text


#============================================
def test_layout_to_svg_function(output_dir):
	layout = render_out.smiles_to_layout("c1ccncc1")
	svg_path = output_path(output_dir, "smilesdraw_pyridine.svg")
	svg_out.layout_to_svg(layout, svg_path, theme="oldschool")
	with open(svg_path, "r", encoding="utf-8") as handle:
		svg_text = handle.read()
	assert "#3498db" not in svg_text
	assert "<circle" in svg_text


#============================================
def test_svg_option_is_applied(output_dir):
	svg_path = output_path(output_dir, "smilesdraw_margin.svg")
	render_out.smiles_to_output("CC", svg_path, margin=40)
	document = defusedxml.minidom.parse(svg_path)
	# a horizontal or tilted ethane plus twice the margin
	assert int(document.documentElement.getAttribute("width")) >= 80


#============================================
@pytest.mark.parametrize("filename, format_override", [
	("molecule.txt", None),
	("molecule", None),
	("molecule.svg", "gif"),
])
def test_unknown_output_format(tmp_path, filename, format_override):
	with pytest.raises(ValueError):
		render_out.smiles_to_output("CC", os.path.join(str(tmp_path), filename), format=format_override)


#============================================
def test_unknown_svg_option(tmp_path):
	with pytest.raises(ValueError, match="Unknown svg_out option"):
		render_out.smiles_to_output("CC", os.path.join(str(tmp_path), "x.svg"), line_width=3)


#============================================
def test_invalid_smiles_is_reported(tmp_path):
	with pytest.raises(smilesdraw.SmilesParseError):
		render_out.smiles_to_output("C1CC", os.path.join(str(tmp_path), "x.svg"))


#============================================
def test_smiles_to_png(output_dir):
	if not smilesdraw.CAIRO_AVAILABLE:
		pytest.skip("Cairo backend not available.")
	png_path = output_path(output_dir, "smilesdraw_aspirin.png")
	render_out.smiles_to_output(DEFAULT_SMILES, png_path, scaling=2.0)
	assert os.path.isfile(png_path)
	with open(png_path, "rb") as handle:
		assert handle.read(8) == b"\x89PNG\r\n\x1a\n"


#============================================
def test_smiles_to_pdf(output_dir):
	if not smilesdraw.CAIRO_AVAILABLE:
		pytest.skip("Cairo backend not available.")
	pdf_path = output_path(output_dir, "smilesdraw_caffeine.pdf")
	render_out.smiles_to_output("CN1C=NC2=C1C(=O)N(C(=O)N2C)C", pdf_path, theme="github")
	assert os.path.getsize(pdf_path) > 0


#============================================
def test_unknown_cairo_option(tmp_path):
	if not smilesdraw.CAIRO_AVAILABLE:
		pytest.skip("Cairo backend not available.")
	with pytest.raises(ValueError, match="Unknown cairo_out option"):
		render_out.smiles_to_output("CC", os.path.join(str(tmp_path), "x.png"), line_width=3)


#============================================
def test_reaction_to_svg_file(output_dir):
	svg_path = output_path(output_dir, "smilesdraw_esterification.svg")
	render_out.reaction_to_output("CC(=O)O.OCC>CCO>CC(=O)OCC.O", svg_path, theme="light")
	document = defusedxml.minidom.parse(svg_path)
	top = document.documentElement
	assert top.tagName == "svg"
	ids = {element.getAttribute("id") for element in document.getElementsByTagName("*")
		if element.getAttribute("id")}
	assert {"arrow", "arrowhead", "plus0", "plus1", "text_above"} <= ids
	assert any(element_id.startswith("reactant1_") for element_id in ids)
	assert any(element_id.startswith("product1_") for element_id in ids)
	# four molecules in a row are wider than tall
	assert int(top.getAttribute("width")) > int(top.getAttribute("height"))


#============================================
def test_reaction_svg_function(output_dir):
	svg_path = output_path(output_dir, "smilesdraw_reaction.svg")
	svg_out.reaction_to_svg("CC=C>>CCC", svg_path, theme="dark")
	with open(svg_path, "r", encoding="utf-8") as handle:
		svg_text = handle.read()
	assert 'id="arrowhead"' in svg_text
	assert "#141414" in svg_text


#============================================
def test_malformed_reaction_output_is_rejected(tmp_path):
	with pytest.raises(ValueError, match="exactly two"):
		render_out.reaction_to_output("CC>CC", os.path.join(str(tmp_path), "x.svg"))


#============================================
def test_reaction_to_png(output_dir):
	if not smilesdraw.CAIRO_AVAILABLE:
		pytest.skip("Cairo backend not available.")
	png_path = output_path(output_dir, "smilesdraw_reaction.png")
	render_out.reaction_to_output("CCO>>CC=O", png_path)
	with open(png_path, "rb") as handle:
		assert handle.read(8) == b"\x89PNG\r\n\x1a\n"
