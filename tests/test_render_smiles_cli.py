# Standard Library
import os
import sys

# Third Party
import pytest


TOOLS_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "tools"))
if TOOLS_DIR not in sys.path:
	sys.path.insert(0, TOOLS_DIR)


# local repo modules
import render_smiles


#============================================
def test_render_smiles_cli_svg(tmp_path, capsys):
	output_path = tmp_path / "cli.svg"
	render_smiles.main(["c1ccccc1CO", "-o", str(output_path), "--theme", "github", "--bond-length", "40"])
	assert output_path.is_file()
	with open(output_path, "r", encoding="utf-8") as handle:
		svg_text = handle.read()
	assert "<svg" in svg_text
	assert capsys.readouterr().out.strip() == str(output_path)


#============================================
def test_render_smiles_cli_options():
	args = render_smiles.parse_args(["CC", "--no-isomeric", "--no-explicit-hydrogens", "--experimental-sssr"])
	assert args.output == "molecule.svg"
	assert not args.isomeric
	assert not args.explicit_hydrogens
	assert args.experimental_sssr


#============================================
def test_render_smiles_cli_bad_smiles(tmp_path, capsys):
	with pytest.raises(SystemExit) as excinfo:
		render_smiles.main(["C(C", "-o", str(tmp_path / "bad.svg")])
	assert excinfo.value.code == 1
	assert "Unbalanced parentheses" in capsys.readouterr().err


#============================================
def test_render_smiles_cli_reaction(tmp_path, capsys):
	output_path = tmp_path / "reaction.svg"
	render_smiles.main(["CCO.O>>CC(=O)O", "-o", str(output_path)])
	with open(output_path, "r", encoding="utf-8") as handle:
		svg_text = handle.read()
	assert 'id="arrow"' in svg_text
	assert 'id="reactant1_' in svg_text
	assert capsys.readouterr().out.strip() == str(output_path)


#============================================
def test_render_smiles_cli_bad_reaction(tmp_path, capsys):
	with pytest.raises(SystemExit) as excinfo:
		render_smiles.main(["CC>CC", "-o", str(tmp_path / "bad.svg")])
	assert excinfo.value.code == 1
	assert "exactly two" in capsys.readouterr().err
