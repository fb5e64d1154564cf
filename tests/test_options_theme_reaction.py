"""Tests for options, color themes and reaction SMILES."""

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_smilesdraw_to_sys_path()

# local repo modules
from smilesdraw import theme
from smilesdraw.layout import Layout
from smilesdraw.options import Options
from smilesdraw.reaction import Reaction
from smilesdraw.reaction import parse_reaction


#============================================
def test_option_defaults():
	options = Options()
	assert options.bond_length == 30
	assert options.overlap_sensitivity == 0.42
	assert options.overlap_resolution_iterations == 1
	assert options.isomeric
	assert options.explicit_hydrogens
	assert options.compact_drawing
	assert not options.experimental_sssr
	assert options.half_bond_spacing == pytest.approx(options.bond_spacing / 2.0)


#============================================
def test_options_accept_camel_case():
	options = Options.from_dict({"bondLength": 40, "experimentalSSSR": True, "overlap_sensitivity": 0.1})
	assert options.bond_length == 40
	assert options.bond_length_sq == 1600
	assert options.experimental_sssr
	assert options.overlap_sensitivity == 0.1


#============================================
def test_unknown_option_is_rejected():
	with pytest.raises(ValueError, match="Unknown option: bondColour"):
		Options.from_dict({"bondColour": "red"})


#============================================
def test_layout_takes_options_dict():
	layout = Layout({"compactDrawing": False})
	assert isinstance(layout.options, Options)
	assert not layout.options.compact_drawing
	assert Layout().options == Options()


#============================================
def test_theme_lookup():
	manager = theme.ThemeManager()
	assert manager.theme_name == theme.DEFAULT_THEME
	assert manager.get_color("Cl") == "#16a085"
	assert manager.get_color("o") == "#e74c3c"
	# unknown elements fall back to carbon
	assert manager.get_color("Xe") == manager.get_color("C")


#============================================
def test_theme_switch():
	manager = theme.ThemeManager(theme_name="dark")
	assert manager.get_color("BACKGROUND") == "#141414"
	manager.set_theme("oldschool")
	assert manager.get_color("O") == "#000"
	with pytest.raises(ValueError):
		manager.set_theme("neon")
	assert manager.theme_name == "oldschool"


#============================================
@pytest.mark.parametrize("name", sorted(theme.THEMES))
def test_every_theme_has_the_base_keys(name):
	assert {"C", "O", "N", "H", "BACKGROUND"} <= set(theme.THEMES[name])


#============================================
def test_reaction_sides():
	reaction = Reaction("CCO.O>[H+]>CC=O")
	assert reaction.reactants_smiles == ["CCO", "O"]
	assert reaction.reagents_smiles == ["[H+]"]
	assert reaction.products_smiles == ["CC=O"]
	assert len(reaction.reactants) == 2
	assert reaction.products[0]["atom"] == "C"
	assert repr(reaction) == "Reaction(CCO.O>[H+]>CC=O)"


#============================================
def test_reaction_with_empty_sides():
	reaction = parse_reaction(">>CC")
	assert reaction.reactants == []
	assert reaction.reagents == []
	assert len(reaction.products) == 1


#============================================
@pytest.mark.parametrize("text", ["CC", "CC>CC", "C>C>C>C"])
def test_reaction_needs_two_separators(text):
	with pytest.raises(ValueError, match="two '>' separators"):
		Reaction(text)
