"""Tests for the SMILES reader and its parse tree shape."""

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_smilesdraw_to_sys_path()

# local repo modules
from smilesdraw import smiles_parser


#============================================
def _chain(node):
	nodes = []
	while node is not None:
		nodes.append(node)
		node = node["next"]
	return nodes


#============================================
def test_simple_chain_links_next_nodes():
	root = smiles_parser.parse("CCO")
	nodes = _chain(root)
	assert [node["atom"] for node in nodes] == ["C", "C", "O"]
	assert [node["hasNext"] for node in nodes] == [True, True, False]
	assert all(node["bond"] is None for node in nodes)


#============================================
def test_written_bond_is_stored_before_next():
	root = smiles_parser.parse("C=C#N")
	nodes = _chain(root)
	assert nodes[0]["bond"] == "="
	assert nodes[1]["bond"] == "#"
	assert nodes[2]["bond"] is None


#============================================
def test_branches_and_branch_bond():
	root = smiles_parser.parse("CC(=O)O")
	second = root["next"]
	assert second["branchCount"] == 1
	branch = second["branches"][0]
	assert branch["atom"] == "O"
	assert branch["branchBond"] == "="
	assert second["next"]["atom"] == "O"


#============================================
def test_ring_bond_ids_are_kept_in_order():
	root = smiles_parser.parse("C1CC1C2CC2")
	nodes = _chain(root)
	ids = [[ringbond["id"] for ringbond in node["ringbonds"]] for node in nodes]
	assert ids == [[1], [], [1], [2], [], [2]]
	assert nodes[0]["ringbondCount"] == 1


#============================================
def test_ring_bond_reuse_and_percent_ids():
	root = smiles_parser.parse("C1CC1C1CC1")
	assert [len(node["ringbonds"]) for node in _chain(root)] == [1, 0, 1, 1, 0, 1]
	root = smiles_parser.parse("C%12CCCC%12")
	assert root["ringbonds"] == [{"id": 12, "bond": None}]


#============================================
def test_ring_bond_with_bond_symbol():
	root = smiles_parser.parse("C=1CCCCC1")
	assert root["ringbonds"] == [{"id": 1, "bond": "="}]
	assert root["bond"] is None


#============================================
def test_bracket_atom_fields():
	root = smiles_parser.parse("[13CH3+:7]")
	atom = root["atom"]
	assert atom["element"] == "C"
	assert atom["isotope"] == 13
	assert atom["hcount"] == 3
	assert atom["charge"] == 1
	assert atom["class"] == 7
	assert atom["chirality"] is None


#============================================
@pytest.mark.parametrize("smiles, charge", [
	("[O-]", -1),
	("[Fe++]", 2),
	("[Fe+3]", 3),
	("[N--]", -2),
])
def test_bracket_charges(smiles, charge):
	assert smiles_parser.parse(smiles)["atom"]["charge"] == charge


#============================================
def test_bracket_chirality_and_elements():
	root = smiles_parser.parse("N[C@@H](C)C(=O)O")
	atom = root["next"]["atom"]
	assert atom["chirality"] == "@@"
	assert atom["hcount"] == 1
	assert smiles_parser.parse("[Cl-]")["atom"]["element"] == "Cl"
	assert smiles_parser.parse("[nH]1cccc1")["atom"]["element"] == "n"
	assert smiles_parser.parse("[C@TH1](F)(Cl)(Br)I")["atom"]["chirality"] == "@TH1"


#============================================
def test_aromatic_and_two_letter_organic_atoms():
	root = smiles_parser.parse("c1ccccc1Cl")
	atoms = [node["atom"] for node in _chain(root)]
	assert atoms == ["c", "c", "c", "c", "c", "c", "Cl"]
	assert smiles_parser.parse("BrCBr")["atom"] == "Br"


#============================================
def test_dot_is_kept_as_bond():
	root = smiles_parser.parse("[Na+].[Cl-]")
	assert root["bond"] == "."
	assert root["next"]["atom"]["element"] == "Cl"


#============================================
@pytest.mark.parametrize("smiles, message", [
	("", "Empty SMILES"),
	("CC)", "Unbalanced parentheses"),
	("CC(C", "Unbalanced parentheses"),
	("C1CC", "Ring bond 1 is never closed"),
	("CC=", "without a following atom"),
	("C?C", "Unexpected character"),
	("[Xx]", "Unknown element"),
	("[CH4", "Unterminated bracket atom"),
])
def test_parse_errors(smiles, message):
	with pytest.raises(smiles_parser.SmilesParseError, match=message):
		smiles_parser.parse(smiles)


#============================================
def test_parse_error_is_value_error_with_position():
	with pytest.raises(ValueError) as excinfo:
		smiles_parser.parse("CC)")
	assert excinfo.value.position == 2
	assert "at position 2" in str(excinfo.value)
