"""Tests for smallest set of smallest rings perception."""

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_smilesdraw_to_sys_path()

# local repo modules
from smilesdraw import smiles_parser
from smilesdraw import sssr
from smilesdraw.graph import Graph
from smilesdraw.layout import Layout


RING_CORPUS = [
	("c1ccccc1", 1),
	("C1CCCCC1CC", 1),
	("c1ccc2ccccc2c1", 2),
	("c1ccc2cc3ccccc3cc2c1", 3),
	("C1CCC2(CC1)CCCC2", 2),
	("C1CC2CCC1C2", 2),
	("c1ccccc1-c1ccccc1", 2),
	("CC(=O)Oc1ccccc1C(=O)O", 1),
	("C1CC1C1CC1", 2),
	("O=C1CCC(=O)N1", 1),
]


#============================================
def _init_layout(smiles, **options):
	options.setdefault("explicit_hydrogens", False)
	layout = Layout(options)
	layout.init(smiles_parser.parse(smiles))
	return layout


#============================================
@pytest.mark.parametrize("smiles, expected", RING_CORPUS)
def test_ring_count_matches_cycle_rank(smiles, expected):
	layout = _init_layout(smiles)
	graph = layout.graph
	rings = sssr.get_rings(graph)
	components = Graph.connected_component_count_of(graph.get_adjacency_matrix())
	assert len(rings) == len(graph.edges) - len(graph.vertices) + components
	assert len(rings) == expected


#============================================
@pytest.mark.parametrize("smiles, expected", RING_CORPUS)
def test_no_ring_is_a_strict_superset_of_another(smiles, expected):
	rings = [set(ring) for ring in sssr.get_rings(_init_layout(smiles).graph)]
	for ring_a in rings:
		for ring_b in rings:
			assert not ring_a > ring_b


#============================================
@pytest.mark.parametrize("smiles", ["C", "CCCC", "CC(C)(C)C(=O)O", "C=CC=C", "[Na+].[Cl-]"])
def test_acyclic_graphs_have_no_rings(smiles):
	layout = _init_layout(smiles)
	assert not sssr.get_rings(layout.graph)
	assert layout.rings == []


#============================================
def test_rings_are_smallest():
	rings = sssr.get_rings(_init_layout("c1ccc2ccccc2c1").graph)
	assert sorted(len(ring) for ring in rings) == [6, 6]
	rings = sssr.get_rings(_init_layout("C1CC2CCC1C2").graph)
	assert sorted(len(ring) for ring in rings) == [5, 5]


#============================================
def test_hydrogens_do_not_change_rings():
	with_h = _init_layout("C1CCCCC1", explicit_hydrogens=True)
	without_h = _init_layout("C1CCCCC1")
	assert [ring.members for ring in with_h.rings] == [ring.members for ring in without_h.rings]
	assert len(with_h.graph.vertices) == 18


#============================================
def test_experimental_mode_keeps_smallest_rings():
	layout = _init_layout("c1ccc2ccccc2c1", experimental_sssr=True)
	assert len(layout.rings) >= 2
	assert all(len(ring.members) == 6 for ring in layout.rings)


#============================================
def test_matrix_to_string():
	assert sssr.matrix_to_string([[0, 1], [1, 0]]) == "0 1 \n1 0 \n"
