"""Tests for graph construction, bridges, components and subtrees."""

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_smilesdraw_to_sys_path()

# local repo modules
from smilesdraw import smiles_parser
from smilesdraw.graph import Graph
from smilesdraw.layout import Layout


CORPUS = [
	"CCO",
	"CC(C)(C)C",
	"c1ccccc1",
	"c1ccc2ccccc2c1",
	"C1CCC2(CC1)CCCC2",
	"C1CC2CCC1C2",
	"c1ccccc1-c1ccccc1",
	"CC(=O)Oc1ccccc1C(=O)O",
	"C12C3C4C1C5C2C3C45",
	"[Na+].[Cl-]",
]


#============================================
def _graph(smiles):
	return Graph(smiles_parser.parse(smiles))


#============================================
def _closed_graph(smiles):
	layout = Layout({"explicit_hydrogens": False})
	layout.init(smiles_parser.parse(smiles))
	return layout.graph


#============================================
def test_vertices_follow_depth_first_order():
	graph = _graph("CC(=O)N")
	assert [vertex.value.element for vertex in graph.vertices] == ["C", "C", "O", "N"]
	assert graph.get_edge_list() == [(0, 1), (1, 2), (1, 3)]
	assert graph.get_edge(1, 2).bond_type == "="
	assert graph.get_edge(2, 1) is graph.get_edge(1, 2)


#============================================
def test_bond_count_sums_bond_weights():
	graph = _graph("C=CC#N")
	assert [vertex.value.bond_count for vertex in graph.vertices] == [2, 3, 4, 3]


#============================================
def test_aromatic_bonds_are_implicit_between_aromatic_atoms():
	graph = _closed_graph("c1ccccc1")
	assert all(edge.bond_type == ":" for edge in graph.edges)
	assert all(vertex.value.bond_count == pytest.approx(3.0) for vertex in graph.vertices)


#============================================
def test_dot_bond_creates_no_edge():
	graph = _graph("CC.O")
	assert len(graph.vertices) == 3
	assert len(graph.edges) == 1
	assert len(graph.get_connected_components()) == 2


#============================================
def test_chiral_bracket_hydrogen_becomes_vertex():
	graph = _graph("N[C@@H](C)O")
	elements = [vertex.value.element for vertex in graph.vertices]
	assert elements == ["N", "C", "H", "C", "O"]
	assert graph.vertices[1].value.is_stereo_center


#============================================
def test_chain_bridges_are_all_edges():
	graph = _graph("CCCC")
	assert sorted(graph.get_bridges()) == [(0, 1), (1, 2), (2, 3)]


#============================================
def test_ring_edges_are_not_bridges():
	graph = _closed_graph("C1CCCCC1C")
	assert graph.get_bridges() == [(5, 6)]


#============================================
@pytest.mark.parametrize("smiles", CORPUS)
def test_removing_bridges_never_joins_components(smiles):
	graph = _closed_graph(smiles)
	original = Graph.connected_component_count_of(graph.get_adjacency_matrix())
	cut = Graph.connected_component_count_of(graph.get_components_adjacency_matrix())
	assert cut >= original
	assert cut == original + len(graph.get_bridges())


#============================================
def test_get_tree_stops_at_parent():
	graph = _graph("CC(C)CCO")
	assert sorted(graph.get_tree(3, 1)) == [3, 4, 5]
	assert graph.get_tree_depth(3, 1) == 3
	assert graph.get_tree_depth(2, 1) == 1


#============================================
def test_distance_matrix_counts_bonds():
	graph = _graph("CCCC")
	matrix = graph.get_distance_matrix()
	assert matrix[0][3] == 3
	assert matrix[1][2] == 1
	assert matrix[2][2] == 0


#============================================
def test_deep_chain_does_not_recurse():
	graph = _graph("C" * 3000)
	assert len(graph.get_bridges()) == 2999
	assert len(graph.get_tree(1, 0)) == 2999


#============================================
def test_breadth_first_walk_visits_by_distance():
	graph = _graph("CC(C)CO")
	visited = []
	graph.traverse_bf(0, lambda vertex: visited.append(vertex.id))
	assert visited[0] == 0
	assert visited[1] == 1
	assert sorted(visited) == graph.get_vertex_list()
	assert visited[-1] == 4


#============================================
def test_subgraph_adjacency_uses_local_indices():
	graph = _closed_graph("C1CCCCC1")
	adjacency_list = graph.get_subgraph_adjacency_list([0, 1, 5])
	assert adjacency_list == [[1, 2], [0], [0]]
	matrix = graph.get_subgraph_adjacency_matrix([0, 1, 5])
	assert matrix == [[0, 1, 1], [1, 0, 0], [1, 0, 0]]


#============================================
def test_atom_neighbour_bookkeeping():
	graph = _closed_graph("OC1CC1")
	atom = graph.vertices[1].value
	assert atom.neighbouring_elements_equal(["C", "C", "O"])
	assert atom.get_ringbond_count() == 1
	assert atom.have_common_ringbond(atom, graph.vertices[3].value)
	assert not atom.have_common_ringbond(atom, graph.vertices[2].value)
	assert graph.vertices[0].value.is_hetero_atom()
	assert not atom.is_hetero_atom()
	assert atom.get_atomic_number() == 6
	assert graph.vertices[0].value.get_atomic_number() == 8
