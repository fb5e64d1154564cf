"""Tests for fused, spiro and bridged ring classification."""

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_smilesdraw_to_sys_path()

# local repo modules
from smilesdraw import smiles_parser
from smilesdraw.layout import Layout


#============================================
def _draw(smiles):
	return Layout().draw(smiles_parser.parse(smiles))


#============================================
def test_benzene_is_a_plain_aromatic_ring():
	layout = _draw("c1ccccc1")
	assert layout.get_ring_count() == 1
	ring = layout.rings[0]
	assert ring.get_size() == 6
	assert not (ring.is_fused or ring.is_spiro or ring.is_bridged)
	assert layout.is_ring_aromatic(ring)
	assert layout.ring_connections == []
	for member in ring.members:
		atom = layout.graph.vertices[member].value
		assert atom.is_part_of_aromatic_ring
		assert atom.bond_count == 3.0


#============================================
def test_naphthalene_rings_are_fused():
	layout = _draw("c1ccc2ccccc2c1")
	assert layout.get_ring_count() == 2
	assert all(ring.is_fused for ring in layout.rings)
	assert not any(ring.is_spiro or ring.is_bridged for ring in layout.rings)
	assert len(layout.ring_connections) == 1
	shared = sorted(layout.ring_connections[0].vertices)
	assert len(shared) == 2
	assert layout.graph.has_edge(*shared)
	assert not layout.has_bridged_ring()
	assert len(layout.get_fused_rings()) == 2


#============================================
def test_spiro_rings_share_one_atom():
	layout = _draw("C1CCC2(CC1)CCCC2")
	assert sorted(ring.get_size() for ring in layout.rings) == [5, 6]
	assert all(ring.is_spiro for ring in layout.rings)
	assert not any(ring.is_fused or ring.is_bridged for ring in layout.rings)
	assert len(layout.ring_connections[0].vertices) == 1
	assert len(layout.get_spiros()) == 2


#============================================
def test_norbornane_is_bridged():
	layout = _draw("C1CC2CCC1C2")
	assert layout.has_bridged_ring()
	assert layout.get_ring_count() == 2
	assert all(ring.is_bridged for ring in layout.rings)
	assert len(layout.ring_connections[0].vertices) == 3
	assert len(layout.get_bridged_rings()) == 2


#============================================
def test_separate_rings_are_not_connected():
	layout = _draw("c1ccccc1-c1ccccc1")
	assert layout.get_ring_count() == 2
	assert layout.ring_connections == []
	assert not any(ring.is_fused or ring.is_spiro or ring.is_bridged for ring in layout.rings)
	assert set(layout.rings[0].neighbours) == set()


#============================================
def test_ring_info_lines():
	layout = _draw("c1ccc2ccccc2c1")
	lines = layout.print_ring_info().splitlines()
	assert len(lines) == 2
	assert lines[0].split(";")[1:6] == ["6", "1", "false", "true", "false"]


#============================================
def test_ring_neighbours_are_symmetric():
	layout = _draw("c1ccc2cc3ccccc3cc2c1")
	by_id = {ring.id: ring for ring in layout.rings}
	for ring in layout.rings:
		for neighbour_id in ring.neighbours:
			assert ring.id in by_id[neighbour_id].neighbours


#============================================
def test_ring_between_two_spiro_atoms_is_not_spiro():
	layout = _draw("C1CCC2(CC1)CCC1(CCCC1)CC2")
	assert layout.get_ring_count() == 3
	assert len(layout.ring_connections) == 2
	assert all(len(rc.vertices) == 1 for rc in layout.ring_connections)
	middle = [ring for ring in layout.rings if len(ring.neighbours) == 2]
	outer = [ring for ring in layout.rings if len(ring.neighbours) == 1]
	assert len(middle) == 1
	assert len(outer) == 2
	assert not middle[0].is_spiro
	assert not (middle[0].is_fused or middle[0].is_bridged)
	assert all(ring.is_spiro for ring in outer)
	assert len(layout.get_spiros()) == 2


#============================================
def _ring_state(layout):
	memberships = [list(vertex.value.rings) for vertex in layout.graph.vertices]
	connections = sorted((rc.id, rc.first_ring_id, rc.second_ring_id, sorted(rc.vertices))
		for rc in layout.ring_connections)
	return memberships, connections


#============================================
@pytest.mark.parametrize("smiles", ["C1C2CC3CC1CC(C2)C3", "C1CC2CC1C1CCCC21"])
def test_bridged_merge_is_undone_after_positioning(smiles, monkeypatch):
	captured = []
	create_bridged_ring = Layout.create_bridged_ring

	def _capture_then_merge(layout, ring_ids):
		if not captured:
			captured.append(_ring_state(layout))
		return create_bridged_ring(layout, ring_ids)

	monkeypatch.setattr(Layout, "create_bridged_ring", _capture_then_merge)
	layout = Layout().init(smiles_parser.parse(smiles))
	assert captured
	memberships, connections = captured[0]
	merged_memberships, merged_connections = _ring_state(layout)
	assert merged_memberships[:len(memberships)] != memberships
	assert merged_connections != connections
	assert layout.get_bridged_rings()

	layout.process()
	restored_memberships, restored_connections = _ring_state(layout)
	assert restored_memberships[:len(memberships)] == memberships
	assert restored_connections == connections
	assert all(not ring.rings for ring in layout.rings)
