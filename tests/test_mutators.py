import pytest

from wirenet.graph import build_graph
from wirenet.model import (
    Component,
    ComponentTerminal,
    Layout,
    Segment,
    SegmentLookupError,
    TerminalRef,
    Wire,
)
from wirenet.mutators import (
    drag_wire_segment,
    find_nodes_for_segment,
    move_component,
    move_wires_for_component,
)
from wirenet.reconcile import apply_edited_wires


def wire(*pairs, wire_id='w'):
    return Wire(wire_id, tuple(Segment(a, b) for a, b in pairs))


def edge_set(w):
    return {frozenset((seg.p0, seg.p1)) for seg in w.segments}


def edges(*pairs):
    return {frozenset(pair) for pair in pairs}


def test_drag_moves_whole_colinear_run_and_keeps_branch_end():
    w = wire(((0, 0), (5, 0)), ((5, 0), (10, 0)), ((5, 0), (5, 5)))

    out = drag_wire_segment(w, 0, (0, 2))

    assert out.id == w.id
    assert edge_set(out) == edges(((0, 2), (5, 2)), ((5, 2), (10, 2)), ((5, 2), (5, 5)))


def test_drag_stops_at_perpendicular_bend():
    w = wire(((0, 0), (5, 0)), ((5, 0), (5, 5)), ((5, 5), (10, 5)))

    out = drag_wire_segment(w, 0, (0, 2))

    assert edge_set(out) == edges(((0, 2), (5, 2)), ((5, 2), (5, 5)), ((5, 5), (10, 5)))


def test_drag_follows_anti_parallel_edges():
    w = wire(((5, 0), (0, 0)), ((5, 0), (10, 0)), ((10, 0), (10, 4)))

    out = drag_wire_segment(w, 0, (0, -1))

    assert edge_set(out) == edges(((0, -1), (5, -1)), ((5, -1), (10, -1)), ((10, -1), (10, 4)))


def test_drag_snaps_moved_nodes_to_grid():
    w = wire(((0, 0), (5, 0)), ((5, 0), (5, 5)))

    out = drag_wire_segment(w, 0, (0.2, 1.6))

    assert edge_set(out) == edges(((0, 2), (5, 2)), ((5, 2), (5, 5)))


def test_drag_leaves_input_wire_untouched():
    w = wire(((0, 0), (5, 0)), ((5, 0), (5, 5)))
    before = w.segments

    drag_wire_segment(w, 1, (3, 0))

    assert w.segments == before


def test_drag_of_segment_missing_from_graph_raises():
    # (0,0)-(10,0) is split at the junction, so it is not a single graph edge
    w = wire(((0, 0), (10, 0)), ((5, 0), (5, 5)))

    with pytest.raises(SegmentLookupError) as exc:
        drag_wire_segment(w, 0, (0, 1))

    assert "Couldn't find node and edge" in str(exc.value)


def test_drag_with_bad_index_raises():
    with pytest.raises(IndexError):
        drag_wire_segment(wire(((0, 0), (5, 0))), 3, (0, 1))


def test_find_nodes_for_segment_accepts_either_direction():
    graph = build_graph(wire(((0, 0), (5, 0)), ((5, 0), (5, 5))))

    start, end = find_nodes_for_segment(graph, Segment((5, 5), (5.0004, 0)))

    assert graph.nodes[start].pos == (5, 5)
    assert graph.nodes[end].pos == (5, 0)


def _resistor_layout():
    r1 = Component('R1', (0, 0), (ComponentTerminal('1', (0, 0)), ComponentTerminal('2', (4, 0))))
    r2 = Component('R2', (20, 0), (ComponentTerminal('1', (0, 0)),))
    bound = Wire(
        'a',
        (
            Segment((4, 0), (8, 0), ref0=TerminalRef('R1', '2')),
            Segment((8, 0), (8, 6)),
        ),
    )
    other = Wire('b', (Segment((20, 0), (20, 6), ref0=TerminalRef('R2', '1')),))
    return Layout(components=(r1, r2), wires=(bound, other), next_wire_id=2)


def test_move_wires_for_component_moves_bound_endpoints_only():
    layout = _resistor_layout()

    wires = move_wires_for_component(layout, 0, (0, 2.7))

    assert edge_set(wires[0]) == edges(((4, 3), (8, 0)), ((8, 0), (8, 6)))
    assert wires[1] is layout.wires[1]
    assert layout.components[0].pos == (0, 0)


def test_move_wires_for_component_keeps_reference_on_moved_endpoint():
    layout = _resistor_layout()

    wires = move_wires_for_component(layout, 0, (0, 3))

    moved = [seg for seg in wires[0].segments if (4, 3) in (seg.p0, seg.p1)]
    assert len(moved) == 1
    seg = moved[0]
    ref = seg.ref0 if seg.p0 == (4, 3) else seg.ref1
    assert ref == TerminalRef('R1', '2')


def test_move_component_updates_component_and_wires():
    layout = _resistor_layout()

    moved = move_component(layout, 0, (0, 3))

    assert moved.components[0].pos == (0, 3)
    assert moved.components[1] is layout.components[1]
    assert edge_set(moved.wires[0]) == edges(((4, 3), (8, 0)), ((8, 0), (8, 6)))
    assert moved.next_wire_id == layout.next_wire_id
    assert layout.components[0].pos == (0, 0)


def test_binding_survives_move_and_reconcile():
    moved = move_component(_resistor_layout(), 0, (0, 3))

    result = apply_edited_wires(moved, moved.wires, 0)

    refs = {}
    for seg in result.wires[0].segments:
        refs[seg.p0] = seg.ref0
        refs[seg.p1] = seg.ref1
    assert refs[(4, 3)] == TerminalRef('R1', '2')
    assert refs[(8, 0)] is None


@pytest.mark.parametrize('index', [-1, 2])
def test_move_with_bad_component_index_raises(index):
    layout = _resistor_layout()

    with pytest.raises(IndexError):
        move_wires_for_component(layout, index, (0, 1))
    with pytest.raises(IndexError):
        move_component(layout, index, (0, 1))
