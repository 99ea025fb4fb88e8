"""Interactive edits: rigid segment dragging and component-move propagation."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Sequence, Set, Tuple

import numpy as np

from .geometry import EPSILON, points_equal, segment_direction, snap_to_grid, translate
from .graph import build_graph, graph_to_wire
from .logging_utils import apply_debug_logging
from .model import Layout, Segment, SegmentLookupError, Wire, WireGraph

logger = logging.getLogger(__name__)


def find_nodes_for_segment(graph: WireGraph, segment: Segment) -> Tuple[int, int]:
    """Return the ids of the adjacent nodes sitting on ``segment``'s endpoints."""

    for node in graph.nodes:
        if not points_equal(segment.p0, node.pos):
            continue
        for other_id in node.edges:
            if points_equal(segment.p1, graph.nodes[other_id].pos):
                return node.id, other_id
    raise SegmentLookupError(
        f"Couldn't find node and edge for {segment.p0} -> {segment.p1} in wire {graph.id}"
    )


def _colinear_run(graph: WireGraph, start: int, end: int) -> Set[int]:
    direction = segment_direction(graph.nodes[start].pos, graph.nodes[end].pos)
    run: Set[int] = set()
    stack = [start, end]
    while stack:
        idx = stack.pop()
        if idx in run:
            continue
        run.add(idx)
        node = graph.nodes[idx]
        for other_id in node.edges:
            edge_dir = segment_direction(node.pos, graph.nodes[other_id].pos)
            if edge_dir is None:
                continue
            if abs(float(np.dot(edge_dir, direction))) > 1.0 - EPSILON:
                stack.append(other_id)
    return run


def drag_wire_segment(wire: Wire, segment_index: int, delta: Sequence[float]) -> Wire:
    """Move segment ``segment_index`` by ``delta`` together with its straight run.

    Every node reachable from the segment through edges parallel to it moves
    rigidly and is snapped to the grid; perpendicular bends stay in place and
    stretch to follow. Raises ``SegmentLookupError`` when the segment is not an
    edge of the wire's graph.
    """

    if not 0 <= segment_index < len(wire.segments):
        raise IndexError(f"segment index {segment_index} out of range for wire {wire.id}")

    graph = build_graph(wire)
    start, end = find_nodes_for_segment(graph, wire.segments[segment_index])
    run = _colinear_run(graph, start, end)
    for idx in run:
        node = graph.nodes[idx]
        node.pos = snap_to_grid(translate(node.pos, delta))

    logger.debug("Dragged %d node(s) of wire %s", len(run), wire.id)
    return graph_to_wire(graph)


def move_wires_for_component(layout: Layout, component_index: int, delta: Sequence[float]) -> List[Wire]:
    """Move every wire node bound to a terminal of the component by ``delta``.

    The component itself is not moved. Wires without such nodes are returned
    unchanged.
    """

    if not 0 <= component_index < len(layout.components):
        raise IndexError(
            f"component index {component_index} out of range for {len(layout.components)} components"
        )
    component = layout.components[component_index]
    wires: List[Wire] = []
    for wire in layout.wires:
        graph = build_graph(wire)
        moved = 0
        for node in graph.nodes:
            if node.ref is not None and node.ref.component_id == component.id:
                node.pos = snap_to_grid(translate(node.pos, delta))
                moved += 1
        if moved:
            logger.debug("Moved %d node(s) of wire %s with component %s", moved, wire.id, component.id)
            wires.append(graph_to_wire(graph))
        else:
            wires.append(wire)
    return wires


def move_component(layout: Layout, component_index: int, delta: Sequence[float]) -> Layout:
    """Move a component and the wire endpoints bound to it, returning a new layout."""

    wires = move_wires_for_component(layout, component_index, delta)
    components = list(layout.components)
    component = components[component_index]
    components[component_index] = replace(component, pos=snap_to_grid(translate(component.pos, delta)))
    return replace(layout, components=tuple(components), wires=tuple(wires))


apply_debug_logging(globals(), logger=logger)
