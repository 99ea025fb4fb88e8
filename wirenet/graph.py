"""Conversion between a wire's segment list and its node/edge graph."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .config import get_config
from .geometry import PositionKey, is_interior_attached, parametric_position, position_key
from .model import Point, Segment, TerminalRef, Wire, WireGraph, WireGraphNode

logger = logging.getLogger(__name__)


class _NodeArena:
    """Position-keyed node allocator owned by a single graph build."""

    def __init__(self, decimals: int):
        self.decimals = decimals
        self.nodes: List[WireGraphNode] = []
        self._by_key: Dict[PositionKey, int] = {}

    def get(self, pos: Point, ref: Optional[TerminalRef] = None) -> WireGraphNode:
        key = position_key(pos, self.decimals)
        idx = self._by_key.get(key)
        if idx is None:
            idx = len(self.nodes)
            self._by_key[key] = idx
            self.nodes.append(WireGraphNode(id=idx, pos=pos))
        node = self.nodes[idx]
        if node.ref is None:
            node.ref = ref
        return node


def _link(a: WireGraphNode, b: WireGraphNode) -> None:
    if a.id == b.id or b.id in a.edges:
        return
    a.edges.append(b.id)
    b.edges.append(a.id)


def _points_on_segment(
    index: int, segments: Sequence[Segment], arena: _NodeArena
) -> List[Tuple[float, WireGraphNode]]:
    seg = segments[index]
    on_line = [(0.0, arena.get(seg.p0, seg.ref0)), (1.0, arena.get(seg.p1, seg.ref1))]
    for other_index, other in enumerate(segments):
        if other_index == index:
            continue
        for pt in (other.p0, other.p1):
            if is_interior_attached(seg, pt):
                on_line.append((parametric_position(seg.p0, seg.p1, pt), arena.get(pt)))
    # list.sort is stable, endpoints keep their place on ties
    on_line.sort(key=lambda item: item[0])
    return on_line


def build_graph(wire: Wire) -> WireGraph:
    """Build the planar graph of ``wire``.

    Each segment becomes a chain of edges broken at every endpoint of another
    segment that touches its interior, so T-junctions turn into nodes.
    """

    arena = _NodeArena(get_config().key_decimals)
    segments = wire.segments
    for index in range(len(segments)):
        chain = _points_on_segment(index, segments, arena)
        for (_, node_a), (_, node_b) in zip(chain, chain[1:]):
            _link(node_a, node_b)

    graph = WireGraph(id=wire.id, nodes=arena.nodes)
    logger.debug(
        "Built graph for wire %s: %d segments -> %d nodes, %d edges",
        wire.id,
        len(segments),
        len(graph.nodes),
        graph.edge_count(),
    )
    return graph


def graph_to_wire(graph: WireGraph) -> Wire:
    """Serialize ``graph`` back to a wire, one segment per undirected edge."""

    segments: List[Segment] = []
    for node in graph.nodes:
        for other_id in node.edges:
            other = graph.nodes[other_id]
            if other.id > node.id:
                segments.append(Segment(node.pos, other.pos, node.ref, other.ref))
    return Wire(id=graph.id, segments=tuple(segments))
