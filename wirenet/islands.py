"""Connected-component analysis of wire graphs."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Set

from .model import WireGraph, WireGraphNode

logger = logging.getLogger(__name__)


def repack_graph_ids(graph: WireGraph) -> WireGraph:
    """Renumber node ids to ``0..n-1`` in list order and rewrite every edge."""

    id_map: Dict[int, int] = {node.id: new_id for new_id, node in enumerate(graph.nodes)}
    nodes = [
        replace(node, id=id_map[node.id], edges=[id_map[edge] for edge in node.edges])
        for node in graph.nodes
    ]
    return replace(graph, nodes=nodes)


def _collect_island(graph: WireGraph, start: WireGraphNode, seen: Set[int]) -> List[WireGraphNode]:
    island: List[WireGraphNode] = []
    stack = [start]
    while stack:
        node = stack.pop()
        if node.id in seen:
            continue
        seen.add(node.id)
        island.append(node)
        stack.extend(graph.nodes[edge] for edge in node.edges)
    return island


def split_into_islands(graph: WireGraph) -> List[WireGraph]:
    """Partition ``graph`` into connected pieces.

    A connected graph is returned as ``[graph]``. Otherwise every island is a
    new graph carrying the same id with node ids packed from zero; islands are
    ordered by the position of their first node in ``graph.nodes``.
    """

    seen: Set[int] = set()
    islands: List[List[WireGraphNode]] = []
    for node in graph.nodes:
        if node.id not in seen:
            islands.append(_collect_island(graph, node, seen))

    if len(islands) == 1:
        return [graph]

    if islands:
        logger.info("Wire %s splits into %d islands", graph.id, len(islands))
    return [repack_graph_ids(replace(graph, nodes=island)) for island in islands]
