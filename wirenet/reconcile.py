"""Top-level edit pipeline: merge touching wires, rebind terminals, split islands."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Sequence, Tuple

from .config import get_config
from .geometry import PositionKey, position_key, segments_touch
from .graph import build_graph, graph_to_wire
from .islands import split_into_islands
from .logging_utils import apply_debug_logging
from .model import Layout, TerminalRef, Wire, WireGraph
from .normalize import normalize_wire

logger = logging.getLogger(__name__)

UNASSIGNED_WIRE_ID = ""


def terminal_position_map(layout: Layout) -> Dict[PositionKey, TerminalRef]:
    """Map the quantized absolute position of every component terminal to its reference."""

    decimals = get_config().key_decimals
    positions: Dict[PositionKey, TerminalRef] = {}
    for component in layout.components:
        for pos, ref in component.terminal_positions():
            positions[position_key(pos, decimals)] = ref
    return positions


def _wires_touch(a: Wire, b: Wire) -> bool:
    return any(segments_touch(seg_a, seg_b) for seg_a in a.segments for seg_b in b.segments)


def _bind_terminals(graph: WireGraph, positions: Dict[PositionKey, TerminalRef]) -> None:
    decimals = get_config().key_decimals
    for node in graph.nodes:
        node.ref = positions.get(position_key(node.pos, decimals))


def _merge_touching(wires: List[Wire], edited_index: int) -> Tuple[List[Wire], int]:
    edited = wires[edited_index]
    to_merge = [
        idx for idx, wire in enumerate(wires) if idx != edited_index and _wires_touch(wire, edited)
    ]
    if not to_merge:
        return wires, edited_index

    segments = list(edited.segments)
    for idx in to_merge:
        segments.extend(wires[idx].segments)
    merged = replace(edited, segments=tuple(segments))

    logger.info(
        "Merging wires %s into wire %s",
        ", ".join(wires[idx].id for idx in to_merge),
        edited.id,
    )
    merged_set = set(to_merge)
    edited_index -= sum(1 for idx in to_merge if idx < edited_index)
    wires = [wire for idx, wire in enumerate(wires) if idx not in merged_set]
    wires[edited_index] = normalize_wire(merged)
    return wires, edited_index


def reconcile_wires(
    layout: Layout, wires: Sequence[Wire], edited_index: int
) -> Tuple[List[Wire], List[Wire]]:
    """Restore a consistent wire list after the wire at ``edited_index`` changed.

    Returns ``(wires, new_wires)``. ``wires`` keeps the edited wire's slot
    (unless it ended up without segments), ``new_wires`` holds the extra
    islands split off the edited wire; their ids are still unassigned.
    """

    if not 0 <= edited_index < len(wires):
        raise IndexError(f"edited wire index {edited_index} out of range for {len(wires)} wires")

    working, edited_index = _merge_touching(list(wires), edited_index)
    edited = working[edited_index]

    graph = build_graph(edited)
    _bind_terminals(graph, terminal_position_map(layout))

    pieces = [graph_to_wire(island) for island in split_into_islands(graph)]
    if get_config().keep_empty_wires:
        if not pieces:
            pieces = [replace(edited, segments=())]
    else:
        dropped = sum(1 for piece in pieces if not piece.segments)
        if dropped:
            logger.debug("Dropping %d empty island(s) of wire %s", dropped, edited.id)
        pieces = [piece for piece in pieces if piece.segments]

    if not pieces:
        logger.info("Wire %s has no segments left, removing it", edited.id)
        del working[edited_index]
        return working, []

    working[edited_index] = pieces[0]
    new_wires = [replace(piece, id=UNASSIGNED_WIRE_ID) for piece in pieces[1:]]
    return working, new_wires


def apply_edited_wires(layout: Layout, wires: Sequence[Wire], edited_index: int) -> Layout:
    """Reconcile ``wires`` and return a new layout with fresh ids for split-off wires."""

    edited, new_wires = reconcile_wires(layout, wires, edited_index)

    next_wire_id = layout.next_wire_id
    assigned: List[Wire] = []
    for wire in new_wires:
        assigned.append(replace(wire, id=str(next_wire_id)))
        next_wire_id += 1

    if assigned:
        logger.info(
            "Allocated wire ids %s for split islands",
            ", ".join(wire.id for wire in assigned),
        )
    return replace(layout, wires=tuple(edited + assigned), next_wire_id=next_wire_id)


apply_debug_logging(globals(), logger=logger)
