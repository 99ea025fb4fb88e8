"""Core data structures for wire net reconciliation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

Point = Tuple[float, ...]
WireId = str


class WireNetError(RuntimeError):
    """Base error raised when wire data contradicts the graph derived from it."""


class SegmentLookupError(WireNetError):
    """Raised when a segment cannot be matched to an edge of its wire's graph."""


@dataclass(frozen=True)
class TerminalRef:
    """Reference to one terminal of a placed component."""

    component_id: str
    terminal_id: str


@dataclass(frozen=True)
class Segment:
    """Straight wire piece; each endpoint may be bound to a terminal."""

    p0: Point
    p1: Point
    ref0: Optional[TerminalRef] = None
    ref1: Optional[TerminalRef] = None


@dataclass(frozen=True)
class Wire:
    id: WireId
    segments: Tuple[Segment, ...] = ()


@dataclass(frozen=True)
class ComponentTerminal:
    id: str
    offset: Point


@dataclass(frozen=True)
class Component:
    """Placed component; terminal offsets are relative to ``pos``."""

    id: str
    pos: Point
    terminals: Tuple[ComponentTerminal, ...] = ()

    def terminal_positions(self) -> Iterator[Tuple[Point, TerminalRef]]:
        for terminal in self.terminals:
            pos = (self.pos[0] + terminal.offset[0], self.pos[1] + terminal.offset[1])
            yield pos, TerminalRef(self.id, terminal.id)


@dataclass(frozen=True)
class Layout:
    components: Tuple[Component, ...] = ()
    wires: Tuple[Wire, ...] = ()
    next_wire_id: int = 0


@dataclass
class WireGraphNode:
    """Scratch node; ``edges`` holds ids of adjacent nodes in the same graph."""

    id: int
    pos: Point
    ref: Optional[TerminalRef] = None
    edges: List[int] = field(default_factory=list)


@dataclass
class WireGraph:
    """Node arena for one wire. Node ids equal their list position."""

    id: WireId
    nodes: List[WireGraphNode] = field(default_factory=list)

    def degree(self, node_id: int) -> int:
        return len(self.nodes[node_id].edges)

    def edge_count(self) -> int:
        return sum(len(node.edges) for node in self.nodes) // 2
