from .model import (
    Component,
    ComponentTerminal,
    Layout,
    Segment,
    SegmentLookupError,
    TerminalRef,
    Wire,
    WireGraph,
    WireGraphNode,
    WireNetError,
)
from .config import WireNetConfig, configured, get_config, set_config
from .geometry import (
    EPSILON,
    is_attached,
    is_interior_attached,
    nearest_point_on_segment,
    parametric_position,
    segments_touch,
    snap_to_grid,
)
from .graph import build_graph, graph_to_wire
from .islands import repack_graph_ids, split_into_islands
from .normalize import normalize_wire
from .reconcile import apply_edited_wires, reconcile_wires, terminal_position_map
from .mutators import drag_wire_segment, find_nodes_for_segment, move_component, move_wires_for_component
from .validate import ValidationError, validate_layout

__all__ = [
    'Component',
    'ComponentTerminal',
    'Layout',
    'Segment',
    'SegmentLookupError',
    'TerminalRef',
    'Wire',
    'WireGraph',
    'WireGraphNode',
    'WireNetError',
    'WireNetConfig',
    'configured',
    'get_config',
    'set_config',
    'EPSILON',
    'is_attached',
    'is_interior_attached',
    'nearest_point_on_segment',
    'parametric_position',
    'segments_touch',
    'snap_to_grid',
    'build_graph',
    'graph_to_wire',
    'repack_graph_ids',
    'split_into_islands',
    'normalize_wire',
    'apply_edited_wires',
    'reconcile_wires',
    'terminal_position_map',
    'drag_wire_segment',
    'find_nodes_for_segment',
    'move_component',
    'move_wires_for_component',
    'ValidationError',
    'validate_layout',
]
