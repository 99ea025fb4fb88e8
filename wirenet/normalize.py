"""Single-wire cleanup: drop covered segments, trim colinear overlaps."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Set

from .geometry import EPSILON_SQ, is_attached, points_equal, segment_length_sq
from .graph import build_graph, graph_to_wire
from .model import Segment, Wire

logger = logging.getLogger(__name__)


def _trim_overlap(seg0: Segment, seg1: Segment) -> Segment:
    """Move the endpoint of ``seg1`` lying on ``seg0`` out of ``seg0``.

    Only called when exactly one endpoint of ``seg1`` is attached to ``seg0``.
    The endpoint is moved onto whichever end of ``seg0`` lies on ``seg1``; for
    non-colinear segments that end already coincides with it.
    """

    field_pt, field_ref = ("p0", "ref0") if is_attached(seg0, seg1.p0) else ("p1", "ref1")
    current = getattr(seg1, field_pt)
    for anchor, anchor_ref in ((seg0.p0, seg0.ref0), (seg0.p1, seg0.ref1)):
        if not is_attached(seg1, anchor):
            continue
        if points_equal(anchor, current):
            return seg1
        return replace(seg1, **{field_pt: anchor, field_ref: anchor_ref})
    return seg1


def normalize_wire(wire: Wire) -> Wire:
    """Return ``wire`` with redundant, overlapping and zero-length segments removed.

    The result is the serialized minimal graph of the cleaned segments, so
    T-junctions created by the cleanup are split as well. ``wire`` itself is
    returned when it is already minimal.
    """

    segs: List[Segment] = list(wire.segments)
    removed: Set[int] = set()

    for i in range(len(segs)):
        if i in removed:
            continue
        for j in range(len(segs)):
            if j == i or j in removed:
                continue
            seg0, seg1 = segs[i], segs[j]
            start_on = is_attached(seg0, seg1.p0)
            end_on = is_attached(seg0, seg1.p1)
            if start_on and end_on:
                removed.add(j)
            elif start_on or end_on:
                segs[j] = _trim_overlap(seg0, seg1)

    kept = Wire(id=wire.id, segments=tuple(seg for idx, seg in enumerate(segs) if idx not in removed))
    rebuilt = graph_to_wire(build_graph(kept))
    segments = tuple(seg for seg in rebuilt.segments if segment_length_sq(seg) >= EPSILON_SQ)

    if segments == wire.segments:
        return wire

    logger.debug(
        "Normalized wire %s: %d segments in, %d covered, %d out",
        wire.id,
        len(wire.segments),
        len(removed),
        len(segments),
    )
    return replace(rebuilt, segments=segments)
