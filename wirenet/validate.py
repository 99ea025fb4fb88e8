import math
from typing import Iterable, Set

from .model import Layout, Point


class ValidationError(Exception):
    pass


def _ensure_finite(pt: Point, where: str) -> None:
    if len(pt) not in (2, 3):
        raise ValidationError(f'{where}: point must have two or three coordinates, got {pt!r}')
    if not all(math.isfinite(float(v)) for v in pt):
        raise ValidationError(f'{where}: non-finite coordinate in {pt!r}')


def _ensure_unique(ids: Iterable[str], what: str) -> None:
    seen: Set[str] = set()
    for ident in ids:
        if ident in seen:
            raise ValidationError(f'duplicate {what} id "{ident}"')
        seen.add(ident)


def validate_layout(layout: Layout) -> None:
    _ensure_unique((c.id for c in layout.components), 'component')
    for comp in layout.components:
        _ensure_finite(comp.pos, f'component "{comp.id}"')
        _ensure_unique((t.id for t in comp.terminals), f'terminal of component "{comp.id}"')
        for term in comp.terminals:
            _ensure_finite(term.offset, f'terminal "{comp.id}:{term.id}"')

    _ensure_unique((w.id for w in layout.wires), 'wire')
    for wire in layout.wires:
        for idx, seg in enumerate(wire.segments):
            _ensure_finite(seg.p0, f'wire "{wire.id}" segment {idx}')
            _ensure_finite(seg.p1, f'wire "{wire.id}" segment {idx}')
        if wire.id.isdecimal() and int(wire.id) >= layout.next_wire_id:
            raise ValidationError(
                f'wire id "{wire.id}" collides with ids allocated from next_wire_id={layout.next_wire_id}'
            )
