from . import (
    Component,
    ComponentTerminal,
    Layout,
    Segment,
    Wire,
    apply_edited_wires,
    drag_wire_segment,
    move_component,
    validate_layout,
)

DEMO = Layout(
    components=(
        Component('R1', (0.0, 0.0), (ComponentTerminal('1', (0.0, 0.0)), ComponentTerminal('2', (4.0, 0.0)))),
        Component('R2', (10.0, 5.0), (ComponentTerminal('1', (0.0, 0.0)),)),
    ),
    wires=(
        Wire('0', (Segment((4.0, 0.0), (8.0, 0.0)),)),
        Wire('1', (Segment((8.0, 0.0), (8.0, 5.0)), Segment((8.0, 5.0), (10.0, 5.0)))),
    ),
    next_wire_id=2,
)


def _show(title, layout):
    print(f"{title}:")
    for wire in layout.wires:
        print(f"  wire {wire.id}:")
        for seg in wire.segments:
            print(f"    {seg.p0} -> {seg.p1}  [{seg.ref0} | {seg.ref1}]")
    print()


def run():
    validate_layout(DEMO)
    _show("Initial", DEMO)

    merged = apply_edited_wires(DEMO, DEMO.wires, 0)
    _show("After merging touching wires", merged)

    wire = merged.wires[0]
    dragged = drag_wire_segment(wire, 0, (0.0, 2.0))
    layout = apply_edited_wires(merged, (dragged,) + merged.wires[1:], 0)
    _show("After dragging the first segment", layout)

    moved = move_component(layout, 1, (2.0, 0.0))
    _show("After moving R2", moved)


if __name__ == "__main__":
    run()
