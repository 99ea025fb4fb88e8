from wirenet import Layout, Wire, apply_edited_wires, drag_wire_segment, move_component
from wirenet.demo import DEMO, run


def test_demo_runs(capsys):
    run()

    out = capsys.readouterr().out
    assert 'After merging touching wires' in out
    assert 'After moving R2' in out


def test_edit_session_keeps_terminal_bindings():
    merged = apply_edited_wires(DEMO, DEMO.wires, 0)
    assert [w.id for w in merged.wires] == ['0']

    wire = merged.wires[0]
    first = next(
        idx for idx, seg in enumerate(wire.segments) if {seg.p0, seg.p1} == {(4.0, 0.0), (8.0, 0.0)}
    )
    dragged = drag_wire_segment(wire, first, (0.0, 2.0))
    layout = apply_edited_wires(merged, [dragged], 0)

    moved = move_component(layout, 1, (2.0, 0.0))

    assert moved.components[1].pos == (12.0, 5.0)
    ends = {seg.p1: seg.ref1 for seg in moved.wires[0].segments}
    ends.update({seg.p0: seg.ref0 for seg in moved.wires[0].segments})
    assert (12.0, 5.0) in ends
    assert ends[(12.0, 5.0)].component_id == 'R2'
    # the dragged run left R1's terminal, so that endpoint is no longer bound
    assert ends[(4.0, 2.0)] is None


def test_package_exports_values():
    assert Layout().next_wire_id == 0
    assert Wire('x').segments == ()
