import pytest

from bezier_elevation.bezier import elevate_degree
from bezier_elevation.config import EditorConfig
from bezier_elevation.editor import CurveEditor
from bezier_elevation.geometry import Point, SurfaceTransform, default_fan_out
from bezier_elevation.interaction import Phase, PointerEvent, PointerKind


def press(x, y, pointer_id=1):
    return PointerEvent(PointerKind.DOWN, pointer_id, x, y, buttons=1)


def move(x, y, pointer_id=1, buttons=1):
    return PointerEvent(PointerKind.MOVE, pointer_id, x, y, buttons=buttons)


def release(pointer_id=1):
    return PointerEvent(PointerKind.UP, pointer_id)


def test_initial_state(editor):
    snap = editor.snapshot()
    assert snap.points == default_fan_out(4, 1400, 900)
    assert snap.history == ()
    assert snap.level == 0
    assert snap.show_base and snap.show_elevated
    assert snap.hover_index is None and snap.dragging_index is None
    assert snap.active_page == "playground"


def test_elevation_scenario(editor):
    snap = editor.set_level(2)
    assert [len(p) for p in snap.history] == [5, 6]
    assert snap.elevated_degree == 5

    history = snap.history
    snap = editor.toggle_elevated()
    assert snap.show_elevated is False
    assert snap.history == history

    snap = editor.resize(2)
    assert [len(p) for p in snap.history] == [3, 4]
    assert snap.history[0] == elevate_degree(snap.points)
    assert snap.history[1] == elevate_degree(snap.history[0])


def test_level_is_clamped(editor):
    assert editor.set_level(99).level == 5
    assert editor.set_level(-4).level == 0


def test_custom_max_level():
    editor = CurveEditor(EditorConfig(max_level=8))
    assert len(editor.set_level(8).history) == 8


def test_every_mutation_rebuilds_history(editor):
    editor.set_level(1)
    for mutate in (lambda: editor.resize(7),
                   lambda: editor.move_point(3, Point(10, 10)),
                   lambda: editor.reset(5),
                   lambda: editor.toggle_base()):
        snap = mutate()
        assert snap.history == (elevate_degree(snap.points),)


def test_listeners_see_consistent_state(editor):
    seen = []

    def listener(snapshot):
        assert len(snapshot.history) == snapshot.level
        if snapshot.history:
            assert snapshot.history[0] == elevate_degree(snapshot.points)
        seen.append(snapshot)

    editor.add_render_listener(listener)
    editor.set_level(3)
    editor.resize(9)
    editor.handle_pointer(press(140, 720))
    editor.handle_pointer(move(400, 400))
    editor.handle_pointer(release())
    assert len(seen) == 5
    assert seen[-1] is editor.snapshot()

    editor.remove_render_listener(listener)
    editor.reset()
    assert len(seen) == 5


def test_drag_moves_exactly_one_point(editor):
    before = editor.snapshot().points
    editor.handle_pointer(press(before[1].x + 5, before[1].y - 5))
    assert editor.interaction.phase is Phase.DRAGGING
    assert editor.snapshot().dragging_index == 1

    editor.handle_pointer(move(700, 100))
    after = editor.snapshot().points
    assert after[1] == Point(700.0, 100.0)
    assert [p for i, p in enumerate(after) if i != 1] == [p for i, p in enumerate(before) if i != 1]

    snap = editor.handle_pointer(release())
    assert snap.dragging_index is None
    assert editor.interaction.phase is Phase.IDLE


def test_drag_is_clamped_to_canvas(editor):
    editor.handle_pointer(press(140, 720))
    snap = editor.handle_pointer(move(-300, 5000))
    assert snap.points[0] == Point(0.0, 900.0)


def test_press_on_empty_space_does_not_drag(editor):
    before = editor.snapshot().points
    editor.handle_pointer(press(700, 850))
    editor.handle_pointer(move(20, 20))
    assert editor.snapshot().points == before
    assert editor.snapshot().dragging_index is None


def test_hover_updates_snapshot(editor):
    snap = editor.handle_pointer(move(1262, 182, buttons=0))
    assert snap.hover_index == 3
    assert snap.dragging_index is None


def test_pointer_through_surface_transform(editor):
    surface = SurfaceTransform(left=10, top=20, logical_width=700, logical_height=450,
                               canvas_width=1400, canvas_height=900)
    # P0 sits at canvas (140, 720), i.e. client (80, 380)
    editor.handle_pointer(press(80, 380), surface)
    assert editor.snapshot().dragging_index == 0
    snap = editor.handle_pointer(move(110, 120), surface)
    assert snap.points[0] == Point(200.0, 200.0)


def test_shrinking_below_dragged_index_resets_interaction(editor):
    editor.resize(8)
    last = editor.snapshot().points[7]
    editor.handle_pointer(press(last.x, last.y))
    assert editor.snapshot().dragging_index == 7
    snap = editor.resize(3)
    assert snap.dragging_index is None
    assert snap.hover_index is None


def test_invalid_move_is_a_noop(editor):
    before = editor.snapshot().points
    snap = editor.move_point(12, Point(1, 1))
    assert snap.points == before


def test_reset_restores_default_count(editor):
    editor.resize(10)
    snap = editor.reset()
    assert snap.points == default_fan_out(4, 1400, 900)


def test_toggles_are_display_only(editor):
    editor.set_level(2)
    points, history = editor.snapshot().points, editor.snapshot().history
    snap = editor.toggle_base()
    assert snap.show_base is False
    assert (snap.points, snap.history) == (points, history)
    assert editor.toggle_base().show_base is True


def test_page_navigation(editor):
    renders = []
    editor.add_render_listener(renders.append)

    assert editor.set_active_page("nowhere") is False
    assert editor.active_page == "playground"

    assert editor.set_active_page("theory") is True
    assert renders == []
    assert editor.snapshot().active_page == "theory"

    editor.set_active_page("playground")
    assert len(renders) == 1
    assert renders[0].active_page == "playground"


@pytest.mark.parametrize("count", [2, 5, 16])
def test_configured_default_count(count):
    editor = CurveEditor(EditorConfig(default_point_count=count))
    assert len(editor.snapshot().points) == count
