"""Unit tests for the history walk and toggle state machine."""

from __future__ import annotations

from unittest.mock import MagicMock

from core.navigation_engine import NavigationEngine
from world_model.desktop_index import DesktopIndex
from world_model.desktop_state import DesktopInfo

DESKTOPS = ["d1", "d2", "d3", "d4", "d5"]


def _engine(start: str = "d1", visits: list[str] | None = None) -> tuple[NavigationEngine, MagicMock]:
    index = DesktopIndex()
    index.rebuild([DesktopInfo(identifier=d, slot_hint=i + 1) for i, d in enumerate(DESKTOPS)])
    switch = MagicMock()
    engine = NavigationEngine(desktop_index=index, switch_desktop=switch, continuation_delay_ms=500)
    engine.reset(start)
    for identifier in visits or []:
        engine.record_visit(identifier)
    return engine, switch


def _press(engine: NavigationEngine, now: float) -> str:
    """Press previous and confirm the resulting switch like the host would."""
    engine.on_previous_desktop_shortcut(now=now)
    target = engine._switch_desktop.call_args.args[0]
    engine.record_visit(target)
    return target


def test_fresh_press_goes_to_previous_desktop() -> None:
    engine, switch = _engine(visits=["d2", "d3", "d4"])

    engine.on_previous_desktop_shortcut(now=1000)

    switch.assert_called_once_with("d3")
    assert engine.candidate_index == 2


def test_rapid_presses_walk_back_and_clamp_at_oldest() -> None:
    engine, _ = _engine(visits=["d2", "d3", "d4"])

    landed = [_press(engine, now) for now in (1000, 1100, 1200, 1300)]

    assert landed == ["d3", "d2", "d1", "d1"]
    assert "d4" not in landed
    assert engine.candidate_index == 0


def test_walk_does_not_reorder_history_while_previewing() -> None:
    engine, _ = _engine(visits=["d2", "d3", "d4"])

    _press(engine, 1000)
    _press(engine, 1100)

    assert engine.history.as_list() == ["d1", "d2", "d3", "d4"]


def test_slow_second_press_starts_a_new_walk() -> None:
    engine, _ = _engine(visits=["d2", "d3", "d4"])

    assert _press(engine, 1000) == "d3"
    assert engine.history.as_list() == ["d1", "d2", "d3", "d4"]

    assert _press(engine, 2000) == "d4"
    assert engine.history.as_list() == ["d1", "d2", "d4", "d3"]


def test_continuation_is_strictly_less_than_delay() -> None:
    engine, _ = _engine(visits=["d2", "d3", "d4"])

    assert _press(engine, 1000) == "d3"
    assert _press(engine, 1500) == "d4"


def test_first_press_is_fresh_even_at_time_zero() -> None:
    engine, switch = _engine(visits=["d2"])

    engine.on_previous_desktop_shortcut(now=0)

    switch.assert_called_once_with("d1")


def test_divergent_visit_finalizes_walk_then_appends() -> None:
    engine, _ = _engine(visits=["d2", "d3", "d4"])
    _press(engine, 1000)  # previewing d3

    engine.record_visit("d5")

    assert engine.history.as_list() == ["d1", "d2", "d4", "d3", "d5"]
    assert engine.candidate_index is None


def test_press_after_divergence_starts_fresh_within_delay() -> None:
    engine, _ = _engine(visits=["d2", "d3", "d4", "d5"])
    assert _press(engine, 1000) == "d4"
    engine.record_visit("d2")

    assert _press(engine, 1200) == "d4"


def test_single_entry_history_press_targets_same_desktop() -> None:
    engine, switch = _engine()

    engine.on_previous_desktop_shortcut(now=1000)

    switch.assert_called_once_with("d1")
    assert engine.history.as_list() == ["d1"]


def test_empty_history_press_is_a_no_op() -> None:
    engine, switch = _engine()
    engine.reset(None)

    engine.on_previous_desktop_shortcut(now=1000)

    switch.assert_not_called()
    assert engine.candidate_index is None


def test_finalize_without_walk_is_a_no_op() -> None:
    engine, _ = _engine(visits=["d2"])
    engine.finalize_walk()
    assert engine.history.as_list() == ["d1", "d2"]


def test_toggle_to_other_desktop_switches_directly() -> None:
    engine, switch = _engine(visits=["d2"])

    engine.on_toggle_desktop_shortcut(4, current="d2")

    switch.assert_called_once_with("d4")
    assert engine.candidate_index is None


def test_toggle_on_current_desktop_goes_back_and_closes_walk() -> None:
    engine, switch = _engine(visits=["d2", "d3"])

    engine.on_toggle_desktop_shortcut(3, current="d3")

    switch.assert_called_once_with("d2")
    assert engine.candidate_index is None
    assert engine.history.as_list() == ["d1", "d3", "d2"]
    assert engine.state.last_trigger_ms is None


def test_toggle_unknown_slot_is_ignored() -> None:
    engine, switch = _engine(visits=["d2"])
    _press(engine, 1000)

    engine.on_toggle_desktop_shortcut(42, current="d1")

    switch.assert_called_once_with("d1")
    assert engine.candidate_index == 0


def test_toggle_finalizes_open_walk() -> None:
    engine, switch = _engine(visits=["d2", "d3", "d4"])
    _press(engine, 1000)  # on d3, walk open

    engine.on_toggle_desktop_shortcut(1, current="d3")

    assert switch.call_args.args == ("d1",)
    assert engine.candidate_index is None
    assert engine.history.as_list() == ["d1", "d2", "d4", "d3"]


def test_toggle_pair_alternates() -> None:
    engine, switch = _engine(visits=["d3", "d5", "d2"])
    current = "d2"

    seen = []
    for _ in range(6):
        engine.on_toggle_desktop_shortcut(5, current=current)
        current = switch.call_args.args[0]
        engine.record_visit(current)
        seen.append(current)

    assert seen == ["d5", "d2", "d5", "d2", "d5", "d2"]


def test_reset_clears_walk() -> None:
    engine, _ = _engine(visits=["d2", "d3"])
    _press(engine, 1000)

    engine.reset("d3")

    assert engine.history.as_list() == ["d3"]
    assert engine.candidate_index is None
    assert engine.state.last_trigger_ms is None


def test_default_clock_is_used_when_no_timestamp_given() -> None:
    index = DesktopIndex()
    clock = MagicMock(side_effect=[1000.0, 1100.0])
    switch = MagicMock()
    engine = NavigationEngine(desktop_index=index, switch_desktop=switch, clock=clock)
    engine.reset("a")
    for identifier in ("b", "c"):
        engine.record_visit(identifier)

    engine.on_previous_desktop_shortcut()
    engine.on_previous_desktop_shortcut()

    assert [c.args[0] for c in switch.call_args_list] == ["b", "a"]
