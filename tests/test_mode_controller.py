"""
Unit tests for ModeController and mode switching.
"""

import pytest

from models import Entry, ProbeResult
from services import Mode, ModeController
from ui.event_handlers import handle_mode_select


def test_initial_mode_is_curation():
    assert ModeController().mode == Mode.CURATION


@pytest.mark.parametrize("mode", ["curation", "probe", "analytics"])
def test_every_mode_is_selectable(mode):
    controller = ModeController()
    
    selected = controller.select(mode)
    
    assert selected == Mode(mode)
    assert controller.visibility()[Mode(mode)] is True


def test_unknown_mode_raises():
    controller = ModeController()
    
    with pytest.raises(ValueError):
        controller.select("settings")
    
    assert controller.mode == Mode.CURATION


def test_visibility_has_exactly_one_panel():
    controller = ModeController()
    
    for mode in Mode:
        controller.select(mode)
        visibility = controller.visibility()
        assert sum(visibility.values()) == 1
        assert visibility[mode] is True


def test_switching_modes_keeps_store_data(app_state):
    app_state.entry_store.entries = [Entry(id="1", question="Q", answer="A")]
    app_state.probe_session.result = ProbeResult(answer="x")
    
    for mode in ("probe", "analytics", "curation"):
        handle_mode_select(mode, app_state)
    
    assert app_state.entry_store.entries == [Entry(id="1", question="Q", answer="A")]
    assert app_state.probe_session.result == ProbeResult(answer="x")


def test_handle_mode_select_returns_panel_flags(app_state):
    state, curation_vis, probe_vis, analytics_vis = handle_mode_select("probe", app_state)
    
    assert state.mode_controller.mode == Mode.PROBE
    assert (curation_vis, probe_vis, analytics_vis) == (False, True, False)
