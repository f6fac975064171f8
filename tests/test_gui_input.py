import pygame

from quadspace.core.spatial.geometry import Point
from quadspace.core.spatial.spatial_index import SpatialIndex
from quadspace.gui import input as gui_input
from quadspace.gui.renderer import Renderer
from test_gui_renderer import DummyWindow


def _setup(monkeypatch, events):
    index = SpatialIndex(0, 0, 800, 800, 4)
    renderer = Renderer(DummyWindow(), index)
    monkeypatch.setattr(pygame.event, "get", lambda: events)
    state = {"running": True, "query_size": 100.0, "query_mode": "circle"}
    return index, renderer, state


def test_click_inserts_point(monkeypatch):
    events = [pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(400, 400))]
    index, renderer, state = _setup(monkeypatch, events)
    gui_input.handle_events(index, renderer, state)
    assert index.to_array() == [Point(0.0, 0.0)]
    assert state["drawing"] is True


def test_drag_inserts_and_tracks_mouse(monkeypatch):
    events = [
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(400, 400)),
        pygame.event.Event(pygame.MOUSEMOTION, pos=(410, 400)),
        pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(410, 400)),
        pygame.event.Event(pygame.MOUSEMOTION, pos=(420, 400)),
    ]
    index, renderer, state = _setup(monkeypatch, events)
    gui_input.handle_events(index, renderer, state)
    assert index.to_array() == [Point(0.0, 0.0), Point(10.0, 0.0)]
    assert state["drawing"] is False
    assert state["mouse_world"] == (20.0, 0.0)


def test_wheel_and_toggles(monkeypatch):
    events = [
        pygame.event.Event(pygame.MOUSEWHEEL, y=1),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_v),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_n),
    ]
    index, renderer, state = _setup(monkeypatch, events)
    gui_input.handle_events(index, renderer, state)
    assert state["query_size"] > 100.0
    assert state["query_mode"] == "rect"
    assert state["show_outlines"] is False
    assert state["show_nearest"] is True


def test_clear_key_empties_index(monkeypatch):
    events = [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_c)]
    index, renderer, state = _setup(monkeypatch, events)
    index.build([Point(i, i) for i in range(10)])
    gui_input.handle_events(index, renderer, state)
    assert index.to_array() == []


def test_escape_stops_running(monkeypatch):
    events = [
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_c),
    ]
    index, renderer, state = _setup(monkeypatch, events)
    index.insert(Point(1, 1))
    gui_input.handle_events(index, renderer, state)
    assert state["running"] is False
    assert len(index) == 1
