import logging

from stallrow.engine.state import GameSession
from stallrow.geometry import Point, ViewportMetrics
from stallrow.rng import SeededRandom

VP = ViewportMetrics(800, 400, 40)

def test_tap_before_start_does_nothing():
    s = GameSession(VP, SeededRandom(1))
    assert s.tap(Point(400, 200)) is None
    assert s.state is None

def test_start_adds_everything():
    s = GameSession(VP, SeededRandom(1))
    up = s.start()
    assert up.removed == ()
    assert up.added == s.state.objects
    assert s.generation == 1

def test_unit_tap_swaps_whole_state():
    s = GameSession(VP, SeededRandom(1))
    s.start()
    old = s.state
    up = s.tap(old.units[0].center)
    assert up is not None
    assert up.removed == old.objects
    assert up.added == s.state.objects
    assert s.state is not old
    assert s.generation == 2

def test_missed_tap_keeps_state():
    s = GameSession(VP, SeededRandom(1))
    s.start()
    old = s.state
    assert s.tap(Point(1, 1)) is None
    assert s.state is old
    assert s.generation == 1

def test_resize_applies_to_next_generation():
    s = GameSession(VP, SeededRandom(5))
    s.start()
    small = ViewportMetrics(300, 200, 20)
    s.resize(small)
    assert s.state.viewport == VP
    s.regenerate()
    assert s.state.viewport == small
    lo, hi = s.state.extent()
    assert lo >= 20 - 1e-9 and hi <= 280 + 1e-9

def test_sessions_with_same_seed_agree():
    a, b = GameSession(VP, SeededRandom(9)), GameSession(VP, SeededRandom(9))
    for _ in range(5):
        a.regenerate()
        b.regenerate()
        assert a.state == b.state

def test_regeneration_is_logged(caplog):
    s = GameSession(VP, SeededRandom(2))
    with caplog.at_level(logging.INFO, logger="stallrow.engine.state"):
        s.start()
    assert "generation 1" in caplog.text

def test_degenerate_viewport_warns(caplog):
    s = GameSession(ViewportMetrics(60, 100, 40), SeededRandom(2))
    with caplog.at_level(logging.WARNING, logger="stallrow.layout.generator"):
        s.start()
    assert s.state.scale_factor == s.config.min_scale
    assert "scale floored" in caplog.text
