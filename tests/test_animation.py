from globe.animation import STOPPED, AnimationState, start, stop, tick, visible


def test_start_needs_events():
    assert start(STOPPED, 0) == STOPPED
    assert start(STOPPED, 3) == AnimationState(index=0, running=True)


def test_start_only_from_stopped():
    mid = AnimationState(index=2, running=True)
    assert start(mid, 5) == mid


def test_runs_to_the_end_then_resets():
    s = start(STOPPED, 3)
    seen = []
    while s.running:
        seen.append(s.index)
        assert s.index <= 3
        s = tick(s, 3)

    assert seen == [0, 1, 2]
    assert s == STOPPED


def test_stop_resets():
    assert stop(AnimationState(index=4, running=True)) == STOPPED


def test_tick_when_stopped_is_noop():
    assert tick(STOPPED, 10) == STOPPED


def test_visible_prefix():
    events = ["a", "b", "c", "d"]
    assert visible(events, AnimationState(index=2, running=True)) == ["a", "b"]
    assert visible(events, AnimationState(index=0, running=True)) == []
    assert visible(events, STOPPED) == events
