import threading

from globe.timers import PeriodicTimer


def test_stops_when_callback_says_so():
    calls = []
    done = threading.Event()

    def cb():
        calls.append(1)
        if len(calls) == 3:
            done.set()
            return False
        return True

    timer = PeriodicTimer(0.01, cb).start()
    assert done.wait(2)
    timer.cancel()
    assert len(calls) == 3
    assert not timer.active


def test_cancel_is_final_and_idempotent():
    calls = []
    timer = PeriodicTimer(0.01, lambda: calls.append(1)).start()
    timer.cancel()
    seen = len(calls)
    timer.cancel()

    threading.Event().wait(0.05)
    assert len(calls) == seen
    assert not timer.active


def test_context_manager_cancels():
    with PeriodicTimer(0.01, lambda: True) as timer:
        assert timer.active
    assert not timer.active


def test_failing_callback_stops_timer():
    def cb():
        raise RuntimeError("boom")

    timer = PeriodicTimer(0.01, cb).start()
    timer._thread.join(2)
    assert not timer.active
