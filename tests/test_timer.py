import pytest

from rastersvg.timer import Timer


def _clock(*values):
    ticks = iter(values)
    return lambda: next(ticks)


def test_duration_uses_clock():
    timer = Timer(clock=_clock(1.0, 3.5))
    timer.start()
    timer.stop()
    assert timer.duration() == 2.5


def test_duration_without_stop():
    timer = Timer(clock=_clock(1.0))
    timer.start()
    with pytest.raises(RuntimeError):
        timer.duration()


def test_duration_without_start():
    timer = Timer(clock=_clock(1.0))
    timer.stop()
    with pytest.raises(RuntimeError):
        timer.duration()


def test_real_clock_non_negative():
    timer = Timer()
    timer.start()
    timer.stop()
    assert timer.duration() >= 0.0


def test_restart_updates_start():
    timer = Timer(clock=_clock(0.0, 10.0, 12.0))
    timer.start()
    timer.start()
    timer.stop()
    assert timer.duration() == 2.0