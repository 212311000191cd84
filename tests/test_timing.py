import time

from motionplan.timing import Profiler, Timer, TimeUnit


def test_unknown_key_has_zero_profile():
    assert Profiler.get_total_profile("never-used-key") == 0.0
    assert Profiler.get_most_recent_profile("never-used-key", TimeUnit.s) == 0.0


def test_timer_records_duration():
    with Timer("sleep-test"):
        time.sleep(0.01)
    recent = Profiler.get_most_recent_profile("sleep-test", TimeUnit.ms)
    assert recent >= 5.0


def test_total_accumulates_over_timers():
    key = "accumulate-test"
    with Timer(key):
        time.sleep(0.005)
    first = Profiler.get_total_profile(key, TimeUnit.us)
    with Timer(key):
        time.sleep(0.005)
    total = Profiler.get_total_profile(key, TimeUnit.us)
    recent = Profiler.get_most_recent_profile(key, TimeUnit.us)
    assert total == first + recent
    assert total > first


def test_units_are_consistent():
    key = "unit-test"
    with Timer(key):
        time.sleep(0.002)
    us = Profiler.get_total_profile(key, TimeUnit.us)
    assert abs(Profiler.get_total_profile(key, TimeUnit.ms) * 1000 - us) < 1e-6
    assert abs(Profiler.get_total_profile(key, TimeUnit.s) * 1e6 - us) < 1e-3


def test_stop_is_idempotent():
    key = "idempotent-test"
    timer = Timer(key)
    time.sleep(0.002)
    timer.stop()
    before = Profiler.get_total_profile(key, TimeUnit.us)
    time.sleep(0.002)
    timer.stop()
    assert Profiler.get_total_profile(key, TimeUnit.us) == before


def test_new_timer_resets_most_recent():
    key = "reset-test"
    with Timer(key):
        time.sleep(0.002)
    Timer(key)
    assert Profiler.get_most_recent_profile(key) == 0.0
    assert Profiler.get_total_profile(key) > 0.0


def test_now_increases():
    timer = Timer("now-test")
    first = timer.now(TimeUnit.us)
    time.sleep(0.002)
    assert timer.now(TimeUnit.us) > first