from solarium.timer import Timer, TimerState


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


def test_new_timer_is_reset_with_no_time():
    timer = Timer(FakeClock())
    assert timer.state is TimerState.RESET
    assert timer.elapsed_ms() == 0


def test_start_stop_measures_interval():
    clock = FakeClock(10.0)
    timer = Timer(clock)
    timer.start()
    assert timer.state is TimerState.RUNNING
    clock.now = 10.25
    timer.stop()
    assert timer.state is TimerState.STOPPED
    assert timer.elapsed_ms() == 250


def test_stopped_timer_does_not_advance():
    clock = FakeClock(10.0)
    timer = Timer(clock)
    timer.start()
    clock.now = 11.0
    timer.stop()
    before = timer.elapsed_ms()
    clock.now = 50.0
    assert timer.elapsed_ms() == before


def test_running_reading_matches_later_stop():
    clock = FakeClock(1.0)
    timer = Timer(clock)
    timer.start()
    clock.now = 3.5
    running = timer.elapsed_ms()
    timer.stop()
    assert running == timer.elapsed_ms()
    assert timer.state is TimerState.STOPPED


def test_intervals_accumulate():
    clock = FakeClock(0.0)
    single_a = Timer(clock)
    single_a.start()
    clock.now = 0.5
    single_a.stop()

    clock.now = 2.0
    single_b = Timer(clock)
    single_b.start()
    clock.now = 2.75
    single_b.stop()

    clock.now = 0.0
    combined = Timer(clock)
    combined.start()
    clock.now = 0.5
    combined.stop()
    clock.now = 2.0
    combined.start()
    clock.now = 2.75
    combined.stop()

    assert combined.elapsed_ms() == single_a.elapsed_ms() + single_b.elapsed_ms()


def test_restart_discards_partial_interval():
    clock = FakeClock(0.0)
    retriggered = Timer(clock)
    retriggered.start()
    clock.now = 5.0
    retriggered.start()
    clock.now = 5.5
    retriggered.stop()

    clock.now = 5.0
    plain = Timer(clock)
    plain.start()
    clock.now = 5.5
    plain.stop()

    assert retriggered.elapsed_ms() == plain.elapsed_ms()


def test_reset_clears_accumulated_time():
    clock = FakeClock(0.0)
    timer = Timer(clock)
    timer.start()
    clock.now = 4.0
    timer.stop()
    timer.reset()
    assert timer.state is TimerState.RESET
    assert timer.elapsed_ms() == 0


def test_stop_without_start_keeps_reset_state():
    timer = Timer(FakeClock())
    timer.stop()
    assert timer.state is TimerState.RESET
    assert timer.elapsed_ms() == 0


def test_default_clock_gives_nonnegative_time():
    timer = Timer()
    timer.start()
    timer.stop()
    assert timer.elapsed_ms() >= 0