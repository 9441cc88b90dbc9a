from gridquest.timer import Timer


def test_new_timer_starts_at_zero():
    timer = Timer()
    assert timer.current_time == 0
    assert timer.last_time == 0
    assert timer.delta_seconds == 0.0


def test_tick_measures_from_previous_tick():
    timer = Timer()
    timer.tick(500)
    delta = timer.tick(750)
    assert delta == 0.25
    assert timer.delta_seconds == delta


def test_tick_updates_last_and_current_time():
    timer = Timer()
    timer.tick(1234)
    assert timer.current_time == 1234
    assert timer.last_time == 1234


def test_repeated_tick_at_same_time_gives_zero_delta():
    timer = Timer()
    timer.tick(4000)
    assert timer.tick(4000) == 0.0


def test_deltas_sum_to_elapsed_time():
    timer = Timer()
    stamps = [100, 250, 600, 1000]
    total = sum(timer.tick(stamp) for stamp in stamps)
    assert abs(total - stamps[-1] / 1000.0) < 1e-9