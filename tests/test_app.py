from slimearena.app import FRAME_RATE, FrameClock


def test_fresh_clock_text():
    assert FrameClock().frame_rate_text() == "FPS[0.00]"


def test_frame_not_due_at_start():
    clock = FrameClock()
    assert clock.tick(0) is False
    assert clock.frame_count == 0


def test_frame_due_after_frame_time():
    clock = FrameClock()
    assert clock.tick(int(FRAME_RATE)) is True
    assert clock.frame_count == 1
    assert clock.last_frame_time == int(FRAME_RATE)


def test_too_early_tick_is_ignored():
    clock = FrameClock()
    clock.tick(int(FRAME_RATE))
    assert clock.tick(int(FRAME_RATE) + 1) is False
    assert clock.frame_count == 1
    assert clock.current_time == int(FRAME_RATE) + 1


def test_rate_measured_after_a_second():
    clock = FrameClock()
    for now in (250, 500, 750, 1000):
        assert clock.tick(now)
    assert clock.frame_rate == 0.0
    assert clock.tick(1250)
    assert clock.frame_rate == 4.0
    assert clock.frame_count == 0
    assert clock.update_frame_rate_time == 1250
    assert clock.frame_rate_text() == "FPS[4.00]"