from pychip8.cpu import Timers


def test_tick_decrements_until_zero() -> None:
    timers = Timers()
    timers.set_delay(2)
    timers.set_sound(1)

    timers.tick()
    assert (timers.delay, timers.sound) == (1, 0)
    assert not timers.sound_active

    timers.tick()
    timers.tick()
    assert (timers.delay, timers.sound) == (0, 0)


def test_sound_active_while_counter_positive() -> None:
    timers = Timers()
    timers.set_sound(3)

    for _ in range(3):
        assert timers.sound_active
        timers.tick()
    assert not timers.sound_active


def test_setters_keep_low_byte_and_reset_clears() -> None:
    timers = Timers()
    timers.set_delay(0x1FF)
    timers.set_sound(0x101)

    assert timers.delay == 0xFF
    assert timers.sound == 0x01
    timers.reset()
    assert (timers.delay, timers.sound) == (0, 0)
