import pytest

from famicore.apu.noise import PERIODS, NoiseChannel


def _playing_channel():
    ch = NoiseChannel()
    ch.set_enabled(True)
    ch.write_register(0x400C, 0x1F)
    ch.write_register(0x400F, 0x08)
    ch.update_pending_length_counter()
    return ch


def test_new_channel_is_silent():
    ch = NoiseChannel()
    assert ch.sample() == 0
    assert ch.shift == 1


def test_bad_address_raises():
    with pytest.raises(ValueError):
        NoiseChannel().write_register(0x4010, 0)


def test_period_from_table():
    ch = NoiseChannel()
    ch.write_register(0x400E, 0x03)
    assert ch.period == PERIODS[3]
    assert ch.mode is False
    ch.tick_sequencer()
    assert ch.counter == PERIODS[3]


def test_mode_flag():
    ch = NoiseChannel()
    ch.write_register(0x400E, 0x80)
    assert ch.mode is True


def test_first_shift_feeds_back_into_bit_14():
    ch = NoiseChannel()
    ch.tick_sequencer()
    assert ch.shift == 1 << 14


def test_sample_depends_on_shift_bit():
    ch = _playing_channel()
    assert ch.sample() == 0
    ch.tick_sequencer()
    assert ch.sample() == 15


def test_long_mode_cycle_length():
    ch = NoiseChannel()
    seen = set()
    while ch.shift not in seen:
        seen.add(ch.shift)
        ch.tick_sequencer()
    assert ch.shift == 1
    assert len(seen) == 32767


def test_short_mode_stays_in_15_bits_and_nonzero():
    ch = NoiseChannel()
    ch.write_register(0x400E, 0x80)
    for _ in range(5000):
        ch.tick_sequencer()
        assert 0 < ch.shift < (1 << 15)


def test_disable_silences():
    ch = _playing_channel()
    ch.tick_sequencer()
    ch.set_enabled(False)
    assert ch.playing() is False
    assert ch.sample() == 0