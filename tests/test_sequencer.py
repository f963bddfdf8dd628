from famicore.apu.sequencer import Sequencer


def test_tick_reloads_after_period():
    sequencer = Sequencer(8)
    sequencer.period = 3
    results = [sequencer.tick(True) for _ in range(8)]
    assert results == [True, False, False, False, True, False, False, False]
    assert sequencer.current_step == 2


def test_step_wraps_around():
    sequencer = Sequencer(4)
    for _ in range(4):
        sequencer.tick(True)
    assert sequencer.current_step == 0


def test_disabled_step_does_not_advance():
    sequencer = Sequencer(8)
    assert sequencer.tick(False) is True
    assert sequencer.current_step == 0


def test_period_halves_are_independent():
    sequencer = Sequencer(8)
    sequencer.set_period_low(0xAB)
    sequencer.set_period_high(0b101)
    assert sequencer.period == 0x5AB
    sequencer.set_period_low(0x12)
    assert sequencer.period >> 8 == 0b101
    assert sequencer.period & 0xFF == 0x12


def test_period_high_uses_three_bits():
    sequencer = Sequencer(8)
    sequencer.set_period_high(0xFF)
    assert sequencer.period >> 8 == 0b111