"""The two square-wave (pulse) channels."""

from __future__ import annotations

from .envelope import Envelope
from .length_counter import LengthCounter
from .sequencer import Sequencer
from .sweep import Sweep, SweepNegationMode

PULSE_WAVEFORMS = (
    (0, 1, 0, 0, 0, 0, 0, 0),
    (0, 1, 1, 0, 0, 0, 0, 0),
    (0, 1, 1, 1, 1, 0, 0, 0),
    (1, 0, 0, 1, 1, 1, 1, 1),
)


class PulseChannel:
    def __init__(self, sweep_negation_mode: SweepNegationMode) -> None:
        self.envelope = Envelope()
        self.length_counter = LengthCounter()
        self.sequencer = Sequencer(len(PULSE_WAVEFORMS[0]))
        self.sweep = Sweep(sweep_negation_mode)
        self.duty_cycle = 0

    def write_register(self, address: int, value: int) -> None:
        """Write one of the four registers; the register is chosen by address % 4."""
        value &= 0xFF
        register = address % 4
        if register == 0:
            self.duty_cycle = value >> 6
            self.envelope.write_register(value)
            self.length_counter.set_halted(value & 0b0010_0000 != 0)
        elif register == 1:
            self.sweep.write_register(value)
        elif register == 2:
            self.sequencer.set_period_low(value)
        else:
            self.length_counter.write_register(value)
            self.sequencer.set_period_high(value & 0b111)
            self.envelope.start()
            self.sequencer.current_step = 0

    def sample(self) -> int:
        if (
            self.length_counter.active()
            and self.sequencer.period >= 8
            and self.sweep.target_period(self.sequencer) < 0x800
        ):
            step = PULSE_WAVEFORMS[self.duty_cycle][self.sequencer.current_step]
            return step * self.envelope.volume()
        return 0

    def tick_quarter_frame(self) -> None:
        self.envelope.tick()

    def tick_half_frame(self) -> None:
        self.length_counter.tick()
        self.sweep.tick(self.sequencer)

    def tick_sequencer(self) -> None:
        self.sequencer.tick(True)

    def playing(self) -> bool:
        return self.length_counter.playing()

    def set_enabled(self, value: bool) -> None:
        self.length_counter.set_enabled(value)

    def update_pending_length_counter(self) -> None:
        self.length_counter.update_pending()