"""The triangle-wave channel."""

from __future__ import annotations

from .length_counter import LengthCounter
from .sequencer import Sequencer

TRIANGLE_WAVEFORM = (
    15, 14, 13, 12, 11, 10, 9, 8, 7, 6, 5, 4, 3, 2, 1, 0,
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15,
)


class TriangleChannel:
    def __init__(self) -> None:
        self.length_counter = LengthCounter()
        self.sequencer = Sequencer(len(TRIANGLE_WAVEFORM))
        self.linear_counter = 0
        self.linear_counter_start = False
        self.linear_counter_period = 0
        self.control_flag = False

    def write_register(self, address: int, value: int) -> None:
        value &= 0xFF
        if address == 0x4008:
            self.control_flag = value & 0b1000_0000 != 0
            self.length_counter.set_halted(self.control_flag)
            self.linear_counter_period = value & 0b0111_1111
        elif address == 0x4009:
            pass
        elif address == 0x400A:
            self.sequencer.set_period_low(value)
        elif address == 0x400B:
            self.length_counter.write_register(value)
            self.sequencer.set_period_high(value & 0b111)
            self.linear_counter_start = True
        else:
            raise ValueError(f"bad triangle register {address:04X}")

    def sample(self) -> int:
        if self._active() and self.sequencer.period > 2:
            return TRIANGLE_WAVEFORM[self.sequencer.current_step]
        return 0

    def tick_sequencer(self) -> None:
        self.sequencer.tick(self._active())

    def tick_quarter_frame(self) -> None:
        if self.linear_counter_start:
            self.linear_counter = self.linear_counter_period
        elif self.linear_counter > 0:
            self.linear_counter -= 1
        if not self.control_flag:
            self.linear_counter_start = False

    def tick_half_frame(self) -> None:
        self.length_counter.tick()

    def _active(self) -> bool:
        return self.length_counter.active() and self.linear_counter > 0

    def playing(self) -> bool:
        return self.length_counter.playing()

    def set_enabled(self, value: bool) -> None:
        self.length_counter.set_enabled(value)

    def update_pending_length_counter(self) -> None:
        self.length_counter.update_pending()