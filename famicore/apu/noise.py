"""The pseudo-random noise channel."""

from __future__ import annotations

from .envelope import Envelope
from .length_counter import LengthCounter

PERIODS = (4, 8, 16, 32, 64, 96, 128, 160, 202, 254, 380, 508, 762, 1016, 2034, 4068)


class NoiseChannel:
    def __init__(self) -> None:
        self.envelope = Envelope()
        self.length_counter = LengthCounter()
        self.mode = False
        self.period = 0
        self.counter = 0
        self.shift = 1

    def write_register(self, address: int, value: int) -> None:
        value &= 0xFF
        if address == 0x400C:
            self.length_counter.set_halted(value & 0b0010_0000 != 0)
            self.envelope.write_register(value)
        elif address == 0x400D:
            pass
        elif address == 0x400E:
            self.mode = value & 0b1000_0000 != 0
            self.period = PERIODS[value & 0b1111]
        elif address == 0x400F:
            self.length_counter.write_register(value)
            self.envelope.start()
        else:
            raise ValueError(f"bad noise register {address:04X}")

    def sample(self) -> int:
        if self.length_counter.active() and self.shift & 1 == 0:
            return self.envelope.volume()
        return 0

    def tick_sequencer(self) -> None:
        if self.counter > 0:
            self.counter -= 1
            return
        self.counter = self.period
        tap = (self.shift >> (6 if self.mode else 1)) & 1
        feedback = tap ^ (self.shift & 1)
        self.shift = (self.shift >> 1) | (feedback << 14)

    def tick_quarter_frame(self) -> None:
        self.envelope.tick()

    def tick_half_frame(self) -> None:
        self.length_counter.tick()

    def playing(self) -> bool:
        return self.length_counter.playing()

    def set_enabled(self, value: bool) -> None:
        self.length_counter.set_enabled(value)

    def update_pending_length_counter(self) -> None:
        self.length_counter.update_pending()