"""The pulse-channel sweep unit that bends the period up or down."""

from __future__ import annotations

from enum import IntEnum

from .sequencer import Sequencer


class SweepNegationMode(IntEnum):
    ONES_COMPLEMENT = 1
    TWOS_COMPLEMENT = 0


class Sweep:
    def __init__(self, negation_mode: SweepNegationMode) -> None:
        self.enabled = False
        self.reload = False
        self.shift = 0
        self.negate = False
        self.negation_mode = negation_mode
        self.period = 0
        self.counter = 0

    def write_register(self, data: int) -> None:
        self.enabled = data & 0b1000_0000 != 0
        self.period = (data & 0b0111_0000) >> 4
        self.negate = data & 0b0000_1000 != 0
        self.shift = data & 0b0000_0111
        self.reload = True

    def tick(self, sequencer: Sequencer) -> None:
        if self.counter == 0 and self.enabled and self.shift > 0 and sequencer.period >= 8:
            new_period = self.target_period(sequencer)
            if new_period < 0x800:
                sequencer.period = new_period
                sequencer.counter = new_period

        if self.counter == 0 or self.reload:
            self.counter = self.period
            self.reload = False
        else:
            self.counter -= 1

    def target_period(self, sequencer: Sequencer) -> int:
        period = sequencer.period
        if self.negate:
            return (period - (period >> self.shift) - int(self.negation_mode)) & 0xFFFF
        return (period + (period >> self.shift)) & 0xFFFF