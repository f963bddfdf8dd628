"""A timer that steps through a fixed number of waveform steps."""

from __future__ import annotations


class Sequencer:
    def __init__(self, steps: int) -> None:
        self.counter = 0
        self.period = 0
        self.steps = steps
        self.current_step = 0

    def tick(self, step_enabled: bool) -> bool:
        """Advance the timer; return True when it reloads."""
        if self.counter == 0:
            self.counter = self.period
            if step_enabled:
                self.current_step = (self.current_step + 1) % self.steps
            return True
        self.counter -= 1
        return False

    def set_period_low(self, value: int) -> None:
        self.period = (self.period & 0xFF00) | (value & 0xFF)

    def set_period_high(self, value: int) -> None:
        self.period = (self.period & 0x00FF) | ((value & 0b111) << 8)