"""The APU frame counter that clocks envelopes, sweeps and lengths."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class _Mode(Enum):
    ZERO = 0
    ONE = 1


class FrameResult(Enum):
    NONE = "none"
    QUARTER = "quarter"
    HALF = "half"


@dataclass
class FrameCounter:
    counter: int = 0
    cycles: int = 0
    irq_enabled: bool = True
    public_irq_flag: bool = False
    private_irq_flag: bool = False
    mode: _Mode = field(default=_Mode.ZERO)

    def write_register(self, value: int, cycles: int) -> FrameResult:
        self.irq_enabled = value & 0x40 == 0
        if not self.irq_enabled:
            self.public_irq_flag = False
            self.private_irq_flag = False
        self.mode = _Mode.ZERO if value & 0x80 == 0 else _Mode.ONE
        self.counter = 0 if cycles & 1 == 0 else -1
        return FrameResult.NONE if self.mode is _Mode.ZERO else FrameResult.HALF

    def tick(self) -> FrameResult:
        if self.mode is _Mode.ZERO:
            result = self._tick_mode_zero()
        else:
            result = self._tick_mode_one()
        self.counter += 1
        return result

    def _tick_mode_zero(self) -> FrameResult:
        c = self.counter
        if c == 7_459:
            return FrameResult.QUARTER
        if c == 14_915:
            return FrameResult.HALF
        if c == 22_373:
            return FrameResult.QUARTER
        if c == 29_830:
            self.trigger_irq()
            return FrameResult.NONE
        if c == 29_831:
            self.trigger_irq()
            self.publish_irq()
            return FrameResult.HALF
        if c == 29_832:
            self.trigger_irq()
            self.publish_irq()
            # The hardware rolls over at 29_830; skip ahead to match.
            self.counter = 2
        return FrameResult.NONE

    def _tick_mode_one(self) -> FrameResult:
        c = self.counter
        if c == 7_459:
            return FrameResult.QUARTER
        if c == 14_915:
            return FrameResult.HALF
        if c == 22_373:
            return FrameResult.QUARTER
        if c == 37_283:
            # Rolled over at 37_282; the half-frame clock lands one tick later.
            self.counter = 1
            return FrameResult.HALF
        return FrameResult.NONE

    def trigger_irq(self) -> None:
        if self.irq_enabled:
            self.private_irq_flag = True

    def publish_irq(self) -> None:
        self.public_irq_flag = self.private_irq_flag