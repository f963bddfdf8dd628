"""The volume envelope shared by the pulse and noise channels."""

from __future__ import annotations


class Envelope:
    def __init__(self) -> None:
        self.control = 0
        self.counter = 0
        self.level = 0
        self._start_pending = False

    @property
    def constant_level(self) -> int:
        return self.control & 0x0F

    @property
    def decay_period(self) -> int:
        return self.control & 0x0F

    @property
    def constant(self) -> bool:
        return self.control & 0x10 != 0

    @property
    def looping(self) -> bool:
        return self.control & 0x20 != 0

    def tick(self) -> None:
        if self._start_pending:
            self._start_pending = False
            self._set_level(0x0F)
        elif self.counter > 0:
            self.counter -= 1
        elif self.level > 0:
            self._set_level(self.level - 1)
        elif self.looping:
            self._set_level(0x0F)

    def _set_level(self, value: int) -> None:
        self.level = value & 0x0F
        self.counter = self.decay_period

    def write_register(self, data: int) -> None:
        self.control = data & 0xFF

    def start(self) -> None:
        self._start_pending = True

    def volume(self) -> int:
        return self.constant_level if self.constant else self.level