"""The length counter that silences a channel after a set duration."""

from __future__ import annotations

LENGTHS = (
    0x0A, 0xFE, 0x14, 0x02, 0x28, 0x04, 0x50, 0x06, 0xA0, 0x08, 0x3C, 0x0A, 0x0E, 0x0C, 0x1A,
    0x0E, 0x0C, 0x10, 0x18, 0x12, 0x30, 0x14, 0x60, 0x16, 0xC0, 0x18, 0x48, 0x1A, 0x10, 0x1C,
    0x20, 0x1E,
)


class LengthCounter:
    def __init__(self) -> None:
        self.counter = 0
        self.enabled = False
        self.halted = False
        self.pending_halted: bool | None = None
        self.pending_register: int | None = None

    def write_register(self, value: int) -> None:
        self.pending_register = value & 0xFF

    def set_halted(self, value: bool) -> None:
        self.pending_halted = value

    def set_enabled(self, value: bool) -> None:
        self.enabled = value
        if not value:
            self.counter = 0

    def update_pending(self) -> None:
        """Apply register writes that were delayed by one cycle."""
        if self.pending_halted is not None:
            self.halted = self.pending_halted
            self.pending_halted = None
        if self.pending_register is not None:
            if self.enabled:
                self.counter = LENGTHS[self.pending_register >> 3]
            self.pending_register = None

    def tick(self) -> None:
        if self.pending_register is not None:
            if self.counter == 0:
                return
            self.pending_register = None
        if self.enabled and not self.halted and self.counter > 0:
            self.counter -= 1

    def active(self) -> bool:
        return self.enabled and self.counter > 0

    def playing(self) -> bool:
        return self.counter > 0