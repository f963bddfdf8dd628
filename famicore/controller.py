"""The standard joypad and its serial shift-out register."""

from __future__ import annotations

from enum import IntEnum


class Button(IntEnum):
    A = 0b0000_0001
    B = 0b0000_0010
    SELECT = 0b0000_0100
    START = 0b0000_1000
    UP = 0b0001_0000
    DOWN = 0b0010_0000
    LEFT = 0b0100_0000
    RIGHT = 0b1000_0000


class Controller:
    """Button states read out one bit per register read, A first."""

    def __init__(self) -> None:
        self.button_states = 0
        self.strobe = False
        self.cursor = 0

    def write_register(self, value: int) -> None:
        self.strobe = value & 1 != 0
        if self.strobe:
            self.cursor = 0

    def read_register(self) -> int:
        v = self.button_states >> self.cursor if self.cursor < 8 else 1
        if not self.strobe:
            self.cursor += 1
        return (0x40 | v) & 0b0001_1111

    def set_button_state(self, button: Button, pressed: bool) -> None:
        self.button_states &= ~int(button) & 0xFF
        if pressed:
            self.button_states |= int(button)