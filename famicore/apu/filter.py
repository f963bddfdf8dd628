"""First-order IIR high-pass and low-pass filters."""

from __future__ import annotations

import math


class FirstOrderFilter:
    def __init__(self, b0: float, b1: float, a1: float) -> None:
        self.b0 = b0
        self.b1 = b1
        self.a1 = a1
        self.prev_x = 0.0
        self.prev_y = 0.0

    @classmethod
    def high_pass(cls, sample_rate: float, cutoff_frequency: float) -> FirstOrderFilter:
        c = sample_rate / math.pi / cutoff_frequency
        a0i = 1.0 / (1.0 + c)
        return cls(c * a0i, -c * a0i, (1.0 - c) * a0i)

    @classmethod
    def low_pass(cls, sample_rate: float, cutoff_frequency: float) -> FirstOrderFilter:
        c = sample_rate / math.pi / cutoff_frequency
        a0i = 1.0 / (1.0 + c)
        return cls(a0i, a0i, (1.0 - c) * a0i)

    def tick(self, x: float) -> float:
        y = self.b0 * x + self.b1 * self.prev_x - self.a1 * self.prev_y
        self.prev_y = y
        self.prev_x = x
        return y