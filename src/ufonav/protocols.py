from __future__ import annotations

from typing import Protocol


class Trig(Protocol):
    """Sine/cosine provider used to build step vectors."""

    def cos(self, x: float) -> float:
        """Cosine of x."""
        ...

    def sin(self, x: float) -> float:
        """Sine of x."""
        ...
