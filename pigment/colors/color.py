from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

CHANNEL_MIN = 0
CHANNEL_MAX = 255


@dataclass(frozen=True)
class Color:
    """
    An RGB display color with integer channels in the 0-255 range.

    Absence of color is modelled as ``None`` wherever a color is optional.
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not CHANNEL_MIN <= value <= CHANNEL_MAX:
                raise ValueError(f"{name} channel out of range: {value}")

    @classmethod
    def parse(cls, text: str) -> "Color":
        """
        Parse the ``"r,g,b"`` form used by the toolbar palette.
        """

        parts = [part.strip() for part in str(text).split(",")]
        if len(parts) != 3:
            raise ValueError(f"Expected 'r,g,b', got {text!r}")
        try:
            channels = [int(part) for part in parts]
        except ValueError as exc:
            raise ValueError(f"Invalid color channel in {text!r}") from exc
        return cls(*channels)

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "Color":
        items = list(values)
        if len(items) != 3:
            raise ValueError(f"Expected three channels, got {len(items)}")
        return cls(int(items[0]), int(items[1]), int(items[2]))

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.red, self.green, self.blue

    def to_css(self) -> str:
        return f"rgb({self.red}, {self.green}, {self.blue})"

    def __str__(self) -> str:
        return f"{self.red},{self.green},{self.blue}"


RED = Color(255, 0, 0)
YELLOW = Color(255, 255, 0)
BLUE = Color(0, 0, 255)
