from dataclasses import dataclass
from typing import Iterable, Tuple

MASK32 = 0xFFFFFFFF


@dataclass
class GeneratorState:
    """Four 32-bit words that make up the whole generator state."""

    a: int = 0
    b: int = 0
    c: int = 0
    d: int = 0

    def __post_init__(self) -> None:
        self.a &= MASK32
        self.b &= MASK32
        self.c &= MASK32
        self.d &= MASK32

    def copy(self) -> "GeneratorState":
        return GeneratorState(self.a, self.b, self.c, self.d)

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.a, self.b, self.c, self.d)

    @classmethod
    def from_tuple(cls, words: Iterable[int]) -> "GeneratorState":
        words = tuple(words)
        if len(words) != 4:
            raise ValueError(f"Expected 4 state words, received {len(words)}.")
        return cls(*words)
