# Bob Jenkins' small noncryptographic PRNG (a.k.a. JSF32) for deterministic runs
# Source: public domain reference implementation
from dataclasses import dataclass, field
from typing import Iterable, Tuple

from .models import MASK32, GeneratorState

SEED_CONSTANT = 0xF1EA5EED
MIX_ROUNDS = 20


def rot32(x: int, k: int) -> int:
    """Rotate a 32-bit word left by ``k`` bits (1..31)."""
    if not 0 < k < 32:
        raise ValueError(f"Rotation must be between 1 and 31 bits, received {k}.")
    x &= MASK32
    return ((x << k) | (x >> (32 - k))) & MASK32


def ranval(state: GeneratorState) -> int:
    """Advance ``state`` in place and return the next 32-bit output."""
    e = (state.a - rot32(state.b, 27)) & MASK32
    state.a = state.b ^ rot32(state.c, 17)
    state.b = (state.c + state.d) & MASK32
    state.c = (state.d + e) & MASK32
    # d uses the a that was just written
    state.d = (e + state.a) & MASK32
    return state.d


def raninit(seed: int) -> GeneratorState:
    """Build a freshly mixed state from a 32-bit seed."""
    seed &= MASK32
    state = GeneratorState(a=SEED_CONSTANT, b=seed, c=seed, d=seed)
    for _ in range(MIX_ROUNDS):
        ranval(state)
    return state


@dataclass
class JSF32:
    seed: int = 0
    state: GeneratorState = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.seed &= MASK32
        self.state = raninit(self.seed)

    @classmethod
    def from_state(cls, state: GeneratorState) -> "JSF32":
        """Adopt a copy of ``state``; the seed is unknown and left as None."""
        rng = cls.__new__(cls)
        rng.seed = None
        rng.state = state.copy()
        return rng

    def next_u32(self) -> int:
        return ranval(self.state)

    def random(self) -> float:
        return self.next_u32() / 2**32

    def randint(self, a: int, b: int) -> int:
        # inclusive a..b
        if b < a:
            raise ValueError(f"Empty range for randint({a}, {b}).")
        span = b - a + 1
        return a + int(self.random() * span)

    def randbytes(self, n: int) -> bytes:
        """Little-endian bytes from successive words; the tail word is truncated."""
        if n < 0:
            raise ValueError("Byte count must be non-negative.")
        out = bytearray()
        while len(out) < n:
            out += self.next_u32().to_bytes(4, "little")
        return bytes(out[:n])

    def getstate(self) -> Tuple[int, int, int, int]:
        return self.state.as_tuple()

    def setstate(self, words: Iterable[int]) -> None:
        self.state = GeneratorState.from_tuple(words)
