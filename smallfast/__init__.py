"""Public package surface for the smallfast PRNG."""

from .models import GeneratorState
from .prng import JSF32, MIX_ROUNDS, SEED_CONSTANT, ranval, raninit, rot32
from .stream import StreamConfig, run_stream

__all__ = [
    "GeneratorState",
    "JSF32",
    "MIX_ROUNDS",
    "SEED_CONSTANT",
    "StreamConfig",
    "ranval",
    "raninit",
    "rot32",
    "run_stream",
]
