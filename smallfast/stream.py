"""Deterministic output run for a single seed, reported as plain JSON data."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List

from .checks import bit_balance, bucket_counts, chi_square
from .prng import JSF32


@dataclass
class StreamConfig:
    """Configuration for a single deterministic draw."""

    seed: int = 0
    count: int = 16
    skip: int = 0  # words discarded after seeding, on top of the mixing rounds
    buckets: int = 16


@dataclass
class DrawLog:
    index: int
    value: int
    hex: str


def run_stream(cfg: StreamConfig) -> Dict[str, Any]:
    """Seed, skip, draw, and summarise; the same config always yields the same report."""

    if cfg.count < 0:
        raise ValueError("count must be non-negative.")
    if cfg.skip < 0:
        raise ValueError("skip must be non-negative.")
    if cfg.buckets < 1:
        raise ValueError("buckets must be at least 1.")

    rng = JSF32(cfg.seed)
    initial_state = list(rng.getstate())

    for _ in range(cfg.skip):
        rng.next_u32()

    log: List[DrawLog] = []
    for index in range(cfg.count):
        value = rng.next_u32()
        log.append(DrawLog(index=cfg.skip + index, value=value, hex=f"0x{value:08X}"))

    values = [entry.value for entry in log]
    if values:
        counts = bucket_counts(values, cfg.buckets)
        balance = [round(fraction, 4) for fraction in bit_balance(values)]
        chi = round(chi_square(counts), 3)
    else:
        counts, balance, chi = None, None, None

    return {
        "config": asdict(cfg),
        "initial_state": initial_state,
        "final": {
            "state": list(rng.getstate()),
            "bit_balance": balance,
            "chi_square": chi,
            "buckets": counts,
        },
        "log": [asdict(entry) for entry in log],
    }


if __name__ == "__main__":
    import json

    result = run_stream(StreamConfig())
    print(json.dumps(result, indent=2))
