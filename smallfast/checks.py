"""Sanity statistics over generator output; cheap smoke checks, not a test battery."""

from typing import Dict, Iterable, List, Sequence

from .models import GeneratorState
from .prng import ranval, raninit


def bit_balance(words: Sequence[int]) -> List[float]:
    """Fraction of set bits at each of the 32 bit positions (LSB first)."""
    if not words:
        raise ValueError("bit_balance needs at least one word.")
    totals = [0] * 32
    for word in words:
        for bit in range(32):
            totals[bit] += (word >> bit) & 1
    return [count / len(words) for count in totals]


def bucket_counts(words: Iterable[int], buckets: int) -> List[int]:
    """Histogram of words scaled into ``buckets`` equal slices of the 32-bit range."""
    if buckets < 1:
        raise ValueError("Bucket count must be at least 1.")
    counts = [0] * buckets
    for word in words:
        counts[(word * buckets) >> 32] += 1
    return counts


def chi_square(counts: Sequence[int]) -> float:
    """Pearson statistic of ``counts`` against a flat expectation."""
    total = sum(counts)
    if not counts or total == 0:
        raise ValueError("chi_square needs a non-empty, non-zero histogram.")
    expected = total / len(counts)
    return sum((observed - expected) ** 2 / expected for observed in counts)


def first_outputs(seeds: Iterable[int]) -> Dict[int, int]:
    return {seed: ranval(raninit(seed)) for seed in seeds}


def collisions(outputs: Dict[int, int]) -> Dict[int, List[int]]:
    """Group seeds that produced the same first output."""
    groups: Dict[int, List[int]] = {}
    for seed, value in outputs.items():
        groups.setdefault(value, []).append(seed)
    return {value: seeds for value, seeds in groups.items() if len(seeds) > 1}


def changed_steps(state: GeneratorState, steps: int) -> int:
    """How many of ``steps`` consecutive calls changed at least one state word."""
    probe = state.copy()
    changed = 0
    for _ in range(steps):
        before = probe.as_tuple()
        ranval(probe)
        if probe.as_tuple() != before:
            changed += 1
    return changed
