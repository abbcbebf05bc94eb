"""Survey a run of consecutive seeds and emit first-output sheets (CSV + JSON)."""

from __future__ import annotations

import argparse
import csv
import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_OUT_DIR = PROJECT_ROOT / "stream_logs" / "survey"
SAMPLE_WORDS = 256
SAMPLE_BUCKETS = 16

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from smallfast.checks import bucket_counts, chi_square, collisions
from smallfast.prng import JSF32


@dataclass
class SurveyRow:
    seed: int
    first_output: int
    chi_square: float

    @classmethod
    def from_seed(cls, seed: int) -> "SurveyRow":
        rng = JSF32(seed)
        words = [rng.next_u32() for _ in range(SAMPLE_WORDS)]
        return cls(
            seed=seed,
            first_output=words[0],
            chi_square=chi_square(bucket_counts(words, SAMPLE_BUCKETS)),
        )

    def as_csv_row(self) -> List[str]:
        return [
            f"0x{self.seed:08X}",
            f"0x{self.first_output:08X}",
            f"{self.chi_square:.3f}",
        ]


def survey(start: int, count: int) -> List[SurveyRow]:
    return [SurveyRow.from_seed((start + offset) & 0xFFFFFFFF) for offset in range(count)]


def summarise(rows: Iterable[SurveyRow]) -> dict:
    rows = list(rows)
    groups = collisions({row.seed: row.first_output for row in rows})
    return {
        "seeds": len(rows),
        "distinct_first_outputs": len({row.first_output for row in rows}),
        "collisions": {f"0x{value:08X}": seeds for value, seeds in groups.items()},
        "max_chi_square": round(max((row.chi_square for row in rows), default=0.0), 3),
    }


def _write_csv(rows: Iterable[SurveyRow], out_dir: Path) -> Path:
    csv_path = out_dir / "seed_survey.csv"
    with csv_path.open("w", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(["seed", "first_output", "chi_square"])
        for row in rows:
            writer.writerow(row.as_csv_row())
    return csv_path


def _write_json(summary: dict, out_dir: Path) -> Path:
    json_path = out_dir / "seed_survey.json"
    json_path.write_text(json.dumps(summary, indent=2))
    return json_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Survey first outputs across consecutive seeds")
    parser.add_argument(
        "--start",
        type=lambda value: int(value, 0),
        default=0,
        help="First seed in the survey (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument("--count", type=int, default=1000, help="Number of consecutive seeds")
    parser.add_argument("--out-dir", type=Path, default=DEFAULT_OUT_DIR, help="Destination directory")
    return parser


def main(argv: List[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    if args.count < 1:
        raise SystemExit("--count must be at least 1")

    out_dir: Path = args.out_dir
    if not out_dir.is_absolute():
        out_dir = (PROJECT_ROOT / out_dir).resolve()
    out_dir.mkdir(parents=True, exist_ok=True)

    rows = survey(args.start, args.count)
    summary = summarise(rows)
    _write_csv(rows, out_dir)
    _write_json(summary, out_dir)
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
