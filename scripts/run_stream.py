"""Command line harness for a deterministic smallfast draw."""

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "stream_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from smallfast import StreamConfig, run_stream


def _parse_seed(value: str) -> int:
    """Accept decimal or 0x-prefixed hex seeds within the 32-bit range."""

    try:
        seed = int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Seed must be an integer, received '{value}'.") from exc

    if not 0 <= seed <= 0xFFFFFFFF:
        raise argparse.ArgumentTypeError(f"Seed must fit in 32 bits, received {value}.")
    return seed


def _parse_count(value: str) -> int:
    try:
        count = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, received '{value}'.") from exc

    if count < 0:
        raise argparse.ArgumentTypeError("Counts must be non-negative.")
    return count


def _parse_buckets(value: str) -> int:
    buckets = _parse_count(value)
    if buckets < 1:
        raise argparse.ArgumentTypeError("At least one bucket is required.")
    return buckets


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw a deterministic smallfast output stream")
    parser.add_argument(
        "--seed",
        type=_parse_seed,
        default=0,
        help="Generator seed (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument("--count", type=_parse_count, default=16, help="Number of words to draw")
    parser.add_argument(
        "--skip",
        type=_parse_count,
        default=0,
        help="Words to discard after seeding before the first reported draw",
    )
    parser.add_argument(
        "--buckets",
        type=_parse_buckets,
        default=16,
        help="Histogram buckets used for the chi-square summary",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "stream_logs/latest_run.json under the repository root."
        ),
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    cfg = StreamConfig(
        seed=args.seed,
        count=args.count,
        skip=args.skip,
        buckets=args.buckets,
    )
    result = run_stream(cfg)

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
