"""Command line harness that checks the bundled sample properties."""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "check_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from minicheck import RunConfiguration, check
from minicheck.factors import SAMPLE_PROPERTIES


def _parse_run_count(value: str) -> int:
    """Run counts may be zero but never negative."""

    try:
        runs = int(value)
    except ValueError as exc:  # pragma: no cover - argparse surface ensures message
        raise argparse.ArgumentTypeError("Run count must be an integer.") from exc
    if runs < 0:
        raise argparse.ArgumentTypeError("Run count must be zero or positive.")
    return runs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Check the bundled minicheck sample properties")
    parser.add_argument(
        "--runs",
        type=_parse_run_count,
        default=100,
        help="Number of sampled values per property",
    )
    parser.add_argument(
        "--seed",
        type=lambda value: int(value, 0),
        default=None,
        help="Generator seed (accepts decimal or 0x-prefixed hex); fresh per property when omitted",
    )
    parser.add_argument(
        "--property",
        dest="properties",
        action="append",
        choices=sorted(SAMPLE_PROPERTIES),
        help="Property to check; repeat the flag to check several (default: all)",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "check_logs/latest_run.json under the repository root."
        ),
    )
    parser.add_argument("--verbose", action="store_true", help="Log seeds and failures to stderr")
    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cfg = RunConfiguration(run_count=args.runs, seed=args.seed)
    names = args.properties or sorted(SAMPLE_PROPERTIES)

    results = []
    for name in names:
        verdict = check(SAMPLE_PROPERTIES[name], cfg)
        results.append({"property": name, **asdict(verdict)})

    report = {
        "config": asdict(cfg),
        "failed": any(entry["failed"] for entry in results),
        "results": results,
    }

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(report, indent=2))

    print(json.dumps(report, indent=2))
    return 1 if report["failed"] else 0


if __name__ == "__main__":
    sys.exit(main())
