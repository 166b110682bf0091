"""CLI entry point: turn a song request JSON file into a style prompt and lyrics."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from songsmith.config import add_root_handler
from songsmith.models.song_request import SongRequest
from songsmith.services.synthesis import synthesize

log = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Synthesize a style prompt and fallback lyrics from a song request."
    )
    parser.add_argument(
        "request",
        nargs="?",
        default="-",
        help="Path to a song request JSON file ('-' or omitted reads stdin).",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log extraction and truncation details to stderr.",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Output directory (default: outputs/YYYY-MM-DD/HH-MM-SS).",
    )
    return parser.parse_args(argv)


def make_run_dir(custom_dir: str | None = None) -> Path:
    """Create the directory for this run: ``custom_dir`` or outputs/<date>/<time>."""
    stamp = datetime.now()
    run_dir = Path(custom_dir) if custom_dir else Path("outputs", f"{stamp:%Y-%m-%d}", f"{stamp:%H-%M-%S}")
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def attach_run_logging(run_dir: Path, verbose: bool = False) -> None:
    """Mirror log records to stderr and to the run's execution.log."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.getLogger().setLevel(level)
    add_root_handler(logging.StreamHandler(sys.stderr), level)
    add_root_handler(logging.FileHandler(run_dir / "execution.log", encoding="utf-8"), level)


def read_request(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    output_dir = make_run_dir(args.output_dir)
    attach_run_logging(output_dir, args.verbose)

    start_time = time.time()
    log.info("Starting song synthesis")
    log.info(f"  - Request: {'<stdin>' if args.request == '-' else args.request}")
    log.info(f"  - Output directory: {output_dir}")

    try:
        payload = json.loads(read_request(args.request))
    except (OSError, json.JSONDecodeError) as e:
        log.error(f"Could not read song request: {e}")
        return 1

    try:
        request = SongRequest.model_validate(payload)
    except ValidationError as e:
        log.error(f"Invalid song request: {e}")
        return 1

    result = synthesize(request)

    elapsed_time = time.time() - start_time
    log.info(f"Synthesis completed in {elapsed_time:.3f}s")

    output_file = output_dir / "result.json"
    output_file.write_text(result.model_dump_json(indent=2, by_alias=True))
    log.info(f"Result saved to {output_file}")

    print(result.model_dump_json(indent=2, by_alias=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
