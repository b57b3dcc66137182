"""Helper functions for update_status CLI."""

from __future__ import annotations

import argparse
from pathlib import Path

from classify_headlines.classify_headlines import DEFAULT_MODEL
from common.cli_helpers import parse_positive_float
from common.config import DEFAULT_TIMEOUT
from fetch_headlines.fetch_headlines import DEFAULT_QUERY

# status.json at the repository root
DEFAULT_STATUS_FILE = Path(__file__).resolve().parents[2] / "status.json"


def parse_update_status_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for update_status."""

    parser = argparse.ArgumentParser(
        description="Fetch today's headlines, classify them and write status.json",
    )
    parser.add_argument(
        "--status-file",
        type=Path,
        default=DEFAULT_STATUS_FILE,
        help=(
            "Path of the status file to overwrite "
            f"(default: {DEFAULT_STATUS_FILE}, the repository root of a source checkout; "
            "pass this explicitly when running from an installed package)"
        ),
    )
    parser.add_argument(
        "--model",
        default=DEFAULT_MODEL,
        help=f"Anthropic model to use (default: {DEFAULT_MODEL})",
    )
    parser.add_argument(
        "--query",
        default=DEFAULT_QUERY,
        help="NewsAPI search query",
    )
    parser.add_argument(
        "--timeout",
        type=lambda v: parse_positive_float(v, "timeout"),
        default=DEFAULT_TIMEOUT,
        help=f"HTTP timeout in seconds for each API call (default: {DEFAULT_TIMEOUT})",
    )
    return parser.parse_args(argv)
