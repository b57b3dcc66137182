"""CLI for the daily status update."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from dotenv import load_dotenv

from common.cli_helpers import setup_logging
from common.config import load_settings
from common.errors import ConfigError
from update_status.helpers import parse_update_status_args
from update_status.update_status import update_status

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    setup_logging()

    args = parse_update_status_args(argv)

    try:
        settings = load_settings()
    except ConfigError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("=== Daily War Status Update ===")
    logger.info("Time: %s", datetime.now(timezone.utc).isoformat())

    ok = update_status(
        settings,
        args.status_file,
        model=args.model,
        query=args.query,
        timeout=args.timeout,
    )
    if not ok:
        return 1

    logger.info("Done.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
