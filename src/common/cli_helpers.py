"""Common CLI helper utilities."""

from __future__ import annotations

import argparse
import logging


def setup_logging() -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def parse_positive_float(value: str, field_name: str = "value") -> float:
    """Parse a strictly positive float for argparse arguments.

    Args:
        value: Raw string from the command line.
        field_name: Name of the field for error messages.

    Returns:
        Parsed float.

    Raises:
        argparse.ArgumentTypeError: If the value is not a positive number.
    """
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{field_name} must be a number") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"{field_name} must be greater than 0")
    return parsed
