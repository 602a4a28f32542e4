"""Structured logging setup for the vid2gif pipeline."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure structured logging with consistent format."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )


def level_for(verbose: bool) -> str:
    """Map the CLI verbosity flag to a logging level name."""
    return "DEBUG" if verbose else "INFO"
