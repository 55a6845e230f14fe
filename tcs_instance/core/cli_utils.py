"""Common CLI utilities for instance scripts."""

from __future__ import annotations

import argparse
from typing import Any


def create_base_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--config",
        default=None,
        help="Ingest config YAML (default: config/ingest_config.yaml).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log per-document progress (DEBUG level).",
    )
    return parser


def add_instance_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--instances-dir",
        default=None,
        help="Directory holding the instance directories (default: instances/).",
    )
    parser.add_argument(
        "--pattern", default=None, help="Glob for instance directory names (default: TCSIN*)."
    )
    parser.add_argument(
        "--no-reference-check",
        action="store_true",
        help="Skip cross-document reference checks.",
    )
    parser.add_argument(
        "--summary-csv",
        default=None,
        help="Upsert one row per instance into this CSV.",
    )


class ReadStats:
    """Simple container for collecting outcomes across instances."""

    def __init__(self) -> None:
        self.read: list[str] = []
        self.failed: dict[str, str] = {}

    def add_ok(self, name: str) -> None:
        self.read.append(name)

    def add_failure(self, name: str, reason: str) -> None:
        self.failed[name] = reason

    def get_summary(self) -> dict[str, Any]:
        return {
            "read": self.read,
            "failed": self.failed,
            "n_read": len(self.read),
            "n_failed": len(self.failed),
        }
