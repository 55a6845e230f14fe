"""Read every instance directory and report what was loaded.

Run:
  python scripts/read_instances.py
  python scripts/read_instances.py --instances-dir path/to/instances --summary-csv artifacts/instance_summary.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure repo root is on sys.path so `import tcs_instance...` works when executing this file directly.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from tcs_instance.core.cli_utils import ReadStats, add_instance_flags, create_base_parser
from tcs_instance.core.config import configure_logging, get_paths, resolve_settings
from tcs_instance.core.data_loaders import read_instances
from tcs_instance.core.errors import InstanceError
from tcs_instance.io import (
    InstanceRecord,
    load_ingest_config,
    locate_document,
    sha256_file,
    upsert_instance_summary,
)

LOGGER = logging.getLogger("read_instances")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = create_base_parser("Read traffic-control instance directories into validated problems.")
    add_instance_flags(parser)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    paths = get_paths()
    config_path = Path(args.config) if args.config else paths.ingest_config
    cfg = load_ingest_config(config_path) if config_path.exists() else {}
    settings = resolve_settings(cfg)

    instances_dir = Path(args.instances_dir) if args.instances_dir else paths.instances
    pattern = args.pattern or settings.instance_glob
    check_references = settings.check_references and not args.no_reference_check
    summary_csv = args.summary_csv or settings.summary_csv

    stats = ReadStats()
    records: list[InstanceRecord] = []
    for instance_dir, result in read_instances(
        instances_dir,
        pattern=pattern,
        check_references=check_references,
        suffixes=settings.suffixes(),
    ):
        name = str(instance_dir)
        print(f"Reading {name}")
        if isinstance(result, InstanceError):
            stats.add_failure(name, str(result))
            records.append(InstanceRecord(instance=instance_dir.name, status="failed", error=str(result)))
            continue
        print(f"Read problem with {len(result.status.trains)} trains")
        stats.add_ok(name)
        status_path = locate_document(instance_dir, settings.suffixes()["status"])
        records.append(
            InstanceRecord(
                instance=instance_dir.name,
                status="ok",
                status_sha256=sha256_file(status_path),
                **result.summary(),
            )
        )

    if summary_csv and records:
        out = Path(summary_csv)
        if not out.is_absolute():
            out = paths.root / out
        upsert_instance_summary(records, out)
        LOGGER.info("Wrote instance summary to %s", out)

    summary = stats.get_summary()
    LOGGER.info("Done. Read: %d, failed: %d", summary["n_read"], summary["n_failed"])
    return 1 if summary["n_failed"] else 0


if __name__ == "__main__":
    sys.exit(main())
