"""Project configuration (paths, document layout, logging)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

# Instance directories are discovered under `instances/` by this glob.
INSTANCE_GLOB: str = "TCSIN*"

# Problem field -> filename suffix of the document it is decoded from.
DOCUMENT_SUFFIXES: dict[str, str] = {
    "status": "status.json",
    "train_info": "TrainInfo.json",
    "line_movements": "LineMovements.json",
    "station_movements": "StationMovements.json",
}


def project_root() -> Path:
    """Return repository root assuming this file lives in `<root>/tcs_instance/core/config.py`."""
    return Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Paths:
    root: Path
    instances: Path
    artifacts: Path
    summary_csv: Path
    config: Path
    ingest_config: Path


def get_paths(root: Path | None = None) -> Paths:
    r = project_root() if root is None else Path(root).resolve()
    return Paths(
        root=r,
        instances=r / "instances",
        artifacts=r / "artifacts",
        summary_csv=r / "artifacts" / "instance_summary.csv",
        config=r / "config",
        ingest_config=r / "config" / "ingest_config.yaml",
    )


@dataclass(frozen=True)
class IngestSettings:
    instance_glob: str = INSTANCE_GLOB
    document_suffixes: tuple[tuple[str, str], ...] = tuple(DOCUMENT_SUFFIXES.items())
    check_references: bool = True
    summary_csv: str | None = None

    def suffixes(self) -> dict[str, str]:
        return dict(self.document_suffixes)


def resolve_settings(cfg: dict[str, Any] | None) -> IngestSettings:
    """Merge a loaded `ingest_config.yaml` mapping over the defaults."""
    cfg = cfg or {}
    unknown = set(cfg) - {"instances", "documents", "validation", "outputs"}
    if unknown:
        raise ValueError(f"ingest config: unknown sections: {sorted(unknown)}")

    suffixes = dict(DOCUMENT_SUFFIXES)
    documents = cfg.get("documents") or {}
    bad = set(documents) - set(suffixes)
    if bad:
        raise ValueError(f"ingest config: unknown documents: {sorted(bad)}")
    suffixes.update({k: str(v) for k, v in documents.items()})

    instances = cfg.get("instances") or {}
    validation = cfg.get("validation") or {}
    outputs = cfg.get("outputs") or {}
    summary_csv = outputs.get("summary_csv")
    return IngestSettings(
        instance_glob=str(instances.get("glob", INSTANCE_GLOB)),
        document_suffixes=tuple(suffixes.items()),
        check_references=bool(validation.get("check_references", True)),
        summary_csv=None if summary_csv is None else str(summary_csv),
    )


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
