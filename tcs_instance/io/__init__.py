"""Lightweight I/O helpers.

This module centralises:
- document discovery inside an instance directory (`locate_document`)
- strict decoding of instance documents into models (`decode_document`, `read_document`)
- the matching encoder (`encode_document`)
- instance inventory helpers used by `scripts/read_instances.py`
"""

from __future__ import annotations

import hashlib
import json
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, TypeVar

import pandas as pd
import yaml
from pydantic import BaseModel, ValidationError

from tcs_instance.core.errors import (
    AmbiguousDocument,
    IoFailure,
    MissingDocument,
    SchemaIssue,
    SchemaViolation,
)

M = TypeVar("M", bound=BaseModel)


def ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def locate_document(directory: Path, suffix: str) -> Path:
    """Return the single regular file in `directory` whose name ends with `suffix`.

    Raises `MissingDocument` if there is none and `AmbiguousDocument` if there are
    several (selection never depends on directory enumeration order). A directory
    that cannot be listed raises `IoFailure`.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise MissingDocument(directory, suffix)
    try:
        matches = sorted(p for p in directory.iterdir() if p.name.endswith(suffix) and p.is_file())
    except OSError as exc:
        raise IoFailure(f"cannot list instance directory: {exc}", document=directory) from exc
    if not matches:
        raise MissingDocument(directory, suffix)
    if len(matches) > 1:
        raise AmbiguousDocument(directory, suffix, matches)
    return matches[0]


def read_text(path: Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise IoFailure(f"cannot read document: {exc}", document=path) from exc


def _format_loc(loc: Sequence[int | str]) -> str:
    out = ""
    for part in loc:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out += f".{part}" if out else str(part)
    return out


def _issues_from(exc: ValidationError) -> list[SchemaIssue]:
    return [
        SchemaIssue(path=_format_loc(err["loc"]), kind=err["type"], message=err["msg"])
        for err in exc.errors(include_url=False)
    ]


def decode_document(text: str | bytes, model: type[M], *, document: str | Path) -> M:
    """Decode JSON `text` into `model`, failing with `SchemaViolation` on any mismatch.

    The standard `json` parser keeps the last value of a duplicated key, so repeated
    mapping keys collapse to the later entry.
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        issue = SchemaIssue(
            path="",
            kind="json_invalid",
            message=f"{exc.msg} at line {exc.lineno} column {exc.colno}",
        )
        raise SchemaViolation(document, [issue]) from exc
    except UnicodeDecodeError as exc:
        issue = SchemaIssue(
            path="",
            kind="json_invalid",
            message=f"invalid UTF-8: {exc.reason} at byte {exc.start}",
        )
        raise SchemaViolation(document, [issue]) from exc

    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        raise SchemaViolation(document, _issues_from(exc)) from exc


def read_document(path: Path, model: type[M]) -> M:
    return decode_document(read_text(path), model, document=path)


def encode_document(obj: BaseModel, *, indent: int | None = None) -> str:
    """Serialise a decoded document back to JSON.

    Keys absent from the source stay absent, explicit nulls stay null and the wire
    names (`activityIds`, `isPreferred`, `type`) are kept.
    """
    data = obj.model_dump(mode="json", by_alias=True, exclude_unset=True)
    return json.dumps(data, ensure_ascii=False, indent=indent)


def sha256_file(path: Path) -> str:
    """Return SHA256 hex digest for a file."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(1024 * 1024), b""):
            h.update(chunk)
    return h.hexdigest()


def load_ingest_config(path: Path) -> dict[str, Any]:
    """Load a YAML ingest config file."""
    return yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}


@dataclass(frozen=True)
class InstanceRecord:
    """Row-level metadata for the instance inventory CSV (default: `artifacts/instance_summary.csv`)."""

    instance: str
    status: str  # "ok" / "failed"
    n_trains: int | None = None
    n_lined_routes: int | None = None
    n_blocks: int | None = None
    n_slowdowns: int | None = None
    n_categories: int | None = None
    n_line_trains: int | None = None
    n_station_trains: int | None = None
    status_sha256: str | None = None
    error: str = ""


SUMMARY_COLUMNS: tuple[str, ...] = tuple(InstanceRecord.__dataclass_fields__)


def upsert_instance_summary(records: list[InstanceRecord], summary_csv: Path) -> pd.DataFrame:
    """Upsert instance records into a summary CSV keyed by `instance`."""
    ensure_parent_dir(summary_csv)
    new_df = pd.DataFrame([asdict(r) for r in records], columns=list(SUMMARY_COLUMNS))
    new_df["instance"] = new_df["instance"].astype(str)

    if summary_csv.exists():
        old = pd.read_csv(summary_csv, dtype={"instance": "string", "error": "string"})
        old["instance"] = old["instance"].astype(str)
        old = old[~old["instance"].isin(set(new_df["instance"].tolist()))]
        df = pd.concat([old, new_df], ignore_index=True)
    else:
        df = new_df

    df = df.sort_values(["instance"], kind="mergesort").reset_index(drop=True)
    df.to_csv(summary_csv, index=False)
    return df
