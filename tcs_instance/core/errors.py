"""Failures raised while ingesting one instance directory.

Each error is fatal for the instance being read and carries the identity of the
offending document. The classes also derive from the matching builtin so callers
that only know about `FileNotFoundError` / `ValueError` / `OSError` still catch them.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path


class InstanceError(Exception):
    """Base class for instance ingestion failures."""

    def __init__(self, message: str, *, document: str | Path | None = None) -> None:
        self.document = None if document is None else str(document)
        self.message = message
        super().__init__(f"{self.document}: {message}" if self.document else message)


class MissingDocument(InstanceError, FileNotFoundError):
    def __init__(self, directory: str | Path, suffix: str) -> None:
        self.directory = str(directory)
        self.suffix = suffix
        super().__init__(f"No *{suffix} file in {self.directory}", document=suffix)


class AmbiguousDocument(InstanceError, ValueError):
    def __init__(self, directory: str | Path, suffix: str, candidates: Iterable[Path]) -> None:
        self.directory = str(directory)
        self.suffix = suffix
        self.candidates = tuple(sorted(Path(c) for c in candidates))
        names = [c.name for c in self.candidates]
        super().__init__(
            f"{len(names)} files match *{suffix} in {self.directory}: {names}", document=suffix
        )


class IoFailure(InstanceError, OSError):
    pass


@dataclass(frozen=True)
class SchemaIssue:
    """One validation failure inside a document."""

    path: str  # e.g. "trains[0].train_positions[1].current_position"; "" for the root
    kind: str  # pydantic error type, e.g. "extra_forbidden", "int_type", "enum"
    message: str

    def __str__(self) -> str:
        return f"{self.path or '<root>'}: {self.message} [{self.kind}]"


class SchemaViolation(InstanceError, ValueError):
    def __init__(self, document: str | Path, issues: Sequence[SchemaIssue]) -> None:
        self.issues = tuple(issues)
        lines = "\n  ".join(str(i) for i in self.issues)
        super().__init__(f"{len(self.issues)} schema issue(s):\n  {lines}", document=document)

    @property
    def paths(self) -> list[str]:
        return [i.path for i in self.issues]


class ReferenceViolation(InstanceError, ValueError):
    """A reference in one document is absent from the document that defines it."""

    def __init__(self, document: str | Path, *, reference: str, value: str, path: str) -> None:
        self.reference = reference
        self.value = value
        self.path = path
        super().__init__(f"{path} references unknown {reference} {value!r}", document=document)
