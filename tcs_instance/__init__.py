"""Strict ingestion of railway traffic-control instance directories.

An instance directory holds four JSON documents (status, train catalog, line
movements, station movements). `read_problem` turns one directory into a validated,
immutable `Problem` or raises an `InstanceError` naming the offending document.
"""

from __future__ import annotations

from tcs_instance.core.data_loaders import iter_instance_dirs, read_instances, read_problem
from tcs_instance.core.errors import (
    AmbiguousDocument,
    InstanceError,
    IoFailure,
    MissingDocument,
    ReferenceViolation,
    SchemaIssue,
    SchemaViolation,
)
from tcs_instance.models import Problem

__all__ = [
    "AmbiguousDocument",
    "InstanceError",
    "IoFailure",
    "MissingDocument",
    "Problem",
    "ReferenceViolation",
    "SchemaIssue",
    "SchemaViolation",
    "iter_instance_dirs",
    "read_instances",
    "read_problem",
]
