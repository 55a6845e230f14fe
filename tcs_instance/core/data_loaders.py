from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path

from pydantic import BaseModel

from tcs_instance.core.config import DOCUMENT_SUFFIXES, INSTANCE_GLOB
from tcs_instance.core.errors import InstanceError
from tcs_instance.io import locate_document, read_document
from tcs_instance.models import (
    LineMovements,
    Problem,
    StationMovements,
    Status,
    TrainInfos,
    validate_references,
)

LOGGER = logging.getLogger(__name__)

# Problem field -> document model, in reading order.
DOCUMENT_MODELS: dict[str, type[BaseModel]] = {
    "status": Status,
    "train_info": TrainInfos,
    "line_movements": LineMovements,
    "station_movements": StationMovements,
}


def read_problem(
    instance_dir: Path,
    *,
    check_references: bool = True,
    suffixes: Mapping[str, str] | None = None,
) -> Problem:
    """Locate, decode and assemble the four documents of one instance directory.

    The first failing document aborts the read; no partial `Problem` is returned.
    """
    instance_dir = Path(instance_dir)
    suffix_map = dict(DOCUMENT_SUFFIXES)
    suffix_map.update(suffixes or {})

    LOGGER.info("Reading instance %s", instance_dir.name)
    documents: dict[str, BaseModel] = {}
    sources: dict[str, str] = {}
    for kind, model in DOCUMENT_MODELS.items():
        path = locate_document(instance_dir, suffix_map[kind])
        LOGGER.debug("Decoding %s as %s", path.name, model.__name__)
        documents[kind] = read_document(path, model)
        sources[kind] = str(path)

    problem = Problem(**documents)
    if check_references:
        validate_references(problem, documents=sources)
        LOGGER.debug("Reference checks passed for %s", instance_dir.name)

    LOGGER.info(
        "Instance %s loaded: %d trains, %d blocks, %d slowdowns, %d categories",
        instance_dir.name,
        len(problem.status.trains),
        len(problem.status.blocks),
        len(problem.status.slowdowns),
        len(problem.train_info.train_infos),
    )
    return problem


def iter_instance_dirs(root: Path, pattern: str = INSTANCE_GLOB) -> list[Path]:
    """Instance directories directly under `root` matching `pattern`, sorted by name."""
    return sorted(p for p in Path(root).glob(pattern) if p.is_dir())


def read_instances(
    root: Path,
    *,
    pattern: str = INSTANCE_GLOB,
    check_references: bool = True,
    suffixes: Mapping[str, str] | None = None,
) -> Iterator[tuple[Path, Problem | InstanceError]]:
    """Read every instance under `root`; a failing instance does not stop the others."""
    for instance_dir in iter_instance_dirs(root, pattern):
        try:
            result: Problem | InstanceError = read_problem(
                instance_dir, check_references=check_references, suffixes=suffixes
            )
        except InstanceError as exc:
            LOGGER.error("Failed to read %s: %s", instance_dir.name, exc)
            result = exc
        yield instance_dir, result
