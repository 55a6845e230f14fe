"""Cross-document reference checks for an assembled `Problem`.

Each document is validated on its own by the decoder; this pass resolves the ids one
document uses and another defines. The first dangling reference fails the instance.
"""

from __future__ import annotations

from collections.abc import Mapping

from tcs_instance.core.config import DOCUMENT_SUFFIXES
from tcs_instance.core.errors import ReferenceViolation
from tcs_instance.models.problem import Problem


def validate_references(
    problem: Problem,
    *,
    documents: Mapping[str, str] | None = None,
) -> Problem:
    """Raise `ReferenceViolation` on the first unresolved cross-reference.

    `documents` maps a document kind (a `Problem` field name) to the file it was read
    from, so the error can name the actual file. Returns `problem` unchanged.
    """
    docs = dict(DOCUMENT_SUFFIXES)
    docs.update(documents or {})

    def _fail(kind: str, *, reference: str, value: str, path: str) -> None:
        raise ReferenceViolation(docs[kind], reference=reference, value=value, path=path)

    categories = problem.train_info.categories()
    train_ids = problem.status.known_train_ids()

    for i, train in enumerate(problem.status.trains):
        if train.train_category is not None and train.train_category not in categories:
            _fail(
                "status",
                reference="train category",
                value=train.train_category,
                path=f"trains[{i}].train_category",
            )

    for i, lined in enumerate(problem.status.lined_routes):
        if lined.train_id not in train_ids:
            _fail("status", reference="train", value=lined.train_id, path=f"lined_routes[{i}].train_id")

    for key, info in problem.train_info.train_infos.items():
        for field in ("followers", "crossings"):
            for j, cat in enumerate(getattr(info, field) or ()):
                if cat not in categories:
                    _fail(
                        "train_info",
                        reference="train category",
                        value=cat,
                        path=f"train_infos.{key}.{field}[{j}]",
                    )

    for train_id in problem.line_movements.line_movements:
        if train_id not in train_ids:
            _fail("line_movements", reference="train", value=train_id, path=f"line_movements.{train_id}")

    for train_id in problem.station_movements.train_movements:
        if train_id not in train_ids:
            _fail(
                "station_movements",
                reference="train",
                value=train_id,
                path=f"train_movements.{train_id}",
            )

    return problem
