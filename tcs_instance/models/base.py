"""Shared base for instance document models.

Every document model is closed-world: unknown keys are rejected, scalars are never
coerced (``"12"`` is not an int, ``1.0`` is not an int, ``0`` is not a bool) and
instances are frozen once validated. Mapping fields are exposed read-only.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, TypeVar

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    StrictBool,
    StrictInt,
    StrictStr,
    WrapSerializer,
)

K = TypeVar("K")
V = TypeVar("V")


def _serialize_as_dict(value: Mapping[Any, Any], handler: SerializerFunctionWrapHandler) -> Any:
    return handler(dict(value))


# Validated like a dict, stored as a read-only view, serialised like a dict.
FrozenMap = Annotated[
    Mapping[K, V],
    AfterValidator(MappingProxyType),
    WrapSerializer(_serialize_as_dict),
]

# Non-negative index into an activity list.
ActivityId = Annotated[StrictInt, Field(ge=0)]

__all__ = ["ActivityId", "FrozenMap", "StrictBool", "StrictInt", "StrictModel", "StrictStr"]


class StrictModel(BaseModel):
    """Base model for every object found in an instance document."""

    model_config = ConfigDict(extra="forbid", frozen=True)
