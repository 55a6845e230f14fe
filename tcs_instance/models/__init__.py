"""Pydantic models for the four instance documents and the `Problem` aggregate.

These are contracts with the upstream producers:
- Each document model is closed-world (unknown keys and coerced scalars are rejected).
- Cross-document references are checked separately by `validate_references`.
"""

from __future__ import annotations

from tcs_instance.models.movements import (
    DwellType,
    LineMovements,
    NodeType,
    RuntimeInfo,
    RuntimeInfoSet,
    StationMovements,
    StationNode,
    TrackCircuitInfo,
    TrackCircuitRunningTime,
    TrackMovement,
    TrackRuntimeInfo,
    TrainLineMovements,
    TrainStationMovement,
    TrainStationMovements,
)
from tcs_instance.models.problem import Problem
from tcs_instance.models.status import (
    Block,
    BlockResource,
    BlockType,
    CurrentPosition,
    LinedRoute,
    Slowdown,
    StationBlockResource,
    StationPosition,
    Status,
    TrackBlockResource,
    TrackCircuitPosition,
    Train,
    TrainPosition,
)
from tcs_instance.models.train_info import TrainInfo, TrainInfos
from tcs_instance.models.validate import validate_references

__all__ = [
    "Block",
    "BlockResource",
    "BlockType",
    "CurrentPosition",
    "DwellType",
    "LineMovements",
    "LinedRoute",
    "NodeType",
    "Problem",
    "RuntimeInfo",
    "RuntimeInfoSet",
    "Slowdown",
    "StationBlockResource",
    "StationMovements",
    "StationNode",
    "StationPosition",
    "Status",
    "TrackBlockResource",
    "TrackCircuitInfo",
    "TrackCircuitPosition",
    "TrackCircuitRunningTime",
    "TrackMovement",
    "TrackRuntimeInfo",
    "TrainInfo",
    "TrainInfos",
    "TrainLineMovements",
    "TrainPosition",
    "TrainStationMovement",
    "TrainStationMovements",
    "validate_references",
]
