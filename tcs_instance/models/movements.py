"""Models for the two movement graph documents.

- ``*LineMovements.json``: per train, a directed graph over track segments.
- ``*StationMovements.json``: per train and station, a directed graph over station nodes.

``available_mask`` is kept as an opaque integer; its bit layout belongs to the
consuming policy.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from tcs_instance.models.base import ActivityId, FrozenMap, StrictBool, StrictInt, StrictModel, StrictStr


class DwellType(str, Enum):
    ACTIVITY = "ACTIVITY"
    PSEUDO = "PSEUDO"


class NodeType(str, Enum):
    TRACK = "TRACK"
    STATION_ROUTE = "STATION_ROUTE"


# -----------------------------------------------------------------------------
# Line movements
# -----------------------------------------------------------------------------


class TrackCircuitRunningTime(StrictModel):
    track_circuit_id: StrictStr
    running_time: StrictInt


class TrackRuntimeInfo(StrictModel):
    """Running time and headway for one usable direction of a track."""

    track_running_time: StrictInt
    line_headway: StrictInt
    track_circuit_running_times: tuple[TrackCircuitRunningTime, ...]
    reverse_track_running_time: StrictInt | None = None
    reverse_track_circuit_running_times: tuple[TrackCircuitRunningTime, ...] | None = None


class TrackCircuitInfo(StrictModel):
    track_circuit_id: StrictStr
    dwell_time: StrictInt | None = None
    activities: tuple[StrictStr, ...] | None = None
    new_projected_length: StrictInt | None = None
    dwell_type: DwellType | None = None
    activity_ids: tuple[ActivityId, ...] | None = Field(default=None, alias="activityIds")
    penalty: StrictInt | None = None
    end_of_graph: StrictBool | None = None
    # absolute, or relative to `now` when relative_edt is set
    earliest_departure_time: StrictInt | None = None
    relative_edt: StrictBool | None = None


class TrackMovement(StrictModel):
    station_id: StrictStr
    track_circuit_infos: tuple[TrackCircuitInfo, ...] | None = None
    reachable_track_ids: tuple[StrictStr, ...] | None = None
    track_runtime_infos: tuple[TrackRuntimeInfo, ...] = Field(min_length=1)
    min_cumulative_runtime: StrictInt
    min_cumulative_runtimes: FrozenMap[StrictStr, StrictInt] | None = None
    best_out_track_id: StrictStr
    correct_path_id: StrictStr | None = None
    min_reverse_switches: StrictInt
    min_reverse_switches_by_track: FrozenMap[StrictStr, StrictInt] | None = None
    preferred_out_track_id: StrictStr | None = None
    min_non_preferred: StrictInt
    min_non_preferred_by_track: FrozenMap[StrictStr, StrictInt] | None = None
    distance_from_mandatory_non_preferred: StrictInt | None = None
    available_mask: StrictInt

    def successors(self) -> tuple[str, ...]:
        return self.reachable_track_ids or ()

    def min_cumulative_runtime_via(self, track_id: str) -> int:
        """Minimum cumulative runtime when leaving towards `track_id`."""
        if self.min_cumulative_runtimes and track_id in self.min_cumulative_runtimes:
            return self.min_cumulative_runtimes[track_id]
        return self.min_cumulative_runtime


class TrainLineMovements(StrictModel):
    track_movements: FrozenMap[StrictStr, TrackMovement] | None = None


class LineMovements(StrictModel):
    line_movements: FrozenMap[StrictStr, TrainLineMovements]


# -----------------------------------------------------------------------------
# Station movements
# -----------------------------------------------------------------------------


class RuntimeInfo(StrictModel):
    running_time: StrictInt
    clearance: StrictInt


class RuntimeInfoSet(StrictModel):
    runtime_infos: tuple[RuntimeInfo, ...]


class StationNode(StrictModel):
    id: StrictStr
    node_type: NodeType
    default_min_cumulative_runtime: StrictInt
    # per-downstream-node override of default_min_cumulative_runtime
    min_cumulative_runtime: FrozenMap[StrictStr, StrictInt] | None = None
    next_edges: tuple[StrictStr, ...] | None = None
    min_clearance: StrictInt | None = None
    available_mask: StrictInt
    correct_path: StrictBool | None = None
    dwell_time: StrictInt | None = None
    activities: tuple[StrictStr, ...] | None = None
    runtime_info_set: FrozenMap[StrictStr, RuntimeInfoSet] | None = None
    prev_edges: tuple[StrictStr, ...] | None = None
    is_preferred: StrictBool | None = Field(default=None, alias="isPreferred")
    activity_ids: tuple[ActivityId, ...] | None = Field(default=None, alias="activityIds")
    reachable_stopping_points: tuple[StrictStr, ...] | None = None
    reachable_tracks: tuple[StrictStr, ...] | None = None
    new_projected_length: StrictInt | None = None
    dwell_type: DwellType | None = None
    relative_edt: StrictBool | None = None
    earliest_departure_time: StrictInt | None = None
    end_of_graph: StrictBool | None = None
    penalty: StrictInt | None = None

    def min_cumulative_runtime_to(self, node_id: str) -> int:
        if self.min_cumulative_runtime and node_id in self.min_cumulative_runtime:
            return self.min_cumulative_runtime[node_id]
        return self.default_min_cumulative_runtime

    def runtime_infos_to(self, node_id: str) -> tuple[RuntimeInfo, ...]:
        if not self.runtime_info_set or node_id not in self.runtime_info_set:
            return ()
        return self.runtime_info_set[node_id].runtime_infos


class TrainStationMovement(StrictModel):
    station_nodes: FrozenMap[StrictStr, StationNode]
    entry_track_ids: tuple[StrictStr, ...] | None = None


class TrainStationMovements(StrictModel):
    station_movements: FrozenMap[StrictStr, TrainStationMovement] | None = None


class StationMovements(StrictModel):
    train_movements: FrozenMap[StrictStr, TrainStationMovements]
