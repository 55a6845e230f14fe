"""Models for the ``*status.json`` document (network and train state at ``now``)."""

from __future__ import annotations

from enum import Enum

from pydantic import Field, model_validator

from tcs_instance.models.base import StrictBool, StrictInt, StrictModel, StrictStr


class CurrentPosition(str, Enum):
    TRACK = "TRACK"
    STATION_STOPPING_POINT = "STATION_STOPPING_POINT"
    STATION_ROUTE = "STATION_ROUTE"
    PREDICTED = "PREDICTED"


class BlockType(str, Enum):
    """How a block's duration is counted (interpreted downstream)."""

    ROLLING = "ROLLING"
    COUNTDOWN = "COUNTDOWN"


class StationPosition(StrictModel):
    station_id: StrictStr
    stopping_point_id: StrictStr | None = None
    route_id: StrictStr | None = None


class TrackCircuitPosition(StrictModel):
    track_id: StrictStr
    track_circuit_id: StrictStr


_STATION_TAGS = (CurrentPosition.STATION_STOPPING_POINT, CurrentPosition.STATION_ROUTE)


class TrainPosition(StrictModel):
    """A reported train position.

    The payload is selected by ``current_position``:

    - ``TRACK`` carries only ``track_circuit_position``
    - ``STATION_STOPPING_POINT`` / ``STATION_ROUTE`` carry only ``station_position``
    - ``PREDICTED`` carries neither
    """

    current_position: CurrentPosition
    time_in: StrictInt
    station_position: StationPosition | None = None
    track_circuit_position: TrackCircuitPosition | None = None

    @model_validator(mode="after")
    def _payload_matches_tag(self) -> TrainPosition:
        has_station = self.station_position is not None
        has_track = self.track_circuit_position is not None
        tag = self.current_position
        if tag is CurrentPosition.TRACK:
            ok = has_track and not has_station
            expected = "track_circuit_position only"
        elif tag in _STATION_TAGS:
            ok = has_station and not has_track
            expected = "station_position only"
        else:
            ok = not has_station and not has_track
            expected = "no position payload"
        if not ok:
            raise ValueError(f"current_position {tag.value} requires {expected}")
        return self

    @property
    def payload(self) -> StationPosition | TrackCircuitPosition | None:
        if self.track_circuit_position is not None:
            return self.track_circuit_position
        return self.station_position


class Train(StrictModel):
    id: StrictStr
    # Most recent reported positions, in document order.
    train_positions: tuple[TrainPosition, ...]
    train_mode: StrictStr
    train_hold_main: StrictBool
    current_length: StrictInt
    train_category: StrictStr | None = None


class LinedRoute(StrictModel):
    """A station route reserved for a train."""

    station_id: StrictStr
    route_id: StrictStr
    train_id: StrictStr
    type_: StrictStr | None = Field(default=None, alias="type")


class StationBlockResource(StrictModel):
    station_id: StrictStr
    route_id: StrictStr | None = None
    stopping_point_id: StrictStr | None = None


class TrackBlockResource(StrictModel):
    track_id: StrictStr


class BlockResource(StrictModel):
    """Either a station resource or a track resource, never both."""

    station_resource: StationBlockResource | None = None
    track_resource: TrackBlockResource | None = None

    @model_validator(mode="after")
    def _exactly_one_resource(self) -> BlockResource:
        populated = (self.station_resource is not None) + (self.track_resource is not None)
        if populated != 1:
            raise ValueError(
                "exactly one of station_resource / track_resource must be set "
                f"(got {populated})"
            )
        return self

    @property
    def resource(self) -> StationBlockResource | TrackBlockResource:
        if self.station_resource is not None:
            return self.station_resource
        if self.track_resource is not None:
            return self.track_resource
        raise ValueError("block resource carries neither station_resource nor track_resource")


class Block(StrictModel):
    block_id: StrictStr
    start_time: StrictInt
    duration: StrictInt
    block_type: BlockType
    resources: tuple[BlockResource, ...] = Field(min_length=1)
    long_term: StrictBool | None = None

    @property
    def end_time(self) -> int:
        return self.start_time + self.duration


class Slowdown(StrictModel):
    slowdown_id: StrictStr
    start_time: StrictInt
    duration: StrictInt
    speed: StrictInt
    resources: tuple[BlockResource, ...] | None = None
    description: StrictStr


class Status(StrictModel):
    now: StrictInt
    trains: tuple[Train, ...]
    lined_routes: tuple[LinedRoute, ...]
    blocks: tuple[Block, ...]
    slowdowns: tuple[Slowdown, ...]
    # Reserved; producers currently emit an empty list.
    dispatcher_solved_conflicts: tuple[None, ...]

    def train(self, train_id: str) -> Train:
        for t in self.trains:
            if t.id == train_id:
                return t
        raise KeyError(f"Train {train_id} not found")

    def known_train_ids(self) -> set[str]:
        return {t.id for t in self.trains}
