"""Models for the ``*TrainInfo.json`` document (static per-category parameters)."""

from __future__ import annotations

from tcs_instance.models.base import FrozenMap, StrictInt, StrictModel, StrictStr


class TrainInfo(StrictModel):
    category: StrictStr
    priority: StrictInt
    default_length: StrictInt
    speed: StrictInt
    # minimum separation between consecutive trains at a line point
    line_point_headway: StrictInt
    followers: tuple[StrictStr, ...] | None = None
    crossings: tuple[StrictStr, ...] | None = None


class TrainInfos(StrictModel):
    """Train catalog keyed by category name."""

    train_infos: FrozenMap[StrictStr, TrainInfo]

    def categories(self) -> set[str]:
        return set(self.train_infos)

    def get(self, category: str | None) -> TrainInfo | None:
        if category is None:
            return None
        return self.train_infos.get(category)
