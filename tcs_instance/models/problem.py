"""Root aggregate for one instance."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from tcs_instance.models.movements import LineMovements, StationMovements
from tcs_instance.models.status import Status
from tcs_instance.models.train_info import TrainInfos


class Problem(BaseModel):
    """The four decoded documents of one instance directory.

    Built only by the assembler from already-validated documents, so no extra
    validation happens here.
    """

    model_config = ConfigDict(frozen=True)

    status: Status
    train_info: TrainInfos
    line_movements: LineMovements
    station_movements: StationMovements

    def train_ids(self) -> list[str]:
        return [t.id for t in self.status.trains]

    def summary(self) -> dict[str, int]:
        return {
            "n_trains": len(self.status.trains),
            "n_lined_routes": len(self.status.lined_routes),
            "n_blocks": len(self.status.blocks),
            "n_slowdowns": len(self.status.slowdowns),
            "n_categories": len(self.train_info.train_infos),
            "n_line_trains": len(self.line_movements.line_movements),
            "n_station_trains": len(self.station_movements.train_movements),
        }
