from __future__ import annotations

import copy
import json
from pathlib import Path

import pytest

STATUS = {
    "now": 1000,
    "trains": [
        {
            "id": "T1",
            "train_positions": [
                {
                    "current_position": "TRACK",
                    "time_in": 900,
                    "station_position": None,
                    "track_circuit_position": {"track_id": "TR1", "track_circuit_id": "TC1"},
                },
                {
                    "current_position": "STATION_ROUTE",
                    "time_in": 950,
                    "station_position": {"station_id": "S1", "stopping_point_id": None, "route_id": "R1"},
                    "track_circuit_position": None,
                },
            ],
            "train_mode": "NORMAL",
            "train_hold_main": False,
            "current_length": 200,
            "train_category": "IC",
        },
        {
            "id": "T2",
            "train_positions": [{"current_position": "PREDICTED", "time_in": 990}],
            "train_mode": "NORMAL",
            "train_hold_main": True,
            "current_length": 120,
        },
    ],
    "lined_routes": [{"station_id": "S1", "route_id": "R1", "train_id": "T1", "type": "ARRIVAL"}],
    "blocks": [
        {
            "block_id": "B1",
            "start_time": 1000,
            "duration": 600,
            "block_type": "ROLLING",
            "resources": [{"track_resource": {"track_id": "TR9"}}],
            "long_term": False,
        }
    ],
    "slowdowns": [
        {
            "slowdown_id": "SD1",
            "start_time": 1000,
            "duration": 3600,
            "speed": 40,
            "resources": [
                {"station_resource": {"station_id": "S1", "route_id": "R1"}, "track_resource": None}
            ],
            "description": "track works",
        }
    ],
    "dispatcher_solved_conflicts": [],
}

TRAIN_INFO = {
    "train_infos": {
        "IC": {
            "category": "IC",
            "priority": 1,
            "default_length": 200,
            "speed": 160,
            "line_point_headway": 180,
            "followers": ["REG"],
            "crossings": None,
        },
        "REG": {
            "category": "REG",
            "priority": 2,
            "default_length": 100,
            "speed": 120,
            "line_point_headway": 120,
        },
    }
}

LINE_MOVEMENTS = {
    "line_movements": {
        "T1": {
            "track_movements": {
                "TR1": {
                    "station_id": "S0",
                    "track_circuit_infos": [
                        {
                            "track_circuit_id": "TC1",
                            "dwell_time": 30,
                            "activities": ["BOARD"],
                            "dwell_type": "ACTIVITY",
                            "activityIds": [0, 2],
                            "earliest_departure_time": 60,
                            "relative_edt": True,
                        }
                    ],
                    "reachable_track_ids": ["TR2", "TR3"],
                    "track_runtime_infos": [
                        {
                            "track_running_time": 120,
                            "line_headway": 90,
                            "track_circuit_running_times": [
                                {"track_circuit_id": "TC1", "running_time": 120}
                            ],
                        }
                    ],
                    "min_cumulative_runtime": 300,
                    "min_cumulative_runtimes": {"TR2": 300, "TR3": 420},
                    "best_out_track_id": "TR2",
                    "min_reverse_switches": 0,
                    "min_reverse_switches_by_track": {"TR3": 1},
                    "min_non_preferred": 0,
                    "available_mask": 5,
                },
                "TR2": {
                    "station_id": "S1",
                    "track_runtime_infos": [
                        {
                            "track_running_time": 180,
                            "line_headway": 90,
                            "track_circuit_running_times": [
                                {"track_circuit_id": "TC2", "running_time": 180}
                            ],
                            "reverse_track_running_time": 185,
                            "reverse_track_circuit_running_times": [
                                {"track_circuit_id": "TC2", "running_time": 185}
                            ],
                        }
                    ],
                    "min_cumulative_runtime": 180,
                    "best_out_track_id": "",
                    "min_reverse_switches": 0,
                    "min_non_preferred": 0,
                    "available_mask": 1,
                },
            }
        },
        "T2": {"track_movements": None},
    }
}

STATION_MOVEMENTS = {
    "train_movements": {
        "T1": {
            "station_movements": {
                "S1": {
                    "station_nodes": {
                        "N1": {
                            "id": "N1",
                            "node_type": "TRACK",
                            "default_min_cumulative_runtime": 200,
                            "min_cumulative_runtime": {"N3": 260},
                            "next_edges": ["N2", "N3"],
                            "available_mask": 3,
                            "runtime_info_set": {
                                "N2": {
                                    "runtime_infos": [
                                        {"running_time": 60, "clearance": 30},
                                        {"running_time": 75, "clearance": 20},
                                    ]
                                },
                                "N3": {"runtime_infos": [{"running_time": 90, "clearance": 30}]},
                            },
                            "isPreferred": True,
                        },
                        "N2": {
                            "id": "N2",
                            "node_type": "STATION_ROUTE",
                            "default_min_cumulative_runtime": 140,
                            "prev_edges": ["N1"],
                            "available_mask": 1,
                            "dwell_time": 60,
                            "dwell_type": "ACTIVITY",
                            "activityIds": [1],
                            "reachable_stopping_points": ["SP1"],
                            "end_of_graph": True,
                        },
                        "N3": {
                            "id": "N3",
                            "node_type": "STATION_ROUTE",
                            "default_min_cumulative_runtime": 110,
                            "prev_edges": ["N1", "N0"],
                            "available_mask": 0,
                            "isPreferred": False,
                        },
                    },
                    "entry_track_ids": ["TR2"],
                }
            }
        }
    }
}

SUFFIXES = {
    "status": "status.json",
    "train_info": "TrainInfo.json",
    "line_movements": "LineMovements.json",
    "station_movements": "StationMovements.json",
}


def make_docs() -> dict[str, dict]:
    """Fresh, independently mutable copies of a small valid instance."""
    return {
        "status": copy.deepcopy(STATUS),
        "train_info": copy.deepcopy(TRAIN_INFO),
        "line_movements": copy.deepcopy(LINE_MOVEMENTS),
        "station_movements": copy.deepcopy(STATION_MOVEMENTS),
    }


@pytest.fixture
def docs() -> dict[str, dict]:
    return make_docs()


@pytest.fixture
def write_instance(tmp_path: Path):
    """Write documents into `<tmp>/instances/<name>/` using `<name>_<suffix>` file names.

    A document passed as `None` is left out; a `str` is written verbatim.
    """

    def _write(docs: dict[str, dict | str | None], name: str = "TCSIN_001") -> Path:
        d = tmp_path / "instances" / name
        d.mkdir(parents=True, exist_ok=True)
        for kind, doc in docs.items():
            if doc is None:
                continue
            text = doc if isinstance(doc, str) else json.dumps(doc)
            (d / f"{name}_{SUFFIXES[kind]}").write_text(text, encoding="utf-8")
        return d

    return _write
