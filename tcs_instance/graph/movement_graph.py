"""NetworkX views over the movement graph documents.

The views are read-only projections: node/edge attributes are copied out of the
models, the models themselves are never touched.
"""

from __future__ import annotations

import logging

import networkx as nx

from tcs_instance.models import Problem, TrainLineMovements, TrainStationMovement

LOGGER = logging.getLogger(__name__)


def build_line_graph(movements: TrainLineMovements) -> nx.DiGraph:
    """Build the directed track graph of one train.

    Nodes are track ids, edges follow `reachable_track_ids`. Downstream tracks that
    have no movement entry of their own are kept as bare nodes.
    """
    G = nx.DiGraph()
    track_movements = movements.track_movements or {}

    for track_id in sorted(track_movements):
        tm = track_movements[track_id]
        G.add_node(
            track_id,
            station_id=tm.station_id,
            min_cumulative_runtime=tm.min_cumulative_runtime,
            available_mask=tm.available_mask,
            best_out_track_id=tm.best_out_track_id,
        )

    for track_id in sorted(track_movements):
        tm = track_movements[track_id]
        for nxt in tm.successors():
            by_switch = tm.min_reverse_switches_by_track or {}
            by_non_pref = tm.min_non_preferred_by_track or {}
            G.add_edge(
                track_id,
                nxt,
                min_cumulative_runtime=tm.min_cumulative_runtime_via(nxt),
                reverse_switches=by_switch.get(nxt, tm.min_reverse_switches),
                non_preferred=by_non_pref.get(nxt, tm.min_non_preferred),
            )

    dangling = set(G.nodes) - set(track_movements)
    if dangling:
        LOGGER.debug("Line graph has %d downstream-only tracks", len(dangling))
    return G


def build_station_graph(movement: TrainStationMovement) -> nx.DiGraph:
    """Build the directed station-node graph of one train in one station.

    Edges come from `next_edges`; `prev_edges` add the reverse-declared edges that
    are missing. Each edge carries every runtime alternative in `runtime_infos` and
    the first one flattened into `running_time` / `clearance`.
    """
    G = nx.DiGraph()
    nodes = movement.station_nodes

    for node_id in sorted(nodes):
        node = nodes[node_id]
        G.add_node(
            node_id,
            node_type=node.node_type.value,
            available_mask=node.available_mask,
            is_preferred=node.is_preferred,
            dwell_time=node.dwell_time,
        )

    for node_id in sorted(nodes):
        node = nodes[node_id]
        for nxt in node.next_edges or ():
            infos = node.runtime_infos_to(nxt)
            G.add_edge(
                node_id,
                nxt,
                min_cumulative_runtime=node.min_cumulative_runtime_to(nxt),
                runtime_infos=infos,
                running_time=infos[0].running_time if infos else None,
                clearance=infos[0].clearance if infos else None,
            )

    for node_id in sorted(nodes):
        for prev in nodes[node_id].prev_edges or ():
            if G.has_edge(prev, node_id):
                continue
            src = nodes.get(prev)
            infos = src.runtime_infos_to(node_id) if src is not None else ()
            G.add_edge(
                prev,
                node_id,
                min_cumulative_runtime=src.min_cumulative_runtime_to(node_id) if src else None,
                runtime_infos=infos,
                running_time=infos[0].running_time if infos else None,
                clearance=infos[0].clearance if infos else None,
            )

    return G


def line_graph_for(problem: Problem, train_id: str) -> nx.DiGraph:
    movements = problem.line_movements.line_movements.get(train_id)
    if movements is None:
        raise KeyError(f"No line movements for train {train_id}")
    return build_line_graph(movements)


def station_graph_for(problem: Problem, train_id: str, station_id: str) -> nx.DiGraph:
    train_movements = problem.station_movements.train_movements.get(train_id)
    if train_movements is None:
        raise KeyError(f"No station movements for train {train_id}")
    stations = train_movements.station_movements or {}
    if station_id not in stations:
        raise KeyError(f"No station movement for train {train_id} at station {station_id}")
    return build_station_graph(stations[station_id])


def terminal_nodes(G: nx.DiGraph) -> list[str]:
    """Nodes without outgoing edges, sorted."""
    return sorted(n for n, d in G.out_degree() if d == 0)
