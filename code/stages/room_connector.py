"""Greedy nearest-room linking with a main-room reachability guarantee."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from cave_errors import EmptyRoomSet, RoomConnectionError
from cave_geometry import Coord
from cave_grid import Grid
from room_graph import Room, RoomConnection, RoomGraph
from stages.corridor_carver import carve_corridor


@dataclass(frozen=True)
class ConnectionCandidate:
    """Closest edge-tile pair found between two rooms."""

    room_a_index: int
    room_b_index: int
    tile_a: Coord
    tile_b: Coord
    squared_distance: int


def closest_tiles(
    room_a: Room,
    room_b: Room,
    best: Optional[ConnectionCandidate] = None,
) -> Optional[ConnectionCandidate]:
    """Return the closest edge-tile pair between two rooms if it beats ``best``.

    ``best`` is None until a candidate has been seen. Ties keep the earlier
    candidate.
    """
    for tile_a in room_a.edge_tiles:
        for tile_b in room_b.edge_tiles:
            distance = tile_a.squared_distance(tile_b)
            if best is None or distance < best.squared_distance:
                best = ConnectionCandidate(room_a.index, room_b.index, tile_a, tile_b, distance)
    return best


class RoomConnector:
    """Links every room to the main room's component, carving a corridor per link."""

    def __init__(
        self,
        graph: RoomGraph,
        grid: Grid,
        corridor_radius: int,
        on_connect: Optional[Callable[[RoomConnection], None]] = None,
    ) -> None:
        if len(graph) == 0:
            raise EmptyRoomSet("Cannot connect an empty room set")
        self.graph = graph
        self.grid = grid
        self.corridor_radius = corridor_radius
        self.on_connect = on_connect

    def run(self) -> int:
        """Run the nearest-neighbour pass, then force links until all rooms are reachable."""
        created = self.connect_nearest_rooms()
        while not self.graph.all_accessible():
            created += self.connect_to_main_component()
        return created

    def connect_nearest_rooms(self) -> int:
        """Give every room that has no links a link to its nearest neighbour."""
        created = 0
        rooms = self.graph.rooms
        for room_a in rooms:
            if room_a.connected_room_indices:
                continue
            best: Optional[ConnectionCandidate] = None
            for room_b in rooms:
                if room_a is room_b or room_a.is_connected(room_b.index):
                    continue
                best = closest_tiles(room_a, room_b, best)
            if best is not None:
                self._create_passage(best)
                created += 1
        return created

    def connect_to_main_component(self) -> int:
        """Make the single closest link between an unreachable and a reachable room."""
        unreachable = self.graph.inaccessible_rooms()
        if not unreachable:
            return 0
        best = self._closest_between(unreachable, self.graph.accessible_rooms())
        if best is None:
            raise RoomConnectionError(
                f"{len(unreachable)} rooms cannot reach the main room and have no usable edge tiles"
            )
        self._create_passage(best)
        return 1

    @staticmethod
    def _closest_between(
        rooms_a: Sequence[Room],
        rooms_b: Sequence[Room],
    ) -> Optional[ConnectionCandidate]:
        best: Optional[ConnectionCandidate] = None
        for room_a in rooms_a:
            for room_b in rooms_b:
                if room_a is room_b or room_a.is_connected(room_b.index):
                    continue
                best = closest_tiles(room_a, room_b, best)
        return best

    def _create_passage(self, candidate: ConnectionCandidate) -> RoomConnection:
        connection = self.graph.connect(
            candidate.room_a_index,
            candidate.room_b_index,
            candidate.tile_a,
            candidate.tile_b,
        )
        carve_corridor(self.grid, candidate.tile_a, candidate.tile_b, self.corridor_radius)
        if self.on_connect is not None:
            self.on_connect(connection)
        return connection


def run_room_connector(graph: RoomGraph, grid: Grid, corridor_radius: int) -> List[RoomConnection]:
    """Connect all rooms in ``graph`` and return the connections made."""
    before = len(graph.connections)
    RoomConnector(graph, grid, corridor_radius).run()
    return graph.connections[before:]
