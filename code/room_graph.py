"""Rooms built from surviving floor regions and the graph connecting them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Set, Tuple

from cave_constants import WALL
from cave_errors import EmptyRoomSet
from cave_geometry import Coord
from cave_grid import Grid


def find_edge_tiles(grid: Grid, tiles: Iterable[Coord]) -> List[Coord]:
    """Return the tiles with at least one orthogonal wall neighbour, in input order."""
    edge_tiles: List[Coord] = []
    for tile in tiles:
        for neighbor in tile.cardinal_neighbors():
            if grid.in_bounds(neighbor.x, neighbor.y) and grid[neighbor] == WALL:
                edge_tiles.append(tile)
                break
    return edge_tiles


@dataclass
class Room:
    """A floor region that survived pruning."""

    index: int
    tiles: Tuple[Coord, ...]
    edge_tiles: Tuple[Coord, ...]
    connected_room_indices: Set[int] = field(default_factory=set)
    is_main_room: bool = False
    is_accessible_from_main_room: bool = False

    @property
    def size(self) -> int:
        return len(self.tiles)

    def is_connected(self, other_index: int) -> bool:
        return other_index in self.connected_room_indices

    def __repr__(self) -> str:
        return (
            f"Room(index={self.index}, size={self.size}, edge_tiles={len(self.edge_tiles)}, "
            f"connected={sorted(self.connected_room_indices)}, main={self.is_main_room}, "
            f"accessible={self.is_accessible_from_main_room})"
        )


@dataclass(frozen=True)
class RoomConnection:
    """An accepted link between two rooms and the edge tiles it joins."""

    room_a_index: int
    room_b_index: int
    tile_a: Coord
    tile_b: Coord

    @property
    def squared_distance(self) -> int:
        return self.tile_a.squared_distance(self.tile_b)


class RoomGraph:
    """Index-based undirected graph over rooms.

    Rooms are ordered by descending size, so index 0 is always the main room.
    """

    def __init__(self, rooms: Sequence[Room]) -> None:
        if not rooms:
            raise EmptyRoomSet("No rooms survived pruning; cannot build a connected map")
        self.rooms: List[Room] = list(rooms)
        self.connections: List[RoomConnection] = []
        main_room = self.rooms[0]
        main_room.is_main_room = True
        main_room.is_accessible_from_main_room = True

    @classmethod
    def from_regions(cls, grid: Grid, regions: Sequence[Sequence[Coord]]) -> RoomGraph:
        """Create rooms from floor regions, largest first.

        The sort is stable, so rooms of equal size keep their extraction order.
        """
        if not regions:
            raise EmptyRoomSet("No rooms survived pruning; cannot build a connected map")
        ordered = sorted(regions, key=len, reverse=True)
        rooms = [
            Room(index=idx, tiles=tuple(region), edge_tiles=tuple(find_edge_tiles(grid, region)))
            for idx, region in enumerate(ordered)
        ]
        return cls(rooms)

    def __len__(self) -> int:
        return len(self.rooms)

    def __iter__(self):
        return iter(self.rooms)

    def __getitem__(self, index: int) -> Room:
        return self.rooms[index]

    @property
    def main_room(self) -> Room:
        return self.rooms[0]

    def is_connected(self, index_a: int, index_b: int) -> bool:
        return self.rooms[index_a].is_connected(index_b)

    def connect(self, index_a: int, index_b: int, tile_a: Coord, tile_b: Coord) -> RoomConnection:
        """Link two rooms in both directions and spread main-room accessibility."""
        if index_a == index_b:
            raise ValueError(f"Cannot connect room {index_a} to itself")
        room_a = self.rooms[index_a]
        room_b = self.rooms[index_b]
        if room_a.is_accessible_from_main_room:
            self.set_accessible_from_main_room(index_b)
        elif room_b.is_accessible_from_main_room:
            self.set_accessible_from_main_room(index_a)
        room_a.connected_room_indices.add(index_b)
        room_b.connected_room_indices.add(index_a)
        connection = RoomConnection(index_a, index_b, tile_a, tile_b)
        self.connections.append(connection)
        return connection

    def set_accessible_from_main_room(self, index: int) -> None:
        """Mark a room and everything already linked to it as reachable from the main room."""
        stack = [index]
        while stack:
            room = self.rooms[stack.pop()]
            if room.is_accessible_from_main_room:
                continue
            room.is_accessible_from_main_room = True
            stack.extend(
                other
                for other in room.connected_room_indices
                if not self.rooms[other].is_accessible_from_main_room
            )

    def accessible_rooms(self) -> List[Room]:
        return [room for room in self.rooms if room.is_accessible_from_main_room]

    def inaccessible_rooms(self) -> List[Room]:
        return [room for room in self.rooms if not room.is_accessible_from_main_room]

    def all_accessible(self) -> bool:
        return all(room.is_accessible_from_main_room for room in self.rooms)

    def edges(self) -> List[Tuple[int, int]]:
        return [(conn.room_a_index, conn.room_b_index) for conn in self.connections]

    def adjacency(self) -> Dict[int, Set[int]]:
        return {room.index: set(room.connected_room_indices) for room in self.rooms}
