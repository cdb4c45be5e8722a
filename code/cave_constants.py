"""Shared constants for the cave map generator."""

from __future__ import annotations

FLOOR = 0
WALL = 1

DEFAULT_WIDTH = 60
DEFAULT_HEIGHT = 80
DEFAULT_FILL_PERCENT = 45
DEFAULT_SMOOTHING_ITERATIONS = 5
DEFAULT_BORDER_SIZE = 5
DEFAULT_WALL_REGION_THRESHOLD = 50  # Wall regions with fewer tiles are opened up into floor.
DEFAULT_ROOM_REGION_THRESHOLD = 50  # Floor regions with fewer tiles are filled in with wall.
DEFAULT_CORRIDOR_RADIUS = 1

# Height of connection markers above the floor plane in world space.
WORLD_MARKER_HEIGHT = 2.0

MAX_RANDOM_SEED = 1000000
