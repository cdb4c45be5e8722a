from .noise_fill import fill_noise
from .smoothing import run_smoothing, smooth
from .regions import get_regions
from .pruning import run_pruning
from .corridor_carver import carve_corridor
from .room_connector import RoomConnector, run_room_connector

__all__ = [
    "fill_noise",
    "run_smoothing",
    "smooth",
    "get_regions",
    "run_pruning",
    "carve_corridor",
    "RoomConnector",
    "run_room_connector",
]
