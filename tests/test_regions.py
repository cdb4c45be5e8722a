from cave_constants import FLOOR, WALL
from cave_geometry import Coord
from random_source import SeededRandomSource
from stages.noise_fill import fill_noise
from stages.regions import get_region_tiles, get_regions
from stages.smoothing import run_smoothing


def test_diagonal_cells_are_separate_regions(grid_from_art):
    grid = grid_from_art(
        """
        #####
        #.###
        ##.##
        #####
        """
    )

    regions = get_regions(grid, FLOOR)

    assert [sorted(region) for region in regions] == [[Coord(1, 1)], [Coord(2, 2)]]


def test_regions_are_enumerated_in_row_major_order(grid_from_art):
    grid = grid_from_art(
        """
        ########
        #....#.#
        ######.#
        #..#####
        ########
        """
    )

    regions = get_regions(grid, FLOOR)

    assert [region[0] for region in regions] == [Coord(1, 1), Coord(6, 1), Coord(1, 3)]
    assert [len(region) for region in regions] == [4, 2, 2]


def test_region_tiles_follow_orthogonal_links(grid_from_art):
    grid = grid_from_art(
        """
        #####
        #..##
        ##.##
        ##..#
        #####
        """
    )

    tiles = get_region_tiles(grid, Coord(1, 1))

    assert set(tiles) == {Coord(1, 1), Coord(2, 1), Coord(2, 2), Coord(2, 3), Coord(3, 3)}


def test_regions_partition_tile_type():
    grid = run_smoothing(fill_noise(40, 30, SeededRandomSource("partition"), 45), 3)

    for tile_type in (FLOOR, WALL):
        regions = get_regions(grid, tile_type)
        seen = set()
        for region in regions:
            region_set = set(region)
            assert len(region_set) == len(region)
            assert not seen & region_set
            seen |= region_set
        expected = {coord for coord in grid.coords() if grid[coord] == tile_type}
        assert seen == expected


def test_no_regions_for_absent_type(grid_from_art):
    grid = grid_from_art(
        """
        ###
        ###
        """
    )

    assert get_regions(grid, FLOOR) == []
    assert len(get_regions(grid, WALL)) == 1
