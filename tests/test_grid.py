import pytest

from gridcrawl.dungeon.grid import DungeonGrid, Room
from gridcrawl.dungeon.tiles import Tile


def test_new_grid_is_solid_wall():
    grid = DungeonGrid(12, 8)
    assert grid.count(Tile.WALL) == 12 * 8
    assert grid.rooms == []


def test_too_small_grid_rejected():
    with pytest.raises(ValueError):
        DungeonGrid(2, 10)


def test_out_of_range_reads_are_wall_and_not_walkable():
    grid = DungeonGrid(5, 5)
    grid.carve_room(Room(0, 0, 5, 5))
    for x, y in [(-1, 0), (0, -1), (5, 0), (0, 5), (100, 100)]:
        assert grid.tile_at(x, y) is Tile.WALL
        assert grid.is_walkable(x, y) is False
    assert grid.is_walkable(0, 0) is True


def test_out_of_range_write_is_ignored():
    grid = DungeonGrid(4, 4)
    grid.set_tile(9, 9, Tile.FLOOR)
    assert grid.count(Tile.FLOOR) == 0


def test_corridor_never_downgrades_floor():
    grid = DungeonGrid(10, 5)
    grid.carve_room(Room(3, 1, 3, 3))
    grid.carve_h_corridor(8, 1, 2)

    assert [grid.tile_at(x, 2) for x in range(1, 9)] == [
        Tile.CORRIDOR,
        Tile.CORRIDOR,
        Tile.FLOOR,
        Tile.FLOOR,
        Tile.FLOOR,
        Tile.CORRIDOR,
        Tile.CORRIDOR,
        Tile.CORRIDOR,
    ]
    assert grid.is_walkable(1, 2) and grid.is_walkable(4, 2)
    assert not grid.is_walkable(0, 2)


def test_vertical_corridor_inclusive_both_orders():
    grid = DungeonGrid(5, 6)
    grid.carve_v_corridor(4, 1, 2)
    assert [grid.tile_at(2, y) for y in range(6)] == [
        Tile.WALL,
        Tile.CORRIDOR,
        Tile.CORRIDOR,
        Tile.CORRIDOR,
        Tile.CORRIDOR,
        Tile.WALL,
    ]


def test_reset_clears_tiles_and_rooms():
    grid = DungeonGrid(8, 8)
    room = Room(1, 1, 3, 3)
    grid.carve_room(room)
    grid.rooms.append(room)
    grid.reset()
    assert grid.count(Tile.WALL) == 64
    assert grid.rooms == []


def test_room_overlap_with_padding():
    a = Room(5, 5, 4, 4)
    # Touching edge-to-edge still overlaps once padding is applied
    assert a.overlaps(Room(9, 5, 3, 3), padding=2)
    assert a.overlaps(Room(10, 5, 3, 3), padding=2)
    # Two cells of gap on the right clears padding=2
    assert not a.overlaps(Room(11, 5, 3, 3), padding=2)
    assert not a.overlaps(Room(5, 11, 3, 3), padding=2)
    assert a.overlaps(Room(11, 5, 3, 3), padding=3)


def test_room_center_and_contains():
    room = Room(2, 3, 5, 4)
    assert room.center() == (4, 5)
    assert room.contains(2, 3)
    assert not room.contains(7, 3)


def test_ascii_export_marks_player():
    grid = DungeonGrid(4, 3)
    grid.carve_room(Room(1, 1, 2, 1))
    assert grid.to_str_lines(marker=(2, 1)) == ["####", "#.@#", "####"]
    assert grid.pixel_size(40) == (160, 120)


@pytest.mark.parametrize("tile", list(Tile))
def test_walkability_follows_tile_kind(tile):
    grid = DungeonGrid(5, 5)
    grid.set_tile(2, 2, tile)
    assert grid.is_walkable(2, 2) is tile.is_walkable
    assert Tile.WALL.is_walkable is False
