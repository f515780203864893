import pytest

from gridcrawl.camera import Camera


def test_centers_on_player_when_far_from_edges():
    cam = Camera(800, 600)
    cam.follow_player(805.0, 605.0, 1600, 1200, player_size=30)
    assert cam.x == pytest.approx(805 + 15 - 400)
    assert cam.y == pytest.approx(605 + 15 - 300)


def test_clamps_to_top_left():
    cam = Camera(800, 600)
    cam.follow_player(5.0, 5.0, 1600, 1200, player_size=30)
    assert (cam.x, cam.y) == (0.0, 0.0)


def test_clamps_to_bottom_right():
    cam = Camera(800, 600)
    cam.follow_player(1565.0, 1165.0, 1600, 1200, player_size=30)
    assert (cam.x, cam.y) == (800.0, 600.0)


def test_small_dungeon_pins_offset_to_zero():
    cam = Camera(800, 600)
    cam.follow_player(300.0, 200.0, 400, 1200, player_size=30)
    assert cam.x == 0.0
    assert cam.y == 0.0
    cam.follow_player(300.0, 700.0, 400, 1200, player_size=30)
    assert cam.x == 0.0
    assert cam.y == pytest.approx(700 + 15 - 300)


def test_player_size_shifts_the_center():
    small, large = Camera(800, 600), Camera(800, 600)
    small.follow_player(805.0, 605.0, 1600, 1200, 10)
    large.follow_player(805.0, 605.0, 1600, 1200, 40)
    assert large.x - small.x == pytest.approx(15.0)
    assert large.y - small.y == pytest.approx(15.0)
