from dataclasses import FrozenInstanceError

import pytest

from consnake.obstacles import MAX_OBSTACLES, Point, load_obstacles, parse_obstacles


def test_parse_keeps_inner_points_in_order():
    assert parse_obstacles("3 4\n5 6\n", 20, 20) == [Point(3, 4), Point(5, 6)]


def test_parse_drops_points_on_or_outside_border():
    text = "0 5\n19 5\n5 0\n5 19\n-1 3\n25 25\n18 18\n"
    assert parse_obstacles(text, 20, 20) == [Point(18, 18)]


def test_parse_respects_field_size():
    assert parse_obstacles("4 4\n3 3\n", 5, 5) == [Point(3, 3)]


def test_parse_stops_at_malformed_token():
    assert parse_obstacles("2 2\nfoo 3\n4 4\n", 20, 20) == [Point(2, 2)]


def test_parse_ignores_incomplete_pair():
    assert parse_obstacles("2 2\n7", 20, 20) == [Point(2, 2)]


def test_parse_caps_number_of_obstacles():
    text = "\n".join("5 5" for _ in range(MAX_OBSTACLES + 20))
    result = parse_obstacles(text, 20, 20)
    assert len(result) == MAX_OBSTACLES
    assert set(result) == {Point(5, 5)}


def test_load_missing_file_gives_empty(tmp_path):
    assert load_obstacles(tmp_path / "nope.txt", 20, 20) == []


def test_load_reads_file(tmp_path):
    path = tmp_path / "obstacles.txt"
    path.write_text("1 1\n7 8\n0 0\n", encoding="utf-8")
    assert load_obstacles(path, 20, 20) == [Point(1, 1), Point(7, 8)]


def test_point_is_immutable_and_hashable():
    point = Point(2, 3)
    with pytest.raises(FrozenInstanceError):
        point.x = 5
    assert {point, Point(2, 3)} == {Point(2, 3)}