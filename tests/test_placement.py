# tests/test_placement.py

from __future__ import annotations

from tasktray.window.placement import (
    CoordinateOrigin,
    Display,
    Point,
    Rect,
    display_at,
    flip_y,
    window_position,
)

W = 400


def test_pointer_on_right_display_uses_right_display() -> None:
    left = Display(Rect(0, 0, 1920, 1080), is_primary=True)
    right = Display(Rect(1920, 0, 1920, 1080))

    pos = window_position(Point(2500, 300), [left, right], W)

    assert pos == Point(1920 + 1920 - W, 0)


def test_pointer_on_primary_display() -> None:
    left = Display(Rect(0, 0, 1920, 1080), is_primary=True)
    right = Display(Rect(1920, 0, 2560, 1440))

    assert window_position(Point(10, 10), [left, right], W) == Point(1920 - W, 0)


def test_shared_edge_belongs_to_the_right_display() -> None:
    left = Display(Rect(0, 0, 1920, 1080), is_primary=True)
    right = Display(Rect(1920, 0, 1920, 1080))
    assert display_at(Point(1920, 5), [left, right]) is right


def test_first_match_wins_for_overlapping_displays() -> None:
    a = Display(Rect(0, 0, 1000, 1000), name="a")
    b = Display(Rect(500, 0, 1000, 1000), name="b")
    assert display_at(Point(600, 10), [a, b]) is a


def test_pointer_outside_every_display_falls_back_to_primary() -> None:
    secondary = Display(Rect(-1280, 0, 1280, 1024))
    primary = Display(Rect(0, 0, 1920, 1080), is_primary=True)

    pos = window_position(Point(99999, 99999), [secondary, primary], W)
    assert pos == Point(1920 - W, 0)


def test_without_primary_flag_first_display_is_primary() -> None:
    only = Display(Rect(0, 0, 1440, 900))
    assert window_position(Point(-5, -5), [only], W) == Point(1440 - W, 0)


def test_no_displays() -> None:
    assert window_position(Point(0, 0), [], W) is None


def test_top_left_layout_with_monitor_above_and_offset() -> None:
    primary = Display(Rect(0, 0, 1920, 1080), is_primary=True)
    above = Display(Rect(200, -1440, 2560, 1440))

    pos = window_position(Point(1000, -700), [primary, above], W)
    assert pos == Point(200 + 2560 - W, -1440)


# ---- bottom-left (Cocoa-style) inputs ----


def test_bottom_left_primary_display_top_is_zero() -> None:
    primary = Display(Rect(0, 0, 1440, 900), is_primary=True)

    pos = window_position(Point(100, 100), [primary], W, origin=CoordinateOrigin.BOTTOM_LEFT)
    assert pos == Point(1440 - W, 0)


def test_bottom_left_taller_secondary_on_the_right() -> None:
    # Laptop 1440x900 primary, external 1920x1080 aligned at the bottom edge.
    primary = Display(Rect(0, 0, 1440, 900), is_primary=True)
    external = Display(Rect(1440, 0, 1920, 1080))

    pos = window_position(
        Point(2000, 1000),
        [primary, external],
        W,
        origin=CoordinateOrigin.BOTTOM_LEFT,
    )
    # External's top edge is 180px above the primary's top in toolkit space.
    assert pos == Point(1440 + 1920 - W, 900 - 1080)


def test_bottom_left_shorter_secondary_on_the_left() -> None:
    primary = Display(Rect(0, 0, 2560, 1440), is_primary=True)
    external = Display(Rect(-1280, 200, 1280, 1024))

    pos = window_position(
        Point(-600, 500),
        [primary, external],
        W,
        origin=CoordinateOrigin.BOTTOM_LEFT,
    )
    # Top edge at 200 + 1024 = 1224 (bottom-left) -> 1440 - 1224 = 216 (top-left).
    assert pos == Point(-1280 + 1280 - W, 216)


def test_bottom_left_uses_primary_height_not_target_height() -> None:
    # Primary listed second: the flip must still use the primary's height.
    external = Display(Rect(1440, 0, 1920, 1200))
    primary = Display(Rect(0, 0, 1440, 900), is_primary=True)

    pos = window_position(
        Point(1500, 10),
        [external, primary],
        W,
        origin=CoordinateOrigin.BOTTOM_LEFT,
    )
    assert pos == Point(1440 + 1920 - W, 900 - 1200)


def test_bottom_left_monitor_stacked_above_primary() -> None:
    primary = Display(Rect(0, 0, 1440, 900), is_primary=True)
    above = Display(Rect(0, 900, 1920, 1080))

    pos = window_position(Point(50, 1500), [primary, above], W, origin=CoordinateOrigin.BOTTOM_LEFT)
    assert pos == Point(1920 - W, 900 - 1980)


def test_flip_is_its_own_inverse() -> None:
    assert flip_y(flip_y(123.5, 900), 900) == 123.5
