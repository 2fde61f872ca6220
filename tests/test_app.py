import pytest

from pumasim.app import project


def test_origin_projects_to_centre():
    x, y = project((0.0, 0.0, 0.0), 800, 600)
    assert x == pytest.approx(400.0)
    assert y == pytest.approx(300.0)


def test_point_behind_camera_is_hidden():
    assert project((20.0, 20.0, 20.0), 800, 600) is None


def test_up_is_above_centre():
    _, y = project((0.0, 1.0, 0.0), 800, 600)
    assert y < 300.0


def test_x_axis_goes_right_and_z_axis_goes_left():
    right_x, _ = project((1.0, 0.0, 0.0), 800, 600)
    left_x, _ = project((0.0, 0.0, 1.0), 800, 600)
    assert right_x > 400.0
    assert left_x < 400.0


def test_x_and_z_axes_are_mirror_images():
    ax, ay = project((1.0, 0.0, 0.0), 1500, 800)
    bx, by = project((0.0, 0.0, 1.0), 1500, 800)
    assert ax - 750.0 == pytest.approx(750.0 - bx)
    assert ay == pytest.approx(by)


def test_farther_points_appear_closer_to_centre():
    near_x, _ = project((1.0, 0.0, 0.0), 800, 600)
    far_x, _ = project((-4.0, -4.0, -3.0), 800, 600)
    assert abs(near_x - 400.0) > abs(far_x - 400.0)