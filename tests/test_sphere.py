import pytest

from pumasim.sphere import MovableSphere


@pytest.fixture
def sphere():
    return MovableSphere((0.0, 0.5, 2.0), 0.5)


def test_follow_manipulator_moves_sphere(sphere):
    sphere.follow_manipulator((1.0, 2.0, 3.0))
    assert sphere.position == (1.0, 2.0, 3.0)


def test_follow_then_near(sphere):
    sphere.follow_manipulator((4.0, -1.0, 0.25))
    assert sphere.is_near((4.0, -1.0, 0.25)) is True


def test_centre_is_near(sphere):
    assert sphere.is_near((0.0, 0.5, 2.0)) is True


def test_edge_of_box_is_near(sphere):
    assert sphere.is_near((0.5, 1.0, 1.5)) is True


@pytest.mark.parametrize("coords", [(0.6, 0.5, 2.0), (0.0, -0.1, 2.0), (0.0, 0.5, 2.6)])
def test_outside_on_one_axis_is_not_near(sphere, coords):
    assert sphere.is_near(coords) is False


def test_corner_of_box_counts_as_near(sphere):
    assert sphere.is_near((0.45, 0.05, 2.45)) is True