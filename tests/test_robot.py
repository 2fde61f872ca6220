import numpy as np
import pytest

from pumasim.robot import RobotPart
from pumasim.transforms import identity, transform_point


def make_part(number, angle=0):
    return RobotPart(number, (0.0, 1.5, 0.0), 0.8, 3.0, 0.8, angle=angle)


@pytest.mark.parametrize("number", [1, 2, 3])
def test_rotate_plus_and_minus(number):
    part = make_part(number)
    assert part.rotate("+") is True
    assert part.angle == 1
    assert part.rotate("-") is True
    assert part.rotate("-") is True
    assert part.angle == -1


def test_rotate_stops_below_upper_limit():
    part = make_part(1, angle=179)
    assert part.rotate("+") is False
    assert part.angle == 179


def test_rotate_stops_above_lower_limit():
    part = make_part(2, angle=-179)
    assert part.rotate("-") is False
    assert part.angle == -179


def test_rotate_out_of_range_joint_is_frozen():
    part = make_part(3, angle=180)
    assert part.rotate("-") is False
    assert part.angle == 180


def test_part_without_joint_does_not_rotate():
    part = make_part(4)
    assert part.rotate("+") is False
    assert part.angle == 0


def test_unknown_side_rejected():
    with pytest.raises(ValueError):
        make_part(1).rotate("*")


@pytest.mark.parametrize("number", [1, 2, 3, 4])
def test_transform_at_rest_is_identity(number):
    assert np.allclose(make_part(number).transform(), identity())


def test_base_rotation_keeps_vertical_axis():
    part = make_part(1, angle=73)
    assert transform_point((0.0, 4.0, 0.0), part.transform()) == pytest.approx((0.0, 4.0, 0.0))


def test_shoulder_rotation_keeps_pivot():
    part = make_part(2, angle=40)
    assert transform_point((0.0, 2.75, 0.0), part.transform()) == pytest.approx((0.0, 2.75, 0.0))


def test_elbow_rotation_keeps_pivot():
    part = make_part(3, angle=-65)
    assert transform_point((0.0, 2.75, 1.85), part.transform()) == pytest.approx((0.0, 2.75, 1.85))


def test_joint_angle_of_part_four_is_ignored():
    part = make_part(4, angle=30)
    assert np.allclose(part.transform(), identity())