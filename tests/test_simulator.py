import pytest

from pumasim.kinematics import find_angles, manipulator_coordinates
from pumasim.simulator import (
    PICK_UP_KEY,
    PUT_DOWN_KEY,
    Simulator,
    Waypoint,
    is_move_safe,
)
from pumasim.states import GameState


def _centre(rect):
    return (rect.x + rect.width / 2, rect.y + rect.height / 2)


@pytest.mark.parametrize("joint", [1, 2, 3])
@pytest.mark.parametrize("side", ["+", "-"])
def test_moves_from_home_pose_are_safe(joint, side):
    assert is_move_safe((0, 0, 0), joint, side) is True


def test_move_below_floor_is_unsafe():
    assert manipulator_coordinates(0, 61, 30)[1] < 0
    assert is_move_safe((0, 60, 30), 2, "+") is False


@pytest.mark.parametrize("joint", [0, 4])
def test_invalid_joint_rejected(joint):
    with pytest.raises(ValueError):
        is_move_safe((0, 0, 0), joint, "+")


def test_invalid_side_rejected():
    with pytest.raises(ValueError):
        is_move_safe((0, 0, 0), 1, "*")


def test_wrong_number_of_angles_rejected():
    with pytest.raises(ValueError):
        is_move_safe((0, 0), 1, "+")


def test_manipulator_matches_kinematics():
    sim = Simulator()
    sim.angles = (20, 10, 5)
    assert sim.manipulator() == manipulator_coordinates(20, 10, 5)


def test_manual_keys_rotate_joints():
    sim = Simulator()
    sim.step({"1", "3", "6"}, writing=False)
    assert sim.angles == (1, 1, -1)
    sim.step({"2"}, writing=False)
    assert sim.angles == (0, 1, -1)


def test_writing_blocks_keys():
    sim = Simulator()
    sim.step({"1", "3", "5"}, writing=True)
    assert sim.angles == (0, 0, 0)


def test_joint_limit_holds():
    sim = Simulator()
    sim.parts[0].angle = 179
    sim.step({"1"}, writing=False)
    assert sim.parts[0].angle == 179


def test_manual_clears_recording():
    sim = Simulator()
    sim.recording.append(Waypoint((1, 2, 3), (0.0, 0.0, 0.0)))
    sim.playback_index = 1
    sim.step(set(), writing=False)
    assert sim.recording == []
    assert sim.playback_index == 0


def test_learning_records_each_move():
    sim = Simulator()
    sim.state = GameState.LEARNING
    for _ in range(3):
        sim.step({"1"}, writing=False)
    assert [w.angles for w in sim.recording] == [(1, 0, 0), (2, 0, 0), (3, 0, 0)]
    assert all(w.sphere_position == sim.sphere.position for w in sim.recording)


def test_execute_replays_recording_then_stops():
    sim = Simulator()
    sim.state = GameState.LEARNING
    for keys in ({"1"}, {"3"}, {"5"}):
        sim.step(keys, writing=False)
    recorded = list(sim.recording)
    sim.angles = (0, 0, 0)
    sim.state = GameState.EXECUTE
    sim.execute_flag = 1
    for waypoint in recorded:
        sim.step(set(), writing=False)
        assert sim.angles == waypoint.angles
    sim.step(set(), writing=False)
    assert sim.execute_flag == 0
    assert sim.playback_index == 0
    assert sim.angles == recorded[-1].angles


def test_clicks_walk_through_teaching_states():
    sim = Simulator()
    sim.click(_centre(sim.panel.start))
    assert sim.state == GameState.LEARNING
    sim.click(_centre(sim.panel.finish))
    assert sim.state == GameState.FINISHED_LEARNING
    sim.click(_centre(sim.panel.execute))
    assert sim.state == GameState.EXECUTE
    sim.click(_centre(sim.panel.manual))
    assert sim.state == GameState.MANUAL


def test_finished_learning_ignores_keys():
    sim = Simulator()
    sim.state = GameState.FINISHED_LEARNING
    sim.step({"1", "3"}, writing=False)
    assert sim.angles == (0, 0, 0)


def test_inverse_reaches_computed_angles():
    sim = Simulator()
    for char in "1.5":
        sim.panel.x_field.type_char(char)
    sim.panel.y_field.type_char("3")
    sim.panel.z_field.type_char("2")
    expected = find_angles(1.5, 2.0, 3.0)
    assert all(-180 < a < 180 for a in expected)

    sim.click(_centre(sim.panel.accept))
    assert sim.state == GameState.INVERSE
    for _ in range(400):
        sim.step(set(), writing=False)
        if sim.state == GameState.MANUAL:
            break
    assert sim.state == GameState.MANUAL
    assert sim.angles == expected
    assert sim.moving is False
    assert sim.panel.x_field.text == ""


def test_pick_up_and_put_down():
    sim = Simulator()
    sim.sphere.position = sim.manipulator()
    sim.step({PICK_UP_KEY}, writing=False)
    assert sim.carrying is True

    before = sim.manipulator()
    sim.step({"1"}, writing=False)
    sim.step(set(), writing=False)
    assert sim.sphere.position == pytest.approx(sim.manipulator())
    assert sim.sphere.position != pytest.approx(before)

    sim.step({PUT_DOWN_KEY}, writing=False)
    assert sim.carrying is False
    resting = sim.sphere.position
    sim.step({"1"}, writing=False)
    sim.step(set(), writing=False)
    assert sim.sphere.position == resting


def test_space_far_from_sphere_does_not_pick_up():
    sim = Simulator()
    sim.step({PICK_UP_KEY}, writing=False)
    assert sim.carrying is False