# pumasim

An interactive simulator of a three-joint PUMA-style robot arm. The arm can be
driven joint by joint, taught a motion and made to replay it, or sent to a
point through a Newton-Raphson inverse-kinematics solver. A red sphere in the
scene can be picked up by the gripper and carried around.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
pumasim
```

This opens a window with the arm in 3D and a control panel along the bottom.
Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--width` | 1500 | window width in pixels |
| `--height` | 800 | window height in pixels |
| `--fps` | 60 | frames per second |

### Controls

| Input | Effect |
| --- | --- |
| `1` / `2` | rotate joint 1 (base) by +1 / -1 degree per frame |
| `3` / `4` | rotate joint 2 (shoulder) |
| `5` / `6` | rotate joint 3 (elbow) |
| `Space` | pick up the sphere when the gripper is within one radius of it |
| `Enter` | put the sphere down |
| left click | press a panel button |
| right click | toggle camera orbiting with the mouse |
| `Escape` | quit |

Each joint stays strictly between -180 and 180 degrees. When driven by keys,
a joint refuses to move if the move would bring the gripper or the elbow axis
into the base column, or the gripper below the floor.

### Modes

The panel buttons switch between the modes in `pumasim.states.GameState`:

- **Manual mode** (`MANUAL`): move the joints by hand. Available from any
  mode; while in it, any recorded motion is cleared.
- **Start learning** (`LEARNING`, from manual mode): every joint move is
  recorded, together with the sphere's position.
- **Finish learning** (`FINISHED_LEARNING`, from learning): stop recording.
- **Execute** (`EXECUTE`, after finishing learning): replay the recorded
  motion, one step per frame. Press it again to replay once more.
- **Accept** (`INVERSE`, from manual mode): read the target from the `x`,
  `y`, `z` fields, solve the joint angles, step the arm towards them one
  degree per frame and return to manual mode once they are reached. `z` is the
  height above the floor. If the target is at height 3.5 or below, an `x` or
  `y` within 0.4 of the base is pushed out to ±0.6. The fields are emptied.

The coordinate fields accept digits and `.`; the `x` and `y` fields also
accept `-`. Each holds up to five characters; text that is not a number reads
as 0. Hover the mouse over a field to type into it; while it is there, the
joint keys are ignored.

## Using the library

The pieces work without a window:

```python
from pumasim.kinematics import find_angles, manipulator_coordinates
from pumasim.simulator import Simulator, is_move_safe

alpha, beta, gamma = find_angles(2.0, 2.0, 1.0)
print(manipulator_coordinates(alpha, beta, gamma))

sim = Simulator()
print(sim.manipulator())
print(sim.can_rotate(2, "+"))
sim.step({"3"}, writing=False)   # one frame with key 3 held
print(is_move_safe((0, 0, 0), 1, "-"))
```

- `pumasim.kinematics`: forward kinematics (`manipulator_coordinates`,
  `rotation_axis_coordinates`), the residual `equations` and `jacobian`, and
  `find_angles`, which returns whole-degree joint angles.
- `pumasim.transforms`: 4x4 homogeneous-matrix helpers (`identity`,
  `translation`, `rotation`, `transform_point`).
- `pumasim.robot.RobotPart` and `pumasim.sphere.MovableSphere`: the arm's
  links and the ball.
- `pumasim.panel`: the control panel's layout (`Rect`), entry fields
  (`TextField`) and button logic (`ControlPanel`).
- `pumasim.simulator.Simulator`: the scene and its per-frame state machine.

Only `pumasim.app` needs a display.

## What it does not do

Recorded motions live only in memory: they are not saved to or loaded from
files, and are lost when the window closes or manual mode is entered. The
arm cannot be scripted from the command line; `pumasim` only opens the
interactive window.