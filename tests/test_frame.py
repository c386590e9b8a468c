import dataclasses
import math

import pytest

from hoopsim.ballistics import Point2D, compute_velocity
from hoopsim.frame import (
    CircleCmd, Clear, FrameInput, LineCmd, PolylineCmd, RectCmd, TextCmd,
    hoop_commands, hoop_position, nfc, render_frame, shooter_position,
)
from hoopsim.sim_config import CFG


def frame(pointer_x=220, scale=100, angle_rate=0.5):
    return render_frame(FrameInput(pointer_x=pointer_x, scale=scale, angle_rate=angle_rate))


def test_layout_on_default_canvas():
    hoop = hoop_position()
    assert hoop == Point2D(420, 335)
    assert shooter_position(100, hoop) == Point2D(100, 595)


def test_shooter_is_clamped_near_the_hoop():
    hoop = hoop_position()
    assert shooter_position(600, hoop).x == 415
    assert shooter_position(415, hoop).x == 415
    assert shooter_position(414, hoop).x == 414


def test_frame_launch_numbers():
    r = frame()
    assert r.shooter == Point2D(220, 595)
    assert r.theta == pytest.approx(80.0)
    assert r.velocity == pytest.approx(compute_velocity(80.0, r.shooter, r.hoop))
    assert r.distance_m == pytest.approx(2.0)
    assert r.hoop_height_m == pytest.approx(3.05)


def test_scaled_velocity_uses_scaled_coordinates():
    r = frame(scale=250)
    s = 250
    expected = compute_velocity(r.theta, Point2D(r.shooter.x / s, r.shooter.y / s),
                                Point2D(r.hoop.x / s, r.hoop.y / s))
    assert r.velocity_scaled == pytest.approx(expected)
    # speed grows with sqrt of length
    assert r.velocity_scaled == pytest.approx(r.velocity / math.sqrt(s))


def test_readout_text():
    texts = [c.text for c in frame().commands if isinstance(c, TextCmd)]
    assert texts[0] == "Launch Angle = 80.00 deg"
    assert texts[1].startswith("Launch Velocity = ") and texts[1].endswith(" m/s")
    assert texts[2] == "Distance to Hoop = 2.00 m"
    assert texts[3] == "Height of the Hoop = 3.05 m"
    assert texts[4] == "SCALE: 100"
    assert texts[5] == "ANGLE RATE: 0.50"


def test_nfc_groups_thousands():
    assert nfc(1234.5) == "1,234.50"
    assert nfc(0.005, 1) == "0.0"


def test_hoop_geometry():
    rim, board, post = hoop_commands(Point2D(420, 335))
    assert (rim.x, rim.y, rim.w, rim.h) == (397, 335, 46, 5)
    assert (board.x, board.y, board.w, board.h) == (456, 228, 10, 122)
    assert (post.x, post.y, post.w, post.h) == (468, 289, 15, 366)


def test_command_order():
    cmds = frame().commands
    assert isinstance(cmds[0], Clear)
    assert [type(c) for c in cmds[1:4]] == [RectCmd, RectCmd, RectCmd]
    ball, robot = cmds[4], cmds[5]
    assert isinstance(ball, CircleCmd) and ball.diameter == CFG.ball_size
    assert isinstance(robot, CircleCmd) and robot.diameter == CFG.robot_size
    assert isinstance(cmds[-1], PolylineCmd)
    assert len(cmds[-1].points) == 201


def test_close_shot_draws_a_line():
    r = frame(pointer_x=600)
    assert r.theta == pytest.approx(89.75)
    last = r.commands[-1]
    assert isinstance(last, LineCmd)
    assert last.start == r.shooter and last.end == r.hoop


def test_frames_are_independent():
    a = frame(pointer_x=150, angle_rate=1.2)
    frame(pointer_x=400, angle_rate=0.3)
    b = frame(pointer_x=150, angle_rate=1.2)
    assert a.theta == b.theta
    assert a.commands == b.commands


def test_custom_angle_divisor_reaches_the_frame():
    cfg = dataclasses.replace(CFG, angle_distance_divisor=20.0)
    r = render_frame(FrameInput(pointer_x=220, scale=100, angle_rate=0.5), cfg)
    assert r.theta == pytest.approx(85.0)
    assert r.commands[6].text == "Launch Angle = 85.00 deg"


def test_custom_cutoff_reaches_the_frame():
    cfg = dataclasses.replace(CFG, vertical_cutoff_deg=70.0)
    r = render_frame(FrameInput(pointer_x=220, scale=100, angle_rate=0.5), cfg)
    assert r.theta == pytest.approx(80.0)
    assert r.trajectory.straight
    assert isinstance(r.commands[-1], LineCmd)


def test_frame_result_is_immutable():
    r = frame()
    assert isinstance(r.commands, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.theta = 0.0
