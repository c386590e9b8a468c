# hoopsim/frame.py
"""
One frame of the simulation as plain data.

render_frame() takes an immutable FrameInput (pointer + slider values) and
returns everything needed to show the frame: the launch numbers and a list of
draw commands. It never touches pygame, so the whole scene can be checked
without a display.
"""
import logging
import math
from dataclasses import dataclass
from typing import List, Tuple, Union

from hoopsim.ballistics import Point2D, Trajectory, build_trajectory, compute_angle, compute_velocity
from hoopsim.constants import WIDTH, HEIGHT, FONT_SIZE, WHITE, BLACK, GRAY, SILVER, BLUE, ORANGE, RED
from hoopsim.sim_config import SimConfig, CFG

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

TRAJECTORY_COLOR = (5, 5, 5)


@dataclass(frozen=True)
class FrameInput:
    pointer_x: float
    scale: float
    angle_rate: float
    width: int = WIDTH
    height: int = HEIGHT


# ---------------- Draw commands ----------------
@dataclass(frozen=True)
class Clear:
    color: Color = WHITE


@dataclass(frozen=True)
class RectCmd:
    x: float
    y: float
    w: float
    h: float
    color: Color


@dataclass(frozen=True)
class CircleCmd:
    center: Point2D
    diameter: float
    color: Color


@dataclass(frozen=True)
class LineCmd:
    start: Point2D
    end: Point2D
    color: Color
    width: int = 1


@dataclass(frozen=True)
class PolylineCmd:
    points: Tuple[Point2D, ...]
    color: Color
    width: int = 1


@dataclass(frozen=True)
class TextCmd:
    text: str
    x: float
    y: float     # baseline
    color: Color


DrawCommand = Union[Clear, RectCmd, CircleCmd, LineCmd, PolylineCmd, TextCmd]


@dataclass(frozen=True)
class FrameResult:
    shooter: Point2D
    hoop: Point2D
    theta: float
    velocity: float
    velocity_scaled: float
    distance_m: float
    hoop_height_m: float
    trajectory: Trajectory
    commands: Tuple[DrawCommand, ...] = ()


# ---------------- Layout ----------------
def hoop_position(width: int = WIDTH, height: int = HEIGHT, cfg: SimConfig = CFG) -> Point2D:
    return Point2D(width / 2 + cfg.hoop_offset_x, height - cfg.basket_height)


def shooter_position(pointer_x: float, hoop: Point2D, height: int = HEIGHT, cfg: SimConfig = CFG) -> Point2D:
    """Robot sits on the floor and may not come closer than max_dist to the hoop."""
    x = min(pointer_x, hoop.x - cfg.max_dist)
    return Point2D(x, height - cfg.robot_size / 2)


def hoop_commands(target: Point2D, cfg: SimConfig = CFG) -> List[RectCmd]:
    """Rim, backboard and post, with the rim's centre at `target`."""
    basket_x = target.x - cfg.basket_diameter / 2
    basket_y = target.y
    backboard_x = basket_x + (cfg.basket_diameter + cfg.dist_to_basket)
    backboard_y = basket_y - (cfg.backboard_height - cfg.dist_to_basket - 2)
    post_x = backboard_x + cfg.backboard_thick + 2
    post_y = backboard_y + cfg.backboard_height / 2
    post_height = cfg.backboard_height / 2 + cfg.basket_height

    return [
        RectCmd(basket_x, basket_y, cfg.basket_diameter, cfg.basket_thick, ORANGE),
        RectCmd(backboard_x, backboard_y, cfg.backboard_thick, cfg.backboard_height, SILVER),
        RectCmd(post_x, post_y, cfg.post_thick, post_height, BLACK),
    ]


def nfc(value: float, digits: int = 2) -> str:
    """Number with thousands separators and fixed decimals."""
    return f"{value:,.{digits}f}"


def readout_lines(theta: float, velocity_scaled: float, distance_m: float, hoop_height_m: float,
                  inp: FrameInput) -> List[TextCmd]:
    right = inp.width - 200
    return [
        TextCmd(f"Launch Angle = {nfc(theta)} deg", 10, FONT_SIZE, GRAY),
        TextCmd(f"Launch Velocity = {nfc(velocity_scaled)} m/s", 10, FONT_SIZE * 2, GRAY),
        TextCmd(f"Distance to Hoop = {nfc(distance_m)} m", 10, FONT_SIZE * 3, GRAY),
        TextCmd(f"Height of the Hoop = {nfc(hoop_height_m)} m", 10, FONT_SIZE * 4, GRAY),
        TextCmd(f"SCALE: {inp.scale:g}", right, FONT_SIZE, GRAY),
        TextCmd(f"ANGLE RATE: {nfc(inp.angle_rate)}", right, FONT_SIZE * 4, GRAY),
    ]


def trajectory_command(traj: Trajectory) -> DrawCommand:
    if traj.straight:
        return LineCmd(traj.points[0], traj.points[-1], TRAJECTORY_COLOR)
    return PolylineCmd(traj.points, TRAJECTORY_COLOR)


# ---------------- Frame ----------------
def render_frame(inp: FrameInput, cfg: SimConfig = CFG) -> FrameResult:
    hoop = hoop_position(inp.width, inp.height, cfg)
    shooter = shooter_position(inp.pointer_x, hoop, inp.height, cfg)

    theta = compute_angle(shooter.x, hoop.x, inp.angle_rate, cfg.angle_distance_divisor)
    velocity = compute_velocity(theta, shooter, hoop, cfg.gravity)

    s = inp.scale
    velocity_scaled = compute_velocity(
        theta,
        Point2D(shooter.x / s, shooter.y / s),
        Point2D(hoop.x / s, hoop.y / s),
        cfg.gravity,
    )

    traj = build_trajectory(theta, velocity, shooter, hoop, cfg.gravity, cfg.vertical_cutoff_deg)

    if not math.isfinite(velocity):
        logger.debug("degenerate shot: theta=%.3f velocity=%s", theta, velocity)

    distance_m = (hoop.x - shooter.x) / s
    hoop_height_m = (inp.height - hoop.y) / s

    cmds: List[DrawCommand] = [Clear()]
    cmds.extend(hoop_commands(hoop, cfg))
    cmds.append(CircleCmd(hoop, cfg.ball_size, RED))
    cmds.append(CircleCmd(shooter, cfg.robot_size, BLUE))
    cmds.extend(readout_lines(theta, velocity_scaled, distance_m, hoop_height_m, inp))
    cmds.append(trajectory_command(traj))

    return FrameResult(
        shooter=shooter,
        hoop=hoop,
        theta=theta,
        velocity=velocity,
        velocity_scaled=velocity_scaled,
        distance_m=distance_m,
        hoop_height_m=hoop_height_m,
        trajectory=traj,
        commands=tuple(cmds),
    )
