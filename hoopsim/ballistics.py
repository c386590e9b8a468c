# hoopsim/ballistics.py
"""
Closed-form shot math for a drag-free projectile.

All coordinates are canvas pixels, so y grows downward; the formulas flip the
sign of the vertical displacement where physics expects y up.

Degenerate inputs are not guarded: a zero denominator gives inf/nan exactly
like IEEE float division, and those values flow on to the caller.
"""
import math
from typing import Iterator, NamedTuple, Tuple

from hoopsim.sim_config import CFG

G = CFG.gravity
DIVISOR = CFG.angle_distance_divisor
CUTOFF = CFG.vertical_cutoff_deg


class Point2D(NamedTuple):
    x: float
    y: float


class Trajectory(NamedTuple):
    straight: bool
    points: Tuple[Point2D, ...]


def _div(num: float, den: float) -> float:
    """Float division that returns inf/nan on a zero divisor instead of raising."""
    if den != 0:
        return num / den
    if num == 0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


# ---------------- AngleMapper ----------------
def compute_angle(shooter_x: float, hoop_x: float, rate: float, divisor: float = DIVISOR) -> float:
    """Linear distance -> launch angle map. 90 deg when the robot is under the hoop."""
    dist = (hoop_x - shooter_x) / divisor
    return -rate * dist + 90


# ---------------- VelocityMapper ----------------
def compute_velocity(theta_deg: float, start: Point2D, end: Point2D, gravity: float = G) -> float:
    """
    Launch speed that puts the parabola through `end`:

        v = sqrt( G*dx^2 / |(dx*tan(theta) - dy) * 2*cos^2(theta)| )
    """
    angle = math.radians(theta_deg)
    cos2 = math.cos(angle) ** 2
    dx = end.x - start.x
    dy = -(end.y - start.y)
    denom = (dx * math.tan(angle) - dy) * (2 * cos2)

    # sign fix; abs() also turns -0.0 into 0.0 so a zero denominator gives +inf
    denom = abs(denom)

    return math.sqrt(_div(gravity * dx * dx, denom))


# ---------------- TrajectoryRenderer ----------------
def is_straight_shot(theta_deg: float, cutoff_deg: float = CUTOFF) -> bool:
    return theta_deg > cutoff_deg


def trajectory_points(theta_deg: float, velocity: float, start: Point2D, end: Point2D,
                      gravity: float = G, cutoff_deg: float = CUTOFF) -> Iterator[Point2D]:
    """
    Yield the shot path in canvas coordinates.

    Near-vertical shots are just the segment start -> end. Otherwise the start
    point is followed by one sample per pixel column up to end.x; nothing
    follows the start point when end.x is not right of it.
    """
    if is_straight_shot(theta_deg, cutoff_deg):
        yield start
        yield end
        return

    angle = math.radians(theta_deg)
    cos2 = math.cos(angle) ** 2
    v2 = velocity * velocity
    tan_a = math.tan(angle)
    dx = end.x - start.x

    yield start
    for x in range(1, math.floor(dx) + 1):
        y = -(x * tan_a - _div(gravity * x * x, 2 * v2 * cos2))
        yield Point2D(start.x + x, start.y + y)


def build_trajectory(theta_deg: float, velocity: float, start: Point2D, end: Point2D,
                     gravity: float = G, cutoff_deg: float = CUTOFF) -> Trajectory:
    pts = tuple(trajectory_points(theta_deg, velocity, start, end, gravity, cutoff_deg))
    return Trajectory(is_straight_shot(theta_deg, cutoff_deg), pts)
