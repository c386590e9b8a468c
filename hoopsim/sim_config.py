# hoopsim/sim_config.py
from dataclasses import dataclass, field


@dataclass(frozen=True)
class SliderSpec:
    min_value: float
    max_value: float
    default: float
    step: float


@dataclass(frozen=True)
class SimConfig:
    gravity: float = 9.8

    max_dist: int = 5            # closest the robot may get to the hoop (px)
    robot_size: int = 90         # diameter
    ball_size: int = 24
    basket_height: int = 305     # rim height above the floor (px)
    hoop_offset_x: int = 100     # hoop x = width/2 + offset

    angle_distance_divisor: float = 10.0
    vertical_cutoff_deg: float = 86.0   # above this the path is drawn as a line

    # hoop drawing
    basket_diameter: int = 46
    basket_thick: int = 5
    backboard_height: int = 122
    backboard_thick: int = 10
    dist_to_basket: int = 13
    post_thick: int = 15

    scale_slider: SliderSpec = field(default_factory=lambda: SliderSpec(10, 1000, 100, 10))
    angle_rate_slider: SliderSpec = field(default_factory=lambda: SliderSpec(0.25, 1.5, 0.5, 0.01))
    slider_width: int = 100

CFG = SimConfig()
