# hoopsim_ui/main.py
import logging
import math
import os
import sys

import pygame

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from hoopsim.constants import APP_TITLE, WIDTH, HEIGHT, FPS
from hoopsim_ui.screens import SimulationScreen

logger = logging.getLogger(__name__)


def _env_float(environ, name, default):
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {raw!r}")
    return value


def settings_from_env(environ=None):
    """
    Startup settings. Run with different defaults as:
        HOOPSIM_SCALE=50 HOOPSIM_ANGLE_RATE=1.0 hoopsim
    """
    env = os.environ if environ is None else environ
    level = env.get("HOOPSIM_LOG_LEVEL", "WARNING").strip().upper()
    # getLevelName maps known names to their number, anything else to a string
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"HOOPSIM_LOG_LEVEL must be a logging level name, got {level!r}")
    settings = {"fps": FPS, "log_level": level}

    fps = _env_float(env, "HOOPSIM_FPS", None)
    if fps is not None:
        if fps < 1:
            raise ValueError(f"HOOPSIM_FPS must be at least 1, got {fps}")
        settings["fps"] = int(fps)

    scale = _env_float(env, "HOOPSIM_SCALE", None)
    if scale is not None:
        settings["scale"] = scale

    angle_rate = _env_float(env, "HOOPSIM_ANGLE_RATE", None)
    if angle_rate is not None:
        settings["angle_rate"] = angle_rate

    return settings


class App:
    def __init__(self, fps=FPS, **start_values):
        pygame.init()
        pygame.display.set_caption(APP_TITLE)
        self.width, self.height = WIDTH, HEIGHT
        self.screen = pygame.display.set_mode((self.width, self.height))
        self.clock = pygame.time.Clock()
        self.fps = fps

        self.screens = {
            "simulation": SimulationScreen(self),
        }

        self.current = None
        self.running = True
        self.change_screen("simulation", **start_values)

    def change_screen(self, name, **kwargs):
        if self.current:
            self.current.on_exit()
        self.current = self.screens[name]
        self.current.on_enter(**kwargs)

    def handle_global_keys(self, event):
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False

    def run(self):
        try:
            while self.running:
                dt = self.clock.tick(self.fps) / 1000.0

                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    self.handle_global_keys(event)
                    self.current.handle_event(event)

                self.current.update(dt)
                self.current.draw(self.screen)
                pygame.display.flip()
        finally:
            pygame.quit()


def main():
    settings = settings_from_env()
    logging.basicConfig(
        level=settings.pop("log_level"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("starting %s with %s", APP_TITLE, settings)
    App(**settings).run()


if __name__ == "__main__":
    main()
