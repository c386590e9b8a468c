import logging

import pygame

from hoopsim.constants import FONT_SIZE
from hoopsim.frame import FrameInput, render_frame
from hoopsim.sim_config import CFG
from hoopsim_ui.painter import paint
from hoopsim_ui.ui import Slider

logger = logging.getLogger(__name__)


class Screen:
    name = "base"
    def __init__(self, app): self.app = app
    def on_enter(self, **kwargs): pass
    def on_exit(self): pass
    def handle_event(self, event): pass
    def update(self, dt): pass
    def draw(self, surface): pass


# -------------------- Simulation --------------------
class SimulationScreen(Screen):
    """
    Owns the only state that outlives a frame: pointer x and the two sliders.
    Every draw() builds a fresh FrameInput and hands it to render_frame().
    """
    name = "simulation"

    def __init__(self, app):
        super().__init__(app)
        self.font = pygame.font.SysFont(None, FONT_SIZE + 4)
        w = app.width
        self.scale_slider = Slider((w - 200, FONT_SIZE * 2), CFG.slider_width, CFG.scale_slider)
        self.angle_rate_slider = Slider((w - 200, FONT_SIZE * 5), CFG.slider_width, CFG.angle_rate_slider)
        self.sliders = [self.scale_slider, self.angle_rate_slider]
        self.pointer_x = 0.0
        self.last = None

    def on_enter(self, **kwargs):
        if "scale" in kwargs:
            self.scale_slider.set_value(kwargs["scale"])
        if "angle_rate" in kwargs:
            self.angle_rate_slider.set_value(kwargs["angle_rate"])

    def reset(self):
        for s in self.sliders:
            s.reset()

    def handle_event(self, event):
        for s in self.sliders:
            if s.handle_event(event):
                return

        if event.type == pygame.KEYDOWN and event.key == pygame.K_r:
            self.reset()
        elif event.type == pygame.MOUSEMOTION:
            # dragging a slider shouldn't move the robot
            if not any(s.dragging for s in self.sliders):
                self.pointer_x = float(event.pos[0])

    def frame_input(self) -> FrameInput:
        return FrameInput(
            pointer_x=self.pointer_x,
            scale=self.scale_slider.value(),
            angle_rate=self.angle_rate_slider.value(),
            width=self.app.width,
            height=self.app.height,
        )

    def draw(self, surface):
        inp = self.frame_input()
        logger.debug("angle rate %.2f", inp.angle_rate)

        self.last = render_frame(inp)
        paint(surface, self.last.commands, self.font)

        for s in self.sliders:
            s.draw(surface)
