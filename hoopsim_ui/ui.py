import pygame

from hoopsim.sim_config import SliderSpec


class Slider:
    """Horizontal slider snapped to a fixed step, like an HTML range input."""

    def __init__(self, pos, width, spec: SliderSpec, height=16):
        if spec.min_value >= spec.max_value:
            raise ValueError(f"slider min {spec.min_value} must be below max {spec.max_value}")
        if spec.step <= 0:
            raise ValueError(f"slider step must be positive, got {spec.step}")

        self.rect = pygame.Rect(pos[0], pos[1], width, height)
        self.spec = spec
        self.dragging = False
        self._value = self.snap(spec.default)

    def snap(self, v):
        s = self.spec
        v = max(s.min_value, min(s.max_value, float(v)))
        steps = round((v - s.min_value) / s.step)
        v = s.min_value + steps * s.step
        # the last step can overshoot max when the range is not a multiple of step
        return round(min(v, s.max_value), 10)

    def set_value(self, v):
        self._value = self.snap(v)

    def reset(self):
        self._value = self.snap(self.spec.default)

    def value(self):
        return self._value

    def _value_at(self, x):
        frac = (x - self.rect.left) / max(1, self.rect.width)
        frac = max(0.0, min(1.0, frac))
        return self.spec.min_value + frac * (self.spec.max_value - self.spec.min_value)

    def knob_x(self) -> int:
        s = self.spec
        frac = (self._value - s.min_value) / (s.max_value - s.min_value)
        return int(round(self.rect.left + frac * self.rect.width))

    def handle_event(self, event) -> bool:
        """Returns True when the event moved the slider."""
        before = self._value

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.dragging = True
                self.set_value(self._value_at(event.pos[0]))

        elif event.type == pygame.MOUSEMOTION and self.dragging:
            self.set_value(self._value_at(event.pos[0]))

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.dragging = False

        return self._value != before

    def draw(self, surface):
        cy = self.rect.centery
        pygame.draw.line(surface, (120, 120, 120), (self.rect.left, cy), (self.rect.right, cy), 4)
        pygame.draw.circle(surface, (60, 60, 60), (self.knob_x(), cy), self.rect.height // 2)
        pygame.draw.circle(surface, (0, 0, 0), (self.knob_x(), cy), self.rect.height // 2, 1)
