# hoopsim_ui/painter.py
import logging
import math

import pygame

from hoopsim.frame import Clear, RectCmd, CircleCmd, LineCmd, PolylineCmd, TextCmd

logger = logging.getLogger(__name__)


def _finite(*values) -> bool:
    return all(math.isfinite(v) for v in values)


def _finite_runs(points):
    """Split a polyline at non-finite points so no gap gets bridged."""
    runs, run = [], []
    for p in points:
        if _finite(p.x, p.y):
            run.append((p.x, p.y))
        elif run:
            runs.append(run)
            run = []
    if run:
        runs.append(run)
    return runs


def paint(surface: pygame.Surface, commands, font: pygame.font.Font):
    """
    Draw a frame's commands in order.
    Geometry with inf/nan in it is skipped; pygame would refuse it anyway.
    """
    skipped = 0

    for cmd in commands:
        if isinstance(cmd, Clear):
            surface.fill(cmd.color)

        elif isinstance(cmd, RectCmd):
            if not _finite(cmd.x, cmd.y, cmd.w, cmd.h):
                skipped += 1
                continue
            pygame.draw.rect(surface, cmd.color, pygame.Rect(int(cmd.x), int(cmd.y), int(cmd.w), int(cmd.h)))

        elif isinstance(cmd, CircleCmd):
            if not _finite(cmd.center.x, cmd.center.y, cmd.diameter):
                skipped += 1
                continue
            pygame.draw.circle(surface, cmd.color, (int(cmd.center.x), int(cmd.center.y)), int(cmd.diameter / 2))

        elif isinstance(cmd, LineCmd):
            if not _finite(cmd.start.x, cmd.start.y, cmd.end.x, cmd.end.y):
                skipped += 1
                continue
            pygame.draw.line(surface, cmd.color, tuple(cmd.start), tuple(cmd.end), cmd.width)

        elif isinstance(cmd, PolylineCmd):
            runs = _finite_runs(cmd.points)
            if sum(len(r) for r in runs) != len(cmd.points):
                skipped += 1
            for pts in runs:
                if len(pts) < 2:
                    continue
                if cmd.width == 1:
                    pygame.draw.aalines(surface, cmd.color, False, pts)
                else:
                    pygame.draw.lines(surface, cmd.color, False, pts, cmd.width)

        elif isinstance(cmd, TextCmd):
            img = font.render(cmd.text, True, cmd.color)
            # text y is the baseline
            surface.blit(img, (int(cmd.x), int(cmd.y) - font.get_ascent()))

        else:
            raise TypeError(f"unknown draw command: {cmd!r}")

    if skipped:
        logger.debug("skipped %d draw commands with non-finite geometry", skipped)
    return skipped
