"""pygame drawing helpers for the scene and the status display."""

import numpy as np
import pygame
import pygame.gfxdraw

from . import constants as C
from .utils import (
    altitude_to_display,
    distance_to_display,
    force_to_display,
    speed_to_display,
    zoom_to_display,
)


def _clip_rect_to_half_plane(width, height, point, normal):
    """Return the part of the screen rectangle with ``dot(p - point, normal) <= 0``."""
    corners = [
        np.array([0.0, 0.0]),
        np.array([width, 0.0]),
        np.array([width, height]),
        np.array([0.0, height]),
    ]
    out = []
    for i, cur in enumerate(corners):
        nxt = corners[(i + 1) % len(corners)]
        d_cur = np.dot(cur - point, normal)
        d_nxt = np.dot(nxt - point, normal)
        if d_cur <= 0:
            out.append(cur)
        if (d_cur <= 0) != (d_nxt <= 0):
            t = d_cur / (d_cur - d_nxt)
            out.append(cur + (nxt - cur) * t)
    return out


def draw_disc(screen, center, radius, color, border_color=None, border_width=0):
    """Draw a filled circle, falling back to a half-plane for huge radii."""
    width, height = screen.get_size()
    if radius <= C.MAX_DRAW_RADIUS:
        x, y = int(round(center[0])), int(round(center[1]))
        r = max(1, int(round(radius)))
        if max(abs(x), abs(y)) + r < C.GFXDRAW_LIMIT:
            pygame.gfxdraw.filled_circle(screen, x, y, r, color)
            pygame.gfxdraw.aacircle(screen, x, y, r, color)
        else:
            pygame.draw.circle(screen, color, (x, y), r)
        if border_color is not None and border_width > 0:
            pygame.draw.circle(screen, border_color, (x, y), r, border_width)
        return

    # At this scale the visible surface is effectively a straight edge.
    view_center = np.array([width / 2, height / 2], dtype=float)
    offset = view_center - center
    dist = np.linalg.norm(offset)
    normal = offset / dist if dist > 0 else np.array([0.0, -1.0])
    edge = center + normal * radius
    polygon = _clip_rect_to_half_plane(width, height, edge, normal)
    if len(polygon) >= 3:
        pygame.draw.polygon(screen, color, [(float(p[0]), float(p[1])) for p in polygon])
        if border_color is not None and border_width > 0:
            tangent = np.array([-normal[1], normal[0]])
            span = width + height
            pygame.draw.line(
                screen,
                border_color,
                tuple(edge - tangent * span),
                tuple(edge + tangent * span),
                border_width,
            )


def hud_lines(sim, viewport_size=None):
    info = sim.status()
    lines = [
        f"Basketballs: {info['count']}",
        f"First ball altitude: {altitude_to_display(info['altitude'])}",
        f"First ball speed: {speed_to_display(info['speed'])}",
        f"Zoom: {zoom_to_display(info['zoom'])}",
        f"Gravity: {force_to_display(info['gravity'])}",
    ]
    if viewport_size is not None:
        lines.append(f"View width: {distance_to_display(viewport_size[0] / info['zoom'])}")
    if sim.paused:
        lines.append("Paused")
    return lines


def draw_scene(screen, sim, font=None):
    """Render the central body, every falling body and the status text."""
    screen.fill(C.BACKGROUND)
    size = screen.get_size()
    camera = sim.camera
    zoom = camera.zoom_factor

    central = sim.central
    if central is not None:
        pos = camera.world_to_screen(central.position.as_array(), size)
        radius = central.radius * zoom
        if radius > 1:
            draw_disc(screen, pos, radius, central.color, C.EARTH_BORDER, 3)

    for body in sim.falling:
        pos = camera.world_to_screen(body.position.as_array(), size)
        radius = body.radius * zoom
        if radius > C.MAX_DRAW_RADIUS or not np.all(np.isfinite(pos)):
            continue
        if -radius <= pos[0] <= size[0] + radius and -radius <= pos[1] <= size[1] + radius:
            draw_disc(screen, pos, radius, body.color, C.BALL_BORDER, 1)

    if font is not None:
        y = 10
        for line in hud_lines(sim, size):
            label = font.render(line, True, C.TEXT_COLOR)
            screen.blit(label, (10, y))
            y += 20
