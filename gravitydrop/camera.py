import numpy as np
from . import constants as C


def clamp_zoom(zoom):
    return max(C.ZOOM_MIN, min(float(zoom), C.ZOOM_MAX))


class Camera:
    """Manage view transformation and focus handling.

    World coordinates map to the screen as
    ``(world - center) * zoom_factor + viewport_center``.
    """

    def __init__(self, zoom=C.ZOOM_DEFAULT, center=None):
        self.zoom_factor = clamp_zoom(zoom)
        self.center = (
            np.array(center, dtype=float) if center is not None else np.zeros(2, dtype=float)
        )
        self.zoom_initialized = False
        self.center_initialized = False

    @property
    def center_x(self) -> float:
        return float(self.center[0])

    @property
    def center_y(self) -> float:
        return float(self.center[1])

    def world_to_screen(self, pos, viewport_size):
        """Convert a world position to screen coordinates."""
        pos = np.asarray(pos, dtype=float)
        half = np.asarray(viewport_size, dtype=float) / 2
        return (pos[:2] - self.center) * self.zoom_factor + half

    def set_zoom(self, zoom):
        self.zoom_factor = clamp_zoom(zoom)
        self.zoom_initialized = True

    def adjust_zoom(self, direction):
        """Zoom one step ``"in"`` or ``"out"``, clamped to the allowed range."""
        if direction == "in":
            self.set_zoom(self.zoom_factor * C.ZOOM_STEP)
        elif direction == "out":
            self.set_zoom(self.zoom_factor / C.ZOOM_STEP)
        else:
            raise ValueError(f"Unknown zoom direction '{direction}'")

    def pan(self, delta_screen_x, delta_screen_y):
        """Drag the view; dragging right moves the visible world left."""
        self.center = self.center - np.array([delta_screen_x, delta_screen_y], dtype=float) / self.zoom_factor
        self.center_initialized = True

    def focus_on(self, pos):
        self.center = np.asarray(pos, dtype=float)[:2].copy()
        self.center_initialized = True

    def ensure_initialized(self, size_body, focus_body):
        """One-time setup: scale ``size_body`` to a fixed pixel radius, centre on ``focus_body``."""
        if not self.zoom_initialized and size_body is not None and size_body.radius > 0:
            self.set_zoom(C.TARGET_BALL_PIXELS / size_body.radius)
        if not self.center_initialized and focus_body is not None:
            self.focus_on(focus_body.position.as_array())
