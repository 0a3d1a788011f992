import logging
import math
import time

from . import constants as C
from .body import CelestialBody
from .camera import Camera
from .physics import PhysicsEngine, surface_altitude
from .presets import PRESETS, DEFAULT_PRESET

logger = logging.getLogger(__name__)


class Simulation:
    """Central body plus falling bodies, stepped one frame at a time."""

    def __init__(
        self,
        central=None,
        falling=None,
        *,
        camera=None,
        engine=None,
        g_constant=C.G_REAL,
        restitution=C.RESTITUTION,
        time_scale=C.TIME_SCALE,
        max_frame_time=C.MAX_FRAME_TIME,
        max_substep=C.MAX_SUBSTEP,
        focus_index=None,
        clock=time.perf_counter,
    ):
        if max_substep <= 0:
            raise ValueError("max_substep must be positive")
        self.central = central
        self.falling = list(falling or [])
        self.camera = camera if camera is not None else Camera()
        self.engine = engine if engine is not None else PhysicsEngine(g_constant)
        self.restitution = float(restitution)
        self.time_scale = float(time_scale)
        self.max_frame_time = max_frame_time
        self.max_substep = float(max_substep)
        self.focus_index = focus_index
        self.clock = clock
        self.last_update = clock()
        self.simulation_time = 0.0
        self.paused = False
        self.current_preset = None

    # ------------------------------------------------------------------
    @classmethod
    def from_preset(cls, preset_name: str = DEFAULT_PRESET, **kwargs) -> "Simulation":
        sim = cls(**kwargs)
        sim.load_preset(preset_name)
        return sim

    def load_preset(self, preset_name: str) -> None:
        """Replace all bodies with those of a named preset and reset the camera."""
        if preset_name not in PRESETS:
            raise KeyError(f"Preset '{preset_name}' not found")
        CelestialBody.ID_counter = 0
        central = None
        falling = []
        for cfg in PRESETS[preset_name]:
            body = CelestialBody.from_config(cfg)
            if cfg.get("central", False):
                central = body
            else:
                falling.append(body)
        if central is None:
            raise ValueError(f"Preset '{preset_name}' has no central body")
        self.central = central
        self.falling = falling
        self.camera = Camera()
        self.simulation_time = 0.0
        self.last_update = self.clock()
        self.current_preset = preset_name
        logger.info("Loaded preset %r with %d falling bodies", preset_name, len(falling))

    def reset(self) -> None:
        if self.current_preset is not None:
            self.load_preset(self.current_preset)

    # ------------------------------------------------------------------
    @property
    def zoom_factor(self) -> float:
        return self.camera.zoom_factor

    @property
    def center_x(self) -> float:
        return self.camera.center_x

    @property
    def center_y(self) -> float:
        return self.camera.center_y

    @property
    def focus_body(self):
        if not self.falling:
            return None
        idx = self.focus_index if self.focus_index is not None else len(self.falling) // 2
        return self.falling[min(idx, len(self.falling) - 1)]

    def adjust_zoom(self, direction) -> None:
        self.camera.adjust_zoom(direction)

    def pan(self, delta_screen_x, delta_screen_y) -> None:
        self.camera.pan(delta_screen_x, delta_screen_y)

    # ------------------------------------------------------------------
    def handle_collision(self, body) -> bool:
        """Push ``body`` back onto the central surface and reflect inward motion.

        Returns True when the body was touching or inside the surface.
        """
        central = self.central
        offset = body.position.subtract(central.position)
        distance = offset.magnitude()
        min_distance = central.radius + body.radius
        if distance > min_distance:
            return False

        direction = offset.normalize()
        reach = min_distance
        body.position = central.position.add(direction.scale(reach))
        # Rounding can leave the body a hair inside the surface. Nudges start at
        # the spacing of the coordinates involved and double until one lands.
        if direction.magnitude() > 0:
            nudge = math.ulp(max(abs(central.position.x), abs(central.position.y), reach))
            for _ in range(C.MAX_SURFACE_NUDGES):
                if body.position.distance_to(central.position) >= min_distance:
                    break
                reach += nudge
                nudge *= 2
                body.position = central.position.add(direction.scale(reach))

        velocity_dot_normal = body.velocity.dot(direction)
        if velocity_dot_normal < 0:
            body.velocity = body.velocity.subtract(
                direction.scale((1.0 + self.restitution) * velocity_dot_normal)
            )
            logger.debug(
                "%s bounced at %.3f m/s inward, leaving at %.3f m/s",
                body.name,
                -velocity_dot_normal,
                body.velocity.dot(direction),
            )
        return True

    def step(self, dt: float) -> None:
        """Advance every falling body by exactly ``dt`` seconds."""
        if self.central is None:
            return
        for body in self.falling:
            body.apply_force(self.engine.force(body, self.central))
            body.update(dt)
            self.handle_collision(body)
        self.simulation_time += dt

    def tick(self, dt=None) -> None:
        """Advance one frame.

        ``dt`` is the elapsed wall-clock time in seconds. When omitted it is
        sampled from ``clock``. The scaled frame time is clamped to
        ``max_frame_time`` and split into sub-steps no longer than
        ``max_substep``.
        """
        now = self.clock()
        if dt is None:
            dt = now - self.last_update
        self.last_update = now
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")

        if not self.paused:
            frame = dt * self.time_scale
            if self.max_frame_time is not None and frame > self.max_frame_time:
                logger.warning(
                    "Frame time %.3fs exceeds %.3fs; clamping", frame, self.max_frame_time
                )
                frame = self.max_frame_time
            if frame > 0:
                substeps = max(1, math.ceil(frame / self.max_substep - 1e-9))
                sub_dt = frame / substeps
                for _ in range(substeps):
                    self.step(sub_dt)

        if self.falling:
            self.camera.ensure_initialized(self.falling[0], self.focus_body)

    # ------------------------------------------------------------------
    def status(self) -> dict:
        """Values shown in the status display, measured on the first falling body."""
        info = {
            "count": len(self.falling),
            "zoom": self.zoom_factor,
            "altitude": None,
            "speed": None,
            "gravity": None,
        }
        if self.falling and self.central is not None:
            first = self.falling[0]
            info["altitude"] = surface_altitude(first, self.central)
            info["speed"] = first.speed()
            info["gravity"] = self.engine.force(first, self.central).magnitude()
        return info
