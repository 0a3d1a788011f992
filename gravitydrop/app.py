import argparse
import logging

import pygame

from gravitydrop import constants as C
from gravitydrop.presets import PRESETS, DEFAULT_PRESET
from gravitydrop.rendering import draw_scene
from gravitydrop.simulation import Simulation

logger = logging.getLogger(__name__)


def handle_events(sim, drag) -> bool:
    """Process pygame events. Returns False when the window should close."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            elif event.key == pygame.K_SPACE:
                sim.paused = not sim.paused
            elif event.key == pygame.K_r:
                sim.reset()
        elif event.type == pygame.MOUSEWHEEL:
            if event.y > 0:
                sim.adjust_zoom("in")
            elif event.y < 0:
                sim.adjust_zoom("out")
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            drag["active"] = True
            drag["last"] = event.pos
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            drag["active"] = False
        elif event.type == pygame.MOUSEMOTION and drag["active"]:
            last_x, last_y = drag["last"]
            sim.pan(event.pos[0] - last_x, event.pos[1] - last_y)
            drag["last"] = event.pos
        elif event.type == pygame.VIDEORESIZE:
            pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
    return True


def run(sim, screen, fps=C.FPS, max_frames=None) -> int:
    """Main application loop. Returns the number of frames drawn."""
    if not pygame.get_init() or screen is None:
        raise RuntimeError("Simulation cannot run without pygame initialized")
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 20)
    drag = {"active": False, "last": (0, 0)}
    frames = 0
    running = True
    while running:
        dt = clock.tick(fps) / 1000.0
        running = handle_events(sim, drag)
        if not running:
            break
        sim.tick(dt)
        draw_scene(pygame.display.get_surface(), sim, font)
        pygame.display.flip()
        frames += 1
        if max_frames is not None and frames >= max_frames:
            break
    return frames


def main(argv=None):
    parser = argparse.ArgumentParser(description="Basketballs falling onto Earth")
    parser.add_argument("--preset", default=DEFAULT_PRESET, choices=sorted(PRESETS), help="Starting scenario")
    parser.add_argument("--time-scale", type=float, default=C.TIME_SCALE, help="Simulated seconds per real second")
    parser.add_argument(
        "--max-frame-time",
        type=float,
        default=C.MAX_FRAME_TIME,
        help="Longest frame, in simulated seconds, integrated after a stall",
    )
    parser.add_argument("--fps", type=int, default=C.FPS, help="Target frame rate")
    parser.add_argument("--width", type=int, default=C.WIDTH)
    parser.add_argument("--height", type=int, default=C.HEIGHT)
    parser.add_argument("--max-frames", type=int, help="Quit after this many frames")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    sim = Simulation.from_preset(
        args.preset,
        time_scale=args.time_scale,
        max_frame_time=args.max_frame_time,
    )

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption("Gravity Drop")
    logger.info("Starting %r at %d fps", args.preset, args.fps)
    try:
        frames = run(sim, screen, fps=args.fps, max_frames=args.max_frames)
    finally:
        pygame.quit()
    logger.info("Stopped after %d frames", frames)
    return frames


if __name__ == "__main__":
    main()
