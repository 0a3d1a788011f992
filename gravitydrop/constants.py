"""Simulation constants and default configuration."""

# --- Physics ---
G_REAL = 6.67430e-11  # m^3 kg^-1 s^-2 (CODATA 2018)
EARTH_MASS = 5.972e24  # kg
EARTH_RADIUS_METERS = 6.371e6
BASKETBALL_MASS = 0.625  # kg
BASKETBALL_RADIUS_METERS = 0.1194
RESTITUTION = 0.8

# --- Time stepping ---
TIME_SCALE = 1.0  # simulated seconds per wall-clock second
MAX_FRAME_TIME = 0.25  # seconds; longer stalls are clamped
MAX_SUBSTEP = 1.0 / 60.0
MAX_SURFACE_NUDGES = 64
FPS = 60

# --- Camera ---
ZOOM_DEFAULT = 1e-6  # pixels per metre before the first tick
ZOOM_MIN = 1e-10
ZOOM_MAX = 1e10
ZOOM_STEP = 1.1
TARGET_BALL_PIXELS = 10.0

# --- Window ---
WIDTH, HEIGHT = 1280, 800
MAX_DRAW_RADIUS = 20000  # px; larger discs are drawn as a half-plane
GFXDRAW_LIMIT = 32000  # gfxdraw takes 16-bit coordinates

# --- Colours ---
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
TEXT_COLOR = (20, 20, 20)
BACKGROUND = (245, 245, 245)
EARTH_COLOR = (74, 144, 226)
EARTH_BORDER = (44, 90, 160)
BALL_BORDER = (51, 51, 51)
BALL_COLORS = [
    (255, 107, 53),
    (231, 76, 60),
    (155, 89, 182),
    (52, 152, 219),
    (46, 204, 113),
    (243, 156, 18),
    (52, 73, 94),
    (230, 126, 34),
    (26, 188, 156),
    (149, 165, 166),
    (211, 84, 0),
]
