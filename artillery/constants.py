from enum import Enum

# ---- Window & Playfield ----
PLAYFIELD_WIDTH = 800
PLAYFIELD_HEIGHT = 600
WINDOW_TITLE = "Artillery Duel"
FPS = 60

# ---- Tank Geometry ----
TANK_WIDTH = 40
TANK_HEIGHT = 20
TURRET_LENGTH = 30
TURRET_WIDTH = 5
TANK_GROUND_Y = PLAYFIELD_HEIGHT - TANK_HEIGHT

# ---- Tank Controls ----
ANGLE_MIN = 0
ANGLE_MAX = 180
POWER_MIN = 10
POWER_MAX = 250
AIM_STEP = 1    # degrees per keypress
POWER_STEP = 1  # power units per keypress

# ---- Spawns: (x, angle, power, color) ----
PLAYER_SPAWNS = {
    1: (50, 45, 50, "green"),
    2: (PLAYFIELD_WIDTH - 90, 135, 50, "blue"),
}

# ---- Health & Damage ----
TANK_MAX_HEALTH = 100
HIT_DAMAGE = 25

# ---- Ballistics (per tick) ----
GRAVITY = 0.098
WIND_COEFFICIENT = 0.02
POWER_TO_VELOCITY = 0.1
WIND_MAX_INTENSITY = 2.0
PROJECTILE_RADIUS = 5

# ---- Obstacle Generation ----
OBSTACLE_COUNT = 5
OBSTACLE_EDGE_MARGIN = 50    # min distance of obstacle x from either edge
OBSTACLE_BAND_HEIGHT = 150   # vertical band above the ground for obstacle y
OBSTACLE_GROUND_OFFSET = 30
OBSTACLE_MIN_WIDTH = 20
OBSTACLE_MAX_WIDTH = 80
OBSTACLE_MIN_HEIGHT = 20
OBSTACLE_MAX_HEIGHT = 70

# ---- Colors (R, G, B) ----
COLOR_BACKGROUND = (235, 240, 250)
COLOR_GROUND = (90, 70, 50)
COLOR_OBSTACLE = (139, 69, 19)
COLOR_TURRET = (0, 0, 0)
COLOR_PROJECTILE = (220, 0, 0)
COLOR_TEXT = (0, 0, 0)
TANK_COLORS = {
    "green": (0, 160, 0),
    "blue": (0, 0, 220),
}


# ---- Match Phases ----
class MatchPhase(Enum):
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


# ---- Match Commands (keyboard and API input) ----
class MatchCommand(Enum):
    AIM_UP = "aim_up"
    AIM_DOWN = "aim_down"
    POWER_DOWN = "power_down"
    POWER_UP = "power_up"
    FIRE = "fire"
    RESTART = "restart"


# ---- Per-tick projectile outcomes ----
class ShotOutcome(Enum):
    IN_FLIGHT = "in_flight"
    GROUND = "ground"
    TANK_HIT = "tank_hit"
    FATAL_HIT = "fatal_hit"
    OBSTACLE_HIT = "obstacle_hit"


# ---- API Server ----
API_HOST = "127.0.0.1"
API_PORT = 8080
