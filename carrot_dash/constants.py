"""Game constants."""

GRID_SIZE = 20
CELL_SIZE = 20
FIELD_W = FIELD_H = GRID_SIZE * CELL_SIZE

TICK_INTERVAL = 0.2
FRAME_RATE = 60

START_POSITION = (10, 10)
START_DIRECTION = "right"
START_FOOD = (15, 15)
FOOD_REWARD = 10
FIREWORK_EVERY = 3
MAX_FOOD_ATTEMPTS = 500

# Fireworks, in pixels per frame
MAX_FIREWORKS = 20
ASCENT_RATE = 3
EXPLODE_ALTITUDE_MIN = 60
EXPLODE_ALTITUDE_BAND = 60
ESCAPE_ALTITUDE = 50
PARTICLES_MIN, PARTICLES_SPREAD = 30, 20
SPEED_MIN, SPEED_SPREAD = 2, 3
LIFE_MIN, LIFE_SPREAD = 60, 30
GRAVITY = 0.1
FRICTION = 0.98

DIRECTIONS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}
OPPOSITES = {"up": "down", "down": "up", "left": "right", "right": "left"}

KEY_BINDINGS = {
    "ArrowUp": "up", "ArrowDown": "down", "ArrowLeft": "left", "ArrowRight": "right",
    "w": "up", "s": "down", "a": "left", "d": "right",
}

FIREWORK_COLORS = [
    "#ff6b6b", "#ffd93d", "#6bcb77", "#4d96ff", "#ff6b9d",
    "#c44569", "#f8b739", "#32e0c4", "#7bed9f", "#70a1ff",
    "#e056fd", "#ff7f50", "#2ed573", "#ffa502", "#3742fa",
]
