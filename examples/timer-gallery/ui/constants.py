"""Layout constants and color definitions."""

# Timing
FPS = 60
TPS = 20

# Layout dimensions
SCREEN_W = 640
PANEL_H = 120
PANEL_PAD = 16
STATUS_H = 36
PANEL_COUNT = 3

SCREEN_H = PANEL_H * PANEL_COUNT + STATUS_H

BAR_H = 24
BAR_W = SCREEN_W - 2 * PANEL_PAD

# Colors
BG_COLOR = (20, 20, 30)
PANEL_BG = (30, 30, 45)
PANEL_BORDER = (50, 50, 70)
BAR_BG = (25, 25, 40)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)

# Timer state colors
GREY = (180, 180, 180)
GREEN = (84, 169, 4)
BLUE = (0, 204, 231)
GOLD = (253, 127, 8)
PURPLE = (107, 8, 255)
RED = (255, 0, 0)

STATE_COLORS: dict[str, tuple[int, int, int]] = {
    "idle": GREY,
    "running": GREEN,
    "paused": GOLD,
    "finished": BLUE,
    "aborted": RED,
}
