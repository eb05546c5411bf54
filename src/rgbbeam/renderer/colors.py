"""Color palette."""

from rgbbeam.models import Color

# RGB tuples
BG = (18, 18, 24)
LANE_BG = (30, 30, 40)
FLOOR_LINE = (120, 120, 140)
HUD_TEXT = (220, 220, 220)
TIMER_BAR = (80, 220, 100)
TIMER_BAR_LOW = (220, 60, 60)
TIMER_BAR_TRACK = (50, 50, 60)

BLOCK_COLORS: dict[Color, tuple[int, int, int]] = {
    Color.RED: (220, 60, 60),
    Color.GREEN: (80, 220, 100),
    Color.BLUE: (66, 135, 245),
}
