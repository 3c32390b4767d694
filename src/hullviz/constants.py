# Logical drawing space; every algorithm works in these units.
LOGICAL_WIDTH = 600
LOGICAL_HEIGHT = 400

WINDOW_WIDTH = 960
WINDOW_HEIGHT = 640
WINDOW_TITLE = "Convex Hull Visualizer"

# Seconds between scheduler ticks (~60 frames per second).
FRAME_PERIOD = 0.017

# Frames a candidate stays highlighted before the next stage may begin.
HIGHLIGHT_FRAMES = 10

POINT_RADIUS = 5
MIN_POINTS = 3

# Bottom strip of the window reserved for the status line.
STATUS_BAR_HEIGHT = 28
STATUS_HISTORY_LIMIT = 20

DEFAULT_POINTS_TEXT = (
    "(100, 80), (220, 40), (380, 60), (520, 140), (480, 300), "
    "(300, 360), (140, 310), (60, 200), (260, 180), (360, 220), (200, 240)"
)
