"""Display and UI configuration constants for the pygame viewer."""

# Pixel size of one grid cell
CELL_SIZE = 6

# Height of the status bar under the grid, in pixels
STATUS_BAR_HEIGHT = 48

# Frame delay between steps in the viewer, in milliseconds
DEFAULT_STEP_DELAY_MS = 50

UI_FONT_SIZE = 20

# Width of separator lines in console output
SEPARATOR_WIDTH = 60

# Colours
EMPTY_COLOR = (51, 204, 255)  # Open water
UNKNOWN_COLOR = (128, 128, 128)
INFECTED_COLOR = (255, 255, 255)
BACKGROUND_COLOR = (0, 0, 0)
STATUS_TEXT_COLOR = (255, 255, 255)
NIGHT_OVERLAY_ALPHA = 100

SPECIES_COLORS = {
    "clownfish": (255, 200, 0),
    "swordfish": (0, 0, 255),
    "parrotfish": (255, 255, 0),
    "white_shark": (128, 128, 128),
    "killer_whale": (0, 0, 0),
    "turtle": (0, 255, 0),
    "algae": (0, 153, 0),
}
