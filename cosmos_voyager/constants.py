"""Application-wide constants for Cosmos Voyager."""

# --- Display ---
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60
TITLE = "Cosmos Voyager"

# --- Colors (RGB) ---
WHITE = (255, 255, 255)
DARK_GREY = (30, 30, 40)
LIGHT_GREY = (180, 180, 190)
SPACE_BLUE = (4, 11, 26)
MAP_BACKGROUND = (8, 10, 24)

# HUD / UI accent colors
TEAL = (45, 212, 191)
AMBER = (255, 191, 0)
RED_ALERT = (200, 40, 40)

# --- UI Panel ---
PANEL_BG = (20, 20, 30, 200)
PANEL_BORDER = (60, 60, 80)

# --- Planet view ---
PLANET_RADIUS_FACTOR = 0.35
ROTATION_STEP = 0.001  # radians per frame
PLANET_VIEW_STARS = 30

# --- Maps ---
MAP_STARS = 100
MAP_NEBULAE = 3
PLANET_MAP_MARGIN = 80
SYSTEM_MAP_MARGIN = 60
GALAXY_MAP_MARGIN = 60
PLANET_HIT_RADIUS = 20
SYSTEM_HIT_RADIUS = 25
GALAXY_HIT_RADIUS = 30
NEIGHBOUR_LINKS = 2
LABEL_FONT_SIZE = 12
