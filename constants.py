# constants.py

import math

# =============================================================================
# --- TREE & GEOMETRY SETTINGS ---
# =============================================================================
# Corners of the root triangle, in basis order (r1, r2, r3).
# An equilateral triangle with unit side, apex on the y axis.
ROOT_TRIANGLE_CORNERS = ((0.0, math.sqrt(3) / 2), (-0.5, 0.0), (0.5, 0.0))

# Each insertion deepens the tree by at most two levels, so this cap is only
# reached by pathological input. Below ~2^-50 the child triangles are smaller
# than the float spacing of the root coordinates anyway.
MAX_TREE_DEPTH = 50

# A basis whose cartesian-to-barycentric determinant is this small is treated
# as collinear and rejected at construction.
DEGENERATE_DETERMINANT_EPSILON = 1e-12

# Weights used to place the three edge midpoints, in (l1, l2, l3) form.
MIDPOINT_R1_R3 = (0.5, 0.0, 0.5)
MIDPOINT_R2_R3 = (0.0, 0.5, 0.5)
MIDPOINT_R1_R2 = (0.5, 0.5, 0.0)

# =============================================================================
# --- SAMPLING ---
# =============================================================================
SAMPLE_POINT_COUNT = 2 ** 9
SAMPLE_SQUARE_HALF_WIDTH = 1.0 # Samples are drawn from [-1, 1) x [-1, 1)
SAMPLE_RANDOM_SEED = 12345
VIEWER_BATCH_POINT_COUNT = 64 # Points added per [R] press in the viewer

# =============================================================================
# --- LOGGING ---
# =============================================================================
LOG_INSERT_EVENTS = False # Log every accepted insertion (very noisy)
STATS_LOG_INTERVAL_POINTS = 256 # Print tree statistics after this many inserts

# =============================================================================
# --- UI, CAMERA & COLORS ---
# =============================================================================
CLOCK_TICK_RATE = 60
MILLISECONDS_PER_SECOND = 1000.0
PROFILER_PRINT_LINE_COUNT = 20
UI_LOADING_BAR_UPDATE_INTERVAL = 16

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 800
CAMERA_PIXELS_PER_UNIT = 600.0 # Initial zoom: the unit triangle fills most of the screen
CAMERA_CENTER = (0.0, math.sqrt(3) / 4)
CAMERA_PANSPEED_PIXELS = 15
CAMERA_ZOOM_SPEED = 0.1
CAMERA_MAX_PIXELS_PER_UNIT = 1.0e7
CAMERA_MIN_PIXELS_PER_UNIT = 50.0
CAMERA_PAN_LIMIT_UNITS = 2.0 # Camera center may not leave this box around the origin

COLOR_WHITE = (255, 255, 255); COLOR_BLACK = (0, 0, 0); COLOR_VOID = (10, 0, 20)
COLOR_LOADING_BAR_BG = (50, 50, 50); COLOR_LOADING_BAR_FG = (100, 200, 100)
COLOR_LOADING_BAR_REJECTED = (200, 80, 80)
COLOR_ROOT_EDGE = (255, 255, 255)
COLOR_NODE_EDGE = (90, 110, 160)
COLOR_POINT = (74, 255, 0)
COLOR_POINT_OUTSIDE = (120, 120, 120)
COLOR_QUERY_EDGE = (255, 105, 180)
COLOR_QUERY_CORNER = (255, 105, 180)
COLOR_QUERY_HIT = (220, 20, 60)

POINT_RADIUS_PIXELS = 3
QUERY_HIT_RADIUS_PIXELS = 5
QUERY_CORNER_RADIUS_PIXELS = 4

UI_FONT_SIZE = 28
UI_HUD_POS_X = 10
UI_HUD_POS_Y = 10
UI_HUD_LINE_SPACING = 24
UI_LOADING_TEXT_OFFSET_Y = 50
UI_LOADING_BAR_WIDTH = 400
UI_LOADING_BAR_HEIGHT = 30

# =============================================================================
# --- PLOTTING ---
# =============================================================================
PLOT_FIGURE_SIZE = (8, 8)
PLOT_GROWTH_FIGURE_SIZE = (12, 7)
PLOT_DPI = 300
PLOT_NODE_LINE_WIDTH = 0.4
PLOT_POINT_SIZE = 4
TREE_PLOT_FILE_PATH = 'barytree.png'
GROWTH_PLOT_FILE_PATH = 'barytree_growth.png'
