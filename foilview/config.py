"""
Central constants for the airfoil viewer.

Parameter bounds, slider steps and label formats live here so the
parameter record, the sliders and the labels all agree.
"""

# NACA 4-digit camber peak location, fraction of chord.
CAMBER_POSITION: float = 0.4

# ---- Parameter bounds, steps and defaults --------------------------------
CAMBER_MIN: float = 0.0
CAMBER_MAX: float = 0.1
CAMBER_STEP: float = 0.001
CAMBER_DEFAULT: float = 0.02

THICKNESS_MIN: float = 0.0
THICKNESS_MAX: float = 0.2
THICKNESS_STEP: float = 0.001
THICKNESS_DEFAULT: float = 0.12

CHORD_MIN: float = 0.5
CHORD_MAX: float = 2.0
CHORD_STEP: float = 0.1
CHORD_DEFAULT: float = 1.0

RESOLUTION_MIN: int = 20
RESOLUTION_MAX: int = 500
RESOLUTION_STEP: int = 1
RESOLUTION_DEFAULT: int = 100

# Label formats (printf style, as used by matplotlib slider valfmt)
CAMBER_FMT: str = "%.3f"
THICKNESS_FMT: str = "%.3f"
CHORD_FMT: str = "%.1f"
RESOLUTION_FMT: str = "%d"

# ---- Renderer --------------------------------------------------------------
MARGIN: float = 50.0
GRID_DIVISIONS: int = 10

# Vertical extent reserved beyond the thickness, fraction of chord
CAMBER_HEADROOM: float = 0.2

GRID_COLOR: str = "#e0e0e0"
GRID_WIDTH: float = 1.0
AXIS_COLOR: str = "#999999"
AXIS_WIDTH: float = 2.0
PROFILE_COLOR: str = "#1f5fbf"
PROFILE_WIDTH: float = 2.0

# ---- Interactive app -------------------------------------------------------
FIGURE_SIZE: tuple[float, float] = (10, 7)
CANVAS_BACKGROUND: str = "white"
