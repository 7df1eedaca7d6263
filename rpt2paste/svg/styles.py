"""SVG styling constants for dispensing previews."""

# Background color for the board
BACKGROUND_COLOR = "#1a1a1a"

# Paste deposit fill
PASTE_COLOR = "#C8C8C8"

# Travel path between deposits
TRAVEL_COLOR = "#32C8C8"

# First deposit, so the route direction is visible
START_COLOR = "#00FF00"

# Plan outline
BOUNDS_COLOR = "#C8C832"

# Default opacities
PAD_OPACITY = 0.9
TRAVEL_OPACITY = 0.6

# Stroke widths (mm)
TRAVEL_STROKE_WIDTH = 0.1
BOUNDS_STROKE_WIDTH = 0.15
