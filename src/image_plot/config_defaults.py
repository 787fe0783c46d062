"""Shared default values for user-facing configuration settings."""

# Layout
DEFAULT_ROWS = 1
DEFAULT_TOP_PADDING = 40
DEFAULT_LEFT_PADDING = 0
DEFAULT_GUTTER = 0

# Labels
DEFAULT_ALIGNMENT = "center"
DEFAULT_FONT_SIZE = 24
DEFAULT_LINE_SPACING = 4

# Output
DEFAULT_OUTPUT = "output.jpg"
DEFAULT_DEBUG = False
DEFAULT_PROGRESS = False
