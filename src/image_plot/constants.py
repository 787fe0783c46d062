"""
Constants used internally by image-plot.

These are implementation-level values that should not be overridden
via config files or CLI arguments.
"""

# Internal color constants
COLOR_MODE_RGB = "RGB"
COLOR_BLACK = (0, 0, 0)
COLOR_WHITE = (255, 255, 255)

# Debug overlay palette
COLOR_DEBUG_CELL = (173, 216, 230)        # light blue
COLOR_DEBUG_ROW_LABEL = (255, 182, 182)   # light red
COLOR_DEBUG_COLUMN_LABEL = (182, 235, 182)  # light green
COLOR_DEBUG_PADDING = (220, 220, 220)     # light gray
COLOR_DEBUG_BORDER = (64, 64, 64)         # dark gray
DEBUG_BORDER_PX = 1

# Fonts
FONT_FILE = "DejaVuSans.ttf"

# Line-break markers accepted inside label text. The escaped form is what
# a shell passes through for "Title\nSubtitle".
LINE_BREAK_MARKERS = ("\r\n", "\n", "\\n")

# Suffix inserted before the extension of the debug overlay output
DEBUG_SUFFIX = "_debug"
