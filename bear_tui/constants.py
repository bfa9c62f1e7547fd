"""
Color the Bear - Shared Constants

Central location for constants used across the app.
"""

# =============================================================================
# TERMINAL LAYOUT CONSTANTS
# =============================================================================
# Layout breakdown (from bear_tui.py CSS):
#   - Title row: height 1 + margin-bottom 1 = 2 rows
#   - Viewport: width 60 + border(2) + padding(2) = 64 cols
#               height 26 + border(2) + padding(2) = 30 rows
#   - Color panel: height 5 (docked bottom)
#
# Total: 64 cols x 37 rows (see README for the minimum terminal size)

VIEWPORT_CONTENT_COLS = 60    # Inner content area width
VIEWPORT_CONTENT_ROWS = 26    # Inner content area height


# =============================================================================
# BEAR CANVAS
# =============================================================================

# One grid pixel is drawn as PIXEL_WIDTH x PIXEL_HEIGHT terminal cells.
# Terminal cells are about twice as tall as wide, so 2x1 looks square.
PIXEL_WIDTH = 2
PIXEL_HEIGHT = 1

# Columns between the two ears and between the two legs
PAIR_GAP = 2

# Blank lines between bands (ears, head, body, legs)
BAND_GAP = 0

# Cursor glyph drawn over the pixel under the keyboard cursor
CURSOR_GLYPH = "[]"

# =============================================================================
# TIMING
# =============================================================================

CURSOR_BLINK_INTERVAL = 0.5  # Seconds between cursor blink toggles

# =============================================================================
# ENVIRONMENT
# =============================================================================

ENV_LOG_FILE = "BEAR_LOG_FILE"    # Write debug log here (off when unset)
ENV_LOG_LEVEL = "BEAR_LOG_LEVEL"  # DEBUG, INFO, WARNING...
ENV_THEME = "BEAR_THEME"          # "dark" or "light"

DEFAULT_LOG_LEVEL = "INFO"

# Nerd Font icons (https://www.nerdfonts.com/cheat-sheet)
ICON_BRUSH = "󰃣"            # nf-md-brush
ICON_MOON = "󰖙"             # nf-md-weather_night
ICON_SUN = "󰖨"              # nf-md-weather_sunny

APP_TITLE = "Color the Bear!"
