"""
Paint Palette

The fixed set of crayon colors kids can pick from, plus small color helpers
used for drawing (contrast text on swatches and the cursor) and for
describing colors.

Number keys pick colors in palette order: 1=brown, 2=red ... 7=purple.
"""

from typing import Tuple


# Palette order matches the color panel left to right
BROWN = "#A2845E"
RED = "#FF3B30"
ORANGE = "#FF9500"
YELLOW = "#FFCC00"
GREEN = "#34C759"
BLUE = "#007AFF"
PURPLE = "#AF52DE"

PALETTE: list[tuple[str, str]] = [
    ("brown", BROWN),
    ("red", RED),
    ("orange", ORANGE),
    ("yellow", YELLOW),
    ("green", GREEN),
    ("blue", BLUE),
    ("purple", PURPLE),
]

# The bear starts out brown, and brown is the first selected color
DEFAULT_COLOR = BROWN

# Number key -> palette color
PALETTE_KEYS: dict[str, str] = {
    str(i + 1): color for i, (_, color) in enumerate(PALETTE)
}

# Text colors for labels drawn on top of a swatch
DARK_TEXT = "#1E1033"
LIGHT_TEXT = "#FFFFFF"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color string to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def luminance(hex_color: str) -> float:
    """Perceived brightness from 0 (black) to 1 (white)."""
    r, g, b = hex_to_rgb(hex_color)
    # Human eye is more sensitive to green
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255


def contrast_color(hex_color: str) -> str:
    """Get a text color that reads well on top of the given color."""
    return DARK_TEXT if luminance(hex_color) > 0.5 else LIGHT_TEXT


def color_for_key(char: str) -> str | None:
    """Palette color for a number key, or None if the key isn't mapped."""
    return PALETTE_KEYS.get(char)


def key_for_color(hex_color: str) -> str | None:
    """Number key that selects this palette color."""
    for key, color in PALETTE_KEYS.items():
        if color == hex_color.upper():
            return key
    return None


def color_name(hex_color: str) -> str:
    """
    Name of a color, for labels and logs.

    Palette colors use their crayon name. Anything else falls back to a
    rough hue name so logs stay readable.
    """
    for name, color in PALETTE:
        if color == hex_color.upper():
            return name

    r, g, b = hex_to_rgb(hex_color)
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    if max_c - min_c < 20:
        return "gray"

    d = max_c - min_c
    if max_c == r:
        h = ((g - b) / d) % 6
    elif max_c == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    h *= 60

    if h < 15 or h >= 345:
        return "red"
    elif h < 45:
        return "orange"
    elif h < 70:
        return "yellow"
    elif h < 150:
        return "green"
    elif h < 260:
        return "blue"
    elif h < 320:
        return "purple"
    return "pink"
