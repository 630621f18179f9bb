"""
PocketCalc Configuration Settings
"""
import os

# Application Settings
APP_NAME = "PocketCalc"
VERSION = "1.0.0"

# Expression Settings
MAX_EXPRESSION_LEN = 64      # characters allowed in the expression buffer
MAX_FRACTION_DIGITS = 10     # decimals shown when the result is not an integer
DIVISION_EPSILON = 1e-15     # |divisor| below this is a division by zero
INTEGER_SNAP_TOLERANCE = 1e-10
ERROR_TEXT = "Error"

# Display Settings
WINDOW_WIDTH = 360
WINDOW_HEIGHT = 520
DISPLAY_FONT = ("Consolas", 24, "bold")   # LCD/segmented-style font
RESULT_FONT = ("Consolas", 32, "bold")
BUTTON_FONT = ("Segoe UI", 16)
LABEL_FONT = ("Segoe UI", 11)

# ── Neumorphic Palettes ────────────────────────────────────────────────────────

# LIGHT palette  – soft sage-green background
NEU_LIGHT = {
    "bg":           "#DDE6ED",   # base surface
    "bg_dark":      "#C8D4DF",   # slightly darker variant (inset feel)
    "shadow_dark":  "#B2BFC8",
    "shadow_lite":  "#FFFFFF",
    "display_bg":   "#C8D4DF",
    "display_fg":   "#1A2332",   # LCD dark on light
    "btn_bg":       "#DDE6ED",
    "btn_fg":       "#2B3A4A",
    "operator_fg":  "#1E7A56",
    "equals_bg":    "#2E8B57",
    "equals_fg":    "#FFFFFF",
    "mode_fg":      "#2C5F8A",
    "mode_bg":      "#C8D4DF",
    "accent":       "#2E8B57",
    "subtext":      "#6E8090",
    "danger":       "#B03A2E",
}

# DARK palette  – deep slate with green accents
NEU_DARK = {
    "bg":           "#1E2530",
    "bg_dark":      "#161C26",
    "shadow_dark":  "#10161E",
    "shadow_lite":  "#283040",
    "display_bg":   "#161C26",
    "display_fg":   "#9ADDB0",   # LCD green-on-dark
    "btn_bg":       "#1E2530",
    "btn_fg":       "#BDD0E0",
    "operator_fg":  "#4DB888",
    "equals_bg":    "#2D8A58",
    "equals_fg":    "#FFFFFF",
    "mode_fg":      "#5E8FC8",
    "mode_bg":      "#283040",
    "accent":       "#4DB888",
    "subtext":      "#4E6070",
    "danger":       "#E55A4E",
}


def get_theme(dark: bool) -> dict:
    """Return the active neumorphic colour palette."""
    return NEU_DARK if dark else NEU_LIGHT


# UI preferences (dark mode) are persisted here
SETTINGS_PATH = os.path.join(os.path.dirname(__file__), "settings.json")

# Web API settings
WEB_HOST = '0.0.0.0'
WEB_PORT = 8888
