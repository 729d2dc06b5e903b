"""
PocketCalc Configuration Settings
"""

# Application Settings
APP_NAME = "PocketCalc"
VERSION = "1.0.0"

# Engine Settings
MAX_DECIMAL_PLACES = 8      # display rounding and fixed-point scale (10 ** 8)
MAX_OPERAND_LENGTH = 15     # typed characters, sign and point included
ERROR_TEXT = "Error"

# Display Settings
WINDOW_WIDTH = 320
WINDOW_HEIGHT = 460
DISPLAY_FONT = ("Consolas", 28, "bold")   # LCD/segmented-style font
BUTTON_FONT = ("Segoe UI", 14)
DARK_MODE = False

# ── Neumorphic Palettes ────────────────────────────────────────────────────────

# LIGHT palette  – soft sage-green background
NEU_LIGHT = {
    "bg":           "#DDE6ED",   # base surface
    "bg_dark":      "#C8D4DF",   # slightly darker variant (inset feel)
    "shadow_dark":  "#B2BFC8",
    "shadow_lite":  "#FFFFFF",
    "display_bg":   "#C8D4DF",
    "display_fg":   "#1A2332",   # high-contrast dark text (LCD dark on light)
    "btn_bg":       "#DDE6ED",
    "btn_fg":       "#2B3A4A",
    "operator_fg":  "#1E7A56",   # teal-green accent
    "equals_bg":    "#2E8B57",
    "equals_fg":    "#FFFFFF",
    "success":      "#2E8B57",
    "danger":       "#B03A2E",
}

# DARK palette  – deep slate with green accents
NEU_DARK = {
    "bg":           "#1E2530",
    "bg_dark":      "#161C26",
    "shadow_dark":  "#10161E",
    "shadow_lite":  "#283040",
    "display_bg":   "#161C26",
    "display_fg":   "#9ADDB0",   # soft green glow – LCD green-on-dark
    "btn_bg":       "#1E2530",
    "btn_fg":       "#BDD0E0",
    "operator_fg":  "#4DB888",
    "equals_bg":    "#2D8A58",
    "equals_fg":    "#FFFFFF",
    "success":      "#4DB888",
    "danger":       "#E55A4E",
}


def get_theme(dark: bool) -> dict:
    """Return the active neumorphic colour palette."""
    return NEU_DARK if dark else NEU_LIGHT


# Web API settings
WEB_HOST = '127.0.0.1'
WEB_PORT = 8888
START_WEB_API = False      # pocketcalc --api turns it on
MAX_SESSIONS = 256          # least recently used session is dropped past this
