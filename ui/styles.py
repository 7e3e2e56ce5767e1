"""
Styling constants and theme configuration for the bridge dashboard UI.
"""
from telegraph.layout import ClampLength

# =============================================================================
# Color Palette
# =============================================================================

# Dark theme colors
BG_COLOR = "#111111"          # Main background
BG_COLOR_LIGHT = "#181818"    # Lighter background (cards, axes)
TEXT_COLOR = "#EEEEEE"        # Main text
TEXT_COLOR_DIM = "#CCCCCC"    # Dimmed text (axis labels, stat titles)
TEXT_COLOR_DARK = "#888888"   # Dark text (footer, subtitles)
BORDER_COLOR = "#555555"      # Borders
GRID_COLOR = "#333333"        # Grid lines

# Accent colors
ACCENT_BLUE = "#6FA8FF"       # Primary accent (Elect plot, rail fill)
ACCENT_PINK = "#F471B5"       # Secondary accent (Fuel plot, armament load)
ACCENT_RED = "#FF6B6B"        # Stop detent
ACCENT_GREEN = "#6BCB77"      # Active detent

# Telegraph colors
TELE_BUTTON = "#2A2A2A"
TELE_BUTTON_HOVER = "#353535"
TELE_ACTIVE = ACCENT_GREEN
RAIL_TRACK = "#262626"
RAIL_FILL = ACCENT_BLUE
RAIL_TICK = TEXT_COLOR_DARK
RAIL_TICK_STRONG = TEXT_COLOR

# =============================================================================
# Telegraph height tokens
# =============================================================================

# clamp(min px, vh %, max px) per detent size. Flank (xl) is smaller than
# Ahead Full (xxl).
TELEGRAPH_HEIGHT_TOKENS = {
    "--h-tele-xxl": ClampLength(min_px=52, vh=7.5, max_px=88),
    "--h-tele-xl": ClampLength(min_px=40, vh=5.5, max_px=64),
    "--h-tele-lg": ClampLength(min_px=40, vh=6.0, max_px=70),
    "--h-tele-md": ClampLength(min_px=44, vh=6.5, max_px=76),
    "--h-tele-sm": ClampLength(min_px=44, vh=6.5, max_px=76),
    "--h-tele-stop": ClampLength(min_px=36, vh=5.0, max_px=60),
}

TELEGRAPH_WIDTH = 192         # px, telegraph bezel
RAIL_WIDTH = 56               # px, one rail incl. scale labels

# =============================================================================
# Matplotlib Theme
# =============================================================================

MATPLOTLIB_DARK_THEME = {
    "figure.facecolor": BG_COLOR_LIGHT,
    "axes.facecolor": BG_COLOR_LIGHT,
    "axes.edgecolor": BG_COLOR_LIGHT,
    "axes.labelcolor": TEXT_COLOR_DIM,
    "axes.titlecolor": "#FFFFFF",
    "xtick.color": TEXT_COLOR_DIM,
    "ytick.color": TEXT_COLOR_DIM,
    "grid.color": GRID_COLOR,
    "grid.alpha": 0.6,
    "text.color": TEXT_COLOR,
}

# =============================================================================
# PyQt5 Stylesheet
# =============================================================================

DARK_STYLESHEET = f"""
    QMainWindow {{
        background-color: {BG_COLOR};
        color: {TEXT_COLOR};
    }}
    QGroupBox {{
        background-color: {BG_COLOR_LIGHT};
        border: 1px solid {BORDER_COLOR};
        border-radius: 4px;
        margin-top: 8px;
        padding-top: 10px;
        font-weight: bold;
        color: {TEXT_COLOR};
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 8px;
        padding: 0 4px 0 4px;
    }}
    QLabel {{
        color: {TEXT_COLOR};
        font-size: 10pt;
    }}
    QLabel[role="stat-title"] {{
        color: {TEXT_COLOR_DIM};
        font-size: 9pt;
        font-weight: normal;
    }}
    QLabel[role="stat-value"] {{
        font-size: 18pt;
        font-weight: bold;
    }}
    QLabel[role="dim"] {{
        color: {TEXT_COLOR_DARK};
        font-size: 8pt;
        font-weight: normal;
    }}
    QLineEdit {{
        background-color: {BG_COLOR};
        color: {TEXT_COLOR};
        border: 1px solid {BORDER_COLOR};
        border-radius: 4px;
        padding: 2px 6px;
    }}
    QProgressBar {{
        background-color: {BG_COLOR};
        border: none;
        border-radius: 4px;
        max-height: 8px;
    }}
    QProgressBar::chunk {{
        background-color: {ACCENT_BLUE};
        border-radius: 4px;
    }}
    QProgressBar[accent="secondary"]::chunk {{
        background-color: {ACCENT_PINK};
    }}
    QPushButton {{
        background-color: {ACCENT_BLUE};
        color: #FFFFFF;
        border: none;
        border-radius: 4px;
        padding: 6px 12px;
        font-weight: bold;
    }}
    QPushButton:hover {{
        background-color: #5A98EF;
    }}
    QPushButton:pressed {{
        background-color: #4A88DF;
    }}
    QPushButton[role="detent"] {{
        background-color: {TELE_BUTTON};
        color: {TEXT_COLOR};
        border: 1px solid {BORDER_COLOR};
        border-radius: 0px;
        padding: 0px;
    }}
    QPushButton[role="detent"]:hover {{
        background-color: {TELE_BUTTON_HOVER};
    }}
    QPushButton[role="detent"][stop="true"] {{
        color: {ACCENT_RED};
    }}
    QPushButton[role="detent"][active="true"] {{
        background-color: {TELE_ACTIVE};
        color: {BG_COLOR};
    }}
"""
