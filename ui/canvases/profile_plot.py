"""
Static profile plot canvas (Elect / Fuel trend cards).
"""
import matplotlib
from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from matplotlib.patches import PathPatch
from matplotlib.path import Path

from ui.styles import MATPLOTLIB_DARK_THEME

# Plot box is 300 x 120 with y growing downwards, like the card artwork
VIEW_WIDTH = 300
VIEW_HEIGHT = 120
GRID_LINES = (20, 60, 100)

# Smooth electrical load trend (cubic segments)
ELECT_PROFILE = Path(
    [(0, 90),
     (40, 80), (60, 70), (90, 75),
     (120, 80), (150, 55), (180, 60),
     (210, 65), (240, 40), (300, 50)],
    [Path.MOVETO] + [Path.CURVE4] * 9,
)

# Fuel remaining trend (straight segments)
FUEL_PROFILE = Path(
    [(0, 30), (60, 35), (120, 40), (180, 55), (240, 80), (300, 95)],
    [Path.MOVETO] + [Path.LINETO] * 5,
)


class ProfilePlotCanvas(FigureCanvas):
    """
    Matplotlib canvas drawing one fixed trend curve over three grid lines.
    """

    def __init__(self, path: Path, color: str, parent=None, width=4, height=1.6, dpi=100):
        """
        Initialize profile canvas.

        Args:
            path: Curve in plot-box coordinates (0..300 x 0..120, y down)
            color: Line color
            parent: Parent QWidget
            width: Figure width in inches
            height: Figure height in inches
            dpi: Dots per inch resolution
        """
        with matplotlib.rc_context(MATPLOTLIB_DARK_THEME):
            self.fig = Figure(figsize=(width, height), dpi=dpi)
            self.ax = self.fig.add_axes([0, 0, 1, 1])
        super().__init__(self.fig)
        self.setParent(parent)

        self.ax.set_xlim(0, VIEW_WIDTH)
        self.ax.set_ylim(VIEW_HEIGHT, 0)  # y down
        self.ax.set_axis_off()

        grid_color = MATPLOTLIB_DARK_THEME["grid.color"]
        for y in GRID_LINES:
            self.ax.axhline(y, color=grid_color, linewidth=1)

        self.curve = PathPatch(path, facecolor="none", edgecolor=color, linewidth=2)
        self.ax.add_patch(self.curve)

        self.draw_idle()
