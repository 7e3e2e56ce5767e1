"""
Matplotlib canvas widgets for the dashboard plot cards.
"""
from ui.canvases.profile_plot import ProfilePlotCanvas, ELECT_PROFILE, FUEL_PROFILE

__all__ = ['ProfilePlotCanvas', 'ELECT_PROFILE', 'FUEL_PROFILE']
