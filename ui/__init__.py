"""
Qt user interface for the bridge dashboard.
"""
