"""
Energy Mix API.

GB generation mix summaries and clean-energy EV charging windows.
"""

__version__ = "1.0.0"
