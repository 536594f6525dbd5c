"""
GUI module - Graphical user interface components.
"""

from .main_window import MainWindow, ConversionWorker, run_app

__all__ = [
    "MainWindow",
    "ConversionWorker",
    "run_app",
]
