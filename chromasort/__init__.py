"""
ChromaSort

Color model (RGB -> HSL, perceived brightness) and a menu of comparators
for ordering a palette of colors for display.
"""

__version__ = "1.0.0"
