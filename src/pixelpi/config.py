"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (radius limits, alpha values)
   scattered throughout the model and the GUI.
2. Consistency: The headless estimator, the Qt surface and the input widgets
   all agree on the same limits.

Exports:
    DEFAULT_RADIUS (int): Radius shown when the application starts.
    MIN_RADIUS (int): Smallest radius accepted by the estimator.
    MAX_RADIUS (int): Largest radius accepted by the estimator.
    OPAQUE_ALPHA (int): Alpha value of a fully opaque 8-bit pixel.
    FILL_RGBA (tuple): Colour used to fill the quarter disc.
    PERIMETER_PEN_COLOR (str): Colour of the perimeter pixels in the preview.
"""

# Radius limits (pixels)
DEFAULT_RADIUS: int = 100
MIN_RADIUS: int = 1
MAX_RADIUS: int = 2000

# Pixel buffer
OPAQUE_ALPHA: int = 255
FILL_RGBA: tuple[int, int, int, int] = (0, 0, 0, OPAQUE_ALPHA)

# Preview
PERIMETER_PEN_COLOR: str = "#d62728"
