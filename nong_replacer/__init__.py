"""Replace a Geometry Dash custom song (NONG) with any local or remote audio file."""

__version__ = "0.1.0"
