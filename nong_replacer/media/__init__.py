"""
Media Processing Layer.

This package is responsible for fetching remote songs and placing audio
files in the songs directory, converting them with ffmpeg when needed.
"""

from .downloader import Downloader
from .transcoder import Transcoder

__all__ = ["Downloader", "Transcoder"]
