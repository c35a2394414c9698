"""An endless side-scrolling runner game built on a small 2D engine."""

__version__ = "0.1.0"