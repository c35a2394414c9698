"""Dimensions and timing shared by the game's entities."""

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 150
INTRO_DURATION = 1500
FPS = 60.0