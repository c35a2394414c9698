"""Command that opens the game window and runs the game."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

from trexrunner.core.game import Game
from trexrunner.core.spritesheet import SpritesheetFiles
from trexrunner.game.main_stage import MainStage
from trexrunner.game.shared import WINDOW_HEIGHT, WINDOW_WIDTH

SOUNDS = (
    ("sfx_achievement.wav", "achievement"),
    ("sfx_hit.wav", "hit"),
    ("sfx_jump.wav", "jump"),
)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the assets and play until the window is closed."""
    parser = argparse.ArgumentParser(prog="trexrunner", description="Endless runner game.")
    parser.add_argument(
        "--assets",
        default=os.curdir,
        help="directory holding the sounds and the spritesheet (default: current directory)",
    )
    args = parser.parse_args(argv)

    with Game("Trex Runner!", WINDOW_WIDTH, WINDOW_HEIGHT) as game:
        for filename, sound_id in SOUNDS:
            game.load_audio(os.path.join(args.assets, filename), sound_id)
        game.load_spritesheet(
            "spritesheet",
            SpritesheetFiles(
                os.path.join(args.assets, "spritesheet.png"),
                os.path.join(args.assets, "spritesheet.json"),
            ),
        )
        game.start(MainStage())
    return 0