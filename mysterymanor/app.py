"""The game's entry point: music, then each scene in turn."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pygame

from .intro import Intro
from .level1 import Level1
from .loader import GameLoader
from .player import Player
from .screen import AssetError, Outcome, create_stage

MUSIC_FILE = "Ghost-Story(chosic.com).wav"


def _start_music(root: Path) -> bool:
    path = root / MUSIC_FILE
    if not path.is_file():
        return False
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        pygame.mixer.music.load(str(path))
        pygame.mixer.music.play(loops=-1)
    except pygame.error:
        return False
    return True


def main(argv=None) -> int:
    """Run the game; returns the exit status."""
    parser = argparse.ArgumentParser(
        prog="mysterymanor", description="A murder-mystery puzzle game."
    )
    parser.add_argument(
        "--assets",
        type=Path,
        default=Path("."),
        help="directory holding the pictures, fonts, text files and music",
    )
    args = parser.parse_args(argv)

    stage = create_stage(args.assets)
    try:
        if not _start_music(stage.root):
            print("Error: Could not load music file!", file=sys.stderr)
            return 1
        player = Player()
        scenes = (
            ("Game", GameLoader().run),
            ("Intro", Intro().run),
            ("Level1", Level1(player=player).run),
        )
        for name, run in scenes:
            try:
                outcome = run(stage)
            except AssetError as exc:
                print(exc, file=sys.stderr)
                outcome = Outcome.FAILED
            if outcome is Outcome.FAILED:
                print(f"Error loading {name}...")
                return 1
            if outcome is Outcome.CLOSED:
                return 0
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())