"""
Starting point of the Pong game
"""

import argparse
import sys
import pygame
from pong_duel.logger.logger import logger
from pong_duel.pong import constants
from pong_duel.pong.pygame_pong_game import AssetLoadError, PygamePongGame


def parse_args(argv=None) -> argparse.Namespace:
    """
    Parse the command line arguments
    """
    parser = argparse.ArgumentParser(description="Play two-player Pong")

    parser.add_argument(
        f"--{constants.ARG_WIDTH}",
        type=int,
        default=constants.SCREEN_WIDTH,
        help="Width of the window",
    )
    parser.add_argument(
        f"--{constants.ARG_HEIGHT}",
        type=int,
        default=constants.SCREEN_HEIGHT,
        help="Height of the window",
    )
    parser.add_argument(
        f"--{constants.ARG_ASSETS}",
        type=str,
        default=None,
        help="Directory containing player1.png, player2.png and ball.png",
    )
    parser.add_argument(
        f"--{constants.ARG_FPS}",
        type=int,
        default=constants.FPS,
        help="Frames per second",
    )

    return parser.parse_args(argv)


def main(argv=None):
    """
    Starting point of Pong game
    """
    args = parse_args(argv)

    try:
        game = PygamePongGame(
            window_size=(args.width, args.height),
            assets_dir=args.assets,
            fps=args.fps,
        )
    except (AssetLoadError, ValueError, pygame.error) as err:
        logger.error("Failed to start Pong: %s", err)
        pygame.quit()
        sys.exit(1)

    try:
        game.run()
    finally:
        game.close()


if __name__ == "__main__":
    main()
