# pylint: disable=no-member
"""
Functionality for hosting the Pong game in a pygame window
"""
import os
from typing import Optional, Sequence, Tuple
import pygame
from pong_duel.logger.logger import logger
from pong_duel.models.pong import Color, FrameInput, FrameResult, GameConfig
from pong_duel.pong import constants
from pong_duel.pong.base_game import BasePongGame
from pong_duel.pong.game_loop import GameLoop
from pong_duel.pong.game_state import GameState
from pong_duel.utils.utils import announce


class AssetLoadError(Exception):
    """
    Raised when a sprite image can't be found or decoded
    """


def load_sprite(path: str) -> pygame.Surface:
    """
    Load a sprite image from disk
    """
    if not os.path.isfile(path):
        raise AssetLoadError(f"Asset not found: {path}")
    try:
        return pygame.image.load(path)
    except pygame.error as err:
        raise AssetLoadError(f"Could not load asset {path}: {err}") from err


def plain_sprite(
    width: int, height: int, color: Color = constants.WHITE
) -> pygame.Surface:
    """
    Solid sprite used when the game runs without image assets
    """
    sprite = pygame.Surface((width, height))
    sprite.fill(color)
    return sprite


def frame_input_from_keys(pressed: Sequence[bool]) -> FrameInput:
    """
    Map the held keys (as returned by pygame.key.get_pressed) to the
    movement keys of both players
    """
    return FrameInput(
        player1_up=bool(pressed[constants.KEY_PLAYER1_UP]),
        player1_down=bool(pressed[constants.KEY_PLAYER1_DOWN]),
        player2_up=bool(pressed[constants.KEY_PLAYER2_UP]),
        player2_down=bool(pressed[constants.KEY_PLAYER2_DOWN]),
    )


class PygamePongGame(BasePongGame):
    """
    Two-player Pong played in a pygame window
    """

    def __init__(
        self,
        window_size: Tuple[int, int] = (
            constants.SCREEN_WIDTH,
            constants.SCREEN_HEIGHT,
        ),
        assets_dir: Optional[str] = None,
        config: Optional[GameConfig] = None,
        fps: int = constants.FPS,
        headless: bool = False,
    ):
        window_width, window_height = window_size
        if window_width <= 0 or window_height <= 0:
            raise ValueError(f"Invalid window size: {window_size}")
        if fps <= 0:
            raise ValueError(f"Invalid frame rate: {fps}")

        self.headless = headless
        self.fps = fps
        self.config = config or GameConfig()
        if not headless:
            pygame.init()
            self.screen = pygame.display.set_mode(window_size)
            pygame.display.set_caption(constants.SCREEN_CAPTION)
            self.clock = pygame.time.Clock()
        else:
            # Off-screen surface so the game can be stepped without a display
            self.screen = pygame.Surface(window_size)

        player1_sprite, player2_sprite, ball_sprite = self._load_sprites(assets_dir)
        self.loop = GameLoop(
            GameState.new(
                window_size,
                player1_sprite,
                player2_sprite,
                ball_sprite,
                config=self.config,
            ),
            config=self.config,
        )
        self.result = FrameResult()

    def _load_sprites(
        self, assets_dir: Optional[str]
    ) -> Tuple[pygame.Surface, pygame.Surface, pygame.Surface]:
        if assets_dir is None:
            return (
                plain_sprite(constants.PADDLE_WIDTH, constants.PADDLE_HEIGHT),
                plain_sprite(constants.PADDLE_WIDTH, constants.PADDLE_HEIGHT),
                plain_sprite(constants.BALL_SIZE, constants.BALL_SIZE),
            )

        sprites = []
        for name in (
            constants.ASSET_PLAYER1,
            constants.ASSET_PLAYER2,
            constants.ASSET_BALL,
        ):
            sprite = load_sprite(os.path.join(assets_dir, name))
            if not self.headless:
                sprite = sprite.convert_alpha()
            sprites.append(sprite)
        logger.info("Loaded sprites from %s", assets_dir)
        return tuple(sprites)

    @property
    def window_size(self) -> Tuple[int, int]:
        return self.screen.get_size()

    def update(self, pressed: Optional[Sequence[bool]] = None) -> FrameResult:
        """Read the held keys and advance the game state by one frame."""
        if pressed is None:
            pressed = pygame.key.get_pressed()
        self.result = self.loop.advance(
            frame_input_from_keys(pressed), self.window_size
        )
        return self.result

    def render(self):
        """Render the current game state."""
        self.screen.fill(constants.BACKGROUND_COLOR)
        for position, sprite in self.loop.render_state():
            self.screen.blit(sprite, (position.x, position.y))
        if self.headless:
            return
        pygame.display.flip()

    def close(self):
        """Close the Pygame window."""
        pygame.quit()

    def run(self) -> FrameResult:
        """Main game loop for human play."""
        if self.headless:
            raise RuntimeError("A headless game has no window to run in")
        logger.info("Starting Pong (%dx%d)", *self.window_size)
        while not self.result.done:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return self.result
                if event.type == pygame.KEYDOWN and event.key == constants.KEY_QUIT:
                    return self.result

            self.update()
            self.render()
            self.clock.tick(self.fps)

        announce(self.result.message)
        return self.result
