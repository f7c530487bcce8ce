"""
The three bodies making up a game of Pong
"""

from typing import Optional, Tuple
from pong_duel.models.pong import GameConfig, Vector
from pong_duel.pong.game_object import Body, Sprite


class GameState:
    """
    Owns the left paddle (player1), the right paddle (player2) and the ball
    """

    @staticmethod
    def new(
        window_size: Tuple[int, int],
        player1_sprite: Sprite,
        player2_sprite: Sprite,
        ball_sprite: Sprite,
        config: Optional[GameConfig] = None,
    ) -> "GameState":
        """
        Create the starting state: paddles vertically centred near either
        edge, ball in the middle of the field heading towards player1
        """
        config = config or GameConfig()
        window_width, window_height = window_size

        player1 = Body(
            player1_sprite,
            Vector(
                x=config.paddle_margin,
                y=(window_height - player1_sprite.get_height()) / 2,
            ),
        )
        player2 = Body(
            player2_sprite,
            Vector(
                x=window_width - config.paddle_margin - player2_sprite.get_width(),
                y=(window_height - player2_sprite.get_height()) / 2,
            ),
        )
        ball = Body(
            ball_sprite,
            Vector(
                x=window_width / 2 - ball_sprite.get_width() / 2,
                y=window_height / 2 - ball_sprite.get_height() / 2,
            ),
            Vector(x=-config.ball_speed, y=0),
        )
        return GameState(player1, player2, ball)

    def __init__(self, player1: Body, player2: Body, ball: Body):
        self.player1 = player1
        self.player2 = player2
        self.ball = ball
