"""
Per-frame update of a Pong game: paddle movement, ball integration,
collisions and the win condition.
"""

from typing import List, Optional, Tuple
from pong_duel.logger.logger import logger
from pong_duel.models.pong import (
    FrameInput,
    FrameResult,
    GameConfig,
    Outcome,
    Vector,
)
from pong_duel.pong import constants
from pong_duel.pong.game_object import Body, Sprite
from pong_duel.pong.game_state import GameState


def sign(value: float) -> float:
    """
    -1, 0 or 1 depending on the sign of the value
    """
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


class GameLoop:
    """
    Advances a GameState by one frame at a time. The loop owns the state
    and is meant to be driven by a single host loop.
    """

    def __init__(self, state: GameState, config: Optional[GameConfig] = None):
        self.state = state
        self.config = config or GameConfig()

    def advance(
        self, frame_input: FrameInput, window_size: Tuple[float, float]
    ) -> FrameResult:
        """
        Move everything by one frame.

        Args:
            frame_input (FrameInput): movement keys held this frame
            window_size (tuple): current (width, height) of the window

        Returns:
            FrameResult: whether someone has won, and the message to show
        """
        window_width, window_height = window_size

        self._move_paddle(
            self.state.player1,
            frame_input.player1_up,
            frame_input.player1_down,
            window_height,
        )
        self._move_paddle(
            self.state.player2,
            frame_input.player2_up,
            frame_input.player2_down,
            window_height,
        )

        ball = self.state.ball
        ball.position.x += ball.velocity.x
        ball.position.y += ball.velocity.y

        paddle = self._paddle_hit()
        if paddle is not None:
            self._bounce_off_paddle(paddle)

        if ball.position.y <= 0 or ball.position.y + ball.height >= window_height:
            ball.velocity.y = -ball.velocity.y

        return self._check_winner(window_width)

    def render_state(self) -> List[Tuple[Vector, Sprite]]:
        """
        Position and sprite of every body, in the order they are drawn
        """
        return [
            (body.position, body.sprite)
            for body in (self.state.player1, self.state.player2, self.state.ball)
        ]

    def _move_paddle(self, paddle: Body, up: bool, down: bool, window_height: float):
        # Down is checked after up and starts from the already-moved position
        max_y = window_height - paddle.height
        if up:
            paddle.position.y = max(0.0, paddle.position.y - self.config.paddle_speed)
        if down:
            paddle.position.y = min(
                max_y, paddle.position.y + self.config.paddle_speed
            )

    def _paddle_hit(self) -> Optional[Body]:
        """
        The paddle the ball overlaps, player1 first
        """
        ball_bounds = self.state.ball.bounds()
        for paddle in (self.state.player1, self.state.player2):
            if ball_bounds.intersects(paddle.bounds()):
                return paddle
        return None

    def _bounce_off_paddle(self, paddle: Body):
        """
        Reverse and speed up the ball, and add spin depending on where it
        struck the paddle
        """
        ball = self.state.ball
        ball.velocity.x = -(
            ball.velocity.x + self.config.ball_acc * sign(ball.velocity.x)
        )

        offset = (paddle.centre().y - ball.centre().y) / paddle.height
        ball.velocity.y += self.config.paddle_spin * -offset

        logger.debug(
            "Paddle hit at offset %.3f, ball velocity now (%.3f, %.3f)",
            offset,
            ball.velocity.x,
            ball.velocity.y,
        )

    def _check_winner(self, window_width: float) -> FrameResult:
        ball_x = self.state.ball.position.x
        if ball_x < 0:
            return FrameResult(
                outcome=Outcome.PLAYER2_WINS, message=constants.MESSAGE_PLAYER2_WINS
            )
        if ball_x > window_width:
            return FrameResult(
                outcome=Outcome.PLAYER1_WINS, message=constants.MESSAGE_PLAYER1_WINS
            )
        return FrameResult()
