# pylint: disable=missing-class-docstring
"""
Models related to the Pong game
"""
from enum import Enum
from typing import Optional, Tuple
from pydantic import BaseModel, Field
from pong_duel.pong import constants


class Vector(BaseModel):

    x: float
    y: float


class Bounds(BaseModel):
    """
    Axis-aligned rectangle with float coordinates.
    pygame.Rect truncates to integers, which would change the collision
    results for bodies at fractional positions.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: "Bounds") -> bool:
        """
        Check if the two rectangles overlap. Rectangles that only share an
        edge do not intersect.
        """
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.bottom
            and self.bottom > other.y
        )


class FrameInput(BaseModel):
    """
    Movement keys held during a single frame
    """

    player1_up: bool = False
    player1_down: bool = False
    player2_up: bool = False
    player2_down: bool = False


class Outcome(Enum):
    CONTINUE = 0
    PLAYER1_WINS = 1
    PLAYER2_WINS = 2


class FrameResult(BaseModel):

    outcome: Outcome = Outcome.CONTINUE
    message: Optional[str] = None

    @property
    def done(self) -> bool:
        """
        Whether the game has ended and the host should stop advancing it
        """
        return self.outcome != Outcome.CONTINUE


class GameConfig(BaseModel):
    """
    Tunable physics values, all measured per frame
    """

    paddle_speed: float = Field(default=constants.PADDLE_SPEED, ge=0)
    ball_speed: float = Field(default=constants.BALL_SPEED, ge=0)
    paddle_spin: float = constants.PADDLE_SPIN
    ball_acc: float = Field(default=constants.BALL_ACC, ge=0)
    paddle_margin: float = Field(default=constants.PADDLE_MARGIN, ge=0)


Color = Tuple[int, int, int]
