"""
Functionality related to the bodies moving around the Pong field.
Paddles and the ball share the same type - their role only comes from
where the game state keeps them.
"""

from typing import Optional, Protocol
from pong_duel.models.pong import Bounds, Vector


class Sprite(Protocol):
    """
    Anything that knows its own size, e.g. a pygame.Surface
    """

    def get_width(self) -> int: ...

    def get_height(self) -> int: ...


class Body:
    """
    Represents a rectangular body with a fixed size taken from its sprite,
    and a mutable position (top-left corner) and velocity.
    """

    def __init__(
        self,
        sprite: Sprite,
        position: Vector,
        velocity: Optional[Vector] = None,
    ):
        self.sprite = sprite
        self._width = float(sprite.get_width())
        self._height = float(sprite.get_height())
        self.position = position
        self.velocity = velocity if velocity is not None else Vector(x=0, y=0)

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def bounds(self) -> Bounds:
        """
        Rectangle covered by the body at its current position
        """
        return Bounds(
            x=self.position.x,
            y=self.position.y,
            width=self.width,
            height=self.height,
        )

    def centre(self) -> Vector:
        return Vector(
            x=self.position.x + self.width / 2,
            y=self.position.y + self.height / 2,
        )
