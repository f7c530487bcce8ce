"""
Common methods implemented by all Pong game hosts
"""

from abc import ABC, abstractmethod
from pong_duel.models.pong import FrameResult


class BasePongGame(ABC):
    """
    Interface implemented by anything that drives a Pong game frame by frame
    """

    @abstractmethod
    def update(self) -> FrameResult:
        """Read input and advance the game state by one frame."""

    @abstractmethod
    def render(self):
        """Render the current game state."""

    @abstractmethod
    def close(self):
        """Release the window and any other resources."""

    @abstractmethod
    def run(self) -> FrameResult:
        """Main game loop for human play"""
