# pylint: disable=no-member
"""
Shared fixtures for the Pong tests
"""
from typing import Tuple
import pygame
import pytest
from pong_duel.models.pong import GameConfig, Vector
from pong_duel.pong.game_loop import GameLoop
from pong_duel.pong.game_object import Body
from pong_duel.pong.game_state import GameState

WINDOW = (640, 400)


def make_body(size: Tuple[int, int], position, velocity=(0.0, 0.0)) -> Body:
    return Body(
        pygame.Surface(size),
        Vector(x=position[0], y=position[1]),
        Vector(x=velocity[0], y=velocity[1]),
    )


@pytest.fixture
def make_loop():
    """
    Build a loop with explicitly placed bodies. By default the paddles sit
    at the bottom of the field, out of the way of a ball in the middle.
    """

    def _make_loop(
        ball_position,
        ball_velocity=(0.0, 0.0),
        player1_position=(16.0, 300.0),
        player2_position=(608.0, 300.0),
        player1_size=(16, 64),
        player2_size=(16, 64),
        ball_size=(16, 16),
        config=None,
    ) -> GameLoop:
        state = GameState(
            make_body(player1_size, player1_position),
            make_body(player2_size, player2_position),
            make_body(ball_size, ball_position, ball_velocity),
        )
        return GameLoop(state, config or GameConfig())

    return _make_loop
