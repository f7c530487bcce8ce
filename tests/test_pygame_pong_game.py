# pylint: disable=no-member
"""
Tests for the pygame host, run without opening a window
"""
from collections import defaultdict
import pygame
import pytest
from pong_duel.models.pong import FrameInput, Outcome
from pong_duel.pong import main as pong_main
from pong_duel.pong.pygame_pong_game import (
    AssetLoadError,
    PygamePongGame,
    frame_input_from_keys,
    load_sprite,
    plain_sprite,
)


def _pressed(*keys):
    pressed = defaultdict(bool)
    for key in keys:
        pressed[key] = True
    return pressed


def test_no_keys_held():
    assert frame_input_from_keys(_pressed()) == FrameInput()


def test_keys_map_to_players():
    frame_input = frame_input_from_keys(_pressed(pygame.K_w, pygame.K_DOWN))

    assert frame_input == FrameInput(player1_up=True, player2_down=True)


def test_missing_asset_raises(tmp_path):
    with pytest.raises(AssetLoadError):
        load_sprite(str(tmp_path / "ball.png"))


def test_unreadable_asset_raises(tmp_path):
    broken = tmp_path / "ball.png"
    broken.write_bytes(b"not an image")

    with pytest.raises(AssetLoadError):
        load_sprite(str(broken))


def test_missing_asset_dir_fails_before_first_frame(tmp_path):
    with pytest.raises(AssetLoadError):
        PygamePongGame(assets_dir=str(tmp_path), headless=True)


def test_headless_game_uses_plain_sprites():
    game = PygamePongGame(headless=True)

    assert game.window_size == (640, 400)
    sizes = [sprite.get_size() for _, sprite in game.loop.render_state()]
    assert sizes == [(16, 64), (16, 64), (16, 16)]


def test_update_moves_paddle_from_held_keys():
    game = PygamePongGame(headless=True)

    result = game.update(_pressed(pygame.K_s))

    assert result.outcome == Outcome.CONTINUE
    assert game.loop.state.player1.position.y == 176.0
    assert game.loop.state.ball.position.x == 307.0


def test_ball_bounces_off_player1_after_serve():
    game = PygamePongGame(headless=True)

    for _ in range(57):
        game.update(_pressed())

    assert game.loop.state.ball.velocity.x == pytest.approx(5.05)
    assert not game.result.done


def test_render_paints_background_and_bodies():
    game = PygamePongGame(headless=True)
    game.render()

    assert game.screen.get_at((0, 0))[:3] == (100, 149, 237)
    assert game.screen.get_at((20, 200))[:3] == (255, 255, 255)


def test_main_exits_when_assets_are_missing(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")

    with pytest.raises(SystemExit) as exc_info:
        pong_main.main(["--assets", str(tmp_path)])

    assert exc_info.value.code == 1


def test_parse_args_defaults():
    args = pong_main.parse_args([])

    assert (args.width, args.height, args.fps) == (640, 400, 60)
    assert args.assets is None


@pytest.mark.parametrize(
    "window_size, fps",
    [((0, 400), 60), ((640, -1), 60), ((640, 400), 0)],
)
def test_invalid_window_or_frame_rate_is_rejected(window_size, fps):
    with pytest.raises(ValueError):
        PygamePongGame(window_size=window_size, fps=fps, headless=True)


def test_main_exits_on_invalid_window_size():
    with pytest.raises(SystemExit) as exc_info:
        pong_main.main(["--width", "0"])

    assert exc_info.value.code == 1


def test_headless_game_cannot_run():
    game = PygamePongGame(headless=True)

    with pytest.raises(RuntimeError):
        game.run()


def test_plain_sprite_uses_given_color():
    sprite = plain_sprite(4, 4, (10, 20, 30))

    assert sprite.get_size() == (4, 4)
    assert sprite.get_at((0, 0))[:3] == (10, 20, 30)
