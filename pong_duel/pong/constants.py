"""
Constants related to the Pong game.
"""

import pygame

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 400
SCREEN_CAPTION = "Pong"
FPS = 60

# 0.392, 0.584, 0.929 as 8-bit channels (cornflower blue)
BACKGROUND_COLOR = (100, 149, 237)
WHITE = (255, 255, 255)

PADDLE_SPEED = 8.0
BALL_SPEED = 5.0
PADDLE_SPIN = 4.0
BALL_ACC = 0.05
PADDLE_MARGIN = 16.0

# Sprite sizes used when no asset directory is given
PADDLE_WIDTH = 16
PADDLE_HEIGHT = 64
BALL_SIZE = 16

ASSET_PLAYER1 = "player1.png"
ASSET_PLAYER2 = "player2.png"
ASSET_BALL = "ball.png"

KEY_PLAYER1_UP = pygame.K_w
KEY_PLAYER1_DOWN = pygame.K_s
KEY_PLAYER2_UP = pygame.K_UP
KEY_PLAYER2_DOWN = pygame.K_DOWN
KEY_QUIT = pygame.K_ESCAPE

MESSAGE_PLAYER1_WINS = "Player 1 wins!"
MESSAGE_PLAYER2_WINS = "Player 2 wins!"

ARG_WIDTH = "width"
ARG_HEIGHT = "height"
ARG_ASSETS = "assets"
ARG_FPS = "fps"
