"""
Common utility functions used by various packages
"""

from pong_duel.logger.logger import logger


def print_horizontal_line():
    """
    Print a horizontal line to the console
    """
    logger.info("=" * 40)


def announce(message: str):
    """
    Print a message framed by horizontal lines
    """
    print_horizontal_line()
    logger.info(message)
    print_horizontal_line()
