"""
Logging module for the project
"""

import logging

# Set up logging
# Change logging level to DEBUG to see paddle hits frame by frame
logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)
