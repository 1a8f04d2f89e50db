"""
Fixed settings for the robot simulator.

The board is always square; BOARD_SIZE is its edge length.
"""

BOARD_SIZE = 5

# REPORT output
REPORT_TEMPLATE = "x = {x}, y = {y}, direction = {heading}"
NOT_PLACED_MESSAGE = "Robot has not been validly placed yet"

# Logging
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
