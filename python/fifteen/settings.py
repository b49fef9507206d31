"""Build-time constants for the puzzle."""

BOARD_SIDE = 4

# Inclusive range for the number of slides applied when a game starts.
SHUFFLE_STEPS_MIN = 20
SHUFFLE_STEPS_MAX = 100
