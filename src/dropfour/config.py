# src/dropfour/config.py

from __future__ import annotations

ROWS = 6
COLS = 7
CONNECT_N = 4

# UI toggles
USE_COLOR = True

# Rollout agent defaults
ROLLOUTS_PER_MOVE = 100
ROLLOUT_BATCH_SIZE = 25  # simulations per worker task

# Match runner defaults
DEFAULT_NUM_GAMES = 100
