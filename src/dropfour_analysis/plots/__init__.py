from .chart import (
    plot_game_lengths,
    plot_win_rates,
)

__all__ = [
    "plot_game_lengths",
    "plot_win_rates",
]
