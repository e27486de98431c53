"""Minimax-backed computer player."""

from ConnectN_AI.Player import Player
from ConnectN_AI.ai import search_minimax


class AIPlayer(Player):
    def __init__(self, color, depth=None, prune=True, stats=None):
        super().__init__(color)
        # None means follow the manager's depth, which a front end may change between moves.
        self.depth = depth
        self.prune = prune
        self.stats = stats

    def next_move(self, manager):
        return search_minimax.choose_move(
            manager,
            depth=self.depth,
            prune=self.prune,
            stats=self.stats,
        )
