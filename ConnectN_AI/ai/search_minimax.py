"""Depth-limited minimax with alpha-beta pruning over the reduced move list."""

import logging
import time

from ConnectN_AI.Cell import PLAYER_A

LOGGER = logging.getLogger(__name__)

INF = float("inf")


class MinimaxSearcher:
    """Encapsulates the state and counters of a single search."""

    def __init__(self, manager, depth, prune=True, stats=None):
        self.manager = manager
        self.depth = depth
        self.prune = prune
        self.stats_list = stats

        # Internal state
        self.node_counter = 0
        self.cutoffs = 0
        self.start_time = None

    def search(self):
        """
        Search from the current position for the side to move.
        Returns (score, move); X maximizes, O minimizes.
        """
        self.node_counter = 0
        self.cutoffs = 0
        self.start_time = time.perf_counter()

        is_maximizing = self.manager.whose_turn() == PLAYER_A
        if self.prune:
            score, move = self.minimax(self.depth, is_maximizing, -INF, INF)
        else:
            score, move = self.plain_minimax(self.depth, is_maximizing)

        self._record_stats(score, move)
        return score, move

    def choose_move(self):
        _, move = self.search()
        return move

    def minimax(self, depth, is_maximizing, alpha, beta):
        """
        Fail-hard alpha-beta. The board is mutated in place and restored
        before each child's score is looked at.

        The returned move is None at leaves and at inner nodes where no child
        beat the incoming bound.
        """
        self.node_counter += 1
        manager = self.manager
        moves = manager.get_smart_legal_moves()

        if not moves or depth == 0:
            return manager.score, None

        best_move = None
        for move in moves:
            with manager.simulate(move):
                score, _ = self.minimax(depth - 1, not is_maximizing, alpha, beta)

            if is_maximizing:
                if score > alpha:
                    alpha = score
                    best_move = move
            else:
                if score < beta:
                    beta = score
                    best_move = move

            if alpha >= beta:
                self.cutoffs += 1
                break

        return (alpha if is_maximizing else beta), best_move

    def plain_minimax(self, depth, is_maximizing):
        """Unpruned minimax over the same candidate lists; reference for tests and benchmarks."""
        self.node_counter += 1
        manager = self.manager
        moves = manager.get_smart_legal_moves()

        if not moves or depth == 0:
            return manager.score, None

        best_score = -INF if is_maximizing else INF
        best_move = None
        for move in moves:
            with manager.simulate(move):
                score, _ = self.plain_minimax(depth - 1, not is_maximizing)

            if is_maximizing and score > best_score:
                best_score = score
                best_move = move
            elif not is_maximizing and score < best_score:
                best_score = score
                best_move = move

        return best_score, best_move

    def _record_stats(self, score, move):
        total_time = max(time.perf_counter() - self.start_time, 1e-9)
        entry = {
            "player": self.manager.whose_turn(),
            "depth": self.depth,
            "pruning": self.prune,
            "nodes": self.node_counter,
            "cutoffs": self.cutoffs,
            "time": total_time,
            "nps": self.node_counter / total_time,
            "score": score,
            "move": move,
        }
        LOGGER.debug(
            "search depth=%d nodes=%d cutoffs=%d time=%.3fs move=%s score=%s",
            self.depth,
            self.node_counter,
            self.cutoffs,
            total_time,
            move,
            score,
        )
        if self.stats_list is not None:
            self.stats_list.append(entry)


def minimax(manager, depth, is_maximizing, alpha=-INF, beta=INF):
    """Run one alpha-beta call on manager's current position. Returns (score, move)."""
    return MinimaxSearcher(manager, depth).minimax(depth, is_maximizing, alpha, beta)


def search(manager, depth=None, prune=True, stats=None):
    """Return (score, move) for the side to move, at depth or manager.depth."""
    searcher = MinimaxSearcher(
        manager,
        depth=depth or manager.depth,
        prune=prune,
        stats=stats,
    )
    return searcher.search()


def choose_move(manager, depth=None, prune=True, stats=None):
    """
    Public function to start a search. Returns a (row, col) tuple, or None when
    there is nothing to search (game already won, or no empty cell on any line
    through a past move).
    """
    _, move = search(manager, depth=depth, prune=prune, stats=stats)
    return move
