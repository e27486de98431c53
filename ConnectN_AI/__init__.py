"""ConnectN_AI package exports."""

from .Cell import Cell, EMPTY, PLAYER_A, PLAYER_B, opponent
from .Line import Line
from .GameManager import GameManager
from .Player import Player, HumanPlayer, UNDO
from .AIPlayer import AIPlayer
from .ConnectNGame import ConnectNGame

# Subpackages for AI search, move validation, and helpers
from . import ai, engine, utils

__all__ = [
    "Cell",
    "EMPTY",
    "PLAYER_A",
    "PLAYER_B",
    "opponent",
    "Line",
    "GameManager",
    "Player",
    "HumanPlayer",
    "UNDO",
    "AIPlayer",
    "ConnectNGame",
    "ai",
    "engine",
    "utils",
]
