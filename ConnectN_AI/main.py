"""Entry point for Connect-N matches. Load config, wire players, start ConnectNGame."""

import yaml
from pathlib import Path

from ConnectN_AI.AIPlayer import AIPlayer
from ConnectN_AI.Cell import PLAYER_A, PLAYER_B
from ConnectN_AI.ConnectNGame import ConnectNGame
from ConnectN_AI.GameManager import GameManager
from ConnectN_AI.Player import HumanPlayer
from ConnectN_AI.utils import logger, render
from ConnectN_AI.utils.cli import parse_args


PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "rows": 19,
    "cols": 19,
    "num_to_win": 5,
    "search_depth": 4,
    "player_goes_first": False,
    "mode": None,
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `ConnectN_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    """Read settings YAML over the defaults; a missing file yields the defaults."""
    settings = dict(DEFAULT_SETTINGS)
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return settings
    settings.update({k: v for k, v in data.items() if v is not None})
    return settings


def resolve_mode(mode, player_goes_first):
    if mode:
        return mode
    return "human-vs-ai" if player_goes_first else "ai-vs-human"


def build_players(mode, stats=None):
    """Return (x_player, o_player) for a mode string like 'human-vs-ai'."""
    try:
        x_kind, o_kind = mode.split("-vs-")
    except ValueError as exc:
        raise ValueError(f"Unsupported mode: {mode}") from exc

    def make(kind, color):
        if kind == "human":
            return HumanPlayer(color)
        if kind == "ai":
            return AIPlayer(color, stats=stats)
        raise ValueError(f"Unsupported mode: {mode}")

    return make(x_kind, PLAYER_A), make(o_kind, PLAYER_B)


def run(argv=None):
    """Play one match from settings and CLI flags. Returns the winner or None for a draw."""
    args = parse_args(argv)
    logger.configure(args.log_level)
    settings = load_settings(args.settings)

    rows = args.rows or settings["rows"]
    cols = args.cols or settings["cols"]
    num_to_win = args.num_to_win or settings["num_to_win"]
    player_goes_first = args.player_first if args.player_first is not None else bool(settings["player_goes_first"])
    mode = resolve_mode(args.mode or settings["mode"], player_goes_first)

    manager = GameManager(rows, cols, num_to_win, player_goes_first=player_goes_first)
    stats = []
    x_player, o_player = build_players(mode, stats=stats)

    game = ConnectNGame(
        manager,
        x_player,
        o_player,
        logger=logger.log_event,
        renderer=render.print_board if "human" in mode else None,
    )
    game.set_depth(args.depth or settings["search_depth"])

    result = game.play()
    print(f"{result} wins" if result else "Draw")

    if args.show_stats:
        for entry in stats:
            print(
                f"{entry['player']} depth={entry['depth']} nodes={entry['nodes']} "
                f"cutoffs={entry['cutoffs']} time={entry['time']:.3f}s move={entry['move']}"
            )
    return result


def main():
    run()


if __name__ == "__main__":
    main()
