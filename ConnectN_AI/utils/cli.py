"""CLI options for selecting players, board shape, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Connect-N with a minimax AI")
    parser.add_argument("--rows", type=int, help="Number of board rows")
    parser.add_argument("--cols", type=int, help="Number of board columns")
    parser.add_argument("--num-to-win", type=int, help="Stones in a row needed to win")
    parser.add_argument("--depth", type=int, help="Search depth for AI")
    parser.add_argument(
        "--mode",
        choices=["human-vs-ai", "ai-vs-human", "ai-vs-ai", "human-vs-human"],
        default=None,
        help="Play mode (who plays X/O); default derived from player_goes_first",
    )
    parser.add_argument(
        "--player-first",
        action="store_true",
        default=None,
        help="Human plays X (moves first) when no mode is given",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--log-level", default="WARNING", help="Logging level for library modules")
    parser.add_argument("--show-stats", action="store_true", help="Print search statistics after the game")
    return parser.parse_args(argv)
