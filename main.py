"""
Command-line tool for the Triqui engine.

Commands:
- best-move: ask the engine for its move on a board
- verdict:   classify a board as a win, draw, or undecided
- self-play: play many games against a scripted opponent and tally results

Boards are written as 9 characters, row by row, e.g. "XX.|.O.|..O".
"""

import random
import sys
from collections import Counter

from triqui import (
    AIPlayer,
    EngineConfig,
    GameSession,
    CoinFace,
    Mark,
    InvalidBoardError,
    PreconditionViolatedError,
    WinChecker,
    parse_board,
    board_to_string,
    empty_cells,
)


def run_best_move(args) -> int:
    """Print the engine's move and the score of every empty cell."""
    try:
        board = parse_board(args.board)
    except InvalidBoardError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    config = EngineConfig()
    config.DEBUG_MODE = args.debug

    engine_mark = Mark(args.engine_mark)
    ai = AIPlayer(rng=random.Random(args.seed), config=config)

    try:
        scores = ai.score_moves(board, engine_mark, engine_mark.opposite())
        move = ai.best_move(board, engine_mark, engine_mark.opposite())
    except PreconditionViolatedError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    print(f"Board: {board_to_string(board)}")
    print(f"Best move for {engine_mark.value}: {move}")
    for index, score in sorted(scores.items()):
        print(f"  cell {index}: {score:+d}")

    return 0


def run_verdict(args) -> int:
    """Print who has won the board, if anyone."""
    try:
        board = parse_board(args.board)
    except InvalidBoardError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    print(WinChecker().get_verdict(board))
    return 0


def run_self_play(args) -> int:
    """
    Play the engine against a scripted opponent.

    The opponent takes the player's seat in a GameSession. Who starts is
    decided by the session's coin toss, as in a normal game.
    """
    rng = random.Random(args.seed)
    session = GameSession(rng=random.Random(rng.random()))

    if args.opponent == "engine":
        opponent = AIPlayer(rng=random.Random(rng.random()))
    else:
        opponent = None

    openings = Counter()
    engine_first_games = 0

    for _ in range(args.games):
        session.new_game()
        player_starts = session.resolve_coin_toss(rng.choice([CoinFace.HEADS, CoinFace.TAILS]))
        if not player_starts:
            engine_first_games += 1

        while not session.is_game_over:
            if opponent is not None:
                index = opponent.best_move(session.board, session.player_mark, session.engine_mark)
            else:
                index = rng.choice(empty_cells(session.board))
            session.play(index)

        openings[session.moves[0].index] += 1

    scores = session.scores
    print(f"Games: {args.games} (engine moved first in {engine_first_games})")
    print(f"Opponent: {args.opponent}")
    print(f"Engine wins: {scores.engine_wins}")
    print(f"Draws: {scores.draws}")
    print(f"Opponent wins: {scores.player_wins}")
    print("Opening moves: " + ", ".join(
        f"{index}x{count}" for index, count in sorted(openings.items())
    ))

    if scores.player_wins > 0:
        print("ERROR: The engine lost a game!", file=sys.stderr)
        return 1

    return 0


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(description="Triqui engine")
    subparsers = parser.add_subparsers(dest="command", required=True)

    best = subparsers.add_parser("best-move", help="Ask the engine for its move")
    best.add_argument("board", help='Board as 9 characters, e.g. "XX..O...O"')
    best.add_argument(
        "--engine-mark",
        choices=["X", "O"],
        default="X",
        help="Mark the engine plays (default: X)"
    )
    best.add_argument("--seed", type=int, default=None, help="Seed for tie-breaks")
    best.add_argument("--debug", action="store_true", help="Print search statistics")
    best.set_defaults(func=run_best_move)

    verdict = subparsers.add_parser("verdict", help="Check for a winner or a draw")
    verdict.add_argument("board", help='Board as 9 characters, e.g. "XXXOO...."')
    verdict.set_defaults(func=run_verdict)

    self_play = subparsers.add_parser("self-play", help="Play games against a scripted opponent")
    self_play.add_argument("--games", type=int, default=100, help="Number of games (default: 100)")
    self_play.add_argument(
        "--opponent",
        choices=["random", "engine"],
        default="random",
        help="Opponent strategy (default: random)"
    )
    self_play.add_argument("--seed", type=int, default=None, help="Seed for the whole run")
    self_play.set_defaults(func=run_self_play)

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
