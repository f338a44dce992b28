"""Play Lines of Action in the terminal."""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from loa.config import CONFIG
from loa.core.board import Board, Side
from loa.core.errors import LOAError
from loa.core.search import SearchEngine
from loa.game import Game
from loa.players import MachinePlayer, ManualPlayer, Player


def _make_player(kind: str, side: Side, depth: int, read: Callable[[str], str],
                 output: Callable[[str], None]) -> Player:
    if kind == "machine":
        return MachinePlayer(side, SearchEngine(depth=depth))
    return ManualPlayer(side, read=read, output=output)


def main(argv: Optional[List[str]] = None, read: Callable[[str], str] = input,
         output: Callable[[str], None] = print) -> int:
    parser = argparse.ArgumentParser(prog="loa-play", description=__doc__)
    parser.add_argument("--black", choices=("human", "machine"), default="human")
    parser.add_argument("--white", choices=("human", "machine"), default="machine")
    parser.add_argument("--depth", type=int, default=CONFIG.search.depth)
    parser.add_argument("--move-limit", type=int, default=CONFIG.game.move_limit)
    args = parser.parse_args(argv)

    logging.basicConfig(level=CONFIG.log_level, format="%(message)s")

    black = _make_player(args.black, Side.BLACK, args.depth, read, output)
    white = _make_player(args.white, Side.WHITE, args.depth, read, output)
    game = Game(black, white, Board(move_limit=args.move_limit))

    def show(move, board):
        output(f"{board.turn.opposite.full_name} plays {move}")
        output(str(board))
        output("----------------------------")

    game.add_listener(show)
    output(str(game.board))

    try:
        winner = game.play()
    except LOAError as e:
        output(f"Error: {e.message}")
        return 1

    if winner is not None:
        output(f"{winner.full_name.capitalize()} wins.")
    elif game.board.is_game_over():
        output("Tie game.")
    else:
        output("Game abandoned.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
