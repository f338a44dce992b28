"""Game loop alternating between two players."""

import logging
from typing import Callable, Dict, List, Optional

from loa.config import CONFIG
from loa.core.board import Board, Move, Side
from loa.players import Player

logger = logging.getLogger(__name__)

MoveListener = Callable[[Move, Board], None]


class Game:
    def __init__(self, black: Player, white: Player, board: Optional[Board] = None):
        if black.side is not Side.BLACK or white.side is not Side.WHITE:
            raise ValueError("Players do not match their sides")
        self.board = board or Board(move_limit=CONFIG.game.move_limit)
        self.players: Dict[Side, Player] = {Side.BLACK: black, Side.WHITE: white}
        self._listeners: List[MoveListener] = []

    def add_listener(self, listener: MoveListener) -> None:
        """Call ``listener(move, board)`` after every move is made."""
        self._listeners.append(listener)

    def report_move(self, move: Move) -> None:
        """Announce ``move``, which has just been made on ``self.board``."""
        mover = self.board.turn.opposite
        logger.info("* %s::%s", mover.full_name, move)
        for listener in self._listeners:
            listener(move, self.board)

    def play(self, max_moves: Optional[int] = None) -> Optional[Side]:
        """Play until the game ends, a player quits or ``max_moves`` are made.

        Returns the winner, or None for a tie or an unfinished game.
        """
        played = 0
        while not self.board.is_game_over():
            if max_moves is not None and played >= max_moves:
                break
            player = self.players[self.board.turn]
            move = player.get_move(self.board.copy())
            if move is None:
                logger.info("%s abandoned the game", self.board.turn.full_name)
                break
            self.board.push(move)
            played += 1
            self.report_move(move)
        return self.board.winner()
