"""Players that produce moves for one side of a game."""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from loa.core.board import Board, Move, Side
from loa.core.errors import IllegalMoveError, WrongTurnError
from loa.core.search import SearchEngine


class Player(ABC):
    def __init__(self, side: Side):
        self.side = side

    @abstractmethod
    def get_move(self, board: Board) -> Optional[Move]:
        """Next move for ``board``, or None to abandon the game."""

    def is_manual(self) -> bool:
        return False

    def _check_turn(self, board: Board) -> None:
        if board.turn is not self.side:
            raise WrongTurnError(
                f"{self.side.full_name} asked to move on {board.turn.full_name}'s turn"
            )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(side={self.side.full_name})"


class MachinePlayer(Player):
    """Chooses moves by alpha-beta search."""

    def __init__(self, side: Side, engine: Optional[SearchEngine] = None):
        super().__init__(side)
        self.engine = engine or SearchEngine()
        self.last_result = None

    def choose_move(self, board: Board) -> Move:
        self._check_turn(board)
        self.last_result = self.engine.search_best_move(board)
        return self.last_result.move

    def get_move(self, board: Board) -> Move:
        return self.choose_move(board)


class ManualPlayer(Player):
    """Reads moves as ``a1-b2`` text, re-prompting until one is legal.

    ``read`` is called with a prompt and returns a line; ``quit`` or end of
    input abandons the game.
    """

    def __init__(self, side: Side, read: Callable[[str], str] = input,
                 output: Callable[[str], None] = print):
        super().__init__(side)
        self.read = read
        self.output = output

    def is_manual(self) -> bool:
        return True

    def get_move(self, board: Board) -> Optional[Move]:
        self._check_turn(board)
        while True:
            try:
                text = self.read(f"{self.side.full_name}> ").strip()
            except EOFError:
                return None
            if text == "quit":
                return None
            try:
                move = Move.from_str(text)
            except IllegalMoveError as e:
                self.output(e.message)
                continue
            if board.is_legal(move):
                return move
            self.output(f"Illegal move: {move}")
