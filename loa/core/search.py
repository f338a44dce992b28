import enum
import logging
import time
from dataclasses import dataclass
from typing import Optional

from loa.config import CONFIG
from loa.core.board import GameBoard, Move, Side
from loa.core.errors import GameOverError, SearchError
from loa.core.evaluator import Evaluator
from loa.core.utils import format_info
from loa.core.value import NEG_INF, POS_INF, Value

logger = logging.getLogger(__name__)

# Values are always from this side's point of view: it maximizes, the
# other side minimizes.
MAXIMIZING_SIDE = Side.WHITE


class Sense(enum.IntEnum):
    MAXIMIZE = 1
    MINIMIZE = -1

    @property
    def opposite(self) -> "Sense":
        return Sense(-self.value)

    @property
    def seed(self) -> Value:
        """Starting value of the running extreme at a node."""
        return NEG_INF if self is Sense.MAXIMIZE else POS_INF

    @classmethod
    def for_side(cls, side: Side) -> "Sense":
        return cls.MAXIMIZE if side is MAXIMIZING_SIDE else cls.MINIMIZE


@dataclass(frozen=True)
class SearchResult:
    value: Value
    move: Optional[Move] = None


class SearchEngine:
    """Depth-limited minimax with alpha-beta pruning."""

    def __init__(self, evaluator: Optional[Evaluator] = None, depth: Optional[int] = None):
        self.evaluator = evaluator or Evaluator()
        self.max_depth = CONFIG.search.depth if depth is None else depth
        self.nodes = 0

    def choose_depth(self, board: GameBoard) -> int:
        """Plies to search from ``board``. Fixed for now."""
        return self.max_depth

    def search_best_move(self, board: GameBoard) -> SearchResult:
        """Search ``board`` for the side to move and return the best move.

        Raises GameOverError if the game is already decided and SearchError
        if the search comes back without a move.
        """
        if board.is_game_over():
            raise GameOverError("Cannot search a finished game", {"winner": board.winner()})
        depth = self.choose_depth(board)
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")

        self.nodes = 0
        start_time = time.time()
        result = self.find_move(
            board.copy(), depth, Sense.for_side(board.turn), NEG_INF, POS_INF
        )
        elapsed = time.time() - start_time
        logger.info(format_info(depth, result.value, self.nodes, elapsed, result.move))

        if result.move is None:
            logger.error("No move found for %s at depth %d", board.turn.full_name, depth)
            raise SearchError(
                "Search found no move on an unfinished position",
                {"side": board.turn.full_name, "depth": depth},
            )
        return result

    def find_move(
        self, board: GameBoard, depth: int, sense: Sense, alpha: Value, beta: Value
    ) -> SearchResult:
        """Value of ``board`` searched ``depth`` plies, and the move that gets it.

        A node whose running best reaches the window stops examining its
        remaining children, so its value is then only a bound. No move is
        returned at the frontier, on a finished game, or when there are no
        legal moves (the value is then ``sense.seed``).
        """
        self.nodes += 1
        if depth == 0 or board.is_game_over():
            # Always white's view, whatever side is searching; black minimizes it.
            return SearchResult(self.evaluator.evaluate(board, MAXIMIZING_SIDE))

        best = sense.seed
        best_move = None
        for move in board.legal_moves():
            child = board.apply(move)
            value = self.find_move(child, depth - 1, sense.opposite, alpha, beta).value
            if sense is Sense.MAXIMIZE:
                alpha = max(alpha, value)
                if value > best:
                    best, best_move = value, move
            else:
                beta = min(beta, value)
                if value < best:
                    best, best_move = value, move
            if alpha >= beta:
                break
        return SearchResult(best, best_move)
