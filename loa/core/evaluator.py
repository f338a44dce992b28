from typing import Dict, Union

from loa.core.board import GameBoard, Side
from loa.core.value import LOSS, WIN, Value


class Evaluator:
    """Static evaluation of a position from one side's point of view.

    A decided game scores WIN or LOSS. Otherwise the score counts the
    features in which ``side`` strictly leads its opponent: number of
    regions, size of the largest region and total pieces (0 to 3). The
    count is not a differential, so ``evaluate(b, BLACK)`` and
    ``evaluate(b, WHITE)`` need not be negations of each other.
    """

    def evaluate(self, board: GameBoard, side: Side) -> Value:
        if board.is_game_over():
            winner = board.winner()
            if winner is side:
                return WIN
            if winner is side.opposite:
                return LOSS
        return Value.score(sum(self._features(board, side).values()))

    def breakdown(self, board: GameBoard, side: Side) -> Dict[str, Union[bool, int, str]]:
        result: Dict[str, Union[bool, int, str]] = dict(self._features(board, side))
        value = self.evaluate(board, side)
        result["total"] = value.to_score()
        result["value"] = str(value)
        return result

    def _features(self, board: GameBoard, side: Side) -> Dict[str, bool]:
        mine = board.region_sizes(side)
        theirs = board.region_sizes(side.opposite)
        return {
            "more_regions": len(mine) > len(theirs),
            "larger_region": max(mine, default=0) > max(theirs, default=0),
            "more_pieces": board.piece_count(side) > board.piece_count(side.opposite),
        }
