"""Lines of Action board: piece placement, move generation and win detection.

Squares are numbered 0..63 as ``row * 8 + col`` with ``a1`` = 0 and
``h8`` = 63. Black occupies rows 1 and 8, white columns a and h, and black
moves first.
"""

from __future__ import annotations

import enum
import re
from collections import deque
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence, Union

from loa.core.errors import GameOverError, IllegalMoveError, InvalidPositionError

BOARD_SIZE = 8
DEFAULT_MOVE_LIMIT = 60
COLUMNS = "abcdefgh"

# (dcol, drow) in enumeration order: N, NE, E, SE, S, SW, W, NW
DIRECTIONS = ((0, 1), (1, 1), (1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0), (-1, 1))

# Top row (row 8) first.
INITIAL_LAYOUT = (
    "-bbbbbb-",
    "w------w",
    "w------w",
    "w------w",
    "w------w",
    "w------w",
    "w------w",
    "-bbbbbb-",
)

_EMPTY_CHAR = "-"
_MOVE_RE = re.compile(r"^\s*([a-h][1-8])\s*-\s*([a-h][1-8])\s*$")


class Side(enum.Enum):
    BLACK = "b"
    WHITE = "w"

    @property
    def opposite(self) -> "Side":
        return Side.WHITE if self is Side.BLACK else Side.BLACK

    @property
    def full_name(self) -> str:
        return self.name.lower()

    @classmethod
    def from_name(cls, name: str) -> "Side":
        key = (name or "").strip().lower()
        for side in cls:
            if key in (side.value, side.full_name):
                return side
        raise ValueError(f"Unknown side: {name!r}")


def square_name(sq: int) -> str:
    return f"{COLUMNS[sq % BOARD_SIZE]}{sq // BOARD_SIZE + 1}"


def parse_square(name: str) -> int:
    if len(name) != 2 or name[0] not in COLUMNS or name[1] not in "12345678":
        raise IllegalMoveError(f"Invalid square: {name!r}", {"square": name})
    return (int(name[1]) - 1) * BOARD_SIZE + COLUMNS.index(name[0])


@dataclass(frozen=True)
class Move:
    """A piece moving from one square to another, written ``a1-b2``."""

    from_sq: int
    to_sq: int

    @classmethod
    def from_str(cls, text: str) -> "Move":
        match = _MOVE_RE.match(text or "")
        if not match:
            raise IllegalMoveError(f"Malformed move: {text!r}", {"move": text})
        return cls(parse_square(match.group(1)), parse_square(match.group(2)))

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}-{square_name(self.to_sq)}"


class GameBoard(Protocol):
    """What the search needs from a board."""

    turn: Side

    def legal_moves(self) -> List[Move]: ...

    def apply(self, move: Move) -> "GameBoard": ...

    def copy(self) -> "GameBoard": ...

    def is_game_over(self) -> bool: ...

    def winner(self) -> Optional[Side]: ...

    def piece_count(self, side: Side) -> int: ...

    def region_sizes(self, side: Side) -> List[int]: ...


def _parse_layout(rows: Sequence[str]) -> List[Optional[Side]]:
    cleaned = [row.replace(" ", "") for row in rows]
    if len(cleaned) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in cleaned):
        raise InvalidPositionError(
            f"Layout must be {BOARD_SIZE} rows of {BOARD_SIZE} squares",
            {"layout": list(rows)},
        )
    squares: List[Optional[Side]] = [None] * (BOARD_SIZE * BOARD_SIZE)
    for i, row in enumerate(cleaned):
        r = BOARD_SIZE - 1 - i
        for c, ch in enumerate(row.lower()):
            if ch == _EMPTY_CHAR:
                continue
            if ch not in ("b", "w"):
                raise InvalidPositionError(f"Invalid square contents: {ch!r}", {"row": row})
            squares[r * BOARD_SIZE + c] = Side(ch)
    return squares


class Board:
    """A Lines of Action position plus the moves that led to it."""

    def __init__(
        self,
        layout: Optional[Sequence[str]] = None,
        turn: Side = Side.BLACK,
        move_limit: int = DEFAULT_MOVE_LIMIT,
    ):
        self.move_limit = move_limit
        self.move_stack: List[Move] = []
        self._captured: List[Optional[Side]] = []
        self._winner: Optional[Side] = None
        self.set_layout(layout if layout is not None else INITIAL_LAYOUT, turn)

    @classmethod
    def from_layout(
        cls, rows: Sequence[str], turn: Side = Side.BLACK, move_limit: int = DEFAULT_MOVE_LIMIT
    ) -> "Board":
        return cls(rows, turn, move_limit)

    def set_layout(self, rows: Sequence[str], turn: Side) -> None:
        """Replace the position with ``rows``; the move history is cleared."""
        self._squares = _parse_layout(rows)
        self.turn = turn
        self.move_stack.clear()
        self._captured.clear()
        self._winner_known = False

    def reset(self) -> None:
        """Return to the initial position, black to move."""
        self.set_layout(INITIAL_LAYOUT, Side.BLACK)

    def copy(self) -> "Board":
        b = Board.__new__(Board)
        b._squares = list(self._squares)
        b.turn = self.turn
        b.move_limit = self.move_limit
        b.move_stack = list(self.move_stack)
        b._captured = list(self._captured)
        b._winner = self._winner
        b._winner_known = self._winner_known
        return b

    def layout(self) -> List[str]:
        """Rows top (row 8) first, ``b``/``w``/``-`` per square."""
        rows = []
        for r in range(BOARD_SIZE - 1, -1, -1):
            rows.append("".join(
                piece.value if piece else _EMPTY_CHAR
                for piece in self._squares[r * BOARD_SIZE:(r + 1) * BOARD_SIZE]
            ))
        return rows

    def piece_at(self, square: Union[int, str]) -> Optional[Side]:
        if isinstance(square, str):
            square = parse_square(square)
        return self._squares[square]

    # ── Move generation ─────────────────────────────────────────────────────

    def _line_count(self, sq: int, dcol: int, drow: int) -> int:
        """Pieces on the whole line through ``sq`` along (dcol, drow)."""
        col, row = sq % BOARD_SIZE, sq // BOARD_SIZE
        count = 1
        for sign in (1, -1):
            c, r = col + sign * dcol, row + sign * drow
            while 0 <= c < BOARD_SIZE and 0 <= r < BOARD_SIZE:
                if self._squares[r * BOARD_SIZE + c] is not None:
                    count += 1
                c += sign * dcol
                r += sign * drow
        return count

    def _target(self, sq: int, dcol: int, drow: int) -> Optional[int]:
        side = self._squares[sq]
        dist = self._line_count(sq, dcol, drow)
        col, row = sq % BOARD_SIZE, sq // BOARD_SIZE
        tc, tr = col + dist * dcol, row + dist * drow
        if not (0 <= tc < BOARD_SIZE and 0 <= tr < BOARD_SIZE):
            return None
        for step in range(1, dist):
            if self._squares[(row + step * drow) * BOARD_SIZE + col + step * dcol] is side.opposite:
                return None
        target = tr * BOARD_SIZE + tc
        if self._squares[target] is side:
            return None
        return target

    def legal_moves(self) -> List[Move]:
        """Legal moves for the side to move; empty once the game is over."""
        if self.is_game_over():
            return []
        moves = []
        for sq, piece in enumerate(self._squares):
            if piece is not self.turn:
                continue
            for dcol, drow in DIRECTIONS:
                target = self._target(sq, dcol, drow)
                if target is not None:
                    moves.append(Move(sq, target))
        return moves

    def is_legal(self, move: Move) -> bool:
        if self.is_game_over() or self._squares[move.from_sq] is not self.turn:
            return False
        dc = move.to_sq % BOARD_SIZE - move.from_sq % BOARD_SIZE
        dr = move.to_sq // BOARD_SIZE - move.from_sq // BOARD_SIZE
        if (dc, dr) == (0, 0) or not (dc == 0 or dr == 0 or abs(dc) == abs(dr)):
            return False
        unit_c = (dc > 0) - (dc < 0)
        unit_r = (dr > 0) - (dr < 0)
        return self._target(move.from_sq, unit_c, unit_r) == move.to_sq

    def push(self, move: Move) -> None:
        """Make ``move`` on this board."""
        if self.is_game_over():
            raise GameOverError("Game is already over", {"move": str(move)})
        if not self.is_legal(move):
            raise IllegalMoveError(f"Illegal move: {move}", {"move": str(move)})
        self._captured.append(self._squares[move.to_sq])
        self._squares[move.to_sq] = self._squares[move.from_sq]
        self._squares[move.from_sq] = None
        self.move_stack.append(move)
        self.turn = self.turn.opposite
        self._winner_known = False

    def pop(self) -> Move:
        """Undo the last move and return it."""
        move = self.move_stack.pop()
        self._squares[move.from_sq] = self._squares[move.to_sq]
        self._squares[move.to_sq] = self._captured.pop()
        self.turn = self.turn.opposite
        self._winner_known = False
        return move

    def apply(self, move: Move) -> "Board":
        """Return a new board with ``move`` made; this board is unchanged."""
        child = self.copy()
        child.push(move)
        return child

    # ── Game status ─────────────────────────────────────────────────────────

    def piece_count(self, side: Side) -> int:
        return sum(1 for piece in self._squares if piece is side)

    def region_sizes(self, side: Side) -> List[int]:
        """Sizes of the 8-connected groups of ``side``'s pieces, largest first."""
        seen = set()
        sizes = []
        for start, piece in enumerate(self._squares):
            if piece is not side or start in seen:
                continue
            seen.add(start)
            queue = deque([start])
            size = 0
            while queue:
                sq = queue.popleft()
                size += 1
                col, row = sq % BOARD_SIZE, sq // BOARD_SIZE
                for dcol, drow in DIRECTIONS:
                    c, r = col + dcol, row + drow
                    if not (0 <= c < BOARD_SIZE and 0 <= r < BOARD_SIZE):
                        continue
                    nb = r * BOARD_SIZE + c
                    if nb not in seen and self._squares[nb] is side:
                        seen.add(nb)
                        queue.append(nb)
            sizes.append(size)
        sizes.sort(reverse=True)
        return sizes

    def winner(self) -> Optional[Side]:
        """The side whose pieces are all connected, if any.

        When both sides are connected the side that just moved wins.
        """
        if not self._winner_known:
            black = len(self.region_sizes(Side.BLACK)) == 1
            white = len(self.region_sizes(Side.WHITE)) == 1
            if black and white:
                self._winner = self.turn.opposite
            elif black:
                self._winner = Side.BLACK
            elif white:
                self._winner = Side.WHITE
            else:
                self._winner = None
            self._winner_known = True
        return self._winner

    def is_game_over(self) -> bool:
        return self.winner() is not None or len(self.move_stack) >= self.move_limit

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares and self.turn is other.turn

    __hash__ = None

    def __str__(self) -> str:
        lines = []
        for r, row in zip(range(BOARD_SIZE, 0, -1), self.layout()):
            lines.append(f"{r} " + " ".join(row))
        lines.append("  " + " ".join(COLUMNS))
        lines.append(f"Next move: {self.turn.full_name}")
        return "\n".join(lines)
