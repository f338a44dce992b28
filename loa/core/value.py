"""Search values.

A :class:`Value` is either a heuristic score or one of four distinguished
outcomes. They are totally ordered::

    NEG_INF < LOSS < Value.score(n) for any n < WIN < POS_INF

``LOSS``/``WIN`` mark decided games and sit strictly outside every heuristic
score. ``NEG_INF``/``POS_INF`` are the bounds of the initial alpha-beta
window and the seeds of the running extreme at each node, so that a decided
loss still counts as an improvement over "nothing found yet".
"""

from __future__ import annotations

from dataclasses import dataclass

# Integer used when a decided value has to be shown as a number.
WIN_SCORE = 1_000_000

_NEG_INF = -2
_LOSS = -1
_SCORE = 0
_WIN = 1
_POS_INF = 2


@dataclass(frozen=True, order=True)
class Value:
    rank: int
    points: int = 0

    @staticmethod
    def score(points: int) -> "Value":
        return Value(_SCORE, points)

    @property
    def is_decided(self) -> bool:
        """True for WIN and LOSS."""
        return self.rank in (_WIN, _LOSS)

    @property
    def is_infinite(self) -> bool:
        return self.rank in (_NEG_INF, _POS_INF)

    def __neg__(self) -> "Value":
        return Value(-self.rank, -self.points)

    def to_score(self) -> int:
        """Integer rendering: heuristic points, or +-WIN_SCORE when decided."""
        if self.rank == _SCORE:
            return self.points
        if self.rank > 0:
            return WIN_SCORE if self.rank == _WIN else WIN_SCORE + 1
        return -WIN_SCORE if self.rank == _LOSS else -WIN_SCORE - 1

    def __str__(self) -> str:
        if self.rank == _SCORE:
            return str(self.points)
        return {_NEG_INF: "-inf", _LOSS: "loss", _WIN: "win", _POS_INF: "+inf"}[self.rank]


NEG_INF = Value(_NEG_INF)
LOSS = Value(_LOSS)
WIN = Value(_WIN)
POS_INF = Value(_POS_INF)
