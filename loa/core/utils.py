from typing import Optional

from loa.core.board import Move
from loa.core.value import Value


def format_info(depth: int, value: Value, nodes: int, elapsed: float, move: Optional[Move]) -> str:
    """One-line search summary; ``elapsed`` is in seconds."""
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    score_str = str(value) if value.is_decided else f"h {value}"
    move_str = str(move) if move else "-"
    return (
        f"info depth {depth} score {score_str} nodes {nodes} nps {nps} "
        f"time {int(elapsed * 1000)} move {move_str}"
    )
