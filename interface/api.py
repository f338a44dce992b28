"""FastAPI REST interface for the engine."""

import logging
import threading

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import List, Optional

from loa.core.board import Board, Move, Side
from loa.core.errors import GameOverError, IllegalMoveError, InvalidPositionError
from loa.core.evaluator import Evaluator
from loa.core.search import SearchEngine
from loa.config import CONFIG

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

engine = SearchEngine(Evaluator(), depth=CONFIG.search.depth)
board = Board(move_limit=CONFIG.game.move_limit)
_board_lock = threading.Lock()


class PositionRequest(BaseModel):
    layout: List[str]  # 8 rows, row 8 first, "b"/"w"/"-"
    turn: str = "black"


class MoveRequest(BaseModel):
    move: str  # e.g. "b1-b3"


class SearchRequest(BaseModel):
    depth: Optional[int] = None


def _winner_name(b: Board) -> Optional[str]:
    winner = b.winner()
    return winner.full_name if winner else None


@app.get("/board")
def get_board():
    with _board_lock:
        return {
            "layout": board.layout(),
            "turn": board.turn.full_name,
            "legal_moves": [str(m) for m in board.legal_moves()],
            "is_game_over": board.is_game_over(),
            "winner": _winner_name(board),
            "moves_played": len(board.move_stack),
        }


@app.post("/position")
def set_position(req: PositionRequest):
    with _board_lock:
        try:
            board.set_layout(req.layout, Side.from_name(req.turn))
        except (InvalidPositionError, ValueError) as e:
            raise HTTPException(status_code=400, detail=f"Invalid position: {e}")
        return {"layout": board.layout(), "turn": board.turn.full_name}


@app.post("/move")
def make_move(req: MoveRequest):
    with _board_lock:
        try:
            move = Move.from_str(req.move)
            board.push(move)
        except IllegalMoveError as e:
            raise HTTPException(status_code=400, detail=e.message)
        except GameOverError:
            raise HTTPException(status_code=400, detail="Game is already over")
        return {
            "layout": board.layout(),
            "move": str(move),
            "turn": board.turn.full_name,
            "winner": _winner_name(board),
        }


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    with _board_lock:
        if board.is_game_over():
            raise HTTPException(status_code=400, detail="Game is already over")
        depth = req.depth or CONFIG.search.depth
        if depth < 1:
            raise HTTPException(status_code=400, detail="Depth must be at least 1")
        search_board = board.copy()

    searcher = SearchEngine(engine.evaluator, depth=depth)
    result = searcher.search_best_move(search_board)
    return {
        "best_move": str(result.move),
        "score": result.value.to_score(),
        "value": str(result.value),
        "nodes": searcher.nodes,
        "depth": depth,
    }


@app.get("/evaluate")
def evaluate(side: str = "white"):
    try:
        target = Side.from_name(side)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    with _board_lock:
        return {"side": target.full_name, **engine.evaluator.breakdown(board, target)}


@app.post("/reset")
def reset_board():
    with _board_lock:
        board.reset()
        return {"layout": board.layout(), "turn": board.turn.full_name}


def run():
    import uvicorn

    logging.basicConfig(level=CONFIG.log_level)
    uvicorn.run(app, host="127.0.0.1", port=CONFIG.ui.api_port)
