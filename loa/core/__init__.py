"""Core engine components: board, evaluator, search values and search."""

from .board import Board, Move, Side
from .evaluator import Evaluator
from .search import SearchEngine, SearchResult, Sense
from .value import LOSS, WIN, Value
