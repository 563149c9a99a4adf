from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .board import Board, Cell, Player, opponent


@dataclass
class GameState:
    """The single mutable game object: board, side to move, and end-of-game flag."""
    board: Board = field(default_factory=Board.initial)
    current: Player = Cell.BLACK
    game_over: bool = False
    passed: Optional[Player] = None  # side skipped by the last forced pass

    @classmethod
    def new(cls) -> 'GameState':
        return cls(board=Board.initial(), current=Cell.BLACK)

    def other_player(self) -> Player:
        return opponent(self.current)
