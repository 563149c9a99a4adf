from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Optional

from .board import Board, Cell, Coord, Player
from .moves import apply_move, has_legal_move, is_valid_move, legal_moves, score
from .state import GameState

logger = logging.getLogger(__name__)


class Winner(str, Enum):
    BLACK = 'B'
    WHITE = 'W'
    DRAW = 'draw'


def winner_for(board: Board) -> Winner:
    """Majority colour by disc count; equal counts are a draw."""
    counts = score(board)
    if counts[Cell.BLACK] > counts[Cell.WHITE]:
        return Winner.BLACK
    if counts[Cell.WHITE] > counts[Cell.BLACK]:
        return Winner.WHITE
    return Winner.DRAW


class OthelloGame:
    """
    Owns one GameState and enforces turn order on top of the pure move rules.

    The UI asks for legal moves, then calls attempt_move(); everything else is a
    read-only query. A finished game is never restarted in place: build a new
    OthelloGame instead.
    """

    def __init__(self, state: Optional[GameState] = None) -> None:
        self._state = state if state is not None else GameState.new()
        self._flipped: List[Coord] = []
        if not self._state.game_over:
            self._settle_turn()

    @property
    def state(self) -> GameState:
        return self._state

    def get_board(self) -> Board:
        return self._state.board.copy()

    def get_current_player(self) -> Player:
        return self._state.current

    def is_game_over(self) -> bool:
        return self._state.game_over

    def last_pass(self) -> Optional[Player]:
        return self._state.passed

    def last_flipped(self) -> List[Coord]:
        """Discs flipped by the most recent successful move."""
        return list(self._flipped)

    def legal_moves(self, player: Optional[Player] = None) -> List[Coord]:
        if self._state.game_over:
            return []
        who = player if player is not None else self._state.current
        return legal_moves(self._state.board, who)

    def score(self) -> Dict[Cell, int]:
        return score(self._state.board)

    def attempt_move(self, row: int, col: int, player: Optional[Player] = None) -> bool:
        """Validates and applies a move for the side to move. Returns False if rejected."""
        st = self._state
        if st.game_over:
            logger.debug("rejected (%d, %d): game is over", row, col)
            return False
        if player is not None and Cell(player) != st.current:
            logger.debug("rejected %s at (%d, %d): %s to move", Cell(player).name, row, col, st.current.name)
            return False
        if not is_valid_move(st.board, st.current, row, col):
            logger.debug("rejected %s at (%d, %d): illegal", st.current.name, row, col)
            return False
        self._flipped = apply_move(st.board, st.current, row, col)
        logger.debug("%s played (%d, %d), flipped %d", st.current.name, row, col, len(self._flipped))
        st.current = st.other_player()
        st.passed = None
        self._settle_turn()
        return True

    def get_winner(self) -> Winner:
        if not self._state.game_over:
            raise RuntimeError('Game is not over')
        return winner_for(self._state.board)

    def _settle_turn(self) -> None:
        # Forced pass when only the side to move is blocked; game over when both are.
        st = self._state
        if has_legal_move(st.board, st.current):
            return
        other = st.other_player()
        if has_legal_move(st.board, other):
            logger.info("%s has no legal move, passing to %s", st.current.name, other.name)
            st.passed = st.current
            st.current = other
            return
        st.game_over = True
        counts = self.score()
        logger.info("game over: black=%d white=%d", counts[Cell.BLACK], counts[Cell.WHITE])
