from __future__ import annotations

from typing import Dict, List

from .board import DIRECTIONS, Board, Cell, Coord, Player, opponent


def scan_line(board: Board, player: Player, r: int, c: int, dr: int, dc: int) -> List[Coord]:
    """
    Walks outward from (r, c) in direction (dr, dc) collecting the contiguous run of
    opponent discs. Returns the run if it is closed by a disc of `player` before the
    edge, otherwise an empty list. The start cell itself is not inspected.
    """
    opp = opponent(player)
    run: List[Coord] = []
    rr, cc = r + dr, c + dc
    while board.in_bounds(rr, cc) and board.at(rr, cc) == opp:
        run.append((rr, cc))
        rr += dr
        cc += dc
    if run and board.in_bounds(rr, cc) and board.at(rr, cc) == player:
        return run
    return []


def is_valid_move(board: Board, player: Player, r: int, c: int) -> bool:
    """Checks whether `player` may place a disc at (r, c)."""
    if not board.in_bounds(r, c) or not board.is_empty(r, c):
        return False
    return any(scan_line(board, player, r, c, dr, dc) for dr, dc in DIRECTIONS)


def flips_for_move(board: Board, player: Player, r: int, c: int) -> List[Coord]:
    """Collects every disc a placement at (r, c) would flip, against the current board."""
    flips: List[Coord] = []
    for dr, dc in DIRECTIONS:
        flips.extend(scan_line(board, player, r, c, dr, dc))
    return sorted(flips)


def apply_move(board: Board, player: Player, r: int, c: int) -> List[Coord]:
    """
    Places `player`'s disc at (r, c) and flips every bracketed run.
    The move must already be known to be legal. Returns the flipped coordinates.
    """
    flips = flips_for_move(board, player, r, c)
    board.place(r, c, player)
    for fr, fc in flips:
        board.place(fr, fc, player)
    return flips


def legal_moves(board: Board, player: Player) -> List[Coord]:
    """Calculates all legal placements for `player`."""
    return [(r, c) for (r, c) in board.coords() if is_valid_move(board, player, r, c)]


def has_legal_move(board: Board, player: Player) -> bool:
    return any(is_valid_move(board, player, r, c) for (r, c) in board.coords())


def score(board: Board) -> Dict[Cell, int]:
    """Disc count per colour."""
    return {Cell.BLACK: board.count(Cell.BLACK), Cell.WHITE: board.count(Cell.WHITE)}
