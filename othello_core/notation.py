from __future__ import annotations

from .board import SIZE, Board, Coord

_COLS = 'abcdefgh'


def format_move(coord: Coord) -> str:
    """Algebraic form: column letter then 1-based row, so (2, 3) -> 'd3'."""
    r, c = coord
    if not Board.in_bounds(r, c):
        raise ValueError(f'off-board coordinate: {coord}')
    return f"{_COLS[c]}{r + 1}"


def parse_move(text: str) -> Coord:
    """Parses 'd3', 'r,c' or 'r c' (0-indexed) into a (row, col) coordinate."""
    s = text.strip().lower()
    if len(s) == 2 and s[0] in _COLS and s[1].isdigit():
        coord = (int(s[1]) - 1, _COLS.index(s[0]))
    else:
        sep = ',' if ',' in s else ' '
        parts = [t for t in s.split(sep) if t.strip() != '']
        if len(parts) != 2:
            raise ValueError(f'cannot parse move: {text!r}')
        try:
            coord = (int(parts[0]), int(parts[1]))
        except ValueError:
            raise ValueError(f'cannot parse move: {text!r}') from None
    if not (0 <= coord[0] < SIZE and 0 <= coord[1] < SIZE):
        raise ValueError(f'move off the board: {text!r}')
    return coord
