from __future__ import annotations

# Facade module that re-exports the Othello core.
# The Flask app and tests import from here; single-responsibility modules live under othello_core/*.

import sys

from othello_core.board import (  # noqa: F401
    SIZE,
    DIRECTIONS,
    Board,
    Cell,
    Coord,
    Player,
    opponent,
)
from othello_core.state import GameState  # noqa: F401
from othello_core.moves import (  # noqa: F401
    scan_line,
    is_valid_move,
    flips_for_move,
    apply_move,
    legal_moves,
    has_legal_move,
    score,
)
from othello_core.engine import OthelloGame, Winner, winner_for  # noqa: F401
from othello_core.notation import format_move, parse_move  # noqa: F401


def main() -> None:
    # CLI driver delegated to othello_core.cli
    from othello_core.cli import main as _main
    sys.exit(_main())


if __name__ == '__main__':
    main()
