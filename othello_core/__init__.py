"""
Othello core Python package.

Pure game logic with no I/O, shared by the Flask app, the terminal CLI and tests.
Modules:
- board.py: Board, Cell, Coord, DIRECTIONS
- moves.py: line scanning, move validation and disc flipping
- state.py: GameState
- engine.py: OthelloGame (turn order, forced passes, end of game), Winner
- notation.py: move parsing/formatting
- cli.py: terminal front end
"""
