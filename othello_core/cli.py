from __future__ import annotations

import argparse
from typing import List, Optional

from .board import Cell
from .engine import OthelloGame, Winner
from .notation import format_move, parse_move


def _render(game: OthelloGame, show_moves: bool) -> str:
    marks = set(game.legal_moves()) if show_moves else None
    return game.get_board().pretty(marks)


def _status(game: OthelloGame) -> str:
    counts = game.score()
    tally = f"Black {counts[Cell.BLACK]} - White {counts[Cell.WHITE]}"
    if game.is_game_over():
        winner = game.get_winner()
        if winner == Winner.DRAW:
            return f"{tally}. It's a draw!"
        return f"{tally}. {winner.name.capitalize()} wins!"
    return f"{tally}. Current turn: {game.get_current_player().name.capitalize()}"


def _report_pass(game: OthelloGame) -> None:
    skipped = game.last_pass()
    if skipped is not None:
        print(f"{skipped.name.capitalize()} has no legal move and passes.")


def replay(game: OthelloGame, moves: List[str]) -> Optional[str]:
    """Plays a list of move strings in order. Returns an error message on the first rejected move."""
    for i, text in enumerate(moves, start=1):
        try:
            r, c = parse_move(text)
        except ValueError as e:
            return f"move {i}: {e}"
        if not game.attempt_move(r, c):
            return f"move {i}: {text} is not legal for {game.get_current_player().name.capitalize()}"
    return None


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Othello for two players at one terminal')
    parser.add_argument('--moves', nargs='*', default=[], help='Moves to replay first, e.g. d3 c5 f6')
    parser.add_argument('--play', action='store_true', help='Play interactively after any replayed moves')
    parser.add_argument('--show-moves', action='store_true', help='Mark legal cells with *')
    args = parser.parse_args(argv)

    game = OthelloGame()
    err = replay(game, args.moves)
    if err is not None:
        print(f"error: {err}")
        return 2

    print(_render(game, args.show_moves))
    print(_status(game))
    if not args.play:
        if not game.is_game_over():
            print('Legal moves:', ' '.join(format_move(m) for m in game.legal_moves()))
        return 0

    while not game.is_game_over():
        player = game.get_current_player().name.capitalize()
        text = input(f"{player} to move (e.g. d3 or r,c; q to quit): ").strip()
        if text.lower() in ('q', 'quit', 'exit'):
            return 0
        try:
            r, c = parse_move(text)
        except ValueError:
            print('Could not parse. Try again.')
            continue
        if not game.attempt_move(r, c):
            print('Illegal move. Legal moves:', ' '.join(format_move(m) for m in game.legal_moves()))
            continue
        _report_pass(game)
        print(_render(game, args.show_moves))
        print(_status(game))
    return 0
