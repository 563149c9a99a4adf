import argparse
import random
import sys
from typing import List, Tuple
sys.path.append('.')
import game  # type: ignore


def play_random(seed: int) -> Tuple[int, List[str]]:
    """Plays one random game, checking engine invariants after every move. Returns (plies, problems)."""
    rng = random.Random(seed)
    g = game.OthelloGame()
    problems: List[str] = []
    plies = 0
    while not g.is_game_over():
        board = g.get_board()
        mover = g.get_current_player()
        moves = g.legal_moves()
        if not moves:
            problems.append(f"ply {plies}: {mover.name} to move with no legal moves")
            break
        for r, c in board.coords():
            if not board.is_empty(r, c) and game.is_valid_move(board, mover, r, c):
                problems.append(f"ply {plies}: occupied {game.format_move((r, c))} reported legal")
        r, c = rng.choice(moves)
        expected = set(game.flips_for_move(board, mover, r, c))
        if not g.attempt_move(r, c):
            problems.append(f"ply {plies}: legal move {game.format_move((r, c))} rejected")
            break
        after = g.get_board()
        if after.occupied() != board.occupied() + 1:
            problems.append(f"ply {plies}: disc count {board.occupied()} -> {after.occupied()}")
        changed = {rc for rc in board.coords() if board.at(*rc) != after.at(*rc)} - {(r, c)}
        if changed != expected:
            problems.append(f"ply {plies}: flipped {sorted(changed)} expected {sorted(expected)}")
        plies += 1
    if g.is_game_over():
        b = g.get_board()
        if game.has_legal_move(b, game.Cell.BLACK) or game.has_legal_move(b, game.Cell.WHITE):
            problems.append("game over while a legal move exists")
    return plies, problems


def main():
    parser = argparse.ArgumentParser(description='Random-playout invariant check for the Othello engine')
    parser.add_argument('--games', type=int, default=200)
    parser.add_argument('--seed', type=int, default=0)
    args = parser.parse_args()

    random.seed(args.seed)
    bad = 0
    for _ in range(args.games):
        seed = random.randrange(1_000_000)
        plies, problems = play_random(seed)
        if problems:
            bad += 1
            print(f"seed={seed} plies={plies}")
            for p in problems:
                print(f"  {p}")
    print(f"Checked {args.games} games, failures={bad}")
    return 1 if bad else 0


if __name__ == '__main__':
    sys.exit(main())
