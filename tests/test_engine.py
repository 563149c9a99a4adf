import unittest

from game import Board, Cell, GameState, OthelloGame, Winner, is_valid_move

E = "........"


def state_from_rows(rows, current=Cell.BLACK):
    return GameState(board=Board.from_rows(rows), current=current)


class TestTurnTracker(unittest.TestCase):
    def test_given_new_game_then_black_to_move_and_not_over(self):
        game = OthelloGame()
        self.assertEqual(game.get_current_player(), Cell.BLACK)
        self.assertFalse(game.is_game_over())
        self.assertIsNone(game.last_pass())
        self.assertEqual(game.score(), {Cell.BLACK: 2, Cell.WHITE: 2})

    def test_given_legal_move_when_attempted_then_applied_and_turn_switches(self):
        game = OthelloGame()
        self.assertTrue(game.attempt_move(2, 3))
        self.assertEqual(game.get_current_player(), Cell.WHITE)
        self.assertEqual(game.last_flipped(), [(3, 3)])
        self.assertEqual(game.score(), {Cell.BLACK: 4, Cell.WHITE: 1})
        self.assertEqual(game.legal_moves(), [(2, 2), (2, 4), (4, 2)])

    def test_given_occupied_cell_when_attempted_then_rejected_and_state_unchanged(self):
        game = OthelloGame()
        before = game.get_board()
        self.assertFalse(game.attempt_move(3, 3))
        self.assertFalse(game.attempt_move(3, 4))
        self.assertEqual(game.get_board(), before)
        self.assertEqual(game.get_current_player(), Cell.BLACK)

    def test_given_move_legal_only_for_other_side_when_attempted_then_rejected(self):
        game = OthelloGame()
        # (2, 4) is a legal opening for White but Black is to move
        self.assertTrue(is_valid_move(game.get_board(), Cell.WHITE, 2, 4))
        self.assertFalse(game.attempt_move(2, 4))
        # Explicitly claiming to be White is rejected too
        self.assertFalse(game.attempt_move(2, 4, Cell.WHITE))
        self.assertFalse(game.attempt_move(2, 3, Cell.WHITE))
        self.assertEqual(game.get_current_player(), Cell.BLACK)
        self.assertTrue(game.attempt_move(2, 3, Cell.BLACK))

    def test_given_off_board_move_when_attempted_then_rejected(self):
        game = OthelloGame()
        self.assertFalse(game.attempt_move(99, 99))
        self.assertFalse(game.attempt_move(-1, 0))

    def test_given_board_snapshot_when_mutated_then_game_unaffected(self):
        game = OthelloGame()
        snap = game.get_board()
        snap.place(0, 0, Cell.WHITE)
        self.assertTrue(game.get_board().is_empty(0, 0))

    def test_given_opponent_blocked_after_move_then_turn_passes_back(self):
        game = OthelloGame(state_from_rows(["BW......"] + [E] * 6 + ["BW......"]))
        self.assertTrue(game.attempt_move(0, 2))
        self.assertFalse(game.is_game_over())
        self.assertEqual(game.get_current_player(), Cell.BLACK)
        self.assertEqual(game.last_pass(), Cell.WHITE)
        self.assertEqual(game.legal_moves(), [(7, 2)])

        # Next successful move clears the pass marker and ends the game
        self.assertTrue(game.attempt_move(7, 2))
        self.assertIsNone(game.last_pass())
        self.assertTrue(game.is_game_over())
        self.assertEqual(game.get_winner(), Winner.BLACK)

    def test_given_blocked_side_to_move_when_constructed_then_pass_is_applied(self):
        game = OthelloGame(state_from_rows(["BW......"] + [E] * 6 + ["BW......"], current=Cell.WHITE))
        self.assertEqual(game.get_current_player(), Cell.BLACK)
        self.assertEqual(game.last_pass(), Cell.WHITE)


    def test_given_state_when_other_player_then_matches_opponent(self):
        self.assertEqual(GameState.new().other_player(), Cell.WHITE)
        self.assertEqual(GameState(current=Cell.WHITE).other_player(), Cell.BLACK)
        with self.assertRaises(ValueError):
            GameState(current=Cell.EMPTY).other_player()


class TestTerminalDetector(unittest.TestCase):
    def test_given_both_sides_blocked_after_move_then_game_over(self):
        game = OthelloGame(state_from_rows(["BW......"] + [E] * 7))
        self.assertTrue(game.attempt_move(0, 2))
        self.assertTrue(game.is_game_over())
        self.assertEqual(game.legal_moves(), [])
        self.assertEqual(game.get_winner(), Winner.BLACK)

    def test_given_game_over_when_attempting_move_then_rejected(self):
        game = OthelloGame(state_from_rows(["BW......"] + [E] * 7))
        game.attempt_move(0, 2)
        self.assertFalse(game.attempt_move(0, 3))
        self.assertFalse(game.attempt_move(5, 5))
        self.assertTrue(game.is_game_over())

    def test_given_full_even_board_then_draw(self):
        game = OthelloGame(state_from_rows(["BBBBBBBB"] * 4 + ["WWWWWWWW"] * 4))
        self.assertTrue(game.is_game_over())
        self.assertEqual(game.get_winner(), Winner.DRAW)

    def test_given_white_majority_then_white_wins(self):
        game = OthelloGame(state_from_rows(["BBBBBBBB"] * 3 + ["WWWWWWWW"] * 5))
        self.assertTrue(game.is_game_over())
        self.assertEqual(game.get_winner(), Winner.WHITE)

    def test_given_game_in_progress_when_asking_winner_then_runtime_error(self):
        with self.assertRaises(RuntimeError):
            OthelloGame().get_winner()


if __name__ == '__main__':
    unittest.main(verbosity=2)
