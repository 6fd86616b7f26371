"""
Tests for GameSession: turn order, win detection, undo and results.
"""

import unittest

from engine import Board, GameResult, GameSession, IllegalMoveError, Player
from engine.legality import PLACEMENT_POLICY
from engine.move_generator import Move
from schemas.game_config import EngineConfig
from tests.utils_game_states import CORNER_TROMINO, DOMINO_H, SINGLE, owned_cells


class TestPlayMove(unittest.TestCase):

    def setUp(self):
        self.session = GameSession(5, [SINGLE])

    def test_initial_state(self):
        self.assertEqual(self.session.board, Board.empty(5))
        self.assertIs(self.session.current_player, Player.RED)
        self.assertFalse(self.session.is_game_over())
        self.assertEqual(self.session.history, [])

    def test_illegal_move_is_rejected(self):
        with self.assertRaises(IllegalMoveError):
            self.session.play_move(Move.from_shape(2, 2, SINGLE))
        self.assertEqual(self.session.board, Board.empty(5))
        self.assertIs(self.session.current_player, Player.RED)

    def test_illegal_move_error_is_value_error(self):
        self.assertTrue(issubclass(IllegalMoveError, ValueError))

    def test_move_that_blocks_opponent_wins(self):
        board = self.session.play_move(Move.from_shape(0, 0, SINGLE))

        self.assertEqual(owned_cells(board, Player.RED), [(0, 0)])
        self.assertIs(self.session.current_player, Player.BLUE)
        self.assertTrue(self.session.is_game_over())
        self.assertIs(self.session.winner, Player.RED)

        with self.assertRaises(IllegalMoveError):
            self.session.play_move(Move.from_shape(4, 4, SINGLE))
        with self.assertRaises(IllegalMoveError):
            self.session.play_ai_turn()

    def test_history_records_moves(self):
        self.session.play_move(Move.from_shape(0, 0, SINGLE))
        record = self.session.history[0]
        self.assertEqual(record.turn_number, 1)
        self.assertIs(record.player, Player.RED)
        self.assertEqual(record.board_before, Board.empty(5))
        self.assertFalse(record.by_ai)


class TestUndo(unittest.TestCase):

    def test_undo_with_no_history(self):
        self.assertIsNone(GameSession(5, [SINGLE]).undo())

    def test_undo_restores_board_turn_and_winner(self):
        session = GameSession(5, [SINGLE])
        session.play_move(Move.from_shape(0, 0, SINGLE))
        self.assertTrue(session.is_game_over())

        record = session.undo()

        self.assertEqual(record.move, Move.from_shape(0, 0, SINGLE))
        self.assertEqual(session.board, Board.empty(5))
        self.assertIs(session.current_player, Player.RED)
        self.assertIsNone(session.winner)
        self.assertEqual(session.history, [])

    def test_undo_keeps_earlier_placements(self):
        session = GameSession(7, [SINGLE, DOMINO_H], policy=PLACEMENT_POLICY)
        session.play_move(Move.from_shape(0, 0, SINGLE))
        session.play_move(Move.from_shape(6, 6, SINGLE))
        after_two = session.board
        session.play_move(Move.from_shape(1, 1, DOMINO_H))

        session.undo()

        self.assertEqual(session.board, after_two)
        self.assertIs(session.current_player, Player.RED)
        self.assertEqual(len(session.history), 2)


class TestAiTurns(unittest.TestCase):

    def test_ai_opening_move(self):
        session = GameSession(5, [SINGLE, DOMINO_H], depth=1)
        move = session.play_ai_turn()

        self.assertIsNotNone(move)
        self.assertEqual((move.anchor_row, move.anchor_col), (0, 0))
        self.assertTrue(session.history[-1].by_ai)
        self.assertIs(session.winner, Player.RED)

    def test_player_without_moves_loses(self):
        # A shape wider than the board has no anchor at all.
        session = GameSession(5, [[[True] * 6]])
        self.assertIsNone(session.play_ai_turn())
        self.assertIs(session.winner, Player.BLUE)
        self.assertEqual(session.board, Board.empty(5))

    def test_self_play_reaches_a_winner(self):
        session = GameSession(7, [SINGLE, DOMINO_H, CORNER_TROMINO], policy=PLACEMENT_POLICY, depth=1)
        for _ in range(7 * 7):
            if session.is_game_over():
                break
            mover = session.current_player
            move = session.play_ai_turn()
            if move is not None:
                self.assertIs(session.history[-1].player, mover)

        self.assertTrue(session.is_game_over())
        result = session.get_result()
        self.assertIsInstance(result, GameResult)
        self.assertIn(result.winner, (Player.RED, Player.BLUE))
        self.assertEqual(sum(result.cells_owned.values()), int((session.board.grid != 0).sum()))

    def test_forfeit(self):
        session = GameSession(5, [SINGLE])
        session.forfeit(Player.RED)
        self.assertIs(session.winner, Player.BLUE)
        self.assertTrue(session.is_game_over())


class TestQueries(unittest.TestCase):

    def test_legal_moves_and_mobility(self):
        session = GameSession(5, [SINGLE])
        self.assertEqual(len(session.legal_moves()), 1)
        self.assertEqual(len(session.legal_moves(Player.BLUE)), 1)
        mobility = session.mobility()
        self.assertEqual((mobility.player_moves, mobility.opponent_moves), (1, 1))

    def test_suggest_moves_prefers_open_positions(self):
        session = GameSession(5, [SINGLE, DOMINO_H])
        # Opening single leaves RED 3 placements, opening domino leaves 6.
        self.assertEqual(session.suggest_moves(), [Move.from_shape(0, 0, DOMINO_H)])
        self.assertEqual(session.suggest_moves()[0].piece_index, 1)

    def test_suggest_moves_returns_every_tied_move(self):
        session = GameSession(7, [SINGLE], policy=PLACEMENT_POLICY)
        moves = session.suggest_moves(Player.RED)
        self.assertEqual([(m.anchor_row, m.anchor_col) for m in moves], [(0, 0), (0, 6), (6, 0), (6, 6)])

    def test_get_result_while_running(self):
        result = GameSession(5, [SINGLE]).get_result()
        self.assertIsNone(result.winner)
        self.assertEqual(result.cells_owned, {Player.RED: 0, Player.BLUE: 0})

    def test_from_config(self):
        config = EngineConfig(board_size=9, search_depth=3, adjacency_rule="corner_not_edge",
                              first_move_rule="per_player_any_corner")
        session = GameSession.from_config(config, [SINGLE])
        self.assertEqual(session.board.size, 9)
        self.assertEqual(session.depth, 3)
        self.assertEqual(session.policy, PLACEMENT_POLICY)

    def test_rejects_invalid_depth(self):
        with self.assertRaises(ValueError):
            GameSession(5, [SINGLE], depth=0)


if __name__ == '__main__':
    unittest.main()
