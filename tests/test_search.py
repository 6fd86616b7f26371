"""
Tests for minimax search, alpha-beta pruning and the automated turn.
"""

import unittest

import pytest

from engine import (
    MAX_SEARCH_DEPTH,
    WIN_SCORE,
    Board,
    Player,
    apply_move,
    find_best_move,
    make_ai_turn,
    minimax,
)
from engine.evaluation import evaluate_board
from engine.legality import DEFAULT_POLICY, PLACEMENT_POLICY
from engine.move_generator import LegalMoveGenerator, Move
from engine.pieces import validate_catalog
from engine.search import INFINITY, MinimaxSearch, validate_depth
from tests.utils_game_states import (
    DOMINO_H,
    DOMINO_V,
    SINGLE,
    board_from_rows,
    generate_random_valid_state,
    owned_cells,
)


def reference_minimax(board, player, pieces, depth, maximizing, policy):
    """Plain exhaustive minimax used as an oracle."""
    generator = LegalMoveGenerator(policy)
    if depth == 0:
        return evaluate_board(board, player, pieces, generator)
    mover = player if maximizing else player.opponent
    moves = generator.get_legal_moves(board, mover, pieces)
    if not moves:
        return -WIN_SCORE if maximizing else WIN_SCORE
    scores = [
        reference_minimax(board.apply(m.positions(), mover), player, pieces, depth - 1,
                          not maximizing, policy)
        for m in moves
    ]
    return max(scores) if maximizing else min(scores)


class TestMinimax(unittest.TestCase):

    def setUp(self):
        self.board = board_from_rows(["R....", ".....", ".....", ".....", "....."])

    def test_depth_zero_is_evaluation(self):
        self.assertEqual(minimax(self.board, Player.RED, [SINGLE], 0, -INFINITY, INFINITY, True), 1)
        self.assertEqual(minimax(self.board, Player.BLUE, [SINGLE], 0, -INFINITY, INFINITY, False), -1)

    def test_maximizing_side_without_moves_loses(self):
        score = minimax(self.board, Player.BLUE, [SINGLE], 2, -INFINITY, INFINITY, True)
        self.assertEqual(score, -WIN_SCORE)

    def test_negative_depth_rejected(self):
        with self.assertRaises(ValueError):
            minimax(self.board, Player.RED, [SINGLE], -1, -INFINITY, INFINITY, True)

    def test_minimizing_side_without_moves_wins_for_root(self):
        score = minimax(self.board, Player.RED, [SINGLE], 1, -INFINITY, INFINITY, False)
        self.assertEqual(score, WIN_SCORE)


class TestFindBestMove(unittest.TestCase):

    def test_depth_one_scores(self):
        board = board_from_rows(["R....", ".....", ".....", ".....", "....."])
        catalog = validate_catalog([SINGLE, DOMINO_H])
        result = MinimaxSearch().search(board, Player.RED, catalog, depth=1)

        self.assertEqual(result.root_scores, [8, 10, 14])
        self.assertEqual(result.score, 14)
        self.assertEqual(result.move, Move.from_shape(1, 1, DOMINO_H))
        self.assertEqual(result.move.piece_index, 1)
        self.assertEqual(find_best_move(board, Player.RED, [SINGLE, DOMINO_H], depth=1), result.move)

    def test_blocking_reply_scores_as_win(self):
        # BLUE never gets a legal opening once RED has placed, so every root move wins.
        board = board_from_rows(["R....", ".....", ".....", ".....", "....."])
        result = MinimaxSearch().search(board, Player.RED, validate_catalog([SINGLE, DOMINO_H]), depth=2)
        self.assertEqual(result.root_scores, [WIN_SCORE] * 3)
        self.assertEqual(result.move, Move.from_shape(1, 1, SINGLE))

    def test_ties_keep_first_generated_move(self):
        board = board_from_rows([".....", ".....", "..R..", ".....", "....."])
        result = MinimaxSearch().search(board, Player.RED, validate_catalog([SINGLE]), depth=1)
        self.assertEqual(result.root_scores, [6, 6, 6, 6])
        self.assertEqual((result.move.anchor_row, result.move.anchor_col), (1, 1))

    def test_no_moves_returns_none(self):
        board = board_from_rows(["R....", ".....", ".....", ".....", "....."])
        result = MinimaxSearch().search(board, Player.BLUE, validate_catalog([SINGLE]), depth=2)
        self.assertIsNone(result.move)
        self.assertIsNone(result.score)
        self.assertIsNone(find_best_move(board, Player.BLUE, [SINGLE]))

    def test_search_does_not_mutate_board(self):
        board = board_from_rows(["R....", ".....", ".....", ".....", "....B"])
        before = board.grid.copy()
        find_best_move(board, Player.RED, [SINGLE, DOMINO_H, DOMINO_V], depth=3)
        self.assertTrue((board.grid == before).all())

    def test_returned_move_is_legal(self):
        catalog = [SINGLE, DOMINO_H, DOMINO_V]
        for seed in range(3):
            board, player = generate_random_valid_state(6, catalog, 4, seed=seed)
            move = find_best_move(board, player, catalog, depth=2, policy=PLACEMENT_POLICY)
            if move is not None:
                self.assertTrue(PLACEMENT_POLICY.is_legal(board, move, player))


class TestAlphaBeta(unittest.TestCase):
    """Pruning changes the work done, never the decision."""

    def assert_same_decision(self, board, player, catalog, depth, policy):
        pruned = MinimaxSearch(policy, prune=True).search(board, player, catalog, depth)
        exhaustive = MinimaxSearch(policy, prune=False).search(board, player, catalog, depth)

        self.assertEqual(pruned.move, exhaustive.move)
        self.assertEqual(pruned.score, exhaustive.score)
        self.assertEqual(pruned.root_scores, exhaustive.root_scores)
        self.assertLessEqual(pruned.stats.nodes, exhaustive.stats.nodes)
        self.assertEqual(exhaustive.stats.cutoffs, 0)
        return pruned

    def test_matches_exhaustive_search(self):
        board = board_from_rows(["R.....", "......", "......", "......", "......", ".....B"])
        catalog = validate_catalog([SINGLE, DOMINO_H, DOMINO_V])
        pruned = self.assert_same_decision(board, Player.RED, catalog, 3, DEFAULT_POLICY)

        oracle = [
            reference_minimax(board.apply(m.positions(), Player.RED), Player.RED, catalog, 2,
                              False, DEFAULT_POLICY)
            for m in LegalMoveGenerator().get_legal_moves(board, Player.RED, catalog)
        ]
        self.assertEqual(pruned.root_scores, oracle)

    def test_matches_exhaustive_on_random_states(self):
        catalog = validate_catalog([SINGLE, DOMINO_H, DOMINO_V])
        for seed in range(4):
            board, player = generate_random_valid_state(6, catalog, 4, seed=seed)
            self.assert_same_decision(board, player, catalog, 2, PLACEMENT_POLICY)


class TestDepthValidation(unittest.TestCase):

    def test_valid_range(self):
        self.assertEqual(validate_depth(1), 1)
        self.assertEqual(validate_depth(MAX_SEARCH_DEPTH), MAX_SEARCH_DEPTH)

    def test_rejects_out_of_range_and_non_integers(self):
        board = Board.empty(5)
        for depth in (0, -1, MAX_SEARCH_DEPTH + 1, 2.0, True, "2"):
            with self.assertRaises(ValueError):
                find_best_move(board, Player.RED, [SINGLE], depth=depth)


class TestMakeAiTurn(unittest.TestCase):

    def test_plays_best_move(self):
        board = board_from_rows(["R....", ".....", ".....", ".....", "....."])
        result = make_ai_turn(board, Player.RED, [SINGLE, DOMINO_H], depth=1)

        self.assertIsNone(result.winner)
        self.assertEqual(result.search.score, 14)
        self.assertEqual(owned_cells(result.board, Player.RED), [(0, 0), (1, 1), (1, 2)])
        self.assertEqual(owned_cells(board, Player.RED), [(0, 0)])

    def test_opening_move(self):
        result = make_ai_turn(Board.empty(5), Player.BLUE, [SINGLE])
        self.assertIsNone(result.winner)
        self.assertEqual(owned_cells(result.board, Player.BLUE), [(4, 4)])

    def test_no_moves_declares_opponent_winner(self):
        board = apply_move(Board.empty(5), Move.from_shape(0, 0, SINGLE), Player.RED)
        result = make_ai_turn(board, Player.BLUE, [SINGLE])
        self.assertEqual(result.board, board)
        self.assertIs(result.winner, Player.RED)


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_pruned_search_agrees_with_oracle(depth):
    board = board_from_rows(["R.....", "......", "......", "......", "......", ".....B"])
    catalog = validate_catalog([SINGLE, DOMINO_V])
    search = MinimaxSearch()
    for move in LegalMoveGenerator().get_legal_moves(board, Player.BLUE, catalog):
        child = board.apply(move.positions(), Player.BLUE)
        expected = reference_minimax(child, Player.BLUE, catalog, depth - 1, False, DEFAULT_POLICY)
        assert search.minimax(child, Player.BLUE, catalog, depth - 1, -INFINITY, INFINITY, False) == expected
