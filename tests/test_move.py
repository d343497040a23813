"""
Tests for directional moves.
"""

from unittest import TestCase, main

import numpy as np

from tilemerge.core.gameboard import board_from_values, board_values, can_move
from tilemerge.core.gamemove import Direction, move, slide_and_merge
from tilemerge.core.tile import TileFactory


class TestGameMove(TestCase):
    def setUp(self):
        self.factory = TileFactory(prefix='test')

    def board(self, values):
        return board_from_values(values, factory=self.factory)

    def test_slide_left(self):
        """Tiles slide left without merging."""
        board = self.board([[2, 0, 4, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        result = move(board, Direction.LEFT, factory=self.factory)

        self.assertTrue(result.moved)
        self.assertEqual(result.score_gain, 0)
        np.testing.assert_array_equal(board_values(result.board)[0], [2, 4, 0, 0])

    def test_merge_left(self):
        """Two equal tiles merge when sliding left."""
        board = self.board([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        result = move(board, 'left', factory=self.factory)

        self.assertTrue(result.moved)
        self.assertEqual(result.score_gain, 4)
        np.testing.assert_array_equal(board_values(result.board)[0], [4, 0, 0, 0])

    def test_merge_right(self):
        """Merges happen on the side the tiles slide to."""
        board = self.board([[2, 2, 4, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        result = move(board, 'right', factory=self.factory)

        self.assertEqual(result.score_gain, 4)
        np.testing.assert_array_equal(board_values(result.board)[0], [0, 0, 4, 4])

    def test_slide_up(self):
        """A column slides up."""
        board = self.board([[2, 0, 0, 0], [4, 0, 0, 0], [0, 0, 0, 0], [8, 0, 0, 0]])
        result = move(board, 'up', factory=self.factory)

        self.assertTrue(result.moved)
        np.testing.assert_array_equal(board_values(result.board)[:, 0], [2, 4, 8, 0])

    def test_merge_down(self):
        """A column merges toward the bottom."""
        board = self.board([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [4, 0, 0, 0]])
        result = move(board, 'down', factory=self.factory)

        self.assertEqual(result.score_gain, 4)
        np.testing.assert_array_equal(board_values(result.board)[:, 0], [0, 0, 4, 4])

    def test_whole_board(self):
        """Every row is processed and scores add up."""
        board = self.board([[2, 2, 4, 4], [0, 2, 2, 4], [2, 0, 0, 2], [2, 2, 2, 2]])
        result = move(board, 'left', factory=self.factory)
        expected = np.array([[4, 8, 0, 0], [4, 4, 0, 0], [4, 0, 0, 0], [4, 4, 0, 0]])

        self.assertEqual(result.score_gain, 28)
        np.testing.assert_array_equal(board_values(result.board), expected)

    def test_no_move(self):
        """A move that changes nothing is reported as such."""
        board = self.board([[2, 0, 0, 0], [4, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        result = move(board, 'left', factory=self.factory)

        self.assertFalse(result.moved)
        self.assertEqual(result.score_gain, 0)
        np.testing.assert_array_equal(board_values(result.board), board_values(board))

    def test_blocked_board(self):
        """A full board without equal neighbours cannot move in any direction."""
        board = self.board([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])

        self.assertFalse(can_move(board))
        for direction in Direction:
            self.assertFalse(move(board, direction, factory=self.factory).moved)

    def test_fresh_board(self):
        """The resulting board never aliases the input, even without movement."""
        board = self.board([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        result = move(board, 'left', factory=self.factory)

        self.assertIsNot(result.board, board)
        for new_row, old_row in zip(result.board, board):
            self.assertIsNot(new_row, old_row)
        self.assertIsNot(result.board[0][0], board[0][0])
        self.assertEqual(result.board[0][0].id, board[0][0].id)

    def test_input_untouched(self):
        """The input board is never modified."""
        board = self.board([[2, 2, 0, 0], [0, 4, 0, 4], [0, 0, 0, 0], [8, 0, 8, 0]])
        before = board_values(board)
        for direction in Direction:
            move(board, direction, factory=self.factory)

        np.testing.assert_array_equal(board_values(board), before)

    def test_unique_ids_after_moves(self):
        """Consecutive moves with separate factories keep every id on the board unique."""
        board = board_from_values([[2, 2, 4, 4], [2, 0, 2, 0], [4, 4, 0, 8], [8, 8, 8, 8]], factory=TileFactory())
        for direction in ('left', 'right', 'up', 'down', 'left'):
            board = move(board, direction, factory=TileFactory()).board
            ids = [tile.id for row in board for tile in row if tile is not None]

            self.assertEqual(len(ids), len(set(ids)))

    def test_accepts_lists(self):
        """A board given as nested lists is accepted."""
        board = [list(row) for row in self.board([[0, 2], [0, 2]])]
        result = move(board, 'up', factory=self.factory)

        np.testing.assert_array_equal(board_values(result.board), [[0, 4], [0, 0]])
        self.assertIsInstance(result.board, tuple)

    def test_unknown_direction(self):
        """An unknown direction is rejected."""
        board = self.board([[2, 0], [0, 0]])
        with self.assertRaises(ValueError):
            move(board, 'diagonal')

    def test_slide_and_merge(self):
        """Leftward slide of an already oriented board."""
        board = self.board([[0, 2, 0, 2], [4, 4, 4, 0], [0, 0, 0, 0], [2, 4, 8, 16]])
        score, result = slide_and_merge(board, factory=self.factory)
        expected = np.array([[4, 0, 0, 0], [8, 4, 0, 0], [0, 0, 0, 0], [2, 4, 8, 16]])

        self.assertEqual(score, 12)
        np.testing.assert_array_equal(board_values(result), expected)


if __name__ == '__main__':
    main()
