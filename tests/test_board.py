import unittest

import numpy as np

from falling_blocks.game import Board, PieceKind, empty_piece, make_piece


class TestBoard(unittest.TestCase):

    def setUp(self):
        self.board = Board(rows=6, columns=4)
        self.o_piece = make_piece(PieceKind.O)  # 2x2, pivot (1, 1)

    def test_board_initialization(self):
        board = Board()
        self.assertEqual((board.rows, board.columns), (20, 11))
        self.assertTrue(np.all(board.as_array() == 0))

    def test_place_writes_kind_label(self):
        self.assertTrue(self.board.place(self.o_piece, 1, 1))
        for row, column in [(0, 0), (0, 1), (1, 0), (1, 1)]:
            self.assertEqual(self.board.cell(row, column), PieceKind.O)
        self.assertTrue(self.board.is_empty(2, 2))
        self.assertEqual(self.board.filled_count(), 4)

    def test_pivot_above_body_origin_is_rejected(self):
        # Top-left would be (-1, -1)
        self.assertFalse(self.board.can_place(self.o_piece, 0, 0))
        self.assertFalse(self.board.can_place(self.o_piece, 1, 0))

    def test_out_of_bounds_is_rejected(self):
        self.assertFalse(self.board.can_place(self.o_piece, 6, 1))
        self.assertFalse(self.board.can_place(self.o_piece, 1, 4))
        self.assertTrue(self.board.can_place(self.o_piece, 5, 3))

    def test_bottom_right_corner_is_checked(self):
        i_piece = make_piece(PieceKind.I)  # 4x1, pivot (1, 0)
        # Pivot on board but the body would hang below the last row
        self.assertFalse(self.board.can_place(i_piece, 4, 0))
        self.assertTrue(self.board.can_place(i_piece, 3, 0))

    def test_overlap_is_rejected_and_board_untouched(self):
        self.assertTrue(self.board.place(self.o_piece, 1, 1))
        before = self.board.copy()
        self.assertFalse(self.board.place(make_piece(PieceKind.T), 1, 1))
        self.assertEqual(self.board, before)

    def test_empty_piece_cannot_be_placed(self):
        self.assertFalse(self.board.place(empty_piece(), 1, 1))
        self.assertEqual(self.board.filled_count(), 0)

    def test_remove_restores_empty_cells(self):
        self.board.place(self.o_piece, 3, 2)
        self.assertTrue(self.board.remove(self.o_piece, 3, 2))
        self.assertEqual(self.board.filled_count(), 0)

    def test_remove_requires_matching_kind(self):
        self.board.cells[0:2, 0:2] = int(PieceKind.T)
        self.assertFalse(self.board.can_remove(self.o_piece, 1, 1))
        self.assertFalse(self.board.remove(self.o_piece, 1, 1))
        self.assertEqual(self.board.filled_count(), 4)

    def test_remove_from_empty_area_fails(self):
        self.assertFalse(self.board.remove(self.o_piece, 1, 1))

    def test_clear_completed_rows_shifts_down(self):
        board = Board(rows=4, columns=3)
        board.cells[1, :] = int(PieceKind.I)
        board.cells[2, 0] = int(PieceKind.T)
        board.cells[3, :] = int(PieceKind.L)

        self.assertEqual(board.clear_completed_rows(), 2)
        self.assertTrue(np.all(board.cells[0:3] == 0))
        self.assertEqual(board.cell(3, 0), PieceKind.T)
        self.assertTrue(board.is_empty(3, 1))
        self.assertEqual(board.as_array().shape, (4, 3))

    def test_clear_without_full_rows(self):
        self.board.place(self.o_piece, 5, 1)
        before = self.board.copy()
        self.assertEqual(self.board.clear_completed_rows(), 0)
        self.assertEqual(self.board, before)

    def test_copy_is_independent(self):
        clone = self.board.copy()
        clone.place(self.o_piece, 1, 1)
        self.assertEqual(self.board.filled_count(), 0)


if __name__ == "__main__":
    unittest.main()
