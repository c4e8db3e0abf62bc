import unittest

import numpy as np

from lifegrid.board import Board, BoardError, random_board
from lifegrid.forward_prop import FixedBoundaryForwardPropFn
from lifegrid.generation import next_generation


class TestFixedBoundaryForwardPropFn(unittest.TestCase):

    def test_call_unbatched(self):
        layer = FixedBoundaryForwardPropFn()
        test_input = np.array(
            [[0, 1, 0, 0, 0, 0, 0],
             [0, 0, 1, 0, 0, 0, 0],
             [1, 1, 1, 0, 0, 0, 0],
             [0, 0, 0, 0, 0, 0, 0],
             [0, 0, 0, 0, 1, 1, 0],
             [0, 0, 0, 0, 1, 1, 0],
             [0, 0, 0, 0, 0, 0, 0]]).astype(bool)
        test_output = layer(test_input)
        a = 1
        expected_output = np.array(
            [[0, 0, 0, 0, 0, 0, 0],
             [a, 0, a, 0, 0, 0, 0],
             [0, a, a, 0, 0, 0, 0],
             [0, a, 0, 0, 0, 0, 0],
             [0, 0, 0, 0, a, a, 0],
             [0, 0, 0, 0, a, a, 0],
             [0, 0, 0, 0, 0, 0, 0]])
        self.assertTrue(np.array_equal(expected_output, test_output))

    def test_edge_blinker(self):
        # With np.roll the blinker would also spawn (1, 0) across the edge.
        layer = FixedBoundaryForwardPropFn()
        test_input = Board.from_string('0001\n'
                                       '0001\n'
                                       '0001\n'
                                       '0000').to_array()
        expected_output = Board.from_string('0000\n'
                                            '0011\n'
                                            '0000\n'
                                            '0000').to_array()
        self.assertTrue(np.array_equal(expected_output, layer(test_input)))

    def test_call_batched(self):
        layer = FixedBoundaryForwardPropFn()
        boards = [random_board(9, 11, density=0.4, seed=j) for j in range(6)]
        test_input = np.array([b.to_array() for b in boards]).reshape((2, 3, 9, 11))
        test_output = layer(test_input)
        self.assertEqual(test_input.shape, test_output.shape)
        for j, board in enumerate(boards):
            expected_output = next_generation(board).to_array()
            self.assertTrue(np.array_equal(expected_output, test_output[j // 3, j % 3]))

    def test_matches_next_generation(self):
        layer = FixedBoundaryForwardPropFn(delta=4)
        for j in range(20):
            board = random_board(1 + j % 7, 1 + j % 5 * 3, density=0.45, seed=100 + j)
            expected = board
            for _ in range(4):
                expected = next_generation(expected)
            self.assertTrue(np.array_equal(expected.to_array(), layer(board.to_array())))

    def test_input_not_mutated(self):
        layer = FixedBoundaryForwardPropFn()
        test_input = random_board(8, 8, seed=9).to_array()
        before = test_input.copy()
        layer(test_input, delta=3)
        self.assertTrue(np.array_equal(before, test_input))

    def test_delta(self):
        layer = FixedBoundaryForwardPropFn()
        blinker = Board.from_string('000\n111\n000').to_array()
        self.assertTrue(np.array_equal(blinker, layer(blinker, delta=2)))
        self.assertTrue(np.array_equal(blinker, layer(blinker, delta=0)))
        with self.assertRaises(ValueError):
            layer(blinker, delta=-1)
        with self.assertRaises(ValueError):
            FixedBoundaryForwardPropFn(delta=-1)

    def test_degenerate_inputs(self):
        layer = FixedBoundaryForwardPropFn()
        self.assertEqual((0, 0), layer(np.zeros((0, 0))).shape)
        self.assertEqual((3, 0, 4), layer(np.zeros((3, 0, 4))).shape)
        with self.assertRaises(BoardError):
            layer(np.zeros(5))


if __name__ == "__main__":
    unittest.main()
