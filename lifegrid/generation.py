# Conway's Game of Life step on a finite board.
# Cells beyond the edge are permanently dead; the board never wraps.

import logging
from concurrent.futures import ThreadPoolExecutor

from lifegrid.board import Board, CellOutOfBoundsError


MOORE_OFFSETS = tuple((i, j) for i in (-1, 0, 1) for j in (-1, 0, 1) if (i != 0 or j != 0))

_LIFE_MIN = 2
_LIFE_MAX = 3
_LIFE_REV = 3


def count_live_neighbors(board, row, col):
    """ Number of live cells among the 8 neighbors of (row, col).
    Neighbors outside the board count as dead.
    Raise CellOutOfBoundsError if (row, col) itself is not on the board.
    """
    board = Board.from_rows(board)
    nrows, ncols = board.shape
    if not (0 <= row < nrows and 0 <= col < ncols):
        raise CellOutOfBoundsError(
            'Cell ({}, {}) is outside the {}x{} board.'.format(row, col, nrows, ncols))
    count = 0
    for dr, dc in MOORE_OFFSETS:
        r = row + dr
        c = col + dc
        if 0 <= r < nrows and 0 <= c < ncols and board[r][c]:
            count += 1
    return count


def next_cell_state(board, row, col):
    """ State of (row, col) in the next generation of board. """
    board = Board.from_rows(board)
    neighbors = count_live_neighbors(board, row, col)
    if board[row][col]:
        return _LIFE_MIN <= neighbors <= _LIFE_MAX
    return neighbors == _LIFE_REV


def _next_rows(board, rows):
    return [[next_cell_state(board, r, c) for c in range(board.ncols)] for r in rows]


def next_generation(board, workers=None):
    """ Compute the next generation of board.
    The input is left untouched and a new Board of the same shape is returned.
    An empty board (no rows, or a first row without cells) yields an empty board,
    even if later rows are not empty.
    With workers > 1 the rows are split across a thread pool;
    the result does not depend on it.
    """
    if workers is not None and workers < 1:
        raise ValueError('workers must be at least 1, got {}.'.format(workers))
    # A zero-width first row means empty, whatever the later rows hold.
    if len(board) == 0 or len(board[0]) == 0:
        logging.warning('next_generation received an empty board.')
        return Board.empty()
    board = Board.from_rows(board)

    if workers is None or workers == 1 or board.nrows == 1:
        return Board(_next_rows(board, range(board.nrows)))

    nchunks = min(workers, board.nrows)
    chunks = [range(j, board.nrows, nchunks) for j in range(nchunks)]
    new_rows = [None] * board.nrows
    with ThreadPoolExecutor(max_workers=nchunks) as executor:
        for chunk, rows in zip(chunks, executor.map(lambda ch: _next_rows(board, ch), chunks)):
            for r, row in zip(chunk, rows):
                new_rows[r] = row
    return Board(new_rows)
