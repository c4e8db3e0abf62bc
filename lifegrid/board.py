# Finite, non-wrapping Game of Life board.

import random

import numpy as np


class BoardError(ValueError):
    pass


class NonRectangularBoardError(BoardError):
    pass


class CellOutOfBoundsError(BoardError, IndexError):
    pass


class Board:
    """ Immutable rectangular grid of cell states.
    Row r, column c is alive when board[r][c] is True.
    Cells are coerced to bool, so 0/1 boards are accepted as well.
    Rows of differing lengths raise NonRectangularBoardError.
    """

    def __init__(self, rows=()):
        cells = tuple(tuple(bool(v) for v in row) for row in rows)
        ncols = len(cells[0]) if cells else 0
        for r, row in enumerate(cells):
            if len(row) != ncols:
                raise NonRectangularBoardError(
                    'Non-rectangular board: row {} has {} cells, expected {}.'.format(
                        r, len(row), ncols))
        self._cells = cells
        self.nrows = len(cells)
        self.ncols = ncols

    @classmethod
    def from_rows(cls, rows):
        if isinstance(rows, cls):
            return rows
        return cls(rows)

    @classmethod
    def empty(cls):
        return cls(())

    @classmethod
    def from_string(cls, text, live='1'):
        """ Parse one row per line. Any char other than live is dead.
        Blank lines are ignored, e.g. '010\\n010\\n010' is a vertical blinker.
        """
        lines = [line.strip() for line in text.splitlines()]
        return cls([[ch == live for ch in line] for line in lines if line])

    @classmethod
    def from_array(cls, arr):
        arr = np.asarray(arr)
        if arr.ndim != 2:
            raise BoardError('Expected a 2D array, got shape {}.'.format(arr.shape))
        return cls(arr.astype(bool).tolist())

    @property
    def is_empty(self):
        return self.nrows == 0 or self.ncols == 0

    @property
    def shape(self):
        return (self.nrows, self.ncols)

    @property
    def population(self):
        return sum(sum(row) for row in self._cells)

    def cell(self, row, col):
        if not (0 <= row < self.nrows and 0 <= col < self.ncols):
            raise CellOutOfBoundsError(
                'Cell ({}, {}) is outside the {}x{} board.'.format(
                    row, col, self.nrows, self.ncols))
        return self._cells[row][col]

    def tolist(self):
        return [list(row) for row in self._cells]

    def to_array(self):
        return np.array(self._cells, dtype=bool).reshape(self.shape)

    def to_string(self, live='1', dead='0'):
        return '\n'.join(''.join(live if v else dead for v in row) for row in self._cells)

    def __len__(self):
        return self.nrows

    def __getitem__(self, row):
        return self._cells[row]

    def __iter__(self):
        return iter(self._cells)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.shape == other.shape and self._cells == other._cells

    def __hash__(self):
        return hash((self.shape, self._cells))

    def __repr__(self):
        return 'Board({}x{}, population={})'.format(self.nrows, self.ncols, self.population)


def random_board(nrows, ncols, density=0.3, seed=None):
    """ Each cell is alive with probability density. """
    if nrows < 0 or ncols < 0:
        raise BoardError('Board dimensions must not be negative: {}x{}.'.format(nrows, ncols))
    if not 0 <= density <= 1:
        raise BoardError('Density must be within [0, 1], got {}.'.format(density))
    rng = random.Random(seed)
    return Board([[rng.random() < density for _ in range(ncols)] for _ in range(nrows)])
