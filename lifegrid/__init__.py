from lifegrid.board import Board, BoardError, CellOutOfBoundsError, NonRectangularBoardError, random_board
from lifegrid.generation import count_live_neighbors, next_cell_state, next_generation
