# Run a random board on a finite grid until it settles or the iterations run out.

import logging

from lifegrid.board import random_board
from lifegrid.logutil import Stopwatch, init_game_log
from lifegrid.runner import run


# =====================================================================================================================
# USER SETTINGS

BOARD_SIZE = (50, 40)  # rows, columns
DENSITY = 0.3  # probability of each cell starting alive
SEED = None  # set an int to replay the same board
ITERATIONS = 500
WORKERS = None  # threads splitting the rows of each generation
LOG_DIR = None  # defaults to lifegrid.logutil.output_root


if __name__ == "__main__":
    init_game_log('Simulate game of life', top_dir=LOG_DIR)
    board = random_board(BOARD_SIZE[0], BOARD_SIZE[1], density=DENSITY, seed=SEED)
    logging.info('Start population {} on a {}x{} board.'.format(board.population, *board.shape))
    stopwatch = Stopwatch()
    result = run(board, iterations=ITERATIONS, workers=WORKERS)
    if result.is_still:
        outcome = 'still'
    elif result.period:
        outcome = 'oscillating with period {}'.format(result.period)
    else:
        outcome = 'still changing'
    msg = 'After {} generations the board is {}, population {}. Took {}.'.format(
        result.generations, outcome, result.board.population, stopwatch.lap())
    logging.info(msg)
    print(msg)
    print(result.board.to_string(live='#', dead='.'))
