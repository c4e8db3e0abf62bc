# Drive a board through successive generations.

import logging
from collections import deque, namedtuple

from lifegrid.board import Board
from lifegrid.generation import next_generation


RunResult = namedtuple('RunResult', ['board', 'generations', 'is_still', 'period'])


def run(board, iterations=1, workers=None, memory=None):
    """ Advance board by up to iterations generations.
    Stop early once a state repeats. A board equal to its predecessor
    is still (period 1); any other repeat is an oscillator whose period
    is the number of generations between the two occurrences.
    Every board of the run is kept for the repeat check, so memory grows
    with iterations times board size. Pass memory=N to keep only the last
    N boards; cycles longer than N then go unnoticed.
    Return a RunResult with the last computed board.
    """
    if iterations < 0:
        raise ValueError('iterations must not be negative, got {}.'.format(iterations))
    if memory is not None and memory < 1:
        raise ValueError('memory must be at least 1, got {}.'.format(memory))
    curr = Board.from_rows(board)
    # Maps each remembered board to the generation it last appeared in.
    seen = {curr: 0}
    order = deque([curr])
    for j in range(1, iterations + 1):
        curr = next_generation(curr, workers=workers)
        logging.debug('Generation {}: population {}.'.format(j, curr.population))
        if curr in seen:
            period = j - seen[curr]
            is_still = period == 1
            logging.info('Board repeats after {} generations, {}.'.format(
                j, 'still' if is_still else 'period {}'.format(period)))
            return RunResult(curr, j, is_still, period)
        seen[curr] = j
        order.append(curr)
        if memory is not None and len(order) > memory:
            del seen[order.popleft()]
    return RunResult(curr, iterations, False, None)
