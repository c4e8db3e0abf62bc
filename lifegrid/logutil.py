# Simple logging util.

import logging
import pathlib
import time


output_root = './lifegrid_data/'

def init_game_log(title, lvl = logging.INFO, top_dir = None):
    # top_dir replaces output_root for the rest of the process
    global output_root
    if top_dir:
        output_root = str(top_dir).rstrip('/') + '/'
    pathlib.Path(output_root).mkdir(parents=True, exist_ok=True)
    log_path = output_root + 'lifegrid.log'
    logging.basicConfig(
        filename = log_path,
        level = lvl,
        format = '%(asctime)s | %(levelname)s | %(message)s')
    msg = 'Game of life [{}] started logging at {}.'.format(title, log_path)
    logging.critical(msg)
    print(msg)
    return log_path


def format_elapsed(seconds):
    (t_min, t_sec) = divmod(round(seconds), 60)
    (t_hour, t_min) = divmod(t_min, 60)
    return '{}:{:02d}:{:02d}'.format(t_hour, t_min, t_sec)


class Stopwatch:
    """ Elapsed time between successive laps, as h:mm:ss. """

    def __init__(self):
        self._prev_t = time.time()

    def lap(self):
        t = time.time()
        elapsed = t - self._prev_t
        self._prev_t = t
        return format_elapsed(elapsed)
