
import numpy as np

from lifegrid.board import BoardError
from lifegrid.generation import MOORE_OFFSETS


class FixedBoundaryForwardPropFn:

    def __init__(self, delta=1):
        if delta < 0:
            raise ValueError('delta must not be negative, got {}.'.format(delta))
        self.delta = delta

    def __call__(self, inputs, delta=None):
        # inputs is an array of at least 2D, of shape
        # (..., board rows, board columns), i.e. a single board or a batch.
        # outputs is a bool array of the same shape.
        # Unlike np.roll, padding with dead cells keeps the edges from wrapping.
        if delta is None:
            delta = self.delta
        if delta < 0:
            raise ValueError('delta must not be negative, got {}.'.format(delta))
        outputs = np.asarray(inputs)
        if outputs.ndim < 2:
            raise BoardError('Expected at least a 2D array, got shape {}.'.format(outputs.shape))
        outputs = outputs.astype(bool)
        if outputs.shape[-2] == 0 or outputs.shape[-1] == 0:
            return outputs
        for _ in range(delta):
            outputs = self._one_delta(outputs)
        return outputs

    def _one_delta(self, inputs):
        nrows, ncols = inputs.shape[-2:]
        pad_width = [(0, 0)] * (inputs.ndim - 2) + [(1, 1), (1, 1)]
        padded = np.pad(inputs, pad_width, mode='constant', constant_values=False)
        neighbors = [padded[..., 1 + i:1 + i + nrows, 1 + j:1 + j + ncols] for i, j in MOORE_OFFSETS]
        live_neighbor_counts = np.count_nonzero(neighbors, axis=0)
        two_live_neighbors = np.equal(live_neighbor_counts, 2)
        three_live_neighbors = np.equal(live_neighbor_counts, 3)
        return np.logical_or(three_live_neighbors, np.logical_and(two_live_neighbors, inputs))
