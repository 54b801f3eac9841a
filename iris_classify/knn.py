import logging
import math
from collections import Counter

import numpy as np
from sklearn.neighbors import KDTree

from . import config
from .errors import DatasetError, EmptyIndexError, NotFittedError, TooManyNeighborsError

logger = logging.getLogger(__name__)


def euclidean_distance(row1, row2):
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(row1, row2)))


class _NeighborIndex:
    """Common validation for the k-nearest indexes."""

    def __init__(self, records):
        records = np.asarray(records, dtype=float)
        if records.ndim != 2:
            raise DatasetError(f"index records must be a 2D array, got {records.ndim}D array")
        if records.shape[0] == 0:
            raise EmptyIndexError()
        self.records = records

    def nsamples(self):
        return self.records.shape[0]

    def nfeatures(self):
        return self.records.shape[1]

    def _check_query(self, point, k):
        point = np.asarray(point, dtype=float)
        if point.shape != (self.nfeatures(),):
            raise DatasetError(
                f"query point must have {self.nfeatures()} features, got shape {point.shape}"
            )
        if k < 1:
            raise ValueError(f"k must be a positive integer, got {k}")
        if k > self.nsamples():
            raise TooManyNeighborsError(
                f"k ({k}) cannot exceed the number of indexed points ({self.nsamples()})"
            )
        return point

    def k_nearest(self, point, k):
        raise NotImplementedError


class LinearSearch(_NeighborIndex):
    """Brute-force scan over every indexed row.

    Equidistant rows come back in row order.
    """

    def k_nearest(self, point, k):
        point = self._check_query(point, k)
        distances = [(euclidean_distance(row, point), i) for i, row in enumerate(self.records)]
        distances.sort(key=lambda tup: tup[0])
        return distances[:k]


class KdTreeSearch(_NeighborIndex):
    """k-d tree index; picks the same neighbors as ``LinearSearch`` up to tie order."""

    def __init__(self, records, leaf_size=config.KDTREE_LEAF_SIZE):
        super().__init__(records)
        self.tree = KDTree(self.records, leaf_size=leaf_size, metric="euclidean")

    def k_nearest(self, point, k):
        point = self._check_query(point, k)
        dist, ind = self.tree.query(point.reshape(1, -1), k=k)
        return [(float(d), int(i)) for d, i in zip(dist[0], ind[0])]


_INDEXES = {
    "linear": LinearSearch,
    "kdtree": KdTreeSearch,
}


def build_index(records, algorithm=config.KNN_ALGORITHM):
    try:
        index_cls = _INDEXES[algorithm]
    except KeyError:
        raise ValueError(
            f"unknown neighbor index {algorithm!r}, expected one of {sorted(_INDEXES)}"
        ) from None
    return index_cls(records)


def majority_vote(neighbors, train_targets):
    """Most frequent training label among ``neighbors``.

    ``neighbors`` is the distance-sorted output of ``k_nearest``. When several
    labels share the top count, the label of the nearest of those neighbors
    wins.
    """
    if not neighbors:
        raise ValueError("cannot vote over an empty neighbor set")
    labels = [int(train_targets[idx]) for _, idx in neighbors]
    votes = Counter(labels)
    best = max(votes.values())
    for label in labels:
        if votes[label] == best:
            return label


def predict_classification(index, train_targets, records, num_neighbors):
    predictions = []
    for row in np.asarray(records, dtype=float):
        neighbors = index.k_nearest(row, num_neighbors)
        logger.debug("Neighbors of %s: %s", row, neighbors)
        predictions.append(majority_vote(neighbors, train_targets))
    return np.array(predictions, dtype=int)


class KNNClassifier:
    """k-nearest-neighbor majority-vote classifier."""

    def __init__(self, k=config.NUM_NEIGHBORS, algorithm=config.KNN_ALGORITHM):
        if k < 1:
            raise ValueError(f"k must be a positive integer, got {k}")
        self.k = k
        self.algorithm = algorithm
        self.index = None
        self.train_targets = None

    def fit(self, train):
        self.index = build_index(train.records, self.algorithm)
        self.train_targets = train.targets
        logger.info(
            "Built %s neighbor index over %d training samples", self.algorithm, self.index.nsamples()
        )
        return self

    def predict(self, records):
        if self.index is None:
            raise NotFittedError()
        return predict_classification(self.index, self.train_targets, records, self.k)
