import logging
import math
import random

import numpy as np
from sklearn import datasets

from .errors import DatasetError

logger = logging.getLogger(__name__)


def _integer_targets(targets):
    targets = np.asarray(targets)
    if targets.dtype.kind == "f" and np.all(np.isfinite(targets)) and np.all(targets == np.round(targets)):
        targets = targets.astype(int)
    if targets.dtype.kind not in "iub":
        raise DatasetError(f"targets must be integer labels, got {targets.dtype} values")
    return np.array(targets, dtype=int)


class Dataset:
    """Feature rows with one integer label each.

    ``records`` has shape ``(n_samples, n_features)`` and ``targets`` shape
    ``(n_samples,)``. Both are copied and frozen on construction.
    """

    def __init__(self, records, targets, feature_names=None, target_names=None):
        records = np.array(records, dtype=float)
        targets = _integer_targets(targets)
        if records.ndim != 2:
            raise DatasetError(f"records must be a 2D array, got {records.ndim}D array")
        if targets.ndim != 1:
            raise DatasetError(f"targets must be a 1D array, got {targets.ndim}D array")
        if records.shape[0] != targets.shape[0]:
            raise DatasetError(
                f"records and targets must have the same number of samples. "
                f"Got records: {records.shape[0]}, targets: {targets.shape[0]}"
            )
        records.setflags(write=False)
        targets.setflags(write=False)
        self.records = records
        self.targets = targets
        self.feature_names = list(feature_names) if feature_names is not None else None
        self.target_names = list(target_names) if target_names is not None else None

    def nsamples(self):
        return self.records.shape[0]

    def nfeatures(self):
        return self.records.shape[1]

    def labels(self):
        return sorted(int(label) for label in np.unique(self.targets))

    def take(self, rows):
        """Return a new dataset holding only ``rows``, in the given order."""
        rows = np.asarray(rows, dtype=int)
        return Dataset(
            self.records[rows],
            self.targets[rows],
            feature_names=self.feature_names,
            target_names=self.target_names,
        )


def load_iris():
    """The bundled 150-sample, 4-feature, 3-class iris data."""
    bunch = datasets.load_iris()
    dataset = Dataset(
        bunch.data,
        bunch.target,
        feature_names=bunch.feature_names,
        target_names=bunch.target_names,
    )
    logger.info("Loaded iris dataset: %d samples, %d features", dataset.nsamples(), dataset.nfeatures())
    return dataset


def train_size_for(n, ratio):
    # ceil, with float noise such as 150 * 0.8 == 120.00000000000001 trimmed first
    return math.ceil(round(ratio * n, 9))


def split_with_ratio(dataset, ratio, seed=None):
    """Partition ``dataset`` into ``(train, test)``.

    The training part gets ``ceil(ratio * n)`` rows. Without a seed the
    original row order is kept and the first rows go to training; with a
    seed the rows are shuffled first.
    """
    if not 0 < ratio <= 1:
        raise DatasetError(f"split ratio must be in (0, 1], got {ratio}")
    n = dataset.nsamples()
    order = list(range(n))
    if seed is not None:
        random.Random(seed).shuffle(order)
    train_size = train_size_for(n, ratio)
    train = dataset.take(order[:train_size])
    test = dataset.take(order[train_size:])
    logger.info("Split %d samples into %d training / %d testing", n, train.nsamples(), test.nsamples())
    return train, test
